from __future__ import annotations

import os
import tempfile
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

from .errors import ConfigError

DEFAULT_PACKAGES = ["man", "neovim", "wget", "python3", "zsh", "git", "gitui", "mc", "curl", "unzip"]
DEFAULT_OH_MY_ZSH_INSTALL_URL = "https://raw.githubusercontent.com/ohmyzsh/ohmyzsh/master/tools/install.sh"
DEFAULT_POWERLEVEL10K_REPO = "https://github.com/romkatv/powerlevel10k.git"
DEFAULT_ZSH_THEME = "powerlevel10k/powerlevel10k"
DEFAULT_FONT_URL = "https://github.com/ryanoasis/nerd-fonts/releases/download/v3.0.2/RobotoMono.zip"
DEFAULT_LAZYVIM_REPO = "https://github.com/LazyVim/starter"

CONFIG_ENV_VAR = "DEVENV_INSTALLER_CONFIG"


def default_config_path(home: Optional[Path] = None) -> Path:
    return (home or Path.home()) / ".config" / "devenv-installer" / "config.yaml"


@dataclass(frozen=True)
class SetupConfig:
    raw: Dict[str, Any] = field(default_factory=dict)

    def _section(self, name: str) -> Mapping[str, Any]:
        sec = self.raw.get(name) or {}
        if not isinstance(sec, dict):
            raise ConfigError(f"config: '{name}' must be a mapping")
        return sec

    @property
    def packages(self) -> List[str]:
        pkgs = self.raw.get("packages")
        if pkgs is None:
            return list(DEFAULT_PACKAGES)
        if not isinstance(pkgs, list):
            raise ConfigError("config: 'packages' must be a list")
        return [str(p).strip() for p in pkgs if str(p).strip()]

    @property
    def apt_sudo(self) -> Any:
        return self._section("apt").get("sudo", "auto")

    @property
    def oh_my_zsh_install_url(self) -> str:
        return str(self._section("oh_my_zsh").get("install_url") or DEFAULT_OH_MY_ZSH_INSTALL_URL)

    @property
    def powerlevel10k_repo(self) -> str:
        return str(self._section("powerlevel10k").get("repo") or DEFAULT_POWERLEVEL10K_REPO)

    @property
    def zsh_theme(self) -> str:
        return str(self._section("powerlevel10k").get("zsh_theme") or DEFAULT_ZSH_THEME)

    @property
    def font_url(self) -> str:
        return str(self._section("fonts").get("url") or DEFAULT_FONT_URL)

    @property
    def font_name(self) -> str:
        # RobotoMono.zip -> RobotoMono
        name = self._section("fonts").get("name")
        if name:
            return str(name)
        return Path(self.font_url.rsplit("/", 1)[-1]).stem

    @property
    def lazyvim_repo(self) -> str:
        return str(self._section("lazyvim").get("repo") or DEFAULT_LAZYVIM_REPO)

    @property
    def tmp_dir(self) -> str:
        return str(self._section("paths").get("tmp_dir") or tempfile.gettempdir())


def load_setup_config(
    path: Optional[str] = None,
    *,
    environ: Optional[Mapping[str, str]] = None,
    home: Optional[Path] = None,
) -> SetupConfig:
    """Load the optional YAML config.

    Lookup order: explicit path, $DEVENV_INSTALLER_CONFIG, ~/.config/devenv-installer/config.yaml.
    An explicitly named file must exist; the default location is optional.
    """

    env = os.environ if environ is None else environ
    explicit = path or env.get(CONFIG_ENV_VAR)
    p = Path(explicit) if explicit else default_config_path(home)

    if not p.exists():
        if explicit:
            raise ConfigError(f"Config file not found: {p}")
        return SetupConfig()

    if p.suffix.lower() not in {".yaml", ".yml"}:
        raise ConfigError(f"Config file must be YAML: {p}")

    try:
        import yaml  # type: ignore
    except Exception as e:
        raise RuntimeError("PyYAML is required to read the config file") from e

    try:
        raw = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
    except OSError as e:
        raise ConfigError(f"Cannot read config file {p}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {p}: {e}") from e
    if not isinstance(raw, dict):
        raise ConfigError(f"{p} must contain a mapping/object")

    return SetupConfig(raw=raw)
