from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional


@dataclass(frozen=True)
class HomePaths:
    home: Path
    zsh_custom: Path

    @property
    def oh_my_zsh(self) -> Path:
        return self.home / ".oh-my-zsh"

    @property
    def powerlevel10k(self) -> Path:
        return self.zsh_custom / "themes" / "powerlevel10k"

    @property
    def zshrc(self) -> Path:
        return self.home / ".zshrc"

    @property
    def fonts_dir(self) -> Path:
        return self.home / ".local" / "share" / "fonts"

    @property
    def config_home(self) -> Path:
        return self.home / ".config"

    @property
    def nvim_config(self) -> Path:
        return self.config_home / "nvim"


def resolve_paths(environ: Optional[Mapping[str, str]] = None) -> HomePaths:
    """Resolve home-relative paths once per run.

    ZSH_CUSTOM follows shell `${ZSH_CUSTOM:-...}` semantics: empty means unset.
    """

    env = os.environ if environ is None else environ
    home = Path(env.get("HOME") or Path.home())
    zsh_custom = env.get("ZSH_CUSTOM") or str(home / ".oh-my-zsh" / "custom")
    return HomePaths(home=home, zsh_custom=Path(zsh_custom).expanduser())
