from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable

from .config import SetupConfig
from .lib.env import HomePaths, resolve_paths
from .lib.pkg import needs_sudo
from .prompt import ask_yes_no


@dataclass(frozen=True)
class SetupCtx:
    cfg: SetupConfig
    paths: HomePaths = field(default_factory=resolve_paths)
    dry_run: bool = False
    confirm: Callable[[str], bool] = ask_yes_no

    @property
    def sudo(self) -> bool:
        return needs_sudo(self.cfg.apt_sudo)

    @property
    def font_dir(self) -> Path:
        return self.paths.fonts_dir / self.cfg.font_name

    @property
    def font_archive(self) -> Path:
        return Path(self.cfg.tmp_dir) / f"{self.cfg.font_name}.zip"
