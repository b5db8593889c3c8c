from __future__ import annotations

import logging
import os
from typing import Sequence

from .command import run_cmd

logger = logging.getLogger(__name__)


def needs_sudo(policy: object = "auto") -> bool:
    """Resolve the apt.sudo policy: True/False, or "auto" (sudo unless already root)."""
    if isinstance(policy, bool):
        return policy
    if str(policy).strip().lower() in {"false", "no", "off", "never"}:
        return False
    if str(policy).strip().lower() in {"true", "yes", "on", "always"}:
        return True
    return os.geteuid() != 0


def _apt(args: Sequence[str], *, sudo: bool, dry_run: bool) -> None:
    argv = ["apt", *args]
    if sudo:
        argv = ["sudo", *argv]
    run_cmd(argv, capture=False, dry_run=dry_run)


def apt_update(*, sudo: bool = True, dry_run: bool = False) -> None:
    _apt(["update", "-y"], sudo=sudo, dry_run=dry_run)


def apt_upgrade(*, sudo: bool = True, dry_run: bool = False) -> None:
    _apt(["upgrade", "-y"], sudo=sudo, dry_run=dry_run)


def apt_install(packages: Sequence[str], *, sudo: bool = True, dry_run: bool = False) -> None:
    if not packages:
        return
    _apt(["install", "-y", *packages], sudo=sudo, dry_run=dry_run)
