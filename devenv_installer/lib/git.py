from __future__ import annotations

import logging
from typing import Optional

from .command import run_cmd

logger = logging.getLogger(__name__)


def git_clone(repo: str, dest: str, *, depth: Optional[int] = None, dry_run: bool = False) -> None:
    argv = ["git", "clone"]
    if depth:
        argv.append(f"--depth={depth}")
    argv += [repo, dest]
    run_cmd(argv, capture=False, dry_run=dry_run)
