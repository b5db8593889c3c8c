from __future__ import annotations

import logging
from typing import Sequence

from .command import run_cmd

logger = logging.getLogger(__name__)


def fetch_text(url: str, *, dry_run: bool = False) -> str:
    """Fetch a URL over HTTPS and return the body (curl -fsSL)."""

    r = run_cmd(["curl", "-fsSL", url], dry_run=dry_run)
    return r.stdout


def run_remote_script(url: str, args: Sequence[str] = (), *, dry_run: bool = False) -> None:
    """Fetch a shell script and run it with `sh -c <script> "" <args...>`.

    The fetch must succeed before anything runs; an empty body is not executed.
    """

    script = fetch_text(url, dry_run=dry_run)
    if not dry_run and not script.strip():
        raise RuntimeError(f"Empty script downloaded from {url}")
    # $0 is "", the remaining args become $1.. for the script.
    run_cmd(
        ["sh", "-c", script, "", *args],
        capture=False,
        log_argv=["sh", "-c", f"<script from {url}>", "", *args],
        dry_run=dry_run,
    )


def download(url: str, dest: str, *, dry_run: bool = False) -> None:
    run_cmd(["wget", "-q", "-O", dest, url], dry_run=dry_run)
