from __future__ import annotations

import logging
import re
import shutil
from pathlib import Path

from .command import run_cmd

logger = logging.getLogger(__name__)


def ensure_dir(path: Path, *, dry_run: bool = False) -> None:
    if dry_run:
        logger.info("Would create directory %s", path)
        return
    path.mkdir(parents=True, exist_ok=True)


def remove_tree(path: Path, *, dry_run: bool = False) -> None:
    """rm -rf: a missing path is not an error."""
    if dry_run:
        logger.info("Would remove %s", path)
        return
    if path.is_dir() and not path.is_symlink():
        shutil.rmtree(path)
    elif path.exists() or path.is_symlink():
        path.unlink()


def remove_file(path: Path, *, dry_run: bool = False) -> None:
    if dry_run:
        logger.info("Would remove %s", path)
        return
    path.unlink()


def extract_zip(archive: Path, dest: Path, *, dry_run: bool = False) -> None:
    # -o: overwrite without prompting, so re-runs stay non-interactive.
    run_cmd(["unzip", "-o", "-q", str(archive), "-d", str(dest)], dry_run=dry_run)


def replace_assignment(path: Path, name: str, value: str, *, dry_run: bool = False) -> int:
    """Rewrite every `NAME="..."` line at column 0 to `NAME="value"`.

    Returns the number of rewritten lines. Raises ValueError when no line
    matches, since the setting would otherwise silently stay unchanged.
    """

    pattern = re.compile(rf'^{re.escape(name)}=".*"', re.MULTILINE)
    # newline="": keep CRLF or LF endings byte-for-byte.
    with open(path, encoding="utf-8", newline="") as f:
        text = f.read()
    new_text, count = pattern.subn(lambda _m: f'{name}="{value}"', text)
    if count == 0:
        raise ValueError(f'No {name}="..." line found in {path}')

    if dry_run:
        logger.info('Would set %s="%s" in %s (%d line(s))', name, value, path, count)
        return count

    with open(path, "w", encoding="utf-8", newline="") as f:
        f.write(new_text)
    logger.debug('Set %s="%s" in %s (%d line(s))', name, value, path, count)
    return count
