from __future__ import annotations

import logging
import os
import shlex
import subprocess
from dataclasses import dataclass
from typing import Mapping, Sequence

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CmdResult:
    argv: list[str]
    returncode: int
    stdout: str
    stderr: str


class CommandError(RuntimeError):
    """A command exited non-zero (or could not be started)."""

    def __init__(self, argv: Sequence[str], returncode: int, stderr: str = "") -> None:
        self.argv = list(argv)
        self.returncode = returncode
        self.stderr = stderr
        msg = f"Command failed ({returncode}): {fmt_argv(self.argv)}"
        if stderr:
            msg += f"\n{stderr.strip()}"
        super().__init__(msg)


def fmt_argv(argv: Sequence[str]) -> str:
    return " ".join(shlex.quote(a) for a in argv)


def run_cmd(
    argv: Sequence[str],
    *,
    check: bool = True,
    capture: bool = True,
    env: Mapping[str, str] | None = None,
    log_argv: Sequence[str] | None = None,
    dry_run: bool = False,
) -> CmdResult:
    """Run a command with consistent logging.

    - Always logs the command.
    - capture=False lets the command write straight to the terminal
      (apt, the Oh-My-Zsh installer); stdout/stderr are then empty.
    - log_argv replaces argv in the log line (e.g. to hide a script body).
    - dry_run logs but does not execute.
    """

    argv_list = list(argv)
    logger.info("CMD %s", fmt_argv(argv_list if log_argv is None else log_argv))

    if dry_run:
        return CmdResult(argv=argv_list, returncode=0, stdout="", stderr="")

    kwargs = {}
    if capture:
        kwargs = {"stdout": subprocess.PIPE, "stderr": subprocess.PIPE}

    try:
        p = subprocess.run(
            argv_list,
            text=True,
            env=dict(os.environ, **(env or {})),
            **kwargs,
        )
    except FileNotFoundError as e:
        # Missing executable: same fatal path as a non-zero exit.
        raise CommandError(argv_list, 127, str(e)) from e

    stdout = p.stdout or ""
    stderr = p.stderr or ""
    if stdout:
        logger.debug("STDOUT %s", stdout.strip())
    if stderr:
        logger.debug("STDERR %s", stderr.strip())

    if check and p.returncode != 0:
        raise CommandError(argv_list, p.returncode, stderr)

    return CmdResult(argv=argv_list, returncode=p.returncode, stdout=stdout, stderr=stderr)
