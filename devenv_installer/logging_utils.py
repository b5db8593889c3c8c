from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from typing import Optional

LOG_ENV_VAR = "DEVENV_INSTALLER_LOG"


def default_log_path() -> str:
    return os.environ.get(LOG_ENV_VAR) or str(
        Path.home() / ".local" / "state" / "devenv-installer" / "devenv-installer.log"
    )


def configure_logging(
    log_path: Optional[str] = None,
    level: int = logging.INFO,
    also_console: bool = True,
) -> str:
    """Configure logging.

    The log file gets every record with timestamps; the console gets the bare
    message on stdout so progress reads like a plain setup script.

    If the requested log location is not writable we fall back to a file in
    the current working directory.

    Returns the actual file path being used.
    """

    log_path = log_path or default_log_path()
    logger = logging.getLogger()

    # Avoid duplicate handlers if configure_logging() is called multiple times.
    if getattr(logger, "_devenv_configured", False):
        return getattr(logger, "_devenv_log_path", log_path)

    chosen_path = log_path
    handlers: list[logging.Handler] = []

    fmt = logging.Formatter(
        fmt="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S%z",
    )

    file_handler: Optional[logging.Handler] = None
    try:
        Path(os.path.dirname(log_path) or ".").mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path)
        chosen_path = log_path
    except OSError:
        fallback = str(Path.cwd() / "devenv-installer.log")
        file_handler = logging.FileHandler(fallback)
        chosen_path = fallback
    file_handler.setFormatter(fmt)
    file_handler.setLevel(logging.DEBUG)
    handlers.append(file_handler)

    if also_console:
        console = logging.StreamHandler(sys.stdout)
        console.setFormatter(logging.Formatter("%(message)s"))
        console.setLevel(level)
        handlers.append(console)

    for h in handlers:
        logger.addHandler(h)

    # The file always records command output.
    logger.setLevel(logging.DEBUG)

    setattr(logger, "_devenv_configured", True)
    setattr(logger, "_devenv_log_path", chosen_path)

    logging.getLogger(__name__).debug(
        "Logging initialized (requested=%s, actual=%s)", log_path, chosen_path
    )
    return chosen_path
