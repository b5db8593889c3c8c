from __future__ import annotations

import argparse
import logging
import sys
from typing import Any, Callable, Dict, Optional

from .config import load_setup_config
from .context import SetupCtx
from .errors import SetupError
from .lib.env import resolve_paths
from .logging_utils import configure_logging
from .pipeline import run_pipeline
from .prompt import ask_yes_no
from .state import ensure_defaults
from .steps import (
    InstallFontsStep,
    InstallLazyVimStep,
    InstallOhMyZshStep,
    InstallPackagesStep,
    InstallPowerlevel10kStep,
    SummaryStep,
    UpdatePackagesStep,
)

logger = logging.getLogger(__name__)


def build_steps():
    return [
        UpdatePackagesStep(),
        InstallPackagesStep(),
        InstallOhMyZshStep(),
        InstallPowerlevel10kStep(),
        InstallFontsStep(),
        InstallLazyVimStep(),
        SummaryStep(),
    ]


def run(
    *,
    config_path: Optional[str] = None,
    dry_run: bool = False,
    confirm: Optional[Callable[[str], bool]] = None,
) -> Dict[str, Any]:
    """Run the setup pipeline once, top to bottom. Raises SetupError on the first failure."""

    paths = resolve_paths()
    cfg = load_setup_config(config_path, home=paths.home)
    ctx = SetupCtx(cfg=cfg, paths=paths, dry_run=dry_run, confirm=confirm or ask_yes_no)

    state = ensure_defaults({"config": {"dry_run": dry_run, "config_path": config_path}})

    logger.info("Starting Ubuntu zsh setup script...")
    try:
        result = run_pipeline(ctx=ctx, state=state, steps=build_steps())
    except SetupError:
        raise
    except Exception:
        logger.exception("Setup failed")
        raise

    state = result.state
    state.setdefault("execution", {}).setdefault("summary", {})["ran_steps"] = result.ran_steps
    state.setdefault("execution", {}).setdefault("summary", {})["skipped_steps"] = result.skipped_steps
    return state


def main(argv: Optional[list[str]] = None) -> int:
    p = argparse.ArgumentParser(
        prog="devenv-installer",
        description="Provision an Ubuntu developer environment: zsh, Oh-My-Zsh, Powerlevel10k, a Nerd Font and LazyVim.",
    )
    p.add_argument("--config", default=None, help="Path to a YAML config (default: ~/.config/devenv-installer/config.yaml)")
    p.add_argument("--log", default=None, help="Path to the log file")
    p.add_argument("--dry-run", action="store_true", help="Log commands and file edits without running them")
    p.add_argument("--verbose", "-v", action="store_true", help="Show command output on the console")

    args = p.parse_args(argv)

    configure_logging(log_path=args.log, level=logging.DEBUG if args.verbose else logging.INFO)

    try:
        run(config_path=args.config, dry_run=bool(args.dry_run))
    except SetupError as e:
        logger.debug("Aborting", exc_info=True)
        print(f"ERROR: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
