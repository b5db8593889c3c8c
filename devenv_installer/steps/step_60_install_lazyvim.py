from __future__ import annotations

import logging
from typing import Any, Dict

from ..context import SetupCtx
from ..errors import SetupError
from ..lib.command import CommandError
from ..lib.files import ensure_dir, remove_tree
from ..lib.git import git_clone
from ..state import DECLINED, INSTALLED, record_decision

logger = logging.getLogger(__name__)

CONFIRM_QUESTION = "Do you want to remove the existing config and install LazyVim?"


class InstallLazyVimStep:
    step_id = "60_install_lazyvim"

    def _clone_starter(self, ctx: SetupCtx) -> None:
        target = ctx.paths.nvim_config
        try:
            git_clone(ctx.cfg.lazyvim_repo, str(target), dry_run=ctx.dry_run)
        except CommandError as e:
            raise SetupError("Failed to clone LazyVim starter.") from e

        # The starter is a template; the user's config is not a checkout of it.
        logger.info("Removing .git directory from LazyVim starter...")
        try:
            remove_tree(target / ".git", dry_run=ctx.dry_run)
        except OSError as e:
            raise SetupError("Failed to remove .git from LazyVim starter.") from e

        logger.info("--- LazyVim installation process started ---")
        logger.info("Run 'nvim' to open Neovim and complete the LazyVim setup (it will download plugins).")

    def run(self, ctx: SetupCtx, state: Dict[str, Any]) -> Dict[str, Any]:
        logger.info("--- Installing LazyVim ---")
        config_home = ctx.paths.config_home
        target = ctx.paths.nvim_config

        try:
            ensure_dir(config_home, dry_run=ctx.dry_run)
        except OSError as e:
            raise SetupError(f"Failed to create directory {config_home}.") from e

        if not target.is_dir():
            logger.info("No existing Neovim configuration found. Cloning LazyVim starter...")
            self._clone_starter(ctx)
            record_decision(state, self.step_id, INSTALLED)
            return state

        logger.warning("WARNING: Existing Neovim configuration found at %s.", target)
        if not ctx.confirm(CONFIRM_QUESTION):
            logger.info("Skipping LazyVim installation as requested.")
            record_decision(state, self.step_id, DECLINED)
            return state

        logger.info("Removing existing Neovim configuration...")
        try:
            remove_tree(target, dry_run=ctx.dry_run)
        except OSError as e:
            raise SetupError("Failed to remove existing Neovim config.") from e

        logger.info("Existing config removed. Cloning LazyVim starter...")
        self._clone_starter(ctx)
        record_decision(state, self.step_id, INSTALLED)
        return state
