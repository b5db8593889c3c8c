from __future__ import annotations

import logging
from typing import Any, Dict

from ..context import SetupCtx
from ..errors import SetupError
from ..lib.command import CommandError
from ..lib.files import replace_assignment
from ..lib.git import git_clone
from ..state import INSTALLED, SKIPPED, record_decision

logger = logging.getLogger(__name__)


class InstallPowerlevel10kStep:
    step_id = "40_install_powerlevel10k"

    def run(self, ctx: SetupCtx, state: Dict[str, Any]) -> Dict[str, Any]:
        logger.info("--- Installing Powerlevel10k ---")
        target = ctx.paths.powerlevel10k

        # The .zshrc patch only happens on a fresh clone; re-runs never re-assert it.
        if target.is_dir():
            logger.info("Powerlevel10k directory already exists. Skipping cloning and .zshrc modification.")
            record_decision(state, self.step_id, SKIPPED)
            return state

        logger.info("Cloning Powerlevel10k repository...")
        try:
            git_clone(ctx.cfg.powerlevel10k_repo, str(target), depth=1, dry_run=ctx.dry_run)
        except CommandError as e:
            raise SetupError("Failed to clone Powerlevel10k.") from e
        logger.info("--- Powerlevel10k cloning complete ---")

        theme = ctx.cfg.zsh_theme
        logger.info("Setting ZSH_THEME to %s in ~/.zshrc", theme)
        zshrc = ctx.paths.zshrc
        if ctx.dry_run and not zshrc.exists():
            logger.info('Would set ZSH_THEME="%s" in %s', theme, zshrc)
        else:
            try:
                replace_assignment(zshrc, "ZSH_THEME", theme, dry_run=ctx.dry_run)
            except (OSError, ValueError) as e:
                raise SetupError("Failed to update ZSH_THEME in ~/.zshrc.") from e
        logger.info("--- ZSH_THEME updated ---")

        record_decision(state, self.step_id, INSTALLED)
        return state
