from __future__ import annotations

import logging
from typing import Any, Dict

from ..context import SetupCtx
from ..errors import SetupError
from ..lib.net import run_remote_script
from ..state import INSTALLED, SKIPPED, record_decision

logger = logging.getLogger(__name__)


class InstallOhMyZshStep:
    step_id = "30_install_oh_my_zsh"

    def run(self, ctx: SetupCtx, state: Dict[str, Any]) -> Dict[str, Any]:
        logger.info("--- Installing Oh-My-Zsh ---")
        target = ctx.paths.oh_my_zsh

        if target.is_dir():
            logger.info("Oh-My-Zsh directory already exists (%s). Skipping installation.", target)
            logger.info("If you need to update Oh-My-Zsh, open a zsh shell and run 'omz update'.")
            record_decision(state, self.step_id, SKIPPED)
            return state

        # --unattended: no prompts, and the login shell is left alone.
        try:
            run_remote_script(ctx.cfg.oh_my_zsh_install_url, ["--unattended"], dry_run=ctx.dry_run)
        except RuntimeError as e:
            raise SetupError("Oh-My-Zsh installation failed.") from e

        logger.info("--- Oh-My-Zsh installation complete ---")
        logger.info("Oh-My-Zsh is installed, but your default shell is likely still bash.")
        logger.info("To switch to zsh, run 'chsh -s $(which zsh)' and re-login/reboot.")
        record_decision(state, self.step_id, INSTALLED)
        return state
