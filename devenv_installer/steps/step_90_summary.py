from __future__ import annotations

import logging
from typing import Any, Dict

from ..context import SetupCtx
from ..state import DONE, record_decision

logger = logging.getLogger(__name__)

RECOMMENDATIONS = [
    "If you want zsh as your default shell, run 'chsh -s $(which zsh)' and then log out and log back in (or reboot).",
    "Run 'nvim' to start Neovim and let LazyVim install its plugins.",
    "Once you're in a zsh shell, run 'p10k configure' to set up Powerlevel10k's appearance.",
    "You must manually install a Nerd Font on your Ubuntu system and configure your terminal emulator "
    "to use it for Powerlevel10k to look right.",
]


class SummaryStep:
    step_id = "90_summary"

    def run(self, ctx: SetupCtx, state: Dict[str, Any]) -> Dict[str, Any]:
        logger.debug("Decisions: %s", (state.get("execution") or {}).get("decisions") or {})

        logger.info("--------------------------------------------------")
        logger.info("Ubuntu zsh setup script finished.")
        logger.info("Recommendations:")
        for i, line in enumerate(RECOMMENDATIONS, start=1):
            logger.info("%d. %s", i, line)
        logger.info("--------------------------------------------------")

        record_decision(state, self.step_id, DONE)
        return state
