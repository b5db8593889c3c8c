from __future__ import annotations

import logging
from typing import Any, Dict

from ..context import SetupCtx
from ..errors import SetupError
from ..lib.command import CommandError
from ..lib.pkg import apt_update, apt_upgrade
from ..state import DONE, record_decision

logger = logging.getLogger(__name__)


class UpdatePackagesStep:
    step_id = "10_update_packages"

    def run(self, ctx: SetupCtx, state: Dict[str, Any]) -> Dict[str, Any]:
        logger.info("--- Updating and upgrading system packages ---")

        try:
            apt_update(sudo=ctx.sudo, dry_run=ctx.dry_run)
        except CommandError as e:
            raise SetupError("apt update failed.") from e

        try:
            apt_upgrade(sudo=ctx.sudo, dry_run=ctx.dry_run)
        except CommandError as e:
            raise SetupError("apt upgrade failed.") from e

        logger.info("--- Package update and upgrade complete ---")
        record_decision(state, self.step_id, DONE)
        return state
