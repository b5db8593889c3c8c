from __future__ import annotations

import logging
from typing import Any, Dict

from ..context import SetupCtx
from ..errors import SetupError
from ..lib.command import CommandError
from ..lib.pkg import apt_install
from ..state import INSTALLED, record_decision

logger = logging.getLogger(__name__)


class InstallPackagesStep:
    step_id = "20_install_packages"

    def run(self, ctx: SetupCtx, state: Dict[str, Any]) -> Dict[str, Any]:
        packages = ctx.cfg.packages
        logger.info("--- Installing core packages ---")
        logger.info("Installing: %s", " ".join(packages))

        try:
            apt_install(packages, sudo=ctx.sudo, dry_run=ctx.dry_run)
        except CommandError as e:
            raise SetupError("apt install failed.") from e

        logger.info("--- Core packages installation complete ---")
        record_decision(state, self.step_id, INSTALLED)
        return state
