from __future__ import annotations

import logging
from typing import Any, Dict

from ..context import SetupCtx
from ..errors import SetupError
from ..lib.command import CommandError
from ..lib.files import ensure_dir, extract_zip, remove_file
from ..lib.net import download
from ..state import INSTALLED, record_decision

logger = logging.getLogger(__name__)


class InstallFontsStep:
    """User-local Nerd Font install.

    Not idempotent: every run downloads and extracts again, overwriting files.
    On failure the downloaded archive is left in the temp directory.
    """

    step_id = "50_install_fonts"

    def run(self, ctx: SetupCtx, state: Dict[str, Any]) -> Dict[str, Any]:
        font = ctx.cfg.font_name
        font_dir = ctx.font_dir
        archive = ctx.font_archive
        logger.info("--- Installing %s Nerd Font ---", font)

        try:
            ensure_dir(font_dir, dry_run=ctx.dry_run)
        except OSError as e:
            raise SetupError(f"Failed to create directory {font_dir}.") from e

        try:
            download(ctx.cfg.font_url, str(archive), dry_run=ctx.dry_run)
        except CommandError as e:
            raise SetupError("Font download failed.") from e

        try:
            extract_zip(archive, font_dir, dry_run=ctx.dry_run)
        except CommandError as e:
            raise SetupError("Font extraction failed.") from e

        try:
            remove_file(archive, dry_run=ctx.dry_run)
        except OSError as e:
            raise SetupError(f"Failed to remove {archive}.") from e

        logger.info("--- Font Configuration Note ---")
        logger.info("Nerd Font installation is installed for Ubuntu for only your user.")
        logger.info("For Powerlevel10k to display correctly, you must manually select a Nerd Font")
        logger.info("and then set that font in your terminal application's settings.")
        logger.info("-------------------------------")

        record_decision(state, self.step_id, INSTALLED)
        return state
