from .step_10_update_packages import UpdatePackagesStep
from .step_20_install_packages import InstallPackagesStep
from .step_30_install_oh_my_zsh import InstallOhMyZshStep
from .step_40_install_powerlevel10k import InstallPowerlevel10kStep
from .step_50_install_fonts import InstallFontsStep
from .step_60_install_lazyvim import InstallLazyVimStep
from .step_90_summary import SummaryStep

__all__ = [
    "UpdatePackagesStep",
    "InstallPackagesStep",
    "InstallOhMyZshStep",
    "InstallPowerlevel10kStep",
    "InstallFontsStep",
    "InstallLazyVimStep",
    "SummaryStep",
]
