"""Info contributors and info document assembly."""

from .interfaces import InfoContributorPort
from .jvr_contributor import JVR_INFO_KEY, JVR_INFO_VALUE, JvrInfoContributor
from .service import InfoService
from .settings_contributor import SettingsInfoContributor

__all__ = [
    "InfoContributorPort",
    "InfoService",
    "JVR_INFO_KEY",
    "JVR_INFO_VALUE",
    "JvrInfoContributor",
    "SettingsInfoContributor",
]
