"""Info document assembly across registered contributors."""

import logging
from collections.abc import Sequence

from actuator.domain import InfoBuilder, InfoRecord

from .interfaces import InfoContributorPort

logger = logging.getLogger(__name__)


class InfoService:
    """Build the info document by running contributors in registration order."""

    def __init__(self, contributors: Sequence[InfoContributorPort]):
        """Initialize info service.

        Args:
            contributors: Info contributors applied on every query.

        Raises:
            ValueError: Raised when contributors is None or contains None.
        """

        if contributors is None:
            raise ValueError("contributors must not be None")
        if any(contributor is None for contributor in contributors):
            raise ValueError("contributors must not contain None")
        self._contributors = tuple(contributors)

    def info_collect(self) -> InfoRecord:
        """Run all contributors against a fresh builder.

        Returns:
            InfoRecord: Merged info entries; later contributors win on key clashes.
        """

        builder = InfoBuilder()
        for contributor in self._contributors:
            contributor.contribute(builder)
        info_record = builder.build()
        logger.debug("Collected %d info entries from %d contributors", len(info_record), len(self._contributors))
        return info_record
