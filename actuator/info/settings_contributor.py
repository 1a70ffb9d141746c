"""Info contributor publishing static properties from runtime settings."""

from collections.abc import Mapping

from actuator.domain import InfoBuilder


class SettingsInfoContributor:
    """Contribute configured `info_properties` entries."""

    def __init__(self, properties: Mapping[str, str]):
        """Initialize contributor.

        Args:
            properties: Static key/value pairs to publish.

        Raises:
            ValueError: Raised when properties is None.
        """

        if properties is None:
            raise ValueError("properties must not be None")
        self._properties = dict(properties)

    def contribute(self, builder: InfoBuilder) -> None:
        """Append every configured property.

        Args:
            builder: Builder shared by all contributors for one info query.

        Returns:
            None: The builder is updated in place.

        Raises:
            ValueError: Raised when a configured key is blank.
        """

        builder.with_details(self._properties)
