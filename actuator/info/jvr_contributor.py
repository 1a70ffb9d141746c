"""Static info contributor publishing a fixed example entry."""

from actuator.domain import InfoBuilder

JVR_INFO_KEY = "JVR"
JVR_INFO_VALUE = "just a example of InfoContributoer"


class JvrInfoContributor:
    """Contribute the fixed `JVR` info entry."""

    def contribute(self, builder: InfoBuilder) -> None:
        """Append the fixed `JVR` entry.

        Args:
            builder: Builder shared by all contributors for one info query.

        Returns:
            None: The builder is updated in place.
        """

        builder.with_detail(JVR_INFO_KEY, JVR_INFO_VALUE)
