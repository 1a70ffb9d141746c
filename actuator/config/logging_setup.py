"""Process-wide logging setup driven by runtime settings."""

import logging

from .settings import ActuatorSettings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def config_configure_logging(settings: ActuatorSettings) -> None:
    """Configure root logging level and format from settings.

    Args:
        settings: Validated settings carrying the log level name.

    Returns:
        None: Logging is configured as a side effect.
    """

    logging.basicConfig(level=settings.log_level, format=LOG_FORMAT, force=True)
