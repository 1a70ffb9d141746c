"""Main module entrypoint for local runtime execution.

This module validates startup configuration and launches the FastAPI service
or runs a one-off health check.
"""

import argparse
import json

import uvicorn

from actuator.bootstrap import bootstrap_create_application, bootstrap_create_health_aggregator
from actuator.config import config_configure_logging, config_load_settings
from actuator.domain import HealthState


def main() -> None:
    """Run selected runtime command with validated startup configuration.

    Returns:
        None: This function does not return a runtime value.

    Raises:
        SettingsLoadError: Raised when configuration validation fails.
        SystemExit: Raised with code 1 when the `health` command reports DOWN.
    """

    argument_parser = argparse.ArgumentParser(description="Guru Actuator runtime entrypoint")
    argument_parser.add_argument(
        "command",
        nargs="?",
        default="serve",
        choices=("serve", "health"),
        help="Runtime command: `serve` starts the server, `health` prints one aggregated health check",
        type=str,
    )
    parsed_arguments = argument_parser.parse_args()

    settings = config_load_settings()
    config_configure_logging(settings)

    if parsed_arguments.command == "health":
        health_status = bootstrap_create_health_aggregator(settings).health_aggregate()
        print(json.dumps(health_status.to_payload()))
        if health_status.status is not HealthState.UP:
            raise SystemExit(1)
        return

    application = bootstrap_create_application(settings=settings)
    uvicorn.run(
        application,
        host=settings.application_host,
        port=settings.application_port,
    )


if __name__ == "__main__":
    main()
