"""Tests for API info endpoint behavior."""

from fastapi.testclient import TestClient

from actuator.api.application import create_api_application
from actuator.config import ActuatorSettings
from actuator.health import HealthAggregator
from actuator.info import InfoService, JvrInfoContributor, SettingsInfoContributor


def test_api_info_returns_merged_contributor_document() -> None:
    """Return every contributor entry including the JVR pair.

    Returns:
        None: Assertions validate response behavior.

    Raises:
        AssertionError: Raised when response does not match expected payload.
    """

    application = create_api_application(
        settings=ActuatorSettings(environment_name="test"),
        health_aggregator=HealthAggregator(indicators=[]),
        info_service=InfoService(
            contributors=[SettingsInfoContributor(properties={"app": "guru"}), JvrInfoContributor()]
        ),
    )
    client = TestClient(application)

    first_response = client.get("/actuator/info")
    second_response = client.get("/actuator/info")

    assert first_response.status_code == 200
    assert first_response.json() == {"app": "guru", "JVR": "just a example of InfoContributoer"}
    assert second_response.json() == first_response.json()
