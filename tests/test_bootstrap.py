"""Tests for default application wiring."""

from fastapi.testclient import TestClient

from actuator.bootstrap import bootstrap_create_application
from actuator.config import ActuatorSettings


def test_bootstrap_application_serves_default_management_surface() -> None:
    """Wire health, info and custom endpoints from settings.

    Returns:
        None: Assertions validate response behavior.

    Raises:
        AssertionError: Raised when default wiring is incomplete.
    """

    settings = ActuatorSettings(environment_name="test", health_random_seed=3, info_properties={"app": "guru"})
    client = TestClient(bootstrap_create_application(settings=settings))

    health_response = client.get("/actuator/health")
    info_response = client.get("/actuator/info")
    custom_response = client.get("/actuator/customguru")

    assert health_response.status_code == 200
    assert health_response.json() == {"status": "UP"}
    assert info_response.json() == {"app": "guru", "JVR": "just a example of InfoContributoer"}
    assert custom_response.status_code == 200


def test_bootstrap_application_honors_disabled_custom_endpoint() -> None:
    """Answer HTTP 404 when the custom endpoint is disabled in settings.

    Returns:
        None: Assertions validate response behavior.

    Raises:
        AssertionError: Raised when the disabled flag is ignored.
    """

    settings = ActuatorSettings(environment_name="test", custom_endpoint_enabled=False, custom_endpoint_id="guru")
    client = TestClient(bootstrap_create_application(settings=settings))

    assert client.get("/actuator/guru").status_code == 404
    assert client.get("/actuator/customguru").status_code == 404
    assert "guru" not in client.get("/actuator").json()["_links"]
