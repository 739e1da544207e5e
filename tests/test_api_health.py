"""Tests for the local liveness endpoint.

The liveness route must answer without contacting any remote target.
"""

from fastapi.testclient import TestClient

from health_passthrough.api.application import create_api_application
from health_passthrough.config import AppSettings
from health_passthrough.passthrough import HealthPassthroughOrchestrator


class _UnreachableTransport:
    """Transport double that fails the test if any remote interaction happens."""

    def adapter_source_name(self) -> str:
        return "unreachable"

    def adapter_open_channel(self, target: str, insecure: bool) -> object:
        """Fail because liveness must stay local.

        Args:
            target: Remote address.
            insecure: Channel mode.

        Returns:
            object: This method does not return.

        Raises:
            AssertionError: Always raised by this test double.
        """

        raise AssertionError(f"unexpected channel open to {target} (insecure={insecure})")

    async def adapter_call_health_check(self, channel, request_bytes, metadata) -> bytes:
        raise AssertionError("unexpected remote call")

    async def adapter_close_channel(self, channel) -> None:
        raise AssertionError("unexpected channel close")


def test_api_health_returns_liveness_without_remote_calls() -> None:
    """Return HTTP 200 and the environment label from settings.

    Returns:
        None: Assertions validate response behavior.

    Raises:
        AssertionError: Raised when response does not match expected payload.
    """

    application = create_api_application(
        AppSettings(environment_name="test"),
        HealthPassthroughOrchestrator(transport=_UnreachableTransport()),
    )
    client = TestClient(application)

    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "ok"
    assert response.json()["app"] == "up"
    assert response.json()["environment"] == "test"
