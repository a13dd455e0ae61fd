"""Tests for app.services.availability."""

import asyncio

import httpx

from app.config import Settings
from app.services.availability import AvailabilityProber, AvailabilityState, BackendAvailability
from tests.fakes import API_BASE, API_ROOT


def _prober(settings, wp, state=None) -> AvailabilityProber:
    return AvailabilityProber(settings, state=state, transport=wp.transport)


class TestAvailabilityState:
    def test_starts_unknown(self):
        assert AvailabilityState().value is BackendAvailability.UNKNOWN

    def test_first_record_wins(self):
        state = AvailabilityState()
        assert state.record(True) is True
        assert state.record(False) is True
        assert state.value is BackendAvailability.AVAILABLE

    def test_reset(self):
        state = AvailabilityState()
        state.record(False)
        state.reset()
        assert state.value is BackendAvailability.UNKNOWN


class TestProbe:
    def test_reachable_backend_is_available(self, settings, wp):
        prober = _prober(settings, wp)
        assert asyncio.run(prober.is_available()) is True
        assert prober.state.value is BackendAvailability.AVAILABLE

    def test_probe_requests_single_post(self, settings, wp):
        asyncio.run(_prober(settings, wp).is_available())
        assert len(wp.requests) == 1
        request = wp.requests[0]
        assert request.url.path == f"{API_ROOT}/posts"
        assert request.url.params["per_page"] == "1"

    def test_disabled_never_touches_network(self, wp):
        settings = Settings(wordpress_api_url=API_BASE, disable_wordpress=True)
        prober = _prober(settings, wp)
        assert asyncio.run(prober.is_available()) is False
        assert wp.requests == []
        assert prober.state.value is BackendAvailability.UNAVAILABLE

    def test_unconfigured_never_touches_network(self, wp):
        prober = _prober(Settings(wordpress_api_url=""), wp)
        assert asyncio.run(prober.is_available()) is False
        assert wp.requests == []

    def test_non_2xx_is_unavailable(self, settings, wp):
        wp.add(f"{API_ROOT}/posts", json={"code": "internal_error"}, status=500)
        assert asyncio.run(_prober(settings, wp).is_available()) is False

    def test_network_error_is_unavailable(self, settings, wp):
        wp.fail_with(httpx.ConnectError("connection refused"))
        assert asyncio.run(_prober(settings, wp).is_available()) is False

    def test_timeout_is_unavailable(self, settings, wp):
        wp.fail_with(httpx.ReadTimeout("timed out"))
        assert asyncio.run(_prober(settings, wp).is_available()) is False

    def test_invalid_url_is_unavailable(self, wp):
        prober = AvailabilityProber(Settings(wordpress_api_url="not a url"))
        assert asyncio.run(prober.is_available()) is False


class TestMemoization:
    def test_available_result_survives_backend_failure(self, settings, wp):
        prober = _prober(settings, wp)
        assert asyncio.run(prober.is_available()) is True

        wp.fail_with(httpx.ConnectError("connection refused"))
        assert asyncio.run(prober.is_available()) is True
        assert len(wp.requests) == 1

    def test_unavailable_result_survives_backend_recovery(self, settings, wp):
        wp.fail_with(httpx.ConnectError("connection refused"))
        prober = _prober(settings, wp)
        assert asyncio.run(prober.is_available()) is False

        wp.fail_with(None)
        assert asyncio.run(prober.is_available()) is False
        assert len(wp.requests) == 1

    def test_shared_state_is_not_reprobed(self, settings, wp):
        state = AvailabilityState()
        asyncio.run(_prober(settings, wp, state).is_available())
        asyncio.run(_prober(settings, wp, state).is_available())
        assert len(wp.requests) == 1

    def test_reset_state_probes_again(self, settings, wp):
        wp.fail_with(httpx.ConnectError("connection refused"))
        prober = _prober(settings, wp)
        assert asyncio.run(prober.is_available()) is False

        wp.fail_with(None)
        prober.state.reset()
        assert asyncio.run(prober.is_available()) is True
