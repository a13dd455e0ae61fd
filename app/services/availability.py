"""One-shot reachability check for the WordPress REST API.

The first completed probe decides availability for the lifetime of its
:class:`AvailabilityState`; a backend that recovers (or goes down) later is
not noticed until the state is reset.
"""

import enum
import logging
from typing import Optional

import httpx

from app.config import Settings
from app.services.errors import BackendUnconfigured, ContentFetchError, IntegrationDisabled
from app.services.fetcher import ensure_success, send_get
from app.services.normalizer import normalize_api_url, resource_url

logger = logging.getLogger(__name__)


class BackendAvailability(str, enum.Enum):
    UNKNOWN = "unknown"
    AVAILABLE = "available"
    UNAVAILABLE = "unavailable"


class AvailabilityState:
    """Write-once cell holding the probe result."""

    def __init__(self) -> None:
        self.value = BackendAvailability.UNKNOWN

    def record(self, available: bool) -> bool:
        """Store *available* unless a result is already known; return the stored result."""
        if self.value is BackendAvailability.UNKNOWN:
            self.value = (
                BackendAvailability.AVAILABLE if available else BackendAvailability.UNAVAILABLE
            )
        return self.value is BackendAvailability.AVAILABLE

    def reset(self) -> None:
        self.value = BackendAvailability.UNKNOWN


class AvailabilityProber:
    def __init__(
        self,
        settings: Settings,
        state: Optional[AvailabilityState] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.settings = settings
        self.state = state if state is not None else AvailabilityState()
        self.api_url = normalize_api_url(settings.wordpress_api_url)
        self._transport = transport

    async def is_available(self) -> bool:
        """Return whether the backend is usable, probing it on the first call only."""
        if self.state.value is not BackendAvailability.UNKNOWN:
            return self.state.value is BackendAvailability.AVAILABLE
        return self.state.record(await self._probe())

    async def _probe(self) -> bool:
        try:
            await self._check()
        except IntegrationDisabled as exc:
            logger.info("%s", exc)
            return False
        except ContentFetchError as exc:
            logger.warning("WordPress API availability check failed: %s", exc)
            return False
        logger.info("WordPress API available at %s", self.api_url)
        return True

    async def _check(self) -> None:
        if self.settings.disable_wordpress:
            raise IntegrationDisabled("WordPress integration is disabled by environment variable")
        if not self.api_url:
            raise BackendUnconfigured("WORDPRESS_API_URL environment variable is not defined")

        ensure_success(
            await send_get(
                resource_url(self.api_url, "posts"),
                {"per_page": 1},
                timeout=self.settings.probe_timeout,
                transport=self._transport,
            )
        )
