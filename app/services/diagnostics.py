"""Operational helpers: ad hoc connection test and admin shortcuts."""

import logging
from typing import Optional, Tuple

import httpx

from app.config import Settings
from app.models.connection import AdminLinks, ConnectionReport
from app.services.errors import BackendUnreachable
from app.services.fetcher import send_get
from app.services.normalizer import normalize_api_url, resource_url

logger = logging.getLogger(__name__)


async def test_connection(
    settings: Settings,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> Tuple[int, ConnectionReport]:
    """Probe the WordPress REST API once, ignoring the memoised availability flag.

    Returns the HTTP status the diagnostic endpoint should answer with and a
    report describing what happened.  Upstream non-2xx statuses are mirrored;
    configuration and network failures map to 500.
    """
    raw_url = settings.wordpress_api_url or None

    if settings.disable_wordpress:
        return 200, ConnectionReport(
            status="error",
            error="WordPress integration is disabled by environment variable",
            disabled=True,
        )

    api_url = normalize_api_url(settings.wordpress_api_url)
    if not api_url:
        return 500, ConnectionReport(
            status="error",
            error="WORDPRESS_API_URL environment variable is not defined",
            raw_url=raw_url,
            formatted_url=api_url,
        )

    logger.info("Testing WordPress API connection to: %s", api_url)
    try:
        response = await send_get(
            resource_url(api_url, "posts"),
            {"per_page": 1},
            timeout=settings.request_timeout,
            transport=transport,
        )
    except BackendUnreachable as exc:
        logger.warning("WordPress API connection test failed: %s", exc)
        return 500, ConnectionReport(
            status="error", error=str(exc), raw_url=raw_url, formatted_url=api_url
        )

    if not response.is_success:
        return response.status_code, ConnectionReport(
            status="error",
            error=f"WordPress API returned status: {response.status_code}",
            raw_url=raw_url,
            formatted_url=api_url,
            response_status=response.status_code,
            response_status_text=response.reason_phrase,
        )

    try:
        data = response.json()
    except ValueError as exc:
        return 500, ConnectionReport(
            status="error",
            error=f"Invalid JSON from WordPress API: {exc}",
            raw_url=raw_url,
            formatted_url=api_url,
        )

    return 200, ConnectionReport(
        status="success",
        message="WordPress API connection successful",
        raw_url=raw_url,
        formatted_url=api_url,
        data={"count": len(data)} if isinstance(data, list) else data,
    )


def admin_links(settings: Settings) -> AdminLinks:
    base = settings.admin_url.rstrip("/")
    return AdminLinks(
        admin_url=base,
        new_post=f"{base}/post-new.php",
        new_page=f"{base}/post-new.php?post_type=page",
        media_library=f"{base}/upload.php",
        certifications=f"{base}/edit.php?post_type=certification",
    )
