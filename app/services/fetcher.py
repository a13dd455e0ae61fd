from typing import Any, Mapping, Optional

import httpx

from app.services.errors import BackendError, BackendUnreachable, DecodeError

_HEADERS = {"Content-Type": "application/json"}


async def send_get(
    url: str,
    params: Optional[Mapping[str, Any]] = None,
    *,
    timeout: float,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> httpx.Response:
    """Issue a single GET to *url*, bounded by *timeout* seconds.

    The response is returned whatever its status.

    Raises:
        BackendUnreachable: on timeout, connection failure, or an unusable URL.
    """
    try:
        async with httpx.AsyncClient(
            timeout=timeout, follow_redirects=True, transport=transport
        ) as client:
            return await client.get(url, params=params, headers=_HEADERS)
    except httpx.TimeoutException as exc:
        raise BackendUnreachable(f"Request timed out after {timeout}s") from exc
    except (httpx.HTTPError, httpx.InvalidURL) as exc:
        raise BackendUnreachable(str(exc) or exc.__class__.__name__) from exc


def ensure_success(response: httpx.Response) -> httpx.Response:
    """Raise :class:`BackendError` unless *response* has a 2xx status."""
    if not response.is_success:
        raise BackendError(response.status_code, response.reason_phrase)
    return response


async def get_json(
    url: str,
    params: Optional[Mapping[str, Any]] = None,
    *,
    timeout: float,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> Any:
    """GET *url* and return the decoded JSON body.

    Raises:
        BackendUnreachable: on network errors or timeouts.
        BackendError: on a non-2xx status.
        DecodeError: if the body is not valid JSON.
    """
    response = ensure_success(await send_get(url, params, timeout=timeout, transport=transport))
    try:
        return response.json()
    except (ValueError, RecursionError) as exc:
        raise DecodeError(f"Invalid JSON from {url}: {exc}") from exc
