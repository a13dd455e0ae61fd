"""URL normalisation for the WordPress REST API root."""

from typing import Optional

API_ROOT = "/wp-json"
API_VERSION = "/wp/v2"
MENU_NAMESPACE = "/menus/v1/menus"


def normalize_api_url(url: Optional[str]) -> str:
    """Return the versioned REST root (``.../wp-json/wp/v2``) for *url*.

    Accepts a bare site URL, a ``/wp-json`` root, or an already versioned
    root, with or without trailing slashes.  An empty or missing value yields
    ``""``, which callers treat as "integration not configured".
    """
    if not url:
        return ""

    formatted = url.strip().rstrip("/")
    if not formatted:
        return ""

    if API_ROOT + API_VERSION in formatted:
        return formatted
    if API_ROOT in formatted:
        return formatted + API_VERSION
    return formatted + API_ROOT + API_VERSION


def menu_api_url(api_url: str) -> str:
    """Swap the core namespace of a normalised root for the menus plugin namespace."""
    return api_url.replace(API_VERSION, MENU_NAMESPACE)


def resource_url(api_url: str, path: str) -> str:
    """Join a resource *path* (``posts``, ``pages``, ...) onto a normalised root."""
    return f"{api_url}/{path.strip('/')}"
