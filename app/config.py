"""Environment-driven settings for the WordPress content layer."""

import os
from functools import lru_cache

from pydantic import BaseModel, ConfigDict

DEFAULT_ADMIN_URL = "http://localhost/wordpress/wp-admin"
PROBE_TIMEOUT = 3.0  # seconds
REQUEST_TIMEOUT = 5.0  # seconds


class Settings(BaseModel):
    model_config = ConfigDict(frozen=True)

    wordpress_api_url: str = ""
    disable_wordpress: bool = False
    admin_url: str = DEFAULT_ADMIN_URL
    probe_timeout: float = PROBE_TIMEOUT
    request_timeout: float = REQUEST_TIMEOUT

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from ``WORDPRESS_*`` / ``DISABLE_WORDPRESS`` variables."""
        return cls(
            wordpress_api_url=os.environ.get("WORDPRESS_API_URL", ""),
            disable_wordpress=os.environ.get("DISABLE_WORDPRESS", "") == "true",
            admin_url=os.environ.get("WORDPRESS_ADMIN_URL") or DEFAULT_ADMIN_URL,
            probe_timeout=float(os.environ.get("WORDPRESS_PROBE_TIMEOUT", PROBE_TIMEOUT)),
            request_timeout=float(os.environ.get("WORDPRESS_REQUEST_TIMEOUT", REQUEST_TIMEOUT)),
        )


@lru_cache
def get_settings() -> Settings:
    return Settings.from_env()
