from typing import Any, Literal, Optional

from pydantic import BaseModel


class ConnectionReport(BaseModel):
    """Result of an ad hoc connection test against the WordPress REST API."""

    status: Literal["success", "error"]
    message: Optional[str] = None
    error: Optional[str] = None
    disabled: bool = False
    raw_url: Optional[str] = None
    formatted_url: Optional[str] = None
    response_status: Optional[int] = None
    response_status_text: Optional[str] = None
    data: Any = None


class AdminLinks(BaseModel):
    admin_url: str
    new_post: str
    new_page: str
    media_library: str
    certifications: str
