from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict


class Page(BaseModel):
    """A WordPress page, with its Advanced Custom Fields payload when present."""

    model_config = ConfigDict(frozen=True)

    id: int
    title: str
    content: str  # rendered HTML
    slug: str
    custom_fields: Optional[Dict[str, Any]] = None
