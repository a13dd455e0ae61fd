from typing import Optional

from pydantic import BaseModel, ConfigDict


class FeaturedMedia(BaseModel):
    """First ``wp:featuredmedia`` entry embedded in a post."""

    model_config = ConfigDict(frozen=True)

    source_url: str = ""
    alt_text: str = ""


class Post(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    title: str
    content: str  # rendered HTML
    excerpt: str  # rendered HTML
    excerpt_text: str  # excerpt without markup, for cards and meta descriptions
    date: str
    slug: str
    featured_media: Optional[FeaturedMedia] = None
