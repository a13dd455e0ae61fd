"""JSON content endpoint consumed by the site's page templates."""

import logging
from typing import Any, Optional, Union

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from app.models.home import HomePageData
from app.models.page import Page
from app.models.post import Post
from app.services.defaults import DEFAULT_MENU_ID
from app.services.sanitizer import parse_content
from app.services.wordpress import ContentFetcher, get_fetcher

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api")

CONTENT_TYPES = ("posts", "post", "page", "menu", "certifications", "home")


@router.get(
    "/wordpress",
    summary="Fetch WordPress content with built-in fallbacks",
    description=(
        "Returns live WordPress content when the backend is reachable and the "
        "built-in defaults otherwise. `post` and `page` lookups return `null` "
        "when no item matches the slug."
    ),
)
async def get_content(
    content_type: Optional[str] = Query(
        default=None, alias="type", description="One of: " + ", ".join(CONTENT_TYPES) + "."
    ),
    slug: Optional[str] = Query(default=None),
    page: int = Query(default=1, ge=1),
    per_page: int = Query(default=10, ge=1, le=100),
    menu: str = Query(default=DEFAULT_MENU_ID, description="Menu id or slug."),
    fetcher: ContentFetcher = Depends(get_fetcher),
) -> Any:
    logger.info("Content request received", extra={"type": content_type, "slug": slug})

    if content_type == "posts":
        posts = await fetcher.list_posts(per_page, page)
        return [_clean(post) for post in posts]
    if content_type in ("post", "page"):
        if not slug:
            return JSONResponse(status_code=400, content={"error": "Slug is required"})
        if content_type == "post":
            item = await fetcher.get_post_by_slug(slug)
        else:
            item = await fetcher.get_page_by_slug(slug)
        return _clean(item) if item is not None else None
    if content_type == "menu":
        return await fetcher.list_menu_items(menu)
    if content_type == "certifications":
        return await fetcher.list_certifications()
    if content_type == "home":
        return _clean_home(await fetcher.get_home_page_data())

    return JSONResponse(status_code=400, content={"error": "Invalid type parameter"})


def _clean(item: Union[Post, Page]) -> Union[Post, Page]:
    """Return a copy of a post or page with scripts and comments stripped from its body."""
    return item.model_copy(update={"content": parse_content(item.content)})


def _clean_home(data: HomePageData) -> HomePageData:
    about = data.about.model_copy(update={"content": parse_content(data.about.content)})
    return data.model_copy(update={"about": about})
