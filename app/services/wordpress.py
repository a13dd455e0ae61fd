"""Read-only WordPress content with built-in fallbacks.

Every public coroutine on :class:`ContentFetcher` follows the same policy:
ask the availability prober first, make at most one time-bounded request,
and hand back the built-in default (or ``None`` for single-item lookups)
whenever anything goes wrong.  Nothing here raises to the caller.
"""

import logging
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Any, Callable, Dict, Generic, List, Optional, TypeVar

import httpx

from app.config import Settings, get_settings
from app.models.certification import Certification
from app.models.home import AboutSection, HeroSection, HomePageData, WhyUsItem, WhyUsSection
from app.models.menu import MenuItem
from app.models.page import Page
from app.models.post import FeaturedMedia, Post
from app.services.availability import AvailabilityProber
from app.services.defaults import (
    DEFAULT_MENU_ID,
    default_certifications,
    default_home_page_data,
    default_menu_items,
    default_posts,
)
from app.services.errors import BackendError, ContentFetchError, DecodeError, EmptyResult
from app.services.fetcher import get_json
from app.services.normalizer import menu_api_url, resource_url
from app.services.sanitizer import plain_text

logger = logging.getLogger(__name__)

T = TypeVar("T")

_EMBED_MEDIA = "wp:featuredmedia"
_CERTIFICATION_PAGE_SIZE = 100
HOME_SLUG = "home"


@dataclass(frozen=True)
class _Resource(Generic[T]):
    """How to fetch one kind of content and what to serve when that fails."""

    operation: str
    path: str
    decode: Callable[[Any], T]
    default: Callable[[], T]
    params: Dict[str, Any] = field(default_factory=dict)
    menu: bool = False
    # Logged instead of the generic error line when the backend answers 404
    not_found_message: str = ""


class ContentFetcher:
    def __init__(
        self,
        settings: Settings,
        prober: Optional[AvailabilityProber] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.settings = settings
        self.prober = prober if prober is not None else AvailabilityProber(settings, transport=transport)
        self._transport = transport

    # ------------------------------------------------------------------
    # Read operations
    # ------------------------------------------------------------------

    async def list_posts(self, per_page: int = 10, page: int = 1) -> List[Post]:
        return await self._fetch(
            _Resource(
                operation=f"list_posts({per_page}, {page})",
                path="posts",
                params={"_embed": _EMBED_MEDIA, "per_page": per_page, "page": page},
                decode=_decode_items(_item_to_post),
                default=default_posts,
            )
        )

    async def get_post_by_slug(self, slug: str) -> Optional[Post]:
        return await self._fetch(
            _Resource(
                operation=f"get_post_by_slug({slug})",
                path="posts",
                params={"slug": slug, "_embed": _EMBED_MEDIA},
                decode=_decode_first(_item_to_post),
                default=lambda: None,
            )
        )

    async def get_page_by_slug(self, slug: str) -> Optional[Page]:
        return await self._fetch(
            _Resource(
                operation=f"get_page_by_slug({slug})",
                path="pages",
                params={"slug": slug},
                decode=_decode_first(_item_to_page),
                default=lambda: None,
            )
        )

    async def list_menu_items(self, menu_id: str = DEFAULT_MENU_ID) -> List[MenuItem]:
        return await self._fetch(
            _Resource(
                operation=f"list_menu_items({menu_id})",
                path=menu_id,
                menu=True,
                decode=_decode_menu,
                default=default_menu_items,
            )
        )

    async def list_certifications(self) -> List[Certification]:
        return await self._fetch(
            _Resource(
                operation="list_certifications",
                path="certification",
                params={"per_page": _CERTIFICATION_PAGE_SIZE},
                decode=_decode_items(_item_to_certification),
                default=default_certifications,
                not_found_message=(
                    "Certification custom post type not found. Using default certifications."
                ),
            )
        )

    async def get_home_page_data(self) -> HomePageData:
        return await self._fetch(
            _Resource(
                operation="get_home_page_data",
                path="pages",
                params={"slug": HOME_SLUG},
                decode=_decode_home_page,
                default=default_home_page_data,
            )
        )

    # ------------------------------------------------------------------
    # Shared fetch-with-fallback
    # ------------------------------------------------------------------

    async def _fetch(self, resource: "_Resource[T]") -> T:
        if not await self.prober.is_available():
            logger.info("Using fallback data for %s (WordPress API not available)", resource.operation)
            return resource.default()

        api_url = self.prober.api_url
        root = menu_api_url(api_url) if resource.menu else api_url
        url = resource_url(root, resource.path)

        try:
            payload = await get_json(
                url,
                resource.params,
                timeout=self.settings.request_timeout,
                transport=self._transport,
            )
            try:
                return resource.decode(payload)
            except ContentFetchError:
                raise
            except Exception as exc:
                raise DecodeError(f"Could not map payload: {exc!r}") from exc
        except BackendError as exc:
            if exc.status_code == 404 and resource.not_found_message:
                logger.warning("%s", resource.not_found_message)
            else:
                logger.warning(
                    "WordPress API error (%s) params=%s: %s API URL: %s",
                    resource.operation, resource.params, exc, api_url,
                )
        except EmptyResult as exc:
            logger.warning("%s for %s. Using default data.", exc, resource.operation)
        except ContentFetchError as exc:
            logger.warning(
                "WordPress API error (%s) params=%s: %s API URL: %s",
                resource.operation, resource.params, exc, api_url,
            )
        return resource.default()


@lru_cache
def get_fetcher() -> ContentFetcher:
    """Process-wide fetcher; its availability state lives as long as the process."""
    return ContentFetcher(get_settings())


# ---------------------------------------------------------------------------
# Payload decoding
# ---------------------------------------------------------------------------

def _as_list(payload: Any) -> list:
    if not isinstance(payload, list):
        raise DecodeError(f"Expected a JSON array, got {type(payload).__name__}")
    return payload


def _as_mapping(item: Any) -> dict:
    if not isinstance(item, dict):
        raise DecodeError(f"Expected a JSON object, got {type(item).__name__}")
    return item


def _decode_items(decode_item: Callable[[Any], T]) -> Callable[[Any], List[T]]:
    """List endpoints: an empty array counts as a failure and triggers the default."""

    def decode(payload: Any) -> List[T]:
        items = _as_list(payload)
        if not items:
            raise EmptyResult("No items returned")
        return [decode_item(item) for item in items]

    return decode


def _decode_first(decode_item: Callable[[Any], T]) -> Callable[[Any], Optional[T]]:
    """Slug lookups: first match, or ``None`` when nothing matched."""

    def decode(payload: Any) -> Optional[T]:
        items = _as_list(payload)
        return decode_item(items[0]) if items else None

    return decode


def _text(value: Any) -> str:
    """Return a WordPress text field, unwrapping ``{"rendered": ...}`` objects."""
    if isinstance(value, dict):
        value = value.get("rendered")
    return _str(value)


def _str(value: Any) -> str:
    # ACF reports unset fields as false
    if value is None or isinstance(value, bool):
        return ""
    return value if isinstance(value, str) else str(value)


def _int(value: Any, default: int = 0) -> int:
    try:
        return int(value)
    except (TypeError, ValueError, OverflowError):
        return default


def _custom_fields(item: dict) -> Optional[Dict[str, Any]]:
    # WordPress serialises an empty ACF payload as [] rather than {}
    fields = item.get("acf")
    return fields if isinstance(fields, dict) else None


def _featured_media(item: dict) -> Optional[FeaturedMedia]:
    embedded = item.get("_embedded")
    if not isinstance(embedded, dict):
        return None
    media = embedded.get(_EMBED_MEDIA)
    if not isinstance(media, list) or not media or not isinstance(media[0], dict):
        return None
    return FeaturedMedia(
        source_url=_str(media[0].get("source_url")),
        alt_text=_str(media[0].get("alt_text")),
    )


def _item_to_post(item: Any) -> Post:
    item = _as_mapping(item)
    excerpt = _text(item.get("excerpt"))
    return Post(
        id=_int(item.get("id")),
        title=_text(item.get("title")),
        content=_text(item.get("content")),
        excerpt=excerpt,
        excerpt_text=plain_text(excerpt),
        date=_str(item.get("date")),
        slug=_str(item.get("slug")),
        featured_media=_featured_media(item),
    )


def _item_to_page(item: Any) -> Page:
    item = _as_mapping(item)
    return Page(
        id=_int(item.get("id")),
        title=_text(item.get("title")),
        content=_text(item.get("content")),
        slug=_str(item.get("slug")),
        custom_fields=_custom_fields(item),
    )


def _item_to_menu_item(item: Any) -> MenuItem:
    """Accept both flat items and the WP REST API Menus plugin shape."""
    item = _as_mapping(item)
    children = item.get("children", item.get("child_items")) or []
    if not isinstance(children, list):
        children = []
    return MenuItem(
        id=_int(item.get("id", item.get("ID"))),
        title=_text(item.get("title")),
        url=_str(item.get("url")),
        order=_int(item.get("order", item.get("menu_order"))),
        parent=_int(item.get("parent", item.get("menu_item_parent"))),
        children=[_item_to_menu_item(child) for child in children],
    )


def _decode_menu(payload: Any) -> List[MenuItem]:
    menu = _as_mapping(payload)
    items = menu.get("items")
    if not isinstance(items, list) or not items:
        raise EmptyResult("No menu items found")
    return [_item_to_menu_item(item) for item in items]


def initials(title: str) -> str:
    """First letter of each space-separated word: ``"Certified Example Leader"`` -> ``"CEL"``."""
    return "".join(word[0] for word in title.split(" ") if word)


def _item_to_certification(item: Any) -> Certification:
    item = _as_mapping(item)
    fields = _custom_fields(item) or {}
    title = _text(item.get("title"))
    return Certification(
        id=_int(item.get("id")),
        title=title,
        short_name=_str(fields.get("short_name")) or initials(title),
        description=_str(fields.get("description")) or _text(item.get("excerpt")),
        for_who=_str(fields.get("for_who")),
    )


def _why_us_items(value: Any) -> List[WhyUsItem]:
    if not isinstance(value, list):
        return []
    items = []
    for index, entry in enumerate(value, start=1):
        if not isinstance(entry, dict):
            continue
        text = _str(entry.get("text"))
        if text:
            items.append(WhyUsItem(id=_int(entry.get("id"), index), text=text))
    return items


def home_from_page(page: Page) -> HomePageData:
    """Build :class:`HomePageData` from the ``home`` page, field by field over the defaults."""
    defaults = default_home_page_data()
    fields = page.custom_fields

    if not fields:
        logger.warning("ACF data not found for home page. Using partial default data.")
        about = defaults.about.model_copy(
            update={"content": page.content or defaults.about.content}
        )
        return defaults.model_copy(update={"about": about})

    return HomePageData(
        hero=HeroSection(
            title=_str(fields.get("hero_title")) or defaults.hero.title,
            subtitle=_str(fields.get("hero_subtitle")) or defaults.hero.subtitle,
            button_text=_str(fields.get("hero_button_text")) or defaults.hero.button_text,
        ),
        about=AboutSection(
            title=_str(fields.get("about_title")) or defaults.about.title,
            content=(
                _str(fields.get("about_content")) or page.content or defaults.about.content
            ),
        ),
        why_us=WhyUsSection(
            title=_str(fields.get("why_us_title")) or defaults.why_us.title,
            items=_why_us_items(fields.get("why_us_items")) or defaults.why_us.items,
        ),
    )


def _decode_home_page(payload: Any) -> HomePageData:
    pages = _as_list(payload)
    if not pages:
        raise EmptyResult("Home page not found in WordPress")
    return home_from_page(_item_to_page(pages[0]))
