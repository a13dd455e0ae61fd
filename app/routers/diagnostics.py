import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from slowapi import Limiter
from slowapi.util import get_remote_address

from app.config import Settings, get_settings
from app.models.connection import AdminLinks
from app.services import diagnostics

logger = logging.getLogger(__name__)

limiter = Limiter(key_func=get_remote_address)
router = APIRouter(prefix="/api")


@router.get("/wordpress-test", summary="Test the WordPress API connection")
@limiter.limit("10/minute")
async def wordpress_test(
    request: Request, settings: Settings = Depends(get_settings)
) -> JSONResponse:
    """Probe WordPress once and report the raw outcome.

    Unlike the content endpoint this never uses the cached availability flag,
    so it reflects the backend's state right now.
    """
    status_code, report = await diagnostics.test_connection(settings)
    if report.status == "error":
        logger.warning("WordPress connection test failed: %s", report.error)
    return JSONResponse(status_code=status_code, content=report.model_dump(exclude_none=True))


@router.get("/admin", response_model=AdminLinks, summary="WordPress admin shortcuts")
async def admin(settings: Settings = Depends(get_settings)) -> AdminLinks:
    return diagnostics.admin_links(settings)
