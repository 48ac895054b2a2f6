from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import RedirectResponse

from shorturl_app.config import Settings
from shorturl_app.dependencies import get_app_settings, get_url_service
from shorturl_app.exceptions import URLUnavailableError
from shorturl_app.schemas.url import ShortURLCreate, ShortURLCreated
from shorturl_app.services.url_service import URLService
from shorturl_app.api.v1.short_urls import create_short_url_response

router = APIRouter(tags=["redirect"])


@router.post("/create-short-url", response_model=ShortURLCreated, include_in_schema=False)
async def create_short_url_legacy(
    url_data: ShortURLCreate,
    url_service: URLService = Depends(get_url_service),
    settings: Settings = Depends(get_app_settings)
):
    """Legacy creation endpoint kept for old clients (answers 200, not 201)"""
    return await create_short_url_response(url_data, url_service, settings)


@router.get("/{short_url}")
async def redirect_to_long_url(
    short_url: str,
    url_service: URLService = Depends(get_url_service)
):
    """
    Redirect to the original URL.

    Store failures are reported as 404 too, the same as a missing code.
    """
    try:
        long_url = await url_service.get_original_url(short_url)
    except URLUnavailableError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="URL not found"
        )

    return RedirectResponse(url=long_url, status_code=status.HTTP_302_FOUND)
