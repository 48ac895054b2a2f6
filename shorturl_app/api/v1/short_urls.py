from fastapi import APIRouter, Depends, HTTPException, status

from shorturl_app.config import Settings
from shorturl_app.dependencies import get_app_settings, get_url_service
from shorturl_app.exceptions import StorageError, URLUnavailableError
from shorturl_app.logging_config import get_logger
from shorturl_app.schemas.url import ShortURLCreate, ShortURLCreated, ShortURLInfo
from shorturl_app.services.url_service import URLService

logger = get_logger(__name__)

router = APIRouter(prefix="/short-urls", tags=["short-urls"])


def build_short_url(settings: Settings, short_code: str) -> str:
    return f"{settings.base_url.rstrip('/')}/{short_code}"


async def create_short_url_response(
    url_data: ShortURLCreate,
    url_service: URLService,
    settings: Settings
) -> ShortURLCreated:
    """Shared by the v1 endpoint and the legacy /create-short-url alias"""
    try:
        short_code = await url_service.create_short_url(url_data.long_url, url_data.user_id)
    except StorageError as e:
        logger.error(f"Failed to create short URL for user {url_data.user_id!r}: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create short URL"
        )
    return ShortURLCreated(short_url=build_short_url(settings, short_code))


@router.post("", response_model=ShortURLCreated, status_code=status.HTTP_201_CREATED)
async def create_short_url(
    url_data: ShortURLCreate,
    url_service: URLService = Depends(get_url_service),
    settings: Settings = Depends(get_app_settings)
):
    """Create a new short URL (body is validated before the service is reached)"""
    return await create_short_url_response(url_data, url_service, settings)


@router.get("/{short_code}", response_model=ShortURLInfo)
async def get_short_url(
    short_code: str,
    url_service: URLService = Depends(get_url_service),
    settings: Settings = Depends(get_app_settings)
):
    """Get the original URL behind a short code"""
    try:
        long_url = await url_service.get_original_url(short_code)
    except URLUnavailableError:
        # Missing, expired and store failure all look the same to clients
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="URL not found"
        )
    return ShortURLInfo(short_url=build_short_url(settings, short_code), long_url=long_url)
