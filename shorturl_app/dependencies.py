"""
FastAPI dependencies for dependency injection.

The repository is opened once by the application lifespan and kept on
app.state; these functions hand it (and the settings) to routes with
proper types instead of a stringly-typed request context.

Tests replace the repository either by passing one to create_app() or via
app.dependency_overrides[get_repository].
"""

from fastapi import Depends, Request

from shorturl_app.config import Settings
from shorturl_app.services.url_service import URLService
from shorturl_app.storage.strategies import URLRepository


def get_repository(request: Request) -> URLRepository:
    """Mapping store opened at startup."""
    return request.app.state.repository


def get_app_settings(request: Request) -> Settings:
    """Settings the application was created with."""
    return request.app.state.settings


def get_url_service(
    repository: URLRepository = Depends(get_repository)
) -> URLService:
    """
    Get URLService with its repository injected.

    Controller depends on service, service depends on the store.
    """
    return URLService(repository=repository)
