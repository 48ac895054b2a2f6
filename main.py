from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI

from shorturl_app.config import Settings, get_settings
from shorturl_app.logging_config import setup_logging, get_logger
from shorturl_app.middleware import LoggingMiddleware, RouteConfigMiddleware, default_route_registry
from shorturl_app.storage import StoreFactory, URLRepository
from shorturl_app.api.v1 import short_urls
from shorturl_app.api import redirect

logger = get_logger("main")


def create_app(
    settings: Optional[Settings] = None,
    repository: Optional[URLRepository] = None
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        settings: Settings to use (defaults to environment-loaded settings)
        repository: Already built mapping store. When given, the caller owns
                    it and it is not closed at shutdown.
    """
    settings = settings or get_settings()
    setup_logging(level=settings.log_level, json_format=settings.log_json)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Open the store once; every request shares this handle
        store = repository if repository is not None else StoreFactory.create(settings=settings)
        try:
            # A failed PING still closes the client built above
            await store.ping()
            app.state.repository = store
            logger.info(f"{settings.app_name} started ({settings.environment})")
            yield
        finally:
            if repository is None:
                await store.close()
                logger.info("Mapping store closed")

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="A Redis-backed URL shortener service built with FastAPI",
        debug=settings.debug,
        lifespan=lifespan
    )
    app.state.settings = settings

    # Last added runs first: route config must be resolved before logging
    app.add_middleware(LoggingMiddleware)
    app.add_middleware(
        RouteConfigMiddleware,
        registry=default_route_registry(settings.rate_limit_per_minute)
    )

    @app.get("/")
    def read_root():
        """Root endpoint with API information"""
        return {
            "message": "Welcome to the URL Shortener API",
            "version": settings.app_version,
        }

    @app.get("/health")
    def health_check():
        """Health check endpoint"""
        return {"status": "healthy", "environment": settings.environment}

    ######## Include routers
    app.include_router(short_urls.router, prefix="/api/v1")
    # Catch-all /{short_url} must be registered last
    app.include_router(redirect.router)

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(app, host=get_settings().host, port=get_settings().port)
