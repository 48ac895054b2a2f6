"""
Factory for creating mapping store instances.

The factory only builds the repository; opening it (PING) and closing it is
owned by the application lifespan, so one client lives for the whole process.
"""

from enum import Enum
from typing import Optional

from redis.asyncio import Redis

from shorturl_app.config import Settings, get_settings
from shorturl_app.logging_config import get_logger
from .strategies import URLRepository, RedisURLRepository, InMemoryURLRepository

logger = get_logger(__name__)


class StoreBackend(Enum):
    """Available mapping store backends"""
    REDIS = "redis"
    MEMORY = "memory"


class StoreFactory:
    """Simple factory for creating mapping store instances."""

    @classmethod
    def create(
        cls,
        backend: Optional[StoreBackend] = None,
        settings: Optional[Settings] = None
    ) -> URLRepository:
        """
        Create a repository for the requested backend.

        Args:
            backend: Type of store backend (from enum).
                     If None, uses value from settings.
            settings: Settings to read connection options from

        Returns:
            An unopened URLRepository

        Raises:
            ValueError: If backend is unknown
        """
        settings = settings or get_settings()
        if backend is None:
            backend = StoreBackend(settings.store_backend)

        if backend == StoreBackend.REDIS:
            redis_client = Redis(
                host=settings.redis_host,
                port=settings.redis_port,
                password=settings.redis_password or None,
                db=settings.redis_db,
                socket_connect_timeout=settings.redis_socket_timeout,
                socket_timeout=settings.redis_socket_timeout,
                decode_responses=True,
            )
            logger.info(f"Redis store configured at {settings.redis_addr}")
            return RedisURLRepository(redis_client)

        elif backend == StoreBackend.MEMORY:
            logger.info("In-memory store configured")
            return InMemoryURLRepository()

        else:
            raise ValueError(f"Unknown store backend: {backend}")
