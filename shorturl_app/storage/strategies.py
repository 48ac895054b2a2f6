"""
Mapping store strategies using Strategy Pattern.
Allows switching between key-value backends (Redis, In-Memory).

Persisted layout: one key per short code, value is the original URL as a
plain string, expiration enforced by the backend.
"""

import time
from abc import ABC, abstractmethod
from datetime import timedelta
from typing import Callable, Dict, Optional, Tuple

from redis.asyncio import Redis
from redis.exceptions import RedisError

from shorturl_app.constants import MAPPING_TTL
from shorturl_app.exceptions import StorageError, URLNotFoundError
from shorturl_app.logging_config import get_logger

logger = get_logger(__name__)


class URLRepository(ABC):
    """
    Abstract base class for mapping stores.

    This is the Strategy Pattern interface: the URL service only talks to
    this contract, never to a concrete client.

    All methods are async because store operations involve network I/O.
    """

    def __init__(self, ttl: timedelta = MAPPING_TTL):
        self.ttl = ttl

    @abstractmethod
    async def save_url_mapping(self, short_code: str, original_url: str, user_id: str) -> None:
        """
        Save the mapping with the repository TTL.

        An existing key is overwritten and its expiration clock reset.
        user_id is part of the contract but is not persisted.

        Raises:
            StorageError: If the backend write failed
        """
        pass

    @abstractmethod
    async def retrieve_initial_url(self, short_code: str) -> str:
        """
        Get the original URL for a short code.

        Raises:
            URLNotFoundError: If the code is absent or expired
            StorageError: If the backend read failed
        """
        pass

    async def exists(self, short_code: str) -> bool:
        """
        Check if a short code currently maps to a URL.

        Note: any retrieval error counts as "does not exist", so during a
        store outage every code looks missing.
        """
        try:
            await self.retrieve_initial_url(short_code)
        except (URLNotFoundError, StorageError):
            return False
        return True

    async def ping(self) -> None:
        """Verify the backend is reachable (raises StorageError)"""

    async def close(self) -> None:
        """Release backend resources"""


class RedisURLRepository(URLRepository):
    """
    Redis-backed mapping store.

    Uses the native key expiration (SET ... EX) so expired mappings simply
    disappear; reads never refresh the TTL.
    """

    def __init__(self, redis_client: Redis, ttl: timedelta = MAPPING_TTL):
        """
        Initialize Redis repository.

        Args:
            redis_client: redis.asyncio.Redis instance, opened once per process
            ttl: Lifetime of every written mapping
        """
        super().__init__(ttl)
        self.redis = redis_client

    async def save_url_mapping(self, short_code: str, original_url: str, user_id: str) -> None:
        try:
            await self.redis.set(short_code, original_url, ex=self.ttl)
        except RedisError as e:
            logger.error(f"Redis set error for {short_code}: {e}")
            raise StorageError(f"Failed to save mapping for {short_code}") from e

    async def retrieve_initial_url(self, short_code: str) -> str:
        try:
            value = await self.redis.get(short_code)
        except RedisError as e:
            logger.warning(f"Redis get error for {short_code}: {e}")
            raise StorageError(f"Failed to read mapping for {short_code}") from e

        if not value:
            raise URLNotFoundError(short_code)
        return value.decode("utf-8") if isinstance(value, bytes) else value

    async def ping(self) -> None:
        try:
            pong = await self.redis.ping()
        except RedisError as e:
            raise StorageError(f"Error init Redis: {e}") from e
        logger.info(f"Redis started successfully: pong message = {{{pong}}}")

    async def close(self) -> None:
        await self.redis.aclose()


class InMemoryURLRepository(URLRepository):
    """
    In-memory mapping store using a Python dict.

    Unlike a plain dict cache it does enforce the TTL, so it behaves like
    Redis for the service and the tests. An expired key is dropped when it
    is read, and every write sweeps all expired keys, so codes that are
    never read again do not pile up.

    Pros:
    - No external dependencies
    - Deterministic expiry with an injected clock

    Cons:
    - Not shared between processes
    - Lost on restart
    """

    def __init__(
        self,
        ttl: timedelta = MAPPING_TTL,
        clock: Optional[Callable[[], float]] = None
    ):
        super().__init__(ttl)
        self._clock = clock or time.monotonic
        self._store: Dict[str, Tuple[str, float]] = {}

    async def save_url_mapping(self, short_code: str, original_url: str, user_id: str) -> None:
        now = self._clock()
        self._purge_expired(now)
        self._store[short_code] = (original_url, now + self.ttl.total_seconds())

    async def retrieve_initial_url(self, short_code: str) -> str:
        entry = self._store.get(short_code)
        if entry is None:
            raise URLNotFoundError(short_code)

        original_url, expires_at = entry
        if self._clock() >= expires_at:
            del self._store[short_code]
            raise URLNotFoundError(short_code)
        if not original_url:
            raise URLNotFoundError(short_code)
        return original_url

    def _purge_expired(self, now: float) -> None:
        expired = [code for code, (_, expires_at) in self._store.items() if now >= expires_at]
        for code in expired:
            del self._store[code]

    async def close(self) -> None:
        self._store.clear()

    def __len__(self) -> int:
        return len(self._store)
