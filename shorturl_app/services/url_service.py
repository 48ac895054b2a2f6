from shorturl_app.logging_config import get_logger
from shorturl_app.services.short_code import generate_short_link
from shorturl_app.storage.strategies import URLRepository

logger = get_logger(__name__)


class URLService:
    """
    URL Service with the mapping store injected.

    This follows the Dependency Injection pattern:
    - The repository is passed in (not created internally)
    - Easy to test (inject an in-memory repository)
    - Each call is a single request/response, no state kept between calls
    """

    def __init__(self, repository: URLRepository):
        """
        Initialize URL service.

        Args:
            repository: Mapping store shared by all requests of the process
        """
        self.repository = repository

    async def create_short_url(self, long_url: str, user_id: str) -> str:
        """Create a short code for long_url and store the mapping

        Process:
        1. Derive the code from (long_url, user_id)
        2. Save it with the fixed TTL (overwrites and restarts the clock)

        Raises:
            StorageError: If the store write failed. Nothing is retried.
        """
        short_code = generate_short_link(long_url, user_id)
        await self.repository.save_url_mapping(short_code, long_url, user_id)
        logger.debug(f"Stored mapping {short_code} -> {long_url}")
        return short_code

    async def get_original_url(self, short_code: str) -> str:
        """Resolve a short code

        Raises:
            URLNotFoundError: If the code is absent or expired
            StorageError: If the store read failed
        """
        return await self.repository.retrieve_initial_url(short_code)

    async def short_url_exists(self, short_code: str) -> bool:
        """Check if a short code currently resolves (store errors count as absent)"""
        return await self.repository.exists(short_code)
