from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Loading priority (highest to lowest):
    1. Environment variables
    2. .env file
    3. Default values below

    Note: the mapping TTL is NOT configurable here, see constants.MAPPING_TTL.
    """

    # Environment
    environment: str = "development"
    debug: bool = True

    # Application
    app_name: str = "URL Shortener"
    app_version: str = "1.0.0"

    # Server
    host: str = "0.0.0.0"
    port: int = 9808

    # Public prefix used to build short URLs in responses
    base_url: str = "http://localhost:9808"

    # Mapping store settings
    store_backend: str = "redis"  # Options: "redis", "memory"
    redis_addr: str = "localhost:6379"  # host:port, read from REDIS_ADDR
    redis_password: str = ""
    redis_db: int = 0
    redis_socket_timeout: float = 5.0  # Connection-level request timeout (seconds)

    # Rate limiting (configuration only, no limiter consumes it)
    rate_limit_per_minute: int = 100

    # Logging
    log_level: str = "INFO"
    log_json: bool = False

    # Pydantic v2 configuration
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    @property
    def redis_host(self) -> str:
        host, _, _ = self.redis_addr.rpartition(":")
        return host or self.redis_addr

    @property
    def redis_port(self) -> int:
        _, sep, port = self.redis_addr.rpartition(":")
        return int(port) if sep and port else 6379


@lru_cache()
def get_settings() -> Settings:
    """Return the process-wide settings (read once)."""
    return Settings()
