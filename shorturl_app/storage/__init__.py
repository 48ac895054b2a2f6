"""
Mapping store module for URL shortener.
Implements Strategy Pattern for flexible key-value backends.
"""

from .strategies import URLRepository, RedisURLRepository, InMemoryURLRepository
from .factory import StoreFactory, StoreBackend

__all__ = [
    "URLRepository",
    "RedisURLRepository",
    "InMemoryURLRepository",
    "StoreFactory",
    "StoreBackend",
]
