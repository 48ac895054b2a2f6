import asyncio
from datetime import timedelta

import pytest

from shorturl_app.exceptions import StorageError, URLNotFoundError, URLUnavailableError
from shorturl_app.services.short_code import generate_short_link
from shorturl_app.services.url_service import URLService


class TestURLService:
    """Test URL service business logic directly"""

    def test_create_returns_derived_code(self, repository):
        service = URLService(repository)

        short_code = asyncio.run(service.create_short_url("https://example.com/a", "user1"))

        assert short_code == generate_short_link("https://example.com/a", "user1")

    def test_round_trip(self, repository):
        """Test that a created code resolves to exactly the URL given"""
        service = URLService(repository)
        long_url = "https://example.com/some/path?q=1&r=two#frag"

        short_code = asyncio.run(service.create_short_url(long_url, "user1"))

        assert asyncio.run(service.get_original_url(short_code)) == long_url

    def test_same_url_two_users(self, repository):
        service = URLService(repository)

        code1 = asyncio.run(service.create_short_url("https://example.com/a", "user1"))
        code2 = asyncio.run(service.create_short_url("https://example.com/a", "user2"))

        assert code1 != code2
        assert asyncio.run(service.get_original_url(code1)) == "https://example.com/a"
        assert asyncio.run(service.get_original_url(code2)) == "https://example.com/a"

    def test_create_twice_is_idempotent(self, repository):
        service = URLService(repository)

        code1 = asyncio.run(service.create_short_url("https://example.com/a", "user1"))
        code2 = asyncio.run(service.create_short_url("https://example.com/a", "user1"))

        assert code1 == code2
        assert len(repository) == 1

    def test_resolve_after_ttl_elapsed(self, short_ttl_repository, clock):
        service = URLService(short_ttl_repository)
        short_code = asyncio.run(service.create_short_url("https://example.com/a", "user1"))

        clock.advance(timedelta(seconds=1))
        assert asyncio.run(service.get_original_url(short_code)) == "https://example.com/a"

        clock.advance(timedelta(seconds=1))
        with pytest.raises(URLNotFoundError):
            asyncio.run(service.get_original_url(short_code))

    def test_resolve_unknown_code(self, repository):
        service = URLService(repository)

        with pytest.raises(URLNotFoundError):
            asyncio.run(service.get_original_url("nonexist"))

    def test_exists(self, repository):
        service = URLService(repository)
        short_code = asyncio.run(service.create_short_url("https://example.com/a", "user1"))

        assert asyncio.run(service.short_url_exists(short_code)) is True
        assert asyncio.run(service.short_url_exists("nonexist")) is False

    def test_create_propagates_storage_error(self, unavailable_repository):
        """Test that a failed write fails the whole operation"""
        service = URLService(unavailable_repository)

        with pytest.raises(StorageError):
            asyncio.run(service.create_short_url("https://example.com/a", "user1"))

    def test_resolve_store_failure_is_unavailable(self, unavailable_repository):
        service = URLService(unavailable_repository)

        with pytest.raises(URLUnavailableError):
            asyncio.run(service.get_original_url("abcd1234"))

    def test_exists_false_when_store_down(self, unavailable_repository):
        service = URLService(unavailable_repository)

        assert asyncio.run(service.short_url_exists("abcd1234")) is False
