"""
Exception hierarchy for the URL shortener.

    ShortURLError
    └── URLUnavailableError      lookup could not produce a URL
        ├── URLNotFoundError     short code absent or expired
        └── StorageError         key-value store unreachable / command failed

Lookups deliberately treat both leaves the same way at the HTTP boundary,
so routes catch URLUnavailableError and answer 404.
"""


class ShortURLError(Exception):
    """Base class for all URL shortener errors"""


class URLUnavailableError(ShortURLError):
    """A short code could not be resolved to an original URL"""


class URLNotFoundError(URLUnavailableError):
    """Short code was never saved or its TTL has elapsed"""

    def __init__(self, short_code: str):
        self.short_code = short_code
        super().__init__(f"Short URL not found: {short_code}")


class StorageError(URLUnavailableError):
    """The key-value store failed or could not be reached"""
