"""
Short code derivation for URL shortener.

A short code is a content fingerprint of (long URL, user ID), not a random
or sequential identifier:

    sha256("<long_url>-<user_id>")  ->  first 8 bytes
                                    ->  URL-safe base64 (12 chars, padded)
                                    ->  first 8 characters

Pros: Deterministic, no DB round-trip, same user + URL always reuses the code
Cons: 48 bits survive the truncation, collisions silently overwrite
"""

import base64
import hashlib
import re

from shorturl_app.constants import SHORT_CODE_LENGTH

_SHORT_CODE_RE = re.compile(r"^[A-Za-z0-9_-]{%d}$" % SHORT_CODE_LENGTH)


def generate_short_link(long_url: str, user_id: str) -> str:
    """
    Derive the short code for a long URL owned by a user.

    Args:
        long_url: The original URL, hashed exactly as given
        user_id: User identifier folded into the hash input

    Returns:
        An 8 character URL-safe base64 string
    """
    payload = f"{long_url}-{user_id}"
    digest = hashlib.sha256(payload.encode("utf-8")).digest()

    # Truncation happens on encoded characters, not on raw bytes
    encoded = base64.urlsafe_b64encode(digest[:8]).decode("ascii")
    return encoded[:SHORT_CODE_LENGTH]


def is_short_code(value: str) -> bool:
    """Check that a string has the shape of a derived short code"""
    return bool(_SHORT_CODE_RE.match(value))
