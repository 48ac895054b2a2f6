"""
Tests for short code derivation.
"""
import base64
import hashlib

from shorturl_app.services.short_code import generate_short_link, is_short_code


class TestGenerateShortLink:
    """Test the deterministic short code deriver"""

    def test_same_input_same_code(self):
        """Test that the same URL and user always give the same code"""
        code1 = generate_short_link("https://example.com/a", "user1")
        code2 = generate_short_link("https://example.com/a", "user1")

        assert code1 == code2

    def test_different_users_different_codes(self):
        """Test that two users shortening the same URL get different codes"""
        code1 = generate_short_link("https://example.com/a", "user1")
        code2 = generate_short_link("https://example.com/a", "user2")

        assert code1 != code2

    def test_different_urls_different_codes(self):
        codes = {
            generate_short_link(f"https://example.com/page/{i}", "user1")
            for i in range(100)
        }

        assert len(codes) == 100

    def test_code_is_eight_url_safe_characters(self):
        """Test that padding never shows up and only URL-safe chars are used"""
        for i in range(50):
            code = generate_short_link(f"https://example.com/{i}", f"user{i}")

            assert len(code) == 8
            assert "=" not in code
            assert "+" not in code and "/" not in code
            assert is_short_code(code)

    def test_matches_truncated_urlsafe_base64_of_sha256(self):
        """Test the exact derivation: first 8 encoded chars of the first 8 digest bytes"""
        digest = hashlib.sha256(b"https://example.com/a-user1").digest()
        expected = base64.urlsafe_b64encode(digest[:8]).decode()[:8]

        assert generate_short_link("https://example.com/a", "user1") == expected

    def test_inputs_joined_with_dash(self):
        """Test that the separator is a plain dash (and therefore ambiguous)"""
        assert generate_short_link("https://a.io/x-y", "z") == generate_short_link("https://a.io/x", "y-z")

    def test_url_hashed_without_normalization(self):
        assert generate_short_link("https://example.com", "u") != generate_short_link("https://example.com/", "u")

    def test_empty_inputs_still_produce_code(self):
        assert is_short_code(generate_short_link("", ""))


class TestIsShortCode:

    def test_rejects_wrong_length(self):
        assert not is_short_code("abc")
        assert not is_short_code("abcdefghi")

    def test_rejects_non_url_safe_characters(self):
        assert not is_short_code("abc/efg=")

    def test_accepts_dash_and_underscore(self):
        assert is_short_code("ab-_CD12")
