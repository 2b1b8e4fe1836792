"""Tests for password hashing and access tokens."""

from backoffice.utils.security import (
    create_access_token,
    decode_access_token,
    hash_password,
    verify_password,
)

SECRET = "unit-test-secret"


class TestPasswords:
    def test_round_trip(self):
        hashed = hash_password("s3cret")
        assert hashed != "s3cret"
        assert verify_password("s3cret", hashed)
        assert not verify_password("wrong", hashed)

    def test_malformed_hash_is_rejected(self):
        assert verify_password("s3cret", "not-a-bcrypt-hash") is False


class TestTokens:
    def test_claims_survive_encoding(self):
        token = create_access_token({"sub": "7", "role": "admin"}, SECRET)
        payload = decode_access_token(token, SECRET)
        assert payload["sub"] == "7"
        assert "exp" in payload

    def test_wrong_secret_returns_none(self):
        token = create_access_token({"sub": "7"}, SECRET)
        assert decode_access_token(token, "other-secret") is None

    def test_expired_token_returns_none(self):
        token = create_access_token({"sub": "7"}, SECRET, expires_minutes=-1)
        assert decode_access_token(token, SECRET) is None
