"""Tests for password hashing and the bearer token life cycle."""

from datetime import datetime, timedelta, timezone

import jwt
import pytest

from shop.exceptions import AuthenticationError
from shop.schemas.auth import AuthenticatedUser
from shop.services.security import (
    INVALID_TOKEN_MESSAGE,
    TokenIssuer,
    TokenVerifier,
    hash_password,
    verify_password,
)

SECRET = "unit-test-signing-secret-abcdefghijklmnop"
IDENTITY = AuthenticatedUser(id=7, email="ana@example.com")


def issued_minutes_ago(minutes: int) -> str:
    issued_at = datetime.now(timezone.utc) - timedelta(minutes=minutes)
    issuer = TokenIssuer(SECRET, expires_in=timedelta(hours=1), clock=lambda: issued_at)
    return issuer.issue(IDENTITY)


class TestPasswordHashing:
    """Tests for hash_password() / verify_password()."""

    def test_hash_is_not_plaintext(self) -> None:
        hashed = hash_password("secret123", rounds=4)

        assert hashed != "secret123"
        assert verify_password("secret123", hashed)

    def test_wrong_password(self) -> None:
        assert not verify_password("secret124", hash_password("secret123", rounds=4))

    def test_same_password_hashes_differently(self) -> None:
        assert hash_password("secret123", rounds=4) != hash_password("secret123", rounds=4)

    def test_garbage_hash_does_not_verify(self) -> None:
        assert not verify_password("secret123", "not-a-bcrypt-hash")


class TestTokens:
    """Tests for TokenIssuer / TokenVerifier."""

    def test_claims_round_trip(self) -> None:
        token = TokenIssuer(SECRET).issue(IDENTITY)

        claims = TokenVerifier(SECRET).verify(token)

        assert claims.email == "ana@example.com"
        assert claims.id == 7

    def test_accepted_thirty_minutes_after_issue(self) -> None:
        claims = TokenVerifier(SECRET).verify(issued_minutes_ago(30))

        assert claims.id == 7

    def test_rejected_sixty_one_minutes_after_issue(self) -> None:
        with pytest.raises(AuthenticationError):
            TokenVerifier(SECRET).verify(issued_minutes_ago(61))

    def test_expiry_is_one_hour_after_issue(self) -> None:
        issued_at = datetime(2026, 1, 1, 12, 0, tzinfo=timezone.utc)
        token = TokenIssuer(SECRET, clock=lambda: issued_at).issue(IDENTITY)

        payload = jwt.decode(token, options={"verify_signature": False})

        assert payload["exp"] - payload["iat"] == 3600

    @pytest.mark.parametrize("token", [None, "", "not.a.token", "garbage"])
    def test_missing_or_malformed_token(self, token) -> None:
        with pytest.raises(AuthenticationError, match=INVALID_TOKEN_MESSAGE):
            TokenVerifier(SECRET).verify(token)

    def test_wrong_signature(self) -> None:
        token = TokenIssuer("another-secret-of-sufficient-length-000").issue(IDENTITY)

        with pytest.raises(AuthenticationError, match=INVALID_TOKEN_MESSAGE):
            TokenVerifier(SECRET).verify(token)

    def test_token_without_identity_claims(self) -> None:
        token = jwt.encode(
            {"exp": datetime.now(timezone.utc) + timedelta(minutes=5)}, SECRET, algorithm="HS256"
        )

        with pytest.raises(AuthenticationError):
            TokenVerifier(SECRET).verify(token)

    def test_deterministic_for_same_time(self) -> None:
        issued_at = datetime(2026, 1, 1, 12, 0, tzinfo=timezone.utc)
        issuer = TokenIssuer(SECRET, clock=lambda: issued_at)

        assert issuer.issue(IDENTITY) == issuer.issue(IDENTITY)
