"""Tests for credential verification and login."""

import pytest
from fastapi.testclient import TestClient

from shop.exceptions import AuthenticationError
from shop.main import app
from shop.services import auth_service as auth_service_module
from shop.services.auth_service import (
    INVALID_CREDENTIALS_MESSAGE,
    AuthService,
    get_token_verifier,
    prepare_credential_checks,
)


class TestValidateUser:
    """Tests for AuthService.validate_user()."""

    def test_correct_credentials(self, db_session, user) -> None:
        identity = AuthService(db_session).validate_user("ana@example.com", "secret123")

        assert identity.id == 7
        assert identity.email == "ana@example.com"
        assert not hasattr(identity, "password_hash")

    def test_wrong_password_and_unknown_email_fail_identically(self, db_session, user) -> None:
        service = AuthService(db_session)

        with pytest.raises(AuthenticationError) as wrong_password:
            service.validate_user("ana@example.com", "wrong-password")
        with pytest.raises(AuthenticationError) as unknown_email:
            service.validate_user("nobody@example.com", "secret123")

        assert str(wrong_password.value) == str(unknown_email.value) == INVALID_CREDENTIALS_MESSAGE


class TestLogin:
    """Tests for AuthService.login()."""

    def test_issues_verifiable_token(self, db_session, user) -> None:
        response = AuthService(db_session).login("ana@example.com", "secret123")

        claims = get_token_verifier().verify(response.access_token)

        assert claims.id == 7
        assert claims.email == "ana@example.com"

    def test_bad_credentials_issue_nothing(self, db_session, user) -> None:
        with pytest.raises(AuthenticationError):
            AuthService(db_session).login("ana@example.com", "nope")


class TestUnknownEmailCost:
    """The comparison hash for unknown emails is built before any login."""

    def test_startup_prepares_comparison_hash(self) -> None:
        auth_service_module._dummy_password_hash.cache_clear()

        with TestClient(app):
            assert auth_service_module._dummy_password_hash.cache_info().currsize == 1

    def test_unknown_email_does_not_hash_after_preparation(self, db_session, monkeypatch) -> None:
        prepare_credential_checks()

        def no_hashing(*args, **kwargs):
            raise AssertionError("hash_password called during login")

        monkeypatch.setattr(auth_service_module, "hash_password", no_hashing)

        with pytest.raises(AuthenticationError, match=INVALID_CREDENTIALS_MESSAGE):
            AuthService(db_session).validate_user("nobody@example.com", "secret123")
