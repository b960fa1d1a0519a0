"""API tests for login and protected-route access."""

from datetime import datetime, timedelta, timezone

from shop.config import settings
from shop.schemas.auth import AuthenticatedUser
from shop.services.security import TokenIssuer


class TestLoginEndpoint:
    """Tests for POST /auth/login."""

    def test_login_returns_access_token(self, client, user) -> None:
        response = client.post(
            "/auth/login", json={"email": "ana@example.com", "password": "secret123"}
        )

        assert response.status_code == 200
        assert set(response.json()) == {"access_token"}

    def test_failures_are_indistinguishable(self, client, user) -> None:
        wrong_password = client.post(
            "/auth/login", json={"email": "ana@example.com", "password": "wrong-one"}
        )
        unknown_email = client.post(
            "/auth/login", json={"email": "ghost@example.com", "password": "secret123"}
        )

        assert wrong_password.status_code == unknown_email.status_code == 401
        assert wrong_password.json() == unknown_email.json() == {"detail": "Invalid email or password"}

    def test_missing_fields_are_rejected(self, client) -> None:
        response = client.post("/auth/login", json={"email": "ana@example.com"})

        assert response.status_code == 422


class TestProtectedRoutes:
    """Tests for the bearer token guard."""

    def test_no_token(self, client) -> None:
        response = client.get("/orders")

        assert response.status_code == 401
        assert response.headers["www-authenticate"] == "Bearer"

    def test_invalid_token(self, client) -> None:
        response = client.get("/orders", headers={"Authorization": "Bearer not.a.token"})

        assert response.status_code == 401

    def test_missing_and_invalid_token_look_the_same(self, client) -> None:
        missing = client.get("/users")
        invalid = client.get("/users", headers={"Authorization": "Bearer garbage"})

        assert missing.json() == invalid.json()

    def test_expired_token(self, client, user) -> None:
        issued_at = datetime.now(timezone.utc) - timedelta(minutes=61)
        token = TokenIssuer(
            settings.JWT_SECRET,
            expires_in=timedelta(minutes=settings.JWT_EXPIRY_MINUTES),
            clock=lambda: issued_at,
        ).issue(AuthenticatedUser(id=user.id, email=user.email))

        response = client.get("/orders", headers={"Authorization": f"Bearer {token}"})

        assert response.status_code == 401

    def test_valid_token(self, client, auth_headers) -> None:
        response = client.get("/orders", headers=auth_headers)

        assert response.status_code == 200
        assert response.json() == []
