"""Shared fixtures: in-memory SQLite database and an API client bound to it."""

import os

# Settings are read at import time, so the environment must be ready first
os.environ["JWT_SECRET"] = "test-signing-secret-0123456789abcdef"
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["BCRYPT_ROUNDS"] = "4"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from shop.database import Base, get_db
from shop.main import app
from shop.models import Product, User
from shop.services.security import hash_password

engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db_session():
    """Fresh schema per test."""
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db_session) -> TestClient:
    """API client whose requests share the test session."""

    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def catalog(db_session):
    """Product 1 at 10 and product 2 at 5."""
    products = [
        Product(id=1, name="Keyboard", price=10),
        Product(id=2, name="Mouse", price=5),
    ]
    db_session.add_all(products)
    db_session.commit()
    return products


@pytest.fixture
def user(db_session) -> User:
    """Registered user 7 with password 'secret123'."""
    user = User(
        id=7,
        name="Ana",
        email="ana@example.com",
        password_hash=hash_password("secret123", rounds=4),
    )
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user


@pytest.fixture
def auth_headers(client, user) -> dict:
    """Bearer header for the registered user."""
    response = client.post(
        "/auth/login", json={"email": "ana@example.com", "password": "secret123"}
    )
    assert response.status_code == 200
    return {"Authorization": f"Bearer {response.json()['access_token']}"}
