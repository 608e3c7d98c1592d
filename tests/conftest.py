"""Pytest fixtures for storefront tests."""

import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["EVENTS_ENABLED"] = "false"
os.environ["JWT_SECRET"] = "test-secret"
os.environ["MEDIA_BASE_URL"] = "http://media.test"
os.environ["DEFAULT_ADMIN_EMAIL"] = "owner@example.com"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from storefront.database import Base, get_db, init_db
from storefront.main import app
from storefront.models import Product, User
from storefront.repositories.address_repository import AddressRepository
from storefront.services.auth_service import create_access_token, hash_password

PASSWORD = "secret123"
PASSWORD_HASH = hash_password(PASSWORD)


@pytest.fixture
def engine():
    """In-memory SQLite database shared by every session of a test."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    @event.listens_for(engine, "connect")
    def _enable_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    init_db(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autocommit=False, autoflush=False)


@pytest.fixture
def db_session(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def client(session_factory):
    """API client whose requests use the test database."""
    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


def make_user(db, email, role="user", first_name="Test"):
    user = User(
        first_name=first_name,
        last_name="User",
        email=email,
        password_hash=PASSWORD_HASH,
        role=role,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


def auth_headers(user):
    return {"Authorization": f"Bearer {create_access_token(user)}"}


@pytest.fixture
def user(db_session):
    return make_user(db_session, "alice@example.com", first_name="Alice")


@pytest.fixture
def other_user(db_session):
    return make_user(db_session, "bob@example.com", first_name="Bob")


@pytest.fixture
def admin(db_session):
    return make_user(db_session, "admin@example.com", role="admin", first_name="Ada")


@pytest.fixture
def user_headers(user):
    return auth_headers(user)


@pytest.fixture
def other_headers(other_user):
    return auth_headers(other_user)


@pytest.fixture
def admin_headers(admin):
    return auth_headers(admin)


def make_product(db, name="Linen Shirt", price=10.0, images=None, **fields):
    product = Product(
        name=name,
        price=price,
        size=fields.pop("size", "M"),
        category=fields.pop("category", "shirts"),
        images=images if images is not None else [{"id": "img-1", "url": "/uploads/shirt.jpg"}],
        **fields,
    )
    db.add(product)
    db.commit()
    db.refresh(product)
    return product


@pytest.fixture
def shirt(db_session):
    return make_product(db_session, "Linen Shirt", 10.0)


@pytest.fixture
def socks(db_session):
    return make_product(
        db_session,
        "Wool Socks",
        5.0,
        images=[{"id": "img-2", "url": "https://cdn.example.com/socks.jpg"}],
        category="accessories",
    )


ADDRESS_FIELDS = {
    "country_region": "India",
    "first_name": "Alice",
    "last_name": "User",
    "address": "12 MG Road",
    "apartment_suite": "Flat 4",
    "city": "Bengaluru",
    "state": "Karnataka",
    "pin_code": "560001",
    "phone": "+91 9876543210",
}


def make_address(db, owner, default=False, **overrides):
    data = dict(ADDRESS_FIELDS, default_address=default, **overrides)
    return AddressRepository(db).create(owner.id, data)


@pytest.fixture
def address(db_session, user):
    return make_address(db_session, user, default=True)
