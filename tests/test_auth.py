"""Tests for registration, login and the auth dependencies."""

from datetime import datetime, timedelta, timezone

import jwt
import pytest

from storefront.config import settings
from storefront.models import User
from storefront.services.auth_service import (
    create_access_token,
    decode_access_token,
    hash_password,
    verify_password,
)
from storefront.services.errors import UnauthorizedError
from tests.conftest import PASSWORD


class TestPasswords:
    def test_hash_is_salted_and_verifiable(self):
        first = hash_password("hunter22")
        second = hash_password("hunter22")
        assert first != second
        assert "hunter22" not in first
        assert verify_password("hunter22", first)
        assert not verify_password("hunter23", first)

    def test_garbage_hash_does_not_verify(self):
        assert verify_password("hunter22", "not-a-bcrypt-hash") is False


class TestTokens:
    def test_round_trip(self, user):
        assert decode_access_token(create_access_token(user)) == user.id

    def test_expired_token(self, user):
        token = create_access_token(user, expires_minutes=-1)
        with pytest.raises(UnauthorizedError):
            decode_access_token(token)

    def test_wrong_signature(self, user):
        token = jwt.encode(
            {"sub": str(user.id), "exp": datetime.now(timezone.utc) + timedelta(minutes=5)},
            "someone-else",
            algorithm="HS256",
        )
        with pytest.raises(UnauthorizedError):
            decode_access_token(token)


class TestRegister:
    def test_register(self, client, db_session):
        response = client.post(
            "/api/auth/register",
            json={"first_name": "Carol", "email": "Carol@Example.com", "password": "pa55word"},
        )
        assert response.status_code == 201
        data = response.json()
        assert data["user"]["email"] == "carol@example.com"
        assert data["user"]["role"] == "user"
        assert decode_access_token(data["token"]) == data["user"]["id"]
        assert "token" in response.cookies

        stored = db_session.query(User).filter(User.email == "carol@example.com").one()
        assert stored.password_hash != "pa55word"
        assert verify_password("pa55word", stored.password_hash)

    def test_default_admin_email_gets_admin_role(self, client):
        response = client.post(
            "/api/auth/register",
            json={"first_name": "Owner", "email": settings.DEFAULT_ADMIN_EMAIL, "password": "pa55word"},
        )
        assert response.json()["user"]["role"] == "admin"

    def test_duplicate_email(self, client, user):
        response = client.post(
            "/api/auth/register",
            json={"first_name": "Alice", "email": "ALICE@example.com", "password": "pa55word"},
        )
        assert response.status_code == 400
        assert response.json()["detail"] == "User already exists with this email"

    @pytest.mark.parametrize("payload", [
        {"email": "x@example.com", "password": "pa55word"},
        {"first_name": "X", "password": "pa55word"},
        {"first_name": "X", "email": "x@example.com"},
    ])
    def test_missing_fields(self, client, payload):
        response = client.post("/api/auth/register", json=payload)
        assert response.status_code == 400

    def test_short_password(self, client):
        response = client.post(
            "/api/auth/register",
            json={"first_name": "X", "email": "x@example.com", "password": "12345"},
        )
        assert response.status_code == 400

    def test_invalid_email(self, client):
        response = client.post(
            "/api/auth/register",
            json={"first_name": "X", "email": "not-an-email", "password": "pa55word"},
        )
        assert response.status_code == 400


class TestLogin:
    def test_login(self, client, user):
        response = client.post(
            "/api/auth/login", json={"email": "alice@example.com", "password": PASSWORD}
        )
        assert response.status_code == 200
        assert response.json()["user"]["id"] == user.id

    def test_cookie_authenticates_later_requests(self, client, user):
        client.post("/api/auth/login", json={"email": "alice@example.com", "password": PASSWORD})
        response = client.get("/api/auth/me")
        assert response.status_code == 200
        assert response.json()["email"] == "alice@example.com"

    @pytest.mark.parametrize("email, password", [
        ("alice@example.com", "wrong-password"),
        ("nobody@example.com", PASSWORD),
    ])
    def test_invalid_credentials(self, client, user, email, password):
        response = client.post("/api/auth/login", json={"email": email, "password": password})
        assert response.status_code == 401
        assert response.json()["detail"] == "Invalid credentials"

    def test_missing_fields(self, client):
        response = client.post("/api/auth/login", json={"email": "alice@example.com"})
        assert response.status_code == 400

    def test_logout_clears_cookie(self, client, user):
        client.post("/api/auth/login", json={"email": "alice@example.com", "password": PASSWORD})
        response = client.get("/api/auth/logout")
        assert response.status_code == 200
        assert client.get("/api/auth/me").status_code == 401


class TestCurrentUser:
    def test_me(self, client, user_headers):
        response = client.get("/api/auth/me", headers=user_headers)
        assert response.json()["first_name"] == "Alice"
        assert "password_hash" not in response.json()

    @pytest.mark.parametrize("headers", [
        {},
        {"Authorization": "Bearer garbage"},
        {"Authorization": "Basic YWxpY2U6c2VjcmV0"},
    ])
    def test_unauthorized(self, client, headers):
        response = client.get("/api/auth/me", headers=headers)
        assert response.status_code == 401
        assert response.json()["detail"] == "Not authorized to access this route"

    def test_deleted_user_token(self, client, db_session, user, user_headers):
        db_session.delete(user)
        db_session.commit()
        assert client.get("/api/auth/me", headers=user_headers).status_code == 401

    def test_update_profile(self, client, user_headers):
        response = client.put("/api/auth/me", json={"last_name": "Liddell"}, headers=user_headers)
        assert response.status_code == 200
        assert response.json()["last_name"] == "Liddell"
        assert response.json()["first_name"] == "Alice"

    def test_update_profile_requires_a_field(self, client, user_headers):
        response = client.put("/api/auth/me", json={}, headers=user_headers)
        assert response.status_code == 400

    def test_whitespace_only_name_is_not_saved(self, client, db_session, user, user_headers):
        response = client.put("/api/auth/me", json={"first_name": "   "}, headers=user_headers)
        assert response.status_code == 400
        db_session.refresh(user)
        assert user.first_name == "Alice"

    def test_blank_name_is_skipped_alongside_a_real_one(self, client, user_headers):
        response = client.put(
            "/api/auth/me", json={"first_name": "  ", "last_name": " Liddell "}, headers=user_headers
        )
        assert response.status_code == 200
        assert response.json()["first_name"] == "Alice"
        assert response.json()["last_name"] == "Liddell"

    def test_profile_has_no_verification_flag(self, client, user_headers):
        assert "is_verified" not in client.get("/api/auth/me", headers=user_headers).json()
