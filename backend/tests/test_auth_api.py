"""Tests for authentication endpoints and token handling."""

from datetime import timedelta

import pytest

from volleycoach.core.security import (
    create_access_token,
    decode_access_token,
    get_password_hash,
    get_user_id_from_token,
    verify_password,
)

from conftest import register


class TestSecurity:
    """Tests for password hashing and tokens."""

    def test_password_hash_round_trip(self):
        hashed = get_password_hash("secret123")

        assert hashed != "secret123"
        assert verify_password("secret123", hashed)
        assert not verify_password("wrong", hashed)

    def test_token_subject(self):
        token = create_access_token("user-1")

        assert decode_access_token(token)["sub"] == "user-1"
        assert get_user_id_from_token(token) == "user-1"

    def test_expired_token(self):
        token = create_access_token("user-1", expires_delta=timedelta(seconds=-1))

        assert decode_access_token(token) is None

    def test_garbage_token(self):
        assert get_user_id_from_token("not-a-token") is None


class TestRegister:
    """Tests for POST /auth/register."""

    def test_register(self, client):
        body = register(client, email="  Setter@Example.com ")

        assert body["token"]
        assert body["user"]["email"] == "setter@example.com"
        assert body["user"]["name"] == "Sam Setter"
        assert "password_hash" not in body["user"]

    @pytest.mark.parametrize("payload", [
        {"password": "secret123", "name": "Sam"},
        {"email": "sam@example.com", "name": "Sam"},
        {"email": "sam@example.com", "password": "secret123"},
        {"email": "not-an-email", "password": "secret123", "name": "Sam"},
        {"email": "sam@example.com", "password": "short", "name": "Sam"},
    ])
    def test_invalid_payloads(self, client, payload):
        response = client.post("/api/v1/auth/register", json=payload)
        assert response.status_code == 400

    def test_duplicate_email(self, client):
        register(client)

        response = client.post(
            "/api/v1/auth/register",
            json={"email": "SETTER@example.com", "password": "secret123", "name": "Again"},
        )
        assert response.status_code == 409


class TestLogin:
    """Tests for POST /auth/login."""

    def test_login(self, client):
        registered = register(client)

        response = client.post(
            "/api/v1/auth/login",
            json={"email": "setter@example.com", "password": "secret123"},
        )

        assert response.status_code == 200
        assert response.json()["user"]["id"] == registered["user"]["id"]

    def test_wrong_password(self, client):
        register(client)

        response = client.post(
            "/api/v1/auth/login",
            json={"email": "setter@example.com", "password": "wrong-password"},
        )
        assert response.status_code == 401

    def test_unknown_user(self, client):
        response = client.post(
            "/api/v1/auth/login",
            json={"email": "nobody@example.com", "password": "secret123"},
        )
        assert response.status_code == 401

    def test_missing_fields(self, client):
        response = client.post("/api/v1/auth/login", json={"email": "setter@example.com"})
        assert response.status_code == 400


class TestSession:
    """Tests for /auth/me and /auth/logout."""

    def test_me(self, client, auth):
        user_id, headers = auth

        response = client.get("/api/v1/auth/me", headers=headers)

        assert response.status_code == 200
        assert response.json()["user"]["id"] == user_id

    def test_me_requires_token(self, client):
        assert client.get("/api/v1/auth/me").status_code == 401

    def test_me_rejects_bad_token(self, client):
        response = client.get("/api/v1/auth/me", headers={"Authorization": "Bearer nonsense"})
        assert response.status_code == 401

    def test_me_unknown_user(self, client):
        token = create_access_token("deleted-user")

        response = client.get("/api/v1/auth/me", headers={"Authorization": f"Bearer {token}"})
        assert response.status_code == 404

    def test_logout(self, client, auth):
        _, headers = auth

        response = client.post("/api/v1/auth/logout", headers=headers)

        assert response.status_code == 200
        assert response.json() == {"message": "Logged out successfully"}
