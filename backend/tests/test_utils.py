"""
Unit tests for utility functions and error mapping
"""
from datetime import timedelta

import pytest
from fastapi import FastAPI
from httpx import AsyncClient, ASGITransport
from sqlalchemy.exc import OperationalError

from cardbox.config import settings
from cardbox.errors import register_exception_handlers, format_validation_errors, NotFound
from cardbox.utils.auth import (
    hash_password,
    verify_password,
    create_access_token,
    decode_access_token,
    create_session_token,
)


class TestAuthUtils:
    """Test authentication utilities"""

    def test_hash_is_salted(self):
        """Same password hashes differently each time"""
        first = hash_password("pw")
        second = hash_password("pw")

        assert first != second
        assert verify_password("pw", first)
        assert verify_password("pw", second)
        assert not verify_password("pw ", first)

    def test_session_token_claims(self):
        token = create_session_token("user-1", "alice")

        payload = decode_access_token(token)

        assert payload["sub"] == "user-1"
        assert payload["username"] == "alice"
        assert payload["exp"] - payload["iat"] == settings.jwt_expire_hours * 3600

    def test_decode_invalid_token(self):
        assert decode_access_token("invalid_token") is None

    def test_token_expiration(self):
        """Expired tokens fail to decode"""
        token = create_access_token(
            data={"sub": "user"},
            expires_delta=timedelta(seconds=-1)
        )

        assert decode_access_token(token) is None


def _error_app() -> FastAPI:
    app = FastAPI()
    register_exception_handlers(app)

    @app.get("/db")
    async def db_failure():
        raise OperationalError("SELECT 1", {}, Exception("disk I/O error at /var/data"))

    @app.get("/missing")
    async def missing():
        raise NotFound("Card not found")

    return app


class TestErrorMapping:
    """Errors render as {"detail": ...} with mapped status codes"""

    @pytest.mark.asyncio
    async def test_domain_error(self):
        async with AsyncClient(transport=ASGITransport(app=_error_app()), base_url="http://test") as ac:
            response = await ac.get("/missing")

        assert response.status_code == 404
        assert response.json() == {"detail": "Card not found"}

    @pytest.mark.asyncio
    async def test_database_error_hides_details(self, monkeypatch):
        monkeypatch.setattr(settings, "expose_internal_errors", False)
        async with AsyncClient(transport=ASGITransport(app=_error_app()), base_url="http://test") as ac:
            response = await ac.get("/db")

        assert response.status_code == 500
        assert response.json() == {"detail": "Internal server error"}

    @pytest.mark.asyncio
    async def test_database_error_exposed_in_debug(self, monkeypatch):
        monkeypatch.setattr(settings, "expose_internal_errors", True)
        async with AsyncClient(transport=ASGITransport(app=_error_app()), base_url="http://test") as ac:
            response = await ac.get("/db")

        assert response.status_code == 500
        assert "disk I/O error" in response.json()["detail"]

    def test_format_validation_errors(self):
        message = format_validation_errors([
            {"loc": ("body", "category"), "msg": "Input should be 'story'"},
            {"loc": ("body", "tags", 0), "msg": "Input should be a valid string"},
        ])

        assert message == "category: Input should be 'story'; tags.0: Input should be a valid string"
