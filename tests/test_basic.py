"""
Basic application tests.

Validates that the FastAPI app starts correctly, the health endpoint
responds, and cross-cutting middleware applies to every response.
"""

import logging
from unittest.mock import MagicMock, patch

from fastapi.testclient import TestClient
from slowapi import Limiter
from slowapi.util import get_remote_address
from sqlalchemy.exc import OperationalError

from app.core.config import Settings
from app.main import app, create_app
from app.shared.security.headers import SECURE_HEADERS

client = TestClient(app)


class TestHealthEndpoint:
    """Tests for the health check endpoint."""

    def test_health_returns_200(self) -> None:
        """Health endpoint must return HTTP 200 with status ok."""
        response = client.get("/health")
        assert response.status_code == 200

    def test_health_response_body(self) -> None:
        """Health endpoint must return status and version fields."""
        body = client.get("/health").json()
        assert body["status"] == "ok"
        assert "version" in body


class TestSecurityHeaders:
    """Tests for security headers on responses."""

    def test_security_headers_present(self) -> None:
        """Every fixed security header is set on a normal response."""
        response = client.get("/health")
        for name, value in SECURE_HEADERS.items():
            assert response.headers[name] == value


class TestFrameworkErrors:
    """Framework-level errors keep the ExceptionResponse shape."""

    def test_unknown_route_returns_404_body(self) -> None:
        """An unknown route returns 404 with the status in the body."""
        response = client.get("/nowhere")
        assert response.status_code == 404
        assert response.json()["status"] == 404

    def test_unsupported_method_returns_405_body(self) -> None:
        """An unsupported method returns 405 with the status in the body."""
        response = client.post("/health")
        assert response.status_code == 405
        assert response.json()["status"] == 405


class TestRateLimiting:
    """Tests for the request rate limit."""

    def test_exceeding_limit_returns_429_body(self) -> None:
        """The request past the limit gets 429 in the shared error shape."""
        limited = create_app()
        limited.state.limiter = Limiter(
            key_func=get_remote_address, default_limits=["1/minute"]
        )
        limited_client = TestClient(limited)

        assert limited_client.get("/health").status_code == 200
        response = limited_client.get("/health")

        assert response.status_code == 429
        body = response.json()
        assert body["status"] == 429
        assert body["message"].startswith("Rate limit exceeded")


class TestStartup:
    """Tests for the application lifespan."""

    def test_unreachable_database_still_starts(self, caplog) -> None:
        """Startup logs a warning and serves requests when the database is down."""
        refused = OperationalError("SELECT 1", {}, Exception("connection refused"))

        with caplog.at_level(logging.WARNING, logger="app.main"):
            with patch("app.main.get_db_engine", side_effect=refused):
                with TestClient(app) as started:
                    response = started.get("/health")

        assert response.status_code == 200
        assert any(
            record.name == "app.main" and record.levelno == logging.WARNING
            for record in caplog.records
        )

    def test_engine_is_disposed_after_failed_schema_creation(self) -> None:
        """An engine that was built is disposed on shutdown even if create_all failed."""
        engine = MagicMock()
        refused = OperationalError("CREATE TABLE", {}, Exception("connection refused"))

        with patch("app.main.get_db_engine", return_value=engine):
            with patch("app.main.create_schema", side_effect=refused):
                with TestClient(app) as started:
                    assert started.get("/health").status_code == 200

        engine.dispose.assert_called_once()


class TestSettings:
    """Tests for configuration defaults."""

    def test_database_url_built_from_postgres_settings(self) -> None:
        """Without DATABASE_URL a psycopg2 DSN is built from the postgres values."""
        settings = Settings(
            database_url=None, postgres_host="db", postgres_db="users_test"
        )
        url = settings.get_database_url()
        assert url.startswith("postgresql+psycopg2://")
        assert url.endswith("@db:5432/users_test")

    def test_explicit_database_url_wins(self) -> None:
        """An explicit DATABASE_URL is used as given."""
        settings = Settings(database_url="sqlite:///users.db")
        assert settings.get_database_url() == "sqlite:///users.db"

    def test_minimum_age_is_configurable(self) -> None:
        """The minimum age can be overridden."""
        assert Settings(user_min_age=21).user_min_age == 21
