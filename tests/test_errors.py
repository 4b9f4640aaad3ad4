"""Tests for error tagging."""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.exc import IntegrityError, OperationalError

from app.config import Config
from app.main import create_app
from app.errors import ErrorKind, ServiceError, from_db_error


def test_integrity_error_is_constraint():
    error = from_db_error(IntegrityError("INSERT", {}, Exception("UNIQUE")), "Failed to save student")

    assert error.kind == ErrorKind.CONSTRAINT
    assert error.status_code == 409
    assert error.message == "Failed to save student"


def test_other_database_error_is_store():
    error = from_db_error(OperationalError("SELECT", {}, Exception("connection refused")), "Failed to fetch students")

    assert error.kind == ErrorKind.STORE
    assert error.status_code == 500


def test_auth_kinds():
    assert ServiceError(ErrorKind.UNAUTHORIZED, "x").status_code == 401
    assert ServiceError(ErrorKind.FORBIDDEN, "x").status_code == 403


class TestErrorBodies:
    """Response bodies produced by the application's exception handlers."""

    @pytest.fixture
    def failing_client(self, tmp_path):
        app = create_app(database_url=f"sqlite+aiosqlite:///{tmp_path / 'eresult.db'}", migrate=True, seed=False)

        @app.get("/api/broken")
        async def broken():
            raise RuntimeError("disk on fire")

        with TestClient(app, raise_server_exceptions=False) as c:
            yield c

    def test_unhandled_error_hides_detail_by_default(self, failing_client, monkeypatch):
        monkeypatch.setattr(Config, "ENV", "PRODUCTION")
        response = failing_client.get("/api/broken")

        assert response.status_code == 500
        assert response.json() == {"error": "Internal server error"}

    def test_unhandled_error_detail_in_development(self, failing_client, monkeypatch):
        monkeypatch.setattr(Config, "ENV", "DEVELOPMENT")
        response = failing_client.get("/api/broken")

        assert response.status_code == 500
        assert response.json() == {"error": "Internal server error", "message": "disk on fire"}

    def test_validation_error_lists_fields(self, failing_client, form_master_headers):
        response = failing_client.post("/api/students", json={}, headers=form_master_headers)

        assert response.status_code == 422
        body = response.json()
        assert body["error"] == "Invalid request"
        assert any(d["loc"][-1] == "studentName" for d in body["details"])
