"""
Tests for the root routes and the error/fallback layer.

These tests verify:
  - GET / and GET /health respond with their fixed payloads
  - Unmatched paths and undeclared methods return 404 Route Not Found
  - Store failures are reported as a generic 500
  - Uncaught errors reach the terminal handler, which honours a
    status_code attribute and logs the stack trace only when enabled
"""

import logging
from unittest.mock import AsyncMock, patch

from sqlalchemy.exc import OperationalError

from app.config import settings
from app.exceptions import GENERIC_ERROR_MESSAGE


class TestRootRoutes:

    async def test_root_greeting(self, client):
        response = await client.get("/")
        assert response.status_code == 200
        assert response.json() == {"message": "Welcome to the REST API project!"}

    async def test_health(self, client):
        response = await client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "ok", "version": settings.APP_VERSION}


class TestRouteNotFound:

    async def test_unknown_path(self, client):
        response = await client.get("/nope")
        assert response.status_code == 404
        assert response.json() == {"message": "Route Not Found"}

    async def test_unknown_nested_path(self, client):
        response = await client.post("/api/teachers", json={})
        assert response.status_code == 404
        assert response.json() == {"message": "Route Not Found"}

    async def test_undeclared_method(self, client):
        response = await client.patch("/api/courses/1", json={})
        assert response.status_code == 404
        assert response.json() == {"message": "Route Not Found"}


class TestStoreErrors:

    async def test_store_failure_on_list(self, client, caplog):
        failure = OperationalError("SELECT", {}, Exception("database is locked"))
        with patch(
            "app.services.course_service.list_courses",
            AsyncMock(side_effect=failure),
        ):
            with caplog.at_level(logging.ERROR, logger="app.exceptions"):
                response = await client.get("/api/courses")

        assert response.status_code == 500
        assert response.json() == {"message": GENERIC_ERROR_MESSAGE}
        assert "Store error on GET /api/courses" in caplog.text

    async def test_store_failure_during_authentication(self, client, registered_user):
        failure = OperationalError("SELECT", {}, Exception("disk I/O error"))
        with patch(
            "app.services.user_service.get_user_by_email",
            AsyncMock(side_effect=failure),
        ):
            response = await client.get(
                "/api/users",
                auth=(registered_user["emailAddress"], registered_user["password"]),
            )
        assert response.status_code == 500
        assert response.json() == {"message": GENERIC_ERROR_MESSAGE}


class TeapotError(Exception):
    status_code = 418


class TestTerminalHandler:

    async def test_uncaught_error(self, unsafe_client):
        with patch(
            "app.services.course_service.list_courses",
            AsyncMock(side_effect=RuntimeError("kaboom")),
        ):
            response = await unsafe_client.get("/api/courses")

        assert response.status_code == 500
        assert response.json() == {"message": "kaboom", "error": {}}

    async def test_uses_error_status(self, unsafe_client):
        with patch(
            "app.services.course_service.list_courses",
            AsyncMock(side_effect=TeapotError("short and stout")),
        ):
            response = await unsafe_client.get("/api/courses")

        assert response.status_code == 418
        assert response.json() == {"message": "short and stout", "error": {}}

    async def test_stack_trace_logged_when_enabled(self, unsafe_client, caplog, monkeypatch):
        monkeypatch.setattr(settings, "ENABLE_GLOBAL_ERROR_LOGGING", True)
        with patch(
            "app.services.course_service.list_courses",
            AsyncMock(side_effect=RuntimeError("kaboom")),
        ):
            with caplog.at_level(logging.ERROR, logger="app.exceptions"):
                await unsafe_client.get("/api/courses")

        records = [r for r in caplog.records if r.name == "app.exceptions"]
        assert len(records) == 1
        assert records[0].getMessage() == "Global error handler"
        assert records[0].exc_info is not None

    async def test_stack_trace_not_logged_by_default(self, unsafe_client, caplog, monkeypatch):
        monkeypatch.setattr(settings, "ENABLE_GLOBAL_ERROR_LOGGING", False)
        with patch(
            "app.services.course_service.list_courses",
            AsyncMock(side_effect=RuntimeError("kaboom")),
        ):
            with caplog.at_level(logging.ERROR, logger="app.exceptions"):
                await unsafe_client.get("/api/courses")

        assert not [r for r in caplog.records if r.name == "app.exceptions"]


class TestRequestLogging:

    async def test_one_line_per_request(self, client, caplog):
        with caplog.at_level(logging.INFO, logger="app.main"):
            await client.get("/api/courses/999999")

        lines = [r.getMessage() for r in caplog.records if r.name == "app.main"]
        assert len(lines) == 1
        assert lines[0].startswith("GET /api/courses/999999 404 ")

    async def test_password_not_logged(self, client, caplog):
        with caplog.at_level(logging.DEBUG):
            await client.post(
                "/api/users",
                json={
                    "firstName": "Joe",
                    "lastName": "Smith",
                    "emailAddress": "joe@smith.com",
                    "password": "TopSecretValue",
                },
            )
        assert "TopSecretValue" not in caplog.text
