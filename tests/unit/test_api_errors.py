"""Unit tests for meridus.api.errors exceptions and error handlers.

Usage
-----
Run with pytest::

    pytest tests/unit/test_api_errors.py

"""

from __future__ import annotations

import falcon
import falcon.asgi
import falcon.testing
import pytest

from meridus.api.errors import (
    AuthenticationError,
    InvalidInputError,
    handle_authentication_error,
    handle_invalid_input,
)


class _UnauthorizedResource:
    """Resource that fails its signature check."""

    async def on_get(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response
    ) -> None:
        raise AuthenticationError.invalid_signature()


class _BadRequestResource:
    """Resource that raises InvalidInputError without a field."""

    async def on_get(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response
    ) -> None:
        msg = "Request body must be a JSON object"
        raise InvalidInputError(msg)


class _BadFieldResource:
    """Resource that raises InvalidInputError with a field."""

    async def on_get(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response
    ) -> None:
        msg = "channelId is required for add"
        raise InvalidInputError(msg, field="channelId")


@pytest.fixture
def client() -> falcon.testing.TestClient:
    """Build a test client with error handlers registered."""
    app = falcon.asgi.App()
    app.add_route("/unauthorized", _UnauthorizedResource())
    app.add_route("/bad-request", _BadRequestResource())
    app.add_route("/bad-field", _BadFieldResource())
    app.add_error_handler(AuthenticationError, handle_authentication_error)
    app.add_error_handler(InvalidInputError, handle_invalid_input)
    return falcon.testing.TestClient(app)


class TestAuthenticationHandler:
    """Tests for AuthenticationError and its handler."""

    def test_returns_401(self, client: falcon.testing.TestClient) -> None:
        """Handler maps AuthenticationError to HTTP 401."""
        result = client.simulate_get("/unauthorized")
        assert result.status == falcon.HTTP_401, "expected HTTP 401"
        assert result.json == {
            "title": "Unauthorized",
            "description": "Invalid signature",
        }, "wrong 401 body"

    def test_api_key_reason(self) -> None:
        """API key failures carry a generic reason."""
        assert AuthenticationError.invalid_api_key().reason == "Unauthorized"


class TestInvalidInputHandler:
    """Tests for InvalidInputError and its handler."""

    def test_returns_400_without_field(
        self, client: falcon.testing.TestClient
    ) -> None:
        """The body has a title and description but no field key."""
        result = client.simulate_get("/bad-request")
        assert result.status == falcon.HTTP_400, "expected HTTP 400"
        assert result.json == {
            "title": "Invalid input",
            "description": "Request body must be a JSON object",
        }, "field should be absent"

    def test_includes_field_when_set(
        self, client: falcon.testing.TestClient
    ) -> None:
        """The offending field is named when known."""
        result = client.simulate_get("/bad-field")
        assert result.json["field"] == "channelId", "wrong field value"
        assert result.json["description"] == "channelId is required for add"

    @pytest.mark.parametrize(
        ("field", "expected"),
        [(None, "bad value"), ("repo", "repo: bad value")],
    )
    def test_message(self, field: str | None, expected: str) -> None:
        """String representation prefixes the field when present."""
        assert str(InvalidInputError("bad value", field=field)) == expected
