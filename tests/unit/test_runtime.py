"""Unit tests for the meridus.runtime module."""

from __future__ import annotations

from http import HTTPStatus

import falcon.asgi
import falcon.testing
import pytest

from meridus import runtime


class TestParsePort:
    """Tests for ``MERIDUS_PORT`` validation."""

    @pytest.mark.parametrize(
        ("raw", "port"), [("3000", 3000), ("1", 1), ("65535", 65535)]
    )
    def test_valid(self, raw: str, port: int) -> None:
        """Integers within the TCP range are accepted."""
        assert runtime._parse_port(raw) == port

    @pytest.mark.parametrize("raw", ["http", "0", "65536", "-80"])
    def test_invalid_exits(self, raw: str) -> None:
        """Anything else stops the process with status 1."""
        with pytest.raises(SystemExit) as excinfo:
            runtime._parse_port(raw)

        assert excinfo.value.code == 1


class TestCreateApp:
    """Tests for the Granian factory entrypoint."""

    def test_returns_falcon_app(self) -> None:
        """create_app returns a Falcon ASGI App instance."""
        assert isinstance(runtime.create_app(), falcon.asgi.App)

    @pytest.mark.parametrize("path", ["/", "/health", "/ready", "/api/status"])
    def test_get_routes(self, path: str) -> None:
        """Public GET routes answer without any credentials configured."""
        client = falcon.testing.TestClient(runtime.create_app())

        result = client.simulate_get(path)

        assert result.status_code == HTTPStatus.OK, f"{path} should be served"
        content_type = result.headers.get("content-type", "")
        assert content_type.startswith("application/json")

    def test_environment_configures_webhook_secret(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """``GITHUB_WEBHOOK_SECRET`` turns on signature checks."""
        monkeypatch.setenv("GITHUB_WEBHOOK_SECRET", "hush")
        client = falcon.testing.TestClient(runtime.create_app())

        result = client.simulate_post(
            "/api/webhooks/github",
            json={"zen": "hi"},
            headers={"X-GitHub-Event": "ping"},
        )

        assert result.status_code == HTTPStatus.UNAUTHORIZED


class TestServerSettings:
    """Tests for reading server settings from the environment."""

    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Unset variables fall back to the documented defaults."""
        for name in ("MERIDUS_HOST", "MERIDUS_PORT", "MERIDUS_LOG_LEVEL"):
            monkeypatch.delenv(name, raising=False)

        assert runtime.ServerSettings.from_env() == runtime.ServerSettings()

    def test_overrides(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Each variable overrides its default."""
        monkeypatch.setenv("MERIDUS_HOST", "127.0.0.1")
        monkeypatch.setenv("MERIDUS_PORT", "8080")
        monkeypatch.setenv("MERIDUS_LOG_LEVEL", "debug")

        settings = runtime.ServerSettings.from_env()

        assert settings == runtime.ServerSettings("127.0.0.1", 8080, "debug")
