"""Unit tests for the slash-command registration CLI."""

from __future__ import annotations

import msgspec
import pytest

from meridus.discord import COMMAND_DEFINITIONS, cli


def test_dry_run_prints_definitions(capsys: pytest.CaptureFixture[str]) -> None:
    """``--dry-run`` prints JSON without needing credentials."""
    exit_code = cli.main(["--dry-run"])

    assert exit_code == 0
    printed = msgspec.json.decode(capsys.readouterr().out)
    assert len(printed) == len(COMMAND_DEFINITIONS)
    assert printed[0]["name"] == "ping"


def test_missing_token_fails(capsys: pytest.CaptureFixture[str]) -> None:
    """Registration without ``DISCORD_BOT_TOKEN`` exits with status 1."""
    exit_code = cli.main([])

    assert exit_code == 1
    assert "DISCORD_BOT_TOKEN" in capsys.readouterr().out


def test_successful_registration(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    """The registered count is reported on success."""
    monkeypatch.setenv("DISCORD_BOT_TOKEN", "token")
    monkeypatch.setenv("DISCORD_APP_ID", "4242")

    async def fake_register(_config: object) -> int:
        return 9

    monkeypatch.setattr(cli, "_register", fake_register)

    assert cli.main([]) == 0
    assert capsys.readouterr().out.strip() == "registered 9 slash commands"
