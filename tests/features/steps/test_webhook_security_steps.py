"""Behavioural coverage for webhook signature enforcement."""

from __future__ import annotations

from pytest_bdd import scenario


@scenario("../webhook_security.feature", "Tampered webhook is rejected")
def test_tampered_webhook_rejected() -> None:
    """Wrap the pytest-bdd scenario for invalid signatures."""


@scenario("../webhook_security.feature", "Signed webhook is acknowledged")
def test_signed_webhook_acknowledged() -> None:
    """Wrap the pytest-bdd scenario for valid signatures."""
