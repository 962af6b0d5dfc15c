"""Meridus: relay GitHub webhook events to subscribed Discord channels."""

__version__ = "1.0.0"

BOT_NAME = "MeridusBot"
