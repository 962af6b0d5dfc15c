"""Slash-command processing.

Usage
-----
Answer a forwarded interaction::

    from meridus.commands import CommandProcessor

    processor = CommandProcessor(registry, state, datasource=datasource)
    reply = await processor.handle("subscribe", interaction["data"]["options"])
    response = reply.to_interaction_response()

"""

from .listing import format_commit, format_issue, format_repository, listing_reply
from .models import CommandReply, InteractionResponseType, InteractionType
from .options import DEFAULT_EVENTS, flatten_options, parse_events, string_arg
from .processor import CommandProcessor

__all__ = [
    "DEFAULT_EVENTS",
    "CommandProcessor",
    "CommandReply",
    "InteractionResponseType",
    "InteractionType",
    "flatten_options",
    "format_commit",
    "format_issue",
    "format_repository",
    "listing_reply",
    "parse_events",
    "string_arg",
]
