"""Forwarded Discord interactions.

The website receives Discord interactions and forwards them here with the
shared ``x-api-key``. ``PING`` interactions are answered with ``PONG``;
application commands are handed to the :class:`CommandProcessor` and the
reply is returned as a channel message response.
"""

from __future__ import annotations

import typing as typ
from http import HTTPStatus

import msgspec

from meridus.api.auth import require_api_key
from meridus.api.errors import InvalidInputError
from meridus.commands.models import InteractionResponseType, InteractionType

if typ.TYPE_CHECKING:
    from falcon.asgi import Request, Response

    from meridus.commands.processor import CommandProcessor
    from meridus.config import RelayConfig

__all__ = ["CommandsResource", "Interaction", "InteractionData"]


class InteractionData(msgspec.Struct, kw_only=True, frozen=True):
    """Invoked command name and its raw options."""

    name: str
    options: list[dict[str, typ.Any]] = msgspec.field(default_factory=list)


class Interaction(msgspec.Struct, kw_only=True, frozen=True):
    """Subset of a Discord interaction payload."""

    type: int
    data: InteractionData | None = None


class CommandsResource:
    """Answer forwarded slash-command interactions."""

    def __init__(self, config: RelayConfig, processor: CommandProcessor) -> None:
        """Configure the resource with its API key and command processor."""
        self._config = config
        self._processor = processor

    async def on_post(self, req: Request, resp: Response) -> None:
        """Handle POST /api/commands.

        Raises
        ------
        AuthenticationError
            If ``x-api-key`` is missing, wrong or no key is configured.
        InvalidInputError
            If the body is not an interaction Meridus can answer.

        """
        require_api_key(req, self._config.api_key)
        raw = await req.stream.read()
        try:
            interaction = msgspec.json.decode(raw, type=Interaction)
        except msgspec.DecodeError as exc:
            msg = f"Invalid interaction: {exc}"
            raise InvalidInputError(msg) from exc

        resp.status = HTTPStatus.OK
        match interaction:
            case Interaction(type=InteractionType.PING):
                resp.media = {"type": int(InteractionResponseType.PONG)}
            case Interaction(
                type=InteractionType.APPLICATION_COMMAND, data=InteractionData() as data
            ):
                reply = await self._processor.handle(data.name, data.options)
                resp.media = reply.to_interaction_response()
            case _:
                msg = f"Unsupported interaction type: {interaction.type}"
                raise InvalidInputError(msg, field="type")
