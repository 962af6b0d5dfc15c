"""Register Meridus slash commands with Discord."""

from __future__ import annotations

import argparse
import asyncio

import msgspec

from .client import DiscordRestClient
from .commands import COMMAND_DEFINITIONS
from .config import DiscordConfig
from .errors import DiscordAPIError, DiscordConfigError


async def _register(config: DiscordConfig) -> int:
    client = DiscordRestClient(config)
    try:
        return await client.register_commands(COMMAND_DEFINITIONS)
    finally:
        await client.aclose()


def main(argv: list[str] | None = None) -> int:
    """Overwrite the application's global slash commands.

    Parameters
    ----------
    argv : list[str] | None, optional
        Command-line arguments. ``None`` defaults to ``sys.argv``.

    Returns
    -------
    int
        Exit code: 0 on success, 1 when configuration or registration fails.

    """
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the command definitions as JSON instead of registering them",
    )
    args = parser.parse_args(argv)

    if args.dry_run:
        print(msgspec.json.format(msgspec.json.encode(COMMAND_DEFINITIONS)).decode())
        return 0

    try:
        config = DiscordConfig.from_env()
        registered = asyncio.run(_register(config))
    except (DiscordConfigError, DiscordAPIError, ValueError) as exc:
        print(f"Slash command registration failed: {exc}")
        return 1

    print(f"registered {registered} slash commands")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
