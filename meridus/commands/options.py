"""Normalise Discord command options into plain arguments."""

from __future__ import annotations

import typing as typ

if typ.TYPE_CHECKING:
    import collections.abc as cabc

DEFAULT_EVENTS: typ.Final[tuple[str, ...]] = (
    "push",
    "issues",
    "pull_request",
    "release",
)


def flatten_options(
    options: cabc.Iterable[cabc.Mapping[str, typ.Any]] | None,
) -> dict[str, typ.Any]:
    """Collapse nested option groups into a ``name -> value`` mapping.

    Sub-command and group options carry their own ``options`` list; those
    are merged in place of the group, one level per nesting. Later options
    win when names repeat.

    Examples
    --------
    >>> group = {"name": "g", "options": [{"name": "repo", "value": "a/b"}]}
    >>> flatten_options([group])
    {'repo': 'a/b'}

    """
    args: dict[str, typ.Any] = {}
    for option in options or ():
        nested = option.get("options")
        if nested:
            args.update(flatten_options(nested))
        else:
            args[option.get("name", "")] = option.get("value")
    return args


def string_arg(args: cabc.Mapping[str, typ.Any], name: str) -> str | None:
    """Return the stripped string value of ``name``, or ``None`` when blank."""
    value = args.get(name)
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def parse_events(raw: str | None) -> tuple[str, ...]:
    """Split a comma-separated event list.

    ``None`` yields :data:`DEFAULT_EVENTS`. Entries are trimmed, blanks are
    dropped and repeats keep their first position.
    """
    if raw is None:
        return DEFAULT_EVENTS
    events = (part.strip() for part in raw.split(","))
    return tuple(dict.fromkeys(event for event in events if event))
