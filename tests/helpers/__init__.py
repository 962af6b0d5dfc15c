"""Shared test utilities."""

from __future__ import annotations

import asyncio
import typing as typ


T = typ.TypeVar("T")


def run_async(
    coro_func: typ.Callable[[], typ.Coroutine[typ.Any, typ.Any, T]],
) -> T:
    """Run ``coro_func()`` to completion on a fresh event loop."""
    return asyncio.run(coro_func())
