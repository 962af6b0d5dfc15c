"""femtologging helpers shared by every Meridus module.

Messages are interpolated here, before they are handed to the femtologging
worker thread, so each call site keeps percent-style templates while the
logger only ever sees finished strings.

Example:
>>> from meridus.logging import get_logger, log_info
>>> logger = get_logger(__name__)
>>> log_info(logger, "Relayed %s to %d channels", "push", 2)

"""

from __future__ import annotations

import enum
import typing as typ

from femtologging import basicConfig, get_logger


class LogLevel(enum.StrEnum):
    """Level names understood by femtologging and ``MERIDUS_LOG_LEVEL``."""

    TRACE = "TRACE"
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARN = "WARN"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


FALLBACK_LEVEL = LogLevel.INFO


class _SupportsLog(typ.Protocol):
    """The slice of the femtologging logger API these helpers call."""

    def log(
        self,
        level: str,
        message: str,
        /,
        *,
        exc_info: object | None = None,
        stack_info: bool = False,
    ) -> str | None: ...


def normalize_log_level(level: str | None) -> tuple[str, bool]:
    """Map a raw level name onto :class:`LogLevel`.

    Parameters
    ----------
    level : str | None
        Level name as read from the environment; case and surrounding
        whitespace are ignored.

    Returns
    -------
    tuple[str, bool]
        The level to apply, and ``True`` when ``level`` was blank or unknown
        and :data:`FALLBACK_LEVEL` was substituted.

    """
    name = (level or "").strip().upper()
    try:
        return (str(LogLevel[name]), False)
    except KeyError:
        return (str(FALLBACK_LEVEL), True)


def configure_logging(level: str, *, force: bool = False) -> tuple[str, bool]:
    """Install the femtologging root configuration.

    ``force`` replaces handlers a previous call installed. The return value
    follows :func:`normalize_log_level` so callers can warn about a
    substituted level once logging is up.
    """
    applied, substituted = normalize_log_level(level)
    basicConfig(level=applied, force=force)
    return (applied, substituted)


def format_log_message(template: str, *args: object) -> str:
    """Return ``template % args``, leaving argument-free templates as-is."""
    if not args:
        return template
    return template % args


def _log(
    logger: _SupportsLog,
    level: LogLevel,
    template: str,
    args: tuple[object, ...],
    exc_info: object | None,
) -> None:
    logger.log(
        str(level),
        format_log_message(template, *args),
        exc_info=exc_info,
        stack_info=False,
    )


def log_debug(logger: _SupportsLog, template: str, *args: object) -> None:
    """Emit a DEBUG record."""
    _log(logger, LogLevel.DEBUG, template, args, None)


def log_info(
    logger: _SupportsLog,
    template: str,
    *args: object,
    exc_info: object | None = None,
) -> None:
    """Emit an INFO record.

    Parameters
    ----------
    logger : _SupportsLog
        Destination logger, usually the module's ``logger``.
    template : str
        Percent-style message template.
    *args : object
        Values interpolated into ``template``.
    exc_info : object | None, optional
        Exception to attach to the record.

    """
    _log(logger, LogLevel.INFO, template, args, exc_info)


def log_warning(
    logger: _SupportsLog,
    template: str,
    *args: object,
    exc_info: object | None = None,
) -> None:
    """Emit a WARNING record; see :func:`log_info` for parameters."""
    _log(logger, LogLevel.WARNING, template, args, exc_info)


def log_error(
    logger: _SupportsLog,
    template: str,
    *args: object,
    exc_info: object | None = None,
) -> None:
    """Emit an ERROR record; see :func:`log_info` for parameters."""
    _log(logger, LogLevel.ERROR, template, args, exc_info)


__all__ = [
    "FALLBACK_LEVEL",
    "LogLevel",
    "configure_logging",
    "format_log_message",
    "get_logger",
    "log_debug",
    "log_error",
    "log_info",
    "log_warning",
    "normalize_log_level",
]
