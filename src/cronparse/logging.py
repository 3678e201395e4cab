"""Logging helpers shared across cronparse modules.

The package never configures logging on import; applications call
:func:`configure_logging` (or set up logging themselves).
"""

from __future__ import annotations

__all__ = ["DEFAULT_LOG_FORMAT", "HANDLER_NAME", "WithLogger", "configure_logging"]

import logging
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from cronparse.settings import CronparseSettings

DEFAULT_LOG_FORMAT: Final[str] = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
HANDLER_NAME: Final[str] = "cronparse"


class WithLogger:
    """Mixin providing a logger named after the concrete class."""

    @classmethod
    def _get_logger(cls) -> logging.Logger:
        """Return the class-named logger; :func:`logging.getLogger` caches it by name."""
        return logging.getLogger(cls.__name__)

    @property
    def _logger(self) -> logging.Logger:
        return self._get_logger()


def configure_logging(
    level: int | str | None = None,
    fmt: str | None = None,
    *,
    settings: CronparseSettings | None = None,
) -> None:
    """Attach a stream handler with a formatter to the root logger.

    A handler attached by an earlier call is replaced, so repeated calls do not
    duplicate output. Explicit arguments win over *settings*, which win over the defaults.

    :param level: Level as a number or a name such as ``"DEBUG"``.
    :param fmt: Format string for the handler's formatter.
    :param settings: Optional settings providing ``log_level`` and ``log_format``.
    :raises ValueError: If *level* is a string that is not a logging level name.
    """
    if level is None:
        level = settings.log_level if settings is not None else logging.WARNING
    if fmt is None:
        fmt = settings.log_format if settings is not None else DEFAULT_LOG_FORMAT

    resolved_level = _to_level(level)
    root_logger = logging.getLogger()
    root_logger.setLevel(resolved_level)

    for existing in list(root_logger.handlers):
        if existing.get_name() == HANDLER_NAME:
            root_logger.removeHandler(existing)

    handler = logging.StreamHandler()
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(logging.Formatter(fmt))
    root_logger.addHandler(handler)


def _to_level(level: int | str) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        msg = f"{level!r} is not a valid logging level name"
        raise ValueError(msg)
    return resolved
