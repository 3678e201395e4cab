"""Module containing cronparse-related errors."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from cronparse.common import ParseErrorKind


class CronparseError(Exception):
    """Base class for all cronparse-related errors."""


class InvalidCronExpressionError(CronparseError, ValueError):
    """Raised when a caller asks for a record from an expression that failed to parse.

    :func:`cronparse.parse` never raises it; only the strict helpers do.
    """

    def __init__(self, expression: str, kind: ParseErrorKind) -> None:
        self.expression = expression
        self.kind = kind
        super().__init__(f"{expression!r} is not valid cron expression: {kind.message}")


class CronparseConfigError(CronparseError, ValueError):
    """Raised when a setting supplied via the environment cannot be coerced."""
