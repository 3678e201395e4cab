"""Value objects produced while parsing: per-item results, the cron record and parse results."""

from __future__ import annotations

__all__ = [
    "INVALID",
    "CronRecord",
    "Invalid",
    "ItemResult",
    "ParseFailure",
    "ParseResult",
    "ParseSuccess",
    "Resolved",
]

from dataclasses import dataclass
from typing import Literal, NamedTuple, TypeAlias

from cronparse.common import CronFieldEnum, ParseErrorKind
from cronparse.errors import InvalidCronExpressionError


@dataclass(frozen=True, slots=True)
class Resolved:
    """A token that resolved to an integer (not yet checked against a domain)."""

    value: int


@dataclass(frozen=True, slots=True)
class Invalid:
    """Marker for a token that could not be resolved to an integer."""


INVALID = Invalid()

ItemResult: TypeAlias = Resolved | Invalid


class CronRecord(NamedTuple):
    """Structured representation of the five cron fields.

    Each attribute contains an ascending tuple of integers that represent the
    concrete schedule derived from the raw cron expression. Duplicates coming
    from overlapping list items are kept.
    """

    minutes: tuple[int, ...]
    hours: tuple[int, ...]
    days_of_month: tuple[int, ...]
    months: tuple[int, ...]
    days_of_week: tuple[int, ...]

    @property
    def dom(self) -> tuple[int, ...]:
        """Alias for ``days_of_month`` property."""
        return self.days_of_month

    @property
    def dow(self) -> tuple[int, ...]:
        """Alias for ``days_of_week`` property."""
        return self.days_of_week

    @classmethod
    def field_names(cls) -> tuple[CronFieldEnum, ...]:
        """Return the field names in the order they appear in a cron expression."""
        return tuple(CronFieldEnum)

    def as_dict(self) -> dict[str, list[int]]:
        """Return the record as a plain dictionary for serialisation."""
        return {name: list(values) for name, values in self._asdict().items()}


@dataclass(frozen=True, slots=True)
class ParseSuccess:
    """Successful parse carrying the expanded :class:`CronRecord`."""

    record: CronRecord

    @property
    def ok(self) -> Literal[True]:
        """Return True; the parse succeeded."""
        return True

    def unwrap(self) -> CronRecord:
        """Return the parsed record."""
        return self.record


@dataclass(frozen=True, slots=True)
class ParseFailure:
    """Failed parse carrying the reason it was rejected.

    :param expression: Raw expression handed to the parser.
    :param error: Kind of failure; its value is the human-readable message.
    """

    expression: str
    error: ParseErrorKind

    @property
    def ok(self) -> Literal[False]:
        """Return False; the parse failed."""
        return False

    @property
    def message(self) -> str:
        """Return the human-readable failure message."""
        return self.error.message

    def unwrap(self) -> CronRecord:
        """Raise :class:`InvalidCronExpressionError` describing the failure."""
        raise InvalidCronExpressionError(self.expression, self.error)


ParseResult: TypeAlias = ParseSuccess | ParseFailure
