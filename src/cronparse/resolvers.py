"""Resolvers turning a single cron token into an integer.

A resolver is handed to the field expander for every value it meets, so the
expander never needs to know whether a field accepts names.
"""

from __future__ import annotations

__all__ = [
    "INTEGER_RESOLVER",
    "MONTH_RESOLVER",
    "WEEKDAY_RESOLVER",
    "IntegerResolver",
    "NameTableResolver",
    "ResolverProtocol",
]

from dataclasses import dataclass
import re
from typing import Final, Protocol, runtime_checkable

from cronparse.common import DAY_NAMES, MONTH_NAMES
from cronparse.results import INVALID, ItemResult, Resolved

_INTEGER_RE: Final[re.Pattern[str]] = re.compile(r"[+-]?[0-9]+")


@runtime_checkable
class ResolverProtocol(Protocol):
    """Structural contract for token resolvers."""

    def resolve(self, token: str) -> ItemResult:
        """Return the integer *token* stands for, or :data:`~cronparse.results.INVALID`.

        :param token: A single value taken from a cron field, without separators.
        """


class IntegerResolver:
    """Resolve plain decimal integers; anything with extra characters is invalid."""

    def resolve(self, token: str) -> ItemResult:
        """Parse *token* as a whole decimal integer."""
        if _INTEGER_RE.fullmatch(token) is None:
            return INVALID
        try:
            return Resolved(int(token))
        except ValueError:
            # Longer than the interpreter's integer string conversion limit.
            return INVALID


@dataclass(frozen=True, slots=True)
class NameTableResolver:
    """Resolve case-insensitive abbreviations, falling back to plain integers.

    :param names: Upper-case abbreviations; position ``i`` resolves to ``i + offset``.
    :param offset: Value of the first name in the table.
    """

    names: tuple[str, ...]
    offset: int = 0

    def resolve(self, token: str) -> ItemResult:
        """Look *token* up in the name table before trying integer parsing."""
        upper_token = token.upper()
        if upper_token in self.names:
            return Resolved(self.names.index(upper_token) + self.offset)
        return INTEGER_RESOLVER.resolve(token)


INTEGER_RESOLVER: Final[IntegerResolver] = IntegerResolver()
MONTH_RESOLVER: Final[NameTableResolver] = NameTableResolver(MONTH_NAMES, offset=1)
WEEKDAY_RESOLVER: Final[NameTableResolver] = NameTableResolver(DAY_NAMES)
