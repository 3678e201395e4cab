"""Public interface for the cronparse package.

Example::

    >>> from cronparse import parse
    >>> parse("0 0 1 1 *").record.days_of_week
    (0, 1, 2, 3, 4, 5, 6)
"""

from __future__ import annotations

from cronparse.common import ParseErrorKind
from cronparse.errors import CronparseConfigError, CronparseError, InvalidCronExpressionError
from cronparse.parser import CronParser, parse, parse_strict
from cronparse.results import CronRecord, ParseFailure, ParseResult, ParseSuccess

__all__ = [
    "CronParser",
    "CronRecord",
    "CronparseConfigError",
    "CronparseError",
    "InvalidCronExpressionError",
    "ParseErrorKind",
    "ParseFailure",
    "ParseResult",
    "ParseSuccess",
    "parse",
    "parse_strict",
]
