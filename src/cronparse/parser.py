"""Cron expression parser.

This module assembles the five expanded fields into a :class:`CronRecord` and
reports malformed input through a :data:`ParseResult` rather than exceptions.
"""

from __future__ import annotations

__all__ = ["FIELD_RESOLVERS", "CronParser", "parse", "parse_strict"]

from typing import TYPE_CHECKING, Final

from cronparse.common import FIELD_DOMAINS, CronFieldEnum, ParseErrorKind
from cronparse.expander import expand_field
from cronparse.logging import WithLogger
from cronparse.resolvers import INTEGER_RESOLVER, MONTH_RESOLVER, WEEKDAY_RESOLVER
from cronparse.results import CronRecord, ParseFailure, ParseResult, ParseSuccess
from cronparse.splitter import split_fields

if TYPE_CHECKING:
    from cronparse.resolvers import ResolverProtocol

FIELD_RESOLVERS: Final[dict[CronFieldEnum, ResolverProtocol]] = {
    CronFieldEnum.Minutes: INTEGER_RESOLVER,
    CronFieldEnum.Hours: INTEGER_RESOLVER,
    CronFieldEnum.DaysOfMonth: INTEGER_RESOLVER,
    CronFieldEnum.Months: MONTH_RESOLVER,
    CronFieldEnum.DaysOfWeek: WEEKDAY_RESOLVER,
}


class CronParser(WithLogger):
    """Stateless parser turning five-field cron expressions into records.

    Instances hold no mutable state, so one parser may be shared between threads.
    """

    def parse(self, expression: str) -> ParseResult:
        """Parse a cron expression into explicit field values.

        The expression must have the traditional five fields: minute, hour, day
        of month, month, and day of week. Each field supports ``*``, ``*/n``,
        single values, ``min-max`` ranges and comma-separated lists of those;
        months and weekdays also accept three-letter names.

        :param expression: Raw cron expression using whitespace-separated fields.
        :returns: :class:`ParseSuccess` with the record, or :class:`ParseFailure`.
        """
        fields = split_fields(expression)
        if isinstance(fields, ParseErrorKind):
            return self._failure(expression, fields)

        expanded = {
            field: expand_field(text, FIELD_DOMAINS[field], FIELD_RESOLVERS[field])
            for field, text in zip(CronFieldEnum, fields)
        }
        empty_fields = [field for field, values in expanded.items() if not values]
        if empty_fields:
            self._logger.debug("No valid values in %s of %r", ", ".join(empty_fields), expression)
            return self._failure(expression, ParseErrorKind.IncorrectValue)

        return ParseSuccess(CronRecord(*expanded.values()))

    def _failure(self, expression: str, kind: ParseErrorKind) -> ParseFailure:
        self._logger.debug("Rejected cron expression %r: %s", expression, kind.message)
        return ParseFailure(expression, kind)


_DEFAULT_PARSER: Final[CronParser] = CronParser()


def parse(expression: str) -> ParseResult:
    """Parse *expression* with the shared :class:`CronParser`; never raises on bad input."""
    return _DEFAULT_PARSER.parse(expression)


def parse_strict(expression: str) -> CronRecord:
    """Parse *expression* and return the record.

    :raises InvalidCronExpressionError: If the expression cannot be parsed.
    """
    return parse(expression).unwrap()
