"""Split a raw cron expression into its five fields."""

from __future__ import annotations

__all__ = ["split_fields"]

from cronparse.common import EXPECTED_FIELD_COUNT, ParseErrorKind


def split_fields(expression: str) -> tuple[str, ...] | ParseErrorKind:
    """Split *expression* on whitespace.

    :returns: The five field texts, or the section-count failure when there are
        more or fewer than five.
    """
    fields = tuple(expression.split())
    if len(fields) > EXPECTED_FIELD_COUNT:
        return ParseErrorKind.TooManySections
    if len(fields) < EXPECTED_FIELD_COUNT:
        return ParseErrorKind.NotEnoughSections
    return fields
