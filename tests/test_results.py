"""Unit tests for the cron record and parse result objects."""

from __future__ import annotations

import pytest

from cronparse import CronRecord, InvalidCronExpressionError, ParseErrorKind, ParseFailure, parse
from cronparse.common import CronFieldEnum


def make_record() -> CronRecord:
    """Build a small record for tests."""
    return CronRecord(
        minutes=(0, 30),
        hours=(12,),
        days_of_month=(1, 15),
        months=(6,),
        days_of_week=(1, 5),
    )


def test_record_aliases() -> None:
    """dom and dow mirror the long field names."""
    record = make_record()
    assert record.dom == record.days_of_month
    assert record.dow == record.days_of_week


def test_record_as_dict() -> None:
    """as_dict returns plain lists keyed by field name."""
    assert make_record().as_dict() == {
        "minutes": [0, 30],
        "hours": [12],
        "days_of_month": [1, 15],
        "months": [6],
        "days_of_week": [1, 5],
    }


def test_record_field_names_follow_cron_order() -> None:
    """Field names match both the enum and the tuple layout."""
    assert CronRecord.field_names() == tuple(CronFieldEnum)
    assert tuple(CronRecord.field_names()) == CronRecord._fields  # noqa: SLF001


def test_record_is_immutable() -> None:
    """Records cannot be modified after construction."""
    record = make_record()
    with pytest.raises(AttributeError):
        record.minutes = (1,)  # type: ignore[misc]


def test_success_unwrap_returns_record() -> None:
    """unwrap on a success gives back the record."""
    result = parse("0,30 12 1,15 JUN MON,FRI")
    assert result.ok
    assert result.unwrap() == make_record()


def test_failure_unwrap_raises() -> None:
    """unwrap on a failure raises with the failure kind attached."""
    failure = ParseFailure("* * * * * *", ParseErrorKind.TooManySections)
    with pytest.raises(InvalidCronExpressionError) as exc_info:
        failure.unwrap()
    assert exc_info.value.kind is ParseErrorKind.TooManySections
