"""Constants shared by the cron parsing modules: fields, domains and name tables."""

from __future__ import annotations

__all__ = [
    "DAY_NAMES",
    "EXPECTED_FIELD_COUNT",
    "FIELD_DOMAINS",
    "MONTH_NAMES",
    "CronFieldEnum",
    "Domain",
    "ParseErrorKind",
]

from typing import Final

from cronparse.py_compatibility import StrEnum

EXPECTED_FIELD_COUNT: Final[int] = 5

MONTH_NAMES: Final[tuple[str, ...]] = (
    "JAN",
    "FEB",
    "MAR",
    "APR",
    "MAY",
    "JUN",
    "JUL",
    "AUG",
    "SEP",
    "OCT",
    "NOV",
    "DEC",
)
DAY_NAMES: Final[tuple[str, ...]] = ("SUN", "MON", "TUE", "WED", "THU", "FRI", "SAT")

Domain = range


class CronFieldEnum(StrEnum):
    """Enum of the five cron fields, in the order they appear in an expression."""

    Minutes = "minutes"
    Hours = "hours"
    DaysOfMonth = "days_of_month"
    Months = "months"
    DaysOfWeek = "days_of_week"


FIELD_DOMAINS: Final[dict[CronFieldEnum, Domain]] = {
    CronFieldEnum.Minutes: range(60),
    CronFieldEnum.Hours: range(24),
    CronFieldEnum.DaysOfMonth: range(1, 32),
    CronFieldEnum.Months: range(1, 13),
    CronFieldEnum.DaysOfWeek: range(7),
}


class ParseErrorKind(StrEnum):
    """Enum of parse failures; the value is the message reported to callers."""

    TooManySections = f"too many sections; {EXPECTED_FIELD_COUNT} are required"
    NotEnoughSections = f"not enough sections; {EXPECTED_FIELD_COUNT} are required"
    IncorrectValue = "incorrect value"

    @property
    def message(self) -> str:
        """Return the human-readable message for this failure."""
        return str(self.value)

    @property
    def is_section_count_error(self) -> bool:
        """Return True for failures caused by a wrong number of fields."""
        return self is not ParseErrorKind.IncorrectValue
