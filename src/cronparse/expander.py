"""Expansion of a single cron field into the explicit integers it denotes.

A field is classified once into one of three forms and then expanded:

* ``*/N`` -- every domain value divisible by ``N``;
* ``*`` -- the whole domain;
* anything else -- a comma-separated list of values and ``MIN-MAX`` ranges.

Malformed input never raises: unresolvable list items are dropped, which may
leave the field empty.
"""

from __future__ import annotations

__all__ = [
    "FieldForm",
    "StepWildcard",
    "ValueList",
    "Wildcard",
    "classify_field",
    "expand_field",
    "expand_term",
]

from dataclasses import dataclass
import re
from typing import TYPE_CHECKING, Final, TypeAlias

from cronparse.py_compatibility import assert_never
from cronparse.resolvers import INTEGER_RESOLVER
from cronparse.results import INVALID, ItemResult, Resolved

if TYPE_CHECKING:
    from cronparse.common import Domain
    from cronparse.resolvers import ResolverProtocol

_STEP_WILDCARD_RE: Final[re.Pattern[str]] = re.compile(r"\*/([0-9]+)")


@dataclass(frozen=True, slots=True)
class StepWildcard:
    """``*/N`` form; ``step`` is always positive."""

    step: int


@dataclass(frozen=True, slots=True)
class Wildcard:
    """``*`` form."""


@dataclass(frozen=True, slots=True)
class ValueList:
    """Comma-separated list form; each term is a value or a ``MIN-MAX`` range."""

    terms: tuple[str, ...]


FieldForm: TypeAlias = StepWildcard | Wildcard | ValueList


def classify_field(text: str) -> FieldForm:
    """Decide which grammar form *text* uses.

    A step wildcard with a zero, non-numeric or unconvertibly long step is not a
    step wildcard; it is classified as a list and fails to resolve there.
    """
    if (match := _STEP_WILDCARD_RE.fullmatch(text)) is not None and (step := _to_step(match.group(1))) > 0:
        return StepWildcard(step)
    if text == "*":
        return Wildcard()
    return ValueList(tuple(text.split(",")))


def _to_step(digits: str) -> int:
    try:
        return int(digits)
    except ValueError:
        return 0


def expand_field(
    text: str, domain: Domain, resolver: ResolverProtocol = INTEGER_RESOLVER
) -> tuple[int, ...]:
    """Expand one field's text into ascending integers within *domain*.

    :param text: Raw field text, e.g. ``"*/15"``, ``"1-5"`` or ``"JAN,MAR"``.
    :param domain: Inclusive range of legal values for the field.
    :param resolver: Resolver applied to every list value and range endpoint.
    :returns: Sorted values; duplicates are kept and the tuple may be empty.
    """
    form = classify_field(text)
    match form:
        case StepWildcard(step=step):
            # Filters the domain itself, so 1-based domains are not re-based.
            return tuple(value for value in domain if value % step == 0)
        case Wildcard():
            return tuple(domain)
        case ValueList(terms=terms):
            items = [item for term in terms for item in expand_term(term, resolver, domain)]
            return _surviving_values(items, domain)
        case _:
            assert_never(form)


def expand_term(
    term: str, resolver: ResolverProtocol = INTEGER_RESOLVER, domain: Domain | None = None
) -> list[ItemResult]:
    """Resolve one list term into per-item results.

    A range with an unresolvable endpoint, more than one ``-`` or a start greater
    than its end collapses to a single :data:`~cronparse.results.INVALID`. When
    *domain* is given, ranges are clipped to it before they are enumerated.
    """
    match term.split("-"):
        case [single]:
            return [resolver.resolve(single)]
        case [low, high]:
            match resolver.resolve(low), resolver.resolve(high):
                case Resolved(value=start), Resolved(value=end) if start <= end:
                    if domain is not None:
                        start, end = max(start, domain.start), min(end, domain.stop - 1)
                    return [Resolved(value) for value in range(start, end + 1)]
                case _:
                    return [INVALID]
        case _:
            return [INVALID]


def _surviving_values(items: list[ItemResult], domain: Domain) -> tuple[int, ...]:
    """Drop invalid items and values outside *domain*, then sort what is left."""
    return tuple(
        sorted(item.value for item in items if isinstance(item, Resolved) and item.value in domain)
    )
