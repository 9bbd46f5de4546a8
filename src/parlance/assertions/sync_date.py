"""
Date assertions.

Date slots accept ``date``/``datetime`` values and ISO 8601 strings, which
are parsed before the implementation sees them. A plain ``date`` compared
with a ``datetime`` is taken as midnight of that day.
"""

from datetime import date, datetime, time

from ..assertion.model import create_assertion
from ..assertion.outcome import Failure
from ..matchers.model import format_value
from ..matchers.types import DATE_LIKE


def as_datetime(value: date) -> datetime:
    if isinstance(value, datetime):
        return value
    return datetime.combine(value, time())


def _now_for(value: date) -> datetime:
    if isinstance(value, datetime) and value.tzinfo is not None:
        return datetime.now(value.tzinfo)
    return datetime.now()


def _before(subject, other):
    if as_datetime(subject) < as_datetime(other):
        return None
    return Failure(f"Expected {format_value(subject)} to be before {format_value(other)}", expected=other)


def _after(subject, other):
    if as_datetime(subject) > as_datetime(other):
        return None
    return Failure(f"Expected {format_value(subject)} to be after {format_value(other)}", expected=other)


def _between(subject, start, end):
    if as_datetime(start) <= as_datetime(subject) <= as_datetime(end):
        return None
    return Failure(
        f"Expected {format_value(subject)} to be between {format_value(start)} and {format_value(end)}",
        expected=(start, end),
    )


def _same_day(subject, other):
    if as_datetime(subject).date() == as_datetime(other).date():
        return None
    return Failure(f"Expected {format_value(subject)} to be the same day as {format_value(other)}", expected=other)


def _in_past(subject):
    if as_datetime(subject) < _now_for(subject):
        return None
    return Failure(f"Expected {format_value(subject)} to be in the past")


def _in_future(subject):
    if as_datetime(subject) > _now_for(subject):
        return None
    return Failure(f"Expected {format_value(subject)} to be in the future")


def _weekday(subject):
    if subject.weekday() < 5:
        return None
    return Failure(f"Expected {format_value(subject)} to be a weekday")


def _weekend(subject):
    if subject.weekday() >= 5:
        return None
    return Failure(f"Expected {format_value(subject)} to be on a weekend")


SYNC_DATE_ASSERTIONS = [
    create_assertion([DATE_LIKE, ["to be before", "to be earlier than"], DATE_LIKE], _before),
    create_assertion([DATE_LIKE, ["to be after", "to be later than"], DATE_LIKE], _after),
    create_assertion([DATE_LIKE, "to be between", DATE_LIKE, DATE_LIKE], _between),
    create_assertion([DATE_LIKE, "to be the same day as", DATE_LIKE], _same_day),
    create_assertion([DATE_LIKE, "to be in the past"], _in_past),
    create_assertion([DATE_LIKE, "to be in the future"], _in_future),
    create_assertion([DATE_LIKE, "to be a weekday"], _weekday),
    create_assertion([DATE_LIKE, ["to be on a weekend", "to be a weekend day"]], _weekend),
]
