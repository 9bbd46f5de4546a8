"""Assertions over sized collections, sequences, sets and mappings."""

from typing import Any

from ..assertion.model import create_assertion
from ..assertion.outcome import Failure, delegate
from ..matchers.model import format_value
from ..matchers.types import ANY, INTEGER, ITERABLE, MAPPING, SEQUENCE, SET, SIZED, OneOf
from ..structural.shapes import AnyItem, EachItem, naturally_equal
from ..structural.synthesize import Mode, synthesize

CONTAIN_PHRASES = ["to contain", "to include"]


def _has_length(subject, expected: int):
    if len(subject) == expected:
        return None
    return Failure(
        f"Expected {format_value(subject)} to have length {expected}, got {len(subject)}",
        expected=expected,
    )


def _has_size(subject, expected: int):
    if len(subject) == expected:
        return None
    return Failure(
        f"Expected {format_value(subject)} to have size {expected}, got {len(subject)}",
        expected=expected,
    )


def _is_empty(subject):
    if len(subject) == 0:
        return None
    return Failure(f"Expected {format_value(subject)} to be empty")


def _contains(subject, item: Any):
    if any(naturally_equal(item, element) for element in subject):
        return None
    return Failure(f"Expected {format_value(subject)} to contain {format_value(item)}", expected=item)


def _has_key(subject, key: Any):
    if key in subject:
        return None
    return Failure(f"Expected {format_value(subject)} to have key {format_value(key)}", expected=key)


def _has_keys(subject, keys):
    missing = [key for key in keys if key not in subject]
    if not missing:
        return None
    return Failure(
        f"Expected {format_value(subject)} to have keys {format_value(list(keys))}, "
        f"missing {format_value(missing)}",
        expected=keys,
    )


def _has_value(subject, value: Any):
    if any(naturally_equal(value, candidate) for candidate in subject.values()):
        return None
    return Failure(f"Expected {format_value(subject)} to have value {format_value(value)}", expected=value)


def _has_entry(subject, key: Any, value: Any):
    if key in subject and naturally_equal(value, subject[key]):
        return None
    return Failure(
        f"Expected {format_value(subject)} to have entry {format_value(key)}: {format_value(value)}",
        expected={key: value},
    )


def _subset(subject, other):
    if subject <= other:
        return None
    return Failure(f"Expected {format_value(subject)} to be a subset of {format_value(other)}", expected=other)


def _superset(subject, other):
    if subject >= other:
        return None
    return Failure(f"Expected {format_value(subject)} to be a superset of {format_value(other)}", expected=other)


def _disjoint(subject, other):
    shared = [element for element in subject if element in other]
    if not shared:
        return None
    return Failure(
        f"Expected {format_value(subject)} to be disjoint from {format_value(other)}, sharing {format_value(shared)}",
        expected=other,
    )


def _items_satisfy(subject, expected):
    return delegate(EachItem(synthesize(expected, Mode.PARTIAL)), list(subject))


def _any_item_satisfies(subject, expected):
    return delegate(AnyItem(synthesize(expected, Mode.PARTIAL)), list(subject))


SYNC_COLLECTION_ASSERTIONS = [
    create_assertion([SIZED, "to have length", INTEGER], _has_length),
    create_assertion([OneOf(MAPPING, SET, name="mapping or set"), "to have size", INTEGER], _has_size),
    create_assertion([SIZED, "to be empty"], _is_empty),
    create_assertion([SEQUENCE, CONTAIN_PHRASES, ANY], _contains),
    create_assertion([SET, CONTAIN_PHRASES, ANY], _contains),
    create_assertion([MAPPING, "to have key", ANY], _has_key),
    create_assertion([MAPPING, "to have keys", SEQUENCE], _has_keys),
    create_assertion([MAPPING, "to have value", ANY], _has_value),
    create_assertion([MAPPING, "to have entry", ANY, ANY], _has_entry),
    create_assertion([SET, "to be a subset of", SET], _subset),
    create_assertion([SET, "to be a superset of", SET], _superset),
    create_assertion([SET, "to be disjoint from", SET], _disjoint),
    create_assertion(
        [ITERABLE, ["to have items satisfying", "to have all items satisfying"], ANY],
        _items_satisfy,
    ),
    create_assertion([ITERABLE, "to have an item satisfying", ANY], _any_item_satisfies),
]
