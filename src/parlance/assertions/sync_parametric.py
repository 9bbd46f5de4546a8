"""
Assertions taking operands: equality, structure, comparisons, strings, errors and types.
"""

import math
import re
from collections.abc import Mapping
from datetime import date
from typing import Any, Optional

from ..assertion.model import create_assertion
from ..assertion.outcome import Failure, delegate
from ..matchers.model import Matcher, format_value
from ..matchers.types import (
    ANY,
    BOOLEAN,
    BYTES,
    CALLABLE,
    CLASS,
    EXCEPTION,
    EXCEPTION_CLASS,
    FLOAT,
    INTEGER,
    LIST,
    MAPPING,
    NONE,
    NUMBER,
    PATTERN,
    SEQUENCE,
    SET,
    STRING,
    TUPLE,
    InstanceOf,
    OneOf,
)
from ..structural.shapes import Equals, error_view, naturally_equal
from ..structural.synthesize import Mode, synthesize

# Type names understood by "to be a" / "to have type", beyond class names
TYPE_NAMES = {
    "string": STRING,
    "str": STRING,
    "number": NUMBER,
    "integer": INTEGER,
    "int": INTEGER,
    "float": FLOAT,
    "boolean": BOOLEAN,
    "bool": BOOLEAN,
    "bytes": BYTES,
    "list": LIST,
    "array": LIST,
    "tuple": TUPLE,
    "sequence": SEQUENCE,
    "dict": MAPPING,
    "mapping": MAPPING,
    "set": SET,
    "function": CALLABLE,
    "callable": CALLABLE,
    "class": CLASS,
    "none": NONE,
    "null": NONE,
    "error": EXCEPTION,
    "exception": EXCEPTION,
    "date": InstanceOf(date, name="date"),
    "regex": InstanceOf(re.Pattern, name="pattern"),
    "pattern": InstanceOf(re.Pattern, name="pattern"),
}


def _is(subject: Any, expected: Any):
    if subject is expected:
        return None
    return Failure(f"Expected {format_value(subject)} to be {format_value(expected)}", expected=expected)


def _equal(subject: Any, expected: Any) -> Matcher:
    return Equals(expected)


def _deep_equal(subject: Any, expected: Any) -> Matcher:
    return synthesize(expected, Mode.EXACT)


def _satisfy(subject: Any, expected: Any) -> Matcher:
    return synthesize(expected, Mode.PARTIAL)


def _compare(symbol: str, test):
    def impl(subject, other):
        if test(subject, other):
            return None
        return Failure(f"Expected {format_value(subject)} to be {symbol} {format_value(other)}", expected=other)
    return impl


def _within(subject, minimum, maximum):
    if minimum <= subject <= maximum:
        return None
    return Failure(
        f"Expected {format_value(subject)} to be within range [{minimum}, {maximum}]",
        expected=(minimum, maximum),
    )


def _close_to(subject, target, tolerance: Optional[float] = None):
    if tolerance is None:
        close = math.isclose(subject, target, rel_tol=1e-9, abs_tol=1e-12)
    else:
        close = abs(subject - target) <= tolerance
    if close:
        return None
    within = f" (tolerance {tolerance})" if tolerance is not None else ""
    return Failure(f"Expected {format_value(subject)} to be close to {format_value(target)}{within}", expected=target)


def _match(subject: str, pattern: re.Pattern):
    if pattern.search(subject):
        return None
    return Failure(f"Expected {format_value(subject)} to match /{pattern.pattern}/", expected=pattern)


def _starts_with(subject: str, prefix: str):
    if subject.startswith(prefix):
        return None
    return Failure(f"Expected {format_value(subject)} to start with {format_value(prefix)}", expected=prefix)


def _ends_with(subject: str, suffix: str):
    if subject.endswith(suffix):
        return None
    return Failure(f"Expected {format_value(subject)} to end with {format_value(suffix)}", expected=suffix)


def _contains_text(subject: str, needle: str):
    if needle in subject:
        return None
    return Failure(f"Expected {format_value(subject)} to contain {format_value(needle)}", expected=needle)


def _call_for_error(fn) -> Optional[Exception]:
    try:
        fn()
    except Exception as exc:
        return exc
    return None


def _did_not_raise(fn) -> Failure:
    return Failure(f"Expected {format_value(fn)} to raise, but it returned normally")


def _raises(fn):
    if _call_for_error(fn) is None:
        return _did_not_raise(fn)
    return None


def _raises_type(fn, error_class):
    error = _call_for_error(fn)
    if error is None:
        return _did_not_raise(fn)
    if isinstance(error, error_class):
        return None
    return Failure(
        f"Expected {format_value(fn)} to raise {error_class.__name__}, but it raised {error!r}",
        actual=error,
        expected=error_class,
    )


def _raises_message(fn, message):
    error = _call_for_error(fn)
    if error is None:
        return _did_not_raise(fn)
    text = str(error)
    if isinstance(message, re.Pattern):
        ok = bool(message.search(text))
        wanted = f"/{message.pattern}/"
    else:
        ok = text == message
        wanted = format_value(message)
    if ok:
        return None
    return Failure(
        f"Expected {format_value(fn)} to raise with message {wanted}, got {format_value(text)}",
        actual=error,
        expected=message,
    )


def _raises_satisfying(fn, expected):
    error = _call_for_error(fn)
    if error is None:
        return _did_not_raise(fn)
    subject = error_view(error) if isinstance(expected, Mapping) else error
    return delegate(synthesize(expected, Mode.PARTIAL), subject)


def _instance_of(subject, cls):
    if isinstance(subject, cls):
        return None
    return Failure(
        f"Expected {format_value(subject)} to be an instance of {cls.__name__}, got {type(subject).__name__}",
        expected=cls,
    )


def _has_type_name(subject, name: str):
    matcher = TYPE_NAMES.get(name.lower())
    if matcher is not None:
        ok = matcher.accepts(subject)
    else:
        ok = any(klass.__name__.lower() == name.lower() for klass in type(subject).__mro__)
    if ok:
        return None
    return Failure(f"Expected {format_value(subject)} to be a {name}, got {type(subject).__name__}", expected=name)


def _one_of(subject, options):
    if any(naturally_equal(option, subject) for option in options):
        return None
    return Failure(f"Expected {format_value(subject)} to be one of {format_value(options)}", expected=options)


def _has_attribute(subject, name: str):
    if hasattr(subject, name):
        return None
    return Failure(f"Expected {format_value(subject)} to have attribute {name!r}", expected=name)


RAISE_PHRASES = ["to raise", "to throw"]

SYNC_PARAMETRIC_ASSERTIONS = [
    create_assertion([["to be", "to be identical to"], ANY], _is),
    create_assertion([["to equal", "to be equal to"], ANY], _equal),
    create_assertion([["to deep equal", "to deeply equal"], ANY], _deep_equal),
    create_assertion([["to satisfy", "to be like"], ANY], _satisfy),
    create_assertion(
        [NUMBER, ["to be greater than", "to be above"], NUMBER],
        _compare(">", lambda a, b: a > b),
    ),
    create_assertion(
        [NUMBER, ["to be less than", "to be below"], NUMBER],
        _compare("<", lambda a, b: a < b),
    ),
    create_assertion(
        [NUMBER, ["to be greater than or equal to", "to be at least"], NUMBER],
        _compare(">=", lambda a, b: a >= b),
    ),
    create_assertion(
        [NUMBER, ["to be less than or equal to", "to be at most"], NUMBER],
        _compare("<=", lambda a, b: a <= b),
    ),
    create_assertion([NUMBER, ["to be within", "to be between"], NUMBER, NUMBER], _within),
    create_assertion([NUMBER, "to be close to", NUMBER], _close_to),
    create_assertion([NUMBER, "to be close to", NUMBER, NUMBER], _close_to),
    create_assertion([STRING, "to match", PATTERN], _match),
    create_assertion([STRING, ["to start with", "to begin with"], STRING], _starts_with),
    create_assertion([STRING, "to end with", STRING], _ends_with),
    create_assertion([STRING, ["to contain", "to include"], STRING], _contains_text),
    create_assertion([CALLABLE, RAISE_PHRASES], _raises),
    create_assertion([CALLABLE, RAISE_PHRASES, EXCEPTION_CLASS], _raises_type),
    create_assertion(
        [CALLABLE, RAISE_PHRASES, OneOf(STRING, PATTERN, name="message")],
        _raises_message,
    ),
    create_assertion(
        [CALLABLE, ["to raise an error satisfying", "to throw an error satisfying"], ANY],
        _raises_satisfying,
    ),
    create_assertion([["to be an instance of", "to be a", "to be an"], CLASS], _instance_of),
    create_assertion([["to be a", "to be an", "to have type"], STRING], _has_type_name),
    create_assertion(["to be one of", SEQUENCE], _one_of),
    create_assertion(["to have attribute", STRING], _has_attribute),
]
