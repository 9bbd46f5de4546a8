"""
Type and value-category assertions.

Each of these is a schema assertion: the implementation is a matcher applied
to the subject, so failures come back as structured issues.
"""

import inspect
import math
import re
from datetime import date

from ..assertion.model import create_assertion
from ..matchers.types import (
    BOOLEAN,
    CALLABLE,
    CLASS,
    EXCEPTION,
    FLOAT,
    INTEGER,
    LIST,
    MAPPING,
    NONE,
    NUMBER,
    SEQUENCE,
    SET,
    STRING,
    TUPLE,
    Identical,
    InstanceOf,
    Predicate,
)


def _number_where(test, name):
    return Predicate(lambda value: NUMBER.accepts(value) and test(value), name)


POSITIVE = _number_where(lambda value: value > 0, "positive number")
NEGATIVE = _number_where(lambda value: value < 0, "negative number")
# Only floats can be non-finite
FINITE = _number_where(lambda value: not isinstance(value, float) or math.isfinite(value), "finite number")
INFINITE = _number_where(lambda value: isinstance(value, float) and math.isinf(value), "infinite number")
NAN = Predicate(lambda value: isinstance(value, float) and math.isnan(value), "NaN")


SYNC_BASIC_ASSERTIONS = [
    create_assertion(["to be a string"], STRING),
    create_assertion(["to be a number"], NUMBER),
    create_assertion([["to be an integer", "to be an int"]], INTEGER),
    create_assertion(["to be a float"], FLOAT),
    create_assertion([["to be a boolean", "to be a bool"]], BOOLEAN),
    create_assertion(["to be true"], Identical(True, name="True")),
    create_assertion(["to be false"], Identical(False, name="False")),
    create_assertion(["to be None"], NONE),
    create_assertion(["to be truthy"], Predicate(bool, "truthy value")),
    create_assertion(["to be falsy"], Predicate(lambda value: not value, "falsy value")),
    create_assertion(["to be positive"], POSITIVE),
    create_assertion(["to be negative"], NEGATIVE),
    create_assertion(["to be finite"], FINITE),
    create_assertion(["to be infinite"], INFINITE),
    create_assertion(["to be NaN"], NAN),
    create_assertion([["to be callable", "to be a function"]], CALLABLE),
    create_assertion(
        [["to be an async function", "to be a coroutine function"]],
        Predicate(inspect.iscoroutinefunction, "coroutine function"),
    ),
    create_assertion(["to be awaitable"], Predicate(inspect.isawaitable, "awaitable")),
    create_assertion(["to be a class"], CLASS),
    create_assertion(["to be a list"], LIST),
    create_assertion(["to be a tuple"], TUPLE),
    create_assertion([["to be a dict", "to be a mapping"]], MAPPING),
    create_assertion(["to be a set"], SET),
    create_assertion(["to be a sequence"], SEQUENCE),
    create_assertion([["to be an exception", "to be an error"]], EXCEPTION),
    create_assertion(["to be a date"], InstanceOf(date, name="date")),
    create_assertion([["to be a pattern", "to be a regex"]], InstanceOf(re.Pattern, name="pattern")),
]
