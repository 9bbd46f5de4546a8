"""
Matchers

Type matchers used in assertion signatures. Synthesized structural matchers
(see ``parlance.structural``) implement the same ``Matcher`` protocol, so
either kind can stand in a signature slot or inside an expected shape.
"""

from .model import Issue, Matcher, MatchLevel, SlotParse, Unconstrained, format_path, format_value
from .types import (
    ANY,
    AWAITABLE,
    BOOLEAN,
    BYTES,
    CALLABLE,
    CLASS,
    DATE_LIKE,
    EXCEPTION,
    EXCEPTION_CLASS,
    FLOAT,
    INTEGER,
    ITERABLE,
    LIST,
    MAPPING,
    NONE,
    NUMBER,
    PATTERN,
    SEQUENCE,
    SET,
    SIZED,
    STRING,
    STRING_OR_SEQUENCE,
    TUPLE,
    AwaitableSource,
    Coercing,
    Identical,
    InstanceOf,
    OneOf,
    Predicate,
)

__all__ = [
    "Issue",
    "Matcher",
    "MatchLevel",
    "SlotParse",
    "Unconstrained",
    "format_path",
    "format_value",
    "AwaitableSource",
    "Coercing",
    "Identical",
    "InstanceOf",
    "OneOf",
    "Predicate",
    "ANY",
    "AWAITABLE",
    "BOOLEAN",
    "BYTES",
    "CALLABLE",
    "CLASS",
    "DATE_LIKE",
    "EXCEPTION",
    "EXCEPTION_CLASS",
    "FLOAT",
    "INTEGER",
    "ITERABLE",
    "LIST",
    "MAPPING",
    "NONE",
    "NUMBER",
    "PATTERN",
    "SEQUENCE",
    "SET",
    "SIZED",
    "STRING",
    "STRING_OR_SEQUENCE",
    "TUPLE",
]
