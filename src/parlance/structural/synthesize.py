"""
Value-to-matcher synthesis.

``synthesize(value, mode)`` walks a runtime value and builds a matcher that
accepts candidates equal to it (``exact``) or structurally satisfying it
(``partial``). The walk carries the chain of container ancestors and the
current depth; both belong to a single top-level call.
"""

import dataclasses
import enum
import re
import types
from collections.abc import Mapping, Sequence, Set
from dataclasses import dataclass
from datetime import date, datetime, time
from typing import Any, FrozenSet, List, Optional, Union

from ..assertion.deferred import DeferredAssertion
from ..logging import get_logger
from ..matchers.model import Matcher, Unconstrained
from .shapes import (
    AttributeShape,
    EachOf,
    EmptyMapping,
    Equals,
    ErrorShape,
    LiveAssertion,
    MappingShape,
    MemberShape,
    OfCategory,
    PatternLiteral,
    PatternSearch,
    SequenceShape,
    error_view,
)

logger = get_logger(__name__)

_PRIMITIVES = (type(None), bool, int, float, complex, str, bytes, bytearray, enum.Enum)


class Mode(str, enum.Enum):
    EXACT = "exact"
    PARTIAL = "partial"


@dataclass(frozen=True)
class SynthesisOptions:
    """Knobs for synthesis. See ``EXACT_OPTIONS`` and ``PARTIAL_OPTIONS``."""
    max_depth: int = 10
    positional_sequences: bool = True
    mixed_sequences: bool = True
    literal_patterns: bool = False
    literal_dates: bool = False
    literal_empty_mappings: bool = True

    def __post_init__(self) -> None:
        if self.max_depth < 1:
            raise ValueError(f"max_depth must be at least 1, got {self.max_depth}")


EXACT_OPTIONS = SynthesisOptions(literal_patterns=True, literal_dates=True)
PARTIAL_OPTIONS = SynthesisOptions()


def synthesize(
    value: Any,
    mode: Union[Mode, str] = Mode.PARTIAL,
    options: Optional[SynthesisOptions] = None,
) -> Matcher:
    """
    Build a matcher from an example value.

    Args:
        value: Any runtime value, cyclic graphs included
        mode: ``"exact"`` for deep equality, ``"partial"`` for satisfaction
        options: Overrides for the preset matching ``mode``

    Returns:
        A matcher; synthesis never raises for plain values and always terminates
    """
    mode = Mode(mode)
    if options is None:
        options = EXACT_OPTIONS if mode is Mode.EXACT else PARTIAL_OPTIONS
    return _synthesize(value, mode, options, frozenset(), 0)


def _synthesize(
    value: Any,
    mode: Mode,
    options: SynthesisOptions,
    ancestors: FrozenSet[int],
    depth: int,
) -> Matcher:
    if isinstance(value, Matcher):
        return value

    if isinstance(value, DeferredAssertion):
        if mode is Mode.PARTIAL:
            return LiveAssertion(value)
        return OfCategory(callable, "callable", expected=value)

    if isinstance(value, _PRIMITIVES):
        return Equals(value)

    if isinstance(value, (date, time)):
        if options.literal_dates:
            return Equals(value)
        return _date_category(value)

    if isinstance(value, re.Pattern):
        if options.literal_patterns:
            return PatternLiteral(value)
        return PatternSearch(value)

    if callable(value) and not isinstance(value, type):
        return OfCategory(callable, "callable", expected=value)

    if _is_container(value):
        if id(value) in ancestors:
            logger.debug(f"Cycle at depth {depth}; substituting unconstrained matcher")
            return Unconstrained()
        if depth >= options.max_depth:
            logger.debug(f"Depth limit {options.max_depth} reached; substituting unconstrained matcher")
            return Unconstrained()
        return _synthesize_container(value, mode, options, ancestors | {id(value)}, depth + 1)

    return Equals(value)


def _synthesize_container(
    value: Any,
    mode: Mode,
    options: SynthesisOptions,
    ancestors: FrozenSet[int],
    depth: int,
) -> Matcher:
    exact = mode is Mode.EXACT

    def child(item: Any) -> Matcher:
        return _synthesize(item, mode, options, ancestors, depth)

    if isinstance(value, Mapping):
        if not value and options.literal_empty_mappings:
            return EmptyMapping(value)
        return MappingShape({key: child(item) for key, item in value.items()}, exact, expected=value)

    if isinstance(value, BaseException):
        view = {key: child(item) for key, item in error_view(value).items()}
        return ErrorShape(type(value), MappingShape(view, exact, expected=value), exact, expected=value)

    if _is_dataclass_instance(value):
        fields = {f.name: child(getattr(value, f.name)) for f in dataclasses.fields(value)}
        return AttributeShape(type(value), fields, exact, expected=value)

    if not isinstance(value, (Sequence, Set)):
        fields = {name: child(item) for name, item in vars(value).items()}
        return AttributeShape(type(value), fields, exact, expected=value, closed=exact)

    if isinstance(value, Set):
        return MemberShape([child(item) for item in value], exact, expected=value)

    items = [child(item) for item in value]
    if options.positional_sequences:
        return SequenceShape(items, kind=type(value) if exact else None, expected=value)
    if options.mixed_sequences:
        return EachOf(_distinct(items), expected=value)
    return EachOf(items[:1], expected=value)


def _distinct(matchers: List[Matcher]) -> List[Matcher]:
    seen = set()
    unique = []
    for matcher in matchers:
        key = (type(matcher), repr(getattr(matcher, "expected", matcher)))
        if key not in seen:
            seen.add(key)
            unique.append(matcher)
    return unique


def _date_category(value: Any) -> Matcher:
    # datetime subclasses date, so test the narrower kind first
    if isinstance(value, datetime):
        return OfCategory(lambda v: isinstance(v, datetime), "datetime", expected=value)
    if isinstance(value, date):
        return OfCategory(lambda v: isinstance(v, date), "date", expected=value)
    return OfCategory(lambda v: isinstance(v, time), "time", expected=value)


def _is_dataclass_instance(value: Any) -> bool:
    return dataclasses.is_dataclass(value) and not isinstance(value, type)


def _has_attributes(value: Any) -> bool:
    return (
        hasattr(value, "__dict__")
        and not isinstance(value, (type, types.ModuleType))
    )


def _is_container(value: Any) -> bool:
    return (
        isinstance(value, (Mapping, Sequence, Set, BaseException))
        or _is_dataclass_instance(value)
        or _has_attributes(value)
    )
