"""Structural matcher synthesis: example values turned into exact or partial shapes."""

from .shapes import (
    AnyItem,
    AttributeShape,
    EachItem,
    EachOf,
    EmptyMapping,
    ErrorShape,
    Equals,
    LiveAssertion,
    MappingShape,
    MemberShape,
    OfCategory,
    PatternLiteral,
    PatternSearch,
    SequenceShape,
    error_view,
    naturally_equal,
)
from .synthesize import EXACT_OPTIONS, PARTIAL_OPTIONS, Mode, SynthesisOptions, synthesize

__all__ = [
    "synthesize",
    "Mode",
    "SynthesisOptions",
    "EXACT_OPTIONS",
    "PARTIAL_OPTIONS",
    "naturally_equal",
    "error_view",
    "AnyItem",
    "AttributeShape",
    "EachItem",
    "EachOf",
    "EmptyMapping",
    "ErrorShape",
    "Equals",
    "LiveAssertion",
    "MappingShape",
    "MemberShape",
    "OfCategory",
    "PatternLiteral",
    "PatternSearch",
    "SequenceShape",
]
