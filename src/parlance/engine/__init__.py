"""
Assertion engine

Resolution, negation, conjunction splitting and execution over an immutable
registry of assertion definitions.
"""

from .audit import Ambiguity, default_samples, find_ambiguities
from .conjunction import regroupings, split_conjunctions
from .executor import execute, execute_async
from .expect import Engine
from .negation import strip_negation
from .registry import AssertionSet, Registry
from .resolver import MatchResult, Rejection, match_all, match_definition, resolve

__all__ = [
    "Ambiguity",
    "AssertionSet",
    "Engine",
    "MatchResult",
    "Registry",
    "Rejection",
    "default_samples",
    "execute",
    "execute_async",
    "find_ambiguities",
    "match_all",
    "match_definition",
    "regroupings",
    "resolve",
    "split_conjunctions",
    "strip_negation",
]
