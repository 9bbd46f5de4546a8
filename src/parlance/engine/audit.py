"""
Ambiguity audit.

Builds calls from each definition's own signature, filling type slots with
sample values the slot accepts strictly, and reports every call that more
than one definition matches exactly.
"""

import itertools
import re
from dataclasses import dataclass
from datetime import date, datetime, time
from typing import Any, Iterable, List, Optional, Sequence, Tuple

from ..assertion.model import AssertionDefinition
from ..assertion.slots import PhraseSlot
from ..logging import get_logger
from ..matchers.model import MatchLevel
from .registry import AssertionSet
from .resolver import match_all

logger = get_logger(__name__)


@dataclass(frozen=True)
class Ambiguity:
    args: Tuple[Any, ...]
    assertion_ids: Tuple[str, ...]


def _sample_function() -> None:
    return None


async def _sample_coroutine_function() -> None:
    return None


def default_samples() -> List[Any]:
    """A spread of values covering every category the built-in slots distinguish."""
    return [
        None, True, False, 0, 1, -2, 2.5, float("nan"), float("inf"), 1j,
        "", "abc", "2024-01-01", b"bytes",
        [], [1, 2], (), (1, "a"), {}, {"a": 1}, set(), {1, 2}, frozenset({"x"}),
        ValueError, KeyError, ValueError("boom"), int, str,
        _sample_function, _sample_coroutine_function, len,
        re.compile("a+"), date(2024, 1, 1), datetime(2024, 1, 1, 12, 0), time(12, 0),
    ]


def calls_for(definition: AssertionDefinition, samples: Sequence[Any], per_slot: int = 4) -> Iterable[Tuple[Any, ...]]:
    """Calls shaped like ``definition``'s signature, built from strictly accepted samples."""
    choices = []
    for slot in definition.slots:
        if isinstance(slot, PhraseSlot):
            choices.append(slot.phrases)
            continue
        accepted = [s for s in samples if slot.matcher.parse(s).level is MatchLevel.STRICT]
        if not accepted:
            accepted = [s for s in samples if slot.matcher.parse(s).accepted]
        choices.append(accepted[:per_slot])
    return itertools.product(*choices)


def find_ambiguities(assertion_set: AssertionSet, samples: Optional[Sequence[Any]] = None) -> List[Ambiguity]:
    """
    Audit a set of definitions for calls with more than one exact match.

    Args:
        assertion_set: Sync or async definitions
        samples: Values used to fill type slots; defaults to ``default_samples()``

    Returns:
        One Ambiguity per distinct group of competing definitions
    """
    samples = default_samples() if samples is None else list(samples)
    found: List[Ambiguity] = []
    reported = set()
    for definition in assertion_set:
        for args in calls_for(definition, samples):
            exact = [r for r in match_all(assertion_set, args) if r.success and r.exact_match]
            if len(exact) < 2:
                continue
            ids = tuple(r.definition.id for r in exact)
            if ids in reported:
                continue
            reported.add(ids)
            logger.warning(f"Ambiguous call {args!r}: {', '.join(ids)}")
            found.append(Ambiguity(args, ids))
    return found
