"""
Call resolution: pick the one definition whose signature matches a call.

Each candidate is walked slot by slot against the call arguments. A unique
exact match wins; with no exact match the first loose match in registration
order wins; more than one exact match is a registration defect.
"""

from dataclasses import dataclass
from typing import Any, List, Optional, Sequence, Tuple

from ..assertion.model import AssertionDefinition
from ..assertion.slots import PhraseSlot
from ..config import Settings
from ..errors import AmbiguousAssertionError, UnknownAssertionError, format_call
from ..logging import get_logger
from ..matchers.model import MatchLevel, format_value
from .registry import AssertionSet

logger = get_logger(__name__)


@dataclass(frozen=True)
class Rejection:
    """Why one candidate did not match a call."""
    assertion_id: str
    slot_index: int
    reason: str


@dataclass(frozen=True)
class MatchResult:
    definition: AssertionDefinition
    success: bool
    exact_match: bool = False
    operands: Tuple[Any, ...] = ()
    failure_reason: Optional[str] = None
    slot_index: Optional[int] = None

    def rejection(self) -> Rejection:
        return Rejection(self.definition.id, self.slot_index or 0, self.failure_reason or "")


def _rejected(definition: AssertionDefinition, index: int, reason: str) -> MatchResult:
    return MatchResult(definition, success=False, failure_reason=reason, slot_index=index)


def match_definition(definition: AssertionDefinition, args: Sequence[Any]) -> MatchResult:
    """
    Match a call against one definition.

    Args:
        definition: Candidate definition
        args: Call arguments, subject first

    Returns:
        MatchResult with the narrowed operands on success, or the rejecting
        slot and reason
    """
    operands = []
    exact = True
    for index, slot in enumerate(definition.slots):
        if index >= len(args):
            return _rejected(definition, index, f"missing argument for {slot}")
        arg = args[index]
        if isinstance(slot, PhraseSlot):
            if not slot.accepts(arg):
                return _rejected(definition, index, f"expected phrase {slot}, got {format_value(arg)}")
            continue
        parsed = slot.matcher.parse(arg)
        if not parsed.accepted:
            return _rejected(definition, index, f"argument {index}: {parsed.reason}")
        if parsed.level is MatchLevel.LOOSE:
            exact = False
        operands.append(parsed.value)

    if len(args) > len(definition.slots):
        extra = ", ".join(format_value(arg) for arg in args[len(definition.slots):])
        return _rejected(definition, len(definition.slots), f"unexpected trailing arguments: {extra}")

    return MatchResult(definition, success=True, exact_match=exact, operands=tuple(operands))


def match_all(assertion_set: AssertionSet, args: Sequence[Any]) -> List[MatchResult]:
    """Match a call against every definition in the set."""
    return [match_definition(definition, args) for definition in assertion_set.definitions]


def resolve(assertion_set: AssertionSet, args: Sequence[Any], settings: Optional[Settings] = None) -> MatchResult:
    """
    Resolve a call to exactly one definition.

    Raises:
        AmbiguousAssertionError: If two or more definitions match exactly
        UnknownAssertionError: If nothing matches
    """
    settings = settings or Settings()
    args = tuple(args)
    candidates = assertion_set.candidates(args) if settings.use_phrase_index else assertion_set.definitions

    exact: List[MatchResult] = []
    first_loose: Optional[MatchResult] = None
    for definition in candidates:
        result = match_definition(definition, args)
        if not result.success:
            continue
        if result.exact_match:
            exact.append(result)
        elif first_loose is None:
            first_loose = result

    if len(exact) > 1:
        raise AmbiguousAssertionError(args, [result.definition.id for result in exact])
    if exact:
        logger.debug(f"Resolved {format_call(args)} to {exact[0].definition.id} (exact)")
        return exact[0]
    if first_loose is not None:
        logger.debug(f"Resolved {format_call(args)} to {first_loose.definition.id} (loose)")
        return first_loose

    rejections = [result.rejection() for result in match_all(assertion_set, args)]
    raise UnknownAssertionError(args, rejections, limit=settings.max_reported_rejections)
