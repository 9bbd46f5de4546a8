from dataclasses import dataclass
from typing import Any, Callable, Optional, Sequence, Tuple, Union

from slugify import slugify

from ..errors import AssertionImplementationError
from ..matchers.model import Matcher
from .slots import Slot, slotify

Implementation = Union[Callable[..., Any], Matcher]


@dataclass(frozen=True)
class AssertionDefinition:
    """
    One registered assertion.

    ``impl`` is either a callable receiving the operands (subject first) or a
    matcher applied to the subject.
    """
    id: str
    parts: Tuple[Any, ...]
    slots: Tuple[Slot, ...]
    impl: Implementation
    is_async: bool = False

    @property
    def phrases(self) -> Tuple[str, ...]:
        """Phrases accepted at the first phrase position of a call."""
        return self.slots[1].phrases

    @property
    def is_schema(self) -> bool:
        return isinstance(self.impl, Matcher)

    def __str__(self) -> str:
        return " ".join(str(slot) for slot in self.slots)


def assertion_id(slots: Sequence[Slot], part_count: int) -> str:
    """Stable id: slug of the rendered signature plus a ``<slots>s<parts>p`` suffix."""
    rendered = " ".join(str(slot) for slot in slots)
    return f"{slugify(rendered)}-{len(slots)}s{part_count}p"


def _build(parts: Sequence[Any], impl: Implementation, id: Optional[str], is_async: bool) -> AssertionDefinition:
    if not (callable(impl) or isinstance(impl, Matcher)):
        raise AssertionImplementationError(
            f"Assertion implementation must be callable or a matcher, got {impl!r}", result=impl
        )
    slots = slotify(parts)
    if id is not None and not (isinstance(id, str) and id):
        raise AssertionImplementationError(f"Assertion id must be a non-empty string, got {id!r}")
    return AssertionDefinition(
        id=id or assertion_id(slots, len(parts)),
        parts=tuple(parts),
        slots=slots,
        impl=impl,
        is_async=is_async,
    )


def create_assertion(parts: Sequence[Any], impl: Implementation, id: Optional[str] = None) -> AssertionDefinition:
    """
    Define a synchronous assertion.

    Args:
        parts: Signature parts, e.g. ``[NUMBER, ["to be within", "to be between"], NUMBER, NUMBER]``
        impl: Callable taking the operands, or a matcher for the subject
        id: Explicit id; derived from the signature when omitted

    Returns:
        An immutable AssertionDefinition
    """
    return _build(parts, impl, id, is_async=False)


def create_async_assertion(parts: Sequence[Any], impl: Implementation, id: Optional[str] = None) -> AssertionDefinition:
    """Define an assertion whose implementation may return an awaitable."""
    return _build(parts, impl, id, is_async=True)
