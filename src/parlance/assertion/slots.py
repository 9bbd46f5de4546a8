"""
Signature slots and the ``slotify`` builder.

A definition's parts are phrases (``"to be within"``, or a list of synonyms)
and type matchers. ``slotify`` turns them into the slot sequence the resolver
walks, prepending an implicit subject slot when the signature opens with a
phrase, so every call reads ``[subject, phrase, ...rest]``.
"""

from dataclasses import dataclass
from typing import Any, Sequence, Tuple, Union

from ..config import CONJUNCTION, NEGATION_PREFIX
from ..errors import AssertionImplementationError
from ..matchers.model import Matcher
from ..matchers.types import ANY, InstanceOf


@dataclass(frozen=True)
class PhraseSlot:
    """Interchangeable synonyms; exactly one must appear verbatim."""
    phrases: Tuple[str, ...]

    def accepts(self, arg: Any) -> bool:
        return isinstance(arg, str) and arg in self.phrases

    def __str__(self) -> str:
        return " | ".join(repr(phrase) for phrase in self.phrases)


@dataclass(frozen=True)
class TypeSlot:
    """Validates and narrows one operand."""
    matcher: Matcher
    role: str = "operand"

    def __str__(self) -> str:
        return "{" + self.matcher.describe() + "}"


Slot = Union[PhraseSlot, TypeSlot]


def slotify(parts: Sequence[Any]) -> Tuple[Slot, ...]:
    """
    Build the slot sequence for a signature.

    Args:
        parts: Phrases (str, or list/tuple of str), matchers, or bare classes

    Returns:
        Tuple of slots, subject first

    Raises:
        AssertionImplementationError: If the signature is malformed
    """
    if isinstance(parts, (str, bytes)) or not parts:
        raise AssertionImplementationError(f"Assertion parts must be a non-empty list, got {parts!r}")

    slots = [_to_slot(part) for part in parts]

    if not any(isinstance(slot, PhraseSlot) for slot in slots):
        raise AssertionImplementationError(f"Assertion parts contain no phrase: {parts!r}")

    if isinstance(slots[0], PhraseSlot):
        slots.insert(0, TypeSlot(ANY, role="subject"))
    else:
        slots[0] = TypeSlot(slots[0].matcher, role="subject")

    if not isinstance(slots[1], PhraseSlot):
        raise AssertionImplementationError(
            f"The part after the subject must be a phrase: {parts!r}"
        )

    for index, slot in enumerate(slots):
        if not isinstance(slot, PhraseSlot):
            continue
        for phrase in slot.phrases:
            if phrase.startswith(NEGATION_PREFIX):
                raise AssertionImplementationError(
                    f"Phrase {phrase!r} starts with the reserved negation prefix {NEGATION_PREFIX!r}"
                )
            if phrase == CONJUNCTION:
                follows = slots[index + 1] if index + 1 < len(slots) else None
                if not isinstance(follows, TypeSlot):
                    raise AssertionImplementationError(
                        f"Phrase {CONJUNCTION!r} must be followed by a type slot: {parts!r}"
                    )

    return tuple(slots)


def _to_slot(part: Any) -> Slot:
    if isinstance(part, str):
        return PhraseSlot(_check_phrases((part,)))
    if isinstance(part, (list, tuple)):
        return PhraseSlot(_check_phrases(tuple(part)))
    if isinstance(part, Matcher):
        return TypeSlot(part)
    if isinstance(part, type):
        return TypeSlot(InstanceOf(part))
    raise AssertionImplementationError(f"Unsupported assertion part: {part!r}")


def _check_phrases(phrases: Tuple[Any, ...]) -> Tuple[str, ...]:
    if not phrases:
        raise AssertionImplementationError("A phrase choice needs at least one phrase")
    for phrase in phrases:
        if not isinstance(phrase, str) or not phrase.strip():
            raise AssertionImplementationError(f"Phrases must be non-empty strings, got {phrase!r}")
    return phrases
