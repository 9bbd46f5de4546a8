"""Assertion definitions: signatures, implementations and their outcomes."""

from .deferred import DeferredAssertion
from .model import AssertionDefinition, assertion_id, create_assertion, create_async_assertion
from .outcome import Delegated, Delegation, Failed, Failure, Outcome, Passed, delegate, normalize_result
from .slots import PhraseSlot, Slot, TypeSlot, slotify

__all__ = [
    "AssertionDefinition",
    "DeferredAssertion",
    "Delegated",
    "Delegation",
    "Failed",
    "Failure",
    "Outcome",
    "Passed",
    "PhraseSlot",
    "Slot",
    "TypeSlot",
    "assertion_id",
    "create_assertion",
    "create_async_assertion",
    "delegate",
    "normalize_result",
    "slotify",
]
