"""
parlance: natural-language assertions.

    from parlance import expect
    expect(5, "to be within", 1, 10)
    expect({"a": {"b": 1, "c": 2}}, "to satisfy", {"a": {"b": 1}})
    expect("abc", "to be a string", "and", "not to be empty")

The module-level functions are bound to a default engine built from the
built-in assertions. ``use([...])`` returns a new engine with more
definitions; the default engine is never modified.
"""

from .assertion import (
    AssertionDefinition,
    DeferredAssertion,
    Failure,
    create_assertion,
    create_async_assertion,
    delegate,
)
from .assertions import BUILTIN_ASSERTIONS
from .config import Settings
from .engine import Engine, Registry
from .errors import (
    AmbiguousAssertionError,
    AssertionFailure,
    AssertionImplementationError,
    FailAssertionFailure,
    NegatedAssertionFailure,
    ParlanceError,
    UnexpectedAsyncError,
    UnknownAssertionError,
)
from .structural import Mode, SynthesisOptions, synthesize

default_engine = Engine(Registry(tuple(BUILTIN_ASSERTIONS)))

expect = default_engine.expect
expect_async = default_engine.expect_async
use = default_engine.use
fail = default_engine.fail
it = default_engine.it

__version__ = "0.1.0"

__all__ = [
    "AmbiguousAssertionError",
    "AssertionDefinition",
    "AssertionFailure",
    "AssertionImplementationError",
    "DeferredAssertion",
    "Engine",
    "FailAssertionFailure",
    "Failure",
    "Mode",
    "NegatedAssertionFailure",
    "ParlanceError",
    "Registry",
    "Settings",
    "SynthesisOptions",
    "UnexpectedAsyncError",
    "UnknownAssertionError",
    "create_assertion",
    "create_async_assertion",
    "default_engine",
    "delegate",
    "expect",
    "expect_async",
    "fail",
    "it",
    "synthesize",
    "use",
]
