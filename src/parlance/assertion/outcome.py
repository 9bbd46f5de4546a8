"""
What an implementation may return, and how it is normalized.

Implementations return ``None``/``True`` to pass, ``False`` or a ``Failure``
to fail, a matcher to delegate against the subject, or a ``Delegation`` to
delegate against some other value (an awaited result, a raised error).
"""

import inspect
from dataclasses import dataclass
from typing import Any, Optional, Sequence, Union

from ..errors import AssertionImplementationError, UnexpectedAsyncError, format_call
from ..matchers.model import Matcher


@dataclass(frozen=True)
class Failure:
    """An explicit failure returned by an implementation."""
    message: Optional[str] = None
    actual: Any = None
    expected: Any = None


@dataclass(frozen=True)
class Delegation:
    matcher: Matcher
    subject: Any


def delegate(matcher: Matcher, subject: Any) -> Delegation:
    """Check ``subject`` (rather than the call's subject) against ``matcher``."""
    return Delegation(matcher, subject)


@dataclass(frozen=True)
class Passed:
    pass


@dataclass(frozen=True)
class Failed:
    failure: Failure


@dataclass(frozen=True)
class Delegated:
    matcher: Matcher
    subject: Any


Outcome = Union[Passed, Failed, Delegated]


def normalize_result(result: Any, definition: Any, operands: Sequence[Any], args: Sequence[Any]) -> Outcome:
    """
    Map an implementation's return value to an outcome.

    Raises:
        UnexpectedAsyncError: If the result is awaitable
        AssertionImplementationError: If the result has no meaning as an outcome
    """
    if result is None or result is True:
        return Passed()
    if result is False:
        return Failed(Failure(f"Assertion {definition} failed for {format_call(args)}"))
    if isinstance(result, Failure):
        return Failed(result)
    if isinstance(result, Matcher):
        return Delegated(result, operands[0])
    if isinstance(result, Delegation):
        return Delegated(result.matcher, result.subject)
    if inspect.isawaitable(result):
        if inspect.iscoroutine(result):
            result.close()
        raise UnexpectedAsyncError(
            f"Assertion {definition} returned an awaitable; define it with create_async_assertion"
        )
    raise AssertionImplementationError(
        f"Assertion {definition} returned an invalid result: {result!r}", result=result
    )
