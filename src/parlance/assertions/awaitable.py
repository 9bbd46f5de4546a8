"""
Asynchronous assertions over awaitables.

The subject is an awaitable, or a callable returning one (``expect_async(fetch,
"to resolve")``). A callable that raises before producing an awaitable counts
as a rejection.
"""

import inspect
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Optional

from ..assertion.model import create_async_assertion
from ..assertion.outcome import Failure, delegate
from ..matchers.model import format_value
from ..matchers.types import ANY, AWAITABLE, EXCEPTION_CLASS
from ..structural.shapes import error_view
from ..structural.synthesize import Mode, synthesize


@dataclass(frozen=True)
class Settlement:
    value: Any = None
    error: Optional[Exception] = None
    awaited: bool = True


async def settle(source: Any) -> Settlement:
    """Await ``source`` (calling it first if needed) and capture the value or the error."""
    try:
        awaitable = source if inspect.isawaitable(source) else source()
    except Exception as exc:
        return Settlement(error=exc)
    if not inspect.isawaitable(awaitable):
        return Settlement(value=awaitable, awaited=False)
    try:
        value = await awaitable
    except Exception as exc:
        return Settlement(error=exc)
    return Settlement(value=value)


def _not_awaitable(source: Any, settlement: Settlement) -> Failure:
    return Failure(
        f"Expected {format_value(source)} to return an awaitable, got {format_value(settlement.value)}",
        actual=settlement.value,
    )


async def _resolves(source):
    settlement = await settle(source)
    if not settlement.awaited:
        return _not_awaitable(source, settlement)
    if settlement.error is None:
        return None
    return Failure(
        f"Expected {format_value(source)} to resolve, but it rejected with {settlement.error!r}",
        actual=settlement.error,
    )


async def _rejects(source):
    settlement = await settle(source)
    if not settlement.awaited:
        return _not_awaitable(source, settlement)
    if settlement.error is not None:
        return None
    return Failure(
        f"Expected {format_value(source)} to reject, but it resolved with {format_value(settlement.value)}",
        actual=settlement.value,
    )


async def _rejects_with(source, error_class):
    settlement = await settle(source)
    if not settlement.awaited:
        return _not_awaitable(source, settlement)
    if isinstance(settlement.error, error_class):
        return None
    outcome = f"rejected with {settlement.error!r}" if settlement.error is not None else "resolved"
    return Failure(
        f"Expected {format_value(source)} to reject with {error_class.__name__}, but it {outcome}",
        actual=settlement.error,
        expected=error_class,
    )


async def _resolves_satisfying(source, expected):
    settlement = await settle(source)
    if not settlement.awaited:
        return _not_awaitable(source, settlement)
    if settlement.error is not None:
        return Failure(
            f"Expected {format_value(source)} to resolve, but it rejected with {settlement.error!r}",
            actual=settlement.error,
        )
    return delegate(synthesize(expected, Mode.PARTIAL), settlement.value)


async def _rejects_satisfying(source, expected):
    settlement = await settle(source)
    if not settlement.awaited:
        return _not_awaitable(source, settlement)
    if settlement.error is None:
        return Failure(
            f"Expected {format_value(source)} to reject, but it resolved with {format_value(settlement.value)}",
            actual=settlement.value,
        )
    subject = error_view(settlement.error) if isinstance(expected, Mapping) else settlement.error
    return delegate(synthesize(expected, Mode.PARTIAL), subject)


ASYNC_ASSERTIONS = [
    create_async_assertion([AWAITABLE, ["to resolve", "to fulfill"]], _resolves),
    create_async_assertion([AWAITABLE, "to reject"], _rejects),
    create_async_assertion([AWAITABLE, ["to reject with", "to reject with a"], EXCEPTION_CLASS], _rejects_with),
    create_async_assertion(
        [AWAITABLE, ["to resolve with value satisfying", "to fulfill with value satisfying"], ANY],
        _resolves_satisfying,
    ),
    create_async_assertion(
        [AWAITABLE, ["to reject with error satisfying", "to reject with an error satisfying"], ANY],
        _rejects_satisfying,
    ),
]
