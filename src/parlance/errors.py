"""
Errors raised by the assertion engine.

Library defects (bad definitions, unresolvable calls) derive from
``ParlanceError``. Assertion failures derive from the builtin
``AssertionError`` so test runners report them as ordinary failures.
"""

from typing import Any, Dict, List, Optional, Sequence, Tuple

from .matchers.model import Issue, format_value


def format_call(args: Sequence[Any]) -> str:
    """Render call arguments the way the user wrote them: ``expect(5, 'to be a', 'string')``."""
    return "expect(" + ", ".join(format_value(arg) for arg in args) + ")"


class ParlanceError(Exception):
    """Base class for engine and registration defects."""

    code = "ERR_PARLANCE"

    def to_dict(self) -> Dict[str, Any]:
        return {"code": self.code, "message": str(self)}


class AssertionImplementationError(ParlanceError):
    """A definition is malformed, or an implementation returned something unusable."""

    code = "ERR_PARLANCE_ASSERTION_IMPL"

    def __init__(self, message: str, result: Any = None):
        super().__init__(message)
        self.result = result


class UnexpectedAsyncError(ParlanceError):
    """A synchronous implementation returned an awaitable."""

    code = "ERR_PARLANCE_UNEXPECTED_ASYNC"


class UnknownAssertionError(ParlanceError):
    """
    No registered assertion matches the call.

    ``rejections`` holds one entry per candidate definition, each with an
    ``assertion_id`` and a ``reason``.
    """

    code = "ERR_PARLANCE_UNKNOWN_ASSERTION"

    def __init__(self, call_args: Sequence[Any], rejections: Sequence[Any] = (), limit: int = 20):
        self.call_args = tuple(call_args)
        self.rejections = list(rejections)
        lines = [f"No assertion matches {format_call(self.call_args)}"]
        for rejection in self.rejections[:limit]:
            lines.append(f"  - {rejection.assertion_id}: {rejection.reason}")
        hidden = len(self.rejections) - limit
        if hidden > 0:
            lines.append(f"  ... and {hidden} more")
        super().__init__("\n".join(lines))

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["rejections"] = [
            {"assertion_id": r.assertion_id, "reason": r.reason} for r in self.rejections
        ]
        return data


class AmbiguousAssertionError(ParlanceError):
    """More than one assertion matched the call exactly."""

    code = "ERR_PARLANCE_AMBIGUOUS_ASSERTION"

    def __init__(self, call_args: Sequence[Any], assertion_ids: Sequence[str]):
        self.call_args = tuple(call_args)
        self.assertion_ids = list(assertion_ids)
        super().__init__(
            f"{format_call(self.call_args)} matches more than one assertion exactly: "
            + ", ".join(self.assertion_ids)
        )

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["assertion_ids"] = list(self.assertion_ids)
        return data


class AssertionFailure(AssertionError):
    """The one failure kind that negation intercepts."""

    code = "ERR_PARLANCE_ASSERTION_FAILED"

    def __init__(
        self,
        message: str,
        actual: Any = None,
        expected: Any = None,
        assertion_id: Optional[str] = None,
        issues: Sequence[Issue] = (),
    ):
        super().__init__(message)
        self.message = message
        self.actual = actual
        self.expected = expected
        self.assertion_id = assertion_id
        self.issues: Tuple[Issue, ...] = tuple(issues)

    @property
    def paths(self) -> List[Tuple[Any, ...]]:
        return [issue.path for issue in self.issues]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "actual": self.actual,
            "expected": self.expected,
            "message": self.message,
            "assertion_id": self.assertion_id,
        }


class NegatedAssertionFailure(AssertionFailure):
    """A negated assertion passed."""

    code = "ERR_PARLANCE_NEGATED_ASSERTION"


class FailAssertionFailure(AssertionFailure):
    """Raised by ``fail()``."""

    code = "ERR_PARLANCE_FAIL"
