"""
Running a resolved assertion and applying negation.

Only ``AssertionFailure`` counts as a failed assertion. Anything else an
implementation raises is a defect and propagates unchanged, negated or not.
"""

import inspect
from typing import Any, List, Sequence

from ..assertion.model import AssertionDefinition
from ..assertion.outcome import Delegated, Failed, Outcome, Passed, normalize_result
from ..errors import AssertionFailure, NegatedAssertionFailure, format_call
from ..logging import get_logger
from ..matchers.model import Issue, Matcher

logger = get_logger(__name__)


def failure_from_issues(
    definition: AssertionDefinition,
    args: Sequence[Any],
    subject: Any,
    matcher: Matcher,
    issues: List[Issue],
) -> AssertionFailure:
    """Build the normalized failure for a delegated check, one line per divergent path."""
    lines = [issue.render() for issue in issues]
    head = f"{format_call(args)} failed"
    if len(lines) == 1:
        message = f"{head}: {lines[0]}"
    else:
        message = head + ":\n" + "\n".join(f"  - {line}" for line in lines)
    return AssertionFailure(
        message,
        actual=subject,
        expected=getattr(matcher, "expected", None),
        assertion_id=definition.id,
        issues=issues,
    )


def _settle(outcome: Outcome, definition: AssertionDefinition, operands: Sequence[Any], args: Sequence[Any]) -> None:
    if isinstance(outcome, Passed):
        return
    if isinstance(outcome, Failed):
        failure = outcome.failure
        raise AssertionFailure(
            failure.message or f"Assertion {definition} failed for {format_call(args)}",
            actual=operands[0] if failure.actual is None and operands else failure.actual,
            expected=failure.expected,
            assertion_id=definition.id,
        )
    if isinstance(outcome, Delegated):
        issues = outcome.matcher.check(outcome.subject)
        if issues:
            raise failure_from_issues(definition, args, outcome.subject, outcome.matcher, issues)
        return
    raise TypeError(f"Unknown outcome: {outcome!r}")


def _tag(failure: AssertionFailure, definition: AssertionDefinition) -> None:
    if failure.assertion_id is None:
        failure.assertion_id = definition.id


def _run(definition: AssertionDefinition, operands: Sequence[Any], args: Sequence[Any]) -> None:
    if isinstance(definition.impl, Matcher):
        outcome: Outcome = Delegated(definition.impl, operands[0])
    else:
        try:
            result = definition.impl(*operands)
        except AssertionFailure as failure:
            _tag(failure, definition)
            raise
        outcome = normalize_result(result, definition, operands, args)
    _settle(outcome, definition, operands, args)


async def _run_async(definition: AssertionDefinition, operands: Sequence[Any], args: Sequence[Any]) -> None:
    if isinstance(definition.impl, Matcher):
        outcome: Outcome = Delegated(definition.impl, operands[0])
    else:
        try:
            result = definition.impl(*operands)
            if inspect.isawaitable(result):
                result = await result
        except AssertionFailure as failure:
            _tag(failure, definition)
            raise
        outcome = normalize_result(result, definition, operands, args)
    _settle(outcome, definition, operands, args)


def _negation_passed(definition: AssertionDefinition, operands: Sequence[Any]) -> NegatedAssertionFailure:
    return NegatedAssertionFailure(
        f"Expected assertion {definition} to fail (due to negation), but it passed",
        actual=operands[0] if operands else None,
        assertion_id=definition.id,
    )


def execute(
    definition: AssertionDefinition,
    operands: Sequence[Any],
    args: Sequence[Any],
    is_negated: bool = False,
) -> None:
    """
    Execute a resolved assertion.

    Args:
        definition: The resolved definition
        operands: Narrowed operands, subject first
        args: The call arguments, for messages
        is_negated: Invert the result

    Raises:
        AssertionFailure: If the assertion (or its negation) fails
    """
    if not is_negated:
        _run(definition, operands, args)
        return
    try:
        _run(definition, operands, args)
    except AssertionFailure as failure:
        logger.debug(f"Negated {definition.id} held: {failure.message}")
        return
    raise _negation_passed(definition, operands)


async def execute_async(
    definition: AssertionDefinition,
    operands: Sequence[Any],
    args: Sequence[Any],
    is_negated: bool = False,
) -> None:
    """Asynchronous ``execute``: awaits the implementation's result before normalizing it."""
    if not is_negated:
        await _run_async(definition, operands, args)
        return
    try:
        await _run_async(definition, operands, args)
    except AssertionFailure as failure:
        logger.debug(f"Negated {definition.id} held: {failure.message}")
        return
    raise _negation_passed(definition, operands)
