"""Tests for execution, outcome normalization and negation."""

import pytest
from hypothesis import given, strategies as st

from parlance import (
    AssertionFailure,
    AssertionImplementationError,
    FailAssertionFailure,
    Failure,
    NegatedAssertionFailure,
    UnexpectedAsyncError,
    create_assertion,
    delegate,
)
from parlance.assertion import Delegated, Failed, Passed, normalize_result
from parlance.engine import execute, match_definition
from parlance.matchers import NUMBER, STRING
from parlance.structural import synthesize


def _definition(impl, parts=None):
    return create_assertion(parts or [NUMBER, "to be checked"], impl)


def _run(definition, subject, negated=False):
    args = (subject, definition.phrases[0])
    result = match_definition(definition, args)
    assert result.success
    execute(definition, result.operands, args, negated)


class TestNormalizeResult:
    def test_passing_results(self):
        definition = _definition(lambda n: None)
        assert normalize_result(None, definition, (1,), (1, "to be checked")) == Passed()
        assert normalize_result(True, definition, (1,), (1, "to be checked")) == Passed()

    def test_false_gets_a_generic_message(self):
        definition = _definition(lambda n: False)
        outcome = normalize_result(False, definition, (1,), (1, "to be checked"))
        assert isinstance(outcome, Failed)
        assert "failed for expect(1, 'to be checked')" in outcome.failure.message

    def test_failure_object(self):
        failure = Failure("nope", actual=1, expected=2)
        outcome = normalize_result(failure, _definition(lambda n: failure), (1,), ())
        assert outcome == Failed(failure)

    def test_matcher_delegates_to_subject(self):
        matcher = synthesize(1, "exact")
        outcome = normalize_result(matcher, _definition(lambda n: matcher), (7,), ())
        assert outcome == Delegated(matcher, 7)

    def test_delegation_to_another_subject(self):
        matcher = synthesize(1, "exact")
        outcome = normalize_result(delegate(matcher, 99), _definition(lambda n: None), (7,), ())
        assert outcome == Delegated(matcher, 99)

    def test_awaitable_from_sync_definition(self):
        async def later():
            return True

        coroutine = later()
        with pytest.raises(UnexpectedAsyncError):
            normalize_result(coroutine, _definition(lambda n: None), (1,), ())
        assert coroutine.cr_frame is None

    @pytest.mark.parametrize("result", [1, "yes", [], object()])
    def test_anything_else_is_a_defect(self, result):
        with pytest.raises(AssertionImplementationError) as exc_info:
            normalize_result(result, _definition(lambda n: None), (1,), ())
        assert exc_info.value.result is result


class TestExecute:
    def test_failure_is_normalized(self):
        definition = _definition(lambda n: Failure("too small", expected=10))
        with pytest.raises(AssertionFailure) as exc_info:
            _run(definition, 3)
        failure = exc_info.value
        assert failure.message == "too small"
        assert failure.actual == 3
        assert failure.expected == 10
        assert failure.assertion_id == definition.id
        assert failure.to_dict() == {
            "actual": 3,
            "expected": 10,
            "message": "too small",
            "assertion_id": definition.id,
        }

    def test_delegated_failure_lists_issue_paths(self):
        expected = {"a": 1, "b": {"c": 2}}
        definition = _definition(lambda subject: synthesize(expected, "exact"), [STRING, "to be checked"])
        with pytest.raises(AssertionFailure) as exc_info:
            execute(definition, ({"a": 2, "b": {"c": 3}},), ("x", "to be checked"), False)
        failure = exc_info.value
        assert failure.paths == [("a",), ("b", "c")]
        assert failure.expected == expected
        assert "a: expected 1, got 2" in failure.message
        assert "b.c: expected 2, got 3" in failure.message

    def test_schema_assertion_uses_the_matcher(self):
        definition = create_assertion(["to be text"], STRING)
        execute(definition, ("abc",), ("abc", "to be text"), False)
        with pytest.raises(AssertionFailure) as exc_info:
            execute(definition, (5,), (5, "to be text"), False)
        assert "expected string, got 5" in exc_info.value.message

    def test_raised_assertion_failure_is_tagged(self):
        def impl(n):
            raise FailAssertionFailure("explicit")

        definition = _definition(impl)
        with pytest.raises(FailAssertionFailure) as exc_info:
            _run(definition, 1)
        assert exc_info.value.assertion_id == definition.id

    def test_defects_propagate_unchanged(self):
        def impl(n):
            raise KeyError("boom")

        with pytest.raises(KeyError):
            _run(_definition(impl), 1)

    def test_builtin_assertion_error_is_a_defect(self):
        def impl(n):
            assert n > 10

        with pytest.raises(AssertionError) as exc_info:
            _run(_definition(impl), 1, negated=True)
        assert not isinstance(exc_info.value, AssertionFailure)


class TestNegation:
    def test_negated_failure_passes(self):
        _run(_definition(lambda n: False), 1, negated=True)

    def test_negated_pass_fails(self):
        definition = _definition(lambda n: True)
        with pytest.raises(NegatedAssertionFailure) as exc_info:
            _run(definition, 1, negated=True)
        assert str(exc_info.value) == (
            f"Expected assertion {definition} to fail (due to negation), but it passed"
        )
        assert exc_info.value.assertion_id == definition.id

    def test_negation_does_not_hide_defects(self):
        def impl(n):
            raise ZeroDivisionError()

        with pytest.raises(ZeroDivisionError):
            _run(_definition(impl), 1, negated=True)

    @given(st.integers(min_value=-50, max_value=50), st.integers(min_value=-50, max_value=50))
    def test_negated_raises_iff_direct_does_not(self, subject, threshold):
        """For any definition matching a call, negation exactly inverts the outcome."""
        definition = _definition(lambda n: n > threshold)

        def raises(negated):
            try:
                _run(definition, subject, negated)
            except AssertionFailure:
                return True
            return False

        assert raises(True) != raises(False)
