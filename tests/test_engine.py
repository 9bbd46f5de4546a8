"""Tests for the engine entry points and extension."""

import pytest

import parlance
from parlance import (
    AmbiguousAssertionError,
    AssertionFailure,
    Engine,
    FailAssertionFailure,
    NegatedAssertionFailure,
    UnknownAssertionError,
    create_assertion,
    expect,
    fail,
    it,
    use,
)
from parlance.config import Settings
from parlance.matchers import NUMBER, STRING


class TestExpect:
    def test_within_resolves_exactly_and_passes(self, engine):
        negated, result = engine.resolve(5, "to be within", 1, 10)
        assert negated is False
        assert result.exact_match
        assert [str(slot) for slot in result.definition.slots] == [
            "{number}",
            "'to be within' | 'to be between'",
            "{number}",
            "{number}",
        ]
        expect(5, "to be within", 1, 10)

    def test_within_failure_mentions_range(self, engine):
        _, result = engine.resolve(15, "to be within", 1, 10)
        assert result.exact_match
        with pytest.raises(AssertionFailure) as exc_info:
            expect(15, "to be within", 1, 10)
        assert "[1, 10]" in str(exc_info.value)

    def test_size_and_its_negation(self):
        expect({"a": 1, "b": 2}, "to have size", 2)
        with pytest.raises(NegatedAssertionFailure):
            expect({"a": 1, "b": 2}, "not to have size", 2)

    def test_negated_and_plain_resolve_to_the_same_definition(self, engine):
        plain_negated, plain = engine.resolve([1, 2], "to contain", 3)
        negated, result = engine.resolve([1, 2], "not to contain", 3)
        assert plain_negated is False and negated is True
        assert plain.definition is result.definition
        expect([1, 2], "not to contain", 3)

    def test_unknown_call(self):
        with pytest.raises(UnknownAssertionError) as exc_info:
            expect(5, "to be purple")
        assert exc_info.value.call_args == (5, "to be purple")

    def test_failures_are_assertion_errors(self):
        with pytest.raises(AssertionError):
            expect("abc", "to be a number")


class TestConjunctions:
    def test_all_clauses_must_hold(self):
        expect("abc", "to be a string", "and", "to have length", 3)
        with pytest.raises(AssertionFailure):
            expect("abc", "to be a string", "and", "to have length", 4)

    def test_negation_per_clause(self):
        expect("abc", "to be a string", "and", "not to be empty")

    def test_nothing_runs_when_a_clause_does_not_resolve(self):
        calls = []
        spy = create_assertion([STRING, "to be spied on"], lambda s: calls.append(s))
        engine = parlance.use([spy])
        with pytest.raises(UnknownAssertionError) as exc_info:
            engine.expect("abc", "to be spied on", "and", "to be purple")
        assert calls == []
        assert exc_info.value.call_args == ("abc", "to be spied on", "and", "to be purple")

    def test_phrase_containing_conjunction_is_regrouped(self):
        between = create_assertion([NUMBER, "to lie between", NUMBER, "and", NUMBER],
                                   lambda n, low, high: low <= n <= high)
        engine = use([between])
        engine.expect(5, "to lie between", 1, "and", 10)
        engine.expect(5, "to lie between", 1, "and", 10, "and", "to be positive")
        with pytest.raises(AssertionFailure):
            engine.expect(50, "to lie between", 1, "and", 10)

    def test_conjunctions_can_be_disabled(self, engine):
        literal = Engine(engine.registry, Settings(conjunctions=False))
        with pytest.raises(UnknownAssertionError):
            literal.expect("abc", "to be a string", "and", "to have length", 3)


class TestUse:
    def test_extension_does_not_touch_the_source(self, engine, custom_definitions):
        extended = engine.use(custom_definitions)
        extended.expect("racecar", "to be a palindrome")
        extended.expect(10, "to be divisible by", 5)
        with pytest.raises(UnknownAssertionError):
            engine.expect("racecar", "to be a palindrome")
        assert len(extended.definitions) == len(engine.definitions) + 2
        assert extended.definitions[: len(engine.definitions)] == engine.definitions

    def test_extensions_are_independent(self, engine, custom_definitions):
        first = engine.use(custom_definitions[:1])
        second = engine.use(custom_definitions[1:])
        with pytest.raises(UnknownAssertionError):
            first.expect(10, "to be divisible by", 5)
        with pytest.raises(UnknownAssertionError):
            second.expect("racecar", "to be a palindrome")

    def test_overlapping_exact_definition_is_reported(self, engine):
        clash = create_assertion([NUMBER, ["to be within"], NUMBER, NUMBER], lambda *a: True, id="my-within")
        extended = engine.use([clash])
        with pytest.raises(AmbiguousAssertionError) as exc_info:
            extended.expect(5, "to be within", 1, 10)
        assert "my-within" in exc_info.value.assertion_ids

    def test_empty_extension_rejected(self, engine):
        with pytest.raises(ValueError):
            engine.use([])

    def test_module_level_use_leaves_default_untouched(self, custom_definitions):
        before = parlance.default_engine.definitions
        use(custom_definitions)
        assert parlance.default_engine.definitions == before


class TestFailAndIt:
    def test_fail(self):
        with pytest.raises(FailAssertionFailure, match="not today"):
            fail("not today")

    def test_fail_default_message(self):
        with pytest.raises(FailAssertionFailure, match="Explicit failure"):
            fail()

    def test_fail_inside_an_implementation(self, engine):
        def impl(subject):
            if subject < 0:
                fail(f"{subject} is negative")

        definition = create_assertion([NUMBER, "to be acceptable"], impl)
        extended = engine.use([definition])
        extended.expect(1, "to be acceptable")
        with pytest.raises(FailAssertionFailure) as exc_info:
            extended.expect(-1, "to be acceptable")
        assert exc_info.value.assertion_id == definition.id
        extended.expect(-1, "not to be acceptable")

    def test_it_is_deferred(self):
        deferred = it("to be a string")
        deferred("abc")
        with pytest.raises(AssertionFailure):
            deferred(5)
        assert str(deferred) == "it('to be a string')"

    def test_it_inside_satisfy(self):
        expect({"name": "Ada", "tags": ["x"]}, "to satisfy", {"name": it("to be a string"), "tags": it("not to be empty")})
        with pytest.raises(AssertionFailure) as exc_info:
            expect({"name": 5}, "to satisfy", {"name": it("to be a string")})
        assert exc_info.value.paths == [("name",)]
