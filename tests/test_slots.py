"""Tests for signature construction and assertion definitions."""

import pytest

from parlance import AssertionImplementationError, create_assertion, create_async_assertion
from parlance.assertion import PhraseSlot, TypeSlot, assertion_id, slotify
from parlance.matchers import ANY, NUMBER, STRING, InstanceOf


class TestSlotify:
    def test_implicit_subject_is_prepended(self):
        slots = slotify(["to be a string"])
        assert len(slots) == 2
        assert isinstance(slots[0], TypeSlot)
        assert slots[0].matcher is ANY
        assert slots[0].role == "subject"
        assert slots[1] == PhraseSlot(("to be a string",))

    def test_explicit_subject(self):
        slots = slotify([NUMBER, ["to be within", "to be between"], NUMBER, NUMBER])
        assert len(slots) == 4
        assert slots[0].matcher is NUMBER
        assert slots[0].role == "subject"
        assert slots[1].phrases == ("to be within", "to be between")
        assert all(slot.role == "operand" for slot in slots[2:])

    def test_bare_class_becomes_instance_matcher(self):
        slots = slotify([dict, "to be tidy"])
        assert isinstance(slots[0].matcher, InstanceOf)
        assert slots[0].matcher.accepts({})

    @pytest.mark.parametrize(
        "parts",
        [
            [],
            "to be",
            [NUMBER, NUMBER],
            [NUMBER, NUMBER, "to add up"],
            [[], NUMBER],
            [["to be", 3]],
            ["   "],
            [object(), "to be"],
        ],
    )
    def test_malformed_signatures(self, parts):
        with pytest.raises(AssertionImplementationError):
            slotify(parts)

    def test_negation_prefix_is_reserved(self):
        with pytest.raises(AssertionImplementationError, match="negation"):
            slotify(["not to be odd"])
        with pytest.raises(AssertionImplementationError):
            slotify([["to be odd", "not to be even"]])

    def test_conjunction_must_precede_a_type_slot(self):
        slots = slotify([NUMBER, "to be between", NUMBER, "and", NUMBER])
        assert slots[3].phrases == ("and",)
        with pytest.raises(AssertionImplementationError):
            slotify([NUMBER, "to be fine", "and"])
        with pytest.raises(AssertionImplementationError):
            slotify([NUMBER, "to be fine", "and", "dandy"])


class TestDefinitions:
    def test_generated_id(self):
        definition = create_assertion([NUMBER, ["to be within", "to be between"], NUMBER, NUMBER], lambda *a: True)
        assert definition.id == "number-to-be-within-to-be-between-number-number-4s4p"
        assert definition.is_async is False
        assert str(definition) == "{number} 'to be within' | 'to be between' {number} {number}"

    def test_generated_id_counts_parts(self):
        slots = slotify(["to be a string"])
        assert assertion_id(slots, 1) == "any-to-be-a-string-2s1p"

    def test_explicit_id(self):
        definition = create_assertion([STRING, "to shout"], lambda s: s.isupper(), id="shouting")
        assert definition.id == "shouting"

    def test_empty_id_rejected(self):
        with pytest.raises(AssertionImplementationError):
            create_assertion([STRING, "to shout"], lambda s: True, id="")

    def test_schema_assertion(self):
        definition = create_assertion(["to be text"], STRING)
        assert definition.is_schema

    def test_invalid_implementation(self):
        with pytest.raises(AssertionImplementationError):
            create_assertion(["to be text"], "not callable")

    def test_async_definition(self):
        async def impl(subject):
            return True

        definition = create_async_assertion(["to be eventually fine"], impl)
        assert definition.is_async
        assert definition.phrases == ("to be eventually fine",)

    def test_definitions_are_immutable(self):
        definition = create_assertion(["to be text"], STRING)
        with pytest.raises(Exception):
            definition.id = "other"
