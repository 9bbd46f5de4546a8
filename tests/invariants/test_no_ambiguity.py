"""
Invariant: for any call, at most one built-in definition matches exactly.

Checked two ways: a deterministic audit over calls shaped like each
signature, and a hypothesis fuzz over arbitrary operands at every phrase.
"""

import re
from datetime import date, datetime

from hypothesis import given, settings, strategies as st

from parlance import create_assertion, default_engine
from parlance.engine import AssertionSet, default_samples, find_ambiguities, match_all
from parlance.matchers import NUMBER

SYNC = default_engine.registry.sync
ASYNC = default_engine.registry.asynchronous

operands = st.one_of(
    st.none(),
    st.booleans(),
    st.integers(),
    st.floats(allow_nan=True),
    st.text(max_size=8),
    st.sampled_from(["2024-01-01", "a+", "to be", "and"]),
    st.lists(st.integers(), max_size=3),
    st.tuples(st.integers()),
    st.dictionaries(st.text(max_size=3), st.integers(), max_size=3),
    st.frozensets(st.integers(), max_size=3),
    st.sampled_from([ValueError, KeyError, int, str, len, re.compile("x"), date(2024, 1, 1), datetime(2024, 1, 1)]),
)


def _exact_matches(assertion_set, args):
    return [r for r in match_all(assertion_set, args) if r.success and r.exact_match]


class TestAudit:
    def test_sync_builtins(self):
        assert find_ambiguities(SYNC) == []

    def test_async_builtins(self):
        assert find_ambiguities(ASYNC) == []

    def test_audit_finds_a_planted_clash(self):
        clash = create_assertion([NUMBER, "to be within", NUMBER, NUMBER], lambda *a: True, id="clash")
        found = find_ambiguities(AssertionSet(SYNC.definitions + (clash,)), default_samples())
        assert found
        assert all("clash" in ambiguity.assertion_ids for ambiguity in found)


class TestFuzz:
    @settings(max_examples=300, deadline=None)
    @given(
        subject=operands,
        phrase=st.sampled_from(SYNC.phrases),
        rest=st.lists(operands, max_size=3),
    )
    def test_at_most_one_exact_sync_match(self, subject, phrase, rest):
        args = (subject, phrase, *rest)
        assert len(_exact_matches(SYNC, args)) <= 1

    @settings(max_examples=100, deadline=None)
    @given(
        phrase=st.sampled_from(ASYNC.phrases),
        rest=st.lists(operands, max_size=2),
    )
    def test_at_most_one_exact_async_match(self, phrase, rest):
        async def source():
            return None

        args = (source, phrase, *rest)
        assert len(_exact_matches(ASYNC, args)) <= 1
