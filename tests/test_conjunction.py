"""Tests for conjunction splitting."""

from parlance.engine import regroupings, split_conjunctions


class TestSplitConjunctions:
    def test_no_conjunction(self):
        assert split_conjunctions(("x", "to be a string")) == [("x", "to be a string")]

    def test_subject_is_repeated(self):
        clauses = split_conjunctions(("abc", "to be a string", "and", "to have length", 3))
        assert clauses == [("abc", "to be a string"), ("abc", "to have length", 3)]

    def test_conjunction_in_subject_or_phrase_position_is_kept(self):
        assert split_conjunctions(("and", "and")) == [("and", "and")]

    def test_three_clauses(self):
        clauses = split_conjunctions((1, "to be a number", "and", "to be positive", "and", "to be finite"))
        assert clauses == [(1, "to be a number"), (1, "to be positive"), (1, "to be finite")]


class TestRegroupings:
    def test_unsplit_call_is_the_only_option_without_conjunction(self):
        assert regroupings((5, "to be", 5)) == [[(5, "to be", 5)]]

    def test_order_split_then_rejoined_then_unsplit(self):
        args = (5, "to be between", 1, "and", 10, "and", "to be positive")
        groupings = regroupings(args)
        assert groupings[0] == [(5, "to be between", 1), (5, 10), (5, "to be positive")]
        assert groupings[1] == [(5, "to be between", 1, "and", 10), (5, "to be positive")]
        assert groupings[2] == [(5, "to be between", 1), (5, 10, "and", "to be positive")]
        assert groupings[-1] == [args]
        assert len(groupings) == 4

    def test_two_clauses_rejoin_to_the_unsplit_call(self):
        args = (5, "to be between", 1, "and", 10)
        assert regroupings(args) == [[(5, "to be between", 1), (5, 10)], [args]]
