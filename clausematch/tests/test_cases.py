"""Tests for the explicit clause-list API."""

import logging
import re

import pytest
from clausematch import cases, Case, MissingCatchAllPattern


class TestCases:
    """Tests for cases()."""

    def test_first_truthy_test_wins(self):
        """Clauses are tried in order."""
        classify = cases(
            (lambda p: p.range(0, 41), "< answer"),
            (lambda p: p.range(43, 100), "> answer"),
            (lambda p: p(42), "answer"),
            (lambda p: p(), "< 0, or > 100"),
        )
        assert [classify(v) for v in [12, 42, 99, 101]] == [
            "< answer", "answer", "> answer", "< 0, or > 100",
        ]

    def test_falsy_results_are_selected(self):
        """Results like 0, False and None are returned, not skipped."""
        m = cases(
            (lambda p: p(0), 0),
            (lambda p: p(1), False),
            (lambda p: p(2), None),
            (lambda p: p(), "other"),
        )
        assert m(0) == 0
        assert m(1) is False
        assert m(2) is None
        assert m(3) == "other"

    def test_continuation_gets_value(self):
        """Callable results receive the value."""
        m = cases(
            (lambda p: p({"protocol": "HTTP"}), lambda o: o["i"] + 1),
            (lambda p: p(), lambda o: 0),
        )
        assert m({"protocol": "HTTP", "i": 10}) == 11
        assert m({"protocol": "WAT", "i": 3}) == 0

    def test_head_tail_threaded(self):
        """A HeadTail outcome is spread into the continuation."""
        def length(items):
            return m(items)

        m = cases(
            (lambda p: p([]), 0),
            (lambda p: p.head_tail(), lambda head, tail: 1 + length(tail)),
        )
        assert length([1, 2, 3]) == 3
        assert length([{}, {}, {}, {}]) == 4

    def test_marker_form_threaded(self):
        """p(p.head, p.tail) works as a clause test too."""
        m = cases((lambda p: p(p.head, p.tail), lambda head, tail: head))
        assert m(["first", "second"]) == "first"

    def test_decomposition_not_leaked_to_later_clause(self):
        """A decomposition in a failed clause does not change later bindings."""
        m = cases(
            (lambda p: p.head_tail() and p.value.head == "never", "unreachable"),
            (lambda p: p(), lambda whole: whole),
        )
        assert m([1, 2]) == [1, 2]

    def test_combined_head_tail_test_threaded(self):
        """A decomposition inside a combined test still reaches the continuation."""
        m = cases(
            (lambda p: p.head_tail() and p.value.head > 0, lambda head, tail: (head, tail)),
            (lambda p: p(), lambda whole: whole),
        )
        assert m([1, 2, 3]) == (1, [2, 3])
        assert m([-1, 2]) == [-1, 2]
        assert m([]) == []

    def test_shared_context(self):
        """Every clause test sees the same context."""
        seen = []
        m = cases(
            (lambda p: seen.append(p), 1),
            (lambda p: seen.append(p) or True, 2),
        )
        assert m("x") == 2
        assert seen[0] is seen[1]

    def test_no_match_raises(self):
        """No truthy test raises MissingCatchAllPattern."""
        m = cases((lambda p: p("value"), 42))
        assert m("value") == 42
        with pytest.raises(MissingCatchAllPattern):
            m("not a value")

    def test_no_clauses(self):
        """An empty clause list matches nothing."""
        with pytest.raises(MissingCatchAllPattern):
            cases()(1)

    def test_case_instances(self):
        """Case tuples and plain pairs can be mixed."""
        m = cases(
            Case(lambda p: p(re.compile("zero", re.I)), "zero"),
            (lambda p: p(), "other"),
        )
        assert m("zEro") == "zero"
        assert m("one") == "other"

    def test_case_fields(self):
        """Case exposes test and result."""
        test = lambda p: p()
        case = Case(test, 1)
        assert case.test is test
        assert case.result == 1

    def test_non_callable_test(self):
        """Clause tests must be callable."""
        with pytest.raises(TypeError, match="callable"):
            cases((1, "one"))

    def test_malformed_clause(self):
        """Clauses must be pairs."""
        with pytest.raises(ValueError):
            cases((lambda p: p(),))

    def test_test_errors_propagate(self):
        """Errors raised by a test are not wrapped."""
        def bad(p):
            raise RuntimeError("bad test")

        with pytest.raises(RuntimeError, match="bad test"):
            cases((bad, 1))(None)

    def test_matched_clause_logged(self, caplog):
        """The winning clause index is logged at DEBUG."""
        m = cases((lambda p: p(1), "one"), (lambda p: p(), "other"))
        with caplog.at_level(logging.DEBUG, logger="clausematch.matcher"):
            m(5)
        assert "clause 1 matched" in caplog.text
