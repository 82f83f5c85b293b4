"""
Matcher entry points and result dispatch.

Two ways to express a match:

    # Boolean chain: the clause function returns the result of the first
    # alternative whose test succeeded, or False when none did.
    fact = match(lambda p: (p.with_
        or p(0) and 1
        or p() and (lambda n: n * fact(n - 1))))

    # Clause list: explicit (test, result) pairs. A result is selected
    # even when it is falsy, e.g. 0 or "".
    sign = cases(
        (lambda p: p(0), 0),
        (lambda p: p.range(1, math.inf), 1),
        (lambda p: p(), -1),
    )

Either way the selected result goes through dispatch(): callables are
invoked with the matched value (or with head and tail after a head/tail
decomposition), anything else is returned as-is.
"""

import logging
from typing import Any, Callable, NamedTuple, Tuple, Union

from .pattern import BoundType, HeadTail, PatternContext, patternize

logger = logging.getLogger(__name__)

# Type aliases
ClauseFunc = Callable[[PatternContext], Any]
TestFunc = Callable[[PatternContext], Any]
Matcher = Callable[[Any], Any]


class MissingCatchAllPattern(LookupError):
    """Raised when no alternative of a match accepted the value."""

    MESSAGE = (
        "Missing catch-all pattern as last match alternative, "
        "add `p() and <result>`"
    )

    def __init__(self, message: str = MESSAGE):
        super().__init__(message)


class Case(NamedTuple):
    """One clause of an explicit clause list: a test and its result."""
    test: TestFunc
    result: Any


# ============================================================
# Dispatch
# ============================================================

def dispatch(result: Any, bound: BoundType) -> Any:
    """
    Turn the outcome of a clause chain into the overall match result.

    Args:
        result: False when nothing matched, else the selected result
        bound: The value(s) a continuation receives; a HeadTail pair is
               spread into two positional arguments

    Returns:
        The continuation's return value if result is callable, else result

    Raises:
        MissingCatchAllPattern: If result is False
    """
    if result is False:
        logger.debug("no alternative matched %r", bound)
        raise MissingCatchAllPattern()

    if callable(result):
        if isinstance(bound, HeadTail):
            logger.debug("dispatching %r with head/tail", result)
            return result(bound.head, bound.tail)
        logger.debug("dispatching %r", result)
        return result(bound)

    return result


# ============================================================
# Matcher Entry
# ============================================================

def _postponed(clause_fn: ClauseFunc) -> Matcher:
    if not callable(clause_fn):
        raise TypeError(
            f"match: clause function must be callable, got {type(clause_fn).__name__}"
        )

    def matcher(value: Any) -> Any:
        context = patternize(value)
        return dispatch(clause_fn(context), context.value)

    return matcher


def match(*args: Any) -> Any:
    """
    Match a value against the alternatives of a clause function.

    match(clause_fn) returns a reusable one-argument matcher, handy with
    map() and filter(). match(value, clause_fn) matches immediately and
    is the same as match(clause_fn)(value).

    Examples:
        match(0, lambda p: p.with_ or p(0) and "zero" or p() and "other")
        # => "zero"

        list(map(match(lambda p: p.with_
            or p.or_("-h", "--help") and "help"
            or p() and "unknown"), ["-h", "x"]))
        # => ["help", "unknown"]

    Raises:
        MissingCatchAllPattern: If no alternative matched
        TypeError: If called with anything but one or two arguments
    """
    if len(args) == 1:
        return _postponed(args[0])
    if len(args) == 2:
        value, clause_fn = args
        return _postponed(clause_fn)(value)
    raise TypeError(f"match() takes 1 or 2 arguments ({len(args)} given)")


# The operation name used by callers that prefer not to shadow `match`
evaluate = match


def _as_case(clause: Union[Case, Tuple[TestFunc, Any]]) -> Case:
    if isinstance(clause, Case):
        return clause
    test, result = clause
    if not callable(test):
        raise TypeError(
            f"cases: clause test must be callable, got {type(test).__name__}"
        )
    return Case(test, result)


def cases(*clauses: Union[Case, Tuple[TestFunc, Any]]) -> Matcher:
    """
    Build a matcher from an explicit, ordered list of (test, result) clauses.

    Every test receives the same PatternContext for the value. The first
    test with a truthy outcome selects its result, which is dispatched like
    a chain result. A head/tail decomposition made while the winning test
    ran (p.head_tail() or p(p.head, p.tail), returned directly or combined
    as in `p.head_tail() and p.value.head > 0`) is handed to the
    continuation as (head, tail). Decompositions made by earlier, failed
    tests are not.

    Examples:
        length = cases(
            (lambda p: p([]), 0),
            (lambda p: p.head_tail(), lambda head, tail: 1 + length(tail)),
        )
        length([1, 2, 3])  # => 3
    """
    clause_list = [_as_case(clause) for clause in clauses]

    def matcher(value: Any) -> Any:
        context = patternize(value)
        for index, (test, result) in enumerate(clause_list):
            before = context.value
            outcome = test(context)
            if not outcome:
                continue
            logger.debug("clause %d matched %r", index, value)
            if not callable(result):
                # a literal False is a legitimate result here
                return result
            if isinstance(outcome, HeadTail):
                bound = outcome
            elif context.value is not before:
                bound = context.value
            else:
                bound = context.subject
            return dispatch(result, bound)
        return dispatch(False, value)

    return matcher
