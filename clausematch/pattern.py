"""
Pattern context: the vocabulary a clause function uses to test one value.

A PatternContext closes over the value being matched. Clause functions call
it (or its methods) and chain the outcomes with short-circuit boolean
operators, so the first alternative whose test succeeds yields the result:

    lambda p: (p.with_
        or p(0) and 1
        or p.range(1, 9) and "digit"
        or p(p.head, p.tail) and (lambda head, tail: head)
        or p() and "anything else")
"""

from typing import Any, NamedTuple, Union

from .structural import PatternType, is_sequence, matches


# ============================================================
# Head/Tail Markers
# ============================================================

class _Marker:
    """Opaque sentinel requesting head/tail decomposition in p(head, tail)."""

    __slots__ = ('_name',)

    def __init__(self, name: str):
        self._name = name

    def __repr__(self) -> str:
        return f"<{self._name}>"


HEAD = _Marker("head")
TAIL = _Marker("tail")


class HeadTail(NamedTuple):
    """
    Result of a successful head/tail decomposition.

    A two-element tuple, so it is always truthy and can stand in for True
    as a test outcome. Continuations receive it spread as (head, tail).
    """
    head: Any
    tail: Any


BoundType = Union[HeadTail, Any]


# ============================================================
# Pattern Context
# ============================================================

class PatternContext:
    """
    Transient matching context for a single value.

    Calling the context dispatches on the number of arguments:

        p()                 - catch-all, always True
        p(pattern)          - structural match against the value
        p(p.head, p.tail)   - head/tail decomposition, see head_tail()
        anything else       - False

    Attributes:
        subject: The value being matched
        value: Bound value(s) for a continuation; the subject, or the
               HeadTail pair of the latest successful decomposition
        head, tail: Markers for the two-argument decomposition form
        with_: Always False, so the first alternative may start with `or`
    """

    __slots__ = ('_subject', '_bound')

    head = HEAD
    tail = TAIL
    with_ = False

    def __init__(self, subject: Any):
        self._subject = subject
        self._bound: BoundType = subject

    @property
    def subject(self) -> Any:
        return self._subject

    @property
    def value(self) -> BoundType:
        return self._bound

    def __call__(self, *args: PatternType) -> Union[bool, HeadTail]:
        if len(args) == 0:
            return self.wildcard()
        if len(args) == 1:
            return self.test(args[0])
        if len(args) == 2 and args[0] is HEAD and args[1] is TAIL:
            return self.head_tail()
        return False

    def wildcard(self) -> bool:
        """Match anything. Use as the last alternative of a chain."""
        return True

    def test(self, pattern: PatternType) -> bool:
        """Match a single pattern against the value."""
        return matches(pattern, self._subject)

    def range(self, start: Any, end: Any) -> bool:
        """
        Check that the value lies within [start, end], both ends inclusive.

        Values that cannot be ordered against the bounds are out of range.
        """
        try:
            return start <= self._subject <= end
        except TypeError:
            return False

    def head_tail(self) -> Union[bool, HeadTail]:
        """
        Decompose a non-empty list or tuple into its first element and the rest.

        On success the pair becomes the bound value and is returned. The
        tail is a new sequence of the same type; the original is untouched.

        Returns:
            HeadTail(head, tail) on success, False for an empty sequence or
            a non-sequence (the previous binding is kept)
        """
        subject = self._subject
        if not is_sequence(subject) or len(subject) == 0:
            return False
        self._bound = HeadTail(subject[0], subject[1:])
        return self._bound

    def and_(self, *patterns: PatternType) -> bool:
        """True if every pattern matches the value (True for no patterns)."""
        return all(matches(pattern, self._subject) for pattern in patterns)

    def or_(self, *patterns: PatternType) -> bool:
        """True if at least one pattern matches the value (False for none)."""
        return any(matches(pattern, self._subject) for pattern in patterns)

    def __repr__(self) -> str:
        return f"PatternContext({self._subject!r})"


def patternize(value: Any) -> PatternContext:
    """Build a fresh pattern context for a value."""
    return PatternContext(value)
