"""
clausematch - expression-oriented pattern matching for Python values

Pick the result of the first pattern that matches a value, without writing
nested conditionals.

Quick Start:
    from clausematch import match

    def fact(n):
        return match(n, lambda p: (p.with_
            or p(0) and 1
            or p() and (lambda n: n * fact(n - 1))))

    fact(10)  # => 3628800

Pattern Vocabulary (p is the PatternContext for the value):
    p()                  - catch-all, always matches
    p(pattern)           - structural match (see below)
    p(p.head, p.tail)    - non-empty list/tuple, continuation gets (head, tail)
    p.range(lo, hi)      - lo <= value <= hi
    p.and_(a, b, ...)    - every pattern matches
    p.or_(a, b, ...)     - any pattern matches
    p.value              - the bound value (or HeadTail pair)

Structural Matching:
    [1, 2] / (1, 2)      - whole-sequence equality, order sensitive
    re.compile("x", re.I) - regex search in str(value)
    {"key": value}       - subset match on a mapping or object attributes
    42, "text", None     - strict equality

A clause result that is callable is invoked with the matched value;
anything else is returned as-is. When nothing matches,
MissingCatchAllPattern is raised.
"""

__version__ = "0.1.0"

from .structural import (
    matches,
    strict_equal,
    canonical,
    is_sequence,
    is_record,
    is_regex,
    PatternType,
)

from .pattern import (
    PatternContext,
    HeadTail,
    HEAD,
    TAIL,
    patternize,
)

from .matcher import (
    match,
    evaluate,
    cases,
    Case,
    dispatch,
    MissingCatchAllPattern,
)

# Public API
__all__ = [
    # Version
    "__version__",
    # Matcher entry
    "match",
    "evaluate",
    "cases",
    "Case",
    "dispatch",
    "MissingCatchAllPattern",
    # Pattern context
    "PatternContext",
    "HeadTail",
    "HEAD",
    "TAIL",
    "patternize",
    # Structural matching
    "matches",
    "strict_equal",
    "canonical",
    "is_sequence",
    "is_record",
    "is_regex",
    "PatternType",
]
