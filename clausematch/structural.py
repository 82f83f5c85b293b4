"""
Structural matching of a single candidate pattern against a single value.

This is the predicate every test in a PatternContext bottoms out in.
Sequences are compared whole, records are compared by subset, regular
expressions are searched in the text of the value, and everything else
is compared by strict equality.
"""

import json
import re
from collections.abc import Mapping
from typing import Any, Tuple

# Type aliases
PatternType = Any
SequenceTypes: Tuple[type, ...] = (list, tuple)
ScalarTypes: Tuple[type, ...] = (str, bytes, int, float, complex, bool, type(None))

_MISSING = object()


# ============================================================
# Type Predicates
# ============================================================

def is_sequence(value: Any) -> bool:
    """Check if a value is an ordered sequence (list or tuple, never text)."""
    return isinstance(value, SequenceTypes)


def is_regex(pattern: Any) -> bool:
    """Check if a pattern is a compiled regular expression."""
    return isinstance(pattern, re.Pattern)


def is_record(value: Any) -> bool:
    """
    Check if a value is a keyed record.

    Mappings are records keyed by item, any other non-scalar object is a
    record keyed by attribute.
    """
    if isinstance(value, Mapping):
        return True
    return not isinstance(value, ScalarTypes) and not is_sequence(value)


# ============================================================
# Equality
# ============================================================

def strict_equal(a: Any, b: Any) -> bool:
    """
    Compare two values without cross-type coercion of booleans.

    Python treats True == 1, which would let p(1) match True. Booleans
    only equal booleans here; everything else uses ==.

    Examples:
        strict_equal(1, 1.0)    -> True
        strict_equal(1, True)   -> False
        strict_equal("1", 1)    -> False
    """
    if isinstance(a, bool) or isinstance(b, bool):
        return type(a) is type(b) and a == b
    return a == b


def canonical(value: Any) -> str:
    """
    Serialize a value to its canonical text form.

    Key order inside nested mappings is preserved, tuples serialize like
    lists, integral floats serialize like ints (so [1.0] and [1] agree, as
    1.0 == 1 does), mapping keys JSON cannot express are serialized by
    repr, and leaves JSON cannot express fall back to their repr.

    Raises:
        ValueError: If the value contains a reference cycle
    """
    return json.dumps(_normalize(value, set()), default=repr)


def _normalize_number(value: Any) -> Any:
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def _normalize_key(key: Any) -> Any:
    if key is None or isinstance(key, (str, int, float)):
        return _normalize_number(key)
    return repr(key)


def _normalize(value: Any, active: set) -> Any:
    if isinstance(value, float):
        return _normalize_number(value)
    if not isinstance(value, (Mapping, list, tuple)):
        return value

    # ids of the containers on the current path
    marker = id(value)
    if marker in active:
        raise ValueError("Circular reference detected")
    active.add(marker)
    try:
        if isinstance(value, Mapping):
            return {
                _normalize_key(key): _normalize(item, active)
                for key, item in value.items()
            }
        return [_normalize(item, active) for item in value]
    finally:
        active.discard(marker)


def _lookup(record: Any, key: Any) -> Any:
    if isinstance(record, Mapping):
        return record.get(key, _MISSING)
    if not isinstance(key, str):
        return _MISSING
    return getattr(record, key, _MISSING)


# ============================================================
# Structural Matching
# ============================================================

def matches(pattern: PatternType, value: Any) -> bool:
    """
    Decide whether a candidate pattern matches a value.

    Rules, first applicable wins:
        sequence value      - canonical serializations must be identical
        regex pattern       - pattern.search(str(value)) must succeed
        record value and    - every pattern key must be present on the value
        mapping pattern       with a strictly equal value (one level deep,
                              extra keys on the value are ignored)
        anything else       - strict equality

    Args:
        pattern: The candidate pattern
        value: The value under test

    Returns:
        True if the pattern matches the value, False otherwise

    Examples:
        matches([1, 2], [1, 2])                        -> True
        matches(re.compile("zero", re.I), "zEro")      -> True
        matches({"protocol": "HTTP"}, {"protocol": "HTTP", "i": 10}) -> True
        matches(42, 42)                                -> True
    """
    if is_sequence(value):
        return canonical(pattern) == canonical(value)

    if is_regex(pattern):
        return pattern.search(str(value)) is not None

    if isinstance(pattern, Mapping) and is_record(value):
        for key, expected in pattern.items():
            actual = _lookup(value, key)
            if actual is _MISSING or not strict_equal(actual, expected):
                return False
        return True

    return strict_equal(pattern, value)
