"""
Value equality for map contents.

Key parts are compared structurally (through the surrogate hash). Values
are compared with the narrower "same value" rule implemented here:

- the same object is always the same value
- two numbers (int/float, not bool) are the same value when ==
- two str, or two bytes, are the same value when ==
- any other pair (lists, dicts, custom objects) matches only by identity

    >>> same_value("red", "".join(["r", "ed"]))
    True
    >>> same_value(["red"], ["red"])
    False
    >>> same_value(True, 1)
    False
"""

import collections.abc as _abc
import typing as _typing

_NUMBERS = (int, float)
_TEXT = (str, bytes)


def same_value(left: _typing.Any, right: _typing.Any) -> bool:
    """Return True if left and right count as the same stored value."""
    if left is right:
        return True
    # Distinct bool objects are never the same value, nor is a bool a number
    if isinstance(left, bool) or isinstance(right, bool):
        return False
    if isinstance(left, _NUMBERS) and isinstance(right, _NUMBERS):
        return bool(left == right)
    for kind in _TEXT:
        if isinstance(left, kind) and isinstance(right, kind):
            return bool(left == right)
    return False


def contains_value(values: _abc.Iterable[_typing.Any], target: _typing.Any) -> bool:
    """Return True if any element of values is the same value as target."""
    return any(same_value(value, target) for value in values)


def is_subset(candidate: _abc.Sequence[_typing.Any], stored: _abc.Sequence[_typing.Any]) -> bool:
    """Every candidate element appears in stored; lengths unconstrained."""
    return all(contains_value(stored, value) for value in candidate)


def is_same_multiset(
    candidate: _abc.Sequence[_typing.Any],
    stored: _abc.Sequence[_typing.Any],
) -> bool:
    """
    Candidate and stored hold the same elements with the same counts.

    Each candidate element must claim a distinct stored element, so
    ["a", "a", "b"] does not match ["a", "b", "b"].
    """
    if len(candidate) != len(stored):
        return False
    unclaimed = list(stored)
    for value in candidate:
        for index, other in enumerate(unclaimed):
            if same_value(value, other):
                del unclaimed[index]
                break
        else:
            return False
    return True
