"""
Read-only views handed out by the read-only map facades.

The facades return lists (stored value lists, key-part lists) wrapped in
FrozenSequence so callers cannot mistake them for live storage. Nested
lists and dicts inside are frozen on access as well.
"""

from __future__ import annotations

import collections.abc as _abc
import typing as _typing


class FrozenSequence(_abc.Sequence[_typing.Any]):
    """
    Read-only view of a list.

    Compares equal to any list or tuple with the same content, so
    `frozen == ["red", "green"]` works as expected.

    Example:
        >>> colors = FrozenSequence(["red", "green"])
        >>> colors[0]
        'red'
        >>> colors[0] = "blue"  # TypeError: immutable
    """

    __slots__ = ("_data",)

    def __init__(self, data: _abc.Iterable[_typing.Any]) -> None:
        """
        Wrap values in a read-only view.

        Args:
            data: The values to wrap. A list is used directly (not
                  copied); anything else is converted to a list.
        """
        self._data = data if isinstance(data, list) else list(data)

    @_typing.overload
    def __getitem__(self, index: int) -> _typing.Any: ...

    @_typing.overload
    def __getitem__(self, index: slice) -> FrozenSequence: ...

    def __getitem__(self, index: int | slice) -> _typing.Any:
        """Get an item or slice, freezing nested containers."""
        value = self._data[index]
        if isinstance(index, slice):
            return FrozenSequence(value)
        return freeze(value)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"FrozenSequence({self._data!r})"

    def __str__(self) -> str:
        return str(self._data)

    def __eq__(self, other: object) -> bool:
        """Compare equal to lists, tuples and other FrozenSequences."""
        if isinstance(other, (list, tuple, FrozenSequence)):
            return list(self._data) == list(other)
        return NotImplemented

    def __hash__(self) -> int:
        """FrozenSequence is not hashable (elements may be mutable)."""
        raise TypeError(f"unhashable type: '{type(self).__name__}'")


class FrozenMapping(_abc.Mapping[_typing.Any, _typing.Any]):
    """Read-only view of a dict stored as a value or key part."""

    __slots__ = ("_data",)

    def __init__(self, data: _abc.Mapping[_typing.Any, _typing.Any]) -> None:
        self._data = data

    def __getitem__(self, key: _typing.Any) -> _typing.Any:
        return freeze(self._data[key])

    def __iter__(self) -> _typing.Iterator[_typing.Any]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"FrozenMapping({self._data!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, _abc.Mapping):
            return dict(self._data) == dict(other)
        return NotImplemented

    def __hash__(self) -> int:
        raise TypeError(f"unhashable type: '{type(self).__name__}'")


def freeze(value: _typing.Any) -> _typing.Any:
    """
    Wrap mutable lists and dicts in read-only views.

    - list → FrozenSequence
    - dict → FrozenMapping
    - anything else (including tuples and already frozen views) unchanged
    """
    if isinstance(value, list):
        return FrozenSequence(value)
    if isinstance(value, dict):
        return FrozenMapping(value)
    return value
