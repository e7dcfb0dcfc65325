"""
ListValueMap: a map from a single key to an ordered list of values.

Lists keep insertion order and allow duplicates. A key that is present
always has a list (possibly empty); a missing key means "no entry".

Values are matched with the same-value rule (see _equality): numbers and
strings by value, everything else by identity.

Thread safety: NOT thread-safe. All iteration runs over a snapshot taken
when the call starts, so callbacks may mutate the map freely.
"""

from __future__ import annotations

import collections.abc as _abc
import logging as _logging
import typing as _typing

import manymap.config as config
import manymap.maps._equality as _equality
import manymap.maps._render as _render
import manymap.maps._types as _types

_logger = _logging.getLogger(__name__)

_K = _typing.TypeVar("_K")
_V = _typing.TypeVar("_V")


def _as_values(values: _abc.Iterable[_typing.Any]) -> list[_typing.Any]:
    """
    Copy a value list.

    Raises:
        TypeError: If values is a string or bytes rather than a list of values.
    """
    if isinstance(values, (str, bytes, bytearray)):
        raise TypeError(
            f"Values must be a list or other iterable of values, got {type(values).__name__}"
        )
    return list(values)


class ListValueMap(_typing.Generic[_K, _V]):
    """
    Map with entries that hold a single key and a list of values.

    Example:
        >>> colors = ListValueMap([("color", ["red", "green", "blue"])])
        >>> colors.push("color", ["yellow"])
        >>> colors.get("color")
        ['red', 'green', 'blue', 'yellow']
        >>> colors.has_value(["green", "red"], exact=False)
        True
        >>> str(colors)
        'color:[red,green,blue,yellow]'

    Args:
        entries: Optional (key, values) pairs to start with.
        breakable_halts: Whether for_each_breakable stops at the first
            falsy callback result. Defaults to the configured value.

    Note:
        Lists are copied on the way in and on the way out; mutating a list
        returned by get() does not change the map. Use set(), push() or
        delete_value_of_key() instead.
    """

    def __init__(
        self,
        entries: _types.ListValueEntries | None = None,
        *,
        breakable_halts: bool | None = None,
    ) -> None:
        self._map: dict[_K, list[_V]] = {}
        if breakable_halts is None:
            breakable_halts = config.get_settings().breakable_halts
        self._breakable_halts = breakable_halts
        for key, values in entries or ():
            self.set(key, values)

    @classmethod
    def of(cls, entries: _types.ListValueEntries | None = None) -> ListValueMap[_typing.Any, _typing.Any]:
        """Create a map from (key, values) pairs; same as the constructor."""
        return cls(entries)

    @property
    def breakable_halts(self) -> bool:
        """Whether for_each_breakable stops on a falsy callback result."""
        return self._breakable_halts

    # =========================================================================
    # Reads
    # =========================================================================

    @_typing.overload
    def get(self, key: _K) -> list[_V] | None: ...

    @_typing.overload
    def get(self, key: _K, default: list[_V]) -> list[_V]: ...

    def get(self, key: _K, default: list[_V] | None = None) -> list[_V] | None:
        """
        Return a copy of the values stored under key.

        Args:
            key: The key to look up.
            default: Returned when the key is absent.
        """
        values = self._map.get(key)
        if values is None:
            return default
        return list(values)

    def keys(self) -> list[_K]:
        """Snapshot of all keys in insertion order."""
        return list(self._map)

    def values(self) -> list[list[_V]]:
        """Snapshot of all value lists in insertion order."""
        return [list(values) for values in self._map.values()]

    def entries(self) -> list[tuple[_K, list[_V]]]:
        """Snapshot of all (key, values) pairs in insertion order."""
        return [(key, list(values)) for key, values in self._map.items()]

    @property
    def size(self) -> int:
        """Number of entries."""
        return len(self._map)

    def is_empty(self) -> bool:
        return not self._map

    def is_not_empty(self) -> bool:
        return bool(self._map)

    # =========================================================================
    # Writes
    # =========================================================================

    def set(self, key: _K, values: _abc.Iterable[_V]) -> None:
        """
        Replace the list stored under key with a copy of values.

        Raises:
            TypeError: If values is a bare string or bytes.
        """
        self._map[key] = _as_values(values)

    def push(self, key: _K, values: _abc.Iterable[_V]) -> None:
        """
        Append values to the list stored under key.

        An absent key gets an empty list first. Order is preserved and
        duplicates are kept.

        Raises:
            TypeError: If values is a bare string or bytes.
        """
        additions = _as_values(values)
        self._map.setdefault(key, []).extend(additions)

    def clear(self) -> None:
        """Remove all entries."""
        self._map.clear()

    def delete_by_key(self, key: _K) -> bool:
        """
        Remove the entry for key.

        Returns:
            True if the entry existed.
        """
        if key not in self._map:
            return False
        del self._map[key]
        return True

    def delete_by_keys(self, *keys: _K) -> bool:
        """
        Remove the entries for several keys.

        Every key is attempted.

        Returns:
            True if at least one entry was removed.
        """
        removed = False
        for key in keys:
            removed = self.delete_by_key(key) or removed
        return removed

    def delete_by_value(self, value: _V) -> bool:
        """
        Remove every entry whose list contains value.

        The whole entry is removed, not just the matching element.

        Returns:
            True if at least one entry was removed.
        """
        doomed = [
            key
            for key, values in self._map.items()
            if _equality.contains_value(values, value)
        ]
        for key in doomed:
            del self._map[key]
        if doomed:
            _logger.debug("Removed %d entries holding %r", len(doomed), value)
        return bool(doomed)

    def delete_by_values(self, *values: _V) -> bool:
        """
        Remove every entry whose list contains any of values.

        Returns:
            True if at least one entry was removed.
        """
        removed = False
        for value in values:
            removed = self.delete_by_value(value) or removed
        return removed

    def delete_value_of_key(self, key: _K, value: _V) -> bool:
        """
        Remove all occurrences of value from the list stored under key.

        The entry itself stays, even when its list becomes empty.

        Returns:
            True if anything was removed; False if the key is absent or
            its list does not contain value.
        """
        values = self._map.get(key)
        if values is None or not _equality.contains_value(values, value):
            return False
        self._map[key] = [v for v in values if not _equality.same_value(v, value)]
        return True

    # =========================================================================
    # Queries
    # =========================================================================

    def has_key(self, key: _K) -> bool:
        return key in self._map

    def has_key_value(self, key: _K, value: _V) -> bool:
        """True if value is in the list stored under key."""
        values = self._map.get(key)
        return values is not None and _equality.contains_value(values, value)

    def has_any_keys(self, *keys: _K) -> bool:
        """True if any of keys is present. False when no keys are given."""
        if not keys or not self._map:
            return False
        return any(self.has_key(key) for key in keys)

    def has_all_keys(self, *keys: _K) -> bool:
        """True if all of keys are present. False when no keys are given."""
        if not keys or not self._map:
            return False
        return all(self.has_key(key) for key in keys)

    def has_value(self, values: _abc.Sequence[_V], exact: bool = True) -> bool:
        """
        True if some stored list matches values.

        Args:
            values: Candidate values. An empty candidate never matches.
            exact: If True, a stored list must hold exactly the candidate
                elements with the same counts (order ignored). If False,
                a stored list only has to contain every candidate element.
        """
        if not values or not self._map:
            return False
        match = _equality.is_same_multiset if exact else _equality.is_subset
        return any(match(values, stored) for stored in self._map.values())

    def has_any_values(self, *values: _abc.Sequence[_V]) -> bool:
        """True if any candidate list has an exact match."""
        if not values or not self._map:
            return False
        return any(self.has_value(candidate, exact=True) for candidate in values)

    def has_all_values(self, *values: _abc.Sequence[_V]) -> bool:
        """True if every candidate list has an exact match."""
        if not values or not self._map:
            return False
        return all(self.has_value(candidate, exact=True) for candidate in values)

    # =========================================================================
    # Iteration
    # =========================================================================

    def for_each(self, callback: _types.EachCallback) -> None:
        """Call callback(values, key, map) for every entry."""
        for key, values in self.entries():
            callback(values, key, self)

    def for_each_indexing(self, callback: _types.IndexedCallback) -> None:
        """Call callback(values, key, index, map) with a zero-based index."""
        for index, (key, values) in enumerate(self.entries()):
            callback(values, key, index, self)

    def for_each_breakable(self, callback: _types.BreakableCallback) -> None:
        """
        Call callback(values, key, map) until it returns a falsy result.

        When the map was built with breakable_halts=False every entry is
        visited and the callback result is ignored.
        """
        for key, values in self.entries():
            if not callback(values, key, self) and self._breakable_halts:
                break

    def __iter__(self) -> _typing.Iterator[tuple[_K, list[_V]]]:
        """Iterate (key, values) pairs over a snapshot."""
        return iter(self.entries())

    # =========================================================================
    # Dict-style access
    # =========================================================================

    def __len__(self) -> int:
        return len(self._map)

    def __contains__(self, key: object) -> bool:
        return key in self._map

    def __getitem__(self, key: _K) -> list[_V]:
        """
        Raises:
            KeyError: If key is absent.
        """
        return list(self._map[key])

    def __setitem__(self, key: _K, values: _abc.Iterable[_V]) -> None:
        self.set(key, values)

    def __delitem__(self, key: _K) -> None:
        """
        Raises:
            KeyError: If key is absent.
        """
        if not self.delete_by_key(key):
            raise KeyError(key)

    # =========================================================================
    # Rendering
    # =========================================================================

    def __str__(self) -> str:
        return _render.join_entries(
            _render.render_list_entry(key, values) for key, values in self._map.items()
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.entries()!r})"
