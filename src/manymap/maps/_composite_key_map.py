"""
CompositeKeyMap: a map from an ordered sequence of key parts to one value.

A dict can only be keyed by a single hashable value, so each key-part
sequence is reduced to a surrogate identifier by StructuralHasher. Two
tables are kept side by side, both addressed by the surrogate:

- _keys:   surrogate → original key parts (a ListValueMap)
- _values: surrogate → value

Only _store() and _discard() write to the tables, and they always write
both. Every public operation recomputes the surrogate from the key parts
the caller supplies, so structurally equal sequences address the same
entry whatever their identity:

    >>> grid = CompositeKeyMap([(["row1", "col1"], "LiLei")])
    >>> grid.get(("row1", "col1"))
    'LiLei'

Equality:
- key parts are compared structurally (via the surrogate hash)
- values are compared with the same-value rule: numbers and strings by
  value, everything else by identity

An empty key-part sequence is never stored: writes ignore it and reads
treat it as absent.

Thread safety: NOT thread-safe. A multi-threaded caller must hold one
lock per map around every call.
"""

from __future__ import annotations

import collections.abc as _abc
import copy as _copy
import logging as _logging
import typing as _typing

import manymap.errors as errors
import manymap.hashing as hashing
import manymap.maps._equality as _equality
import manymap.maps._list_value_map as _list_value_map
import manymap.maps._render as _render
import manymap.maps._types as _types

_logger = _logging.getLogger(__name__)

_K = _typing.TypeVar("_K")
_V = _typing.TypeVar("_V")


def _as_parts(key_parts: _types.KeyParts) -> list[_typing.Any]:
    """
    Copy key parts into a list.

    Raises:
        TypeError: If key_parts is a string or not a sequence.
    """
    if isinstance(key_parts, (str, bytes)) or not isinstance(key_parts, _abc.Sequence):
        raise TypeError(
            f"Key parts must be a list or tuple, got {type(key_parts).__name__}"
        )
    return list(key_parts)


class CompositeKeyMap(_typing.Generic[_K, _V]):
    """
    Map with entries that hold multiple keys and a single value.

    Example:
        >>> grid = CompositeKeyMap()
        >>> grid.set(["row1", "col1"], "LiLei")
        >>> grid.set(["row2", "col2"], "HanMeimei")
        >>> grid.has_key(["row2", "col2"])
        True
        >>> str(grid)
        '[row1,col1]:LiLei;[row2,col2]:HanMeimei'

    Args:
        entries: Optional (key_parts, value) pairs to start with.
        hasher: Surrogate hasher. Defaults to the configured algorithm.
        breakable_halts: Whether for_each_breakable stops at the first
            falsy callback result. Defaults to the configured value.

    Note:
        Hash collisions are not detected. Two structurally different
        key-part sequences with the same digest would share an entry.
    """

    def __init__(
        self,
        entries: _types.CompositeKeyEntries | None = None,
        *,
        hasher: hashing.StructuralHasher | None = None,
        breakable_halts: bool | None = None,
    ) -> None:
        self._hasher = hasher or hashing.default_hasher()
        self._keys: _list_value_map.ListValueMap[str, _K] = _list_value_map.ListValueMap(
            breakable_halts=breakable_halts
        )
        self._values: dict[str, _V] = {}
        for key_parts, value in entries or ():
            self.set(key_parts, value)

    @classmethod
    def of(
        cls, entries: _types.CompositeKeyEntries | None = None
    ) -> CompositeKeyMap[_typing.Any, _typing.Any]:
        """Create a map from (key_parts, value) pairs; same as the constructor."""
        return cls(entries)

    @property
    def hasher(self) -> hashing.StructuralHasher:
        """The hasher computing surrogate identifiers."""
        return self._hasher

    @property
    def breakable_halts(self) -> bool:
        """Whether for_each_breakable stops on a falsy callback result."""
        return self._keys.breakable_halts

    # =========================================================================
    # Surrogate helpers (the only code touching both tables)
    # =========================================================================

    def _surrogate(self, parts: list[_typing.Any]) -> str | None:
        """Return the surrogate for parts, or None for an empty sequence."""
        if not parts:
            _logger.debug("Ignoring empty key parts")
            return None
        return self._hasher.hash(parts)

    def _store(self, surrogate: str, parts: list[_K], value: _V) -> None:
        self._keys.set(surrogate, parts)
        self._values[surrogate] = value

    def _stored_parts(self, surrogate: str) -> list[_K]:
        # Deep copy so callers cannot reach nested parts that fed the hash
        return _copy.deepcopy(self._keys.get(surrogate, []))

    def _discard(self, surrogate: str) -> bool:
        if surrogate not in self._values:
            return False
        self._keys.delete_by_key(surrogate)
        del self._values[surrogate]
        return True

    def check_consistency(self) -> None:
        """
        Verify that both tables hold the same surrogates.

        Raises:
            InconsistentStateError: If the tables disagree.
        """
        key_surrogates = set(self._keys.keys())
        value_surrogates = set(self._values)
        if len(self._keys) != len(self._values) or key_surrogates != value_surrogates:
            raise errors.InconsistentStateError(
                f"Key table has {len(self._keys)} entries, value table has "
                f"{len(self._values)}; "
                f"{len(key_surrogates ^ value_surrogates)} surrogates unmatched"
            )

    # =========================================================================
    # Reads
    # =========================================================================

    @_typing.overload
    def get(self, key_parts: _types.KeyParts) -> _V | None: ...

    @_typing.overload
    def get(self, key_parts: _types.KeyParts, default: _V) -> _V: ...

    def get(self, key_parts: _types.KeyParts, default: _V | None = None) -> _V | None:
        """
        Return the value stored under key_parts.

        Args:
            key_parts: Ordered key parts, e.g. ["row1", "col1"].
            default: Returned when the key is absent or key_parts is empty.
        """
        surrogate = self._surrogate(_as_parts(key_parts))
        if surrogate is None:
            return default
        return self._values.get(surrogate, default)

    def keys(self) -> list[list[_K]]:
        """Snapshot of all key-part lists in insertion order."""
        return [self._stored_parts(surrogate) for surrogate in self._values]

    def values(self) -> list[_V]:
        """Snapshot of all values in insertion order."""
        return list(self._values.values())

    def entries(self) -> list[tuple[list[_K], _V]]:
        """Snapshot of all (key_parts, value) pairs in insertion order."""
        return [
            (self._stored_parts(surrogate), value)
            for surrogate, value in self._values.items()
        ]

    @property
    def size(self) -> int:
        """Number of entries."""
        return len(self._values)

    def is_empty(self) -> bool:
        return not self._values

    def is_not_empty(self) -> bool:
        return bool(self._values)

    # =========================================================================
    # Writes
    # =========================================================================

    def set(self, key_parts: _types.KeyParts, value: _V) -> None:
        """
        Store value under key_parts, replacing any existing value.

        An empty key_parts is ignored. The key parts are deep-copied, so
        later changes to nested parts do not move the entry.
        """
        parts = _as_parts(key_parts)
        surrogate = self._surrogate(parts)
        if surrogate is None:
            return
        self._store(surrogate, _copy.deepcopy(parts), value)

    def clear(self) -> None:
        """Remove all entries from both tables."""
        self._keys.clear()
        self._values.clear()

    def delete_by_key(self, key_parts: _types.KeyParts) -> bool:
        """
        Remove the entry stored under key_parts.

        Returns:
            True if the entry existed.
        """
        surrogate = self._surrogate(_as_parts(key_parts))
        if surrogate is None:
            return False
        return self._discard(surrogate)

    def delete_by_value(self, value: _V) -> bool:
        """
        Remove every entry whose value is the same value as value.

        Returns:
            True if at least one entry was removed.
        """
        doomed = [
            surrogate
            for surrogate, stored in self._values.items()
            if _equality.same_value(stored, value)
        ]
        for surrogate in doomed:
            self._discard(surrogate)
        if doomed:
            _logger.debug("Removed %d entries holding %r", len(doomed), value)
        return bool(doomed)

    def delete_by_values(self, *values: _V) -> bool:
        """
        Remove every entry holding any of values.

        Returns:
            True if at least one entry was removed.
        """
        removed = False
        for value in values:
            removed = self.delete_by_value(value) or removed
        return removed

    # =========================================================================
    # Queries
    # =========================================================================

    def has_key(self, key_parts: _types.KeyParts) -> bool:
        """True if a structurally equal key-part sequence is stored."""
        surrogate = self._surrogate(_as_parts(key_parts))
        return surrogate is not None and self._keys.has_key(surrogate)

    def has_key_value(self, key_parts: _types.KeyParts, value: _V) -> bool:
        """True if key_parts is stored and its value is the same value as value."""
        surrogate = self._surrogate(_as_parts(key_parts))
        if surrogate is None or surrogate not in self._values:
            return False
        return _equality.same_value(self._values[surrogate], value)

    def has_any_keys(self, *key_parts: _types.KeyParts) -> bool:
        if not key_parts or not self._values:
            return False
        return any(self.has_key(parts) for parts in key_parts)

    def has_all_keys(self, *key_parts: _types.KeyParts) -> bool:
        if not key_parts or not self._values:
            return False
        return all(self.has_key(parts) for parts in key_parts)

    def has_value(self, value: _V) -> bool:
        return _equality.contains_value(self._values.values(), value)

    def has_any_values(self, *values: _V) -> bool:
        if not values or not self._values:
            return False
        return any(self.has_value(value) for value in values)

    def has_all_values(self, *values: _V) -> bool:
        if not values or not self._values:
            return False
        return all(self.has_value(value) for value in values)

    # =========================================================================
    # Iteration
    # =========================================================================

    def for_each(self, callback: _types.EachCallback) -> None:
        """Call callback(value, key_parts, map) for every entry."""
        for key_parts, value in self.entries():
            callback(value, key_parts, self)

    def for_each_indexing(self, callback: _types.IndexedCallback) -> None:
        """Call callback(value, key_parts, index, map) with a zero-based index."""
        for index, (key_parts, value) in enumerate(self.entries()):
            callback(value, key_parts, index, self)

    def for_each_breakable(self, callback: _types.BreakableCallback) -> None:
        """
        Call callback(value, key_parts, map) until it returns a falsy result.

        When the map was built with breakable_halts=False every entry is
        visited and the callback result is ignored.
        """
        for key_parts, value in self.entries():
            if not callback(value, key_parts, self) and self.breakable_halts:
                break

    def __iter__(self) -> _typing.Iterator[tuple[list[_K], _V]]:
        """Iterate (key_parts, value) pairs over a snapshot."""
        return iter(self.entries())

    # =========================================================================
    # Dict-style access: grid["row1", "col1"]
    # =========================================================================

    def __len__(self) -> int:
        return len(self._values)

    def __contains__(self, key_parts: object) -> bool:
        if isinstance(key_parts, (str, bytes)) or not isinstance(key_parts, _abc.Sequence):
            return False
        return self.has_key(key_parts)

    def __getitem__(self, key_parts: _types.KeyParts) -> _V:
        """
        Raises:
            KeyError: If key_parts is empty or absent.
        """
        surrogate = self._surrogate(_as_parts(key_parts))
        if surrogate is None or surrogate not in self._values:
            raise KeyError(key_parts)
        return self._values[surrogate]

    def __setitem__(self, key_parts: _types.KeyParts, value: _V) -> None:
        self.set(key_parts, value)

    def __delitem__(self, key_parts: _types.KeyParts) -> None:
        """
        Raises:
            KeyError: If key_parts is empty or absent.
        """
        if not self.delete_by_key(key_parts):
            raise KeyError(key_parts)

    # =========================================================================
    # Rendering
    # =========================================================================

    def __str__(self) -> str:
        return _render.join_entries(
            _render.render_composite_entry(key_parts, value)
            for key_parts, value in self.entries()
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.entries()!r})"
