"""
Read-only facades over the mutable maps.

Each facade owns a private mutable map built from the constructor
entries and forwards every read, query and iteration call to it. No
mutator is exposed and the inner map is never handed out. Lists that
leave a facade are wrapped in FrozenSequence:

    >>> colors = ReadonlyListValueMap([("color", ["red", "green"])])
    >>> colors.get("color")
    FrozenSequence(['red', 'green'])
    >>> colors.set  # AttributeError: no mutators
"""

from __future__ import annotations

import collections.abc as _abc
import typing as _typing

import manymap.hashing as hashing
import manymap.maps._composite_key_map as _composite_key_map
import manymap.maps._frozen as _frozen
import manymap.maps._list_value_map as _list_value_map
import manymap.maps._types as _types

_K = _typing.TypeVar("_K")
_V = _typing.TypeVar("_V")


class ReadonlyListValueMap(_typing.Generic[_K, _V]):
    """
    Read-only map with entries that hold a single key and a list of values.

    Args:
        entries: (key, values) pairs; the facade keeps its own copy.
        breakable_halts: See ListValueMap.
    """

    __slots__ = ("_map",)

    def __init__(
        self,
        entries: _types.ListValueEntries | None = None,
        *,
        breakable_halts: bool | None = None,
    ) -> None:
        self._map: _list_value_map.ListValueMap[_K, _V] = _list_value_map.ListValueMap(
            entries, breakable_halts=breakable_halts
        )

    @classmethod
    def of(
        cls, entries: _types.ListValueEntries | None = None
    ) -> ReadonlyListValueMap[_typing.Any, _typing.Any]:
        """Create a facade from (key, values) pairs; same as the constructor."""
        return cls(entries)

    @classmethod
    def from_map(
        cls, source: _list_value_map.ListValueMap[_K, _V]
    ) -> ReadonlyListValueMap[_K, _V]:
        """Create a facade over a snapshot of an existing ListValueMap."""
        return cls(source.entries(), breakable_halts=source.breakable_halts)

    def get(
        self, key: _K, default: _abc.Sequence[_V] | None = None
    ) -> _abc.Sequence[_V] | None:
        """Return the values stored under key as a FrozenSequence, or default."""
        values = self._map.get(key)
        if values is None:
            return default
        return _frozen.FrozenSequence(values)

    def keys(self) -> list[_K]:
        return self._map.keys()

    def values(self) -> list[_frozen.FrozenSequence]:
        return [_frozen.FrozenSequence(values) for values in self._map.values()]

    def entries(self) -> list[tuple[_K, _frozen.FrozenSequence]]:
        return [(key, _frozen.FrozenSequence(values)) for key, values in self._map.entries()]

    @property
    def size(self) -> int:
        return self._map.size

    def is_empty(self) -> bool:
        return self._map.is_empty()

    def is_not_empty(self) -> bool:
        return self._map.is_not_empty()

    def has_key(self, key: _K) -> bool:
        return self._map.has_key(key)

    def has_key_value(self, key: _K, value: _V) -> bool:
        return self._map.has_key_value(key, value)

    def has_any_keys(self, *keys: _K) -> bool:
        return self._map.has_any_keys(*keys)

    def has_all_keys(self, *keys: _K) -> bool:
        return self._map.has_all_keys(*keys)

    def has_value(self, values: _abc.Sequence[_V], exact: bool = True) -> bool:
        return self._map.has_value(values, exact)

    def has_any_values(self, *values: _abc.Sequence[_V]) -> bool:
        return self._map.has_any_values(*values)

    def has_all_values(self, *values: _abc.Sequence[_V]) -> bool:
        return self._map.has_all_values(*values)

    def for_each(self, callback: _types.EachCallback) -> None:
        """Call callback(values, key, facade) for every entry."""
        for key, values in self.entries():
            callback(values, key, self)

    def for_each_indexing(self, callback: _types.IndexedCallback) -> None:
        for index, (key, values) in enumerate(self.entries()):
            callback(values, key, index, self)

    def for_each_breakable(self, callback: _types.BreakableCallback) -> None:
        for key, values in self.entries():
            if not callback(values, key, self) and self._map.breakable_halts:
                break

    def __iter__(self) -> _typing.Iterator[tuple[_K, _frozen.FrozenSequence]]:
        return iter(self.entries())

    def __len__(self) -> int:
        return len(self._map)

    def __contains__(self, key: object) -> bool:
        return key in self._map

    def __getitem__(self, key: _K) -> _frozen.FrozenSequence:
        return _frozen.FrozenSequence(self._map[key])

    def __str__(self) -> str:
        return str(self._map)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._map.entries()!r})"


class ReadonlyCompositeKeyMap(_typing.Generic[_K, _V]):
    """
    Read-only map with entries that hold multiple keys and a single value.

    Key-part lists leave the facade as FrozenSequence. Stored list and
    dict values leave it wrapped by freeze(), so nested containers cannot
    be mutated through the facade either.

    Args:
        entries: (key_parts, value) pairs; the facade keeps its own copy.
        hasher: See CompositeKeyMap.
        breakable_halts: See CompositeKeyMap.
    """

    __slots__ = ("_map",)

    def __init__(
        self,
        entries: _types.CompositeKeyEntries | None = None,
        *,
        hasher: hashing.StructuralHasher | None = None,
        breakable_halts: bool | None = None,
    ) -> None:
        self._map: _composite_key_map.CompositeKeyMap[_K, _V] = (
            _composite_key_map.CompositeKeyMap(
                entries, hasher=hasher, breakable_halts=breakable_halts
            )
        )

    @classmethod
    def of(
        cls, entries: _types.CompositeKeyEntries | None = None
    ) -> ReadonlyCompositeKeyMap[_typing.Any, _typing.Any]:
        """Create a facade from (key_parts, value) pairs; same as the constructor."""
        return cls(entries)

    @classmethod
    def from_map(
        cls, source: _composite_key_map.CompositeKeyMap[_K, _V]
    ) -> ReadonlyCompositeKeyMap[_K, _V]:
        """Create a facade over a snapshot of an existing CompositeKeyMap."""
        return cls(
            source.entries(),
            hasher=source.hasher,
            breakable_halts=source.breakable_halts,
        )

    def get(self, key_parts: _types.KeyParts, default: _V | None = None) -> _V | None:
        if not self._map.has_key(key_parts):
            return default
        return _frozen.freeze(self._map[key_parts])

    def keys(self) -> list[_frozen.FrozenSequence]:
        return [_frozen.FrozenSequence(key_parts) for key_parts in self._map.keys()]

    def values(self) -> list[_V]:
        return [_frozen.freeze(value) for value in self._map.values()]

    def entries(self) -> list[tuple[_frozen.FrozenSequence, _V]]:
        return [
            (_frozen.FrozenSequence(key_parts), _frozen.freeze(value))
            for key_parts, value in self._map.entries()
        ]

    @property
    def size(self) -> int:
        return self._map.size

    def is_empty(self) -> bool:
        return self._map.is_empty()

    def is_not_empty(self) -> bool:
        return self._map.is_not_empty()

    def has_key(self, key_parts: _types.KeyParts) -> bool:
        return self._map.has_key(key_parts)

    def has_key_value(self, key_parts: _types.KeyParts, value: _V) -> bool:
        return self._map.has_key_value(key_parts, value)

    def has_any_keys(self, *key_parts: _types.KeyParts) -> bool:
        return self._map.has_any_keys(*key_parts)

    def has_all_keys(self, *key_parts: _types.KeyParts) -> bool:
        return self._map.has_all_keys(*key_parts)

    def has_value(self, value: _V) -> bool:
        return self._map.has_value(value)

    def has_any_values(self, *values: _V) -> bool:
        return self._map.has_any_values(*values)

    def has_all_values(self, *values: _V) -> bool:
        return self._map.has_all_values(*values)

    def for_each(self, callback: _types.EachCallback) -> None:
        """Call callback(value, key_parts, facade) for every entry."""
        for key_parts, value in self.entries():
            callback(value, key_parts, self)

    def for_each_indexing(self, callback: _types.IndexedCallback) -> None:
        for index, (key_parts, value) in enumerate(self.entries()):
            callback(value, key_parts, index, self)

    def for_each_breakable(self, callback: _types.BreakableCallback) -> None:
        for key_parts, value in self.entries():
            if not callback(value, key_parts, self) and self._map.breakable_halts:
                break

    def __iter__(self) -> _typing.Iterator[tuple[_frozen.FrozenSequence, _V]]:
        return iter(self.entries())

    def __len__(self) -> int:
        return len(self._map)

    def __contains__(self, key_parts: object) -> bool:
        return key_parts in self._map

    def __getitem__(self, key_parts: _types.KeyParts) -> _V:
        return _frozen.freeze(self._map[key_parts])

    def __str__(self) -> str:
        return str(self._map)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._map.entries()!r})"
