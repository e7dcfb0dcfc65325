"""
Type aliases for the map package.

- ListValueEntries / CompositeKeyEntries: constructor input shapes
- KeyParts: an ordered sequence of key parts
- Callback aliases for the for_each family
"""

from __future__ import annotations

import collections.abc as _abc
import typing as _typing

# Ordered key parts, e.g. ("row1", "col1")
KeyParts: _typing.TypeAlias = _abc.Sequence[_typing.Any]

# Constructor input: [(key, [v1, v2]), ...]
ListValueEntries: _typing.TypeAlias = _abc.Iterable[
    tuple[_typing.Any, _abc.Iterable[_typing.Any]]
]

# Constructor input: [(["row1", "col1"], value), ...]
CompositeKeyEntries: _typing.TypeAlias = _abc.Iterable[tuple[KeyParts, _typing.Any]]

# for_each callbacks receive (value(s), key(s), map)
EachCallback: _typing.TypeAlias = _typing.Callable[[_typing.Any, _typing.Any, _typing.Any], None]
IndexedCallback: _typing.TypeAlias = _typing.Callable[
    [_typing.Any, _typing.Any, int, _typing.Any], None
]
BreakableCallback: _typing.TypeAlias = _typing.Callable[
    [_typing.Any, _typing.Any, _typing.Any], bool
]
