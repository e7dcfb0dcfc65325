"""
Multi-key and multi-value maps.

- ListValueMap: one key → ordered list of values
- CompositeKeyMap: ordered key parts → one value
- ReadonlyListValueMap / ReadonlyCompositeKeyMap: read-only facades

Example:
    >>> from manymap.maps import CompositeKeyMap
    >>> grid = CompositeKeyMap([(["row1", "col1"], "LiLei")])
    >>> grid["row1", "col1"]
    'LiLei'
"""

from manymap.maps._composite_key_map import CompositeKeyMap
from manymap.maps._equality import same_value
from manymap.maps._frozen import FrozenMapping, FrozenSequence, freeze
from manymap.maps._list_value_map import ListValueMap
from manymap.maps._readonly import ReadonlyCompositeKeyMap, ReadonlyListValueMap

__all__ = [
    "CompositeKeyMap",
    "FrozenMapping",
    "FrozenSequence",
    "ListValueMap",
    "ReadonlyCompositeKeyMap",
    "ReadonlyListValueMap",
    "freeze",
    "same_value",
]
