"""
manymap - Multi-key and multi-value maps

Maps that relax dict's single-key/single-value restriction: composite
(multi-part) keys mapping to one value, and single keys mapping to a list
of values, each in mutable and read-only forms.
"""

import importlib.metadata as _metadata

# Version is defined in pyproject.toml - read it and parse into tuple (primary representation)
_raw_version = _metadata.version("manymap")
__version_info__: tuple[int, int, int] = tuple(int(x) for x in _raw_version.split(".")[:3])  # type: ignore[assignment]
__version__: str = ".".join(str(x) for x in __version_info__)
__author__ = "manymap Contributors"

from manymap.config import Settings, get_settings  # noqa: E402
from manymap.errors import (  # noqa: E402
    ConfigFileError,
    InconsistentStateError,
    ManyMapError,
    UnknownHashAlgorithmError,
)
from manymap.hashing import StructuralHasher, structural_hash  # noqa: E402
from manymap.maps import (  # noqa: E402
    CompositeKeyMap,
    ListValueMap,
    ReadonlyCompositeKeyMap,
    ReadonlyListValueMap,
)

__all__ = [
    "__version__",
    "__version_info__",
    "CompositeKeyMap",
    "ConfigFileError",
    "InconsistentStateError",
    "ListValueMap",
    "ManyMapError",
    "ReadonlyCompositeKeyMap",
    "ReadonlyListValueMap",
    "Settings",
    "StructuralHasher",
    "UnknownHashAlgorithmError",
    "get_settings",
    "structural_hash",
]
