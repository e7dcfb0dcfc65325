"""
Structural hashing for composite keys.

StructuralHasher turns an arbitrary value (typically a list of key parts)
into a fixed-form hex identifier. Two values produce the same identifier
when they are structurally equal, independent of object identity:

    >>> hasher = StructuralHasher()
    >>> hasher.hash(["row1", {"col": 1}]) == hasher.hash(("row1", {"col": 1}))
    True

The value is first serialized to a canonical, type-tagged byte string
(see encode()) and that string is digested with hashlib. Every length is
prefixed so that no two different structures share an encoding.

Encoding rules:
- None and bool are distinct kinds (True does not equal 1)
- an integral float encodes like the matching int: [1] and [1.0] match
- -0.0 encodes like 0 and 0.0; all NaNs encode alike
- list and tuple share a tag: ["a"] and ("a",) are the same key
- mapping items and set members are sorted by their own encoding
- enums, dataclasses and objects with __dict__ encode as type name + content
- a container that contains itself encodes a back-reference marker
- anything else encodes as type name + repr()
"""

from __future__ import annotations

import collections.abc as _abc
import dataclasses as _dataclasses
import enum as _enum
import functools as _functools
import hashlib as _hashlib
import logging as _logging
import math as _math
import struct as _struct
import typing as _typing

import manymap.config as config
import manymap.constants as constants
import manymap.errors as errors

_logger = _logging.getLogger(__name__)

TypeHandler: _typing.TypeAlias = _typing.Callable[[_typing.Any], bytes]

# Type tags
_TAG_NONE = b"N"
_TAG_TRUE = b"T"
_TAG_FALSE = b"F"
_TAG_INT = b"i"
_TAG_FLOAT = b"f"
_TAG_STR = b"s"
_TAG_BYTES = b"b"
_TAG_SEQUENCE = b"L"
_TAG_MAPPING = b"M"
_TAG_SET = b"S"
_TAG_ENUM = b"E"
_TAG_DATACLASS = b"D"
_TAG_OBJECT = b"O"
_TAG_TYPE = b"K"
_TAG_CUSTOM = b"C"
_TAG_REPR = b"R"
_TAG_CYCLE = b"@"

_type_handlers: dict[type, TypeHandler] = {}


def register_type_handler(type_: type, handler: TypeHandler) -> None:
    """
    Register a custom encoding for instances of a type.

    The handler receives the instance and returns bytes that identify its
    content. Handlers are consulted before the built-in rules, in
    registration order, using isinstance().

    Args:
        type_: The type to handle (subclasses included).
        handler: Function converting an instance to stable bytes.
    """
    _type_handlers[type_] = handler


def unregister_type_handler(type_: type) -> None:
    """Remove a handler added with register_type_handler(), if present."""
    _type_handlers.pop(type_, None)


def _length_prefixed(payload: bytes) -> bytes:
    return str(len(payload)).encode("ascii") + b":" + payload


def _qualified_name(type_: type) -> bytes:
    return f"{type_.__module__}.{type_.__qualname__}".encode()


def _encode_float(value: float) -> bytes:
    if _math.isnan(value):
        return b"nan"
    return _struct.pack(">d", value)


class StructuralHasher:
    """
    Computes surrogate identifiers from structured values.

    Args:
        algorithm: Name of a hashlib algorithm (default sha256).

    Raises:
        UnknownHashAlgorithmError: If hashlib does not provide the algorithm.

    Note:
        Collisions are not detected. Maps keyed by these digests assume
        that structurally different values never share a digest.
    """

    __slots__ = ("_algorithm",)

    def __init__(self, algorithm: str = constants.DEFAULT_HASH_ALGORITHM) -> None:
        try:
            _hashlib.new(algorithm)
        except (ValueError, TypeError) as e:
            raise errors.UnknownHashAlgorithmError(algorithm) from e
        self._algorithm = algorithm

    @property
    def algorithm(self) -> str:
        """The hashlib algorithm in use."""
        return self._algorithm

    def __repr__(self) -> str:
        return f"StructuralHasher(algorithm={self._algorithm!r})"

    def hash(self, value: _typing.Any) -> str:
        """Return the hex digest identifying value's structure."""
        return _hashlib.new(self._algorithm, self.encode(value)).hexdigest()

    def encode(self, value: _typing.Any) -> bytes:
        """
        Serialize a value to its canonical byte form.

        Args:
            value: Any Python value.

        Returns:
            Bytes that are equal for structurally equal values.
        """
        return self._encode(value, [])

    def _encode(self, value: _typing.Any, stack: list[int]) -> bytes:
        if value is None:
            return _TAG_NONE

        for type_, handler in _type_handlers.items():
            if isinstance(value, type_):
                return (
                    _TAG_CUSTOM
                    + _length_prefixed(_qualified_name(type_))
                    + _length_prefixed(handler(value))
                )

        # bool before int: bool is an int subclass
        if value is True:
            return _TAG_TRUE
        if value is False:
            return _TAG_FALSE
        if isinstance(value, _enum.Enum):
            return (
                _TAG_ENUM
                + _length_prefixed(_qualified_name(type(value)))
                + self._encode(value.value, stack)
            )
        if isinstance(value, int):
            return _TAG_INT + _length_prefixed(str(int(value)).encode("ascii"))
        if isinstance(value, float):
            if value.is_integer():
                return _TAG_INT + _length_prefixed(str(int(value)).encode("ascii"))
            return _TAG_FLOAT + _encode_float(value)
        if isinstance(value, str):
            return _TAG_STR + _length_prefixed(value.encode("utf-8", "surrogatepass"))
        if isinstance(value, (bytes, bytearray, memoryview)):
            return _TAG_BYTES + _length_prefixed(bytes(value))
        if isinstance(value, type):
            return _TAG_TYPE + _length_prefixed(_qualified_name(value))

        # Containers from here on; guard against self-reference
        if id(value) in stack:
            depth = len(stack) - stack.index(id(value))
            return _TAG_CYCLE + str(depth).encode("ascii")

        stack.append(id(value))
        try:
            return self._encode_container(value, stack)
        finally:
            stack.pop()

    def _encode_container(self, value: _typing.Any, stack: list[int]) -> bytes:
        if isinstance(value, _abc.Mapping):
            return _TAG_MAPPING + self._encode_unordered(
                (
                    _length_prefixed(self._encode(key, stack))
                    + _length_prefixed(self._encode(item, stack))
                    for key, item in value.items()
                ),
            )
        if isinstance(value, _abc.Set):
            return _TAG_SET + self._encode_unordered(
                self._encode(member, stack) for member in value
            )
        if isinstance(value, _abc.Sequence):
            parts = [self._encode(item, stack) for item in value]
            return (
                _TAG_SEQUENCE
                + str(len(parts)).encode("ascii")
                + b":"
                + b"".join(_length_prefixed(part) for part in parts)
            )
        if _dataclasses.is_dataclass(value):
            fields = {
                field.name: getattr(value, field.name)
                for field in _dataclasses.fields(value)
            }
            return (
                _TAG_DATACLASS
                + _length_prefixed(_qualified_name(type(value)))
                + self._encode(fields, stack)
            )
        if not callable(value) and hasattr(value, "__dict__"):
            return (
                _TAG_OBJECT
                + _length_prefixed(_qualified_name(type(value)))
                + self._encode(dict(vars(value)), stack)
            )

        _logger.debug("Encoding %s by repr()", type(value).__name__)
        return (
            _TAG_REPR
            + _length_prefixed(_qualified_name(type(value)))
            + _length_prefixed(repr(value).encode("utf-8", "backslashreplace"))
        )

    @staticmethod
    def _encode_unordered(encoded: _abc.Iterable[bytes]) -> bytes:
        parts = sorted(encoded)
        return (
            str(len(parts)).encode("ascii")
            + b":"
            + b"".join(_length_prefixed(part) for part in parts)
        )


@_functools.lru_cache(maxsize=None)
def get_hasher(algorithm: str = constants.DEFAULT_HASH_ALGORITHM) -> StructuralHasher:
    """Return a shared StructuralHasher for the given algorithm."""
    return StructuralHasher(algorithm)


def default_hasher() -> StructuralHasher:
    """Return the hasher for the configured algorithm."""
    return get_hasher(config.get_settings().hash_algorithm)


def structural_hash(value: _typing.Any, algorithm: str | None = None) -> str:
    """
    Hash a value with a shared hasher.

    Args:
        value: Value to identify.
        algorithm: hashlib algorithm; the configured one when omitted.

    Returns:
        Hex digest of the value's canonical encoding.
    """
    hasher = default_hasher() if algorithm is None else get_hasher(algorithm)
    return hasher.hash(value)
