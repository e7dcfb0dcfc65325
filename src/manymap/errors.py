"""
Exception types for manymap.

Lookups and deletions never raise for missing data; they return a
default or False. The exceptions here flag configuration mistakes and
broken internal state.
"""

import pathlib as _pathlib


class ManyMapError(Exception):
    """Base class for all manymap errors."""

    pass


class UnknownHashAlgorithmError(ManyMapError, ValueError):
    """Raised when a hasher is built for an algorithm hashlib does not provide."""

    def __init__(self, algorithm: str) -> None:
        self.algorithm = algorithm
        super().__init__(f"Unknown hash algorithm: {algorithm!r}")


class InconsistentStateError(ManyMapError):
    """Raised when the key-parts table and the value table disagree."""

    pass


class ConfigFileError(ManyMapError):
    """Error loading or parsing a configuration file."""

    def __init__(self, path: _pathlib.Path, message: str) -> None:
        self.path = path
        super().__init__(f"Error in config file {path}: {message}")
