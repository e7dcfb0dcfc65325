"""Configuration type definitions for manymap settings.

This module defines the Pydantic models used to represent configuration
sections nested within the main Settings class:

- HashingConfig: algorithm used for surrogate identifiers
- IterationConfig: behaviour of breakable iteration

All types use `extra="allow"` to preserve unknown fields, so a config
file can be audited for typos with `get_extra_fields()`.
"""

import typing as _typing

import pydantic as _pydantic

import manymap.constants as constants

# =============================================================================
# Base class with introspection
# =============================================================================


class ConfigBase(_pydantic.BaseModel):
    """
    Base class for all config types.

    Unknown fields are preserved rather than silently dropped.
    """

    model_config = _pydantic.ConfigDict(extra="allow")

    def get_extra_fields(self) -> dict[str, _typing.Any]:
        """
        Return fields that were provided but not in the schema.

        Returns:
            Dict of field_name → value for all unrecognized fields.
        """
        return dict(self.model_extra) if self.model_extra else {}


# =============================================================================
# Hashing Settings
# =============================================================================


HashAlgorithm = _typing.Literal["sha256", "sha1", "sha512", "md5", "blake2b"]


class HashingConfig(ConfigBase):
    """
    Surrogate hashing settings.

    YAML section: hashing.*
    """

    algorithm: HashAlgorithm = constants.DEFAULT_HASH_ALGORITHM
    """hashlib algorithm used to digest encoded key parts."""


# =============================================================================
# Iteration Settings
# =============================================================================


class IterationConfig(ConfigBase):
    """
    Iteration settings.

    YAML section: iteration.*
    """

    breakable_halts: bool = constants.DEFAULT_BREAKABLE_HALTS
    """Stop for_each_breakable at the first falsy callback result.

    When False every entry is visited regardless of the callback result.
    """
