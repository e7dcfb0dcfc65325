"""
Shared constants for manymap.

This module provides a single source of truth for default values
that are used across multiple modules.
"""

# Hashing defaults
DEFAULT_HASH_ALGORITHM = "sha256"
"""Default hashlib algorithm for surrogate identifiers."""

# Iteration defaults
DEFAULT_BREAKABLE_HALTS = True
"""Whether for_each_breakable stops at the first falsy callback result."""

# String rendering
ENTRY_SEPARATOR = ";"
"""Separator between rendered entries."""

PART_SEPARATOR = ","
"""Separator between rendered key parts or list values."""

KEY_VALUE_SEPARATOR = ":"
"""Separator between the key and value halves of a rendered entry."""

# Configuration
ENV_PREFIX = "MANYMAP_"
"""Prefix for environment variable overrides."""

ENV_CONFIG_FILE = "MANYMAP_CONFIG_FILE"
"""Environment variable naming an optional YAML config file."""
