"""
Settings configuration using pydantic-settings.

Loads configuration from:
1. Constructor arguments (highest precedence)
2. Environment variables with MANYMAP_ prefix
3. YAML config file named by MANYMAP_CONFIG_FILE (if present)
4. Built-in defaults (lowest)

Nested config uses double underscore delimiter:
  MANYMAP_HASHING__ALGORITHM=blake2b
  MANYMAP_ITERATION__BREAKABLE_HALTS=false
"""

import functools as _functools
import logging as _logging
import typing as _typing

import pydantic as _pydantic
import pydantic_settings as _pydantic_settings

import manymap.config.sources as sources
import manymap.config.types as types
import manymap.constants as constants

_logger = _logging.getLogger(__name__)


class Settings(_pydantic_settings.BaseSettings):
    """
    manymap configuration settings.

    All settings can be overridden via environment variables with MANYMAP_
    prefix. For nested config, use double underscore:
    MANYMAP_ITERATION__BREAKABLE_HALTS=false

    Config precedence (highest to lowest):
    1. Constructor arguments
    2. Environment variables (MANYMAP_*)
    3. YAML config file (MANYMAP_CONFIG_FILE)
    4. Built-in defaults
    """

    model_config = _pydantic_settings.SettingsConfigDict(
        env_prefix=constants.ENV_PREFIX,
        env_nested_delimiter="__",  # MANYMAP_HASHING__ALGORITHM
        extra="ignore",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[_pydantic_settings.BaseSettings],
        init_settings: _pydantic_settings.PydanticBaseSettingsSource,
        env_settings: _pydantic_settings.PydanticBaseSettingsSource,
        dotenv_settings: _pydantic_settings.PydanticBaseSettingsSource,
        file_secret_settings: _pydantic_settings.PydanticBaseSettingsSource,
    ) -> tuple[_pydantic_settings.PydanticBaseSettingsSource, ...]:
        """
        Configure settings sources with precedence:
        1. init_settings (constructor args, highest)
        2. env_settings (MANYMAP_* env vars)
        3. yaml_settings (MANYMAP_CONFIG_FILE)
        4. defaults via Field definitions (lowest)
        """
        return (
            init_settings,
            env_settings,
            sources.YamlSettingsSource(settings_cls),
        )

    # =========================================================================
    # Nested config sections
    # =========================================================================

    hashing: types.HashingConfig = _pydantic.Field(default_factory=types.HashingConfig)
    """Surrogate hashing settings."""

    iteration: types.IterationConfig = _pydantic.Field(
        default_factory=types.IterationConfig
    )
    """Iteration settings."""

    # =========================================================================
    # Convenience accessors
    # =========================================================================

    @property
    def hash_algorithm(self) -> str:
        """Configured hashlib algorithm name."""
        return self.hashing.algorithm

    @property
    def breakable_halts(self) -> bool:
        """Whether for_each_breakable stops on a falsy callback result."""
        return self.iteration.breakable_halts

    def to_dict(self) -> dict[str, _typing.Any]:
        """Return the validated settings as a plain dict."""
        return self.model_dump()


@_functools.lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Return the process-wide Settings instance.

    The instance is built on first use and cached. Call reset_settings()
    after changing the environment to pick up new values.
    """
    settings = Settings()
    _logger.debug("Loaded manymap settings: %s", settings.to_dict())
    return settings


def reset_settings() -> None:
    """Discard the cached Settings instance."""
    get_settings.cache_clear()
