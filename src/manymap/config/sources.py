"""Custom pydantic-settings source for manymap configuration.

YamlSettingsSource loads an optional YAML file named by the
MANYMAP_CONFIG_FILE environment variable (or passed explicitly). A
missing file is normal and yields no values; a malformed file is an
error that must be surfaced.

Example config file:

    hashing:
      algorithm: blake2b
    iteration:
      breakable_halts: false
"""

import os as _os
import pathlib as _pathlib
import typing as _typing

import pydantic.fields as _pydantic_fields
import pydantic_settings as _pydantic_settings
import yaml as _yaml

import manymap.constants as constants
import manymap.errors as errors


def get_config_file_path() -> _pathlib.Path | None:
    """Return the config file named by MANYMAP_CONFIG_FILE, if set."""
    if config_file := _os.environ.get(constants.ENV_CONFIG_FILE):
        return _pathlib.Path(config_file).expanduser()
    return None


def load_yaml_file(path: _pathlib.Path) -> dict[str, _typing.Any]:
    """
    Load a YAML config file into a dict.

    Args:
        path: File to read.

    Returns:
        Parsed mapping, or an empty dict for an empty file.

    Raises:
        ConfigFileError: If the file cannot be read, is malformed, or its
            top level is not a mapping.
    """
    try:
        content = path.read_text(encoding="utf-8")
    except OSError as e:
        raise errors.ConfigFileError(path, f"cannot read file: {e}") from e

    try:
        data = _yaml.safe_load(content)
    except _yaml.YAMLError as e:
        raise errors.ConfigFileError(path, f"invalid YAML: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise errors.ConfigFileError(
            path, f"top level must be a mapping, got {type(data).__name__}"
        )
    return data


class YamlSettingsSource(_pydantic_settings.PydanticBaseSettingsSource):
    """
    Settings source that reads values from a single YAML file.

    The file is loaded once at construction. Values are returned as a
    plain dict and validated by Pydantic like any other source.
    """

    def __init__(
        self,
        settings_cls: type[_pydantic_settings.BaseSettings],
        config_path: _pathlib.Path | None = None,
    ) -> None:
        """
        Initialize the settings source.

        Args:
            settings_cls: The Settings class being populated.
            config_path: Override path for the config file (for testing).
                If not provided, uses the MANYMAP_CONFIG_FILE env var.
        """
        super().__init__(settings_cls)
        self._config_path = config_path or get_config_file_path()
        self._data = self._load()

    def _load(self) -> dict[str, _typing.Any]:
        if self._config_path is None or not self._config_path.exists():
            return {}
        return load_yaml_file(self._config_path)

    @property
    def config_path(self) -> _pathlib.Path | None:
        """Path of the config file this source reads, if any."""
        return self._config_path

    def get_field_value(
        self,
        field: _pydantic_fields.FieldInfo,
        field_name: str,
    ) -> tuple[_typing.Any, str, bool]:
        """Return the raw value for a single field."""
        value = self._data.get(field_name)
        return value, field_name, isinstance(value, (dict, list))

    def __call__(self) -> dict[str, _typing.Any]:
        return dict(self._data)
