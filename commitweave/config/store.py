"""
Layered configuration persistence: local project file, global user file, defaults.
"""

import json
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

from loguru import logger

from ..exceptions import ConfigIOError, SchemaValidationError
from .defaults import default_config, default_document
from .merge import merge_configs
from .schema import Config, parse_config
from .settings import Settings


class ConfigStore:
    """Resolves, reads and writes the authoritative configuration file."""

    def __init__(self, local_path: Path, global_path: Path):
        """Initialize the store with explicit file locations."""
        self.local_path = Path(local_path)
        self.global_path = Path(global_path)

    @classmethod
    def from_settings(cls, settings: Settings) -> "ConfigStore":
        """Create a store from runtime settings."""
        return cls(settings.config_path, settings.global_config_path)

    def has_local_config(self) -> bool:
        """Check if the local project config file exists."""
        return self.local_path.exists()

    def has_global_config(self) -> bool:
        """Check if the global user config file exists."""
        return self.global_path.exists()

    def get_active_config_path(self) -> Optional[Path]:
        """Get the config file that is currently authoritative, if any."""
        if self.has_local_config():
            return self.local_path
        if self.has_global_config():
            return self.global_path
        return None

    def read_document(self, path: Path) -> Dict[str, Any]:
        """
        Read and parse a configuration file without validating it.

        Raises:
            ConfigIOError: if the file cannot be read
            SchemaValidationError: if the content is not a JSON object
        """
        try:
            content = path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            raise SchemaValidationError(f"{path} is not valid UTF-8 text: {e}") from e
        except OSError as e:
            raise ConfigIOError(f"Failed to read configuration from {path}: {e}") from e

        try:
            document = json.loads(content)
        except json.JSONDecodeError as e:
            raise SchemaValidationError(f"{path} is not valid JSON: {e}") from e

        if not isinstance(document, dict):
            raise SchemaValidationError(
                f"{path} must contain a JSON object, found {type(document).__name__}"
            )
        return document

    def load(self) -> Config:
        """
        Load the active configuration.

        Priority: local project file > global user file > defaults. When no
        file exists the defaults are written to the local path. Unreadable or
        invalid files fall back to defaults with a warning and are left
        untouched on disk.
        """
        config_path = self.get_active_config_path()

        if config_path is None:
            logger.info("No configuration file found, creating defaults")
            config = default_config()
            try:
                self.save(config)
            except ConfigIOError as e:
                logger.warning(f"Could not persist default configuration: {e}")
            return config

        try:
            raw_config = self.read_document(config_path)
            config = parse_config(merge_configs(default_document(), raw_config))
        except (ConfigIOError, SchemaValidationError) as e:
            logger.warning(f"Failed to load config file, using defaults. Error: {e}")
            return default_config()

        logger.debug(f"Loaded configuration from {config_path}")
        return config

    def _write(self, path: Path, config: Union[Config, Mapping[str, Any]]) -> Config:
        validated = parse_config(config)
        payload = json.dumps(validated.to_document(), indent=2, ensure_ascii=False)

        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(payload + "\n", encoding="utf-8")
        except OSError as e:
            raise ConfigIOError(f"Failed to save configuration to {path}: {e}") from e

        logger.info(f"Configuration saved to {path}")
        return validated

    def save(self, config: Union[Config, Mapping[str, Any]]) -> Config:
        """
        Validate and write configuration to the local project file.

        Raises:
            SchemaValidationError: if the document violates the schema
            ConfigIOError: if the file cannot be written
        """
        return self._write(self.local_path, config)

    def save_global(self, config: Union[Config, Mapping[str, Any]]) -> Config:
        """Validate and write configuration to the global user file."""
        return self._write(self.global_path, config)

    def reset(self) -> Config:
        """Overwrite the local configuration with defaults."""
        return self.save(default_config())

    @staticmethod
    def merge_configs(
        base: Union[Config, Mapping[str, Any]],
        override: Union[Config, Mapping[str, Any]],
    ) -> Dict[str, Any]:
        """Merge ``override`` onto ``base``; see :func:`merge_configs`."""
        return merge_configs(base, override)
