"""Configuration management for the SubRip tools."""

import copy
import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

logger = logging.getLogger(__name__)

class ConfigManager:
    """Manages configuration settings for the SubRip tools."""

    DEFAULT_CONFIG = {
        'build': {
            'strip_tags': False,
            'strip_basic': False,
            'replacements': False,
            'transform': 'markup',  # or 'plain'
        },
        'parser': {
            'strict': False,
        },
        'io': {
            'encoding': 'utf-8',
        },
    }

    def __init__(self, config_path: Optional[Union[str, Path]] = None):
        """Initialize the configuration manager.

        Args:
            config_path: Path to the configuration file. If None, uses default location.
        """
        if config_path is None:
            self.config_dir = Path.home() / '.config' / 'subrip-captioning'
            self.config_path = self.config_dir / 'config.json'
        else:
            self.config_path = Path(config_path)
            self.config_dir = self.config_path.parent

        self._config = self._load_config()

    def _load_config(self) -> Dict[str, Any]:
        """Load configuration from file, falling back to defaults."""
        try:
            if self.config_path.exists():
                with open(self.config_path, 'r', encoding='utf-8') as f:
                    config = json.load(f)
                return self._merge_with_defaults(config)
        except (OSError, ValueError) as e:
            logger.warning(f"Failed to load config from {self.config_path}: {e}")

        return copy.deepcopy(self.DEFAULT_CONFIG)

    def _merge_with_defaults(self, config: Dict[str, Any]) -> Dict[str, Any]:
        """Merge a config dictionary with default values."""
        result = copy.deepcopy(self.DEFAULT_CONFIG)

        def merge(dest: Dict[str, Any], source: Dict[str, Any]) -> None:
            for key, value in source.items():
                if key in dest and isinstance(dest[key], dict) and isinstance(value, dict):
                    merge(dest[key], value)
                else:
                    dest[key] = value

        merge(result, config)
        return result

    def save(self) -> bool:
        """Save the current configuration to file.

        Returns:
            bool: True if save was successful, False otherwise
        """
        temp_path = self.config_path.with_suffix('.tmp')
        try:
            self.config_dir.mkdir(parents=True, exist_ok=True)

            # Write to a temporary file first
            with open(temp_path, 'w', encoding='utf-8') as f:
                json.dump(self._config, f, indent=2, ensure_ascii=False)

            temp_path.replace(self.config_path)
            return True
        except (OSError, TypeError) as e:
            logger.error(f"Failed to save config to {self.config_path}: {e}")
            if temp_path.exists():
                temp_path.unlink()
            return False

    def get(self, key: str, default: Any = None) -> Any:
        """Get a configuration value by dot notation key.

        Args:
            key: Dot-notation key (e.g., 'build.strip_tags')
            default: Default value if key is not found

        Returns:
            The configuration value or default if not found
        """
        try:
            parts = key.split('.')
            value = self._config
            for part in parts:
                value = value[part]
            return value
        except (KeyError, AttributeError, TypeError):
            return default

    def set(self, key: str, value: Any, save: bool = True) -> bool:
        """Set a configuration value by dot notation key.

        Args:
            key: Dot-notation key (e.g., 'parser.strict')
            value: Value to set
            save: Whether to save the configuration after updating

        Returns:
            bool: True if the update was successful, False otherwise
        """
        parts = key.split('.')
        current = self._config

        # Navigate to the parent of the target key
        for part in parts[:-1]:
            if part not in current or not isinstance(current[part], dict):
                current[part] = {}
            current = current[part]

        current[parts[-1]] = value

        if save:
            return self.save()
        return True

    def update(self, updates: Dict[str, Any], save: bool = True) -> bool:
        """Update multiple configuration values at once.

        Args:
            updates: Dictionary of key-value pairs to update
            save: Whether to save the configuration after updating

        Returns:
            bool: True if all updates were successful, False otherwise
        """
        for key, value in updates.items():
            self.set(key, value, save=False)

        if save:
            return self.save()
        return True

    def get_build_options(self) -> Dict[str, Any]:
        """Get the build options stored in the configuration.

        Returns:
            Dictionary with the strip_tags, strip_basic and replacements options
        """
        build = self.get('build', {})
        return {key: build[key] for key in ('strip_tags', 'strip_basic', 'replacements') if key in build}
