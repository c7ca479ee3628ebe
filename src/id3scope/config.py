"""Configuration management for id3scope.

Handles loading and saving user preferences such as where extracted
attachments go and how values are displayed.
"""

import copy
import logging
import tomllib
from pathlib import Path
from typing import Any, Dict, Optional, Union

import tomli_w

logger = logging.getLogger(__name__)


def get_config_dir() -> Path:
    """Get the configuration directory.

    Returns:
        Path to config directory (~/.id3scope on all platforms)
    """
    return Path.home() / ".id3scope"


def get_config_path() -> Path:
    """Get the full path to the config file."""
    return get_config_dir() / "config.toml"


class Config:
    """Configuration manager for application settings."""

    DEFAULT_CONFIG: Dict[str, Any] = {
        "display": {
            # Longer text values are truncated in tables
            "max_value_length": 60,
            "show_offsets": True,
        },
        "attachments": {
            # Empty means "do not extract" unless --extract is given
            "directory": "",
            # Empty means "name attachments after the input file"
            "base_name": "",
        },
        "logging": {
            # debug, info, warning, error, critical; empty keeps the CLI default
            "level": "",
        },
    }

    def __init__(self, path: Optional[Union[str, Path]] = None):
        """Initialize configuration manager.

        Args:
            path: Config file to use instead of ~/.id3scope/config.toml
        """
        self.config_path = Path(path) if path is not None else get_config_path()
        self.data: Dict[str, Any] = copy.deepcopy(self.DEFAULT_CONFIG)
        self._dirty = False
        self.load()

    def load(self) -> bool:
        """Load configuration from file.

        Returns:
            True if loaded successfully, False if file doesn't exist or error occurred
        """
        if not self.config_path.exists():
            return False

        try:
            with open(self.config_path, "rb") as f:
                loaded_data = tomllib.load(f)
            # Merge with defaults (in case new keys were added)
            self._merge_config(self.data, loaded_data)
            self._dirty = False
            return True
        except (OSError, tomllib.TOMLDecodeError) as e:
            logger.error(f"Error loading config {self.config_path}: {e}")
            return False

    def save(self, force: bool = False) -> bool:
        """Save configuration to file.

        Args:
            force: If True, save even if config hasn't been modified

        Returns:
            True if saved successfully, False otherwise
        """
        if not force and not self._dirty:
            return True

        try:
            self.config_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.config_path, "wb") as f:
                tomli_w.dump(self.data, f)
            self._dirty = False
            return True
        except OSError as e:
            logger.error(f"Error saving config {self.config_path}: {e}")
            return False

    def _merge_config(self, base: Dict[str, Any], override: Dict[str, Any]) -> None:
        """Recursively merge override dict into base dict."""
        for key, value in override.items():
            if key in base and isinstance(base[key], dict) and isinstance(value, dict):
                self._merge_config(base[key], value)
            else:
                base[key] = value

    def is_dirty(self) -> bool:
        return self._dirty

    # Display settings
    def get_max_value_length(self) -> int:
        return self.data["display"]["max_value_length"]

    def set_max_value_length(self, length: int) -> None:
        """Set the display truncation length.

        Raises:
            ValueError: If length is less than 8
        """
        if length < 8:
            raise ValueError("max_value_length must be at least 8")
        self.data["display"]["max_value_length"] = length
        self._dirty = True

    def get_show_offsets(self) -> bool:
        return self.data["display"]["show_offsets"]

    def set_show_offsets(self, show: bool) -> None:
        self.data["display"]["show_offsets"] = show
        self._dirty = True

    # Attachment settings
    def get_attachments_dir(self) -> str:
        return self.data["attachments"]["directory"]

    def set_attachments_dir(self, path: str) -> None:
        self.data["attachments"]["directory"] = path
        self._dirty = True

    def get_attachment_base_name(self) -> str:
        return self.data["attachments"]["base_name"]

    def set_attachment_base_name(self, name: str) -> None:
        self.data["attachments"]["base_name"] = name
        self._dirty = True

    # Logging settings
    def get_log_level(self) -> str:
        return self.data.get("logging", {}).get("level", "")

    def set_log_level(self, level: str) -> None:
        self.data.setdefault("logging", {})["level"] = level
        self._dirty = True
