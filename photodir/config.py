"""
Configuration management for photodir.
"""

from pathlib import Path
from typing import Dict, Optional

import yaml

from .constants import PROGRAM, get_logger

DEFAULT_MAX_INTERVAL = 0
DEFAULT_SORT = "path"


class Config:
    """Manages configuration file for storing user preferences."""

    def __init__(self, config_path: Optional[Path] = None):
        # Default config location: ~/.<PROGRAM>/config.yml
        if config_path:
            self.config_path = Path(config_path)
        else:
            self.config_path = Path.home() / f".{PROGRAM}" / "config.yml"
        self.program_root = self.config_path.parent
        self.data = self._load_config()

    def _load_config(self) -> Dict:
        """Load configuration from YAML file."""
        if not self.config_path.exists():
            return {}

        try:
            with open(self.config_path, 'r') as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            get_logger().warning(f"Could not load config: {e}")
            return {}

        if not isinstance(data, dict):
            get_logger().warning(f"Ignoring malformed config: {self.config_path}")
            return {}
        return data

    def get_max_interval(self) -> int:
        """Get the largest allowed directory interval in days (default: 0)."""
        value = self.data.get('max_interval', DEFAULT_MAX_INTERVAL)
        try:
            return max(0, int(value))
        except (TypeError, ValueError):
            get_logger().warning(f"Invalid max_interval in config: {value!r}")
            return DEFAULT_MAX_INTERVAL

    def get_digits(self) -> Optional[int]:
        """Get the sequence number width for file renames (None: automatic)."""
        value = self.data.get('digits')
        if value is None:
            return None
        try:
            digits = int(value)
        except (TypeError, ValueError):
            digits = 0
        if digits < 1:
            get_logger().warning(f"Invalid digits in config: {value!r}")
            return None
        return digits

    def get_sort(self) -> str:
        """Get the file order used for sequential renames."""
        value = self.data.get('sort', DEFAULT_SORT)
        if value not in ("path", "created"):
            get_logger().warning(f"Invalid sort in config: {value!r}")
            return DEFAULT_SORT
        return value

