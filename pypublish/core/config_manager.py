"""
Configuration management for pypublish.

Handles loading, merging, and discovery of YAML configuration files.
"""
import importlib.resources as importlib_resources
import os
from typing import Any, Dict, Optional

import yaml


LOCAL_CONFIG_FILE = "pypublish.config.yaml"
SECTIONS = ("pypi", "settings")


class ConfigManager:
    """Manages pypublish configuration loading and merging operations."""

    def load_config(self, path: str) -> dict:
        """Load configuration from YAML file."""
        with open(path, "r") as f:
            config = yaml.safe_load(f) or {}

        if not isinstance(config, dict):
            raise ValueError(f"{path}: top level must be a mapping, got {type(config).__name__}")
        for section in SECTIONS:
            value = config.get(section)
            if value is None:
                # An empty section keeps the defaults
                config.pop(section, None)
            elif not isinstance(value, dict):
                raise ValueError(f"{path}: '{section}' must be a mapping, got {type(value).__name__}")
        return config

    def deep_merge(self, default: dict, user: dict) -> dict:
        """Deep merge user config into default config."""
        result = default.copy()
        for key, value in user.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self.deep_merge(result[key], value)
            else:
                result[key] = value
        return result

    def load_package_default_config(self) -> dict:
        """Load default config shipped with the package."""
        config_file = importlib_resources.files("pypublish.config") / "default.yaml"
        with config_file.open("r") as f:
            return yaml.safe_load(f) or {}

    def load_and_merge_config(self, user_config_path: str) -> dict:
        """Load user config and merge with package default."""
        default_config = self.load_package_default_config()
        user_config = self.load_config(user_config_path)
        return self.deep_merge(default_config, user_config)

    def discover_and_load_config(self, config_arg: Optional[str]) -> dict:
        """Discover config file with priority order."""

        # Priority 1: --config argument
        if config_arg:
            if os.path.exists(config_arg):
                return self.load_and_merge_config(config_arg)
            else:
                raise FileNotFoundError(f"Config file not found: {config_arg}")

        # Priority 2: pypublish.config.yaml in current directory
        if os.path.exists(LOCAL_CONFIG_FILE):
            return self.load_and_merge_config(LOCAL_CONFIG_FILE)

        # Priority 3: Package default config
        return self.load_package_default_config()

    def merge_config_and_args(self, config: dict, overrides: Dict[str, Any]) -> dict:
        """Apply CLI overrides to the pypi section; None means not given."""
        pypi_config = dict(config.get("pypi") or {})
        for key, value in overrides.items():
            if value is not None:
                pypi_config[key] = value
        config["pypi"] = pypi_config
        return config
