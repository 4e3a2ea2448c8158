"""
Configuration loading and management.
"""

from pathlib import Path
from typing import Any, Dict, Optional
import yaml


class ConfigLoader:
    """Load YAML configuration files from a config directory."""

    def __init__(self, config_dir: Path):
        """
        Initialize config loader.

        Args:
            config_dir: Directory containing YAML config files
        """
        self.config_dir = Path(config_dir)
        if not self.config_dir.exists():
            raise FileNotFoundError(f"Config directory not found: {config_dir}")

    def load(self, config_name: str, overrides: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """
        Load a YAML configuration file.

        Args:
            config_name: Name of config file (without .yaml extension)
            overrides: Nested values applied on top of the file contents

        Returns:
            Dictionary containing configuration

        Raises:
            FileNotFoundError: If config file doesn't exist
            ValueError: If the file does not contain a mapping
            yaml.YAMLError: If config file is invalid
        """
        config_path = self.config_dir / f"{config_name}.yaml"

        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")

        with open(config_path, "r") as f:
            config = yaml.safe_load(f) or {}

        if not isinstance(config, dict):
            raise ValueError(f"Config file must contain a mapping: {config_path}")

        if overrides:
            config = merge_config(config, overrides)

        return config

    def load_all(self) -> Dict[str, Dict[str, Any]]:
        """
        Load all configuration files.

        Returns:
            Dictionary mapping config names to their contents
        """
        return {
            config_file.stem: self.load(config_file.stem)
            for config_file in sorted(self.config_dir.glob("*.yaml"))
        }


def merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """Recursively merge overrides into a copy of base. None values are skipped."""
    merged = dict(base)
    for key, value in overrides.items():
        if value is None:
            continue
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = merge_config(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_config(config_dir: Path, config_name: str, overrides: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """
    Convenience function to load a single config file.

    Args:
        config_dir: Directory containing config files
        config_name: Name of config file (without .yaml extension)
        overrides: Nested values applied on top of the file contents

    Returns:
        Dictionary containing configuration
    """
    loader = ConfigLoader(config_dir)
    return loader.load(config_name, overrides=overrides)
