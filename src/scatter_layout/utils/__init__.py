"""
Utility modules for layout generation.
"""

from scatter_layout.utils.config import load_config, merge_config, ConfigLoader
from scatter_layout.utils.logging import setup_logging, get_logger
from scatter_layout.utils.paths import PathManager
from scatter_layout.utils.validation import validate_asset_file, validate_layout, validate_layout_file

__all__ = [
    "load_config",
    "merge_config",
    "ConfigLoader",
    "setup_logging",
    "get_logger",
    "PathManager",
    "validate_asset_file",
    "validate_layout",
    "validate_layout_file",
]
