"""
Path management utilities.
"""

from pathlib import Path
from typing import Dict


class PathManager:
    """Manage output paths for layout runs."""

    def __init__(self, base_dir: Path, paths_config: Dict[str, str]):
        """
        Initialize path manager.

        Args:
            base_dir: Base directory for all output (typically data/)
            paths_config: Dictionary of path configurations from pipeline.yaml
        """
        self.base_dir = Path(base_dir)
        self.paths_config = paths_config

        self.layouts_dir = self.base_dir / paths_config.get("layouts", "layouts")
        self.logs_dir = self.base_dir / paths_config.get("logs", "logs")

        self._create_directories()

    def _create_directories(self):
        """Create all required directories."""
        for dir_path in [self.layouts_dir, self.logs_dir]:
            dir_path.mkdir(parents=True, exist_ok=True)

    def get_layout_path(self, sample_id: int, format: str = "json") -> Path:
        """Get path for an exported layout."""
        return self.layouts_dir / f"layout_{sample_id:06d}.{format}"

    def get_log_path(self, sample_id: int) -> Path:
        """Get path for a per-layout log file."""
        return self.logs_dir / f"layout_{sample_id:06d}.log"

    def get_batch_log_path(self) -> Path:
        return self.logs_dir / "batch_generation.log"

    def cleanup_sample(self, sample_id: int, format: str = "json"):
        """Remove the exported layout for a sample, if present."""
        layout_path = self.get_layout_path(sample_id, format)
        if layout_path.exists():
            layout_path.unlink()
