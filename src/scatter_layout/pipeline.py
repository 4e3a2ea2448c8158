"""
Pipeline orchestration - coordinates asset loading, layout and export.
"""

from pathlib import Path
from dataclasses import dataclass, field
from typing import List, Optional
import logging

from scatter_layout.assets import AssetSource, find_image_files, load_image_assets
from scatter_layout.exporter import LayoutExporter
from scatter_layout.layout import LayoutConfig, LayoutPlacer, summarize_layout
from scatter_layout.utils.paths import PathManager
from scatter_layout.utils.validation import validate_layout, validate_layout_file

logger = logging.getLogger(__name__)


@dataclass
class PipelineConfig:
    """High-level pipeline configuration."""

    asset_dir: Path
    num_layouts: int
    base_seed: Optional[int]
    auto_increment: bool
    paths: dict
    validation: dict = field(default_factory=dict)
    cleanup: dict = field(default_factory=dict)

    @classmethod
    def from_dict(cls, config: dict) -> "PipelineConfig":
        """Create config from dictionary."""
        return cls(
            asset_dir=Path(config["assets"]["dir"]),
            num_layouts=config["dataset"]["num_layouts"],
            base_seed=config["seed"]["base"],
            auto_increment=config["seed"]["auto_increment"],
            paths=config.get("paths", {}),
            validation=config.get("validation", {}),
            cleanup=config.get("cleanup", {}),
        )


class Pipeline:
    """
    Orchestrate layout generation for an asset directory.
    """

    def __init__(
        self,
        layout_config: LayoutConfig,
        pipeline_config: PipelineConfig,
        base_dir: Path,
    ):
        """
        Initialize pipeline.

        Args:
            layout_config: Layout engine configuration
            pipeline_config: Pipeline configuration
            base_dir: Base directory for all output
        """
        self.layout_config = layout_config
        self.pipeline_config = pipeline_config

        self.paths = PathManager(base_dir, pipeline_config.paths)

        self.placer = LayoutPlacer(layout_config)
        self.exporter = LayoutExporter()
        self._sources: Optional[List[AssetSource]] = None

        logger.info("Pipeline initialized")

    @property
    def sources(self) -> List[AssetSource]:
        """Assets from the configured directory, loaded on first use."""
        if self._sources is None:
            image_files = find_image_files(self.pipeline_config.asset_dir)
            self._sources = load_image_assets(image_files)
        return self._sources

    def generate_sample(self, sample_id: int) -> Optional[Path]:
        """
        Generate and export a single layout.

        Args:
            sample_id: Layout ID

        Returns:
            Path to exported layout file (or None if failed)
        """
        logger.info("=" * 60)
        logger.info(f"Generating layout {sample_id}")
        logger.info("=" * 60)

        layout_path = self.paths.get_layout_path(sample_id)

        try:
            if not self.sources:
                raise RuntimeError(f"No usable assets in {self.pipeline_config.asset_dir}")

            self.placer.config.seed = self._get_seed(sample_id)

            # Step 1: Place assets
            logger.info("Step 1: Generating placements...")
            request, samples = self.placer.generate_placements(self.sources)

            # Step 2: Check invariants
            if self.pipeline_config.validation.get("check_layout", True):
                logger.info("Step 2: Validating layout...")
                if not validate_layout(samples, request):
                    raise RuntimeError(f"Layout validation failed for sample {sample_id}")

            summary = summarize_layout(samples, request)
            if not summary.complete:
                min_rate = self.pipeline_config.validation.get("min_success_rate", 0.0)
                message = (
                    f"Layout {sample_id} placed {summary.placed}/{summary.target_count} "
                    f"({summary.success_rate:.0%} of target)"
                )
                if summary.success_rate < min_rate:
                    logger.warning(f"{message}, below minimum success rate {min_rate:.0%}")
                else:
                    logger.info(message)

            # Step 3: Export
            logger.info("Step 3: Exporting layout...")
            self.exporter.export(samples, request, layout_path)

            if self.pipeline_config.validation.get("check_files", True):
                if not validate_layout_file(layout_path):
                    raise RuntimeError(f"Exported layout validation failed: {layout_path}")

            logger.info(f"Layout {sample_id} complete: {layout_path}")
            return layout_path

        except Exception as e:
            logger.error(f"Layout {sample_id} failed: {e}", exc_info=True)

            if not self.pipeline_config.cleanup.get("keep_on_failure", True):
                self.paths.cleanup_sample(sample_id)

            return None

    def generate_batch(self, num_layouts: Optional[int] = None, start_id: int = 0) -> List[Path]:
        """Generate several layouts; failed ones are logged and skipped."""
        if num_layouts is None:
            num_layouts = self.pipeline_config.num_layouts

        outputs = []
        for i in range(num_layouts):
            output_path = self.generate_sample(start_id + i)
            if output_path is not None:
                outputs.append(output_path)

        logger.info(f"Batch complete: {len(outputs)}/{num_layouts} layouts succeeded")
        return outputs

    def _get_seed(self, sample_id: int) -> Optional[int]:
        """Get seed for this layout."""
        if self.pipeline_config.base_seed is None:
            return None
        if self.pipeline_config.auto_increment:
            return self.pipeline_config.base_seed + sample_id
        return self.pipeline_config.base_seed
