"""
Export layout results for rendering collaborators.

The exported file is the engine's output contract: an ordered list of
placements (position plus asset reference) together with the canvas and
spacing it was generated for. Rotation/scale jitter is left to the
renderer and is not part of the file.
"""

from pathlib import Path
from typing import Optional, Sequence
import json
import logging

from scatter_layout.layout import LayoutRequest, summarize_layout
from scatter_layout.sampling import Sample

logger = logging.getLogger(__name__)


class LayoutExporter:
    """Write layouts as JSON."""

    def __init__(self, indent: Optional[int] = 2):
        self.indent = indent

    def to_dict(self, samples: Sequence[Sample], request: LayoutRequest) -> dict:
        """Serializable representation of a layout."""
        return {
            "canvas": {"width": request.canvas_width, "height": request.canvas_height},
            "gap": request.gap,
            "unique_only": request.unique_only,
            "bounds_policy": request.bounds_policy.value,
            "seed": request.seed,
            "placements": [
                {
                    "x": sample.x,
                    "y": sample.y,
                    "asset": str(sample.ref),
                    "base_width": sample.asset.base_width,
                    "base_height": sample.asset.base_height,
                    "radius": sample.asset.effective_radius,
                }
                for sample in samples
            ],
            "summary": summarize_layout(samples, request).to_dict(),
        }

    def export(self, samples: Sequence[Sample], request: LayoutRequest, output_path: Path) -> Path:
        """
        Write a layout to disk.

        Args:
            samples: Placements in acceptance order
            request: Request the placements were generated for
            output_path: Destination .json file

        Returns:
            Path to written file
        """
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)

        with open(output_path, "w") as f:
            json.dump(self.to_dict(samples, request), f, indent=self.indent)

        logger.info(f"Exported {len(samples)} placements to {output_path}")
        return output_path
