#!/usr/bin/env python3
"""
Generate a single layout from an asset directory.

Usage:
    python scripts/generate_layout.py --sample-id 0 --asset-dir assets/ --output-dir data
    python scripts/generate_layout.py --asset-dir assets/ --suggest
"""

import argparse
import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from scatter_layout.assets import find_image_files, load_image_assets
from scatter_layout.layout import LayoutConfig
from scatter_layout.pipeline import Pipeline, PipelineConfig
from scatter_layout.settings import (
    asset_size_for_level,
    density_label,
    gap_multiplier_label,
    optimal_settings,
    size_label,
)
from scatter_layout.utils.config import load_config
from scatter_layout.utils.paths import PathManager
from scatter_layout.utils.logging import setup_logging, get_logger

logger = get_logger(__name__)


def build_overrides(args) -> dict:
    """Nested config overrides from command line flags (None = keep file value)."""
    return {
        "canvas": {"width": args.width, "height": args.height},
        "spacing": {"gap": args.gap},
        "density": {
            "level": args.density,
            "unique_only": True if args.unique_only else None,
        },
        "seed": args.seed,
    }


def suggest(config_dir: Path, asset_dir: Path):
    """Print auto-tuned settings for the assets and configured canvas."""
    layout_dict = load_config(config_dir, "layout")
    sources = load_image_assets(find_image_files(asset_dir))
    if not sources:
        print(f"No usable assets in {asset_dir}")
        sys.exit(1)

    canvas = layout_dict["canvas"]
    settings = optimal_settings(canvas["width"], canvas["height"], sources)
    print(f"Density: {settings.density_level} ({density_label(settings.density_level)})")
    print(
        f"Asset size: {settings.size_level} ({size_label(settings.size_level)}, "
        f"{asset_size_for_level(settings.size_level):.0f}px)"
    )
    print(f"Gap: {settings.gap}px ({gap_multiplier_label(settings.gap)})")


def main():
    parser = argparse.ArgumentParser(description="Generate a single asset layout")
    parser.add_argument("--sample-id", type=int, default=0, help="Layout ID")
    parser.add_argument(
        "--config-dir",
        type=Path,
        default=Path(__file__).parent.parent / "config",
        help="Configuration directory",
    )
    parser.add_argument("--asset-dir", type=Path, default=None, help="Directory of asset images")
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=Path(__file__).parent.parent / "data",
        help="Output directory",
    )
    parser.add_argument("--width", type=int, default=None, help="Canvas width in pixels")
    parser.add_argument("--height", type=int, default=None, help="Canvas height in pixels")
    parser.add_argument("--gap", type=float, default=None, help="Gap between assets in pixels")
    parser.add_argument("--density", type=int, default=None, help="Density level (1-10)")
    parser.add_argument("--unique-only", action="store_true", help="Place each asset at most once")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--suggest", action="store_true", help="Print suggested settings and exit")
    parser.add_argument(
        "--log-level", type=str, default="INFO", help="Log level (DEBUG, INFO, WARNING, ERROR)"
    )
    args = parser.parse_args()

    pipeline_overrides = {"assets": {"dir": str(args.asset_dir) if args.asset_dir else None}}
    pipeline_config_dict = load_config(args.config_dir, "pipeline", overrides=pipeline_overrides)

    # Setup logging
    paths = PathManager(args.output_dir, pipeline_config_dict.get("paths", {}))
    setup_logging(level=args.log_level, log_file=paths.get_log_path(args.sample_id))

    if args.suggest:
        suggest(args.config_dir, Path(pipeline_config_dict["assets"]["dir"]))
        return

    # Load configurations
    layout_config_dict = load_config(args.config_dir, "layout", overrides=build_overrides(args))
    layout_config = LayoutConfig.from_dict(layout_config_dict)
    pipeline_config = PipelineConfig.from_dict(pipeline_config_dict)

    # A command line seed is used as-is for this layout
    if args.seed is not None:
        pipeline_config.base_seed = args.seed
        pipeline_config.auto_increment = False

    pipeline = Pipeline(
        layout_config=layout_config,
        pipeline_config=pipeline_config,
        base_dir=args.output_dir,
    )

    output_path = pipeline.generate_sample(args.sample_id)

    if output_path:
        print(f"Success: {output_path}")
        sys.exit(0)
    else:
        print(f"Failed to generate layout {args.sample_id}")
        sys.exit(1)


if __name__ == "__main__":
    main()
