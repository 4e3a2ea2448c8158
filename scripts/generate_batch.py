#!/usr/bin/env python3
"""
Generate a batch of layouts locally.

Usage:
    python scripts/generate_batch.py --num-layouts 10 --asset-dir assets/ --output-dir data
"""

import argparse
import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from scatter_layout.layout import LayoutConfig
from scatter_layout.pipeline import Pipeline, PipelineConfig
from scatter_layout.utils.config import load_config
from scatter_layout.utils.paths import PathManager
from scatter_layout.utils.logging import setup_logging, get_logger

logger = get_logger(__name__)


def main():
    parser = argparse.ArgumentParser(description="Generate batch of asset layouts")
    parser.add_argument("--num-layouts", type=int, default=None, help="Number of layouts to generate")
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
    parser.add_argument(
        "--log-level", type=str, default="INFO", help="Log level (DEBUG, INFO, WARNING, ERROR)"
    )
    parser.add_argument(
        "--start-id", type=int, default=0, help="Starting layout ID"
    )
    args = parser.parse_args()

    # Load configurations
    pipeline_config = PipelineConfig.from_dict(
        load_config(
            args.config_dir,
            "pipeline",
            overrides={
                "assets": {"dir": str(args.asset_dir) if args.asset_dir else None},
                "dataset": {"num_layouts": args.num_layouts},
            },
        )
    )

    # Setup logging
    paths = PathManager(args.output_dir, pipeline_config.paths)
    setup_logging(level=args.log_level, log_file=paths.get_batch_log_path())

    layout_config = LayoutConfig.from_dict(load_config(args.config_dir, "layout"))
    num_layouts = pipeline_config.num_layouts

    logger.info(f"Starting batch generation: {num_layouts} layouts")

    pipeline = Pipeline(
        layout_config=layout_config,
        pipeline_config=pipeline_config,
        base_dir=args.output_dir,
    )

    success_count = 0
    failed_layouts = []

    for i in range(num_layouts):
        layout_id = args.start_id + i

        logger.info(f"Generating layout {layout_id} ({i+1}/{num_layouts})")

        output_path = pipeline.generate_sample(layout_id)

        if output_path:
            success_count += 1
        else:
            failed_layouts.append(layout_id)

    # Summary
    logger.info("=" * 60)
    logger.info("Batch generation complete")
    logger.info(f"  Success: {success_count}/{num_layouts}")
    logger.info(f"  Failed: {len(failed_layouts)}")
    if failed_layouts:
        logger.info(f"  Failed layout IDs: {failed_layouts}")
    logger.info("=" * 60)

    # Exit code based on success rate
    if success_count == num_layouts:
        sys.exit(0)
    elif success_count > 0:
        sys.exit(2)  # Partial success
    else:
        sys.exit(1)  # Total failure


if __name__ == "__main__":
    main()
