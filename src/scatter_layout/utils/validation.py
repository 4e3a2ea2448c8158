"""
Validation of asset files and layout results.
"""

from pathlib import Path
from typing import Sequence
import json
import logging
import math

from PIL import Image, UnidentifiedImageError

from scatter_layout.validator import BoundsPolicy

logger = logging.getLogger(__name__)

# Absorbs float rounding when re-checking distances computed elsewhere
DISTANCE_TOLERANCE = 1e-9


def validate_asset_file(file_path: Path) -> bool:
    """
    Validate an image asset.

    Args:
        file_path: Path to image file

    Returns:
        True if the file is a readable image with non-zero size
    """
    file_path = Path(file_path)

    if not file_path.exists():
        logger.error(f"Asset file does not exist: {file_path}")
        return False

    if file_path.stat().st_size == 0:
        logger.error(f"Asset file is empty: {file_path}")
        return False

    try:
        with Image.open(file_path) as img:
            width, height = img.size
    except (OSError, UnidentifiedImageError) as e:
        logger.error(f"Error reading asset {file_path}: {e}")
        return False

    if width <= 0 or height <= 0:
        logger.error(f"Asset has degenerate size {width}x{height}: {file_path}")
        return False

    logger.debug(f"Asset validated: {file_path} ({width}x{height})")
    return True


def validate_layout(samples: Sequence, request) -> bool:
    """
    Check spacing, bounds and uniqueness of a layout result.

    Args:
        samples: Samples returned by generate_layout
        request: The LayoutRequest that produced them

    Returns:
        True if every invariant holds
    """
    ok = True
    policy = BoundsPolicy.parse(request.bounds_policy)

    for i, sample in enumerate(samples):
        r = sample.asset.effective_radius
        if policy is BoundsPolicy.CONTAIN:
            inside = r <= sample.x < request.canvas_width - r and r <= sample.y < request.canvas_height - r
        else:
            inside = 0 <= sample.x < request.canvas_width and 0 <= sample.y < request.canvas_height
        if not inside:
            logger.error(f"Sample {i} at ({sample.x:.1f}, {sample.y:.1f}) is out of bounds")
            ok = False

    for i in range(len(samples)):
        a = samples[i]
        for j in range(i + 1, len(samples)):
            b = samples[j]
            required = a.asset.effective_radius + b.asset.effective_radius + request.gap
            distance = math.hypot(a.x - b.x, a.y - b.y)
            if distance + DISTANCE_TOLERANCE < required:
                logger.error(
                    f"Samples {i} and {j} too close: {distance:.2f}px < {required:.2f}px"
                )
                ok = False

    if request.unique_only:
        seen = set()
        for i, sample in enumerate(samples):
            if id(sample.asset) in seen:
                logger.error(f"Sample {i} repeats an asset in unique-only mode")
                ok = False
            seen.add(id(sample.asset))

    if not request.unique_only and len(samples) > request.target_count:
        logger.error(f"Layout has {len(samples)} samples, more than target {request.target_count}")
        ok = False

    if ok:
        logger.debug(f"Layout validated: {len(samples)} samples")
    return ok


def validate_layout_file(file_path: Path) -> bool:
    """
    Validate an exported layout JSON file.

    Args:
        file_path: Path to .json layout

    Returns:
        True if the file parses and has the expected keys
    """
    file_path = Path(file_path)

    if not file_path.exists():
        logger.error(f"Layout file does not exist: {file_path}")
        return False

    try:
        with open(file_path, "r") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        logger.error(f"Error reading layout file {file_path}: {e}")
        return False

    missing_keys = [key for key in ("canvas", "gap", "placements") if key not in data]
    if missing_keys:
        logger.error(f"Layout file missing keys {missing_keys}: {file_path}")
        return False

    for placement in data["placements"]:
        if not {"x", "y", "asset"} <= placement.keys():
            logger.error(f"Layout file has malformed placement {placement}: {file_path}")
            return False

    logger.debug(f"Layout file validated: {file_path} ({len(data['placements'])} placements)")
    return True
