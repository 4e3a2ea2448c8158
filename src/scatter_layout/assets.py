"""
Asset loading and descriptor construction.

Descriptors carry the scaled size and collision radius of each asset
under the current max-size setting. They are rebuilt whenever that
setting changes and are referenced (not copied) by placed samples.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterable, List, Sequence
import logging

from PIL import Image, UnidentifiedImageError

logger = logging.getLogger(__name__)

IMAGE_EXTENSIONS = (".png", ".jpg", ".jpeg", ".gif", ".webp", ".bmp")


@dataclass(frozen=True)
class AssetSource:
    """A source image and its natural size in pixels."""

    ref: Any  # Path, name or any identity handle used by the renderer
    width: float
    height: float


@dataclass(frozen=True, eq=False)
class AssetDescriptor:
    """
    Placement-ready asset.

    Equality is identity: two descriptors built from identical images are
    still distinct assets in the pool.
    """

    source: AssetSource
    base_width: float
    base_height: float
    effective_radius: float = field(init=False)

    def __post_init__(self):
        object.__setattr__(
            self, "effective_radius", max(self.base_width, self.base_height) / 2
        )

    @property
    def ref(self) -> Any:
        return self.source.ref


def build_descriptor(source: AssetSource, max_size: float) -> AssetDescriptor:
    """
    Scale a source uniformly so its longer side equals max_size.

    Zero-width or zero-height sources are a precondition violation and
    must be filtered out by the caller.
    """
    ratio = min(max_size / source.width, max_size / source.height)
    return AssetDescriptor(
        source=source,
        base_width=source.width * ratio,
        base_height=source.height * ratio,
    )


def build_asset_pool(sources: Iterable[AssetSource], max_size: float) -> List[AssetDescriptor]:
    """
    Build the descriptor pool for a layout run.

    Args:
        sources: Raw assets with natural dimensions
        max_size: Global pixel budget for the longer side of each asset

    Returns:
        Descriptors in the same order as the sources
    """
    return [build_descriptor(source, max_size) for source in sources]


def max_effective_radius(pool: Sequence[AssetDescriptor]) -> float:
    """Largest collision radius in the pool."""
    return max(asset.effective_radius for asset in pool)


def load_image_assets(paths: Iterable[Path]) -> List[AssetSource]:
    """
    Read the natural size of each image file.

    Unreadable images and images with a zero dimension are skipped with a
    warning, so the result is always safe to hand to build_asset_pool.

    Args:
        paths: Image file paths

    Returns:
        List of AssetSource objects referencing the image paths
    """
    sources = []

    for path in paths:
        path = Path(path)
        try:
            with Image.open(path) as img:
                width, height = img.size
        except (OSError, UnidentifiedImageError) as e:
            logger.warning(f"Skipping unreadable asset {path}: {e}")
            continue

        if width <= 0 or height <= 0:
            logger.warning(f"Skipping asset with degenerate size {width}x{height}: {path}")
            continue

        sources.append(AssetSource(ref=path, width=float(width), height=float(height)))

    logger.info(f"Loaded {len(sources)} assets")
    return sources


def find_image_files(asset_dir: Path) -> List[Path]:
    """List image files in a directory, sorted by name."""
    asset_dir = Path(asset_dir)
    if not asset_dir.exists():
        raise FileNotFoundError(f"Asset directory not found: {asset_dir}")

    return sorted(
        p for p in asset_dir.iterdir()
        if p.is_file() and p.suffix.lower() in IMAGE_EXTENSIONS
    )
