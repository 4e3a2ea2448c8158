"""
Scatter Layout

Asset-aware Poisson-disk layout engine: places variably-sized image
assets on a canvas with a minimum gap and a natural, non-grid spread.
"""

__version__ = "0.1.0"

# Lazy imports keep `import scatter_layout` cheap for scripts that only
# need a single module
__all__ = [
    "__version__",
    "AssetSource",
    "AssetDescriptor",
    "build_asset_pool",
    "BoundsPolicy",
    "Sample",
    "LayoutRequest",
    "LayoutConfig",
    "LayoutPlacer",
    "generate_layout",
    "LayoutExporter",
    "Pipeline",
    "PipelineConfig",
]

_LAZY_IMPORTS = {
    "AssetSource": "scatter_layout.assets",
    "AssetDescriptor": "scatter_layout.assets",
    "build_asset_pool": "scatter_layout.assets",
    "BoundsPolicy": "scatter_layout.validator",
    "Sample": "scatter_layout.sampling",
    "LayoutRequest": "scatter_layout.layout",
    "LayoutConfig": "scatter_layout.layout",
    "LayoutPlacer": "scatter_layout.layout",
    "generate_layout": "scatter_layout.layout",
    "LayoutExporter": "scatter_layout.exporter",
    "Pipeline": "scatter_layout.pipeline",
    "PipelineConfig": "scatter_layout.pipeline",
}


def __getattr__(name):
    """Lazy import to avoid loading all dependencies at once."""
    if name in _LAZY_IMPORTS:
        import importlib

        module = importlib.import_module(_LAZY_IMPORTS[name])
        return getattr(module, name)
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")
