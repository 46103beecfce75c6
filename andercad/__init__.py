"""Parametric CAD core: solids, undoable commands, sketches, features and documents."""

__version__ = "1.0.0"

__all__ = [
    "commands",
    "constraints",
    "document",
    "elements",
    "feature",
    "feature_manager",
    "features",
    "geometry",
    "live_preview",
    "shape",
    "sketch",
    "snapping",
    "transform",
]