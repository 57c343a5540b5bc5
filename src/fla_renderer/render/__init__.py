"""Path resolution and raster rendering of symbol timelines."""

from .canvas import Canvas, PillowCanvas
from .path import Path, PathBuilder, SubPath
from .renderer import SymbolRenderer, Transform, render_symbol
from .resolver import ResolvedEdge, StrokeSpec, build_edge_path, resolve_edge

__all__ = [
    "Canvas",
    "Path",
    "PathBuilder",
    "PillowCanvas",
    "ResolvedEdge",
    "StrokeSpec",
    "SubPath",
    "SymbolRenderer",
    "Transform",
    "build_edge_path",
    "render_symbol",
    "resolve_edge",
]
