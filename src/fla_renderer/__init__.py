"""Parse FLA/XFL vector animations and render library symbols to raster frames."""

from .dom.edges import parse_edge_definition
from .errors import EdgeParseError, FlaError, RenderError
from .fla import Fla, LibraryEntry, OpaqueEntry, SymbolEntry
from .render.renderer import SymbolRenderer, render_symbol

__all__ = [
    "EdgeParseError",
    "Fla",
    "FlaError",
    "LibraryEntry",
    "OpaqueEntry",
    "RenderError",
    "SymbolEntry",
    "SymbolRenderer",
    "parse_edge_definition",
    "render_symbol",
]
