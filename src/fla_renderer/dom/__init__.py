"""Immutable records for XFL documents, symbols and edge definitions."""

from .document import Document, SymbolInclude
from .edges import (
    CurveTo,
    EdgeCommand,
    EdgeDefinitionLexer,
    LineTo,
    MoveTo,
    Selection,
    SelectionMask,
    parse_edge_definition,
)
from .shape import RGB, Edge, FillStyle, Shape, SolidColor, StrokeStyle
from .timeline import Frame, Layer, Symbol
from .xml_loader import load_document, load_symbol

__all__ = [
    "CurveTo",
    "Document",
    "Edge",
    "EdgeCommand",
    "EdgeDefinitionLexer",
    "FillStyle",
    "Frame",
    "Layer",
    "LineTo",
    "MoveTo",
    "RGB",
    "Selection",
    "SelectionMask",
    "Shape",
    "SolidColor",
    "StrokeStyle",
    "Symbol",
    "SymbolInclude",
    "load_document",
    "load_symbol",
    "parse_edge_definition",
]
