"""Map XFL XML documents onto immutable records."""

import xml.etree.ElementTree as ET
from typing import Iterator

from ..constants import DEFAULT_FRAME_RATE
from ..errors import DocumentError
from .document import Document, SymbolInclude
from .edges import parse_edge_definition
from .shape import Edge, FillStyle, Shape, SolidColor, StrokeStyle
from .timeline import Frame, Layer, Symbol

XmlSource = bytes | str


def load_document(data: XmlSource) -> Document:
    """
    Load the records of a ``DOMDocument.xml`` file.

    Args:
        data: Raw XML content

    Returns:
        Document with its symbol includes in declaration order

    Raises:
        DocumentError: If the XML is malformed or the root is not DOMDocument
    """
    root = _parse_root(data, "DOMDocument")
    frame_rate = _float_attr(root, "frameRate")
    return Document(
        width=_int_attr(root, "width") or 550,
        height=_int_attr(root, "height") or 400,
        frame_rate=frame_rate if frame_rate is not None else DEFAULT_FRAME_RATE,
        background_color=root.get("backgroundColor", "#FFFFFF"),
        includes=tuple(
            SymbolInclude(href=_required_attr(include, "href"), item_id=include.get("itemID"))
            for include in _children(_child(root, "symbols"), "Include")
        ),
    )


def load_symbol(data: XmlSource) -> Symbol:
    """
    Load a ``DOMSymbolItem`` from a library XML file.

    Raises:
        DocumentError: If the XML is malformed or an attribute has the wrong type
        EdgeParseError: If an edge definition string is malformed
    """
    root = _parse_root(data, "DOMSymbolItem")
    timeline = _child(_child(root, "timeline"), "DOMTimeline")
    return Symbol(
        name=_required_attr(root, "name"),
        item_id=root.get("itemID"),
        layers=tuple(_load_layer(el) for el in _children(_child(timeline, "layers"), "DOMLayer")),
    )


def _load_layer(element: ET.Element) -> Layer:
    return Layer(
        name=element.get("name", ""),
        frames=tuple(_load_frame(el) for el in _children(_child(element, "frames"), "DOMFrame")),
    )


def _load_frame(element: ET.Element) -> Frame:
    return Frame(
        index=_int_attr(element, "index") or 0,
        shapes=tuple(
            _load_shape(el) for el in _children(_child(element, "elements"), "DOMShape")
        ),
    )


def _load_shape(element: ET.Element) -> Shape:
    return Shape(
        fill_styles=tuple(
            _load_fill_style(el) for el in _children(_child(element, "fills"), "FillStyle")
        ),
        stroke_styles=tuple(
            _load_stroke_style(el) for el in _children(_child(element, "strokes"), "StrokeStyle")
        ),
        edges=tuple(_load_edge(el) for el in _children(_child(element, "edges"), "Edge")),
    )


def _load_fill_style(element: ET.Element) -> FillStyle:
    return FillStyle(index=_int_attr(element, "index"), solid_color=_solid_color(element))


def _load_stroke_style(element: ET.Element) -> StrokeStyle:
    # The first child names the stroke kind: SolidStroke, DashedStroke, ...
    stroke = next(iter(element), None)
    if stroke is None:
        raise DocumentError("StrokeStyle has no stroke element")
    return StrokeStyle(
        index=_int_attr(element, "index"),
        kind=_local_name(stroke.tag),
        solid_color=_solid_color(_child(stroke, "fill")),
    )


def _load_edge(element: ET.Element) -> Edge:
    definition = element.get("edges")
    return Edge(
        commands=parse_edge_definition(definition) if definition else (),
        fill_style0=_int_attr(element, "fillStyle0"),
        fill_style1=_int_attr(element, "fillStyle1"),
        stroke_style=_int_attr(element, "strokeStyle"),
    )


def _solid_color(element: ET.Element | None) -> SolidColor | None:
    solid = _child(element, "SolidColor")
    if solid is None:
        return None
    return SolidColor(color=solid.get("color"))


def _parse_root(data: XmlSource, expected: str) -> ET.Element:
    try:
        root = ET.fromstring(data)
    except ET.ParseError as e:
        raise DocumentError(f"Invalid XML: {e}")
    if _local_name(root.tag) != expected:
        raise DocumentError(f"Expected <{expected}> root, found <{_local_name(root.tag)}>")
    return root


def _local_name(tag: str) -> str:
    """Strip the ``{namespace}`` prefix ElementTree puts on XFL tags."""
    return tag.rsplit("}", 1)[-1]


def _children(element: ET.Element | None, name: str) -> Iterator[ET.Element]:
    if element is None:
        return
    for child in element:
        if _local_name(child.tag) == name:
            yield child


def _child(element: ET.Element | None, name: str) -> ET.Element | None:
    return next(_children(element, name), None)


def _required_attr(element: ET.Element, name: str) -> str:
    value = element.get(name)
    if value is None:
        raise DocumentError(f"<{_local_name(element.tag)}> is missing attribute '{name}'")
    return value


def _int_attr(element: ET.Element, name: str) -> int | None:
    value = element.get(name)
    if value is None:
        return None
    try:
        return int(value)
    except ValueError:
        raise DocumentError(f"Attribute '{name}' is not an integer: {value!r}")


def _float_attr(element: ET.Element, name: str) -> float | None:
    value = element.get(name)
    if value is None:
        return None
    try:
        return float(value)
    except ValueError:
        raise DocumentError(f"Attribute '{name}' is not a number: {value!r}")
