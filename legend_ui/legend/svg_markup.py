from __future__ import annotations

import xml.etree.ElementTree as ET

from .composer import IconSurface, LegendItem
from .icons import IconShape, LineIcon, PathIcon, SymbolIcon
from .symbols import format_number

SVG_NAMESPACE = "http://www.w3.org/2000/svg"
ICON_CLASS = "legend-icon"


def icon_svg_markup(item: LegendItem) -> str:
    """Serialize an item's icon surface as a standalone `<svg>` document."""

    root = ET.Element(
        "svg",
        {
            "xmlns": SVG_NAMESPACE,
            "width": format_number(item.surface.width),
            "height": format_number(item.surface.height),
            "viewBox": item.surface.view_box.as_attribute(),
            "style": surface_style(item.surface),
        },
    )
    root.append(_shape_element(item.icon.shape))
    return ET.tostring(root, encoding="unicode")


def surface_style(surface: IconSurface) -> str:
    declarations = [
        f"display: {surface.display}",
        f"vertical-align: {surface.vertical_align}",
        f"margin-right: {format_number(surface.margin_right)}px",
        f"transition: {surface.transition}",
    ]
    if surface.filter:
        declarations.append(f"filter: {surface.filter}")
    return "; ".join(declarations)


def _shape_element(shape: IconShape) -> ET.Element:
    if isinstance(shape, LineIcon):
        attrs = {
            "class": ICON_CLASS,
            "x1": format_number(shape.x1),
            "y1": format_number(shape.y1),
            "x2": format_number(shape.x2),
            "y2": format_number(shape.y2),
            "stroke-width": format_number(shape.stroke_width),
            "fill": shape.fill,
        }
        _set_optional(attrs, "stroke", shape.stroke)
        _set_optional(attrs, "stroke-dasharray", shape.stroke_dasharray)
        return ET.Element("line", attrs)
    if isinstance(shape, PathIcon):
        attrs = {"class": ICON_CLASS, "d": shape.d}
        _set_optional(attrs, "fill", shape.fill)
        _set_optional(attrs, "stroke", shape.stroke)
        if shape.stroke_width is not None:
            attrs["stroke-width"] = format_number(shape.stroke_width)
        return ET.Element("path", attrs)
    if isinstance(shape, SymbolIcon):
        attrs = {
            "class": f"legend-symbol legend-symbol-{shape.symbol_type}",
            "transform": shape.transform,
            "d": shape.path_data(),
        }
        _set_optional(attrs, "fill", shape.fill)
        return ET.Element("path", attrs)
    raise TypeError(f"unsupported icon shape: {type(shape).__name__}")


def _set_optional(attrs: dict[str, str], name: str, value: str | None) -> None:
    # a missing colour leaves the attribute off rather than writing "None"
    if value is not None:
        attrs[name] = value
