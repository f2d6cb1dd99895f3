from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Union

from .entry import LEGEND_TYPES, LegendEntry
from .symbols import SizeType, format_number, symbol_path


LOGGER = logging.getLogger(__name__)

DEFAULT_ICON_SIZE = 32
DEFAULT_INACTIVE_COLOR = "#ccc"
ICON_STROKE_WIDTH = 4
PLAINLINE_HEIGHT = 4


@dataclass(frozen=True)
class LineIcon:
    x1: float
    y1: float
    x2: float
    y2: float
    stroke: str | None
    stroke_width: float = ICON_STROKE_WIDTH
    stroke_dasharray: str | None = None
    fill: str = "none"


@dataclass(frozen=True)
class PathIcon:
    d: str
    fill: str | None
    stroke: str | None
    stroke_width: float | None = None


@dataclass(frozen=True)
class SymbolIcon:
    symbol_type: str
    cx: float
    cy: float
    size: float
    fill: str | None
    size_type: SizeType = "diameter"

    def path_data(self) -> str:
        return symbol_path(self.symbol_type, self.size, self.size_type)

    @property
    def transform(self) -> str:
        return f"translate({format_number(self.cx)}, {format_number(self.cy)})"


IconShape = Union[LineIcon, PathIcon, SymbolIcon]


@dataclass(frozen=True)
class IconGeometry:
    """Bounding box plus vector description of one legend glyph."""

    width: float
    height: float
    shape: IconShape


def resolve_icon_color(entry: LegendEntry, inactive_color: str = DEFAULT_INACTIVE_COLOR) -> str | None:
    return inactive_color if entry.inactive else entry.color


def resolve_icon_geometry(
    entry: LegendEntry,
    icon_size: float = DEFAULT_ICON_SIZE,
    *,
    inactive_color: str = DEFAULT_INACTIVE_COLOR,
    icon_type: str | None = None,
) -> IconGeometry:
    """Compute the glyph geometry for a legend entry.

    `plainline` is a flat stroke of fixed height, `line` is the looped line
    icon, `rect` keeps a 4:3 box, and every other type (known or not) becomes a
    point symbol sized by diameter. The entry type wins over `icon_type`, which
    only fills in for entries without one.
    """

    size = float(icon_size)
    half = size / 2
    sixth = size / 6
    third = size / 3
    color = resolve_icon_color(entry, inactive_color)
    kind = entry.type if entry.type is not None else icon_type

    if kind == "plainline":
        return IconGeometry(
            width=size,
            height=PLAINLINE_HEIGHT,
            shape=LineIcon(
                x1=0.0,
                y1=half,
                x2=size,
                y2=half,
                stroke=color,
                stroke_dasharray=entry.stroke_dasharray,
            ),
        )
    if kind == "line":
        h, t, s, tt = format_number(half), format_number(third), format_number(sixth), format_number(2 * third)
        d = (
            f"M0,{h}h{t}"
            f"A{s},{s},0,1,1,{tt},{h}"
            f"H{format_number(size)}M{tt},{h}"
            f"A{s},{s},0,1,1,{t},{h}"
        )
        return IconGeometry(
            width=size,
            height=size,
            shape=PathIcon(d=d, fill="none", stroke=color, stroke_width=ICON_STROKE_WIDTH),
        )
    if kind == "rect":
        rect_h = size * 3 / 4
        d = f"M0,0h{format_number(size)}v{format_number(rect_h)}h{format_number(-size)}z"
        return IconGeometry(width=size, height=rect_h, shape=PathIcon(d=d, fill=color, stroke="none"))

    symbol_type = str(kind) if kind is not None else "circle"
    if symbol_type not in LEGEND_TYPES:
        LOGGER.debug("unrecognized legend icon type %r; drawing generic symbol", kind)
    return IconGeometry(
        width=size,
        height=size,
        shape=SymbolIcon(symbol_type=symbol_type, cx=half, cy=half, size=size, fill=color),
    )
