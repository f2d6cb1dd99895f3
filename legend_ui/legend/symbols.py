from __future__ import annotations

import math
from typing import Callable, Literal

import numpy as np


SizeType = Literal["area", "diameter"]

SYMBOL_TYPES: tuple[str, ...] = ("circle", "cross", "diamond", "square", "star", "triangle", "wye")

_SQRT3 = math.sqrt(3.0)
_TAN30 = math.sqrt(1.0 / 3.0)
_STAR_KA = 0.89081309152928522810
_STAR_KR = math.sin(math.pi / 10.0) / math.sin(7.0 * math.pi / 10.0)
_STAR_KX = math.sin(2.0 * math.pi / 10.0) * _STAR_KR
_STAR_KY = -math.cos(2.0 * math.pi / 10.0) * _STAR_KR
_WYE_K = 1.0 / math.sqrt(12.0)
_WYE_A = (_WYE_K / 2.0 + 1.0) * 3.0


def format_number(value: float) -> str:
    """Shortest round-trip text for a path coordinate; integers drop the `.0`."""

    number = float(value)
    if number == 0.0:
        return "0"
    if number.is_integer():
        return str(int(number))
    return repr(number)


def symbol_area(symbol_type: str, size: float, size_type: SizeType = "diameter") -> float:
    """Convert a symbol size to the area the path builders expect.

    With `size_type="diameter"` each shape gets the area that makes its visual
    extent match `size`; `"area"` passes the value through.
    """

    if size_type == "area":
        return float(size)
    s2 = float(size) * float(size)
    if symbol_type == "cross":
        return 5.0 * s2 / 9.0
    if symbol_type == "diamond":
        return 0.5 * s2 / _SQRT3
    if symbol_type == "square":
        return s2
    if symbol_type == "star":
        angle = math.radians(18.0)
        return 1.25 * s2 * (math.tan(angle) - math.tan(angle * 2.0) * math.tan(angle) ** 2)
    if symbol_type == "triangle":
        return _SQRT3 * s2 / 4.0
    if symbol_type == "wye":
        return (21.0 - 10.0 * _SQRT3) * s2 / 8.0
    return math.pi * s2 / 4.0


def symbol_path(symbol_type: str, size: float, size_type: SizeType = "area") -> str:
    """Return SVG path data for a symbol centred on the origin.

    Unknown symbol types draw a circle.
    """

    area = max(0.0, symbol_area(symbol_type, size, size_type))
    if symbol_type == "square":
        return _square_path(area)
    builder = _POLYGON_BUILDERS.get(symbol_type)
    if builder is None:
        return _circle_path(area)
    return _polygon_path(builder(area))


def _rotate(points: np.ndarray, angle: float) -> np.ndarray:
    c = math.cos(angle)
    s = math.sin(angle)
    rotation = np.array([[c, -s], [s, c]], dtype=np.float64)
    return points @ rotation.T


def _cross_vertices(area: float) -> np.ndarray:
    r = math.sqrt(area / 5.0) / 2.0
    unit = np.array(
        [
            (-3, -1), (-1, -1), (-1, -3), (1, -3), (1, -1), (3, -1),
            (3, 1), (1, 1), (1, 3), (-1, 3), (-1, 1), (-3, 1),
        ],
        dtype=np.float64,
    )
    return unit * r


def _diamond_vertices(area: float) -> np.ndarray:
    y = math.sqrt(area / (_TAN30 * 2.0))
    x = y * _TAN30
    return np.array([(0.0, -y), (x, 0.0), (0.0, y), (-x, 0.0)], dtype=np.float64)


def _star_vertices(area: float) -> np.ndarray:
    r = math.sqrt(area * _STAR_KA)
    spike = np.array([(0.0, -r), (_STAR_KX * r, _STAR_KY * r)], dtype=np.float64)
    return np.concatenate([_rotate(spike, 2.0 * math.pi * i / 5.0) for i in range(5)])


def _triangle_vertices(area: float) -> np.ndarray:
    y = -math.sqrt(area / (_SQRT3 * 3.0))
    return np.array([(0.0, y * 2.0), (-_SQRT3 * y, -y), (_SQRT3 * y, -y)], dtype=np.float64)


def _wye_vertices(area: float) -> np.ndarray:
    r = math.sqrt(area / _WYE_A)
    x0 = r / 2.0
    y0 = r * _WYE_K
    y1 = y0 + r
    arm = np.array([(x0, y0), (x0, y1), (-x0, y1)], dtype=np.float64)
    return np.concatenate([_rotate(arm, 2.0 * math.pi * i / 3.0) for i in range(3)])


_POLYGON_BUILDERS: dict[str, Callable[[float], np.ndarray]] = {
    "cross": _cross_vertices,
    "diamond": _diamond_vertices,
    "star": _star_vertices,
    "triangle": _triangle_vertices,
    "wye": _wye_vertices,
}


def _polygon_path(vertices: np.ndarray) -> str:
    # round away float noise from the rotations so mirrored vertices print identically
    cleaned = np.round(vertices, 10) + 0.0
    parts = [f"{format_number(x)},{format_number(y)}" for x, y in cleaned.tolist()]
    return "M" + "L".join(parts) + "Z"


def _square_path(area: float) -> str:
    w = math.sqrt(area)
    x = -w / 2.0
    return f"M{format_number(x)},{format_number(x)}h{format_number(w)}v{format_number(w)}h{format_number(-w)}Z"


def _circle_path(area: float) -> str:
    r = format_number(math.sqrt(area / math.pi))
    neg = format_number(-math.sqrt(area / math.pi))
    return f"M{r},0A{r},{r},0,1,1,{neg},0A{r},{r},0,1,1,{r},0"
