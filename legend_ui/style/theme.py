from __future__ import annotations

from dataclasses import asdict, dataclass
import re
from typing import Any, Mapping

_HEX_COLOR = re.compile(r"^#([0-9a-fA-F]{3}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")


@dataclass(frozen=True)
class LegendTheme:
    """Visual tokens shared by every legend item."""

    icon_offset_px: float = 10.0
    item_margin_right_px: float = 10.0
    icon_margin_right_px: float = 4.0
    glow_blur_px: float = 3.0
    transition: str = "all ease .1s"
    text_color: str = "#333333"
    font_family: str = "System"
    font_size_px: float = 14.0


DEFAULT_THEME = LegendTheme()

_NON_NEGATIVE_TOKENS = (
    "icon_offset_px",
    "item_margin_right_px",
    "icon_margin_right_px",
    "glow_blur_px",
)


def validate_legend_theme(overrides: Mapping[str, Any] | None = None) -> LegendTheme:
    """Validate and merge user token overrides against the defaults."""

    raw: dict[str, Any] = asdict(DEFAULT_THEME)
    if overrides:
        for key, value in overrides.items():
            if key not in raw:
                raise ValueError(f"Unknown theme token: {key}")
            raw[key] = value

    for key in _NON_NEGATIVE_TOKENS:
        if isinstance(raw[key], bool) or not isinstance(raw[key], (int, float)) or float(raw[key]) < 0:
            raise ValueError(f"Token `{key}` must be a non-negative number")

    if not isinstance(raw["text_color"], str) or not _HEX_COLOR.match(raw["text_color"]):
        raise ValueError("Token `text_color` must be a hex color (#RGB, #RRGGBB or #RRGGBBAA)")

    if not isinstance(raw["transition"], str):
        raise ValueError("Token `transition` must be a string")

    if not isinstance(raw["font_family"], str) or not raw["font_family"].strip():
        raise ValueError("Token `font_family` must be a non-empty string")

    if not isinstance(raw["font_size_px"], (int, float)) or float(raw["font_size_px"]) <= 0:
        raise ValueError("Token `font_size_px` must be a positive number")

    return LegendTheme(
        icon_offset_px=float(raw["icon_offset_px"]),
        item_margin_right_px=float(raw["item_margin_right_px"]),
        icon_margin_right_px=float(raw["icon_margin_right_px"]),
        glow_blur_px=float(raw["glow_blur_px"]),
        transition=str(raw["transition"]),
        text_color=str(raw["text_color"]),
        font_family=str(raw["font_family"]),
        font_size_px=float(raw["font_size_px"]),
    )
