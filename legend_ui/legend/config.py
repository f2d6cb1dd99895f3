from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Callable, Literal, Mapping

from .entry import LabelFormatter, LegendEntry


LegendLayout = Literal["horizontal", "vertical"]
LegendAlign = Literal["center", "left", "right"]
LegendVerticalAlign = Literal["top", "bottom", "middle"]

ItemEventCallback = Callable[[LegendEntry, int, Any], object]

_LAYOUTS = ("horizontal", "vertical")
_ALIGNS = ("center", "left", "right")
_VERTICAL_ALIGNS = ("top", "bottom", "middle")

_CAMEL_CASE_OPTIONS: dict[str, str] = {
    "iconSize": "icon_size",
    "iconType": "icon_type",
    "verticalAlign": "vertical_align",
    "inactiveColor": "inactive_color",
    "onMouseEnter": "on_mouse_enter",
    "onMouseLeave": "on_mouse_leave",
    "onClick": "on_click",
    "withSeriesToggling": "with_series_toggling",
}


@dataclass(frozen=True)
class LegendConfig:
    icon_size: float = 14
    icon_type: str | None = None
    layout: LegendLayout = "horizontal"
    align: LegendAlign = "center"
    vertical_align: LegendVerticalAlign = "middle"
    inactive_color: str = "#ccc"
    formatter: LabelFormatter | None = None
    on_mouse_enter: ItemEventCallback | None = None
    on_mouse_leave: ItemEventCallback | None = None
    on_click: ItemEventCallback | None = None
    with_series_toggling: bool = False

    def __post_init__(self) -> None:
        if isinstance(self.icon_size, bool) or not isinstance(self.icon_size, (int, float)) or self.icon_size <= 0:
            raise ValueError("icon_size must be a positive number")
        if self.icon_type == "none":
            raise ValueError("icon_type must name a drawable icon, not `none`")
        if self.layout not in _LAYOUTS:
            raise ValueError(f"layout must be one of {_LAYOUTS}")
        if self.align not in _ALIGNS:
            raise ValueError(f"align must be one of {_ALIGNS}")
        if self.vertical_align not in _VERTICAL_ALIGNS:
            raise ValueError(f"vertical_align must be one of {_VERTICAL_ALIGNS}")
        if not isinstance(self.inactive_color, str) or not self.inactive_color.strip():
            raise ValueError("inactive_color must be a non-empty string")
        for name in ("formatter", "on_mouse_enter", "on_mouse_leave", "on_click"):
            value = getattr(self, name)
            if value is not None and not callable(value):
                raise ValueError(f"{name} must be callable")


def legend_config_from_mapping(options: Mapping[str, Any] | None = None) -> LegendConfig:
    """Build a config from chart props, accepting camelCase or snake_case names."""

    known = {f.name for f in fields(LegendConfig)}
    kwargs: dict[str, Any] = {}
    for key, value in (options or {}).items():
        name = _CAMEL_CASE_OPTIONS.get(key, key)
        if name not in known:
            raise ValueError(f"Unknown legend option: {key}")
        kwargs[name] = value
    return LegendConfig(**kwargs)
