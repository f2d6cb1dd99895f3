"""Legend icon geometry, item composition and hover handling."""

from .component import LegendComponent, LegendItemLayout
from .composer import (
    IconSurface,
    InteractionBindings,
    ItemStyle,
    LegendContent,
    LegendItem,
    ViewBox,
    compose_legend,
    compose_legend_items,
    glow_filter,
)
from .config import LegendConfig, legend_config_from_mapping
from .entry import ICON_TYPES, LEGEND_TYPES, LegendEntry, legend_entry_from_dict
from .hover import NO_HOVER, HoverState, enter_hover, is_hovered, leave_hover
from .icons import IconGeometry, LineIcon, PathIcon, SymbolIcon, resolve_icon_color, resolve_icon_geometry
from .svg_markup import icon_svg_markup
from .symbols import SYMBOL_TYPES, symbol_area, symbol_path

__all__ = [
    "HoverState",
    "ICON_TYPES",
    "IconGeometry",
    "IconSurface",
    "InteractionBindings",
    "ItemStyle",
    "LEGEND_TYPES",
    "LegendComponent",
    "LegendConfig",
    "LegendContent",
    "LegendEntry",
    "LegendItem",
    "LegendItemLayout",
    "LineIcon",
    "NO_HOVER",
    "PathIcon",
    "SYMBOL_TYPES",
    "SymbolIcon",
    "ViewBox",
    "compose_legend",
    "compose_legend_items",
    "enter_hover",
    "glow_filter",
    "icon_svg_markup",
    "is_hovered",
    "leave_hover",
    "legend_config_from_mapping",
    "legend_entry_from_dict",
    "resolve_icon_color",
    "resolve_icon_geometry",
    "symbol_area",
    "symbol_path",
]
