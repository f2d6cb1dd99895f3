"""Chart legend rendering: icon geometry, item composition and hover emphasis."""

from .component_schema import BoundingBox, ComponentBase, CoordinatePoint, CoordinateTransformer
from .controls.interaction import PointerEvent, PointerPhase, parse_pointer_event
from .controls.svg_renderer import IconDrawBatch, IconDrawCommand, IconSurfaceRenderer
from .legend import (
    HoverState,
    IconGeometry,
    InteractionBindings,
    LegendComponent,
    LegendConfig,
    LegendContent,
    LegendEntry,
    LegendItem,
    compose_legend,
    compose_legend_items,
    enter_hover,
    icon_svg_markup,
    is_hovered,
    leave_hover,
    legend_config_from_mapping,
    legend_entry_from_dict,
    resolve_icon_geometry,
)
from .style.theme import DEFAULT_THEME, LegendTheme, validate_legend_theme
from .text.renderer import LabelDrawBatch, LabelDrawCommand, LabelMeasureRequest, LabelMetrics, LabelRenderer

__all__ = [
    "BoundingBox",
    "ComponentBase",
    "CoordinatePoint",
    "CoordinateTransformer",
    "DEFAULT_THEME",
    "HoverState",
    "IconDrawBatch",
    "IconDrawCommand",
    "IconGeometry",
    "IconSurfaceRenderer",
    "InteractionBindings",
    "LabelDrawBatch",
    "LabelDrawCommand",
    "LabelMeasureRequest",
    "LabelMetrics",
    "LabelRenderer",
    "LegendComponent",
    "LegendConfig",
    "LegendContent",
    "LegendEntry",
    "LegendItem",
    "LegendTheme",
    "PointerEvent",
    "PointerPhase",
    "compose_legend",
    "compose_legend_items",
    "enter_hover",
    "icon_svg_markup",
    "is_hovered",
    "leave_hover",
    "legend_config_from_mapping",
    "legend_entry_from_dict",
    "parse_pointer_event",
    "resolve_icon_geometry",
    "validate_legend_theme",
]
