"""Interaction contracts and drawing-surface protocol for legend UI."""

from .interaction import PointerEvent, PointerPhase, parse_pointer_event
from .svg_renderer import IconDrawBatch, IconDrawCommand, IconSurfaceRenderer

__all__ = [
    "IconDrawBatch",
    "IconDrawCommand",
    "IconSurfaceRenderer",
    "PointerEvent",
    "PointerPhase",
    "parse_pointer_event",
]
