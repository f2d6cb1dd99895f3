"""Text-rendering collaborator interfaces for legend labels."""

from .renderer import LabelDrawBatch, LabelDrawCommand, LabelMeasureRequest, LabelMetrics, LabelRenderer

__all__ = [
    "LabelDrawBatch",
    "LabelDrawCommand",
    "LabelMeasureRequest",
    "LabelMetrics",
    "LabelRenderer",
]
