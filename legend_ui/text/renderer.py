from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True)
class LabelMeasureRequest:
    text: str
    font_family: str
    font_size_px: float


@dataclass(frozen=True)
class LabelMetrics:
    """Extent of one rendered legend label."""

    width_px: float
    height_px: float

    def __post_init__(self) -> None:
        if self.width_px < 0 or self.height_px < 0:
            raise ValueError("label metrics must be >= 0")


@dataclass(frozen=True)
class LabelDrawCommand:
    item_key: str
    text: str
    x: float
    y: float
    frame: str
    font_family: str
    font_size_px: float
    color: str
    class_name: str = "legend-item-text"


@dataclass(frozen=True)
class LabelDrawBatch:
    commands: tuple[LabelDrawCommand, ...]


class LabelRenderer(Protocol):
    """Text collaborator: sizes legend labels and paints them in one batch."""

    def measure_label(self, request: LabelMeasureRequest) -> LabelMetrics:
        ...

    def draw_label_batch(self, batch: LabelDrawBatch) -> None:
        ...
