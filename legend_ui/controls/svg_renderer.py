from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True)
class IconDrawCommand:
    """One legend icon surface, placed at its layout box.

    The surface is the icon plus its glow margin; `svg_markup` already carries
    the matching view box, so backends draw it at exactly `width` x `height`.
    """

    item_key: str
    svg_markup: str
    x: float
    y: float
    width: float
    height: float
    frame: str

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("icon surface width/height must be > 0")


@dataclass(frozen=True)
class IconDrawBatch:
    commands: tuple[IconDrawCommand, ...]


class IconSurfaceRenderer(Protocol):
    """Drawing surface that paints every legend icon of a pass in one call."""

    def draw_icon_batch(self, batch: IconDrawBatch) -> None:
        ...
