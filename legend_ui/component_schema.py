from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Protocol


DEFAULT_FRAME = "screen_tl"


class CoordinateTransformer(Protocol):
    def transform_point(
        self,
        point: tuple[float, float],
        from_frame: str | None = None,
        to_frame: str | None = None,
    ) -> tuple[float, float]:
        ...


@dataclass(frozen=True)
class CoordinatePoint:
    x: float
    y: float
    frame: str | None = None


@dataclass(frozen=True)
class BoundingBox:
    """Axis-aligned box of a legend item, icon or the whole legend."""

    x: float
    y: float
    width: float
    height: float
    frame: str | None = None

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError("BoundingBox width/height must be >= 0")

    def contains(self, x: float, y: float) -> bool:
        return self.x <= x <= self.x + self.width and self.y <= y <= self.y + self.height

    @classmethod
    def enclosing(cls, boxes: Iterable[BoundingBox], *, frame: str | None = None) -> BoundingBox:
        boxes = tuple(boxes)
        if not boxes:
            return cls(0.0, 0.0, 0.0, 0.0, frame)
        left = min(b.x for b in boxes)
        top = min(b.y for b in boxes)
        right = max(b.x + b.width for b in boxes)
        bottom = max(b.y + b.height for b in boxes)
        return cls(left, top, right - left, bottom - top, frame)


@dataclass
class ComponentBase:
    """Shared base for legend components placed in a named coordinate frame.

    Pointers arriving in another frame are mapped through a transformer before
    they are tested against the component's painted bounds.
    """

    component_id: str
    default_frame: str = DEFAULT_FRAME

    def visual_bounds(self) -> BoundingBox:
        raise NotImplementedError

    def resolve_point(
        self,
        point: CoordinatePoint,
        *,
        frame: str | None = None,
        transformer: CoordinateTransformer | None = None,
    ) -> tuple[float, float]:
        source = point.frame or self.default_frame
        target = frame or self.default_frame
        if source == target:
            return (point.x, point.y)
        if transformer is None:
            raise ValueError(f"cannot map pointer from frame `{source}` to `{target}` without transformer")
        return transformer.transform_point((point.x, point.y), from_frame=source, to_frame=target)

    def hit_test(
        self,
        point: CoordinatePoint,
        *,
        transformer: CoordinateTransformer | None = None,
    ) -> bool:
        bounds = self.visual_bounds()
        x, y = self.resolve_point(point, frame=bounds.frame, transformer=transformer)
        return bounds.contains(x, y)
