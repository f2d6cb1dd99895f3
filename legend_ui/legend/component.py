from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

from legend_ui.component_schema import BoundingBox, ComponentBase, CoordinatePoint, CoordinateTransformer
from legend_ui.controls.interaction import PointerEvent
from legend_ui.controls.svg_renderer import IconDrawBatch, IconDrawCommand, IconSurfaceRenderer
from legend_ui.style.theme import DEFAULT_THEME, LegendTheme
from legend_ui.text.renderer import LabelDrawBatch, LabelDrawCommand, LabelMeasureRequest, LabelRenderer

from .composer import LegendContent, LegendItem, compose_legend
from .config import LegendConfig
from .entry import LegendEntry
from .hover import NO_HOVER, HoverState, is_hovered, leave_hover
from .svg_markup import icon_svg_markup


@dataclass(frozen=True)
class LegendItemLayout:
    item: LegendItem
    bounds: BoundingBox
    icon_bounds: BoundingBox
    label_text: str
    label_x: float
    label_y: float


@dataclass
class LegendComponent(ComponentBase):
    """Legend component that owns hover state and draws through backend protocols.

    - Horizontal items share one row; the row is shifted by `align` when a
      container `width` is given. Vertical items stack left-aligned.
    - Items are recomposed on every layout, so hover changes show up on the
      next render.
    """

    payload: Sequence[LegendEntry] = ()
    config: LegendConfig = field(default_factory=LegendConfig)
    theme: LegendTheme = DEFAULT_THEME
    position: CoordinatePoint = field(default_factory=lambda: CoordinatePoint(0.0, 0.0, None))
    width: float | None = None
    hover: HoverState = NO_HOVER
    _layouts: tuple[LegendItemLayout, ...] = field(default=(), init=False, repr=False)
    _visual_bounds_cache: BoundingBox | None = field(default=None, init=False, repr=False)

    def _resolved_frame(self) -> str:
        return self.position.frame or self.default_frame

    def content(self) -> LegendContent | None:
        return compose_legend(self.payload, self.hover, self.config, self.theme)

    def layout(self, label_renderer: LabelRenderer) -> tuple[LegendItemLayout, ...]:
        frame = self._resolved_frame()
        content = self.content()
        if content is None:
            self._layouts = ()
            self._visual_bounds_cache = BoundingBox(self.position.x, self.position.y, 0.0, 0.0, frame)
            return self._layouts

        measured: list[tuple[LegendItem, str, float, float]] = []
        for item in content.items:
            text = "" if item.label is None else str(item.label)
            metrics = label_renderer.measure_label(
                LabelMeasureRequest(
                    text=text,
                    font_family=self.theme.font_family,
                    font_size_px=self.theme.font_size_px,
                )
            )
            measured.append((item, text, float(metrics.width_px), float(metrics.height_px)))

        vertical = self.config.layout == "vertical"
        row_w = 0.0
        for item, _, text_w, _ in measured:
            row_w += self._item_width(item, text_w)
        x = self.position.x
        if not vertical and self.width is not None:
            slack = max(0.0, self.width - row_w)
            if content.text_align == "center":
                x += slack / 2
            elif content.text_align == "right":
                x += slack
        y = self.position.y

        layouts: list[LegendItemLayout] = []
        for item, text, text_w, text_h in measured:
            item_h = max(item.surface.height, text_h)
            item_w = self._item_width(item, text_w)
            icon_y = y + (item_h - item.surface.height) / 2
            label_x = x + item.surface.width + item.surface.margin_right
            layouts.append(
                LegendItemLayout(
                    item=item,
                    bounds=BoundingBox(x, y, item_w, item_h, frame),
                    icon_bounds=BoundingBox(x, icon_y, item.surface.width, item.surface.height, frame),
                    label_text=text,
                    label_x=label_x,
                    label_y=y + (item_h - text_h) / 2,
                )
            )
            if vertical:
                y += item_h
            else:
                x += item_w

        self._layouts = tuple(layouts)
        self._visual_bounds_cache = BoundingBox.enclosing((lay.bounds for lay in layouts), frame=frame)
        return self._layouts

    def _item_width(self, item: LegendItem, text_w: float) -> float:
        return item.surface.width + item.surface.margin_right + text_w + item.style.margin_right

    def render(
        self,
        icon_renderer: IconSurfaceRenderer,
        label_renderer: LabelRenderer,
    ) -> tuple[IconDrawBatch, LabelDrawBatch]:
        layouts = self.layout(label_renderer)
        icon_batch = IconDrawBatch(
            commands=tuple(
                IconDrawCommand(
                    item_key=f"{self.component_id}:{lay.item.key}",
                    svg_markup=icon_svg_markup(lay.item),
                    x=lay.icon_bounds.x,
                    y=lay.icon_bounds.y,
                    width=lay.icon_bounds.width,
                    height=lay.icon_bounds.height,
                    frame=lay.icon_bounds.frame or self.default_frame,
                )
                for lay in layouts
            )
        )
        label_batch = LabelDrawBatch(
            commands=tuple(
                LabelDrawCommand(
                    item_key=f"{self.component_id}:{lay.item.key}",
                    text=lay.label_text,
                    x=lay.label_x,
                    y=lay.label_y,
                    frame=lay.bounds.frame or self.default_frame,
                    font_family=self.theme.font_family,
                    font_size_px=self.theme.font_size_px,
                    color=self.theme.text_color,
                )
                for lay in layouts
            )
        )
        if icon_batch.commands:
            icon_renderer.draw_icon_batch(icon_batch)
        if label_batch.commands:
            label_renderer.draw_label_batch(label_batch)
        return icon_batch, label_batch

    def visual_bounds(self) -> BoundingBox:
        if self._visual_bounds_cache is None:
            return BoundingBox(self.position.x, self.position.y, 0.0, 0.0, self._resolved_frame())
        return self._visual_bounds_cache

    def item_at(
        self,
        point: CoordinatePoint,
        *,
        transformer: CoordinateTransformer | None = None,
    ) -> LegendItemLayout | None:
        for lay in self._layouts:
            bx, by = self.resolve_point(point, frame=lay.bounds.frame, transformer=transformer)
            if lay.bounds.contains(bx, by):
                return lay
        return None

    def handle_pointer(
        self,
        event: PointerEvent,
        *,
        transformer: CoordinateTransformer | None = None,
    ) -> bool:
        """Route a pointer event to item bindings using the last layout.

        Returns True when the hover state changed or a click was dispatched.
        """

        previous = self._hovered_layout()
        if event.phase == "leave":
            if not self.hover.active:
                return False
            if previous is None:
                return self._set_hover(leave_hover(self.hover))
            return self._set_hover(previous.item.bindings.on_mouse_leave(event))

        target = self.item_at(CoordinatePoint(event.x, event.y, event.frame), transformer=transformer)
        changed = False
        if previous is None and self.hover.active:
            # hovered entry is no longer laid out
            changed = self._set_hover(leave_hover(self.hover))
        elif previous is not None and (target is None or target.item.key != previous.item.key):
            changed = self._set_hover(previous.item.bindings.on_mouse_leave(event))
        if target is not None and (previous is None or target.item.key != previous.item.key):
            changed = self._set_hover(target.item.bindings.on_mouse_enter(event)) or changed
        if event.phase == "up" and target is not None:
            target.item.bindings.on_click(event)
            changed = True
        return changed

    def _hovered_layout(self) -> LegendItemLayout | None:
        if not self.hover.active:
            return None
        for lay in self._layouts:
            if is_hovered(self.hover, lay.item.entry):
                return lay
        return None

    def _set_hover(self, hover: HoverState) -> bool:
        changed = hover != self.hover
        self.hover = hover
        return changed
