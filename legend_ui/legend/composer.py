from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Any, Literal, Sequence

from legend_ui.style.theme import DEFAULT_THEME, LegendTheme

from .config import ItemEventCallback, LegendConfig
from .entry import LabelFormatter, LegendEntry
from .hover import HoverState, enter_hover, is_hovered, leave_hover
from .icons import IconGeometry, resolve_icon_color, resolve_icon_geometry
from .symbols import format_number


LOGGER = logging.getLogger(__name__)

ItemDisplay = Literal["inline-block", "block"]


@dataclass(frozen=True)
class ViewBox:
    x: float
    y: float
    width: float
    height: float

    def as_attribute(self) -> str:
        return " ".join(format_number(v) for v in (self.x, self.y, self.width, self.height))


@dataclass(frozen=True)
class IconSurface:
    """Allocated drawing area for one icon, padded so a glow is not clipped."""

    width: float
    height: float
    view_box: ViewBox
    display: str = "inline-block"
    vertical_align: str = "middle"
    margin_right: float = 4.0
    transition: str = "all ease .1s"
    filter: str | None = None


@dataclass(frozen=True)
class ItemStyle:
    display: ItemDisplay
    margin_right: float


@dataclass(frozen=True)
class InteractionBindings:
    """Enter/leave/click handlers of one legend item.

    Enter and leave return the next hover state for the owner to keep; each
    handler also forwards `(entry, index, event)` to the configured callback.
    """

    entry: LegendEntry
    index: int
    enter_callback: ItemEventCallback | None = None
    leave_callback: ItemEventCallback | None = None
    click_callback: ItemEventCallback | None = None

    def on_mouse_enter(self, event: Any = None) -> HoverState:
        if self.enter_callback is not None:
            self.enter_callback(self.entry, self.index, event)
        return enter_hover(None, self.entry)

    def on_mouse_leave(self, event: Any = None) -> HoverState:
        if self.leave_callback is not None:
            self.leave_callback(self.entry, self.index, event)
        return leave_hover(None, self.entry)

    def on_click(self, event: Any = None) -> None:
        if self.click_callback is not None:
            self.click_callback(self.entry, self.index, event)


@dataclass(frozen=True)
class LegendItem:
    key: str
    index: int
    entry_id: Any
    entry: LegendEntry
    icon: IconGeometry
    surface: IconSurface
    glow: str | None
    style: ItemStyle
    class_names: tuple[str, ...]
    bindings: InteractionBindings
    label: Any


@dataclass(frozen=True)
class LegendContent:
    items: tuple[LegendItem, ...]
    text_align: str
    padding: float = 0.0
    margin: float = 0.0
    class_name: str = "legend-default"


def glow_filter(color: str, blur_px: float = DEFAULT_THEME.glow_blur_px) -> str:
    return f"drop-shadow(0 0 {format_number(blur_px)}px {color})"


def resolve_formatter(entry: LegendEntry, config: LegendConfig) -> LabelFormatter | None:
    return entry.formatter or config.formatter


def compose_legend_items(
    payload: Sequence[LegendEntry] | None,
    hover: HoverState | None,
    config: LegendConfig,
    theme: LegendTheme = DEFAULT_THEME,
) -> tuple[LegendItem, ...]:
    if not payload:
        return ()
    offset = theme.icon_offset_px
    style = ItemStyle(
        display="inline-block" if config.layout == "horizontal" else "block",
        margin_right=theme.item_margin_right_px,
    )
    items: list[LegendItem] = []
    for i, entry in enumerate(payload):
        if entry.type == "none":
            continue

        formatter = resolve_formatter(entry, config)
        icon = resolve_icon_geometry(
            entry,
            config.icon_size,
            inactive_color=config.inactive_color,
            icon_type=config.icon_type,
        )

        glow = None
        if config.with_series_toggling and is_hovered(hover, entry):
            glow = glow_filter(resolve_icon_color(entry, config.inactive_color) or "currentColor", theme.glow_blur_px)

        surface = IconSurface(
            width=icon.width + offset,
            height=icon.height + offset,
            view_box=ViewBox(
                x=offset / -2,
                y=offset / -2,
                width=icon.width + offset,
                height=icon.height + offset,
            ),
            margin_right=theme.icon_margin_right_px,
            transition=theme.transition,
            filter=glow,
        )

        class_names = ("legend-item", f"legend-item-{i}")
        if entry.inactive:
            class_names += ("inactive",)

        items.append(
            LegendItem(
                key=f"legend-item-{i}",
                index=i,
                entry_id=entry.id if entry.id is not None else i,
                entry=entry,
                icon=icon,
                surface=surface,
                glow=glow,
                style=style,
                class_names=class_names,
                bindings=InteractionBindings(
                    entry=entry,
                    index=i,
                    enter_callback=config.on_mouse_enter,
                    leave_callback=config.on_mouse_leave,
                    click_callback=config.on_click,
                ),
                label=formatter(entry.value, entry, i) if formatter else entry.value,
            )
        )
    return tuple(items)


def compose_legend(
    payload: Sequence[LegendEntry] | None,
    hover: HoverState | None,
    config: LegendConfig,
    theme: LegendTheme = DEFAULT_THEME,
) -> LegendContent | None:
    """Compose the whole legend, or None when there is nothing to show."""

    if not payload:
        LOGGER.debug("legend payload is empty; rendering nothing")
        return None
    return LegendContent(
        items=compose_legend_items(payload, hover, config, theme),
        text_align=config.align if config.layout == "horizontal" else "left",
    )
