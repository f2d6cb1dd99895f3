from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .entry import LegendEntry


@dataclass(frozen=True)
class HoverState:
    """The legend entry currently under the pointer, if any."""

    entry: LegendEntry | None = None

    @property
    def active(self) -> bool:
        return self.entry is not None

    @property
    def data_key(self) -> Any:
        return None if self.entry is None else self.entry.data_key


NO_HOVER = HoverState()


def enter_hover(state: HoverState | None, entry: LegendEntry) -> HoverState:
    _ = state
    return HoverState(entry=entry)


def leave_hover(state: HoverState | None, entry: LegendEntry | None = None) -> HoverState:
    _ = (state, entry)
    return NO_HOVER


def is_hovered(state: HoverState | None, entry: LegendEntry) -> bool:
    if state is None or state.entry is None:
        return False
    return state.data_key == entry.data_key
