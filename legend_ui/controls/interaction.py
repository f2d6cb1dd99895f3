from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Mapping


PointerPhase = Literal["move", "down", "up", "leave"]

_POINTER_PHASES = frozenset({"move", "down", "up", "leave"})


@dataclass(frozen=True)
class PointerEvent:
    """Minimal standardized pointer event contract consumed by legend items."""

    phase: PointerPhase
    x: float = 0.0
    y: float = 0.0
    frame: str | None = None
    button: str = "primary"


def parse_pointer_event(event_type: str, payload: object) -> PointerEvent | None:
    """Parse normalized `pointer` events into a typed interaction event.

    Foreign event types and malformed payloads yield None instead of raising so
    a host can feed its whole event stream through this function.
    """

    if event_type != "pointer" or not isinstance(payload, Mapping):
        return None
    phase = payload.get("phase")
    if phase not in _POINTER_PHASES:
        return None
    if phase == "leave":
        return PointerEvent(phase="leave", frame=_frame_of(payload))
    try:
        x = float(payload.get("x"))  # type: ignore[arg-type]
        y = float(payload.get("y"))  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return None
    return PointerEvent(
        phase=phase,
        x=x,
        y=y,
        frame=_frame_of(payload),
        button=str(payload.get("button", "primary")),
    )


def _frame_of(payload: Mapping) -> str | None:
    frame = payload.get("frame")
    if frame is None:
        return None
    return str(frame)
