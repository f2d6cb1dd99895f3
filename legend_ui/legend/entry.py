from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Literal, Mapping


LegendType = Literal[
    "line",
    "plainline",
    "rect",
    "circle",
    "cross",
    "diamond",
    "square",
    "triangle",
    "wye",
    "star",
    "none",
]

LEGEND_TYPES: tuple[str, ...] = (
    "line",
    "plainline",
    "rect",
    "circle",
    "cross",
    "diamond",
    "square",
    "triangle",
    "wye",
    "star",
    "none",
)
ICON_TYPES: tuple[str, ...] = tuple(t for t in LEGEND_TYPES if t != "none")

LabelFormatter = Callable[[Any, "LegendEntry", int], Any]


@dataclass(frozen=True)
class LegendEntry:
    """Descriptor of one data series as handed over by the chart aggregator.

    `type` is kept as a plain string: values outside `LEGEND_TYPES` are accepted
    and drawn with the generic symbol.
    """

    value: Any = None
    id: Any = None
    data_key: Any = None
    type: str | None = None
    color: str | None = None
    inactive: bool = False
    payload: Mapping[str, Any] = field(default_factory=dict)
    formatter: LabelFormatter | None = None

    @property
    def stroke_dasharray(self) -> str | None:
        payload = self.payload if isinstance(self.payload, Mapping) else {}
        dash = payload.get("strokeDasharray", payload.get("stroke_dasharray"))
        if dash is None:
            return None
        return str(dash)


def legend_entry_from_dict(raw: Mapping[str, Any]) -> LegendEntry:
    """Build an entry from an aggregator dict using camelCase or snake_case keys.

    Missing keys fall back to the dataclass defaults; nothing is validated.
    """

    payload = raw.get("payload")
    if not isinstance(payload, Mapping):
        payload = {}
    data_key = raw["dataKey"] if "dataKey" in raw else raw.get("data_key")
    return LegendEntry(
        value=raw.get("value"),
        id=raw.get("id"),
        data_key=data_key,
        type=raw.get("type"),
        color=raw.get("color"),
        inactive=bool(raw.get("inactive", False)),
        payload=dict(payload),
        formatter=raw.get("formatter"),
    )
