from __future__ import annotations

import unittest

from legend_ui.legend.composer import compose_legend, compose_legend_items
from legend_ui.legend.config import LegendConfig
from legend_ui.legend.entry import LegendEntry
from legend_ui.legend.hover import NO_HOVER, HoverState, enter_hover


def _payload() -> list[LegendEntry]:
    return [
        LegendEntry(value="A", data_key="a", type="rect", color="#8884d8"),
        LegendEntry(value="B", data_key="b", type="line", color="#82ca9d"),
    ]


class LegendComposerTests(unittest.TestCase):
    def test_two_entry_example(self) -> None:
        items = compose_legend_items(_payload(), None, LegendConfig(icon_size=14))
        self.assertEqual(len(items), 2)
        self.assertEqual((items[0].icon.width, items[0].icon.height), (14.0, 10.5))
        self.assertEqual((items[1].icon.width, items[1].icon.height), (14.0, 14.0))
        self.assertEqual([item.key for item in items], ["legend-item-0", "legend-item-1"])
        self.assertEqual([item.label for item in items], ["A", "B"])

    def test_none_entries_are_skipped_without_renumbering(self) -> None:
        payload = [
            LegendEntry(value="A", data_key="a", type="none"),
            LegendEntry(value="B", data_key="b", type="square", color="red"),
            LegendEntry(value="C", data_key="c", type="none"),
            LegendEntry(value="D", data_key="d", type="rect", color="red"),
        ]
        items = compose_legend_items(payload, None, LegendConfig())
        self.assertEqual([item.key for item in items], ["legend-item-1", "legend-item-3"])
        self.assertEqual([item.index for item in items], [1, 3])
        self.assertEqual(items[0].class_names, ("legend-item", "legend-item-1"))

    def test_surface_adds_offset_and_centered_view_box(self) -> None:
        item = compose_legend_items(_payload(), None, LegendConfig(icon_size=14))[0]
        self.assertEqual((item.surface.width, item.surface.height), (24.0, 20.5))
        box = item.surface.view_box
        self.assertEqual((box.x, box.y, box.width, box.height), (-5.0, -5.0, 24.0, 20.5))
        self.assertEqual(box.as_attribute(), "-5 -5 24 20.5")

    def test_compose_is_idempotent(self) -> None:
        payload = _payload()
        hover = enter_hover(None, payload[0])
        config = LegendConfig(with_series_toggling=True)
        self.assertEqual(
            compose_legend_items(payload, hover, config),
            compose_legend_items(payload, hover, config),
        )
        self.assertEqual(compose_legend(payload, hover, config), compose_legend(payload, hover, config))

    def test_hover_emphasizes_only_matching_data_key(self) -> None:
        payload = [
            LegendEntry(value="A", data_key="a", type="rect", color="red"),
            LegendEntry(value="B", data_key="b", type="rect", color="red"),
        ]
        config = LegendConfig(with_series_toggling=True)
        items = compose_legend_items(payload, enter_hover(None, payload[1]), config)
        self.assertIsNone(items[0].glow)
        self.assertEqual(items[1].glow, "drop-shadow(0 0 3px red)")
        self.assertEqual(items[1].surface.filter, items[1].glow)

    def test_no_emphasis_without_series_toggling(self) -> None:
        payload = _payload()
        items = compose_legend_items(payload, enter_hover(None, payload[0]), LegendConfig())
        self.assertTrue(all(item.glow is None for item in items))

    def test_no_emphasis_without_hover(self) -> None:
        config = LegendConfig(with_series_toggling=True)
        for hover in (None, NO_HOVER):
            items = compose_legend_items(_payload(), hover, config)
            self.assertTrue(all(item.glow is None for item in items))

    def test_inactive_entry_uses_inactive_color_for_glow(self) -> None:
        entry = LegendEntry(value="A", data_key="a", type="rect", color="red", inactive=True)
        items = compose_legend_items([entry], HoverState(entry=entry), LegendConfig(with_series_toggling=True))
        self.assertEqual(items[0].glow, "drop-shadow(0 0 3px #ccc)")
        self.assertEqual(items[0].icon.shape.fill, "#ccc")  # type: ignore[union-attr]
        self.assertIn("inactive", items[0].class_names)

    def test_glow_falls_back_to_current_color(self) -> None:
        entry = LegendEntry(value="A", data_key="a", type="rect")
        items = compose_legend_items([entry], HoverState(entry=entry), LegendConfig(with_series_toggling=True))
        self.assertEqual(items[0].glow, "drop-shadow(0 0 3px currentColor)")

    def test_formatter_precedence(self) -> None:
        def global_formatter(value, entry, index):
            return f"{value}@{index}"

        def entry_formatter(value, entry, index):
            return f"<{value}>"

        payload = [
            LegendEntry(value="A", data_key="a", type="rect", color="red", formatter=entry_formatter),
            LegendEntry(value="B", data_key="b", type="rect", color="red"),
        ]
        items = compose_legend_items(payload, None, LegendConfig(formatter=global_formatter))
        self.assertEqual([item.label for item in items], ["<A>", "B@1"])

    def test_raw_value_without_formatter(self) -> None:
        items = compose_legend_items([LegendEntry(value=42, type="rect")], None, LegendConfig())
        self.assertEqual(items[0].label, 42)

    def test_item_style_follows_layout(self) -> None:
        horizontal = compose_legend_items(_payload(), None, LegendConfig())
        vertical = compose_legend_items(_payload(), None, LegendConfig(layout="vertical"))
        self.assertEqual(horizontal[0].style.display, "inline-block")
        self.assertEqual(vertical[0].style.display, "block")
        self.assertEqual(horizontal[0].style.margin_right, 10.0)

    def test_entry_id_defaults_to_index(self) -> None:
        payload = [
            LegendEntry(value="A", id="series-a", type="rect"),
            LegendEntry(value="B", type="rect"),
        ]
        items = compose_legend_items(payload, None, LegendConfig())
        self.assertEqual([item.entry_id for item in items], ["series-a", 1])

    def test_empty_or_absent_payload_renders_nothing(self) -> None:
        for payload in (None, []):
            self.assertIsNone(compose_legend(payload, None, LegendConfig()))
            self.assertEqual(compose_legend_items(payload, None, LegendConfig()), ())

    def test_container_alignment(self) -> None:
        content = compose_legend(_payload(), None, LegendConfig(align="right"))
        assert content is not None
        self.assertEqual(content.text_align, "right")
        self.assertEqual((content.padding, content.margin), (0.0, 0.0))
        vertical = compose_legend(_payload(), None, LegendConfig(layout="vertical", align="right"))
        assert vertical is not None
        self.assertEqual(vertical.text_align, "left")

    def test_bindings_return_hover_transitions_and_forward_callbacks(self) -> None:
        calls: list[tuple[str, object, int, object]] = []
        config = LegendConfig(
            on_mouse_enter=lambda entry, index, event: calls.append(("enter", entry.value, index, event)),
            on_mouse_leave=lambda entry, index, event: calls.append(("leave", entry.value, index, event)),
            on_click=lambda entry, index, event: calls.append(("click", entry.value, index, event)),
        )
        item = compose_legend_items(_payload(), None, config)[1]
        hovered = item.bindings.on_mouse_enter("evt")
        self.assertEqual(hovered.data_key, "b")
        cleared = item.bindings.on_mouse_leave("evt")
        self.assertFalse(cleared.active)
        item.bindings.on_click("evt")
        self.assertEqual(
            calls,
            [("enter", "B", 1, "evt"), ("leave", "B", 1, "evt"), ("click", "B", 1, "evt")],
        )

    def test_bindings_without_callbacks(self) -> None:
        item = compose_legend_items(_payload(), None, LegendConfig())[0]
        self.assertEqual(item.bindings.on_mouse_enter().entry, item.entry)
        self.assertIsNone(item.bindings.on_click())


if __name__ == "__main__":
    unittest.main()
