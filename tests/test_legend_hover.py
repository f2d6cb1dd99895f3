import unittest

from legend_ui.legend.entry import LegendEntry
from legend_ui.legend.hover import NO_HOVER, HoverState, enter_hover, is_hovered, leave_hover


class HoverStateTests(unittest.TestCase):
    def test_enter_then_leave(self) -> None:
        entry = LegendEntry(value="A", data_key="a")
        state = enter_hover(NO_HOVER, entry)
        self.assertTrue(state.active)
        self.assertEqual(state.data_key, "a")

        state = leave_hover(state, entry)
        self.assertFalse(state.active)
        self.assertIsNone(state.data_key)

    def test_last_enter_wins(self) -> None:
        a = LegendEntry(value="A", data_key="a")
        b = LegendEntry(value="B", data_key="b")
        state = enter_hover(enter_hover(None, a), b)
        self.assertTrue(is_hovered(state, b))
        self.assertFalse(is_hovered(state, a))

    def test_match_uses_data_key_not_color_or_id(self) -> None:
        hovered = LegendEntry(value="A", id=1, data_key="a", color="red")
        same_key = LegendEntry(value="other", id=2, data_key="a", color="blue")
        same_color = LegendEntry(value="B", id=1, data_key="b", color="red")
        state = HoverState(entry=hovered)
        self.assertTrue(is_hovered(state, same_key))
        self.assertFalse(is_hovered(state, same_color))

    def test_empty_state_never_matches(self) -> None:
        entry = LegendEntry(value="A")
        self.assertFalse(is_hovered(None, entry))
        self.assertFalse(is_hovered(NO_HOVER, entry))

    def test_transitions_do_not_mutate_input(self) -> None:
        entry = LegendEntry(value="A", data_key="a")
        state = enter_hover(None, entry)
        leave_hover(state)
        self.assertEqual(state.entry, entry)


if __name__ == "__main__":
    unittest.main()
