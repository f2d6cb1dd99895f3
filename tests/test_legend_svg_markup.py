from __future__ import annotations

import unittest
import xml.etree.ElementTree as ET

from legend_ui.legend.composer import compose_legend_items
from legend_ui.legend.config import LegendConfig
from legend_ui.legend.entry import LegendEntry
from legend_ui.legend.hover import HoverState
from legend_ui.legend.svg_markup import icon_svg_markup

_NS = "{http://www.w3.org/2000/svg}"


def _markup_for(entry: LegendEntry, **config_kwargs) -> ET.Element:
    config = LegendConfig(**config_kwargs)
    item = compose_legend_items([entry], HoverState(entry=entry), config)[0]
    return ET.fromstring(icon_svg_markup(item))


class IconSVGMarkupTests(unittest.TestCase):
    def test_rect_surface_attributes(self) -> None:
        root = _markup_for(LegendEntry(value="A", data_key="a", type="rect", color="#8884d8"))
        self.assertEqual(root.tag, f"{_NS}svg")
        self.assertEqual(root.attrib["width"], "24")
        self.assertEqual(root.attrib["height"], "20.5")
        self.assertEqual(root.attrib["viewBox"], "-5 -5 24 20.5")
        self.assertNotIn("filter", root.attrib["style"])
        (path,) = list(root)
        self.assertEqual(path.tag, f"{_NS}path")
        self.assertEqual(path.attrib["d"], "M0,0h14v10.5h-14z")
        self.assertEqual(path.attrib["fill"], "#8884d8")
        self.assertEqual(path.attrib["stroke"], "none")

    def test_glow_lands_in_style(self) -> None:
        root = _markup_for(
            LegendEntry(value="A", data_key="a", type="rect", color="red"),
            with_series_toggling=True,
        )
        self.assertIn("filter: drop-shadow(0 0 3px red)", root.attrib["style"])
        self.assertIn("display: inline-block", root.attrib["style"])

    def test_plainline_element(self) -> None:
        root = _markup_for(
            LegendEntry(value="A", type="plainline", color="red", payload={"strokeDasharray": "4 1"}),
            icon_size=20,
        )
        (line,) = list(root)
        self.assertEqual(line.tag, f"{_NS}line")
        self.assertEqual(
            {k: line.attrib[k] for k in ("x1", "y1", "x2", "y2", "stroke-width", "fill", "stroke-dasharray")},
            {"x1": "0", "y1": "10", "x2": "20", "y2": "10", "stroke-width": "4", "fill": "none", "stroke-dasharray": "4 1"},
        )

    def test_symbol_is_translated_to_center(self) -> None:
        root = _markup_for(LegendEntry(value="A", type="square", color="blue"))
        (path,) = list(root)
        self.assertEqual(path.attrib["transform"], "translate(7, 7)")
        self.assertEqual(path.attrib["d"], "M-7,-7h14v14h-14Z")
        self.assertEqual(path.attrib["fill"], "blue")

    def test_missing_color_omits_attribute(self) -> None:
        root = _markup_for(LegendEntry(value="A", type="line"))
        (path,) = list(root)
        self.assertNotIn("stroke", path.attrib)
        self.assertEqual(path.attrib["fill"], "none")


if __name__ == "__main__":
    unittest.main()
