"""Tests for presentation attribute parsing and viewport handling."""

from __future__ import annotations

import xml.etree.ElementTree as ET

import pytest

from svgscene.svg.attributes import build_parent_map, get_tag_name, parse_attributes, parse_unit
from svgscene.svg.constants import SVG_PRESENTATION_ATTRIBUTES
from svgscene.svg.viewbox import apply_viewbox_transform, parse_preserve_aspect_ratio
from tests.conftest import GROUPED_SVG, VIEWBOX_SVG

NS = "{http://www.w3.org/2000/svg}"


def _rects(root: ET.Element) -> list[ET.Element]:
    return [el for el in root.iter() if get_tag_name(el) == "rect"]


class TestParseUnit:
    def test_units(self):
        assert parse_unit("10") == 10.0
        assert parse_unit("1in") == 96.0
        assert parse_unit("2em", font_size=10) == 20.0
        assert parse_unit("25.4mm") == pytest.approx(96.0)

    def test_not_a_length(self):
        assert parse_unit("auto") is None
        assert parse_unit("") is None


class TestParseAttributes:
    def test_inherits_from_group(self):
        root = ET.fromstring(GROUPED_SVG)
        parents = build_parent_map(root)
        first, second = _rects(root)
        attrs = parse_attributes(first, (*SVG_PRESENTATION_ATTRIBUTES, "x", "width"), parents)
        assert attrs["fill"] == "rgba(0,0,255,1)"
        assert attrs["stroke_width"] == 3.0
        assert attrs["transform_matrix"] == (1.0, 0.0, 0.0, 1.0, 5.0, 5.0)
        assert attrs["x"] == 0.0

        attrs = parse_attributes(second, SVG_PRESENTATION_ATTRIBUTES, parents)
        assert attrs["fill"] == "rgba(255,255,0,1)"
        # style beats attributes and parents
        assert attrs["stroke_width"] == 7.0

    def test_transform_composes_with_parent(self):
        root = ET.fromstring(
            '<svg><g transform="translate(10 0)"><rect transform="scale(2)"/></g></svg>'
        )
        rect = _rects(root)[0]
        attrs = parse_attributes(rect, SVG_PRESENTATION_ATTRIBUTES, build_parent_map(root))
        assert attrs["transform_matrix"] == (2.0, 0.0, 0.0, 2.0, 10.0, 0.0)

    def test_transform_origin_is_folded_in(self):
        root = ET.fromstring('<svg><rect transform="scale(2)" transform-origin="10 10"/></svg>')
        rect = _rects(root)[0]
        attrs = parse_attributes(rect, SVG_PRESENTATION_ATTRIBUTES, build_parent_map(root))
        assert attrs["transform_matrix"] == (2.0, 0.0, 0.0, 2.0, -10.0, -10.0)
        assert attrs["origin_x"] == 10.0

    def test_id_and_opacity_not_inherited(self):
        root = ET.fromstring('<svg><g id="grp" opacity="0.5" display="none"><rect/></g></svg>')
        rect = _rects(root)[0]
        attrs = parse_attributes(rect, SVG_PRESENTATION_ATTRIBUTES, build_parent_map(root))
        assert "id" not in attrs
        assert "opacity" not in attrs
        assert attrs["visible"] is False

    def test_invalid_parent_is_not_inherited(self):
        root = ET.fromstring('<svg><clipPath fill="red"><rect/></clipPath></svg>')
        rect = _rects(root)[0]
        assert "fill" not in parse_attributes(rect, SVG_PRESENTATION_ATTRIBUTES, build_parent_map(root))


class TestViewbox:
    def test_preserve_aspect_ratio(self):
        assert parse_preserve_aspect_ratio("xMinYMax slice") == {
            "align_x": "Min",
            "align_y": "Max",
            "meet_or_slice": "slice",
        }
        assert parse_preserve_aspect_ratio(None)["align_x"] == "Mid"

    def test_root_svg_children_wrapped(self):
        root = ET.fromstring(VIEWBOX_SVG)
        dims = apply_viewbox_transform(root, build_parent_map(root))
        assert dims["width"] == 200.0
        assert dims["viewbox_width"] == 100.0
        (wrapper,) = list(root)
        assert wrapper.tag == f"{NS}g"
        assert get_tag_name(list(wrapper)[0]) == "rect"
        assert "matrix(2.0 0 0 2.0" in wrapper.get("transform")

    def test_no_viewbox(self):
        root = ET.fromstring('<svg width="30" height="40"><rect/></svg>')
        assert apply_viewbox_transform(root, {}) == {"width": 30.0, "height": 40.0}
        assert get_tag_name(list(root)[0]) == "rect"

    def test_symbol_gets_transform(self):
        root = ET.fromstring('<svg><symbol viewBox="0 0 10 10" width="20" height="20"/></svg>')
        symbol = list(root)[0]
        apply_viewbox_transform(symbol, build_parent_map(root))
        assert "matrix(2.0 0 0 2.0" in symbol.get("transform")
