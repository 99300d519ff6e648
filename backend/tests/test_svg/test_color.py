"""Tests for color parsing and paint normalization."""

from __future__ import annotations

from svgscene.svg.color import NAMED_COLORS, Color, set_stroke_fill_opacity


class TestColor:
    def test_named(self):
        assert Color("red").get_source() == (255, 0, 0, 1.0)
        assert Color("Red").to_rgba() == "rgba(255,0,0,1)"

    def test_hex(self):
        assert Color("#0f0").get_source() == (0, 255, 0, 1.0)
        assert Color("#0000ff80").get_alpha() == 0.5
        assert Color("#123456").to_hex() == "123456"

    def test_rgb_functions(self):
        assert Color("rgb(10, 20, 30)").get_source() == (10, 20, 30, 1.0)
        assert Color("rgba(10,20,30,0.25)").get_alpha() == 0.25
        assert Color("rgb(100%, 0%, 50%)").get_source() == (255, 0, 128, 1.0)

    def test_hsl(self):
        assert Color("hsl(120, 100%, 50%)").get_source() == (0, 255, 0, 1.0)

    def test_full_css_named_table(self):
        assert len(NAMED_COLORS) == 148
        assert Color("beige").get_source() == (245, 245, 220, 1.0)
        assert Color("rebeccapurple").to_hex() == "663399"
        assert not Color("LightGoldenrodYellow").is_unrecognised

    def test_transparent(self):
        assert Color("transparent").get_alpha() == 0.0

    def test_unrecognised_is_black(self):
        color = Color("bad")
        assert color.is_unrecognised
        assert color.get_source() == (0, 0, 0, 1.0)


class TestSetStrokeFillOpacity:
    def test_folds_opacity(self):
        attrs = set_stroke_fill_opacity({"fill": "blue", "fill_opacity": 0.5})
        assert attrs == {"fill": "rgba(0,0,255,0.5)"}

    def test_none_and_unknown_pass_through(self):
        attrs = {"fill": "none", "stroke": "url(#grad)", "stroke_opacity": 0.3}
        assert set_stroke_fill_opacity(dict(attrs)) == attrs

    def test_non_paint_keys_untouched(self):
        assert set_stroke_fill_opacity({"radius": 4}) == {"radius": 4}
