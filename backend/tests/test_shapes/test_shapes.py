"""Tests for scene object geometry and serialization."""

from __future__ import annotations

import pytest

from svgscene.shapes import Circle, Ellipse, Group, Line, Path, Polygon, Rect, get_class_registry
from svgscene.utils.matrix import compose_matrix, create_rotate_matrix


class TestClassRegistry:
    def test_svg_tags_registered(self):
        registry = get_class_registry()
        assert registry.get_svg_class("rect") is Rect
        assert registry.get_svg_class("polygon") is Polygon
        assert registry.get_svg_class("image") is None
        assert registry.get_class("Group") is Group

    def test_duplicate_tag_rejected(self):
        with pytest.raises(ValueError):
            get_class_registry().set_svg_class(Circle, "rect")


class TestTransformState:
    def test_apply_then_calc_round_trip(self):
        rect = Rect(width=10, height=10)
        matrix = compose_matrix(translate_x=5, translate_y=-3, angle=30, scale_x=2, scale_y=0.5, skew_x=10)
        rect.apply_transform(matrix)
        assert rect.angle == pytest.approx(30)
        assert rect.calc_own_matrix() == pytest.approx(matrix)

    def test_origin_pivot(self):
        rect = Rect(width=10, height=10, origin_x=5, origin_y=5)
        rect.transform_matrix = create_rotate_matrix(90, (5, 5))
        assert rect.angle == pytest.approx(90)
        assert (rect.translate_x, rect.translate_y) == pytest.approx((0, 0))
        assert rect.get_center_point() == pytest.approx((5, 5))

    def test_constructor_bakes_transform(self):
        rect = Rect(width=10, height=10, transform_matrix=(2.0, 0.0, 0.0, 2.0, 1.0, 1.0))
        assert (rect.scale_x, rect.translate_x) == (2.0, 1.0)

    def test_coords_of_rotated_box(self):
        rect = Rect(width=10, height=20, angle=90)
        rect.set_coords()
        assert rect.a_coords["tr"] == pytest.approx((0, 10))
        assert rect.get_bounding_rect() == pytest.approx({"left": -20, "top": 0, "width": 20, "height": 10})


class TestShapes:
    def test_ellipse_resizes_around_center(self):
        ellipse = Ellipse(rx=5, ry=2, center_x=10, center_y=10)
        ellipse.rx = 8
        assert (ellipse.left, ellipse.width, ellipse.center_x) == (2.0, 16.0, 10.0)

    def test_line_box_follows_endpoints(self):
        line = Line(x1=10, y1=10, x2=0, y2=4)
        assert (line.left, line.top, line.width, line.height) == (0.0, 4.0, 10.0, 6.0)
        line.set("x2", 30)
        assert (line.left, line.width) == (10.0, 20.0)

    def test_empty_path(self):
        path = Path()
        assert (path.width, path.height) == (0.0, 0.0)

    def test_group_box(self):
        group = Group(objects=[Rect(left=0, top=0, width=5, height=5), Rect(left=10, top=2, width=5, height=5)])
        assert (group.left, group.top, group.width, group.height) == (0.0, 0.0, 15.0, 7.0)
        assert group.objects[0].parent is group


class TestToObject:
    def test_rect(self):
        data = Rect(left=1, top=2, width=3, height=4, rx=1, id="r").to_object()
        assert data["type"] == "Rect"
        assert data["id"] == "r"
        assert (data["left"], data["rx"]) == (1, 1)
        assert data["clip_path"] is None
        assert data["shadow"] is None

    def test_nested_clip_and_shadow(self):
        rect = Rect(width=3, height=3, shadow={"blur": 2})
        rect.clip_path = Circle(radius=1)
        data = rect.to_object()
        assert data["clip_path"]["type"] == "Circle"
        assert data["clip_path"]["radius"] == 1.0
        assert data["shadow"]["blur"] == 2

    def test_polygon_points(self):
        data = Polygon(points=[(0, 0), (1, 2)]).to_object()
        assert data["points"] == [[0.0, 0.0], [1.0, 2.0]]
