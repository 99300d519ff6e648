"""Tests for <use> expansion."""

from __future__ import annotations

import xml.etree.ElementTree as ET

import pytest

from svgscene.svg.attributes import get_tag_name
from svgscene.svg.transform_parser import parse_transform_attribute
from svgscene.svg.use_directives import INSTANTIATED_BY_USE, parse_use_directives, url_reference
from svgscene.utils.matrix import (
    create_rotate_matrix,
    create_scale_matrix,
    create_translate_matrix,
    multiply_transform_matrix_array,
)
from tests.conftest import MISSING_USE_SVG, USE_SVG


def _tags(root: ET.Element) -> list[str]:
    return [get_tag_name(el) for el in root.iter()]


def test_url_reference():
    assert url_reference("url(#clip)") == "clip"
    assert url_reference("url('#clip')") == "clip"
    assert url_reference("none") is None
    assert url_reference(None) is None


def test_use_is_replaced_by_copy():
    root = ET.fromstring(USE_SVG)
    assert parse_use_directives(root) == 1
    assert "use" not in _tags(root)
    clone = list(root)[-1]
    assert get_tag_name(clone) == "path"
    assert clone.get("id") is None
    assert clone.get("fill") == "red"
    assert clone.get(INSTANTIATED_BY_USE) == "1"


def test_unresolvable_clip_path_is_ignored():
    root = ET.fromstring(USE_SVG)
    parse_use_directives(root)
    assert list(root)[-1].get("clip-path") is None


def test_missing_reference_drops_use():
    root = ET.fromstring(MISSING_USE_SVG)
    assert parse_use_directives(root) == 0
    assert _tags(root) == ["svg", "rect"]


def test_position_and_transform_order():
    root = ET.fromstring(
        '<svg><defs><rect id="r" transform="rotate(90)"/></defs>'
        '<use href="#r" x="1" y="2" transform="scale(2)"/></svg>'
    )
    parse_use_directives(root)
    clone = list(root)[-1]
    expected = multiply_transform_matrix_array(
        [create_scale_matrix(2), create_translate_matrix(1, 2), create_rotate_matrix(90)]
    )
    assert parse_transform_attribute(clone.get("transform")) == pytest.approx(expected)


def test_xlink_href():
    root = ET.fromstring(
        '<svg xmlns:xlink="http://www.w3.org/1999/xlink"><circle id="c" r="1"/><use xlink:href="#c"/></svg>'
    )
    assert parse_use_directives(root) == 1
    assert _tags(root) == ["svg", "circle", "circle"]


def test_existing_target_attributes_win():
    root = ET.fromstring('<svg><rect id="r" fill="blue"/><use href="#r" fill="red" stroke="green"/></svg>')
    parse_use_directives(root)
    clone = list(root)[-1]
    assert clone.get("fill") == "blue"
    assert clone.get("stroke") == "green"


def test_symbol_becomes_group():
    root = ET.fromstring('<svg><symbol id="icon"><rect width="1" height="1"/></symbol><use href="#icon"/></svg>')
    parse_use_directives(root)
    group = list(root)[-1]
    assert get_tag_name(group) == "g"
    assert [get_tag_name(el) for el in group] == ["rect"]


def test_nested_use():
    root = ET.fromstring(
        '<svg><defs><rect id="a"/><g id="b"><use href="#a"/></g></defs><use href="#b"/></svg>'
    )
    parse_use_directives(root)
    assert "use" not in _tags(root)
    group = list(root)[-1]
    assert [get_tag_name(el) for el in group] == ["rect"]


def test_self_reference_is_bounded():
    root = ET.fromstring('<svg><g id="loop"><use href="#loop"/></g></svg>')
    parse_use_directives(root, max_depth=3)
    assert "use" not in _tags(root)
