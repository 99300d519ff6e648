"""Tests for <animate> attribute parsers."""

from __future__ import annotations

import xml.etree.ElementTree as ET

import pytest

from svgscene.svg.animation_attributes import (
    INDEFINITE,
    convert_attribute_names,
    parse_clock_value,
    parse_float,
    parse_from_to_by_attribute,
    parse_repeat_count,
    parse_values_attribute,
)


def _animate(**attrs: str) -> ET.Element:
    return ET.Element("animate", attrs)


class TestValues:
    def test_split_on_semicolon(self):
        assert parse_values_attribute(_animate(values="0; 10 ;red")) == {"values": ["0", "10", "red"]}

    def test_absent_yields_no_key(self):
        assert parse_values_attribute(_animate()) == {}


class TestAttributeName:
    def test_mapped(self):
        assert convert_attribute_names(_animate(attributeName="r")) == {"attribute_name": "radius"}
        assert convert_attribute_names(_animate(attributeName="stroke-width")) == {"attribute_name": "stroke_width"}

    def test_unknown_passes_through(self):
        assert convert_attribute_names(_animate(attributeName="fancyThing")) == {"attribute_name": "fancyThing"}

    def test_absent_yields_no_key(self):
        assert convert_attribute_names(_animate()) == {}


class TestFromToBy:
    def test_from_to(self):
        assert parse_from_to_by_attribute(_animate(**{"from": "red", "to": "blue"})) == {"values": ["red", "blue"]}

    def test_from_by(self):
        assert parse_from_to_by_attribute(_animate(**{"from": "5", "by": "3"})) == {"values": ["5", "8.0"]}

    def test_non_numeric_from_with_by_fails_softly(self):
        assert parse_from_to_by_attribute(_animate(**{"from": "red", "by": "3"})) == {}

    def test_from_alone(self):
        assert parse_from_to_by_attribute(_animate(**{"from": "5"})) == {}

    def test_ignored_when_values_present(self):
        assert parse_from_to_by_attribute(_animate(values="1;2", **{"from": "5", "to": "6"})) == {}


class TestTiming:
    @pytest.mark.parametrize(
        "value,expected",
        [("2s", 2.0), ("500ms", 0.5), ("1.5", 1.5), ("00:01.5", 1.5), ("1:00:00", 3600.0), ("2min", 120.0)],
    )
    def test_clock_values(self, value, expected):
        assert parse_clock_value(value) == pytest.approx(expected)

    def test_bad_clock_value_is_zero(self):
        assert parse_clock_value("soon") == 0.0
        assert parse_clock_value(None) == 0.0

    def test_repeat_count(self):
        assert parse_repeat_count(None) == 1
        assert parse_repeat_count("indefinite") == INDEFINITE
        assert parse_repeat_count("2.5") == 3
        assert parse_repeat_count("0") == 1
        assert parse_repeat_count("lots") == 1


class TestParseFloat:
    @pytest.mark.parametrize(
        "value,expected",
        [("10px", 10.0), (" -2.5em", -2.5), ("1e2", 100.0), (".5", 0.5), ("3", 3.0), (4, 4.0)],
    )
    def test_leading_number(self, value, expected):
        assert parse_float(value) == expected

    @pytest.mark.parametrize("value", ["visible", "px10", "", None, float("nan")])
    def test_no_leading_number(self, value):
        assert parse_float(value) is None

    def test_from_by_with_units(self):
        assert parse_from_to_by_attribute(_animate(**{"from": "5px", "by": "3"})) == {"values": ["5px", "8.0"]}
