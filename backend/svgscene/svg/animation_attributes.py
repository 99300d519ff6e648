"""Attribute parsers for ``<animate>`` / ``<animateTransform>`` elements.

Each parser returns a dict holding the parsed key, or an empty dict when the
attribute is absent or unusable, so results can be merged with ``|``.
"""

from __future__ import annotations

import math
import re
import xml.etree.ElementTree as ET
from typing import Any

from svgscene.svg.constants import ATTRIBUTES_MAP, RE_NUM

INDEFINITE = "indefinite"

_CLOCK_RE = re.compile(rf"^\s*(?:(\d+):)?(\d+):({RE_NUM})\s*$")
_TIMECOUNT_RE = re.compile(rf"^\s*({RE_NUM})\s*(h|min|s|ms)?\s*$")
_LEADING_NUMBER_RE = re.compile(rf"^\s*({RE_NUM})")
_TIME_UNITS = {"h": 3600.0, "min": 60.0, "s": 1.0, "ms": 0.001, None: 1.0}


def parse_float(value: Any) -> float | None:
    """Leading number of ``value``: ``"10px"`` gives 10.0, ``"visible"`` gives ``None``."""
    if isinstance(value, (int, float)):
        return None if math.isnan(value) else float(value)
    if not isinstance(value, str):
        return None
    match = _LEADING_NUMBER_RE.match(value)
    return float(match.group(1)) if match else None


def parse_values_attribute(element: ET.Element) -> dict[str, list[str]]:
    """Split ``values`` on ``;``. Items stay strings so colors survive."""
    values = element.get("values")
    if not values:
        return {}
    return {"values": [v.strip() for v in values.split(";") if v.strip()]}


def convert_attribute_names(element: ET.Element) -> dict[str, str]:
    """Map ``attributeName`` to the scene object property it drives."""
    name = element.get("attributeName")
    if not name:
        return {}
    return {"attribute_name": ATTRIBUTES_MAP.get(name, name)}


def parse_from_to_by_attribute(element: ET.Element) -> dict[str, list[str]]:
    """Turn ``from``/``to``/``by`` into a two item ``values`` list.

    Only used when ``values`` is absent. ``from`` is required, plus ``to`` or a
    numeric ``by``; ``from``+``by`` also needs a numeric ``from``.
    """
    start = element.get("from")
    end = element.get("to")
    by = parse_float(element.get("by"))
    if element.get("values") or not start or (not end and not by):
        return {}

    if not end:
        start_num = parse_float(start)
        if start_num is None:
            return {}
        return {"values": [start, repr(start_num + by)]}

    return {"values": [start, end]}


def parse_clock_value(value: str | None) -> float:
    """Parse an SMIL clock value ("2s", "500ms", "1.5", "00:01.5") into seconds.

    Unparseable or missing values give 0.
    """
    if not value:
        return 0.0
    match = _CLOCK_RE.match(value)
    if match:
        hours, minutes, seconds = match.groups()
        return int(hours or 0) * 3600.0 + int(minutes) * 60.0 + float(seconds)
    match = _TIMECOUNT_RE.match(value)
    if match:
        return float(match.group(1)) * _TIME_UNITS[match.group(2)]
    return 0.0


def parse_repeat_count(value: str | None) -> int | str:
    """``indefinite`` stays a sentinel, fractions round up, missing means once."""
    if value is None:
        return 1
    if value.strip() == INDEFINITE:
        return INDEFINITE
    count = parse_float(value)
    if count is None or count <= 0:
        return 1
    return math.ceil(count)
