"""Presentation attribute parsing with parent-container inheritance."""

from __future__ import annotations

import logging
import re
import xml.etree.ElementTree as ET
from typing import Any

from svgscene.svg.color import set_stroke_fill_opacity
from svgscene.svg.constants import (
    ATTRIBUTES_MAP,
    DEFAULT_FONT_SIZE,
    NON_INHERITED_ATTRIBUTES,
    NUMERIC_ATTRIBUTES,
    RE_NUM,
    RE_SVG_VALID_PARENTS,
    UNIT_TO_PX,
    XLINK_NS,
)
from svgscene.svg.transform_parser import parse_transform_attribute, parse_transform_origin_attribute
from svgscene.utils.matrix import (
    create_translate_matrix,
    is_identity_matrix,
    multiply_transform_matrix_array,
)

logger = logging.getLogger(__name__)

ParentMap = dict[ET.Element, ET.Element]

_UNIT_RE = re.compile(rf"^\s*({RE_NUM})\s*(px|mm|cm|in|pt|pc|em|%)?\s*$", re.IGNORECASE)
_NUMBER_LIST_RE = re.compile(RE_NUM)


def get_tag_name(element: ET.Element) -> str:
    """Local tag name without namespace or ``svg:`` prefix."""
    tag = element.tag if isinstance(element.tag, str) else ""
    return tag.rsplit("}", 1)[-1].removeprefix("svg:")


def get_attribute(element: ET.Element, name: str) -> str | None:
    """Attribute lookup that also finds ``xlink:href`` under its namespace."""
    if name == "xlink:href":
        return element.get(f"{{{XLINK_NS}}}href") or element.get("xlink:href")
    return element.get(name)


def build_parent_map(root: ET.Element) -> ParentMap:
    return {child: parent for parent in root.iter() for child in parent}


def parse_unit(value: Any, font_size: float = DEFAULT_FONT_SIZE) -> float | None:
    """Convert a length such as ``10``, ``2mm`` or ``1.5em`` to pixels.

    Percentages are returned as plain numbers. Returns None when the value is
    not a length.
    """
    if isinstance(value, (int, float)):
        return float(value)
    if not value:
        return None
    match = _UNIT_RE.match(str(value))
    if not match:
        return None
    number = float(match.group(1))
    unit = (match.group(2) or "px").lower()
    if unit == "em":
        return number * font_size
    if unit == "%":
        return number
    return number * UNIT_TO_PX[unit]


def parse_style_attribute(element: ET.Element) -> dict[str, str]:
    """Split an inline ``style`` into declarations."""
    style = element.get("style")
    if not style:
        return {}
    declarations: dict[str, str] = {}
    for chunk in style.split(";"):
        if ":" not in chunk:
            continue
        name, value = chunk.split(":", 1)
        if name.strip() and value.strip():
            declarations[name.strip()] = value.strip()
    return declarations


def normalize_attribute_name(name: str) -> str:
    return ATTRIBUTES_MAP.get(name, name.replace("-", "_"))


_NON_INHERITED_KEYS = (
    frozenset(normalize_attribute_name(n) for n in NON_INHERITED_ATTRIBUTES)
    | NON_INHERITED_ATTRIBUTES
    | {"origin_x", "origin_y"}
)


def _normalize_value(name: str, value: str, font_size: float) -> Any:
    if name in NUMERIC_ATTRIBUTES:
        number = parse_unit(value, font_size)
        if number is None:
            logger.debug("Non-numeric %s=%r ignored", name, value)
        return number
    if name == "visibility":
        return value not in ("hidden", "collapse")
    if name == "display":
        return value != "none"
    if name == "stroke-dasharray":
        if value == "none":
            return None
        return [float(n) for n in _NUMBER_LIST_RE.findall(value)] or None
    if name == "vector-effect":
        return value == "non-scaling-stroke"
    if name == "paint-order":
        return "stroke" if value.strip().startswith("stroke") else "fill"
    return value


def _own_transform(element: ET.Element, declarations: dict[str, str]) -> tuple[Any, dict[str, float]]:
    raw = declarations.get("transform", element.get("transform"))
    origin = parse_transform_origin_attribute(declarations.get("transform-origin", element.get("transform-origin")))
    if raw is None:
        return None, origin
    matrix = parse_transform_attribute(raw)
    if origin:
        ox, oy = origin["origin_x"], origin["origin_y"]
        matrix = multiply_transform_matrix_array(
            [create_translate_matrix(ox, oy), matrix, create_translate_matrix(-ox, -oy)]
        )
    return matrix, origin


def parse_attributes(
    element: ET.Element,
    attribute_names: list[str] | tuple[str, ...],
    parents: ParentMap,
) -> dict[str, Any]:
    """Collect ``attribute_names`` from ``element`` and its valid parent containers.

    Style declarations beat attributes, the element beats its parents, and
    ``transform`` composes parent · own (with ``transform-origin`` folded into
    the own part as T(o) · M · T(-o)). Keys come back in property naming
    (``stroke_width``, ``transform_matrix``, ``visible``); geometry attributes
    keep their SVG names.
    """
    parent = parents.get(element)
    inherited: dict[str, Any] = {}
    if parent is not None and RE_SVG_VALID_PARENTS.match(get_tag_name(parent)):
        inherited = parse_attributes(parent, attribute_names, parents)

    declarations = parse_style_attribute(element)
    raw: dict[str, str] = {}
    for name in attribute_names:
        if name in ("transform", "transform-origin"):
            continue
        value = declarations.get(name, get_attribute(element, name))
        if value is not None:
            raw[name] = value.strip()

    font_size = parse_unit(raw.get("font-size"), inherited.get("font_size", DEFAULT_FONT_SIZE))
    if font_size is None:
        font_size = inherited.get("font_size", DEFAULT_FONT_SIZE)

    own: dict[str, Any] = {}
    for name, value in raw.items():
        normalized = _normalize_value(name, value, font_size)
        if normalized is None and name in NUMERIC_ATTRIBUTES:
            continue
        key = name if name in ("x", "y", "cx", "cy", "r", "rx", "ry") else normalize_attribute_name(name)
        own[key] = normalized

    merged = {key: value for key, value in inherited.items() if key not in _NON_INHERITED_KEYS}
    merged.update(own)

    matrix, origin = _own_transform(element, declarations)
    parent_matrix = inherited.get("transform_matrix")
    if matrix is not None and parent_matrix is not None:
        merged["transform_matrix"] = multiply_transform_matrix_array([parent_matrix, matrix])
    elif matrix is not None:
        merged["transform_matrix"] = matrix
    elif parent_matrix is not None:
        merged["transform_matrix"] = parent_matrix
    if "transform_matrix" in merged and is_identity_matrix(merged["transform_matrix"]):
        del merged["transform_matrix"]
    merged.update(origin)

    return set_stroke_fill_opacity(merged)
