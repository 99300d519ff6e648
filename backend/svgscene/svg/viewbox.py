"""Viewport / viewBox handling for ``<svg>`` and ``<symbol>`` elements."""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from typing import Any

from svgscene.svg.attributes import ParentMap, get_tag_name, parse_unit
from svgscene.svg.constants import RE_VIEWBOX_ATTR_VALUE, SVG_VIEWBOX_ELEMENTS

logger = logging.getLogger(__name__)


def parse_preserve_aspect_ratio(value: str | None) -> dict[str, str]:
    """``"xMinYMax slice"`` -> {align_x: Min, align_y: Max, meet_or_slice: slice}."""
    parts = (value or "").split()
    align = parts[0] if parts else "xMidYMid"
    meet_or_slice = parts[1] if len(parts) > 1 else "meet"
    if align == "none":
        return {"align_x": "none", "align_y": "none", "meet_or_slice": meet_or_slice}
    return {"align_x": align[1:4], "align_y": align[5:8], "meet_or_slice": meet_or_slice}


def _namespace(element: ET.Element) -> str:
    tag = element.tag if isinstance(element.tag, str) else ""
    return tag[: tag.index("}") + 1] if tag.startswith("{") else ""


def _is_root(element: ET.Element, parents: ParentMap) -> bool:
    return parents.get(element) is None


def apply_viewbox_transform(element: ET.Element, parents: ParentMap) -> dict[str, Any]:
    """Turn an svg/symbol viewport into a transform on its content.

    An ``<svg>`` gets its children wrapped in a ``<g>`` carrying the viewport
    matrix; a ``<symbol>`` has the matrix prepended to its own transform.
    Returns the parsed dimensions of the viewport.
    """
    tag = get_tag_name(element)
    if tag not in SVG_VIEWBOX_ELEMENTS:
        return {}

    viewbox_attr = element.get("viewBox")
    width_attr = element.get("width")
    height_attr = element.get("height")
    x = parse_unit(element.get("x")) or 0.0
    y = parse_unit(element.get("y")) or 0.0
    viewbox_match = RE_VIEWBOX_ATTR_VALUE.match(viewbox_attr) if viewbox_attr else None
    missing_dim = not width_attr or not height_attr or width_attr == "100%" or height_attr == "100%"
    translate = ""

    if viewbox_match is None:
        if (x or y) and not _is_root(element, parents):
            translate = f" translate({x} {y}) "
            element.set("transform", (element.get("transform") or "") + translate)
            element.attrib.pop("x", None)
            element.attrib.pop("y", None)
        if missing_dim:
            return {"width": 0.0, "height": 0.0}
        return {"width": parse_unit(width_attr) or 0.0, "height": parse_unit(height_attr) or 0.0}

    min_x = -float(viewbox_match.group(1))
    min_y = -float(viewbox_match.group(2))
    viewbox_width = float(viewbox_match.group(3))
    viewbox_height = float(viewbox_match.group(4))
    dims: dict[str, Any] = {
        "min_x": min_x,
        "min_y": min_y,
        "viewbox_width": viewbox_width,
        "viewbox_height": viewbox_height,
    }
    scale_x = scale_y = 1.0
    if not missing_dim and viewbox_width and viewbox_height:
        dims["width"] = parse_unit(width_attr) or 0.0
        dims["height"] = parse_unit(height_attr) or 0.0
        scale_x = dims["width"] / viewbox_width
        scale_y = dims["height"] / viewbox_height
    else:
        dims["width"] = viewbox_width
        dims["height"] = viewbox_height

    width_diff = height_diff = 0.0
    ratio = parse_preserve_aspect_ratio(element.get("preserveAspectRatio"))
    if ratio["align_x"] != "none":
        if ratio["meet_or_slice"] == "slice":
            scale_x = scale_y = max(scale_x, scale_y)
        else:
            scale_x = scale_y = min(scale_x, scale_y)
        width_diff = dims["width"] - viewbox_width * scale_x
        height_diff = dims["height"] - viewbox_height * scale_y
        if ratio["align_x"] == "Mid":
            width_diff /= 2
        if ratio["align_y"] == "Mid":
            height_diff /= 2
        if ratio["align_x"] == "Min":
            width_diff = 0.0
        if ratio["align_y"] == "Min":
            height_diff = 0.0

    if scale_x == 1 and scale_y == 1 and min_x == 0 and min_y == 0 and x == 0 and y == 0:
        return dims

    if (x or y) and not _is_root(element, parents):
        translate = f" translate({x} {y}) "
    matrix = (
        f"{translate} matrix({scale_x} 0 0 {scale_y} "
        f"{min_x * scale_x + width_diff} {min_y * scale_y + height_diff}) "
    )

    if tag == "svg":
        wrapper = ET.Element(f"{_namespace(element)}g")
        children = list(element)
        for child in children:
            element.remove(child)
        wrapper.extend(children)
        element.append(wrapper)
        wrapper.set("transform", matrix)
        logger.debug("Wrapped %d svg children in viewport group %s", len(children), matrix.strip())
    else:
        element.attrib.pop("x", None)
        element.attrib.pop("y", None)
        element.set("transform", (element.get("transform") or "") + matrix)

    return dims
