"""SVG parsing constants — tag sets, attribute name tables, number grammar."""

from __future__ import annotations

import re

SVG_NS = "http://www.w3.org/2000/svg"
XLINK_NS = "http://www.w3.org/1999/xlink"

# Floating-point number grammar used by every attribute parser
RE_NUM = r"[-+]?(?:\d*\.\d+|\d+\.?)(?:[eE][-+]?\d+)?"

# Tags that become scene objects
SVG_VALID_TAG_NAMES = (
    "path",
    "circle",
    "polygon",
    "polyline",
    "ellipse",
    "rect",
    "line",
    "image",
    "text",
    "animate",
    "animateTransform",
)

# Containers whose content is never drawn in place
SVG_INVALID_ANCESTORS = ("pattern", "defs", "symbol", "metadata", "clipPath", "mask", "desc")

# Containers whose presentation attributes are inherited
SVG_VALID_PARENTS = ("svg", "g", "a", "switch")

SVG_VIEWBOX_ELEMENTS = ("svg", "symbol")

RE_SVG_VALID_TAG_NAMES = re.compile(r"^(?:" + "|".join(SVG_VALID_TAG_NAMES) + r")$")
RE_SVG_INVALID_ANCESTORS = re.compile(r"^(?:" + "|".join(SVG_INVALID_ANCESTORS) + r")$")
RE_SVG_VALID_PARENTS = re.compile(r"^(?:" + "|".join(SVG_VALID_PARENTS) + r")$")
RE_VIEWBOX_ATTR_VALUE = re.compile(
    r"^\s*(" + RE_NUM + r")[\s,]+(" + RE_NUM + r")[\s,]+(" + RE_NUM + r")[\s,]+(" + RE_NUM + r")\s*$"
)

# SVG attribute name -> scene object property name.
# Names that are missing here pass through unchanged.
ATTRIBUTES_MAP: dict[str, str] = {
    "cx": "center_x",
    "cy": "center_y",
    "x": "left",
    "y": "top",
    "r": "radius",
    "rx": "rx",
    "ry": "ry",
    "display": "visible",
    "visibility": "visible",
    "transform": "transform_matrix",
    "fill-opacity": "fill_opacity",
    "fill-rule": "fill_rule",
    "font-family": "font_family",
    "font-size": "font_size",
    "font-style": "font_style",
    "font-weight": "font_weight",
    "letter-spacing": "char_spacing",
    "paint-order": "paint_first",
    "stroke-dasharray": "stroke_dash_array",
    "stroke-dashoffset": "stroke_dash_offset",
    "stroke-linecap": "stroke_line_cap",
    "stroke-linejoin": "stroke_line_join",
    "stroke-miterlimit": "stroke_miter_limit",
    "stroke-opacity": "stroke_opacity",
    "stroke-width": "stroke_width",
    "text-decoration": "text_decoration",
    "text-anchor": "text_anchor",
    "opacity": "opacity",
    "clip-path": "clip_path",
    "clip-rule": "clip_rule",
    "vector-effect": "stroke_uniform",
    "image-rendering": "image_smoothing",
}

# Presentation attributes every drawable understands
SVG_PRESENTATION_ATTRIBUTES = (
    "transform",
    "fill",
    "fill-opacity",
    "fill-rule",
    "opacity",
    "stroke",
    "stroke-dasharray",
    "stroke-linecap",
    "stroke-dashoffset",
    "stroke-linejoin",
    "stroke-miterlimit",
    "stroke-opacity",
    "stroke-width",
    "id",
    "paint-order",
    "vector-effect",
    "visibility",
    "display",
    "clip-path",
    "clip-rule",
)

# Attributes that hold lengths/numbers rather than keywords or paints
NUMERIC_ATTRIBUTES = frozenset({
    "x", "y", "cx", "cy", "r", "rx", "ry", "width", "height",
    "x1", "y1", "x2", "y2",
    "opacity", "fill-opacity", "stroke-opacity", "stroke-width",
    "stroke-dashoffset", "stroke-miterlimit", "font-size", "letter-spacing",
})

# Attributes that are never inherited from a parent container
NON_INHERITED_ATTRIBUTES = frozenset({
    "id", "x", "y", "width", "height", "transform", "transform-origin",
    "clip-path", "viewBox", "preserveAspectRatio", "opacity",
})

# Unit conversions to CSS pixels
DPI = 96.0
UNIT_TO_PX: dict[str, float] = {
    "px": 1.0,
    "mm": DPI / 25.4,
    "cm": DPI / 2.54,
    "in": DPI,
    "pt": DPI / 72.0,
    "pc": DPI / 6.0,
}
DEFAULT_FONT_SIZE = 16.0
