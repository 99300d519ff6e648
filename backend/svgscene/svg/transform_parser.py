"""Parser for the SVG ``transform`` mini-language and ``transform-origin``.

http://www.w3.org/TR/SVG/coords.html#TransformAttribute
"""

from __future__ import annotations

import logging
import re

from svgscene.svg.constants import RE_NUM
from svgscene.utils.matrix import (
    IDENTITY_MATRIX,
    Mat2D,
    create_rotate_matrix,
    create_scale_matrix,
    create_skew_x_matrix,
    create_skew_y_matrix,
    create_translate_matrix,
    multiply_transform_matrix_array,
)

logger = logging.getLogger(__name__)

_P = f"({RE_NUM})"
_SKEW_X = rf"(skewX)\({_P}\)"
_SKEW_Y = rf"(skewY)\({_P}\)"
_ROTATE = rf"(rotate)\({_P}(?: {_P} {_P})?\)"
_SCALE = rf"(scale)\({_P}(?: {_P})?\)"
_TRANSLATE = rf"(translate)\({_P}(?: {_P})?\)"
_MATRIX = rf"(matrix)\({_P} {_P} {_P} {_P} {_P} {_P}\)"
_TRANSFORM = f"(?:{_MATRIX}|{_TRANSLATE}|{_ROTATE}|{_SCALE}|{_SKEW_X}|{_SKEW_Y})"

_TRANSFORM_RE = re.compile(_TRANSFORM)
_TRANSFORM_LIST_RE = re.compile(rf"^\s*(?:(?:{_TRANSFORM}\s*)*)?\s*$")

_NUM_RE = re.compile(f"({RE_NUM})")
_PAREN_SPACE_RE = re.compile(r"\s*([()])\s*")
_ORIGIN_SPLIT_RE = re.compile(r"[\s,]+")
_ORIGIN_TOKEN_RE = re.compile(rf"^{RE_NUM}(?:px)?$")


def cleanup_svg_attribute(value: str) -> str:
    """Pad numbers with spaces, turn commas into spaces, collapse runs of whitespace."""
    value = _NUM_RE.sub(r" \1 ", value)
    value = value.replace(",", " ")
    return re.sub(r"\s+", " ", value)


def parse_transform_attribute(value: str | None) -> Mat2D:
    """Evaluate a transform list into a single affine matrix.

    Operators compose in textual order, ``M = M1 · M2 · … · Mn``. An empty
    value, or one that does not match the transform-list grammar, gives the
    identity matrix.
    """
    if not value:
        return IDENTITY_MATRIX
    cleaned = _PAREN_SPACE_RE.sub(r"\1", cleanup_svg_attribute(value))
    if not _TRANSFORM_LIST_RE.match(cleaned):
        logger.debug("Ignoring malformed transform %r", value)
        return IDENTITY_MATRIX

    matrices: list[Mat2D] = []
    for match in _TRANSFORM_RE.finditer(cleaned):
        operation, *raw_args = [g for g in match.groups() if g is not None]
        args = [float(a) for a in raw_args]

        if operation == "translate":
            matrix = create_translate_matrix(args[0], args[1] if len(args) > 1 else 0.0)
        elif operation == "rotate":
            center = (args[1], args[2]) if len(args) == 3 else (0.0, 0.0)
            matrix = create_rotate_matrix(args[0], center)
        elif operation == "scale":
            matrix = create_scale_matrix(args[0], args[1] if len(args) > 1 else None)
        elif operation == "skewX":
            matrix = create_skew_x_matrix(args[0])
        elif operation == "skewY":
            matrix = create_skew_y_matrix(args[0])
        elif operation == "matrix":
            matrix = (args[0], args[1], args[2], args[3], args[4], args[5])
        else:
            continue
        matrices.append(matrix)

    return multiply_transform_matrix_array(matrices)


def parse_transform_origin_attribute(value: str | None) -> dict[str, float]:
    """Parse ``transform-origin`` ("10 20" or "10,20") into origin_x/origin_y.

    Anything but two or more numeric tokens gives an empty dict, leaving the
    caller's defaults in place.
    """
    if not value:
        return {}
    tokens = [t for t in _ORIGIN_SPLIT_RE.split(value.strip()) if t]
    if len(tokens) < 2 or not all(_ORIGIN_TOKEN_RE.match(t) for t in tokens):
        return {}
    return {
        "origin_x": float(tokens[0].removesuffix("px")),
        "origin_y": float(tokens[1].removesuffix("px")),
    }
