"""svgscene — SVG scene graph parser with attribute-driven animation."""

from svgscene.animation import AnimationRegistry, get_animation_registry
from svgscene.svg.document import (
    AbortSignal,
    ParsedNode,
    SignalAbortedError,
    SVGParsingOutput,
    load_svg_from_string,
    parse_svg_document,
)
from svgscene.svg.transform_parser import parse_transform_attribute

__all__ = [
    "AnimationRegistry",
    "get_animation_registry",
    "AbortSignal",
    "ParsedNode",
    "SignalAbortedError",
    "SVGParsingOutput",
    "load_svg_from_string",
    "parse_svg_document",
    "parse_transform_attribute",
]
