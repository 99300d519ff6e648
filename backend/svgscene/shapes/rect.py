"""Rect — ``<rect>`` with optional rounded corners."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from typing import Any, ClassVar

from svgscene.shapes.class_registry import register
from svgscene.shapes.object import SceneObject
from svgscene.svg.attributes import ParentMap, parse_attributes
from svgscene.svg.constants import SVG_PRESENTATION_ATTRIBUTES


@register(svg_tags=["rect"])
class Rect(SceneObject):
    type: ClassVar[str] = "Rect"
    ATTRIBUTE_NAMES: ClassVar[tuple[str, ...]] = (
        *SVG_PRESENTATION_ATTRIBUTES, "x", "y", "rx", "ry", "width", "height",
    )
    own_defaults: ClassVar[dict[str, Any]] = {"rx": 0.0, "ry": 0.0}

    @classmethod
    async def from_element(cls, element: ET.Element, options: dict[str, Any], parents: ParentMap) -> Rect:
        attrs = parse_attributes(element, cls.ATTRIBUTE_NAMES, parents)
        left = attrs.pop("x", 0.0)
        top = attrs.pop("y", 0.0)
        # a single corner radius applies to both axes
        rx = attrs.pop("rx", None)
        ry = attrs.pop("ry", None)
        attrs["rx"] = rx if rx is not None else (ry or 0.0)
        attrs["ry"] = ry if ry is not None else (rx or 0.0)
        return cls(left=left, top=top, **attrs)

    def to_object(self, properties_to_include: tuple[str, ...] = ()) -> dict[str, Any]:
        return super().to_object(("rx", "ry", *properties_to_include))
