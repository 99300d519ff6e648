"""Line — ``<line>``; the box spans both endpoints."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from typing import Any, ClassVar

from svgscene.shapes.class_registry import register
from svgscene.shapes.object import SceneObject
from svgscene.svg.attributes import ParentMap, parse_attributes
from svgscene.svg.constants import SVG_PRESENTATION_ATTRIBUTES

_ENDPOINTS = ("x1", "y1", "x2", "y2")


@register(svg_tags=["line"])
class Line(SceneObject):
    type: ClassVar[str] = "Line"
    ATTRIBUTE_NAMES: ClassVar[tuple[str, ...]] = (*SVG_PRESENTATION_ATTRIBUTES, *_ENDPOINTS)
    own_defaults: ClassVar[dict[str, Any]] = {"x1": 0.0, "y1": 0.0, "x2": 0.0, "y2": 0.0, "fill": None}

    def _set(self, key: str, value: Any) -> None:
        super()._set(key, value)
        if key in _ENDPOINTS:
            self._set_box_from_endpoints()

    def _set_box_from_endpoints(self) -> None:
        self.left = min(self.x1, self.x2)
        self.top = min(self.y1, self.y2)
        self.width = abs(self.x2 - self.x1)
        self.height = abs(self.y2 - self.y1)

    @classmethod
    async def from_element(cls, element: ET.Element, options: dict[str, Any], parents: ParentMap) -> Line:
        attrs = parse_attributes(element, cls.ATTRIBUTE_NAMES, parents)
        for name in ("left", "top", "width", "height"):
            attrs.pop(name, None)
        return cls(**attrs)

    def to_object(self, properties_to_include: tuple[str, ...] = ()) -> dict[str, Any]:
        return super().to_object((*_ENDPOINTS, *properties_to_include))
