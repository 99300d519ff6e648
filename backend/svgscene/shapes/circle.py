"""Circle and Ellipse.

Both keep their box centered: changing ``radius`` (or ``rx``/``ry``) resizes
around the current center, and ``center_x``/``center_y`` move the box.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from typing import Any, ClassVar

from svgscene.shapes.class_registry import register
from svgscene.shapes.object import SceneObject
from svgscene.svg.attributes import ParentMap, parse_attributes
from svgscene.svg.constants import SVG_PRESENTATION_ATTRIBUTES


@register(svg_tags=["circle"])
class Circle(SceneObject):
    type: ClassVar[str] = "Circle"
    ATTRIBUTE_NAMES: ClassVar[tuple[str, ...]] = (*SVG_PRESENTATION_ATTRIBUTES, "cx", "cy", "r")
    own_defaults: ClassVar[dict[str, Any]] = {"radius": 0.0}

    @property
    def radius(self) -> float:
        return self._radius

    @radius.setter
    def radius(self, value: float) -> None:
        cx, cy = self.center_x, self.center_y
        self._radius = float(value)
        self.width = self.height = 2 * self._radius
        self.center_x, self.center_y = cx, cy

    @classmethod
    async def from_element(cls, element: ET.Element, options: dict[str, Any], parents: ParentMap) -> Circle:
        attrs = parse_attributes(element, cls.ATTRIBUTE_NAMES, parents)
        radius = attrs.pop("r", 0.0)
        if radius < 0:
            raise ValueError(f"<circle> radius must not be negative, got {radius}")
        cx = attrs.pop("cx", 0.0)
        cy = attrs.pop("cy", 0.0)
        # radius first so the center lands on the sized box
        return cls(radius=radius, center_x=cx, center_y=cy, **attrs)

    def to_object(self, properties_to_include: tuple[str, ...] = ()) -> dict[str, Any]:
        return super().to_object(("radius", *properties_to_include))


@register(svg_tags=["ellipse"])
class Ellipse(SceneObject):
    type: ClassVar[str] = "Ellipse"
    ATTRIBUTE_NAMES: ClassVar[tuple[str, ...]] = (*SVG_PRESENTATION_ATTRIBUTES, "cx", "cy", "rx", "ry")
    own_defaults: ClassVar[dict[str, Any]] = {"rx": 0.0, "ry": 0.0}

    @property
    def rx(self) -> float:
        return self._rx

    @rx.setter
    def rx(self, value: float) -> None:
        cx = self.center_x
        self._rx = float(value)
        self.width = 2 * self._rx
        self.center_x = cx

    @property
    def ry(self) -> float:
        return self._ry

    @ry.setter
    def ry(self, value: float) -> None:
        cy = self.center_y
        self._ry = float(value)
        self.height = 2 * self._ry
        self.center_y = cy

    @classmethod
    async def from_element(cls, element: ET.Element, options: dict[str, Any], parents: ParentMap) -> Ellipse:
        attrs = parse_attributes(element, cls.ATTRIBUTE_NAMES, parents)
        rx = attrs.pop("rx", 0.0)
        ry = attrs.pop("ry", 0.0)
        cx = attrs.pop("cx", 0.0)
        cy = attrs.pop("cy", 0.0)
        return cls(rx=rx, ry=ry, center_x=cx, center_y=cy, **attrs)

    def to_object(self, properties_to_include: tuple[str, ...] = ()) -> dict[str, Any]:
        return super().to_object(("rx", "ry", *properties_to_include))
