"""Polyline and Polygon from a ``points`` list."""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from typing import Any, ClassVar

import numpy as np

from svgscene.shapes.class_registry import register
from svgscene.shapes.object import SceneObject
from svgscene.svg.attributes import ParentMap, parse_attributes
from svgscene.svg.constants import SVG_PRESENTATION_ATTRIBUTES
from svgscene.utils.geometry import bbox, parse_points

logger = logging.getLogger(__name__)


@register(svg_tags=["polyline"])
class Polyline(SceneObject):
    type: ClassVar[str] = "Polyline"
    ATTRIBUTE_NAMES: ClassVar[tuple[str, ...]] = (*SVG_PRESENTATION_ATTRIBUTES, "points")
    own_defaults: ClassVar[dict[str, Any]] = {"points": []}

    def _set(self, key: str, value: Any) -> None:
        if key == "points":
            value = [(float(x), float(y)) for x, y in value]
            super()._set(key, value)
            self._set_box_from_points()
            return
        super()._set(key, value)

    def _set_box_from_points(self) -> None:
        xmin, ymin, xmax, ymax = bbox(np.array(self.points, dtype=np.float64).reshape(-1, 2))
        self.left, self.top = xmin, ymin
        self.width, self.height = xmax - xmin, ymax - ymin

    @classmethod
    async def from_element(cls, element: ET.Element, options: dict[str, Any], parents: ParentMap) -> Polyline:
        attrs = parse_attributes(element, cls.ATTRIBUTE_NAMES, parents)
        points = parse_points(attrs.pop("points", ""))
        if len(points) == 0:
            logger.debug("<%s> without points", element.tag)
        return cls(points=[tuple(p) for p in points.tolist()], **attrs)

    def to_object(self, properties_to_include: tuple[str, ...] = ()) -> dict[str, Any]:
        data = super().to_object(properties_to_include)
        data["points"] = [list(p) for p in self.points]
        return data


@register(svg_tags=["polygon"])
class Polygon(Polyline):
    type: ClassVar[str] = "Polygon"
