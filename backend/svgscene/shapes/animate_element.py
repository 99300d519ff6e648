"""``<animate>`` / ``<animateTransform>`` directives.

These parse into non-drawing scene objects. The document parser later hands
each one to an :class:`~svgscene.animation.sequencer.AnimationSequence`
driving a property of the directive's parent object.
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from typing import Any, ClassVar

from svgscene.shapes.class_registry import register
from svgscene.shapes.object import SceneObject
from svgscene.svg.animation_attributes import (
    convert_attribute_names,
    parse_clock_value,
    parse_float,
    parse_from_to_by_attribute,
    parse_repeat_count,
    parse_values_attribute,
)
from svgscene.svg.attributes import ParentMap
from svgscene.svg.color import set_stroke_fill_opacity
from svgscene.svg.transform_parser import parse_transform_attribute

logger = logging.getLogger(__name__)

TRANSFORM_TYPES = ("translate", "scale", "rotate", "skewX", "skewY")


@register(svg_tags=["animate"])
class AnimateElement(SceneObject):
    type: ClassVar[str] = "AnimateElement"
    own_defaults: ClassVar[dict[str, Any]] = {
        "attribute_name": None,
        "values": [],
        "dur": 0.0,
        "repeat_count": 1,
        "visible": False,
        "fill": None,
    }

    @classmethod
    def _parse_directive(cls, element: ET.Element) -> dict[str, Any]:
        values = parse_values_attribute(element) or parse_from_to_by_attribute(element)
        return {
            "id": element.get("id"),
            "attribute_name": convert_attribute_names(element).get("attribute_name"),
            "values": values.get("values", []),
            "dur": parse_clock_value(element.get("dur")),
            "repeat_count": parse_repeat_count(element.get("repeatCount")),
        }

    @classmethod
    async def from_element(
        cls, element: ET.Element, options: dict[str, Any], parents: ParentMap
    ) -> AnimateElement:
        return cls(**cls._parse_directive(element))

    @property
    def duration_ms(self) -> float:
        return self.dur * 1000.0

    def normalized_values(self, color_properties: tuple[str, ...] = ()) -> list[Any]:
        """Values ready to assign to the target property.

        Transform values become matrices and values of ``color_properties``
        go through paint normalization. Anything else is read as a leading
        number (``"10px"`` is 10.0); values without one are kept as strings.
        """
        key = self.attribute_name
        normalized: list[Any] = []
        for raw in self.values:
            if key == "transform_matrix":
                normalized.append(parse_transform_attribute(raw))
                continue
            if key.split(".")[-1] in color_properties:
                normalized.append(set_stroke_fill_opacity({key: raw})[key])
                continue
            number = parse_float(raw)
            if number is not None:
                normalized.append(number)
            else:
                normalized.append(set_stroke_fill_opacity({key: raw})[key])
        return normalized

    def to_object(self, properties_to_include: tuple[str, ...] = ()) -> dict[str, Any]:
        data = super().to_object(("attribute_name", "dur", "repeat_count", *properties_to_include))
        data["values"] = list(self.values)
        return data


@register(svg_tags=["animateTransform"])
class AnimateTransformElement(AnimateElement):
    """``<animateTransform type="rotate" values="0;90">`` animates ``transform_matrix``."""

    type: ClassVar[str] = "AnimateTransformElement"
    own_defaults: ClassVar[dict[str, Any]] = {"transform_type": "translate"}

    @classmethod
    async def from_element(
        cls, element: ET.Element, options: dict[str, Any], parents: ParentMap
    ) -> AnimateTransformElement:
        directive = cls._parse_directive(element)
        transform_type = element.get("type") or "translate"
        if transform_type not in TRANSFORM_TYPES:
            logger.warning("Unknown animateTransform type %r, using translate", transform_type)
            transform_type = "translate"
        directive["attribute_name"] = "transform_matrix"
        directive["values"] = [f"{transform_type}({value})" for value in directive["values"]]
        return cls(transform_type=transform_type, **directive)

    def to_object(self, properties_to_include: tuple[str, ...] = ()) -> dict[str, Any]:
        return super().to_object(("transform_type", *properties_to_include))
