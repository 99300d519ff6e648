"""Path — ``<path d="...">`` parsed with svgpathtools."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from typing import Any, ClassVar

from svgpathtools import Path as PathData
from svgpathtools import parse_path

from svgscene.shapes.class_registry import register
from svgscene.shapes.object import SceneObject
from svgscene.svg.attributes import ParentMap, parse_attributes
from svgscene.svg.constants import SVG_PRESENTATION_ATTRIBUTES


@register(svg_tags=["path"])
class Path(SceneObject):
    type: ClassVar[str] = "Path"
    ATTRIBUTE_NAMES: ClassVar[tuple[str, ...]] = (*SVG_PRESENTATION_ATTRIBUTES, "d")

    def __init__(self, path_data: str = "", **options: Any) -> None:
        super().__init__(path_data=path_data, **options)

    def _set(self, key: str, value: Any) -> None:
        super()._set(key, value)
        if key == "path_data":
            self.path: PathData = parse_path(value or "")
            self._set_box_from_path()

    def _set_box_from_path(self) -> None:
        if len(self.path) == 0:
            self.left = self.top = self.width = self.height = 0.0
            return
        xmin, xmax, ymin, ymax = self.path.bbox()
        self.left, self.top = float(xmin), float(ymin)
        self.width, self.height = float(xmax - xmin), float(ymax - ymin)

    @classmethod
    async def from_element(cls, element: ET.Element, options: dict[str, Any], parents: ParentMap) -> Path:
        attrs = parse_attributes(element, cls.ATTRIBUTE_NAMES, parents)
        return cls(path_data=attrs.pop("d", ""), **attrs)

    def to_object(self, properties_to_include: tuple[str, ...] = ()) -> dict[str, Any]:
        return super().to_object(("path_data", *properties_to_include))
