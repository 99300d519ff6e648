"""Group — a container of scene objects. Used for multi-shape clip paths."""

from __future__ import annotations

from typing import Any, ClassVar

from svgscene.shapes.class_registry import register
from svgscene.shapes.object import SceneObject


@register()
class Group(SceneObject):
    type: ClassVar[str] = "Group"
    own_defaults: ClassVar[dict[str, Any]] = {"objects": [], "fill": None}

    def __init__(self, objects: list[SceneObject] | None = None, **options: Any) -> None:
        super().__init__(**options)
        self.objects = list(objects or [])
        for obj in self.objects:
            obj.parent = self
        self._set_box_from_objects()

    def _set_box_from_objects(self) -> None:
        boxes = [obj.get_bounding_rect() for obj in self.objects]
        if not boxes:
            return
        left = min(b["left"] for b in boxes)
        top = min(b["top"] for b in boxes)
        right = max(b["left"] + b["width"] for b in boxes)
        bottom = max(b["top"] + b["height"] for b in boxes)
        self.left, self.top = left, top
        self.width, self.height = right - left, bottom - top

    def to_object(self, properties_to_include: tuple[str, ...] = ()) -> dict[str, Any]:
        data = super().to_object(properties_to_include)
        data["objects"] = [obj.to_object() for obj in self.objects]
        return data
