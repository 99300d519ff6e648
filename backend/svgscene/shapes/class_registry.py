"""Class registry — scene object classes register by type name and SVG tag.

Usage:
    @register(svg_tags=["rect"])
    class Rect(SceneObject):
        type = "Rect"

The document parser looks classes up by tag name, so supporting a new element
means creating one class with the decorator. Nothing else changes.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable, TypeVar

if TYPE_CHECKING:
    from svgscene.shapes.object import SceneObject

logger = logging.getLogger(__name__)

C = TypeVar("C", bound=type)


class ClassRegistry:
    """Singleton registry of scene object classes."""

    def __init__(self) -> None:
        self._classes: dict[str, type[SceneObject]] = {}
        self._svg_classes: dict[str, type[SceneObject]] = {}

    def set_class(self, cls: type[SceneObject], class_type: str | None = None) -> None:
        name = class_type or cls.type
        if name in self._classes and self._classes[name] is not cls:
            raise ValueError(f"Duplicate class type: {name}")
        self._classes[name] = cls

    def get_class(self, class_type: str) -> type[SceneObject]:
        return self._classes[class_type]

    def set_svg_class(self, cls: type[SceneObject], svg_tag: str) -> None:
        if svg_tag in self._svg_classes and self._svg_classes[svg_tag] is not cls:
            raise ValueError(f"Duplicate SVG tag registration: {svg_tag}")
        self._svg_classes[svg_tag] = cls
        logger.debug("Registered %s for <%s>", cls.__name__, svg_tag)

    def get_svg_class(self, svg_tag: str) -> type[SceneObject] | None:
        return self._svg_classes.get(svg_tag)

    def has_svg_class(self, svg_tag: str) -> bool:
        return svg_tag in self._svg_classes

    @property
    def svg_tags(self) -> list[str]:
        return sorted(self._svg_classes)


# Module-level singleton
_registry = ClassRegistry()


def get_class_registry() -> ClassRegistry:
    return _registry


def register(*, svg_tags: list[str] | None = None) -> Callable[[C], C]:
    """Decorator to register a scene object class (and the tags it parses)."""

    def decorator(cls: C) -> C:
        _registry.set_class(cls)  # type: ignore[arg-type]
        for tag in svg_tags or []:
            _registry.set_svg_class(cls, tag)  # type: ignore[arg-type]
        return cls

    return decorator
