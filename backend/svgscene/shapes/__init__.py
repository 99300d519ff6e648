"""Scene object classes. Importing this package registers every SVG tag."""

from svgscene.shapes.animatable import AnimatableObject
from svgscene.shapes.animate_element import AnimateElement, AnimateTransformElement
from svgscene.shapes.circle import Circle, Ellipse
from svgscene.shapes.class_registry import ClassRegistry, get_class_registry, register
from svgscene.shapes.group import Group
from svgscene.shapes.line import Line
from svgscene.shapes.object import SceneObject, Shadow
from svgscene.shapes.path import Path
from svgscene.shapes.poly import Polygon, Polyline
from svgscene.shapes.rect import Rect

__all__ = [
    "AnimatableObject",
    "AnimateElement",
    "AnimateTransformElement",
    "Circle",
    "Ellipse",
    "ClassRegistry",
    "get_class_registry",
    "register",
    "Group",
    "Line",
    "SceneObject",
    "Shadow",
    "Path",
    "Polygon",
    "Polyline",
    "Rect",
]
