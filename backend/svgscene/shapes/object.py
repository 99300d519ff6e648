"""SceneObject — base of every parsed drawable.

Geometry model:
    ``left``/``top``/``width``/``height`` describe the untransformed box in the
    object's own user space. The own transform is decomposed into ``angle``,
    ``scale_x``/``scale_y``, ``skew_x``/``skew_y``, ``flip_x``/``flip_y`` and
    ``translate_x``/``translate_y``, applied around the pivot
    (``origin_x``, ``origin_y``):

        M = T(origin) · T(translate) · R(angle) · S(scale, flip) · skewX · skewY · T(-origin)

    ``set_coords()`` caches the transformed corners (``a_coords``) and the
    axis-aligned bounding rect of the result.
"""

from __future__ import annotations

import copy
import logging
import weakref
import xml.etree.ElementTree as ET
from dataclasses import asdict, dataclass
from typing import Any, ClassVar

from svgscene.shapes.animatable import AnimatableObject
from svgscene.shapes.class_registry import register
from svgscene.svg.attributes import ParentMap
from svgscene.svg.constants import SVG_PRESENTATION_ATTRIBUTES
from svgscene.utils.geometry import bounding_rect, transformed_box
from svgscene.utils.matrix import (
    Mat2D,
    compose_matrix,
    create_translate_matrix,
    multiply_transform_matrix_array,
    qr_decompose,
    transform_point,
)

logger = logging.getLogger(__name__)


@dataclass
class Shadow:
    color: str = "rgb(0,0,0)"
    blur: float = 0.0
    offset_x: float = 0.0
    offset_y: float = 0.0


@register()
class SceneObject(AnimatableObject):
    type: ClassVar[str] = "SceneObject"

    # SVG attributes read by ``from_element``
    ATTRIBUTE_NAMES: ClassVar[tuple[str, ...]] = SVG_PRESENTATION_ATTRIBUTES

    own_defaults: ClassVar[dict[str, Any]] = {
        "id": None,
        "left": 0.0,
        "top": 0.0,
        "width": 0.0,
        "height": 0.0,
        "origin_x": 0.0,
        "origin_y": 0.0,
        "translate_x": 0.0,
        "translate_y": 0.0,
        "angle": 0.0,
        "scale_x": 1.0,
        "scale_y": 1.0,
        "skew_x": 0.0,
        "skew_y": 0.0,
        "flip_x": False,
        "flip_y": False,
        "fill": "rgb(0,0,0)",
        "fill_rule": "nonzero",
        "stroke": None,
        "stroke_width": 1.0,
        "stroke_dash_array": None,
        "stroke_dash_offset": 0.0,
        "stroke_line_cap": "butt",
        "stroke_line_join": "miter",
        "stroke_miter_limit": 4.0,
        "stroke_uniform": False,
        "paint_first": "fill",
        "opacity": 1.0,
        "visible": True,
        "background_color": "",
        "shadow": None,
        "clip_path": None,
    }

    # Properties copied into ``to_object``
    state_properties: ClassVar[tuple[str, ...]] = (
        "id",
        "left",
        "top",
        "width",
        "height",
        "origin_x",
        "origin_y",
        "translate_x",
        "translate_y",
        "angle",
        "scale_x",
        "scale_y",
        "skew_x",
        "skew_y",
        "flip_x",
        "flip_y",
        "fill",
        "fill_rule",
        "stroke",
        "stroke_width",
        "stroke_dash_array",
        "stroke_line_cap",
        "stroke_line_join",
        "stroke_miter_limit",
        "opacity",
        "visible",
        "background_color",
    )

    @classmethod
    def get_defaults(cls) -> dict[str, Any]:
        defaults: dict[str, Any] = {}
        for klass in reversed(cls.__mro__):
            defaults.update(klass.__dict__.get("own_defaults", {}))
        return defaults

    def __init__(self, **options: Any) -> None:
        self._parent_ref: weakref.ref[SceneObject] | None = None
        self.parent_index: int | None = None
        self.a_coords: dict[str, tuple[float, float]] = {}
        self.bounding: tuple[float, float, float, float] = (0.0, 0.0, 0.0, 0.0)
        for key, value in self.get_defaults().items():
            setattr(self, key, copy.copy(value))
        matrix = options.pop("transform_matrix", None)
        self.set(options)
        if matrix is not None:
            self.apply_transform(matrix)

    @classmethod
    async def from_element(
        cls, element: ET.Element, options: dict[str, Any], parents: ParentMap
    ) -> SceneObject:
        raise NotImplementedError(f"{cls.__name__} cannot be built from SVG")

    # --- properties ---

    def set(self, key: str | dict[str, Any], value: Any = None) -> SceneObject:
        if isinstance(key, dict):
            for name, item in key.items():
                self._set(name, item)
        else:
            self._set(key, value)
        return self

    def _set(self, key: str, value: Any) -> None:
        if key == "shadow" and isinstance(value, dict):
            value = Shadow(**value)
        setattr(self, key, value)

    def get(self, key: str) -> Any:
        return getattr(self, key)

    @property
    def parent(self) -> SceneObject | None:
        return self._parent_ref() if self._parent_ref is not None else None

    @parent.setter
    def parent(self, value: SceneObject | None) -> None:
        self._parent_ref = weakref.ref(value) if value is not None else None

    @property
    def center_x(self) -> float:
        return self.left + self.width / 2

    @center_x.setter
    def center_x(self, value: float) -> None:
        self.left = value - self.width / 2

    @property
    def center_y(self) -> float:
        return self.top + self.height / 2

    @center_y.setter
    def center_y(self, value: float) -> None:
        self.top = value - self.height / 2

    def is_type(self, *types: str) -> bool:
        return type(self).type in types

    # --- transform ---

    def calc_own_matrix(self) -> Mat2D:
        """Own transform: T(origin) · compose(...) · T(-origin)."""
        composed = compose_matrix(
            translate_x=self.translate_x,
            translate_y=self.translate_y,
            angle=self.angle,
            scale_x=self.scale_x,
            scale_y=self.scale_y,
            skew_x=self.skew_x,
            skew_y=self.skew_y,
            flip_x=self.flip_x,
            flip_y=self.flip_y,
        )
        if not self.origin_x and not self.origin_y:
            return composed
        return multiply_transform_matrix_array(
            [
                create_translate_matrix(self.origin_x, self.origin_y),
                composed,
                create_translate_matrix(-self.origin_x, -self.origin_y),
            ]
        )

    def apply_transform(self, matrix: Mat2D) -> None:
        """Replace the decomposed transform so that ``calc_own_matrix() == matrix``."""
        if self.origin_x or self.origin_y:
            matrix = multiply_transform_matrix_array(
                [
                    create_translate_matrix(-self.origin_x, -self.origin_y),
                    matrix,
                    create_translate_matrix(self.origin_x, self.origin_y),
                ]
            )
        decomposed = qr_decompose(matrix)
        self.flip_x = False
        self.flip_y = False
        for key, value in decomposed.items():
            setattr(self, key, value)

    @property
    def transform_matrix(self) -> Mat2D:
        return self.calc_own_matrix()

    @transform_matrix.setter
    def transform_matrix(self, value: Mat2D) -> None:
        self.apply_transform(value)

    def set_coords(self) -> None:
        self.a_coords = transformed_box(self.left, self.top, self.width, self.height, self.calc_own_matrix())
        self.bounding = bounding_rect(self.a_coords)

    def get_center_point(self) -> tuple[float, float]:
        """Box center after the own transform."""
        return transform_point(self.center_x, self.center_y, self.calc_own_matrix())

    def get_bounding_rect(self) -> dict[str, float]:
        if not self.a_coords:
            self.set_coords()
        left, top, width, height = self.bounding
        return {"left": left, "top": top, "width": width, "height": height}

    # --- serialization ---

    def to_object(self, properties_to_include: tuple[str, ...] = ()) -> dict[str, Any]:
        data: dict[str, Any] = {"type": type(self).type}
        for name in (*self.state_properties, *properties_to_include):
            value = getattr(self, name, None)
            if isinstance(value, tuple):
                value = list(value)
            data[name] = value
        data["shadow"] = asdict(self.shadow) if isinstance(self.shadow, Shadow) else None
        data["clip_path"] = self.clip_path.to_object() if isinstance(self.clip_path, SceneObject) else None
        return data

    def __repr__(self) -> str:
        return f"<{type(self).type} id={self.id!r} left={self.left:g} top={self.top:g}>"
