"""ElementsParser — turns filtered SVG elements into scene objects.

Each element is instantiated through the class registered for its tag.
Elements without a class, or whose construction fails, leave a ``None`` slot
so results stay index-aligned with the input.
"""

from __future__ import annotations

import asyncio
import logging
import xml.etree.ElementTree as ET
from typing import Any, Callable

from svgscene.shapes import Group, SceneObject
from svgscene.shapes.class_registry import ClassRegistry, get_class_registry
from svgscene.svg.attributes import build_parent_map, get_tag_name, parse_style_attribute
from svgscene.svg.transform_parser import parse_transform_attribute
from svgscene.svg.use_directives import url_reference
from svgscene.utils.matrix import multiply_transform_matrices

logger = logging.getLogger(__name__)

Reviver = Callable[[ET.Element, SceneObject], Any]
ClipPaths = dict[str, list[ET.Element]]

ORIGINAL_TRANSFORM = "originalTransform"


class ElementsParser:
    def __init__(
        self,
        elements: list[ET.Element],
        options: dict[str, Any],
        reviver: Reviver | None,
        doc: ET.Element,
        clip_paths: ClipPaths,
        class_registry: ClassRegistry | None = None,
    ) -> None:
        self.elements = elements
        self.options = options
        self.reviver = reviver
        self.doc = doc
        self.clip_paths = clip_paths
        self.class_registry = class_registry or get_class_registry()
        self.parents = build_parent_map(doc)
        self._clip_elements = {
            el.get("id"): el for el in doc.iter() if get_tag_name(el) == "clipPath" and el.get("id")
        }

    async def parse(self) -> list[SceneObject | None]:
        return list(await asyncio.gather(*(self.create_object(el) for el in self.elements)))

    async def _instantiate(self, element: ET.Element) -> SceneObject | None:
        tag = get_tag_name(element)
        klass = self.class_registry.get_svg_class(tag)
        if klass is None:
            logger.debug("No scene class registered for <%s>", tag)
            return None
        return await klass.from_element(element, self.options, self.parents)

    async def create_object(self, element: ET.Element) -> SceneObject | None:
        try:
            obj = await self._instantiate(element)
            if obj is None:
                return None
            await self.resolve_clip_path(obj, element)
            obj.set_coords()
        except Exception as e:
            logger.warning("Failed to build <%s id=%r>: %s", get_tag_name(element), element.get("id"), e)
            return None
        if self.reviver is not None:
            try:
                self.reviver(element, obj)
            except Exception as e:
                logger.warning("Reviver failed on <%s id=%r>: %s", get_tag_name(element), element.get("id"), e)
        return obj

    async def resolve_clip_path(self, obj: SceneObject, element: ET.Element) -> None:
        """Replace a ``url(#id)`` clip reference with the clip geometry."""
        raw = parse_style_attribute(element).get("clip-path", element.get("clip-path"))
        clip_id = url_reference(raw)
        obj.clip_path = None
        if clip_id is None:
            return
        fragment = self.clip_paths.get(clip_id)
        if not fragment:
            logger.debug("clip-path %r not found", clip_id)
            return

        clip_element = self._clip_elements.get(clip_id)
        clip_matrix = parse_transform_attribute(
            clip_element.get(ORIGINAL_TRANSFORM) if clip_element is not None else None
        )
        shapes: list[SceneObject] = []
        for clip_el in fragment:
            shape = await self._instantiate(clip_el)
            if shape is None:
                continue
            shape.apply_transform(multiply_transform_matrices(clip_matrix, shape.calc_own_matrix()))
            shape.set_coords()
            shapes.append(shape)

        if not shapes:
            return
        obj.clip_path = shapes[0] if len(shapes) == 1 else Group(objects=shapes)


async def instantiate_elements(
    elements: list[ET.Element],
    options: dict[str, Any],
    reviver: Reviver | None,
    doc: ET.Element,
    clip_paths: ClipPaths,
    class_registry: ClassRegistry | None = None,
) -> list[SceneObject | None]:
    """Default instantiation step of the document parser."""
    return await ElementsParser(elements, options, reviver, doc, clip_paths, class_registry).parse()
