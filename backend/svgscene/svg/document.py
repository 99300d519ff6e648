"""SVG document parser — DOM in, scene graph out.

Pipeline:
    1. inline ``<use>`` references
    2. capture clip-path fragments (with their pre-viewport transforms)
    3. fold svg/symbol viewports into transforms
    4. keep drawable/animation elements outside non-rendered containers
    5. instantiate scene objects (index-aligned, failures become ``None``)
    6. link each object to its instantiated DOM parent
    7. start an animation sequence for every ``<animate>`` under an object
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from functools import partial
from typing import Any, Awaitable, Callable

from svgscene.animation.registry import AnimationRegistry
from svgscene.animation.sequencer import AnimationSequence, start_animation_sequence
from svgscene.shapes import AnimatableObject, AnimateElement, SceneObject
from svgscene.shapes.class_registry import ClassRegistry
from svgscene.svg.attributes import ParentMap, build_parent_map, get_tag_name
from svgscene.svg.constants import RE_SVG_INVALID_ANCESTORS, RE_SVG_VALID_TAG_NAMES
from svgscene.svg.elements_parser import (
    ORIGINAL_TRANSFORM,
    ClipPaths,
    Reviver,
    instantiate_elements,
)
from svgscene.svg.use_directives import INSTANTIATED_BY_USE, parse_use_directives
from svgscene.svg.viewbox import apply_viewbox_transform

logger = logging.getLogger(__name__)

Instantiator = Callable[
    [list[ET.Element], dict[str, Any], Reviver | None, ET.Element, ClipPaths],
    Awaitable[list[SceneObject | None]],
]


class SignalAbortedError(Exception):
    """Parsing was cancelled through an :class:`AbortSignal` before it began."""

    def __init__(self, context: str) -> None:
        super().__init__(f"{context} aborted")
        self.context = context


@dataclass
class AbortSignal:
    aborted: bool = False
    reason: str | None = None

    def abort(self, reason: str | None = None) -> None:
        self.aborted = True
        self.reason = reason


@dataclass
class ParsedNode:
    """Arena entry: one filtered element, its object and its parent's index."""

    index: int
    element: ET.Element
    result: SceneObject | None
    parent_index: int | None = None


@dataclass
class SVGParsingOutput:
    objects: list[SceneObject | None] = field(default_factory=list)
    elements: list[ET.Element] = field(default_factory=list)
    options: dict[str, Any] = field(default_factory=dict)
    all_elements: list[ET.Element] = field(default_factory=list)
    nodes: list[ParsedNode] = field(default_factory=list)
    sequences: list[AnimationSequence] = field(default_factory=list)


def create_empty_response() -> SVGParsingOutput:
    return SVGParsingOutput()


def is_valid_svg_tag(element: ET.Element) -> bool:
    return bool(RE_SVG_VALID_TAG_NAMES.match(get_tag_name(element)))


def has_invalid_ancestor(element: ET.Element, parents: ParentMap) -> bool:
    """True if a non-rendered container (defs, clipPath, …) encloses ``element``.

    Ancestors produced by ``<use>`` expansion are rendered in place and
    never count.
    """
    ancestor = parents.get(element)
    while ancestor is not None:
        if ancestor.get(INSTANTIATED_BY_USE) is None and RE_SVG_INVALID_ANCESTORS.match(get_tag_name(ancestor)):
            return True
        ancestor = parents.get(ancestor)
    return False


def collect_clip_paths(root: ET.Element, parents: ParentMap) -> ClipPaths:
    """Map each clipPath id to its drawable descendants, recording its transform."""
    clip_paths: ClipPaths = {}
    for element in root.iter():
        if get_tag_name(element) != "clipPath" or not element.get("id"):
            continue
        element.set(ORIGINAL_TRANSFORM, element.get("transform") or "")
        clip_paths[element.get("id")] = [el for el in element.iter() if el is not element and is_valid_svg_tag(el)]
    return clip_paths


def _link_nodes(elements: list[ET.Element], objects: list[SceneObject | None], parents: ParentMap) -> list[ParsedNode]:
    nodes = [ParsedNode(index=i, element=el, result=obj) for i, (el, obj) in enumerate(zip(elements, objects))]
    index_of = {el: i for i, el in enumerate(elements)}
    for node in nodes:
        parent_index = index_of.get(parents.get(node.element))
        if parent_index is None or nodes[parent_index].result is None:
            continue
        node.parent_index = parent_index
        if node.result is not None:
            node.result.parent = nodes[parent_index].result
            node.result.parent_index = parent_index
    return nodes


def _can_interpolate(target: AnimatableObject, key: str, values: list[Any]) -> bool:
    """Color and transform keys interpolate their own value types, anything else needs numbers."""
    if key == "transform_matrix" or key.split(".")[-1] in type(target).color_properties:
        return True
    return all(isinstance(value, float) for value in values)


def start_animations(nodes: list[ParsedNode], registry: AnimationRegistry | None = None) -> list[AnimationSequence]:
    """Start a sequence for every animation directive whose parent can animate."""
    sequences: list[AnimationSequence] = []
    for node in nodes:
        directive = node.result
        if not isinstance(directive, AnimateElement):
            continue
        target = directive.parent
        if not isinstance(target, AnimatableObject):
            continue
        if not directive.attribute_name:
            logger.debug("Skipping <%s> without attributeName", get_tag_name(node.element))
            continue
        key = directive.attribute_name
        try:
            values = directive.normalized_values(type(target).color_properties)
            if len(values) < 2:
                logger.debug("Skipping animation of %r with %d values", key, len(values))
                continue
            if not _can_interpolate(target, key, values):
                logger.debug("Skipping animation of %r: values %r are not numeric", key, directive.values)
                continue
            sequence = start_animation_sequence(
                target,
                key,
                values,
                duration_ms=directive.duration_ms,
                repeat_count=directive.repeat_count,
                registry=registry,
            )
        except Exception as e:
            logger.warning("Failed to start animation of %r on %r: %s", key, target, e)
            continue
        sequences.append(sequence)
    return sequences


async def parse_svg_document(
    doc: ET.Element | ET.ElementTree,
    reviver: Reviver | None = None,
    *,
    cross_origin: str | None = None,
    signal: AbortSignal | None = None,
    instantiate: Instantiator | None = None,
    class_registry: ClassRegistry | None = None,
    registry: AnimationRegistry | None = None,
) -> SVGParsingOutput:
    """Parse an SVG DOM into scene objects and start its animations.

    The tree is modified in place (``<use>`` expansion, viewport groups).
    """
    if signal is not None and signal.aborted:
        logger.info("%s", SignalAbortedError("parse_svg_document"))
        return create_empty_response()

    root = doc.getroot() if isinstance(doc, ET.ElementTree) else doc
    parse_use_directives(root)

    parents = build_parent_map(root)
    clip_paths = collect_clip_paths(root, parents)
    options: dict[str, Any] = {
        **apply_viewbox_transform(root, parents),
        "cross_origin": cross_origin,
        "signal": signal,
    }

    descendants = list(root.iter())[1:]
    parents = build_parent_map(root)
    for element in descendants:
        apply_viewbox_transform(element, parents)
    # viewport groups were inserted
    descendants = list(root.iter())[1:]
    parents = build_parent_map(root)

    elements = [el for el in descendants if is_valid_svg_tag(el) and not has_invalid_ancestor(el, parents)]
    if not elements:
        logger.info("SVG document has no drawable elements")
        return SVGParsingOutput(options=options, all_elements=descendants)

    if instantiate is None:
        instantiate = partial(instantiate_elements, class_registry=class_registry)
    objects = await instantiate(elements, options, reviver, root, clip_paths)
    if len(objects) != len(elements):
        raise ValueError(f"Instantiation returned {len(objects)} objects for {len(elements)} elements")

    nodes = _link_nodes(elements, objects, parents)
    sequences = start_animations(nodes, registry)
    logger.debug(
        "Parsed %d objects from %d elements (%d animation sequences)",
        sum(obj is not None for obj in objects),
        len(elements),
        len(sequences),
    )
    return SVGParsingOutput(
        objects=objects,
        elements=elements,
        options=options,
        all_elements=descendants,
        nodes=nodes,
        sequences=sequences,
    )


async def load_svg_from_string(text: str, reviver: Reviver | None = None, **options: Any) -> SVGParsingOutput:
    """Parse SVG markup. Malformed XML yields an empty result."""
    try:
        root = ET.fromstring(text)
    except ET.ParseError as e:
        logger.warning("Invalid SVG markup: %s", e)
        return create_empty_response()
    return await parse_svg_document(root, reviver, **options)
