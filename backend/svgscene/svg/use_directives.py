"""Inline ``<use>`` references so every drawable exists in place."""

from __future__ import annotations

import copy
import logging
import re
import xml.etree.ElementTree as ET

from svgscene.config import settings
from svgscene.svg.attributes import build_parent_map, get_attribute, get_tag_name, parse_unit
from svgscene.svg.constants import XLINK_NS
from svgscene.svg.viewbox import apply_viewbox_transform

logger = logging.getLogger(__name__)

INSTANTIATED_BY_USE = "instantiated_by_use"

_SKIP_ATTRIBUTES = {"x", "y", "xlink:href", "href", f"{{{XLINK_NS}}}href", "transform"}
_VIEWPORT_ATTRIBUTES = {"viewBox", "width", "height", "preserveAspectRatio", "x", "y"}
_URL_REF_RE = re.compile(r"^\s*url\(\s*['\"]?#([^'\")]+)['\"]?\s*\)\s*$")


def url_reference(value: str | None) -> str | None:
    """``url(#clip)`` -> ``clip``."""
    if not value:
        return None
    match = _URL_REF_RE.match(value)
    return match.group(1) if match else None


def _index_ids(root: ET.Element) -> dict[str, ET.Element]:
    return {el.get("id"): el for el in root.iter() if el.get("id")}


def _merge_style(use_style: str, target_style: str) -> str:
    declarations: dict[str, str] = {}
    for style in (use_style, target_style):
        for chunk in style.split(";"):
            if ":" in chunk:
                name, value = chunk.split(":", 1)
                if name.strip():
                    declarations[name.strip()] = value.strip()
    return ";".join(f"{name}:{value}" for name, value in declarations.items())


def _expand_use(use: ET.Element, ids: dict[str, ET.Element], parents: dict[ET.Element, ET.Element]) -> bool:
    """Replace one ``<use>`` by a copy of its target. Returns False if it was dropped."""
    parent = parents.get(use)
    if parent is None:
        return False
    href = get_attribute(use, "xlink:href") or use.get("href") or ""
    target = ids.get(href[1:]) if href.startswith("#") else None
    if target is None:
        logger.warning("Dropping <use> with unresolvable reference %r", href)
        parent.remove(use)
        return False

    clone = copy.deepcopy(target)
    clone.attrib.pop("id", None)
    target_attrs = dict(target.attrib)
    x = parse_unit(use.get("x")) or 0.0
    y = parse_unit(use.get("y")) or 0.0
    tag = get_tag_name(clone)
    if tag in ("svg", "symbol"):
        # viewport content becomes a plain group
        apply_viewbox_transform(clone, {clone: parent})
        namespace = clone.tag[: clone.tag.index("}") + 1] if clone.tag.startswith("{") else ""
        kept = {k: v for k, v in clone.attrib.items() if k not in _VIEWPORT_ATTRIBUTES}
        group = ET.Element(f"{namespace}g", kept)
        group.extend(list(clone))
        clone = group

    transform = f"{use.get('transform') or ''} translate({x}, {y}) {clone.get('transform') or ''}"

    for name, value in use.attrib.items():
        if name in _SKIP_ATTRIBUTES or not value:
            continue
        if name == "clip-path":
            ref = url_reference(value)
            if ref is None or ref not in ids:
                logger.debug("Ignoring unresolvable clip-path %r on <use>", value)
                continue
        if name == "style":
            clone.set("style", _merge_style(value, target_attrs.get("style", "")))
        elif not target_attrs.get(name):
            clone.set(name, value)

    clone.set("transform", transform.strip())
    clone.set(INSTANTIATED_BY_USE, "1")

    index = list(parent).index(use)
    parent.remove(use)
    parent.insert(index, clone)
    return True


def parse_use_directives(root: ET.Element, max_depth: int | None = None) -> int:
    """Expand every ``<use>`` under ``root`` in place.

    References to missing ids drop the ``<use>``; an unresolvable
    ``clip-path`` on a ``<use>`` is ignored. Copies that bring in further
    ``<use>`` elements are expanded again, up to ``max_depth`` passes.
    Returns the number of expanded references.
    """
    max_depth = settings.max_use_depth if max_depth is None else max_depth
    expanded = 0
    for _ in range(max_depth):
        uses = [el for el in root.iter() if get_tag_name(el) == "use"]
        if not uses:
            break
        ids = _index_ids(root)
        parents = build_parent_map(root)
        for use in uses:
            if _expand_use(use, ids, parents):
                expanded += 1
    else:
        leftovers = [el for el in root.iter() if get_tag_name(el) == "use"]
        if leftovers:
            parents = build_parent_map(root)
            for use in leftovers:
                parents[use].remove(use)
            logger.warning("Dropped %d <use> elements nested deeper than %d", len(leftovers), max_depth)
    return expanded
