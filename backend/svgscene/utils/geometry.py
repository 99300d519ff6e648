"""Leaf-node geometry helpers. No engine imports."""

from __future__ import annotations

import re

import numpy as np
from numpy.typing import NDArray
from shapely import affinity
from shapely.geometry import MultiPoint

from svgscene.utils.matrix import Mat2D

_NUMBER_RE = re.compile(r"[-+]?(?:\d*\.\d+|\d+\.?)(?:[eE][-+]?\d+)?")


def bbox(points: NDArray[np.float64]) -> tuple[float, float, float, float]:
    """Compute (xmin, ymin, xmax, ymax) bounding box."""
    if len(points) == 0:
        return (0.0, 0.0, 0.0, 0.0)
    return (
        float(np.min(points[:, 0])),
        float(np.min(points[:, 1])),
        float(np.max(points[:, 0])),
        float(np.max(points[:, 1])),
    )


def parse_points(value: str) -> NDArray[np.float64]:
    """Parse an SVG ``points`` list ("x1,y1 x2,y2 …") into an Nx2 array.

    A trailing odd coordinate is dropped.
    """
    numbers = [float(n) for n in _NUMBER_RE.findall(value or "")]
    if len(numbers) % 2:
        numbers = numbers[:-1]
    if not numbers:
        return np.empty((0, 2))
    return np.array(numbers, dtype=np.float64).reshape(-1, 2)


def transformed_box(
    left: float, top: float, width: float, height: float, matrix: Mat2D
) -> dict[str, tuple[float, float]]:
    """Corner coordinates (tl, tr, br, bl) of a box after ``matrix``."""
    a, b, c, d, e, f = matrix
    corners = MultiPoint(
        [(left, top), (left + width, top), (left + width, top + height), (left, top + height)]
    )
    moved = affinity.affine_transform(corners, [a, c, b, d, e, f])
    tl, tr, br, bl = [(p.x, p.y) for p in moved.geoms]
    return {"tl": tl, "tr": tr, "br": br, "bl": bl}


def bounding_rect(corners: dict[str, tuple[float, float]]) -> tuple[float, float, float, float]:
    """Axis-aligned (left, top, width, height) around a set of corners."""
    pts = np.array(list(corners.values()), dtype=np.float64)
    xmin, ymin, xmax, ymax = bbox(pts)
    return (xmin, ymin, xmax - xmin, ymax - ymin)
