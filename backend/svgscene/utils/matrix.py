"""2D affine matrix helpers. No engine imports.

Matrices are 6-tuples ``(a, b, c, d, e, f)`` standing for::

    | a c e |
    | b d f |
    | 0 0 1 |

Points are column vectors, so ``multiply_transform_matrices(m1, m2)`` applies
``m2`` first and ``m1`` second.
"""

from __future__ import annotations

import math
from collections.abc import Iterable
from typing import TypedDict

import numpy as np
from numpy.typing import NDArray

Mat2D = tuple[float, float, float, float, float, float]

IDENTITY_MATRIX: Mat2D = (1.0, 0.0, 0.0, 1.0, 0.0, 0.0)


class DecomposedTransform(TypedDict):
    angle: float
    scale_x: float
    scale_y: float
    skew_x: float
    skew_y: float
    translate_x: float
    translate_y: float


def decomposed_identity() -> DecomposedTransform:
    return {
        "angle": 0.0,
        "scale_x": 1.0,
        "scale_y": 1.0,
        "skew_x": 0.0,
        "skew_y": 0.0,
        "translate_x": 0.0,
        "translate_y": 0.0,
    }


def _to_array(m: Mat2D) -> NDArray[np.float64]:
    a, b, c, d, e, f = m
    return np.array([[a, c, e], [b, d, f], [0.0, 0.0, 1.0]], dtype=np.float64)


def _from_array(arr: NDArray[np.float64]) -> Mat2D:
    return (
        float(arr[0, 0]),
        float(arr[1, 0]),
        float(arr[0, 1]),
        float(arr[1, 1]),
        float(arr[0, 2]),
        float(arr[1, 2]),
    )


def _cos(degrees: float) -> float:
    """cos() that returns exact values on multiples of 90 degrees."""
    if degrees % 90 == 0:
        return (1.0, 0.0, -1.0, 0.0)[int(degrees // 90) % 4]
    return math.cos(math.radians(degrees))


def _sin(degrees: float) -> float:
    if degrees % 90 == 0:
        return (0.0, 1.0, 0.0, -1.0)[int(degrees // 90) % 4]
    return math.sin(math.radians(degrees))


def is_identity_matrix(m: Mat2D, tolerance: float = 0.0) -> bool:
    return all(abs(v - i) <= tolerance for v, i in zip(m, IDENTITY_MATRIX))


def multiply_transform_matrices(m1: Mat2D, m2: Mat2D) -> Mat2D:
    """m1 · m2."""
    return _from_array(_to_array(m1) @ _to_array(m2))


def multiply_transform_matrix_array(matrices: Iterable[Mat2D]) -> Mat2D:
    """Compose matrices in list order: M1 · M2 · … · Mn. Empty → identity."""
    result = np.identity(3, dtype=np.float64)
    for m in matrices:
        result = result @ _to_array(m)
    return _from_array(result)


def invert_transform(m: Mat2D) -> Mat2D:
    """Inverse of ``m``. Raises numpy.linalg.LinAlgError when singular."""
    return _from_array(np.linalg.inv(_to_array(m)))


def transform_point(x: float, y: float, m: Mat2D) -> tuple[float, float]:
    a, b, c, d, e, f = m
    return (a * x + c * y + e, b * x + d * y + f)


def transform_points(points: NDArray[np.float64], m: Mat2D) -> NDArray[np.float64]:
    """Apply ``m`` to an Nx2 array of points."""
    if len(points) == 0:
        return points
    homogeneous = np.hstack([points, np.ones((len(points), 1))])
    return (homogeneous @ _to_array(m).T)[:, :2]


def create_translate_matrix(x: float, y: float = 0.0) -> Mat2D:
    return (1.0, 0.0, 0.0, 1.0, float(x), float(y))


def create_scale_matrix(x: float, y: float | None = None) -> Mat2D:
    return (float(x), 0.0, 0.0, float(x if y is None else y), 0.0, 0.0)


def create_rotate_matrix(angle: float = 0.0, center: tuple[float, float] = (0.0, 0.0)) -> Mat2D:
    """Rotation by ``angle`` degrees around ``center``: T(c) · R · T(-c)."""
    if not angle:
        return IDENTITY_MATRIX
    cos, sin = _cos(angle), _sin(angle)
    x, y = center
    offset_x = x - (x * cos - y * sin)
    offset_y = y - (x * sin + y * cos)
    return (cos, sin, -sin, cos, offset_x, offset_y)


def create_skew_x_matrix(angle: float) -> Mat2D:
    return (1.0, 0.0, math.tan(math.radians(angle)), 1.0, 0.0, 0.0)


def create_skew_y_matrix(angle: float) -> Mat2D:
    return (1.0, math.tan(math.radians(angle)), 0.0, 1.0, 0.0, 0.0)


def qr_decompose(m: Mat2D) -> DecomposedTransform:
    """Split ``m`` into translate · rotate · scale · skewX components.

    Only meaningful for non-singular matrices; a zero first column yields
    zero scale and NaN-free but arbitrary angles.
    """
    a, b, c, d, e, f = m
    denom = a * a + b * b
    scale_x = math.sqrt(denom)
    if scale_x == 0:
        return {
            "angle": 0.0,
            "scale_x": 0.0,
            "scale_y": 0.0,
            "skew_x": 0.0,
            "skew_y": 0.0,
            "translate_x": float(e),
            "translate_y": float(f),
        }
    return {
        "angle": math.degrees(math.atan2(b, a)),
        "scale_x": scale_x,
        "scale_y": (a * d - c * b) / scale_x,
        "skew_x": math.degrees(math.atan2(a * c + b * d, denom)),
        "skew_y": 0.0,
        "translate_x": float(e),
        "translate_y": float(f),
    }


def calc_dimensions_matrix(
    scale_x: float = 1.0,
    scale_y: float = 1.0,
    skew_x: float = 0.0,
    skew_y: float = 0.0,
    flip_x: bool = False,
    flip_y: bool = False,
) -> Mat2D:
    matrix = create_scale_matrix(-scale_x if flip_x else scale_x, -scale_y if flip_y else scale_y)
    if skew_x:
        matrix = multiply_transform_matrices(matrix, create_skew_x_matrix(skew_x))
    if skew_y:
        matrix = multiply_transform_matrices(matrix, create_skew_y_matrix(skew_y))
    return matrix


def compose_matrix(
    translate_x: float = 0.0,
    translate_y: float = 0.0,
    angle: float = 0.0,
    scale_x: float = 1.0,
    scale_y: float = 1.0,
    skew_x: float = 0.0,
    skew_y: float = 0.0,
    flip_x: bool = False,
    flip_y: bool = False,
) -> Mat2D:
    """Inverse of :func:`qr_decompose`: T · R · S · skewX · skewY."""
    matrix = create_translate_matrix(translate_x, translate_y)
    if angle:
        matrix = multiply_transform_matrices(matrix, create_rotate_matrix(angle))
    dimensions = calc_dimensions_matrix(scale_x, scale_y, skew_x, skew_y, flip_x, flip_y)
    if not is_identity_matrix(dimensions):
        matrix = multiply_transform_matrices(matrix, dimensions)
    return matrix
