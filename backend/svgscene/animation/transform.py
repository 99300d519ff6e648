"""Transform animation — interpolates decomposed matrix components.

Both endpoints are QR-decomposed into translate / rotate / scale / skew. Every
tick eases each component from the start decomposition by its delta and
recomposes a matrix, so a rotation animates as a rotation rather than as a
skewed element-wise blend.
"""

from __future__ import annotations

from typing import Any, Sequence

from svgscene.animation.base import AnimationBase
from svgscene.utils.matrix import (
    IDENTITY_MATRIX,
    DecomposedTransform,
    Mat2D,
    compose_matrix,
    decomposed_identity,
    qr_decompose,
)

DEFAULT_END_MATRIX: Mat2D = (2.0, 0.0, 0.0, 2.0, 0.0, 0.0)


def get_by_value(start: Mat2D, end: Mat2D) -> DecomposedTransform:
    """Per-component delta between the decompositions of ``start`` and ``end``."""
    from_d = qr_decompose(start)
    to_d = qr_decompose(end)
    delta = decomposed_identity()
    for key, value in to_d.items():
        if key in from_d:
            delta[key] = value - from_d[key]  # type: ignore[literal-required]
    return delta


class TransformAnimation(AnimationBase[Mat2D]):
    def __init__(
        self,
        *,
        start_value: Sequence[float] = IDENTITY_MATRIX,
        end_value: Sequence[float] = DEFAULT_END_MATRIX,
        **options: Any,
    ) -> None:
        start: Mat2D = tuple(float(v) for v in start_value)  # type: ignore[assignment]
        end: Mat2D = tuple(float(v) for v in end_value)  # type: ignore[assignment]
        super().__init__(start_value=start, end_value=end, by_value=get_by_value(start, end), **options)

    def calculate(self, time_elapsed: float) -> tuple[Mat2D, float]:
        start = qr_decompose(self.start_value)
        values = decomposed_identity()
        for key, start_component in start.items():
            if key in self.by_value:
                values[key] = self.easing(  # type: ignore[literal-required]
                    time_elapsed, start_component, self.by_value[key], self.duration
                )
        return compose_matrix(**values), time_elapsed / self.duration
