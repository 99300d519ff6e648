"""Scalar and array animations."""

from __future__ import annotations

from typing import Any, Sequence

from svgscene.animation.base import AnimationBase


class ValueAnimation(AnimationBase[float]):
    def __init__(
        self,
        *,
        start_value: float = 0.0,
        end_value: float = 100.0,
        by_value: float | None = None,
        **options: Any,
    ) -> None:
        start = float(start_value)
        by = float(end_value) - start if by_value is None else float(by_value)
        super().__init__(start_value=start, end_value=start + by, by_value=by, **options)

    def calculate(self, time_elapsed: float) -> tuple[float, float]:
        value = self.easing(time_elapsed, self.start_value, self.by_value, self.duration)
        if not self.by_value:
            return value, time_elapsed / self.duration
        return value, abs((value - self.start_value) / self.by_value)


class ArrayAnimation(AnimationBase[list[float]]):
    """Element-wise interpolation of equally long number lists."""

    def __init__(
        self,
        *,
        start_value: Sequence[float] = (),
        end_value: Sequence[float] = (),
        **options: Any,
    ) -> None:
        start = [float(v) for v in start_value]
        end = [float(v) for v in end_value]
        if len(start) != len(end):
            raise ValueError(f"Array animation needs equal lengths, got {len(start)} and {len(end)}")
        by = [e - s for s, e in zip(start, end)]
        super().__init__(start_value=start, end_value=end, by_value=by, **options)

    def calculate(self, time_elapsed: float) -> tuple[list[float], float]:
        values = [
            self.easing(time_elapsed, s, b, self.duration)
            for s, b in zip(self.start_value, self.by_value)
        ]
        if not values or not self.by_value[0]:
            return values, time_elapsed / self.duration
        return values, abs((values[0] - self.start_value[0]) / self.by_value[0])
