"""Factories that build and start animation tasks.

    animate(start_value=0, end_value=10, duration=300, on_change=print)
    animate_color(start_value="red", end_value="blue")
    animate_transform(start_value=m1, end_value=m2, registry=registry)

Every factory accepts the :class:`~svgscene.animation.base.AnimationBase`
options plus ``start_time`` (ms on the registry clock; default: now).
"""

from __future__ import annotations

from typing import Any

from svgscene.animation.color import ColorAnimation
from svgscene.animation.transform import TransformAnimation
from svgscene.animation.value import ArrayAnimation, ValueAnimation


def animate(*, start_time: float | None = None, **options: Any) -> ValueAnimation | ArrayAnimation:
    if isinstance(options.get("start_value"), (list, tuple)):
        animation: ValueAnimation | ArrayAnimation = ArrayAnimation(**options)
    else:
        animation = ValueAnimation(**options)
    animation.start(start_time)
    return animation


def animate_color(*, start_time: float | None = None, **options: Any) -> ColorAnimation:
    animation = ColorAnimation(**options)
    animation.start(start_time)
    return animation


def animate_transform(*, start_time: float | None = None, **options: Any) -> TransformAnimation:
    animation = TransformAnimation(**options)
    animation.start(start_time)
    return animation
