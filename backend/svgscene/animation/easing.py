"""Easing functions.

All share the signature ``(t, b, c, d)``: elapsed time, start value, change in
value, duration. They return the eased value at ``t``.
"""

from __future__ import annotations

import math
from typing import Callable

EasingFunction = Callable[[float, float, float, float], float]

HALF_PI = math.pi / 2


def ease_none(t: float, b: float, c: float, d: float) -> float:
    """Linear stepping."""
    return c * t / d + b


def default_easing(t: float, b: float, c: float, d: float) -> float:
    """Sine ease-in; used whenever no easing is given."""
    return -c * math.cos(t / d * HALF_PI) + c + b


def ease_in_sine(t: float, b: float, c: float, d: float) -> float:
    return -c * math.cos(t / d * HALF_PI) + c + b


def ease_out_sine(t: float, b: float, c: float, d: float) -> float:
    return c * math.sin(t / d * HALF_PI) + b


def ease_in_out_sine(t: float, b: float, c: float, d: float) -> float:
    return -c / 2 * (math.cos(math.pi * t / d) - 1) + b


def ease_in_quad(t: float, b: float, c: float, d: float) -> float:
    t /= d
    return c * t * t + b


def ease_out_quad(t: float, b: float, c: float, d: float) -> float:
    t /= d
    return -c * t * (t - 2) + b


def ease_in_out_quad(t: float, b: float, c: float, d: float) -> float:
    t /= d / 2
    if t < 1:
        return c / 2 * t * t + b
    t -= 1
    return -c / 2 * (t * (t - 2) - 1) + b


def ease_in_cubic(t: float, b: float, c: float, d: float) -> float:
    t /= d
    return c * t**3 + b


def ease_out_cubic(t: float, b: float, c: float, d: float) -> float:
    t = t / d - 1
    return c * (t**3 + 1) + b


def ease_in_out_cubic(t: float, b: float, c: float, d: float) -> float:
    t /= d / 2
    if t < 1:
        return c / 2 * t**3 + b
    t -= 2
    return c / 2 * (t**3 + 2) + b


EASINGS: dict[str, EasingFunction] = {
    "linear": ease_none,
    "ease_none": ease_none,
    "ease_in_sine": ease_in_sine,
    "ease_out_sine": ease_out_sine,
    "ease_in_out_sine": ease_in_out_sine,
    "ease_in_quad": ease_in_quad,
    "ease_out_quad": ease_out_quad,
    "ease_in_out_quad": ease_in_out_quad,
    "ease_in_cubic": ease_in_cubic,
    "ease_out_cubic": ease_out_cubic,
    "ease_in_out_cubic": ease_in_out_cubic,
}
