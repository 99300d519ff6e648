"""Tests for decomposed transform interpolation."""

from __future__ import annotations

import pytest

from svgscene.animation import animate_transform
from svgscene.animation.easing import ease_none
from svgscene.animation.transform import get_by_value
from svgscene.utils.matrix import (
    IDENTITY_MATRIX,
    compose_matrix,
    create_rotate_matrix,
    create_scale_matrix,
    multiply_transform_matrices,
    qr_decompose,
)


def test_by_value_is_component_delta():
    delta = get_by_value(IDENTITY_MATRIX, compose_matrix(translate_x=10, angle=30, scale_x=2))
    assert delta["translate_x"] == pytest.approx(10)
    assert delta["angle"] == pytest.approx(30)
    assert delta["scale_x"] == pytest.approx(1)
    assert delta["scale_y"] == pytest.approx(0)


def test_quarter_turn_midpoint_is_a_rotation(registry):
    task = animate_transform(
        start_value=IDENTITY_MATRIX,
        end_value=create_rotate_matrix(90),
        duration=100,
        easing=ease_none,
        registry=registry,
    )
    registry.advance(50)
    parts = qr_decompose(task.value)
    assert parts["angle"] == pytest.approx(45)
    assert parts["scale_x"] == pytest.approx(1)
    assert parts["scale_y"] == pytest.approx(1)
    assert parts["skew_x"] == pytest.approx(0, abs=1e-9)
    # a cell-wise blend would have shrunk the matrix
    a, b, c, d, e, f = task.value
    assert a * d - b * c == pytest.approx(1)


def test_ends_on_target(registry):
    end = multiply_transform_matrices(create_rotate_matrix(30), create_scale_matrix(2, 3))
    task = animate_transform(start_value=IDENTITY_MATRIX, end_value=end, duration=100, registry=registry)
    registry.advance(100)
    assert task.value == pytest.approx(end)


def test_start_is_decomposed_every_tick(registry):
    task = animate_transform(
        start_value=IDENTITY_MATRIX, end_value=create_scale_matrix(3), duration=100, easing=ease_none, registry=registry
    )
    registry.advance(50)
    assert task.value == pytest.approx((2.0, 0.0, 0.0, 2.0, 0.0, 0.0))
    # shifting the base moves every later frame by the same amount
    task.start_value = create_scale_matrix(2)
    registry.advance(25)
    assert task.value == pytest.approx((3.5, 0.0, 0.0, 3.5, 0.0, 0.0))
