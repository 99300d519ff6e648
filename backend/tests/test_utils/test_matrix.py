"""Tests for affine matrix helpers."""

from __future__ import annotations

import numpy as np
import pytest

from svgscene.utils.geometry import bounding_rect, parse_points, transformed_box
from svgscene.utils.matrix import (
    IDENTITY_MATRIX,
    compose_matrix,
    create_rotate_matrix,
    invert_transform,
    is_identity_matrix,
    multiply_transform_matrices,
    multiply_transform_matrix_array,
    qr_decompose,
    transform_point,
)


def test_decompose_recompose_round_trip():
    rng = np.random.default_rng(7)
    checked = 0
    while checked < 25:
        m = tuple(float(v) for v in rng.uniform(-5, 5, size=6))
        if abs(m[0] * m[3] - m[1] * m[2]) < 0.1:
            continue
        assert compose_matrix(**qr_decompose(m)) == pytest.approx(m, abs=1e-9)
        checked += 1


def test_decompose_pure_rotation():
    parts = qr_decompose(create_rotate_matrix(30))
    assert parts["angle"] == pytest.approx(30)
    assert parts["scale_x"] == pytest.approx(1)
    assert parts["skew_x"] == pytest.approx(0, abs=1e-9)


def test_degenerate_matrix_does_not_raise():
    parts = qr_decompose((0.0, 0.0, 0.0, 0.0, 3.0, 4.0))
    assert parts["scale_x"] == 0.0
    assert (parts["translate_x"], parts["translate_y"]) == (3.0, 4.0)


def test_multiply_applies_right_first():
    m = multiply_transform_matrices((2.0, 0.0, 0.0, 2.0, 0.0, 0.0), (1.0, 0.0, 0.0, 1.0, 5.0, 0.0))
    assert transform_point(1, 0, m) == pytest.approx((12, 0))


def test_multiply_empty_is_identity():
    assert multiply_transform_matrix_array([]) == IDENTITY_MATRIX


def test_invert():
    m = compose_matrix(translate_x=3, angle=20, scale_x=2)
    assert is_identity_matrix(multiply_transform_matrices(m, invert_transform(m)), tolerance=1e-9)


def test_rotate_around_center():
    assert transform_point(10, 10, create_rotate_matrix(45, (10, 10))) == pytest.approx((10, 10))


def test_parse_points_drops_odd_coordinate():
    assert parse_points("1,2 3,4 5").tolist() == [[1.0, 2.0], [3.0, 4.0]]
    assert parse_points("").shape == (0, 2)


def test_transformed_box():
    corners = transformed_box(0, 0, 10, 5, (1.0, 0.0, 0.0, 1.0, 2.0, 3.0))
    assert corners["br"] == pytest.approx((12, 8))
    assert bounding_rect(corners) == pytest.approx((2, 3, 10, 5))
