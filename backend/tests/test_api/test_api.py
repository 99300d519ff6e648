"""Tests for API endpoints."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from svgscene.main import app
from tests.conftest import ANIMATED_SVG, SHAPES_SVG, VIEWBOX_SVG


client = TestClient(app)


def test_health():
    response = client.get("/api/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["svg_classes_registered"] >= 9
    assert data["environment"]


def test_parse_shapes():
    response = client.post("/api/parse", json={"svg": SHAPES_SVG})
    assert response.status_code == 200
    data = response.json()
    assert data["element_count"] == 5
    assert data["object_count"] == 5
    assert [obj["type"] for obj in data["objects"]] == ["Rect", "Circle", "Line", "Polygon", "Path"]
    assert data["dimensions"]["width"] == 100
    assert data["animation_count"] == 0


def test_parse_viewbox_dimensions():
    response = client.post("/api/parse", json={"svg": VIEWBOX_SVG})
    data = response.json()
    assert data["dimensions"]["width"] == 200
    # viewBox scale is baked into the object transform
    assert data["objects"][0]["scale_x"] == pytest.approx(2)


def test_parse_invalid_svg():
    response = client.post("/api/parse", json={"svg": "<not-svg"})
    assert response.status_code == 200
    data = response.json()
    assert data["element_count"] == 0
    assert data["objects"] == []


def test_parse_counts_animations():
    response = client.post("/api/parse", json={"svg": ANIMATED_SVG})
    data = response.json()
    assert data["animation_count"] == 1
    # reported at the first frame
    assert data["objects"][0]["radius"] == 0


def test_animate_samples_midpoint():
    response = client.post("/api/animate", json={"svg": ANIMATED_SVG, "at_ms": 500})
    assert response.status_code == 200
    data = response.json()
    assert data["at_ms"] == 500
    assert data["objects"][0]["radius"] == pytest.approx(10)
    assert data["active_sequences"] == 1


def test_animate_with_coarse_frames():
    response = client.post("/api/animate", json={"svg": ANIMATED_SVG, "at_ms": 250, "frame_ms": 100})
    assert response.json()["objects"][0]["radius"] == pytest.approx(5)


def test_animate_without_drawables():
    response = client.post("/api/animate", json={"svg": "<svg xmlns='http://www.w3.org/2000/svg'/>", "at_ms": 10})
    assert response.status_code == 422


def test_animate_rejects_negative_time():
    response = client.post("/api/animate", json={"svg": ANIMATED_SVG, "at_ms": -1})
    assert response.status_code == 422


def test_animate_rejects_unbounded_sampling():
    response = client.post("/api/animate", json={"svg": ANIMATED_SVG, "at_ms": 1e9})
    assert response.status_code == 422
    response = client.post("/api/animate", json={"svg": ANIMATED_SVG, "at_ms": 500, "frame_ms": 1e-3})
    assert response.status_code == 422


def test_parse_survives_unit_and_keyword_values():
    svg = '''<svg xmlns="http://www.w3.org/2000/svg">
      <circle r="5"><animate attributeName="r" values="10px;20px" dur="1s"/></circle>
      <rect width="1" height="1"><animate attributeName="visibility" values="visible;hidden" dur="1s"/></rect>
    </svg>'''
    response = client.post("/api/parse", json={"svg": svg})
    assert response.status_code == 200
    data = response.json()
    assert data["animation_count"] == 1
    assert data["objects"][0]["radius"] == 10
