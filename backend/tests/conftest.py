"""Shared test fixtures."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from svgscene.animation.registry import AnimationRegistry


# Sample SVGs

SHAPES_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="100" height="100">
  <rect id="box" x="10" y="20" width="30" height="40" fill="red"/>
  <circle id="dot" cx="50" cy="50" r="10" fill="#00ff00" fill-opacity="0.5"/>
  <line x1="0" y1="0" x2="20" y2="10" stroke="black"/>
  <polygon points="0,0 10,0 10,10"/>
  <path d="M10 10 L30 10 L30 40 Z"/>
</svg>'''

GROUPED_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="100" height="100">
  <g fill="blue" stroke-width="3" transform="translate(5 5)">
    <rect x="0" y="0" width="10" height="10"/>
    <rect x="20" y="0" width="10" height="10" fill="yellow" style="stroke-width: 7"/>
  </g>
</svg>'''

VIEWBOX_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="200" height="200" viewBox="0 0 100 100">
  <rect x="10" y="10" width="20" height="20"/>
</svg>'''

USE_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" xmlns:xlink="http://www.w3.org/1999/xlink" viewBox="0 0 100 100">
  <defs>
    <path id="heart" d="M10,30 A20,20 0,0,1 50,30 Z"/>
  </defs>
  <use clip-path="url(#missingClip)" href="#heart" fill="red"/>
</svg>'''

MISSING_USE_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" xmlns:xlink="http://www.w3.org/1999/xlink" width="100" height="100">
  <use xlink:href="#nothing-here" x="5" y="5"/>
  <rect id="sibling" x="1" y="2" width="3" height="4"/>
</svg>'''

CLIP_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="100" height="100">
  <defs>
    <clipPath id="single"><circle cx="40" cy="35" r="35"/></clipPath>
    <clipPath id="double" transform="translate(10 0)">
      <rect x="0" y="0" width="10" height="10"/>
      <rect x="20" y="0" width="10" height="10"/>
    </clipPath>
  </defs>
  <rect x="0" y="0" width="80" height="80" clip-path="url(#single)"/>
  <rect x="0" y="0" width="80" height="80" clip-path="url(#double)"/>
</svg>'''

ANIMATED_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="100" height="100">
  <circle cx="50" cy="50" r="0">
    <animate attributeName="r" values="0;10;20" dur="1s" repeatCount="1"/>
  </circle>
</svg>'''

INDEFINITE_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="100" height="100">
  <circle cx="50" cy="50" r="0">
    <animate attributeName="r" values="0;10;20" dur="1s" repeatCount="indefinite"/>
  </circle>
</svg>'''

COLOR_ANIMATED_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="100" height="100">
  <rect x="0" y="0" width="10" height="10" fill="red">
    <animate attributeName="fill" from="red" to="blue" dur="500ms"/>
  </rect>
</svg>'''

ROTATING_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="100" height="100">
  <rect x="0" y="0" width="10" height="10">
    <animateTransform attributeName="transform" type="rotate" from="0" to="90" dur="1s"/>
  </rect>
</svg>'''


@pytest.fixture
def registry() -> Iterator[AnimationRegistry]:
    reg = AnimationRegistry()
    yield reg
    reg.cancel_all()


@pytest.fixture
def shapes_svg() -> str:
    return SHAPES_SVG
