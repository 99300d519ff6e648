"""FastAPI dependency injection."""

from __future__ import annotations

from svgscene.animation.registry import AnimationRegistry
from svgscene.config import Settings, settings


def get_settings() -> Settings:
    return settings


def get_request_registry() -> AnimationRegistry:
    """Fresh registry per request so parsed animations never leak between calls."""
    return AnimationRegistry()
