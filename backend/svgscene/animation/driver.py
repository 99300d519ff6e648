"""Asyncio frame driver for an animation registry."""

from __future__ import annotations

import asyncio
import logging

from svgscene.animation.registry import AnimationRegistry, get_animation_registry
from svgscene.config import settings

logger = logging.getLogger(__name__)


async def drive(
    registry: AnimationRegistry | None = None,
    *,
    frame_ms: float | None = None,
    max_ms: float | None = None,
) -> float:
    """Tick ``registry`` from the event loop clock until it has no work left.

    Stops early after ``max_ms``. Returns the registry time that elapsed.
    """
    registry = registry if registry is not None else get_animation_registry()
    frame_ms = settings.frame_interval_ms if frame_ms is None else frame_ms
    loop = asyncio.get_running_loop()
    origin = loop.time()
    base = registry.now
    while registry.has_work():
        await asyncio.sleep(frame_ms / 1000.0)
        elapsed = (loop.time() - origin) * 1000.0
        registry.tick(base + elapsed)
        if max_ms is not None and elapsed >= max_ms:
            logger.debug("Frame driver stopped after %.1fms with %d tasks left", elapsed, len(registry))
            break
    return registry.now - base
