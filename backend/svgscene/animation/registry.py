"""Animation registry — every running animation task is tracked here.

The registry also owns the animation clock. Whatever drives frames (a UI
loop, :func:`svgscene.animation.driver.drive`, a test) calls ``tick(now)``
and each running task advances itself.

Usage:
    registry = AnimationRegistry()
    circle.animate({"radius": 20}, duration=300, registry=registry)
    registry.advance(150)     # half way
    registry.cancel_all()     # stop everything, including chained steps
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import TYPE_CHECKING, Any

from svgscene.config import settings

if TYPE_CHECKING:
    from svgscene.animation.base import AnimationBase
    from svgscene.animation.sequencer import AnimationSequence

logger = logging.getLogger(__name__)


class AnimationRegistry:
    """Owns in-flight animation tasks and multi-step sequences."""

    def __init__(self) -> None:
        self._animations: list[AnimationBase] = []
        self._sequences: list[AnimationSequence] = []
        self.now: float = 0.0

    # --- tasks ---

    def add(self, animation: AnimationBase) -> None:
        self._animations.append(animation)

    def remove(self, animation: AnimationBase) -> None:
        if animation in self._animations:
            self._animations.remove(animation)

    def __len__(self) -> int:
        return len(self._animations)

    def __iter__(self) -> Iterator[AnimationBase]:
        return iter(list(self._animations))

    def __contains__(self, animation: object) -> bool:
        return animation in self._animations

    def find_by_target(self, target: Any) -> list[AnimationBase]:
        return [a for a in self._animations if a.target is target]

    # --- sequences ---

    def add_sequence(self, sequence: AnimationSequence) -> None:
        self._sequences.append(sequence)

    def remove_sequence(self, sequence: AnimationSequence) -> None:
        if sequence in self._sequences:
            self._sequences.remove(sequence)

    @property
    def sequences(self) -> list[AnimationSequence]:
        return list(self._sequences)

    def has_work(self) -> bool:
        return bool(self._animations or self._sequences)

    # --- clock ---

    def tick(self, now: float | None = None) -> None:
        """Advance every task that was running before this call to ``now`` (ms).

        Tasks started from inside a completion callback get their first
        tick on the next call.
        """
        if now is not None:
            self.now = float(now)
        for animation in list(self._animations):
            animation.tick(self.now)

    def advance(self, ms: float) -> None:
        self.tick(self.now + ms)

    def run_for(self, ms: float, frame_ms: float | None = None) -> None:
        """Tick in frame-sized steps for ``ms``, always ending exactly on ``now + ms``.

        Frames are widened so that at most ``settings.max_frames`` ticks run.
        """
        frame_ms = settings.frame_interval_ms if frame_ms is None else frame_ms
        if frame_ms <= 0:
            raise ValueError("frame_ms must be positive")
        if ms / frame_ms > settings.max_frames:
            logger.debug("Widening %gms frames to cover %gms in %d ticks", frame_ms, ms, settings.max_frames)
            frame_ms = ms / settings.max_frames
        end = self.now + ms
        while self.now + frame_ms < end:
            self.tick(self.now + frame_ms)
        self.tick(end)

    # --- cancellation ---

    def cancel_all(self) -> list[AnimationBase]:
        """Stop every sequence and task. Returns the cancelled tasks."""
        for sequence in list(self._sequences):
            sequence.cancel()
        cancelled = list(self._animations)
        for animation in cancelled:
            animation.abort()
        self._animations.clear()
        if cancelled:
            logger.debug("Cancelled %d running animations", len(cancelled))
        return cancelled

    def cancel_by_target(self, target: Any) -> list[AnimationBase]:
        for sequence in list(self._sequences):
            if sequence.target is target:
                sequence.cancel()
        cancelled = self.find_by_target(target)
        for animation in cancelled:
            animation.abort()
        return cancelled


# Module-level default
_registry = AnimationRegistry()


def get_animation_registry() -> AnimationRegistry:
    return _registry
