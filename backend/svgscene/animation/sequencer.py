"""Multi-step ``<animate>`` playback.

A sequence walks a property through ``values`` one step at a time. Each step
is a linear animation of ``dur / (n - 1)``; the next step is started from the
completion of the previous one and is scheduled from that step's end time, so
rounding to frames never accumulates. When the last value is reached the
repeat count is consumed and playback restarts from the first value until
no repeats remain (``"indefinite"`` never runs out).

States: PLAYING -> AWAITING_RESTART -> PLAYING ... -> DONE
"""

from __future__ import annotations

import enum
import logging
from typing import Any, Protocol, Sequence

from svgscene.animation.base import AnimationBase, ProgressCallback
from svgscene.animation.easing import EasingFunction, ease_none
from svgscene.animation.registry import AnimationRegistry, get_animation_registry
from svgscene.svg.animation_attributes import INDEFINITE

logger = logging.getLogger(__name__)


class SequenceTarget(Protocol):
    def set(self, key: str, value: Any = ...) -> Any: ...

    def animate(self, animatable: dict[str, Any], **options: Any) -> dict[str, AnimationBase]: ...


class SequenceState(str, enum.Enum):
    PLAYING = "playing"
    AWAITING_RESTART = "awaiting_restart"
    DONE = "done"


class AnimationSequence:
    def __init__(
        self,
        target: SequenceTarget,
        key: str,
        values: Sequence[Any],
        *,
        duration_ms: float,
        repeat_count: int | str = 1,
        easing: EasingFunction = ease_none,
        on_change: ProgressCallback | None = None,
        registry: AnimationRegistry | None = None,
    ) -> None:
        if len(values) < 2:
            raise ValueError(f"Animation sequence on {key!r} needs at least 2 values, got {len(values)}")
        self.target = target
        self.key = key
        self.values = list(values)
        self.step_duration = float(duration_ms) / (len(self.values) - 1)
        self.remaining_repeats = repeat_count
        self.easing = easing
        self.on_change = on_change
        self.registry = registry if registry is not None else get_animation_registry()

        self.state = SequenceState.AWAITING_RESTART
        self.value_index = 0
        self.current: AnimationBase | None = None
        self.completed_steps = 0

    def start(self) -> AnimationSequence:
        self.target.set(self.key, self.values[0])
        self.value_index = 1
        self.state = SequenceState.PLAYING
        self.registry.add_sequence(self)
        self._play()
        return self

    def _play(self, start_time: float | None = None) -> None:
        try:
            tasks = self.target.animate(
                {self.key: self.values[self.value_index]},
                duration=self.step_duration,
                easing=self.easing,
                on_change=self.on_change,
                on_complete=self._on_step_complete,
                on_abort=self._on_step_abort,
                registry=self.registry,
                start_time=start_time,
            )
        except Exception:
            self._finish()
            raise
        self.current = tasks[self.key]

    def _on_step_complete(self, value: Any, value_progress: float, duration_progress: float) -> None:
        self.completed_steps += 1
        self.advance()

    def _on_step_abort(self) -> None:
        # a step stopped from outside ends the whole sequence
        if self.state is not SequenceState.DONE:
            logger.debug("Step %d of sequence on %r was aborted", self.value_index, self.key)
            self._finish()

    def advance(self) -> None:
        """Move to the next value, consuming a repeat when the list runs out."""
        if self.state is SequenceState.DONE:
            return
        end_time = self.current.end_time if self.current is not None else None
        self.value_index += 1
        if self.value_index >= len(self.values):
            self.state = SequenceState.AWAITING_RESTART
            if self.remaining_repeats != INDEFINITE:
                self.remaining_repeats -= 1  # type: ignore[operator]
                if self.remaining_repeats <= 0:  # type: ignore[operator]
                    self._finish()
                    return
            self.target.set(self.key, self.values[0])
            self.value_index = 1
        self.state = SequenceState.PLAYING
        self._play(end_time)

    def _finish(self) -> None:
        self.state = SequenceState.DONE
        self.current = None
        self.registry.remove_sequence(self)
        logger.debug("Sequence on %r finished after %d steps", self.key, self.completed_steps)

    def cancel(self) -> None:
        if self.state is SequenceState.DONE:
            return
        current = self.current
        self._finish()
        if current is not None:
            current.abort()

    def __repr__(self) -> str:
        return f"AnimationSequence(key={self.key!r}, state={self.state.value}, index={self.value_index})"


def start_animation_sequence(
    target: SequenceTarget,
    key: str,
    values: Sequence[Any],
    *,
    duration_ms: float,
    repeat_count: int | str = 1,
    registry: AnimationRegistry | None = None,
    **options: Any,
) -> AnimationSequence:
    sequence = AnimationSequence(
        target, key, values, duration_ms=duration_ms, repeat_count=repeat_count, registry=registry, **options
    )
    return sequence.start()
