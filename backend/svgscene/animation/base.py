"""AnimationBase — one timed interpolation task.

A task is created pending, registers itself with an
:class:`~svgscene.animation.registry.AnimationRegistry` on ``start()`` and is
advanced by ``registry.tick(now)``. It leaves the registry when it completes
or is aborted.
"""

from __future__ import annotations

import enum
import logging
from typing import Any, Callable, Generic, TypeVar

from svgscene.animation.easing import EasingFunction, default_easing
from svgscene.animation.registry import AnimationRegistry, get_animation_registry
from svgscene.config import settings

logger = logging.getLogger(__name__)

T = TypeVar("T")

# (value, value_progress, duration_progress)
ProgressCallback = Callable[[Any, float, float], Any]
AbortPredicate = Callable[[Any, float, float], bool]


class AnimationState(str, enum.Enum):
    PENDING = "pending"
    RUNNING = "running"
    COMPLETED = "completed"
    ABORTED = "aborted"


class AnimationBase(Generic[T]):
    """Base for value, array, color and transform animations.

    Subclasses implement :meth:`calculate`, returning the value at a bounded
    elapsed time together with its value progress.
    """

    def __init__(
        self,
        *,
        start_value: T,
        end_value: T,
        by_value: Any,
        duration: float | None = None,
        delay: float = 0.0,
        easing: EasingFunction = default_easing,
        on_start: Callable[[], Any] | None = None,
        on_change: ProgressCallback | None = None,
        on_complete: ProgressCallback | None = None,
        on_abort: Callable[[], Any] | None = None,
        abort: AbortPredicate | None = None,
        target: Any = None,
        registry: AnimationRegistry | None = None,
    ) -> None:
        self.start_value = start_value
        self.end_value = end_value
        self.by_value = by_value
        self.duration = settings.animation_duration_ms if duration is None else float(duration)
        self.delay = float(delay)
        self.easing = easing
        self.on_start = on_start
        self.on_change = on_change
        self.on_complete = on_complete
        self.on_abort = on_abort
        self._abort = abort
        self.target = target
        self.registry = registry if registry is not None else get_animation_registry()

        self.state = AnimationState.PENDING
        self.value: T = start_value
        self.value_progress = 0.0
        self.duration_progress = 0.0
        self.start_time: float | None = None

    def calculate(self, time_elapsed: float) -> tuple[T, float]:
        raise NotImplementedError

    @property
    def end_time(self) -> float | None:
        if self.start_time is None:
            return None
        return self.start_time + self.duration

    @property
    def is_done(self) -> bool:
        return self.state in (AnimationState.COMPLETED, AnimationState.ABORTED)

    def start(self, start_time: float | None = None) -> AnimationBase[T]:
        """Register with the registry and begin at ``start_time`` (default: registry now)."""
        if self.state is not AnimationState.PENDING:
            logger.warning("Animation %r already started (state=%s)", self, self.state.value)
            return self
        base = self.registry.now if start_time is None else start_time
        self.start_time = base + self.delay
        self.state = AnimationState.RUNNING
        self.registry.add(self)
        if self.on_start:
            self.on_start()
        return self

    def tick(self, now: float) -> None:
        if self.state is not AnimationState.RUNNING or self.start_time is None or now < self.start_time:
            return
        elapsed = now - self.start_time
        finished = elapsed >= self.duration
        if self.duration <= 0:
            value, value_progress = self.end_value, 1.0
            duration_progress = 1.0
        else:
            bounded = min(elapsed, self.duration)
            value, value_progress = self.calculate(bounded)
            duration_progress = bounded / self.duration

        if self._abort is not None and self._abort(value, value_progress, duration_progress):
            self.abort()
            return

        if finished:
            value = self.end_value
            self.value = value
            self.value_progress = 1.0
            self.duration_progress = 1.0
            self.state = AnimationState.COMPLETED
            self.registry.remove(self)
            if self.on_change:
                self.on_change(value, 1.0, 1.0)
            if self.on_complete:
                self.on_complete(value, 1.0, 1.0)
        else:
            self.value = value
            self.value_progress = value_progress
            self.duration_progress = duration_progress
            if self.on_change:
                self.on_change(value, value_progress, duration_progress)

    def abort(self) -> None:
        """Stop without change or completion callbacks. ``on_abort`` still fires."""
        if self.is_done:
            return
        self.state = AnimationState.ABORTED
        self.registry.remove(self)
        if self.on_abort:
            self.on_abort()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(state={self.state.value}, duration={self.duration})"
