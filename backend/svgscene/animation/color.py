"""Color animation: RGBA channels interpolated on one eased progress."""

from __future__ import annotations

import logging
from typing import Any

from svgscene.animation.base import AnimationBase
from svgscene.svg.color import RGBA, Color

logger = logging.getLogger(__name__)


class ColorAnimation(AnimationBase[str]):
    """Animates between two CSS colors. Values are emitted as ``rgba(...)`` strings."""

    def __init__(
        self,
        *,
        start_value: str | RGBA | None = None,
        end_value: str | RGBA | None = None,
        **options: Any,
    ) -> None:
        start, end = Color(start_value), Color(end_value)
        for raw, color in ((start_value, start), (end_value, end)):
            if color.is_unrecognised:
                logger.warning("Unrecognised color %r animates as black", raw)
        self.start_color = start.get_source()
        self.end_color = end.get_source()
        by = tuple(e - s for s, e in zip(self.start_color, self.end_color))
        super().__init__(
            start_value=Color(self.start_color).to_rgba(),
            end_value=Color(self.end_color).to_rgba(),
            by_value=by,
            **options,
        )

    def calculate(self, time_elapsed: float) -> tuple[str, float]:
        progress = self.easing(time_elapsed, 0.0, 1.0, self.duration)
        r, g, b, a = (s + d * progress for s, d in zip(self.start_color, self.by_value))
        rgba = (
            int(round(min(max(r, 0), 255))),
            int(round(min(max(g, 0), 255))),
            int(round(min(max(b, 0), 255))),
            round(min(max(a, 0.0), 1.0), 4),
        )
        return Color(rgba).to_rgba(), abs(progress)
