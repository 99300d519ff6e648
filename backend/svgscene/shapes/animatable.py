"""AnimatableObject — lets a scene object animate its own properties.

``obj.animate({"radius": 20, "fill": "blue"}, duration=300)`` starts one task
per key and returns them by key. The kind of task is picked from the key:
color properties get a color animation, ``transform_matrix`` a decomposed
transform animation, anything else a value (or array) animation. Dotted keys
such as ``shadow.offset_x`` address nested values.
"""

from __future__ import annotations

import logging
from typing import Any, ClassVar

from svgscene.animation.animate import animate, animate_color, animate_transform
from svgscene.animation.base import AbortPredicate, AnimationBase, ProgressCallback

logger = logging.getLogger(__name__)


def get_path(obj: Any, path: list[str]) -> Any:
    for part in path:
        obj = obj[part] if isinstance(obj, dict) else getattr(obj, part)
    return obj


def set_path(obj: Any, path: list[str], value: Any) -> None:
    owner = get_path(obj, path[:-1])
    if isinstance(owner, dict):
        owner[path[-1]] = value
    else:
        setattr(owner, path[-1], value)


class AnimatableObject:
    """Mixin for objects providing ``set``, ``calc_own_matrix``,
    ``apply_transform`` and ``set_coords``."""

    color_properties: ClassVar[tuple[str, ...]] = ("fill", "stroke", "background_color")

    def animate(self, animatable: dict[str, Any], **options: Any) -> dict[str, AnimationBase]:
        return {key: self._animate(key, end_value, **options) for key, end_value in animatable.items()}

    def _animate(
        self,
        key: str,
        end_value: Any,
        *,
        start_value: Any = None,
        on_change: ProgressCallback | None = None,
        on_complete: ProgressCallback | None = None,
        abort: AbortPredicate | None = None,
        **options: Any,
    ) -> AnimationBase:
        path = key.split(".")
        is_color = path[-1] in type(self).color_properties
        is_transform = key.lower() in ("transform_matrix", "transformmatrix")

        if start_value is None:
            start_value = self.calc_own_matrix() if is_transform else get_path(self, path)  # type: ignore[attr-defined]

        def _on_change(value: Any, value_progress: float, duration_progress: float) -> None:
            if is_transform:
                self.apply_transform(value)  # type: ignore[attr-defined]
            elif len(path) > 1:
                set_path(self, path, value)
            else:
                self.set(key, value)  # type: ignore[attr-defined]
            if on_change:
                on_change(value, value_progress, duration_progress)

        def _on_complete(value: Any, value_progress: float, duration_progress: float) -> None:
            self.set_coords()  # type: ignore[attr-defined]
            if on_complete:
                on_complete(value, value_progress, duration_progress)

        task_options = dict(
            options,
            target=self,
            start_value=start_value,
            end_value=end_value,
            on_change=_on_change,
            on_complete=_on_complete,
            abort=abort,
        )
        if is_color:
            return animate_color(**task_options)
        if is_transform:
            return animate_transform(**task_options)
        return animate(**task_options)

