"""Attribute-driven animation engine."""

from svgscene.animation.animate import animate, animate_color, animate_transform
from svgscene.animation.base import AnimationBase, AnimationState
from svgscene.animation.registry import AnimationRegistry, get_animation_registry
from svgscene.animation.sequencer import AnimationSequence, SequenceState, start_animation_sequence

__all__ = [
    "animate",
    "animate_color",
    "animate_transform",
    "AnimationBase",
    "AnimationState",
    "AnimationRegistry",
    "get_animation_registry",
    "AnimationSequence",
    "SequenceState",
    "start_animation_sequence",
]
