"""Inkline sketch public API (Qt widgets live in ``inkline.sketch.widgets``)."""

from .config import NumberLineConfig
from .controller import SketchController, SketchSnapshot
from .rulers import NumberLineRuler
from .interaction import (
    ActionHistory,
    EmptyCircleAction,
    FilledCircleAction,
    GestureClassifier,
    Point,
    SegmentAction,
    SketchState,
    reduce_actions,
)
from .geometry import EndArrows, split_segment, visible_segments

__all__ = [
    "NumberLineConfig",
    "SketchController",
    "SketchSnapshot",
    "NumberLineRuler",
    "ActionHistory",
    "EmptyCircleAction",
    "FilledCircleAction",
    "GestureClassifier",
    "Point",
    "SegmentAction",
    "SketchState",
    "reduce_actions",
    "EndArrows",
    "split_segment",
    "visible_segments",
]
