from .actions import Action, Point, SegmentAction, EmptyCircleAction, FilledCircleAction
from .gestures import GestureClassifier, StrokeStats
from .history import ActionHistory
from .reducer import SketchState, reduce_actions
from .stroke import StrokeRecorder

__all__ = [
    "Action",
    "Point",
    "SegmentAction",
    "EmptyCircleAction",
    "FilledCircleAction",
    "GestureClassifier",
    "StrokeStats",
    "ActionHistory",
    "SketchState",
    "reduce_actions",
    "StrokeRecorder",
]
