from dataclasses import dataclass, field
from typing import FrozenSet, Iterable, Tuple

from .actions import Action, EmptyCircleAction, FilledCircleAction, Point, SegmentAction

SegmentPoints = Tuple[Point, Point]


@dataclass(frozen=True)
class SketchState:
    """Drawable state derived from the applied prefix of the history."""
    segments: Tuple[SegmentPoints, ...] = ()
    empty_ticks: FrozenSet[int] = field(default_factory=frozenset)
    filled_ticks: FrozenSet[int] = field(default_factory=frozenset)


def reduce_actions(actions: Iterable[Action]) -> SketchState:
    """Fold actions in order into segments and circle ticks.

    Segments keep their append order. A circle action at a tick replaces the
    other circle kind at that tick.
    """
    segments = []
    empty_ticks = set()
    filled_ticks = set()
    for action in actions:
        if isinstance(action, SegmentAction):
            segments.append(action.endpoints)
        elif isinstance(action, EmptyCircleAction):
            empty_ticks.add(action.tick)
            filled_ticks.discard(action.tick)
        elif isinstance(action, FilledCircleAction):
            filled_ticks.add(action.tick)
            empty_ticks.discard(action.tick)
    return SketchState(tuple(segments), frozenset(empty_ticks), frozenset(filled_ticks))
