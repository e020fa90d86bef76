"""
Post-processing of reduced segments into drawable geometry.

Segments are horizontal, so every operation here works on plain x ranges.
"""
from dataclasses import dataclass
from typing import Iterable, List, Sequence, Tuple

from inkline.sketch.config import NumberLineConfig
from inkline.sketch.interaction.actions import Point
from inkline.sketch.interaction.reducer import SegmentPoints, SketchState
from inkline.sketch.rulers.number_line import NumberLineRuler

Interval = Tuple[float, float]


@dataclass(frozen=True)
class EndArrows:
    """Whether a segment reaches the left/right end of the drawable line."""
    left: bool = False
    right: bool = False


def merge_intervals(intervals: Iterable[Interval]) -> List[Interval]:
    """Sort intervals by start and coalesce the ones that touch or overlap."""
    merged: List[List[float]] = []
    for left, right in sorted(intervals):
        if merged and left <= merged[-1][1]:
            merged[-1][1] = max(merged[-1][1], right)
        else:
            merged.append([left, right])
    return [(left, right) for left, right in merged]


def split_segment(
    segment: SegmentPoints,
    empty_ticks: Iterable[int],
    ruler: NumberLineRuler,
    radius: float,
    epsilon: float = 1e-6,
) -> List[SegmentPoints]:
    """Cut the open circle footprints out of a segment.

    Returns the visible pieces left to right; pieces narrower than ``epsilon``
    are dropped.
    """
    start, end = segment
    y = start.y
    x_min = min(start.x, end.x)
    x_max = max(start.x, end.x)

    gaps = []
    for tick in empty_ticks:
        cx = ruler.transform(tick)
        left, right = cx - radius, cx + radius
        if right > x_min and left < x_max:
            gaps.append((max(left, x_min), min(right, x_max)))

    pieces: List[SegmentPoints] = []
    current = x_min
    for left, right in merge_intervals(gaps):
        if current < left - epsilon:
            pieces.append((Point(current, y), Point(left, y)))
        current = right
    if current < x_max - epsilon:
        pieces.append((Point(current, y), Point(x_max, y)))
    return pieces


def end_arrows(segment: SegmentPoints, ruler: NumberLineRuler, tolerance: float) -> EndArrows:
    start, end = segment
    return EndArrows(
        left=start.x <= ruler.line_start + tolerance,
        right=end.x >= ruler.line_end - tolerance,
    )


def visible_segments(state: SketchState, ruler: NumberLineRuler, config: NumberLineConfig) -> List[SegmentPoints]:
    """All visible segment pieces, in stored segment order."""
    pieces: List[SegmentPoints] = []
    for segment in state.segments:
        pieces.extend(split_segment(segment, state.empty_ticks, ruler, config.circle_radius, config.split_epsilon))
    return pieces


def segment_arrows(segments: Sequence[SegmentPoints], ruler: NumberLineRuler, config: NumberLineConfig) -> Tuple[EndArrows, ...]:
    return tuple(end_arrows(segment, ruler, config.end_arrow_tolerance) for segment in segments)
