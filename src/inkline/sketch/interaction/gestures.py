"""
Gesture classification for free-hand number line strokes.

A finished stroke is reduced to its bounding box and ink (path length) and
turned into at most one action:

- a narrow stroke with vertical travel is a loop around a tick: an open
  circle, or a filled circle when it carries a lot of ink (scribbling);
- a narrow, flat stroke is a dab on the line: a filled circle;
- anything else is a horizontal drag snapped to the extended tick range.
"""
import logging
from dataclasses import dataclass
from typing import Optional, Sequence

import numpy as np

from .actions import Action, EmptyCircleAction, FilledCircleAction, Point, SegmentAction
from inkline.sketch.config import NumberLineConfig
from inkline.sketch.rulers.number_line import NumberLineRuler

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StrokeStats:
    """Bounding box and ink measurements of a stroke."""
    count: int
    min_x: float
    max_x: float
    min_y: float
    max_y: float
    ink: float

    @classmethod
    def from_points(cls, points: Sequence[Point]) -> "StrokeStats":
        xs = np.array([p.x for p in points], dtype=float)
        ys = np.array([p.y for p in points], dtype=float)
        ink = float(np.hypot(np.diff(xs), np.diff(ys)).sum()) if len(points) > 1 else 0.0
        return cls(
            count=len(points),
            min_x=float(xs.min()),
            max_x=float(xs.max()),
            min_y=float(ys.min()),
            max_y=float(ys.max()),
            ink=ink,
        )

    @property
    def span_x(self) -> float:
        return self.max_x - self.min_x

    @property
    def span_y(self) -> float:
        return self.max_y - self.min_y

    @property
    def perimeter(self) -> float:
        return max(1.0, 2 * (self.span_x + self.span_y))

    @property
    def ink_ratio(self) -> float:
        return self.ink / self.perimeter

    @property
    def center_x(self) -> float:
        return (self.min_x + self.max_x) / 2


class GestureClassifier:
    """Turns finished strokes into semantic actions."""

    def __init__(self, ruler: NumberLineRuler, config: Optional[NumberLineConfig] = None) -> None:
        self.ruler = ruler
        self.config = config or ruler.config

    def classify(self, points: Sequence[Point]) -> Optional[Action]:
        """Classify a finished stroke. Returns None when the stroke means nothing."""
        if len(points) < 2:
            logger.debug("Dropping stroke with %d sample(s)", len(points))
            return None

        stats = StrokeStats.from_points(points)
        cfg = self.config

        if stats.span_x < cfg.circle_max_span:
            if stats.count >= cfg.circle_min_points and stats.span_y >= cfg.circle_min_vertical:
                tick = self._circle_tick(stats)
                if stats.ink_ratio >= cfg.filled_ink_ratio:
                    logger.debug("Scribble at tick %d (ink ratio %.2f)", tick, stats.ink_ratio)
                    return FilledCircleAction(tick)
                logger.debug("Loop at tick %d (ink ratio %.2f)", tick, stats.ink_ratio)
                return EmptyCircleAction(tick)
            if stats.span_y < cfg.circle_min_vertical:
                tick = self._circle_tick(stats)
                logger.debug("Dab at tick %d", tick)
                return FilledCircleAction(tick)

        return self._segment(stats)

    def _circle_tick(self, stats: StrokeStats) -> int:
        value = self.ruler.get_value_at(stats.center_x)
        return self.ruler.snap(value, self.config.minimum, self.config.maximum)

    def _segment(self, stats: StrokeStats) -> Optional[SegmentAction]:
        low, high = self.config.extended_minimum, self.config.extended_maximum
        left = self.ruler.snap(self.ruler.get_value_at(stats.min_x), low, high)
        right = self.ruler.snap(self.ruler.get_value_at(stats.max_x), low, high)
        if left == right:
            logger.debug("Dropping zero-length drag snapped to tick %d", left)
            return None

        y = self.ruler.line_y
        logger.debug("Segment from %d to %d", left, right)
        return SegmentAction(
            start=Point(self.ruler.transform(left), y),
            end=Point(self.ruler.transform(right), y),
        )
