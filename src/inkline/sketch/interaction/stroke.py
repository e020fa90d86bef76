import logging
from typing import List, Optional, Tuple

from .actions import Point

logger = logging.getLogger(__name__)


class StrokeRecorder:
    """Collects the samples of the single stroke currently in progress."""

    def __init__(self) -> None:
        self._points: List[Point] = []
        self.active: bool = False

    @property
    def points(self) -> Tuple[Point, ...]:
        return tuple(self._points)

    def start(self, point: Point) -> bool:
        """Begin a new stroke. Ignored while another stroke is active."""
        if self.active:
            logger.debug("Ignoring stroke start at %s, a stroke is already active", point)
            return False
        self.active = True
        self._points = [point]
        return True

    def add(self, point: Point) -> bool:
        """Append a sample. Returns False when inactive or when the sample repeats the last one."""
        if not self.active:
            return False
        last: Optional[Point] = self._points[-1] if self._points else None
        if last is not None and last == point:
            return False
        self._points.append(point)
        return True

    def finish(self) -> Tuple[Point, ...]:
        """End the stroke and hand over its samples."""
        points = tuple(self._points)
        self._points = []
        self.active = False
        return points
