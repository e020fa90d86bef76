from dataclasses import dataclass
from typing import Tuple, Union


@dataclass(frozen=True)
class Point:
    """Sample or endpoint in local surface pixels."""
    x: float
    y: float


@dataclass(frozen=True)
class SegmentAction:
    """Filled span between two extended-domain ticks. ``start`` is the left endpoint."""
    start: Point
    end: Point

    @property
    def endpoints(self) -> Tuple[Point, Point]:
        return (self.start, self.end)


@dataclass(frozen=True)
class EmptyCircleAction:
    """Open point marker at a tick."""
    tick: int


@dataclass(frozen=True)
class FilledCircleAction:
    """Closed point marker at a tick."""
    tick: int


Action = Union[SegmentAction, EmptyCircleAction, FilledCircleAction]
