import math
from typing import Tuple

import numpy as np

from .base import BaseRuler
from inkline.sketch.config import NumberLineConfig


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves rounded up."""
    return int(math.floor(value + 0.5))


class NumberLineRuler(BaseRuler):
    """
    Horizontal ruler for an integer number line.

    Maps the extended domain [minimum - 1, maximum + 1] onto pixels with a fixed
    ``unit`` px per tick, centred in the configured surface width. The extra unit
    on each side is where end arrows are anchored.
    """

    def __init__(self, config: NumberLineConfig) -> None:
        """Create ruler for the given layout. The mapping never changes afterwards."""
        self.config = config
        length = config.extended_span * config.unit
        super().__init__(
            window_start=float(config.extended_minimum),
            window_stop=float(config.extended_maximum),
            length=length,
            offset=(config.width - length) / 2,
        )

    @property
    def line_start(self) -> float:
        """Pixel x of the left arrow anchor."""
        return self.offset

    @property
    def line_end(self) -> float:
        """Pixel x of the right arrow anchor."""
        return self.offset + self.length

    @property
    def draw_start(self) -> float:
        return self.line_start - self.config.arrow_extension

    @property
    def draw_end(self) -> float:
        return self.line_end + self.config.arrow_extension

    @property
    def line_y(self) -> float:
        return self.config.line_y

    def ticks(self) -> np.ndarray:
        """Integer ticks from minimum to maximum inclusive."""
        return np.arange(self.config.minimum, self.config.maximum + 1)

    def snap(self, value: float, low: int, high: int) -> int:
        """Round value to the nearest integer and clamp it to [low, high]."""
        return max(low, min(high, round_half_up(value)))

    def clamp_sample(self, x: float, y: float) -> Tuple[float, float]:
        """Clamp a raw pointer sample to the drawable band and round to whole pixels."""
        y_min = self.line_y - self.config.vertical_margin
        y_max = self.line_y + self.config.vertical_margin
        x = round_half_up(max(self.line_start, min(self.line_end, x)))
        y = round_half_up(max(y_min, min(y_max, y)))
        return x, y

    def grid_offset(self) -> Tuple[float, float]:
        """Offset that centres the background grid in the surface."""
        cell = self.config.unit
        dx = (self.config.width - (self.config.width // cell) * cell) / 2
        dy = (self.config.height - (self.config.height // cell) * cell) / 2
        return dx, dy
