from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class NumberLineConfig:
    """Layout constants and gesture thresholds for a number line sketch.

    Pixel values are in the drawing surface's local coordinates. Thresholds
    expressed relative to the tick spacing default to ``None`` and are derived
    from ``unit`` on construction.
    """
    # Domain
    minimum: int = -5
    maximum: int = 5

    # Surface
    width: float = 500
    height: float = 500
    unit: float = 30  # px per unit, also the grid cell
    vertical_margin: float = 40

    # Arrows
    arrow_extension: Optional[float] = None  # defaults to 0.1 * unit
    arrow_length: float = 10
    arrow_half_width: float = 7
    end_arrow_tolerance: float = 2

    # Gesture classification
    circle_max_span: Optional[float] = None  # defaults to 0.9 * unit
    circle_min_vertical: float = 12
    circle_min_points: int = 4
    circle_radius: float = 8
    filled_ink_ratio: float = 1.3

    # Geometry
    split_epsilon: float = 1e-6

    # Rendering
    tick_length: float = 10
    label_offset: float = 26
    stroke_width: float = 4

    def __post_init__(self) -> None:
        if self.minimum >= self.maximum:
            raise ValueError(f"minimum ({self.minimum}) must be below maximum ({self.maximum})")
        if self.unit <= 0:
            raise ValueError(f"unit must be positive, got {self.unit}")
        if self.extended_span * self.unit > self.width:
            raise ValueError(
                f"width {self.width} cannot hold {self.extended_span} units of {self.unit} px"
            )
        if self.arrow_extension is None:
            object.__setattr__(self, "arrow_extension", self.unit * 0.1)
        if self.circle_max_span is None:
            object.__setattr__(self, "circle_max_span", self.unit * 0.9)

    @property
    def extended_minimum(self) -> int:
        """Arrow anchor one unit left of ``minimum``."""
        return self.minimum - 1

    @property
    def extended_maximum(self) -> int:
        """Arrow anchor one unit right of ``maximum``."""
        return self.maximum + 1

    @property
    def extended_span(self) -> int:
        return self.extended_maximum - self.extended_minimum

    @property
    def line_y(self) -> float:
        return self.height / 2
