class BaseRuler:
    """Base class for rulers providing an affine value/pixel transformation."""

    def __init__(self, window_start: float, window_stop: float, length: float = 1.0, offset: float = 0.0) -> None:
        """Create ruler mapping [window_start, window_stop] onto [offset, offset + length] pixels."""
        self.window_start = window_start
        self.window_stop = window_stop
        self.window_length = self.window_stop - self.window_start
        self.length = length
        self.offset = offset

    @property
    def pixels_per_unit(self) -> float:
        return self.length / self.window_length

    def transform(self, value: float) -> float:
        """Convert data value to pixel position."""
        return self.offset + (value - self.window_start) * self.length / self.window_length

    def get_value_at(self, x: float) -> float:
        """Convert pixel position to data value."""
        return self.window_start + (x - self.offset) * self.window_length / self.length

