from typing import Literal, Optional
from inkline.sketch.colors.palette import colors
from PySide6.QtGui import QColor


ObjectColorName = Literal["surface-base", "grid", "axis", "label"]
SaturatedColorName = Literal["blue", "grey"]
SaturationLevel = Literal["subtle-tint", "fill", "line"]


class ColorMap:

    # Neutral color level map for light & dark mode
    _neutral_levels: dict[str, list[QColor]] = {
        "neutral-0": [QColor(255, 255, 255), QColor(0, 0, 0)],
        "neutral-50": [QColor(246, 247, 249), QColor(20, 24, 31)],
        "neutral-200": [QColor(230, 230, 230), QColor(39, 49, 63)],
        "neutral-500": [QColor(153, 153, 153), QColor(98, 112, 132)],
        "neutral-700": [QColor(96, 110, 128), QColor(182, 191, 201)],
    }

    def __init__(self, darkmode: bool = False) -> None:
        """Create color map. darkmode=True for dark theme, False for light theme."""
        self.darkmode: bool = darkmode

    def get_object_color(self, name: ObjectColorName, darkmode: Optional[bool] = None) -> QColor:
        """Get UI color (surface, grid, axis, labels). Uses instance darkmode if not specified."""
        layout_and_text_colors = {
            "surface-base": ["neutral-0", "neutral-50"],
            "grid": ["neutral-200", "neutral-200"],
            "axis": ["neutral-500", "neutral-500"],
            "label": ["neutral-500", "neutral-700"],
        }
        return self._get_neutral_color(layout_and_text_colors[name][self._mode_loc(darkmode)], darkmode)

    def get_saturated_color(
        self,
        color: SaturatedColorName,
        name: SaturationLevel,
        darkmode: Optional[bool] = None
    ) -> QColor:
        """Get drawing color at specified saturation level. Uses instance darkmode if not specified."""
        saturations = {
            "subtle-tint": [100, 900],
            "fill": [700, 400],
            "line": [700, 400],
        }
        return colors[color][saturations[name][self._mode_loc(darkmode)]]

    def _get_neutral_color(self, level: str, darkmode: Optional[bool] = None) -> QColor:
        return ColorMap._neutral_levels[level][self._mode_loc(darkmode)]

    def _mode_loc(self, darkmode: Optional[bool]) -> int:
        if darkmode is None:
            darkmode = self.darkmode
        return 1 if darkmode else 0
