from PySide6.QtGui import QColor

colors: dict[str, dict[int, QColor]] = {
    "blue": {
        100: QColor(210, 227, 252),
        200: QColor(174, 203, 250),
        400: QColor(102, 157, 246),
        500: QColor(66, 133, 244),
        600: QColor(26, 115, 232),
        700: QColor(25, 103, 210),
        900: QColor(23, 78, 166),
    },
    "grey": {
        100: QColor(241, 243, 244),
        200: QColor(230, 230, 230),
        400: QColor(189, 193, 198),
        500: QColor(153, 153, 153),
        600: QColor(128, 134, 139),
        700: QColor(95, 99, 104),
        900: QColor(32, 33, 36),
    },
}
