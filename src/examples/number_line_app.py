import logging

from PySide6.QtWidgets import QApplication, QMainWindow

from inkline.sketch.colors.modes import ColorMap
from inkline.sketch.config import NumberLineConfig
from inkline.sketch.utils.logging_config import LoggingConfig
from inkline.sketch.widgets import NumberLineWidget


class MyWindow(QMainWindow):
    def __init__(self):
        super().__init__()
        self.setWindowTitle("Number line")
        self.color_map = ColorMap(darkmode=False)

        # Sketch x > -2 style answers on [-5, 5]
        self.widget = NumberLineWidget(NumberLineConfig(minimum=-5, maximum=5), self.color_map)
        self.widget.canvas.snapshot_changed.connect(self.show_status)
        self.setCentralWidget(self.widget)

    def show_status(self, snapshot):
        self.statusBar().showMessage(
            f"{len(snapshot.raw_segments)} segment(s), "
            f"open {sorted(snapshot.empty_ticks)}, closed {sorted(snapshot.filled_ticks)}"
        )


if __name__ == "__main__":
    LoggingConfig.setup_logging(logging.DEBUG)
    app = QApplication([])
    window = MyWindow()
    window.show()
    app.exec()
