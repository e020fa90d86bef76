from typing import Optional

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QHBoxLayout, QPushButton, QVBoxLayout, QWidget

from inkline.sketch.colors.modes import ColorMap
from inkline.sketch.config import NumberLineConfig
from inkline.sketch.controller import SketchController, SketchSnapshot
from inkline.sketch.widgets.sketch_canvas import SketchCanvas


class NumberLineWidget(QWidget):
    """
    Main composite sketch widget.

    Arranges:
    - A row of Undo / Redo / Reset buttons
    - The sketch canvas

    The buttons only call the controller's history API; their enabled state
    follows the latest snapshot.
    """

    def __init__(self, config: Optional[NumberLineConfig] = None, color_map: Optional[ColorMap] = None, parent=None):
        super().__init__(parent)
        self.color_map = color_map or ColorMap()
        self.controller = SketchController(config)
        self.canvas = SketchCanvas(self.controller, self.color_map, self)

        self.undo_button = QPushButton("Undo", self)
        self.redo_button = QPushButton("Redo", self)
        self.reset_button = QPushButton("Reset", self)
        self.undo_button.clicked.connect(lambda checked=False: self.controller.undo())
        self.redo_button.clicked.connect(lambda checked=False: self.controller.redo())
        self.reset_button.clicked.connect(lambda checked=False: self.controller.reset())

        # Layout
        buttons = QHBoxLayout()
        buttons.setContentsMargins(0, 0, 0, 0)
        buttons.addStretch(1)
        for button in (self.undo_button, self.redo_button, self.reset_button):
            button.setFocusPolicy(Qt.FocusPolicy.NoFocus)
            buttons.addWidget(button)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(4)
        layout.addLayout(buttons)
        layout.addWidget(self.canvas)

        self.canvas.snapshot_changed.connect(self._update_buttons)
        self._update_buttons(self.canvas.snapshot)

    def _update_buttons(self, snapshot: SketchSnapshot) -> None:
        self.undo_button.setEnabled(snapshot.can_undo)
        self.redo_button.setEnabled(snapshot.can_redo)
        self.reset_button.setEnabled(snapshot.can_reset)

