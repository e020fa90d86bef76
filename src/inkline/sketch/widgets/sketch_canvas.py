import logging
from typing import Optional

from PySide6.QtCore import QEvent, Qt, Signal
from PySide6.QtWidgets import QWidget
from PySide6.QtGui import QPainter

from inkline.sketch.colors.modes import ColorMap
from inkline.sketch.controller import SketchController, SketchSnapshot
from inkline.sketch.renderers.number_line import NumberLineRenderer

logger = logging.getLogger(__name__)


class SketchCanvas(QWidget):
    """
    Drawing surface for a number line sketch.

    Key behaviors:
    - Mouse and single-finger touch input feed the controller in local coordinates
    - Extra touch points are ignored while a stroke is in progress
    - Leaving the widget ends the current stroke
    - Paints the latest snapshot through NumberLineRenderer
    """

    snapshot_changed = Signal(object)

    def __init__(self, controller: SketchController, color_map: ColorMap, parent: Optional[QWidget] = None) -> None:
        """Create canvas bound to a controller; the canvas becomes the controller's listener."""
        super().__init__(parent)
        self.controller: SketchController = controller
        self.renderer = NumberLineRenderer(controller.ruler, color_map)
        self.snapshot: SketchSnapshot = controller.snapshot()
        controller.listener = self._apply_snapshot

        self.setFixedSize(int(controller.config.width), int(controller.config.height))
        self.setAttribute(Qt.WidgetAttribute.WA_AcceptTouchEvents, True)

    def _apply_snapshot(self, snapshot: SketchSnapshot) -> None:
        self.snapshot = snapshot
        self.update()
        self.snapshot_changed.emit(snapshot)

    def paintEvent(self, event):
        painter = QPainter(self)
        self.renderer.draw(painter, self.snapshot)
        painter.end()

    def mousePressEvent(self, event):
        if event.button() == Qt.MouseButton.LeftButton:
            pos = event.position()
            self.controller.on_stroke_start(pos.x(), pos.y())
            event.accept()

    def mouseMoveEvent(self, event):
        if self.controller.recorder.active:
            pos = event.position()
            self.controller.on_stroke_move(pos.x(), pos.y())
            event.accept()

    def mouseReleaseEvent(self, event):
        if event.button() == Qt.MouseButton.LeftButton:
            self.controller.on_stroke_end()
            event.accept()

    def leaveEvent(self, event):
        if self.controller.recorder.active:
            self.controller.on_stroke_end()
        super().leaveEvent(event)

    def event(self, event):
        et = event.type()
        if et not in (QEvent.Type.TouchBegin, QEvent.Type.TouchUpdate, QEvent.Type.TouchEnd, QEvent.Type.TouchCancel):
            return super().event(event)

        points = event.points()
        if et in (QEvent.Type.TouchEnd, QEvent.Type.TouchCancel):
            self.controller.on_stroke_end()
        elif len(points) != 1:
            logger.debug("Ignoring %d simultaneous touch points", len(points))
        else:
            pos = points[0].position()
            if et == QEvent.Type.TouchBegin:
                self.controller.on_stroke_start(pos.x(), pos.y())
            else:
                self.controller.on_stroke_move(pos.x(), pos.y())
        event.accept()
        return True
