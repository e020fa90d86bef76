import os
import unittest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

try:
    from PySide6.QtGui import QImage, QPainter
    from PySide6.QtWidgets import QApplication
except ImportError:  # Qt runtime libraries missing on this host
    QApplication = None

from inkline.sketch.config import NumberLineConfig


@unittest.skipIf(QApplication is None, "PySide6 is not available")
class TestNumberLineWidget(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.app = QApplication.instance() or QApplication([])

    def setUp(self):
        from inkline.sketch.widgets import NumberLineWidget
        self.widget = NumberLineWidget(NumberLineConfig())

    def tearDown(self):
        self.widget.deleteLater()

    def test_buttons_follow_history(self):
        self.assertFalse(self.widget.undo_button.isEnabled())
        self.assertFalse(self.widget.redo_button.isEnabled())
        self.assertFalse(self.widget.reset_button.isEnabled())

        controller = self.widget.controller
        controller.on_stroke_start(100, 250)
        controller.on_stroke_move(400, 250)
        controller.on_stroke_end()
        self.assertTrue(self.widget.undo_button.isEnabled())
        self.assertTrue(self.widget.reset_button.isEnabled())

        self.widget.undo_button.click()
        self.assertFalse(self.widget.undo_button.isEnabled())
        self.assertTrue(self.widget.redo_button.isEnabled())

        self.widget.reset_button.click()
        self.assertFalse(self.widget.redo_button.isEnabled())
        self.assertFalse(self.widget.reset_button.isEnabled())

    def test_canvas_tracks_snapshots(self):
        received = []
        self.widget.canvas.snapshot_changed.connect(received.append)
        self.widget.controller.on_stroke_start(340, 250)
        self.widget.controller.on_stroke_move(341, 251)
        self.widget.controller.on_stroke_end()
        self.assertEqual(len(received), 3)
        self.assertEqual(self.widget.canvas.snapshot.filled_ticks, {3})

    def test_renders_without_errors(self):
        controller = self.widget.controller
        controller.on_stroke_start(100, 250)
        controller.on_stroke_move(430, 250)
        controller.on_stroke_end()
        controller.on_stroke_start(250, 242)
        controller.on_stroke_move(258, 250)
        controller.on_stroke_move(250, 258)
        controller.on_stroke_move(242, 250)

        image = QImage(self.widget.canvas.size(), QImage.Format.Format_ARGB32)
        painter = QPainter(image)
        self.widget.canvas.renderer.draw(painter, self.widget.canvas.snapshot)
        painter.end()
        self.assertFalse(image.isNull())
        self.assertEqual(len(self.widget.canvas.snapshot.stroke), 4)


if __name__ == '__main__':
    unittest.main()
