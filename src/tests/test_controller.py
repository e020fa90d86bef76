import math
import unittest

from inkline.sketch.config import NumberLineConfig
from inkline.sketch.controller import SketchController, SketchSnapshot
from inkline.sketch.geometry.segments import EndArrows
from inkline.sketch.interaction.actions import EmptyCircleAction, Point


def draw(controller, points):
    (x, y), *rest = points
    controller.on_stroke_start(x, y)
    for x, y in rest:
        controller.on_stroke_move(x, y)
    return controller.on_stroke_end()


def drag(x1, x2, y=250, steps=10):
    return [(x1 + (x2 - x1) * k / steps, y) for k in range(steps + 1)]


def loop(cx, cy=250, radius=8, count=8):
    return [
        (cx + radius * math.cos(2 * math.pi * k / count), cy + radius * math.sin(2 * math.pi * k / count))
        for k in range(count)
    ]


class TestSketchController(unittest.TestCase):
    def setUp(self):
        self.controller = SketchController()

    def test_initial_snapshot(self):
        snapshot = self.controller.snapshot()
        self.assertEqual(snapshot, SketchSnapshot())
        self.assertFalse(snapshot.left_arrow)
        self.assertFalse(snapshot.right_arrow)

    def test_segment_to_edge(self):
        snapshot = draw(self.controller, drag(310, 480))
        self.assertEqual(snapshot.raw_segments, ((Point(310, 250), Point(430, 250)),))
        self.assertEqual(snapshot.segments, snapshot.raw_segments)
        self.assertEqual(snapshot.arrows, (EndArrows(left=False, right=True),))
        self.assertTrue(snapshot.right_arrow)
        self.assertFalse(snapshot.left_arrow)

    def test_tap_produces_filled_circle(self):
        snapshot = draw(self.controller, [(340, 250), (341, 251)])
        self.assertEqual(snapshot.filled_ticks, {3})
        self.assertEqual(snapshot.empty_ticks, frozenset())

    def test_loop_produces_empty_circle(self):
        snapshot = draw(self.controller, loop(190))
        self.assertEqual(snapshot.empty_ticks, {-2})
        self.assertEqual(self.controller.history.actions, (EmptyCircleAction(-2),))

    def test_segment_split_by_open_circle(self):
        draw(self.controller, drag(100, 400))
        snapshot = draw(self.controller, loop(250))
        self.assertEqual(len(snapshot.raw_segments), 1)
        self.assertEqual(snapshot.segments, (
            (Point(100, 250), Point(242, 250)),
            (Point(258, 250), Point(400, 250)),
        ))

    def test_stroke_in_progress(self):
        snapshot = self.controller.on_stroke_start(200, 250)
        self.assertIsNone(snapshot.stroke)
        snapshot = self.controller.on_stroke_move(230, 250)
        self.assertEqual(snapshot.stroke, (Point(200, 250), Point(230, 250)))
        snapshot = self.controller.on_stroke_end()
        self.assertIsNone(snapshot.stroke)

    def test_samples_are_clamped(self):
        self.controller.on_stroke_start(0, 0)
        snapshot = self.controller.on_stroke_move(600, 600)
        self.assertEqual(snapshot.stroke, (Point(70, 210), Point(430, 290)))
        snapshot = self.controller.on_stroke_end()
        self.assertEqual(snapshot.raw_segments, ((Point(70, 250), Point(430, 250)),))
        self.assertTrue(snapshot.left_arrow and snapshot.right_arrow)

    def test_input_without_stroke_is_ignored(self):
        self.controller.on_stroke_move(300, 250)
        snapshot = self.controller.on_stroke_end()
        self.assertEqual(len(self.controller.history), 0)
        self.assertFalse(snapshot.can_reset)

    def test_degenerate_stroke_records_nothing(self):
        snapshot = draw(self.controller, [(300, 250)])
        self.assertFalse(snapshot.can_undo)
        snapshot = draw(self.controller, drag(296, 324))
        self.assertFalse(snapshot.can_undo)

    def test_second_start_is_ignored(self):
        self.controller.on_stroke_start(100, 250)
        self.controller.on_stroke_start(400, 250)
        self.controller.on_stroke_move(190, 250)
        snapshot = self.controller.on_stroke_end()
        self.assertEqual(snapshot.raw_segments, ((Point(100, 250), Point(190, 250)),))

    def test_undo_redo(self):
        draw(self.controller, drag(100, 400))
        draw(self.controller, [(250, 250), (251, 250)])
        snapshot = self.controller.undo()
        self.assertEqual(snapshot.filled_ticks, frozenset())
        self.assertTrue(snapshot.can_undo and snapshot.can_redo)
        snapshot = self.controller.redo()
        self.assertEqual(snapshot.filled_ticks, {0})
        self.assertFalse(snapshot.can_redo)

    def test_new_stroke_after_undo_drops_redo(self):
        draw(self.controller, drag(100, 400))
        self.controller.undo()
        snapshot = draw(self.controller, [(250, 250), (251, 250)])
        self.assertFalse(snapshot.can_redo)
        self.assertEqual(snapshot.raw_segments, ())
        self.assertEqual(len(self.controller.history), self.controller.history.cursor)

    def test_reset(self):
        draw(self.controller, drag(100, 400))
        draw(self.controller, loop(190))
        draw(self.controller, [(340, 250), (341, 251)])
        self.controller.undo()
        snapshot = self.controller.reset()
        self.assertEqual(snapshot.segments, ())
        self.assertEqual(snapshot.empty_ticks, frozenset())
        self.assertEqual(snapshot.filled_ticks, frozenset())
        self.assertFalse(snapshot.can_undo)
        self.assertFalse(snapshot.can_redo)
        self.assertFalse(snapshot.can_reset)

    def test_listener_receives_snapshots(self):
        received = []
        controller = SketchController(NumberLineConfig(), listener=received.append)
        draw(controller, [(340, 250), (341, 251)])
        controller.undo()
        self.assertEqual(len(received), 4)
        self.assertEqual(received[2].filled_ticks, {3})
        self.assertEqual(received[-1], controller.snapshot())


if __name__ == '__main__':
    unittest.main()
