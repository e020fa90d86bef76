import logging
from dataclasses import dataclass, field
from typing import Callable, FrozenSet, Optional, Tuple

from inkline.sketch.config import NumberLineConfig
from inkline.sketch.geometry.segments import EndArrows, segment_arrows, visible_segments
from inkline.sketch.interaction.actions import Point
from inkline.sketch.interaction.gestures import GestureClassifier
from inkline.sketch.interaction.history import ActionHistory
from inkline.sketch.interaction.reducer import SegmentPoints, reduce_actions
from inkline.sketch.interaction.stroke import StrokeRecorder
from inkline.sketch.rulers.number_line import NumberLineRuler

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SketchSnapshot:
    """Everything a renderer needs to draw the current sketch.

    ``segments`` are the visible pieces after open circle gaps are cut out,
    ``raw_segments`` the stored segments and ``arrows`` their end-arrow flags
    (one entry per stored segment). ``stroke`` is the stroke in progress, or
    None when there is nothing worth drawing yet.
    """
    segments: Tuple[SegmentPoints, ...] = ()
    raw_segments: Tuple[SegmentPoints, ...] = ()
    empty_ticks: FrozenSet[int] = field(default_factory=frozenset)
    filled_ticks: FrozenSet[int] = field(default_factory=frozenset)
    arrows: Tuple[EndArrows, ...] = ()
    stroke: Optional[Tuple[Point, ...]] = None
    can_undo: bool = False
    can_redo: bool = False
    can_reset: bool = False

    @property
    def left_arrow(self) -> bool:
        return any(arrow.left for arrow in self.arrows)

    @property
    def right_arrow(self) -> bool:
        return any(arrow.right for arrow in self.arrows)


class SketchController:
    """
    Owns the stroke in progress and the action history of one sketch.

    Input methods take raw surface coordinates; every method returns a fresh
    snapshot and passes it to ``listener`` when one is set.

    Example:
        controller = SketchController()
        controller.on_stroke_start(100, 250)
        controller.on_stroke_move(310, 250)
        snapshot = controller.on_stroke_end()
    """

    def __init__(self, config: Optional[NumberLineConfig] = None, listener: Optional[Callable[[SketchSnapshot], None]] = None) -> None:
        self.config: NumberLineConfig = config or NumberLineConfig()
        self.ruler = NumberLineRuler(self.config)
        self.classifier = GestureClassifier(self.ruler, self.config)
        self.history = ActionHistory()
        self.recorder = StrokeRecorder()
        self.listener = listener

    # --- Stroke input ---

    def on_stroke_start(self, x: float, y: float) -> SketchSnapshot:
        self.recorder.start(self._sample(x, y))
        return self._publish()

    def on_stroke_move(self, x: float, y: float) -> SketchSnapshot:
        if self.recorder.active:
            self.recorder.add(self._sample(x, y))
        return self._publish()

    def on_stroke_end(self) -> SketchSnapshot:
        if self.recorder.active:
            action = self.classifier.classify(self.recorder.finish())
            if action is not None:
                self.history.append(action)
                logger.debug("Recorded %s", action)
        return self._publish()

    # --- History ---

    def undo(self) -> SketchSnapshot:
        self.history.undo()
        return self._publish()

    def redo(self) -> SketchSnapshot:
        self.history.redo()
        return self._publish()

    def reset(self) -> SketchSnapshot:
        self.history.reset()
        return self._publish()

    # --- State ---

    def snapshot(self) -> SketchSnapshot:
        """Reduce the applied history and post-process it for drawing."""
        state = reduce_actions(self.history.applied())
        stroke = self.recorder.points if self.recorder.active else ()
        return SketchSnapshot(
            segments=tuple(visible_segments(state, self.ruler, self.config)),
            raw_segments=state.segments,
            empty_ticks=state.empty_ticks,
            filled_ticks=state.filled_ticks,
            arrows=segment_arrows(state.segments, self.ruler, self.config),
            stroke=stroke if len(stroke) >= 2 else None,
            can_undo=self.history.can_undo,
            can_redo=self.history.can_redo,
            can_reset=self.history.can_reset,
        )

    def _sample(self, x: float, y: float) -> Point:
        return Point(*self.ruler.clamp_sample(x, y))

    def _publish(self) -> SketchSnapshot:
        snapshot = self.snapshot()
        if self.listener:
            self.listener(snapshot)
        return snapshot
