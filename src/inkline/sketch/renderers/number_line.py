from PySide6.QtCore import QLineF, QPointF, QRectF, Qt
from PySide6.QtGui import QBrush, QFont, QPainter, QPainterPath, QPen, QPolygonF

from inkline.sketch.colors.modes import ColorMap
from inkline.sketch.controller import SketchSnapshot
from inkline.sketch.rulers.number_line import NumberLineRuler


class NumberLineRenderer:
    """Paints a sketch snapshot: grid, axis, ticks, circles, segments, arrows and the live stroke."""

    def __init__(self, ruler: NumberLineRuler, color_map: ColorMap):
        self.ruler = ruler
        self.config = ruler.config
        self.color_map = color_map

    def draw(self, painter: QPainter, snapshot: SketchSnapshot) -> None:
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        self.draw_grid(painter)
        self.draw_axis(painter)
        self.draw_ticks(painter)
        self.draw_circles(painter, snapshot)
        self.draw_segments(painter, snapshot)
        self.draw_arrows(painter, snapshot)
        self.draw_stroke(painter, snapshot)

    def draw_grid(self, painter: QPainter) -> None:
        cfg = self.config
        painter.fillRect(QRectF(0, 0, cfg.width, cfg.height), self.color_map.get_object_color("surface-base"))
        painter.setPen(QPen(self.color_map.get_object_color("grid"), 1))
        dx, dy = self.ruler.grid_offset()
        x = dx
        while x <= cfg.width:
            painter.drawLine(QLineF(x, 0, x, cfg.height))
            x += cfg.unit
        y = dy
        while y <= cfg.height:
            painter.drawLine(QLineF(0, y, cfg.width, y))
            y += cfg.unit

    def draw_axis(self, painter: QPainter) -> None:
        # Stop at the arrow bases so the line does not poke through the tips
        y = self.ruler.line_y
        length = self.config.arrow_length
        painter.setPen(QPen(self.color_map.get_object_color("axis"), 2))
        painter.drawLine(QLineF(self.ruler.draw_start + length, y, self.ruler.draw_end - length, y))

    def draw_ticks(self, painter: QPainter) -> None:
        y = self.ruler.line_y
        color = self.color_map.get_object_color("label")
        font = QFont("Latin Modern Roman")
        font.setPixelSize(14)
        font.setBold(True)
        painter.setFont(font)
        label_width = self.config.unit

        for tick in self.ruler.ticks():
            x = self.ruler.transform(tick)
            painter.setPen(QPen(self.color_map.get_object_color("axis"), 1.5))
            painter.drawLine(QLineF(x, y, x, y + self.config.tick_length))
            painter.setPen(QPen(color, 1))
            painter.drawText(
                QRectF(x - label_width / 2, y + self.config.label_offset - 14, label_width, 20),
                Qt.AlignmentFlag.AlignHCenter | Qt.AlignmentFlag.AlignTop,
                self.format_tick(tick),
            )

    def draw_circles(self, painter: QPainter, snapshot: SketchSnapshot) -> None:
        ink = self.color_map.get_saturated_color("blue", "line")
        radius = self.config.circle_radius
        y = self.ruler.line_y
        painter.setPen(QPen(ink, 2))

        painter.setBrush(Qt.BrushStyle.NoBrush)
        for tick in sorted(snapshot.empty_ticks):
            painter.drawEllipse(QPointF(self.ruler.transform(tick), y), radius, radius)

        painter.setBrush(QBrush(ink))
        for tick in sorted(snapshot.filled_ticks):
            painter.drawEllipse(QPointF(self.ruler.transform(tick), y), radius, radius)

    def draw_segments(self, painter: QPainter, snapshot: SketchSnapshot) -> None:
        painter.setPen(self._ink_pen())
        painter.setBrush(Qt.BrushStyle.NoBrush)
        for start, end in snapshot.segments:
            painter.drawLine(QLineF(start.x, start.y, end.x, end.y))

    def draw_arrows(self, painter: QPainter, snapshot: SketchSnapshot) -> None:
        # Grey arrows first so blue segment arrows cover them
        painter.setPen(Qt.PenStyle.NoPen)
        painter.setBrush(QBrush(self.color_map.get_object_color("axis")))
        painter.drawPolygon(self.arrow_polygon(left=True))
        painter.drawPolygon(self.arrow_polygon(left=False))

        painter.setBrush(QBrush(self.color_map.get_saturated_color("blue", "fill")))
        if snapshot.left_arrow:
            painter.drawPolygon(self.arrow_polygon(left=True))
        if snapshot.right_arrow:
            painter.drawPolygon(self.arrow_polygon(left=False))

    def draw_stroke(self, painter: QPainter, snapshot: SketchSnapshot) -> None:
        if not snapshot.stroke:
            return
        first, *rest = snapshot.stroke
        path = QPainterPath(QPointF(first.x, first.y))
        for point in rest:
            path.lineTo(point.x, point.y)
        painter.setPen(self._ink_pen())
        painter.setBrush(Qt.BrushStyle.NoBrush)
        painter.drawPath(path)

    def arrow_polygon(self, left: bool) -> QPolygonF:
        y = self.ruler.line_y
        length = self.config.arrow_length
        half = self.config.arrow_half_width
        if left:
            tip = self.ruler.draw_start
            base = tip + length
        else:
            tip = self.ruler.draw_end
            base = tip - length
        return QPolygonF([QPointF(base, y - half), QPointF(tip, y), QPointF(base, y + half)])

    def format_tick(self, tick) -> str:
        return str(int(tick))

    def _ink_pen(self) -> QPen:
        pen = QPen(self.color_map.get_saturated_color("blue", "line"), self.config.stroke_width)
        pen.setCapStyle(Qt.PenCapStyle.RoundCap)
        pen.setJoinStyle(Qt.PenJoinStyle.RoundJoin)
        return pen
