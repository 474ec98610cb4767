"""QPainter-backed drawing context."""

import math
import re

from PySide6.QtCore import QPointF, QRectF, Qt
from PySide6.QtGui import QBrush, QColor, QFont, QPainter, QPainterPath, QPen

FONT_PATTERN = re.compile(
    r"^(?P<styles>(?:[a-z-]+\s+)*)(?P<size>\d+(?:\.\d+)?)(?P<unit>pt|px)\s+(?P<family>.+)$",
    re.IGNORECASE,
)


def parse_font(spec: str) -> QFont:
    """
    Parse a CSS-like font shorthand such as "bold 14pt Arial".

    Unparseable specs fall back to the default font with the family set to
    the whole string.
    """
    match = FONT_PATTERN.match(spec.strip())
    if not match:
        return QFont(spec.strip())

    font = QFont(match.group("family").strip().strip("\"'"))
    size = float(match.group("size"))
    if match.group("unit").lower() == "px":
        font.setPixelSize(max(1, round(size)))
    else:
        font.setPointSizeF(size)

    styles = match.group("styles").lower().split()
    if "bold" in styles:
        font.setBold(True)
    if "italic" in styles:
        font.setItalic(True)
    return font


class QPainterContext:
    """
    DrawingContext over a QPainter.

    Path calls accumulate into a QPainterPath; stroke and fill paint it with
    the current style. Style state is saved and restored together with the
    painter state.
    """

    def __init__(self, painter: QPainter) -> None:
        self.painter = painter
        self._path = QPainterPath()
        self._line_width = 1.0
        self._line_dash: list[float] = []
        self._stroke_color = QColor("#000000")
        self._fill_color = QColor("#000000")
        self._font = QFont()
        self._saved: list[tuple[float, list[float], QColor, QColor, QFont]] = []

    def save(self) -> None:
        self.painter.save()
        self._saved.append(
            (
                self._line_width,
                list(self._line_dash),
                QColor(self._stroke_color),
                QColor(self._fill_color),
                QFont(self._font),
            )
        )

    def restore(self) -> None:
        self.painter.restore()
        if self._saved:
            (
                self._line_width,
                self._line_dash,
                self._stroke_color,
                self._fill_color,
                self._font,
            ) = self._saved.pop()

    def scale(self, sx: float, sy: float) -> None:
        self.painter.scale(sx, sy)

    def translate(self, dx: float, dy: float) -> None:
        self.painter.translate(dx, dy)

    def clear_rect(self, x: float, y: float, width: float, height: float) -> None:
        self.painter.save()
        self.painter.setCompositionMode(QPainter.CompositionMode.CompositionMode_Clear)
        self.painter.fillRect(QRectF(x, y, width, height), Qt.GlobalColor.transparent)
        self.painter.restore()

    def begin_path(self) -> None:
        self._path = QPainterPath()

    def close_path(self) -> None:
        self._path.closeSubpath()

    def move_to(self, x: float, y: float) -> None:
        self._path.moveTo(x, y)

    def _ensure_subpath(self, x: float, y: float) -> bool:
        """Start a subpath at (x, y) if the path is empty. Returns True if it did."""
        if self._path.elementCount() == 0:
            self._path.moveTo(x, y)
            return True
        return False

    def line_to(self, x: float, y: float) -> None:
        if not self._ensure_subpath(x, y):
            self._path.lineTo(x, y)

    def bezier_curve_to(
        self, c1x: float, c1y: float, c2x: float, c2y: float, x: float, y: float
    ) -> None:
        self._ensure_subpath(c1x, c1y)
        self._path.cubicTo(QPointF(c1x, c1y), QPointF(c2x, c2y), QPointF(x, y))

    def quadratic_curve_to(self, cx: float, cy: float, x: float, y: float) -> None:
        self._ensure_subpath(cx, cy)
        self._path.quadTo(QPointF(cx, cy), QPointF(x, y))

    def arc(
        self,
        x: float,
        y: float,
        radius: float,
        start_angle: float,
        end_angle: float,
        counterclockwise: bool = False,
    ) -> None:
        rect = QRectF(x - radius, y - radius, 2 * radius, 2 * radius)
        sweep = end_angle - start_angle
        if not counterclockwise and sweep >= 2 * math.pi:
            sweep = 2 * math.pi
        elif counterclockwise and sweep <= -2 * math.pi:
            sweep = -2 * math.pi

        start_x = x + radius * math.cos(start_angle)
        start_y = y + radius * math.sin(start_angle)
        if self._path.elementCount() == 0:
            self._path.moveTo(start_x, start_y)
        else:
            self._path.lineTo(start_x, start_y)

        # Qt measures degrees counter-clockwise with y up
        self._path.arcTo(rect, -math.degrees(start_angle), -math.degrees(sweep))

    def set_line_width(self, width: float) -> None:
        self._line_width = width

    def set_line_dash(self, dash: list[float]) -> None:
        self._line_dash = list(dash)

    def set_stroke_style(self, color: str) -> None:
        self._stroke_color = QColor(color)

    def set_fill_style(self, color: str) -> None:
        self._fill_color = QColor(color)

    def set_font(self, font: str) -> None:
        self._font = parse_font(font)

    def _pen(self) -> QPen:
        pen = QPen(self._stroke_color, self._line_width)
        pen.setCapStyle(Qt.PenCapStyle.FlatCap)
        pen.setJoinStyle(Qt.PenJoinStyle.MiterJoin)
        if self._line_dash and self._line_width > 0:
            dash = self._line_dash
            if len(dash) % 2:
                dash = dash * 2
            # Qt dash lengths are in units of the pen width
            pen.setDashPattern([max(d, 0.01) / self._line_width for d in dash])
        return pen

    def stroke(self) -> None:
        if self._line_width <= 0:
            return
        self.painter.strokePath(self._path, self._pen())

    def fill(self) -> None:
        self.painter.fillPath(self._path, QBrush(self._fill_color))

    def fill_text(self, text: str, x: float, y: float) -> None:
        self.painter.save()
        self.painter.setPen(self._fill_color)
        self.painter.setFont(self._font)
        self.painter.drawText(QPointF(x, y), text)
        self.painter.restore()
