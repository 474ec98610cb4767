"""Git graph widget - paints a GitGraph and reports commit hovers."""

import logging
import math

from PySide6.QtCore import QPoint, QPointF, Qt, Signal
from PySide6.QtGui import QColor, QImage, QMouseEvent, QPainter, QPaintEvent
from PySide6.QtWidgets import QToolTip, QWidget

from gitgraph.graph.gitgraph import GitGraph
from gitgraph.graph.types import Point
from gitgraph.render.qt_context import QPainterContext
from gitgraph.render.renderer import GraphRenderer, surface_size
from gitgraph.ui.hover import HoverTracker, Tooltip

logger = logging.getLogger(__name__)


class GitGraphWidget(QWidget):
    """
    Widget showing a git graph.

    The graph is rendered synchronously into an offscreen image whenever it
    changes; paintEvent only blits that image. The widget sizes itself to
    the graph's surface.
    """

    commit_hovered = Signal(dict)  # {"author", "message", "date", "sha1"}

    def __init__(
        self,
        graph: GitGraph,
        background: str = "#FFFFFF",
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.graph = graph
        self._background = QColor(background)
        self._renderer = GraphRenderer()
        self._buffer: QImage | None = None

        self._hover = HoverTracker(graph, self)
        self._hover.commit_hovered.connect(self.commit_hovered.emit)
        self._hover.tooltip_changed.connect(self._on_tooltip_changed)

        self.setMouseTracking(True)
        graph.changed.connect(self.redraw)
        self.redraw()

    @property
    def buffer(self) -> QImage | None:
        """The last rendered frame."""
        return self._buffer

    def redraw(self) -> None:
        """Render the whole graph into the offscreen buffer."""
        width, height = surface_size(self.graph)
        ratio = self.devicePixelRatioF()

        image = QImage(
            max(1, math.ceil(width * ratio)),
            max(1, math.ceil(height * ratio)),
            QImage.Format.Format_ARGB32_Premultiplied,
        )
        image.fill(Qt.GlobalColor.transparent)

        painter = QPainter(image)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        painter.setRenderHint(QPainter.RenderHint.TextAntialiasing)
        try:
            self._renderer.render(self.graph, QPainterContext(painter), scale=ratio)
        finally:
            painter.end()

        logger.debug(
            "Rendered %d commits at %.0fx%.0f (ratio %s)", len(self.graph.commits), width, height, ratio
        )
        image.setDevicePixelRatio(ratio)
        self._buffer = image
        self.setFixedSize(max(1, math.ceil(width)), max(1, math.ceil(height)))
        self.update()

    def paintEvent(self, event: QPaintEvent) -> None:  # noqa: N802
        """Blit the rendered graph."""
        painter = QPainter(self)
        painter.fillRect(self.rect(), self._background)
        if self._buffer is not None:
            painter.drawImage(QPointF(0, 0), self._buffer)
        painter.end()

    def mouseMoveEvent(self, event: QMouseEvent) -> None:  # noqa: N802
        """Feed pointer moves to hover tracking."""
        pos = event.position()
        global_pos = event.globalPosition()
        self._hover.on_pointer_move(
            Point(pos.x(), pos.y()),
            Point(global_pos.x(), global_pos.y()),
        )
        super().mouseMoveEvent(event)

    def _on_tooltip_changed(self, tooltip: Tooltip) -> None:
        if tooltip.visible and tooltip.position is not None:
            QToolTip.showText(
                QPoint(round(tooltip.position.x), round(tooltip.position.y)),
                tooltip.text,
                self,
            )
        else:
            QToolTip.hideText()
