"""Pointer hover detection over commit dots."""

import logging
import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

from PySide6.QtCore import QObject, Signal

from gitgraph.graph.types import Point
from gitgraph.render.renderer import commit_surface_position

if TYPE_CHECKING:
    from gitgraph.graph.commit import Commit
    from gitgraph.graph.gitgraph import GitGraph

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Tooltip:
    """Tooltip state pushed to whatever displays it."""

    position: Point | None
    text: str
    visible: bool


HIDDEN_TOOLTIP = Tooltip(position=None, text="", visible=False)


class HoverTracker(QObject):
    """
    Tracks which commits are under the pointer.

    A commit is hovered while the pointer is strictly within one dot radius
    of its center. Several overlapping commits can be hovered at once.
    `commit_hovered` fires once when a commit becomes hovered; there is no
    leave signal, the commit's is_hovered flag just clears.
    """

    commit_hovered = Signal(dict)  # {"author", "message", "date", "sha1"}
    tooltip_changed = Signal(object)  # Tooltip

    def __init__(self, graph: "GitGraph", parent: QObject | None = None) -> None:
        super().__init__(parent)
        self.graph = graph

    def on_pointer_move(
        self, position: Point, screen_position: Point | None = None
    ) -> list["Commit"]:
        """
        Update hover state for a pointer at `position` (surface coordinates).

        `screen_position` is where a tooltip should appear; defaults to
        `position`. Returns the commits under the pointer.
        """
        graph = self.graph
        radius = graph.template.commit.dot.size
        messages_shown = graph.template.commit.message.display
        tooltip_at = screen_position if screen_position is not None else position

        hovered: list[Commit] = []
        for commit in graph.commits:
            center = commit_surface_position(graph, commit)
            distance = math.hypot(center.x - position.x, center.y - position.y)

            if distance < radius:
                if not messages_shown:
                    self.tooltip_changed.emit(
                        Tooltip(tooltip_at, f"{commit.sha1} - {commit.message}", True)
                    )
                if not commit.is_hovered:
                    logger.debug("Pointer entered commit %s", commit.sha1)
                    self.commit_hovered.emit(commit.hover_payload())
                commit.is_hovered = True
                hovered.append(commit)
            else:
                commit.is_hovered = False

        if not hovered:
            self.tooltip_changed.emit(HIDDEN_TOOLTIP)
        return hovered
