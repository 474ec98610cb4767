"""
Graph renderer - issues the draw calls for a whole graph.

Every render is a full redraw: surface sizing, clear, branch lines, then
commits on top. The renderer holds no state, so the same graph always
produces the same sequence of draw calls.
"""

import math
from typing import TYPE_CHECKING

from gitgraph.config.template import MERGE_STYLE_CURVE
from gitgraph.graph.types import PathPointType, Point
from gitgraph.render.context import DrawingContext

if TYPE_CHECKING:
    from gitgraph.graph.branch import Branch
    from gitgraph.graph.commit import Commit
    from gitgraph.graph.gitgraph import GitGraph

# Extra width reserved for commit messages
MESSAGE_AREA_WIDTH = 800
# Baseline offset of a message relative to its commit
MESSAGE_BASELINE_OFFSET = 3
# Angle between the arrow's axis and each of its barbs
ARROW_BARB_ANGLE = math.pi / 7


def surface_size(graph: "GitGraph") -> tuple[float, float]:
    """Get the unscaled surface size needed to show the whole graph."""
    template = graph.template
    width = (
        abs(graph.column_max * template.branch.spacing_x)
        + abs(graph.cursor_x)
        + graph.margin_x * 2
    )
    height = (
        abs(graph.column_max * template.branch.spacing_y)
        + abs(graph.cursor_y)
        + graph.margin_y * 2
    )
    if template.commit.message.display:
        width += MESSAGE_AREA_WIDTH
    return width, height


def surface_origin(graph: "GitGraph") -> Point:
    """
    Get the translation applied for reversed growth directions.

    Positive commit spacing means the graph grows toward the bottom (or
    right) edge, so the origin moves there.
    """
    template = graph.template
    width, height = surface_size(graph)
    origin_x = 0.0
    origin_y = 0.0
    if template.commit.spacing_y > 0:
        origin_y = height - graph.margin_y * 2
    if template.commit.spacing_x > 0:
        origin_x = width - graph.margin_x * 2
    return Point(origin_x, origin_y)


def commit_surface_position(graph: "GitGraph", commit: "Commit") -> Point:
    """Get a commit's position in unscaled surface coordinates."""
    origin = surface_origin(graph)
    return Point(
        commit.x + origin.x + graph.margin_x,
        commit.y + origin.y + graph.margin_y,
    )


class GraphRenderer:
    """Draws a GitGraph onto a DrawingContext."""

    def render(self, graph: "GitGraph", context: DrawingContext, scale: float = 1.0) -> None:
        """Repaint the whole graph. `scale` is the device pixel ratio."""
        width, height = surface_size(graph)
        origin = surface_origin(graph)

        context.save()
        context.scale(scale, scale)
        context.clear_rect(0, 0, width, height)
        context.translate(graph.margin_x, graph.margin_y)
        if origin.x or origin.y:
            context.translate(origin.x, origin.y)

        # Newest branches first so older lines end up on top
        for branch in reversed(graph.branches):
            self.draw_branch(graph, branch, context)

        # Commits go over every line
        for commit in graph.commits:
            self.draw_commit(graph, commit, context)

        context.restore()

    def draw_branch(self, graph: "GitGraph", branch: "Branch", context: DrawingContext) -> None:
        """Stroke a branch's path."""
        spacing = graph.template.commit
        curve = graph.template.branch.merge_style == MERGE_STYLE_CURVE

        context.begin_path()
        previous = None
        for point in branch.path:
            if point.type is PathPointType.START or previous is None:
                context.move_to(point.x, point.y)
            elif curve:
                context.bezier_curve_to(
                    previous.x - spacing.spacing_x / 2,
                    previous.y - spacing.spacing_y / 2,
                    point.x + spacing.spacing_x / 2,
                    point.y + spacing.spacing_y / 2,
                    point.x,
                    point.y,
                )
            else:
                context.line_to(point.x, point.y)
            previous = point

        context.set_line_width(branch.line_width)
        context.set_stroke_style(branch.color)
        context.set_line_dash(branch.line_dash)
        context.stroke()
        context.close_path()

    def draw_commit(self, graph: "GitGraph", commit: "Commit", context: DrawingContext) -> None:
        """Draw a commit's dot, arrow and message."""
        context.begin_path()
        context.arc(commit.x, commit.y, commit.dot_size, 0, 2 * math.pi, False)
        context.set_fill_style(commit.dot_color)
        context.set_stroke_style(commit.dot_stroke_color)
        if commit.dot_stroke_width is not None:
            context.set_line_width(commit.dot_stroke_width)
            context.set_line_dash([])
            context.stroke()
        context.fill()
        context.close_path()

        if commit.arrow_display and commit.parent_commit is not None:
            self.draw_arrow(graph, commit, context)

        if commit.message_display:
            context.set_font(commit.message_font)
            context.set_fill_style(commit.message_color)
            context.fill_text(
                commit.display_text(),
                (graph.column_max + 1) * graph.template.branch.spacing_x,
                commit.y + MESSAGE_BASELINE_OFFSET,
            )

    def arrow_angle(self, graph: "GitGraph", commit: "Commit") -> float | None:
        """
        Get the direction from a commit toward its parent, in radians.

        Merge commits and first commits of a branch sit at the end of a
        curve, so the lane delta gives the line's real tangent there.
        Returns None for zero-length vectors.
        """
        parent = commit.parent_commit
        if parent is None:
            return None

        if commit.is_merge or commit.is_branch_start:
            template = graph.template
            lanes = parent.branch.column - commit.branch.column
            dy = template.branch.spacing_y * lanes + template.commit.spacing_y
            dx = template.branch.spacing_x * lanes + template.commit.spacing_x
        else:
            dy = parent.y - commit.y
            dx = parent.x - commit.x

        if dx == 0 and dy == 0:
            return None
        return math.atan2(dy, dx)

    def draw_arrow(self, graph: "GitGraph", commit: "Commit", context: DrawingContext) -> None:
        """Draw an arrowhead next to the dot, pointing at the parent commit."""
        alpha = self.arrow_angle(graph, commit)
        if alpha is None:
            return

        template = graph.template
        size = template.arrow.size or 0
        color = template.arrow.color or commit.branch.color
        if commit.is_merge or commit.is_branch_start:
            color = commit.parent_commit.branch.color

        h = template.commit.dot.size + template.arrow.offset
        tip = _polar(commit, h, alpha)
        left = _polar(commit, h + size, alpha - ARROW_BARB_ANGLE)
        base = _polar(commit, h + size / 2, alpha)
        right = _polar(commit, h + size, alpha + ARROW_BARB_ANGLE)

        context.begin_path()
        context.set_fill_style(color)
        context.move_to(tip.x, tip.y)
        context.line_to(left.x, left.y)
        context.quadratic_curve_to(base.x, base.y, right.x, right.y)
        context.line_to(right.x, right.y)
        context.fill()


def _polar(commit: "Commit", distance: float, angle: float) -> Point:
    return Point(
        distance * math.cos(angle) + commit.x,
        distance * math.sin(angle) + commit.y,
    )
