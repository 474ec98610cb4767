"""Commit placement on the shared time-step cursor."""

from typing import TYPE_CHECKING

from gitgraph.graph.types import CommitType, Point

if TYPE_CHECKING:
    from gitgraph.graph.branch import Branch
    from gitgraph.graph.commit import Commit, CommitOptions
    from gitgraph.graph.gitgraph import GitGraph

# Vertical room a detail block takes without extra reservation
DETAIL_BASE_HEIGHT = 40


def step_cursor(graph: "GitGraph", steps: int = 1) -> None:
    """Move the shared cursor by whole commit spacing steps."""
    graph.cursor_x += graph.template.commit.spacing_x * steps
    graph.cursor_y += graph.template.commit.spacing_y * steps


def _base_position(branch: "Branch", graph: "GitGraph") -> Point:
    return Point(branch.offset_x - graph.cursor_x, branch.offset_y - graph.cursor_y)


def position_commit(branch: "Branch", options: "CommitOptions", graph: "GitGraph") -> Point:
    """
    Compute where the next commit on a branch goes.

    The cursor is shared by every branch, so commits line up by creation
    step across lanes. May move the cursor (compact rewind, collision), but
    never advances it for the next commit; see advance_cursor.
    """
    last_commit = graph.commits[-1] if graph.commits else None

    # Compact mode reuses the current time slot across sibling branches
    if (
        graph.is_compact
        and last_commit is not None
        and last_commit.branch is not branch
        and branch.commits
        and options.type is not CommitType.MERGE
    ):
        step_cursor(graph, -1)

    position = _base_position(branch, graph)

    # A rewind can put the commit right on top of its predecessor
    if branch.commits:
        previous = branch.commits[-1]
        if position.x + position.y == previous.x + previous.y:
            step_cursor(graph)
            position = _base_position(branch, graph)

    return position


def resolve_parent_commit(branch: "Branch", options: "CommitOptions") -> "Commit | None":
    """Pick the parent commit: explicit, own tip, then the forked-from branch's tip."""
    if options.parent_commit is not None:
        return options.parent_commit
    if branch.commits:
        return branch.commits[-1]
    if branch.parent_branch is not None and branch.parent_branch.commits:
        return branch.parent_branch.commits[-1]
    return None


def advance_cursor(graph: "GitGraph", commit: "Commit") -> None:
    """Advance the shared cursor past a freshly placed commit."""
    step_cursor(graph)
    if commit.detail_height is not None:
        graph.cursor_y -= commit.detail_height - DETAIL_BASE_HEIGHT
