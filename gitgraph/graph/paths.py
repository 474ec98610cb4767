"""Path point construction for branch lines."""

from typing import TYPE_CHECKING

from gitgraph.graph.types import PathPoint, PathPointType

if TYPE_CHECKING:
    from gitgraph.graph.branch import Branch
    from gitgraph.graph.commit import Commit
    from gitgraph.graph.gitgraph import GitGraph


def add_commit_points(branch: "Branch", commit: "Commit", graph: "GitGraph") -> None:
    """
    Extend a branch's line to a new commit.

    Must run before the cursor advances past the commit. The first commit of
    a forked branch also starts its line one step ahead of the parent lane
    and adds the matching departure point to the parent's line.
    """
    spacing = graph.template.commit
    parent_commit = commit.parent_commit

    if parent_commit is not None and not branch.path:
        fork_x = parent_commit.branch.offset_x - graph.cursor_x + spacing.spacing_x
        fork_y = parent_commit.branch.offset_y - graph.cursor_y + spacing.spacing_y
        branch.path.append(PathPoint(fork_x, fork_y, PathPointType.START))
        departed = branch.parent_branch or parent_commit.branch
        departed.path.append(PathPoint(fork_x, fork_y, PathPointType.JOIN))

    point_type = PathPointType.START if not branch.path else PathPointType.JOIN
    branch.path.append(PathPoint(commit.x, commit.y, point_type))


def add_merge_points(source: "Branch", target: "Branch", graph: "GitGraph") -> None:
    """
    Route a source branch's line into the target's merge commit.

    Runs after the merge commit was placed. The source line gets a tail two
    steps past its own lane, ends at the merge commit, and restarts at the
    tail so later commits on the source keep drawing.
    """
    spacing = graph.template.commit
    tail_x = source.offset_x + spacing.spacing_x * 2 - graph.cursor_x
    tail_y = source.offset_y + spacing.spacing_y * 2 - graph.cursor_y
    merge_commit = target.commits[-1]

    source.path.append(PathPoint(tail_x, tail_y, PathPointType.JOIN))
    source.path.append(PathPoint(merge_commit.x, merge_commit.y, PathPointType.END))
    source.path.append(PathPoint(tail_x, tail_y, PathPointType.START))
