"""Lane (column) allocation for new branches."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from gitgraph.graph.gitgraph import GitGraph


def allocate_column(graph: "GitGraph") -> int:
    """
    Assign a lane to a branch that is about to be added to the graph.

    Counts the existing branches in creation order that are still live,
    stopping at the first finished one. A finished branch therefore frees
    its lane only when it is the first finished branch in creation order;
    lanes after it are not compacted.
    """
    column = 0
    for branch in graph.branches:
        if branch.finished:
            break
        column += 1

    graph.column_max = max(graph.column_max, column)
    return column
