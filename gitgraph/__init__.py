"""gitgraph - draw branching commit histories"""

from gitgraph.config.template import Template, get_template
from gitgraph.graph.branch import Branch, BranchOptions
from gitgraph.graph.commit import Commit, CommitOptions
from gitgraph.graph.gitgraph import GitGraph
from gitgraph.graph.types import MergeResult, Orientation

__all__ = [
    "Branch",
    "BranchOptions",
    "Commit",
    "CommitOptions",
    "GitGraph",
    "MergeResult",
    "Orientation",
    "Template",
    "get_template",
]
