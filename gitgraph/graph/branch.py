"""Branches - named lanes holding commits and a drawn line."""

import logging
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

from gitgraph.constants import DEFAULT_BRANCH_NAME
from gitgraph.graph.columns import allocate_column
from gitgraph.graph.commit import Commit, CommitOptions
from gitgraph.graph.paths import add_commit_points, add_merge_points
from gitgraph.graph.positioner import advance_cursor, position_commit, resolve_parent_commit
from gitgraph.graph.types import CommitType, MergeResult, Orientation, PathPoint

if TYPE_CHECKING:
    from gitgraph.graph.gitgraph import GitGraph

logger = logging.getLogger(__name__)


@dataclass
class BranchOptions:
    """Optional branch settings. Unset style fields fall back to the template."""

    name: str | None = None
    parent_branch: "Branch | None" = None
    color: str | None = None
    line_width: float | None = None
    line_dash: list[float] | None = None

    @classmethod
    def coerce(cls, options: "str | BranchOptions | None") -> "BranchOptions":
        """Accept a bare name as shorthand for BranchOptions(name=...)."""
        if isinstance(options, BranchOptions):
            return options
        if isinstance(options, str):
            return cls(name=options)
        return cls()


class Branch:
    """
    A lane of the graph.

    The column is fixed at creation; retiring a branch (delete) only
    affects where later branches go.
    """

    def __init__(self, graph: "GitGraph", options: BranchOptions) -> None:
        template = graph.template
        self.graph = graph
        self.name: str = options.name or DEFAULT_BRANCH_NAME
        self.parent_branch = options.parent_branch
        self.line_width: float = (
            options.line_width if options.line_width is not None else template.branch.line_width
        )
        self.line_dash: list[float] = list(
            options.line_dash if options.line_dash is not None else template.branch.line_dash
        )
        self.commits: list[Commit] = []
        self.path: list[PathPoint] = []
        self.finished = False

        # Must run before the branch joins graph.branches
        self.column = allocate_column(graph)
        self.offset_x = self.column * template.branch.spacing_x
        self.offset_y = self.column * template.branch.spacing_y

        self.color: str = (
            options.color or template.branch.color or template.lane_color(self.column)
        )

        self.checkout()

    def branch(self, options: "str | BranchOptions | None" = None) -> "Branch":
        """Create a branch forking from this one."""
        options = BranchOptions.coerce(options)
        if options.parent_branch is None:
            options = replace(options, parent_branch=self)
        return self.graph.branch(options)

    def commit(self, options: str | CommitOptions | None = None) -> "Branch":
        """Add a commit at the tip of this branch. Returns self for chaining."""
        graph = self.graph
        options = CommitOptions.coerce(options)

        position = position_commit(self, options, graph)
        parent_commit = resolve_parent_commit(self, options)

        commit = Commit(graph, self, options, position.x, position.y, parent_commit)
        # Detail content only reserves room in the plain vertical layout
        if graph.orientation is not Orientation.VERTICAL or graph.is_compact:
            commit.detail_height = None

        self.commits.append(commit)
        graph.commits.append(commit)

        add_commit_points(self, commit, graph)
        advance_cursor(graph, commit)

        logger.debug("Committed %s on %s at (%s, %s)", commit.sha1, self.name, commit.x, commit.y)
        graph.render()
        return self

    def checkout(self) -> None:
        """Make this branch the active one (HEAD)."""
        self.graph.head = self

    def delete(self) -> None:
        """Retire this branch so later branches may reuse lanes."""
        self.finished = True

    def merge(
        self,
        target: "Branch | None" = None,
        options: str | CommitOptions | None = None,
    ) -> MergeResult:
        """
        Merge this branch into target (HEAD by default).

        Creates a merge commit on the target, routes this branch's line into
        it and checks out the target. Invalid targets leave the graph untouched.
        """
        graph = self.graph
        target_branch = target if target is not None else graph.head

        if not isinstance(target_branch, Branch) or target_branch is self:
            logger.debug("Ignoring merge of %s into invalid target %r", self.name, target_branch)
            return MergeResult.INVALID_TARGET

        options = CommitOptions.coerce(options)
        options = replace(
            options,
            message=options.message or f"Merge branch `{self.name}` into `{target_branch.name}`",
            type=CommitType.MERGE,
            parent_commit=self.commits[-1] if self.commits else None,
        )
        target_branch.commit(options)

        add_merge_points(self, target_branch, graph)
        target_branch.checkout()

        logger.debug("Merged %s into %s", self.name, target_branch.name)
        graph.render()
        return MergeResult.MERGED

    def __repr__(self) -> str:
        return f"Branch(name='{self.name}', column={self.column}, commits={len(self.commits)})"
