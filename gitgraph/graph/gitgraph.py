"""The graph aggregate - owns branches, commits and the shared cursor."""

import logging
from dataclasses import replace

from PySide6.QtCore import QObject, Signal

from gitgraph.config.template import Template, apply_orientation, get_template
from gitgraph.constants import DEFAULT_AUTHOR
from gitgraph.graph.branch import Branch, BranchOptions
from gitgraph.graph.commit import Commit, CommitOptions
from gitgraph.graph.types import COMPACT_MODE, MergeResult, Orientation

logger = logging.getLogger(__name__)


class GitGraph(QObject):
    """
    A branching commit history laid out for drawing.

    Layout is fully determined by branch creation order and the shared
    commit cursor. Every mutation emits `changed` before returning so a
    surface can repaint the whole diagram.
    """

    changed = Signal()

    def __init__(
        self,
        template: Template | str | dict | None = None,
        author: str = DEFAULT_AUTHOR,
        mode: str | None = None,
        orientation: Orientation | str | None = None,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self.template = self._resolve_template(template)
        self.author = author
        self.mode = mode
        self.orientation = Orientation.parse(orientation)

        if self.is_compact:
            self.template.commit.message.display = False
        apply_orientation(self.template, self.orientation)

        self.margin_x = self.template.commit.dot.size * 2
        self.margin_y = self.template.commit.dot.size * 2

        self.head: Branch | None = None
        self.branches: list[Branch] = []
        self.commits: list[Commit] = []

        self.column_max = 0  # Highest lane handed out, for message placement and sizing
        self.cursor_x: float = 0
        self.cursor_y: float = 0

    @staticmethod
    def _resolve_template(template: Template | str | dict | None) -> Template:
        """Get a private template copy from a template, preset name or option dict."""
        if isinstance(template, Template):
            return template.copy()
        if isinstance(template, str):
            return get_template(template)
        if isinstance(template, dict):
            return Template.from_dict(template)
        return get_template("metro")

    @property
    def is_compact(self) -> bool:
        return self.mode == COMPACT_MODE

    def branch(self, options: str | BranchOptions | None = None) -> Branch:
        """Create a branch forking from HEAD (or options.parent_branch)."""
        options = BranchOptions.coerce(options)
        if options.parent_branch is None:
            options = replace(options, parent_branch=self.head)
        return self._add_branch(options)

    def orphan_branch(self, options: str | BranchOptions | None = None) -> Branch:
        """Create a branch with no parent branch."""
        options = replace(BranchOptions.coerce(options), parent_branch=None)
        return self._add_branch(options)

    def _add_branch(self, options: BranchOptions) -> Branch:
        branch = Branch(self, options)
        self.branches.append(branch)
        logger.debug("Created branch %s in column %d", branch.name, branch.column)
        self.render()
        return branch

    def get_branch(self, name: str) -> Branch:
        """Get the first branch with the given name."""
        for branch in self.branches:
            if branch.name == name:
                return branch
        raise ValueError(f"Branch '{name}' does not exist")

    def commit(
        self,
        options: str | CommitOptions | None = None,
        branch: Branch | str | None = None,
    ) -> "GitGraph":
        """Commit on HEAD, or on the given branch. Returns self for chaining."""
        if isinstance(branch, str):
            branch = self.get_branch(branch)
        target = branch if branch is not None else self.head
        if target is None:
            raise ValueError("No branch is checked out")
        target.commit(options)
        return self

    def merge(
        self,
        source: Branch | str,
        target: Branch | str | None = None,
        options: str | CommitOptions | None = None,
    ) -> MergeResult:
        """Merge source into target (HEAD by default)."""
        if isinstance(source, str):
            source = self.get_branch(source)
        if isinstance(target, str):
            target = self.get_branch(target)
        return source.merge(target, options)

    def render(self) -> None:
        """Request a full redraw."""
        self.changed.emit()
