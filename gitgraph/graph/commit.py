"""Commits - the nodes of the graph."""

import secrets
from dataclasses import dataclass
from email.utils import formatdate
from typing import TYPE_CHECKING, Any

from gitgraph.constants import DEFAULT_COMMIT_MESSAGE
from gitgraph.graph.types import CommitType

if TYPE_CHECKING:
    from gitgraph.graph.branch import Branch
    from gitgraph.graph.gitgraph import GitGraph


@dataclass
class CommitOptions:
    """Optional per-commit settings. Unset fields fall back to the template."""

    message: str | None = None
    author: str | None = None
    date: str | None = None
    sha1: str | None = None
    color: str | None = None  # Dot and message color
    dot_color: str | None = None
    dot_size: float | None = None
    dot_stroke_width: float | None = None
    dot_stroke_color: str | None = None
    message_color: str | None = None
    message_font: str | None = None
    message_display: bool | None = None
    message_author_display: bool | None = None
    message_hash_display: bool | None = None
    parent_commit: "Commit | None" = None
    type: CommitType = CommitType.NORMAL
    detail_height: float | None = None  # Height of attached detail content

    @classmethod
    def coerce(cls, options: "str | CommitOptions | None") -> "CommitOptions":
        """Accept a bare message as shorthand for CommitOptions(message=...)."""
        if isinstance(options, CommitOptions):
            return options
        if isinstance(options, str):
            return cls(message=options)
        return cls()


def _random_sha1() -> str:
    return secrets.token_hex(4)[:7]


def _first(*values: Any) -> Any:
    """Return the first value that is not None."""
    for value in values:
        if value is not None:
            return value
    return None


class Commit:
    """A placed commit with resolved display style."""

    def __init__(
        self,
        graph: "GitGraph",
        branch: "Branch",
        options: CommitOptions,
        x: float,
        y: float,
        parent_commit: "Commit | None",
    ) -> None:
        template = graph.template
        dot = template.commit.dot
        message_style = template.commit.message

        self.branch = branch
        self.x = x
        self.y = y
        self.parent_commit = parent_commit
        self.type = options.type
        self.detail_height = options.detail_height

        self.author: str = options.author or graph.author
        self.date: str = options.date or formatdate(usegmt=True)
        self.sha1: str = options.sha1 or _random_sha1()
        self.message: str = options.message or DEFAULT_COMMIT_MESSAGE

        color = _first(options.color, template.commit.color, template.lane_color(branch.column))
        self.color: str = color
        self.dot_color: str = _first(options.dot_color, dot.color, color)
        self.dot_size: float = _first(options.dot_size, dot.size)
        self.dot_stroke_width: float | None = _first(options.dot_stroke_width, dot.stroke_width)
        self.dot_stroke_color: str = _first(options.dot_stroke_color, dot.stroke_color, color)
        self.message_color: str = _first(options.message_color, message_style.color, color)
        self.message_font: str = _first(options.message_font, message_style.font)
        self.message_display: bool = _first(options.message_display, message_style.display)
        self.message_author_display: bool = _first(
            options.message_author_display, message_style.display_author
        )
        self.message_hash_display: bool = _first(
            options.message_hash_display, message_style.display_hash
        )
        self.arrow_display = template.arrow.active

        # Transient hover state, owned by the hit tester
        self.is_hovered = False

    @property
    def is_merge(self) -> bool:
        return self.type is CommitType.MERGE

    @property
    def is_branch_start(self) -> bool:
        """True for the first commit of its branch (a fork point when it has a parent)."""
        return bool(self.branch.commits) and self.branch.commits[0] is self

    def display_text(self) -> str:
        """Message line as drawn next to the graph."""
        text = self.message
        if self.message_hash_display:
            text = f"{self.sha1} {text}"
        if self.message_author_display and self.author:
            text = f"{text} - {self.author}"
        return text

    def hover_payload(self) -> dict[str, str]:
        return {
            "author": self.author,
            "message": self.message,
            "date": self.date,
            "sha1": self.sha1,
        }

    def __repr__(self) -> str:
        return (
            f"Commit(sha1='{self.sha1}', branch='{self.branch.name}', "
            f"x={self.x}, y={self.y}, type={self.type.value})"
        )
