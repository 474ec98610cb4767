"""Types and constants for the commit graph layout."""

from dataclasses import dataclass
from enum import Enum

COMPACT_MODE = "compact"


@dataclass(frozen=True)
class Point:
    """A 2D point in graph coordinates."""

    x: float
    y: float


class PathPointType(Enum):
    """Role of a vertex in a branch line."""

    START = "start"  # Begins a new sub-path (move to)
    JOIN = "join"  # Continues the current sub-path
    END = "end"  # Terminal vertex of a merge


@dataclass(frozen=True)
class PathPoint:
    """A vertex of a branch's drawn line."""

    x: float
    y: float
    type: PathPointType


class CommitType(Enum):
    """Kinds of commits"""

    NORMAL = "normal"
    MERGE = "mergeCommit"


class MergeResult(Enum):
    """Outcome of a merge request."""

    MERGED = "merged"
    INVALID_TARGET = "invalid_target"  # Target missing, not a branch, or the source itself


class Orientation(Enum):
    """Direction the graph grows in."""

    VERTICAL = "vertical"
    VERTICAL_REVERSE = "vertical-reverse"
    HORIZONTAL = "horizontal"
    HORIZONTAL_REVERSE = "horizontal-reverse"

    @classmethod
    def parse(cls, value: "str | Orientation | None") -> "Orientation":
        """Parse an orientation name, falling back to vertical."""
        if isinstance(value, Orientation):
            return value
        try:
            return cls(value)
        except ValueError:
            return cls.VERTICAL
