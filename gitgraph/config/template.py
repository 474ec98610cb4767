"""
Templates - fully resolved style configuration for a graph.

A template bundles spacing, sizes, colors and the merge style. Graphs own a
private copy, since orientation and display mode rewrite it in place.
"""

import copy
import logging
from dataclasses import dataclass, field, fields
from typing import Any, get_args, get_origin

from gitgraph.graph.types import Orientation

logger = logging.getLogger(__name__)

DEFAULT_COLORS = ["#6963FF", "#47E8D4", "#6BDB52", "#E84BA5", "#FFA657"]

MERGE_STYLE_CURVE = "curve"
MERGE_STYLE_STRAIGHT = "straight"


@dataclass
class BranchStyle:
    color: str | None = None  # Single color for every branch
    line_width: float = 2
    line_dash: list[float] = field(default_factory=list)
    merge_style: str = MERGE_STYLE_CURVE
    spacing_x: float = 20
    spacing_y: float = 0


@dataclass
class ArrowStyle:
    size: float | None = None  # No size means no arrows
    color: str | None = None
    offset: float = 2

    @property
    def active(self) -> bool:
        return self.size is not None


@dataclass
class DotStyle:
    color: str | None = None
    size: float = 3
    stroke_width: float | None = None
    stroke_color: str | None = None


@dataclass
class MessageStyle:
    display: bool = True
    display_author: bool = True
    display_hash: bool = True
    color: str | None = None
    font: str = "normal 12pt Calibri"


@dataclass
class CommitStyle:
    spacing_x: float = 0
    spacing_y: float = 25
    color: str | None = None  # Single color for dot and message
    dot: DotStyle = field(default_factory=DotStyle)
    message: MessageStyle = field(default_factory=MessageStyle)


@dataclass
class Template:
    """Style configuration consumed by layout and rendering."""

    colors: list[str] = field(default_factory=lambda: list(DEFAULT_COLORS))
    branch: BranchStyle = field(default_factory=BranchStyle)
    arrow: ArrowStyle = field(default_factory=ArrowStyle)
    commit: CommitStyle = field(default_factory=CommitStyle)

    def lane_color(self, column: int) -> str:
        """Get the palette color for a lane, wrapping around the palette."""
        if not self.colors:
            return "#000000"
        return self.colors[column % len(self.colors)]

    def copy(self) -> "Template":
        return copy.deepcopy(self)

    @classmethod
    def from_dict(cls, options: dict[str, Any] | None) -> "Template":
        """
        Build a template from nested option dicts.

        Keys mirror the attribute tree, e.g.
        ``{"branch": {"line_width": 4}, "commit": {"dot": {"size": 12}}}``.
        Unknown keys are logged and ignored.
        """
        template = cls()
        _apply_options(template, options or {}, "template")
        _normalize(template)
        return template


def _matches(annotation: Any, value: Any) -> bool:
    """Check a config value against a style field annotation."""
    origin = get_origin(annotation)
    if origin is list:
        (item_type,) = get_args(annotation)
        return isinstance(value, list) and all(_matches(item_type, item) for item in value)
    if origin is not None:
        # X | None
        return any(_matches(option, value) for option in get_args(annotation))
    if annotation is type(None):
        return value is None
    if annotation is float:
        return isinstance(value, (int, float)) and not isinstance(value, bool)
    return isinstance(value, annotation)


def _apply_options(target: Any, options: dict[str, Any], path: str) -> None:
    """Recursively copy option values onto a style dataclass."""
    types = {f.name: f.type for f in fields(target)}
    for key, value in options.items():
        if key not in types:
            logger.warning("Ignoring unknown template option %s.%s", path, key)
            continue
        current = getattr(target, key)
        if isinstance(value, dict) and hasattr(current, "__dataclass_fields__"):
            _apply_options(current, value, f"{path}.{key}")
        elif hasattr(current, "__dataclass_fields__"):
            logger.warning("Ignoring non-mapping template option %s.%s", path, key)
        elif not _matches(types[key], value):
            logger.warning("Ignoring template option %s.%s of wrong type: %r", path, key, value)
        elif isinstance(value, list):
            setattr(target, key, list(value))
        else:
            setattr(target, key, value)


def _normalize(template: Template) -> None:
    if template.branch.merge_style == "bezier":
        template.branch.merge_style = MERGE_STYLE_CURVE


PRESETS: dict[str, dict[str, Any]] = {
    "blackarrow": {
        "branch": {
            "color": "#000000",
            "line_width": 4,
            "spacing_x": 50,
            "merge_style": MERGE_STYLE_STRAIGHT,
        },
        "commit": {
            "spacing_y": -60,
            "dot": {"size": 12, "stroke_color": "#000000", "stroke_width": 7},
            "message": {"color": "black"},
        },
        "arrow": {"size": 16, "offset": 2.5},
    },
    "metro": {
        "colors": ["#979797", "#008fb5", "#f1c109"],
        "branch": {"line_width": 10, "spacing_x": 50},
        "commit": {
            "spacing_y": -80,
            "dot": {"size": 14},
            "message": {"font": "normal 14pt Arial"},
        },
    },
}

DEFAULT_PRESET = "metro"


def get_template(name: str, overrides: dict[str, Any] | None = None) -> Template:
    """Get a preset template by name, falling back to metro."""
    if name not in PRESETS:
        logger.debug("Unknown template %r, using %s", name, DEFAULT_PRESET)
        name = DEFAULT_PRESET
    template = Template.from_dict(PRESETS[name])
    if overrides:
        _apply_options(template, overrides, "template")
        _normalize(template)
    return template


def apply_orientation(template: Template, orientation: Orientation) -> None:
    """Rewrite a template's spacing so the graph grows in the given direction."""
    commit = template.commit
    branch = template.branch

    if orientation is Orientation.VERTICAL_REVERSE:
        commit.spacing_y *= -1
    elif orientation in (Orientation.HORIZONTAL, Orientation.HORIZONTAL_REVERSE):
        commit.message.display = False
        if orientation is Orientation.HORIZONTAL:
            commit.spacing_x = commit.spacing_y
        else:
            commit.spacing_x = -commit.spacing_y
        branch.spacing_y = branch.spacing_x
        commit.spacing_y = 0
        branch.spacing_x = 0
