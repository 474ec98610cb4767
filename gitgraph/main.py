#!/usr/bin/env python3
"""
gitgraph - draw branching commit histories
"""

import argparse
import logging
import os
import sys
from pathlib import Path

from PySide6.QtWidgets import QApplication, QMainWindow, QScrollArea

from gitgraph.config.settings import Settings
from gitgraph.graph.commit import CommitOptions
from gitgraph.graph.gitgraph import GitGraph
from gitgraph.graph.types import COMPACT_MODE, Orientation
from gitgraph.ui.widget import GitGraphWidget

logger = logging.getLogger(__name__)


def parse_args() -> argparse.Namespace:
    """Parse command line arguments"""
    parser = argparse.ArgumentParser(
        prog="gitgraph",
        description="gitgraph - draw branching commit histories",
    )
    parser.add_argument(
        "--template",
        help="Template preset (metro, blackarrow); overrides the settings file",
    )
    parser.add_argument(
        "--mode",
        choices=[COMPACT_MODE],
        help="Display mode",
    )
    parser.add_argument(
        "--orientation",
        choices=[o.value for o in Orientation],
        help="Direction the graph grows in",
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="Settings file (default: ~/.config/gitgraph/settings.json)",
    )
    return parser.parse_args()


def build_demo_graph(graph: GitGraph) -> None:
    """Fill a graph with a small feature-branch history."""
    master = graph.branch("master")
    graph.commit("Initial commit").commit("Add README")

    develop = graph.branch("develop")
    develop.commit("Set up build").commit(
        CommitOptions(message="Add logging", dot_stroke_width=2, dot_stroke_color="#FFFFFF")
    )
    master.commit("Fix typo in README")

    feature = develop.branch("feature/parser")
    feature.commit("Parse headers").commit("Parse body")
    develop.commit("Bump dependencies")

    feature.merge(develop)
    feature.delete()
    develop.commit("Prepare release")
    develop.merge(master, "Release 1.0")
    master.commit(CommitOptions(message="Hotfix", color="#F44336"))


def main() -> None:
    args = parse_args()

    log_level = logging.DEBUG if os.getenv("DEBUG") == "1" else logging.INFO
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(levelname)s - %(name)s - %(filename)s:%(lineno)d - %(message)s",
    )

    settings = Settings(args.config)
    if args.template:
        settings.set("graph.template", args.template)
    if args.mode:
        settings.set("graph.mode", args.mode)
    if args.orientation:
        settings.set("graph.orientation", args.orientation)

    app = QApplication(sys.argv)
    app.setApplicationName("gitgraph")

    graph = GitGraph(
        template=settings.get_template(),
        author=settings.get_author(),
        mode=settings.get_mode(),
        orientation=settings.get_orientation(),
    )
    widget = GitGraphWidget(graph, background=settings.get("ui.background", "#FFFFFF"))

    window = QMainWindow()
    window.setWindowTitle("gitgraph")
    scroll = QScrollArea()
    scroll.setWidget(widget)
    window.setCentralWidget(scroll)

    status_bar = window.statusBar()
    widget.commit_hovered.connect(
        lambda data: status_bar.showMessage(
            f"{data['sha1']} {data['message']} - {data['author']} ({data['date']})"
        )
    )

    build_demo_graph(graph)
    logger.info("Showing %d commits on %d branches", len(graph.commits), len(graph.branches))

    window.resize(900, 700)
    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
