"""Shared fixtures: headless Qt and a recording drawing context."""

import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest  # noqa: E402
from PySide6.QtWidgets import QApplication  # noqa: E402

from gitgraph.graph.gitgraph import GitGraph  # noqa: E402


@pytest.fixture(scope="session", autouse=True)
def qapp():
    """One QApplication for the whole run (widgets and signals need it)."""
    app = QApplication.instance() or QApplication([])
    yield app


class RecordingContext:
    """DrawingContext that records every call as (name, args)."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, tuple]] = []

    def __getattr__(self, name: str):
        if name.startswith("_"):
            raise AttributeError(name)

        def record(*args):
            self.calls.append((name, args))

        return record

    def named(self, name: str) -> list[tuple]:
        """Arguments of every call to `name`, in order."""
        return [args for call, args in self.calls if call == name]

    def index(self, name: str, args: tuple) -> int:
        return self.calls.index((name, args))


@pytest.fixture
def recorder() -> RecordingContext:
    return RecordingContext()


@pytest.fixture
def recorder_factory():
    """For tests that need more than one recording context."""
    return RecordingContext


@pytest.fixture
def metro_graph() -> GitGraph:
    """Empty graph with the metro preset: lanes 50px apart, commits 80px apart downward."""
    return GitGraph("metro")
