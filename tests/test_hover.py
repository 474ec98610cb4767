"""Tests for hover hit testing over commit dots."""

from gitgraph.graph.commit import CommitOptions
from gitgraph.graph.gitgraph import GitGraph
from gitgraph.graph.types import Point
from gitgraph.ui.hover import HIDDEN_TOOLTIP, HoverTracker


def single_commit_graph(**kwargs):
    graph = GitGraph("metro", **kwargs)
    graph.branch("master").commit(
        CommitOptions(message="hello", sha1="abc1234", author="Ann", date="today")
    )
    return graph


class TestHitTest:
    def test_inside_radius_hovers(self):
        graph = single_commit_graph()
        tracker = HoverTracker(graph)

        hovered = tracker.on_pointer_move(Point(41.9, 28))

        assert hovered == graph.commits
        assert graph.commits[0].is_hovered

    def test_radius_is_strict(self):
        graph = single_commit_graph()
        tracker = HoverTracker(graph)

        assert tracker.on_pointer_move(Point(42, 28)) == []

    def test_leaving_clears_flag(self):
        graph = single_commit_graph()
        tracker = HoverTracker(graph)
        tracker.on_pointer_move(Point(28, 28))

        tracker.on_pointer_move(Point(42.1, 28))

        assert not graph.commits[0].is_hovered

    def test_enter_fires_once(self):
        graph = single_commit_graph()
        tracker = HoverTracker(graph)
        received = []

        def on_hovered(payload):
            received.append(payload)

        tracker.commit_hovered.connect(on_hovered)
        tracker.on_pointer_move(Point(30, 30))
        tracker.on_pointer_move(Point(31, 29))

        assert received == [
            {"author": "Ann", "message": "hello", "date": "today", "sha1": "abc1234"}
        ]

    def test_reentering_fires_again(self):
        graph = single_commit_graph()
        tracker = HoverTracker(graph)
        received = []

        def on_hovered(payload):
            received.append(payload["sha1"])

        tracker.commit_hovered.connect(on_hovered)
        tracker.on_pointer_move(Point(28, 28))
        tracker.on_pointer_move(Point(100, 100))
        tracker.on_pointer_move(Point(28, 28))

        assert received == ["abc1234", "abc1234"]

    def test_reversed_orientation_uses_origin(self):
        graph = single_commit_graph(orientation="vertical-reverse")
        tracker = HoverTracker(graph)

        assert tracker.on_pointer_move(Point(28, 28)) == []
        assert tracker.on_pointer_move(Point(28, 108)) == graph.commits

    def test_overlapping_commits_all_hover(self):
        graph = GitGraph({"commit": {"spacing_y": 0, "dot": {"size": 5}}})
        graph.branch("master").commit("one").commit("two")
        tracker = HoverTracker(graph)

        hovered = tracker.on_pointer_move(Point(10, 10))

        assert len(hovered) == 2
        assert all(c.is_hovered for c in graph.commits)


class TestTooltip:
    def test_tooltip_when_messages_hidden(self):
        graph = single_commit_graph(mode="compact")
        tracker = HoverTracker(graph)
        tooltips = []

        def on_tooltip(tooltip):
            tooltips.append(tooltip)

        tracker.tooltip_changed.connect(on_tooltip)
        tracker.on_pointer_move(Point(28, 28), Point(500, 400))

        assert len(tooltips) == 1
        assert tooltips[0].visible
        assert tooltips[0].text == "abc1234 - hello"
        assert tooltips[0].position == Point(500, 400)

    def test_no_tooltip_when_messages_shown(self):
        graph = single_commit_graph()
        tracker = HoverTracker(graph)
        tooltips = []

        def on_tooltip(tooltip):
            tooltips.append(tooltip)

        tracker.tooltip_changed.connect(on_tooltip)
        tracker.on_pointer_move(Point(28, 28))

        assert tooltips == []

    def test_tooltip_hidden_off_commits(self):
        graph = single_commit_graph(mode="compact")
        tracker = HoverTracker(graph)
        tooltips = []

        def on_tooltip(tooltip):
            tooltips.append(tooltip)

        tracker.tooltip_changed.connect(on_tooltip)
        tracker.on_pointer_move(Point(200, 200))

        assert tooltips == [HIDDEN_TOOLTIP]
