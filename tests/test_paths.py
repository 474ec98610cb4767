"""Tests for branch line construction: forks and merges."""

from gitgraph.graph.commit import CommitOptions
from gitgraph.graph.gitgraph import GitGraph
from gitgraph.graph.types import CommitType, MergeResult, PathPoint, PathPointType

START = PathPointType.START
JOIN = PathPointType.JOIN
END = PathPointType.END


def forked_graph():
    """master with two commits, develop forked from it with one commit."""
    graph = GitGraph("metro")
    master = graph.branch("master")
    master.commit("one").commit("two")
    develop = graph.branch("develop")
    develop.commit("three")
    return graph, master, develop


class TestCommitPoints:
    def test_first_point_starts_path(self, metro_graph):
        master = metro_graph.branch("master")
        master.commit("one").commit("two")

        assert master.path == [PathPoint(0, 0, START), PathPoint(0, 80, JOIN)]

    def test_fork_adds_start_and_departure_points(self):
        graph, master, develop = forked_graph()

        assert develop.path == [PathPoint(0, 80, START), PathPoint(50, 160, JOIN)]
        assert master.path == [
            PathPoint(0, 0, START),
            PathPoint(0, 80, JOIN),
            PathPoint(0, 80, JOIN),
        ]

    def test_fork_points_added_only_once(self):
        graph, master, develop = forked_graph()
        develop.commit("four")

        assert len(develop.path) == 3
        assert develop.path[-1] == PathPoint(50, 240, JOIN)
        assert len(master.path) == 3

    def test_orphan_starts_at_its_first_commit(self, metro_graph):
        metro_graph.branch("master").commit("one")
        orphan = metro_graph.orphan_branch("gh-pages")
        orphan.commit("docs")

        assert orphan.path == [PathPoint(50, 80, START)]

    def test_departure_point_goes_to_parent_branch(self):
        graph, master, develop = forked_graph()
        feature = develop.branch("feature")
        feature.commit(CommitOptions(message="five", parent_commit=master.commits[0]))

        # Explicit parent on another lane: the line still leaves from develop
        assert develop.path[-1].type is JOIN
        assert len(develop.path) == 3
        assert len(master.path) == 3


class TestMerge:
    def test_merge_commit_placement(self):
        graph, master, develop = forked_graph()

        result = develop.merge(master)

        merge_commit = master.commits[-1]
        assert result is MergeResult.MERGED
        assert (merge_commit.x, merge_commit.y) == (0, 240)
        assert merge_commit.type is CommitType.MERGE
        assert merge_commit.parent_commit is develop.commits[-1]
        assert merge_commit.message == "Merge branch `develop` into `master`"

    def test_merge_routes_source_line(self):
        graph, master, develop = forked_graph()

        develop.merge(master)

        assert develop.path[-3:] == [
            PathPoint(50, 160, JOIN),
            PathPoint(0, 240, END),
            PathPoint(50, 160, START),
        ]
        assert master.path[-1] == PathPoint(0, 240, JOIN)
        assert len(master.path) == 4

    def test_merge_checks_out_target(self):
        graph, master, develop = forked_graph()
        assert graph.head is develop

        develop.merge(master)

        assert graph.head is master

    def test_merge_into_head_by_default(self):
        graph, master, develop = forked_graph()
        master.checkout()

        assert develop.merge() is MergeResult.MERGED
        assert master.commits[-1].is_merge

    def test_custom_merge_message(self):
        graph, master, develop = forked_graph()

        develop.merge(master, "Release 1.0")

        assert master.commits[-1].message == "Release 1.0"
        assert master.commits[-1].type is CommitType.MERGE

    def test_merge_parent_is_source_tip(self):
        graph, master, develop = forked_graph()

        develop.merge(master, CommitOptions(message="merge", parent_commit=master.commits[0]))

        assert master.commits[-1].parent_commit is develop.commits[-1]

    def test_merge_into_itself_is_ignored(self):
        graph, master, develop = forked_graph()
        commits = len(graph.commits)
        path = list(develop.path)
        cursor = graph.cursor_y

        assert develop.merge(develop) is MergeResult.INVALID_TARGET
        assert develop.merge() is MergeResult.INVALID_TARGET  # HEAD is develop

        assert len(graph.commits) == commits
        assert develop.path == path
        assert graph.cursor_y == cursor

    def test_merge_into_non_branch_is_ignored(self):
        graph, master, develop = forked_graph()

        assert develop.merge("master") is MergeResult.INVALID_TARGET
        assert len(graph.commits) == 3

    def test_graph_merge_resolves_names(self):
        graph, master, develop = forked_graph()

        assert graph.merge("develop", "master") is MergeResult.MERGED
        assert master.commits[-1].is_merge

    def test_commits_after_merge_keep_drawing(self):
        graph, master, develop = forked_graph()
        develop.merge(master)
        develop.commit("after")

        assert develop.path[-1] == PathPoint(50, 320, JOIN)
        assert develop.path[-2].type is START
