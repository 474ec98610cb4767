"""Tests for the settings file."""

import json

from gitgraph.config.settings import Settings
from gitgraph.graph.types import Orientation


class TestSettings:
    def test_defaults_without_file(self, tmp_path):
        settings = Settings(tmp_path / "settings.json")

        assert settings.get("graph.template") == "metro"
        assert settings.get_mode() is None
        assert settings.get_orientation() is Orientation.VERTICAL
        assert settings.get_author() == "Sergio Flores <saxo-guy@epic.com>"
        assert settings.get("ui.background") == "#FFFFFF"

    def test_load_merges_with_defaults(self, tmp_path):
        path = tmp_path / "settings.json"
        path.write_text(json.dumps({"graph": {"template": "blackarrow", "mode": "compact"}}))

        settings = Settings(path)

        assert settings.get("graph.template") == "blackarrow"
        assert settings.get_mode() == "compact"
        assert settings.get("graph.orientation") == "vertical"

    def test_save_round_trip(self, tmp_path):
        path = tmp_path / "nested" / "settings.json"
        settings = Settings(path)
        settings.set("graph.orientation", "horizontal")
        settings.save()

        assert Settings(path).get_orientation() is Orientation.HORIZONTAL

    def test_missing_path_returns_default(self, tmp_path):
        settings = Settings(tmp_path / "settings.json")

        assert settings.get("graph.nothing", 3) == 3
        assert settings.get("graph.template.deeper") is None

    def test_defaults_are_not_shared(self, tmp_path):
        first = Settings(tmp_path / "a.json")
        first.set("graph.template", "blackarrow")

        assert Settings(tmp_path / "b.json").get("graph.template") == "metro"

    def test_unknown_mode_is_normal(self, tmp_path):
        settings = Settings(tmp_path / "settings.json")
        settings.set("graph.mode", "tiny")

        assert settings.get_mode() is None

    def test_template_with_overrides(self, tmp_path):
        settings = Settings(tmp_path / "settings.json")
        settings.set("graph.template", "blackarrow")
        settings.set("template", {"branch": {"line_width": 1}})

        template = settings.get_template()

        assert template.branch.line_width == 1
        assert template.commit.dot.size == 12

    def test_non_mapping_overrides_are_ignored(self, tmp_path):
        settings = Settings(tmp_path / "settings.json")
        settings.set("template", ["nope"])

        assert settings.get_template().branch.line_width == 10

    def test_empty_author_falls_back(self, tmp_path):
        settings = Settings(tmp_path / "settings.json")
        settings.set("graph.author", "")

        assert settings.get_author() == "Sergio Flores <saxo-guy@epic.com>"
