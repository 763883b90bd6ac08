"""Tests for the theme-cascade CLI commands."""

import json

import pytest
from click.testing import CliRunner

from theme_cascade.cli.main import cli


@pytest.fixture
def runner():
    return CliRunner()


def _write_theme(tmp_path, data, name="theme.json"):
    path = tmp_path / name
    path.write_text(json.dumps(data), encoding="utf-8")
    return str(path)


VALID_THEME = {
    "name": "nature",
    "displayName": "Nature",
    "overrides": {
        "button": {"variant": "solid", "class": "rounded"},
        "button.chat": {"class": "chat-btn"},
        "button#chat.send": {"color": "primary"},
        'input[type="search"]': {"size": "lg"},
    },
}


# ---------------------------------------------------------------------------
# validate
# ---------------------------------------------------------------------------


class TestValidateCommand:
    def test_valid_theme(self, runner, tmp_path):
        path = _write_theme(tmp_path, VALID_THEME)
        result = runner.invoke(cli, ["validate", path])
        assert result.exit_code == 0
        assert "OK: theme.json is valid (0 diagnostics)" in result.output

    def test_warnings_exit_zero(self, runner, tmp_path):
        path = _write_theme(tmp_path, {"name": "nature", "overrides": {"button.fancy": {}}})
        result = runner.invoke(cli, ["validate", path])
        assert result.exit_code == 0
        assert "WARNING [selector=button.fancy]" in result.output
        assert "  fix: Known contexts:" in result.output
        assert "Summary: 0 error(s), 1 warning(s), 0 info" in result.output

    def test_extra_context_option(self, runner, tmp_path):
        path = _write_theme(tmp_path, {"name": "nature", "overrides": {"button.fancy": {}}})
        result = runner.invoke(cli, ["validate", path, "--context", "fancy"])
        assert result.exit_code == 0
        assert "OK:" in result.output

    def test_errors_exit_one(self, runner, tmp_path):
        path = _write_theme(tmp_path, {"name": "Bad Name", "overrides": {"button": "solid"}})
        result = runner.invoke(cli, ["validate", path])
        assert result.exit_code == 1
        assert "Summary: 2 error(s)" in result.output

    def test_invalid_json(self, runner, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")
        result = runner.invoke(cli, ["validate", str(path)])
        assert result.exit_code == 1
        assert "Load error: broken.json" in result.output

    def test_top_level_not_object(self, runner, tmp_path):
        path = _write_theme(tmp_path, ["button"])
        result = runner.invoke(cli, ["validate", path])
        assert result.exit_code == 1
        assert "expected a JSON object" in result.output

    def test_missing_file(self, runner, tmp_path):
        result = runner.invoke(cli, ["validate", str(tmp_path / "nope.json")])
        assert result.exit_code != 0


# ---------------------------------------------------------------------------
# inspect
# ---------------------------------------------------------------------------


class TestInspectCommand:
    def test_rules_listed_most_specific_first(self, runner, tmp_path):
        path = _write_theme(tmp_path, VALID_THEME)
        result = runner.invoke(cli, ["inspect", path])
        assert result.exit_code == 0
        assert "Theme: nature" in result.output
        assert "Name:  Nature" in result.output
        assert "Rules: 4" in result.output
        lines = [line for line in result.output.splitlines() if "component=" in line]
        assert [line.split()[0] for line in lines] == ["11", "11", "11", "1"]
        assert "id=chat.send" in result.output
        assert "context=chat" in result.output
        assert 'attrs=[type="search"]' in result.output

    def test_props_shown(self, runner, tmp_path):
        path = _write_theme(tmp_path, {"name": "x", "overrides": {"button": {"variant": "solid"}}})
        result = runner.invoke(cli, ["inspect", path])
        assert 'props={"variant": "solid"}' in result.output


# ---------------------------------------------------------------------------
# resolve
# ---------------------------------------------------------------------------


class TestResolveCommand:
    def test_managed_identifier_query(self, runner, tmp_path):
        path = _write_theme(tmp_path, VALID_THEME)
        result = runner.invoke(
            cli,
            ["resolve", path, "--component", "button", "--context", "chat", "--id", "chat.send",
             "--managed"],
        )
        assert result.exit_code == 0
        assert json.loads(result.output) == {
            "class": "chat-btn rounded",
            "color": "primary",
            "variant": "solid",
        }

    def test_unmanaged_projects_classes(self, runner, tmp_path):
        path = _write_theme(tmp_path, VALID_THEME)
        result = runner.invoke(cli, ["resolve", path, "--component", "button"])
        assert result.exit_code == 0
        assert json.loads(result.output) == {"class": "variant-solid rounded"}

    def test_attribute_option(self, runner, tmp_path):
        path = _write_theme(tmp_path, VALID_THEME)
        result = runner.invoke(
            cli, ["resolve", path, "--component", "input", "--attr", "type=search", "--managed"]
        )
        assert result.exit_code == 0
        assert json.loads(result.output) == {"size": "lg"}

    def test_known_context_option(self, runner, tmp_path):
        path = _write_theme(
            tmp_path, {"name": "nature", "overrides": {"button.composer": {"color": "x"}}}
        )
        base = ["resolve", path, "--component", "button", "--known-context", "composer", "--managed"]
        other = runner.invoke(cli, base + ["--context", "other"])
        assert other.exit_code == 0
        assert json.loads(other.output) == {}
        composer = runner.invoke(cli, base + ["--context", "composer"])
        assert json.loads(composer.output) == {"color": "x"}

    def test_bad_attribute_option(self, runner, tmp_path):
        path = _write_theme(tmp_path, VALID_THEME)
        result = runner.invoke(cli, ["resolve", path, "--component", "input", "--attr", "type"])
        assert result.exit_code == 2
        assert "NAME=VALUE" in result.output

    def test_debug_annotations(self, runner, tmp_path):
        path = _write_theme(tmp_path, VALID_THEME)
        result = runner.invoke(
            cli, ["resolve", path, "--component", "button", "--context", "chat", "--debug"]
        )
        data = json.loads(result.output)
        assert data["data-theme-target"] == "button.chat"
        assert data["data-theme-matches"] == "button.chat,button"

    def test_invalid_theme_exits_one(self, runner, tmp_path):
        path = _write_theme(tmp_path, {"name": "", "overrides": {}})
        result = runner.invoke(cli, ["resolve", path, "--component", "button"])
        assert result.exit_code == 1
        assert "Theme name is required." in result.output

    def test_component_required(self, runner, tmp_path):
        path = _write_theme(tmp_path, VALID_THEME)
        result = runner.invoke(cli, ["resolve", path])
        assert result.exit_code == 2


# ---------------------------------------------------------------------------
# group
# ---------------------------------------------------------------------------


class TestGroup:
    def test_version(self, runner):
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert "theme-cascade" in result.output

    def test_help_lists_commands(self, runner):
        result = runner.invoke(cli, ["--help"])
        for name in ("validate", "inspect", "resolve"):
            assert name in result.output
