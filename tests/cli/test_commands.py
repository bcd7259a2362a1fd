"""CLI command tests using Click CliRunner.

Strategy: patch get_components at each command module's import point so
commands run against a temporary journal instead of the user's config.
"""

import importlib
import json
from unittest.mock import patch

import pytest
import yaml
from click.testing import CliRunner

from cli.config_models import JournalConfig
from cli.main import cli
from cli.utils import resolve_journal_path
from journal.storage import JournalStorage

# cli.commands re-exports the click commands under the module names
init_commands = importlib.import_module("cli.commands.init")
journal_commands = importlib.import_module("cli.commands.journal")
mood_commands = importlib.import_module("cli.commands.mood")


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def components(tmp_path):
    journal_dir = tmp_path / "journal"
    config_model = JournalConfig.from_dict({"paths": {"journal_dir": str(journal_dir)}})
    return {
        "config": config_model.to_dict(),
        "config_model": config_model,
        "paths": {"journal_dir": journal_dir},
        "storage": JournalStorage(journal_dir),
    }


@pytest.fixture
def patch_components(components):
    """Patch get_components everywhere it's imported, and config loading in the group."""
    patches = [
        patch.object(module, "get_components", return_value=components)
        for module in (journal_commands, mood_commands)
    ]
    patches.append(patch("cli.main.load_config_model", return_value=components["config_model"]))
    for p in patches:
        p.start()
    yield components
    for p in patches:
        p.stop()


@pytest.fixture
def with_entries(patch_components):
    storage = patch_components["storage"]
    paths = [
        storage.create(content="I am so happy today", title="Sunny"),
        storage.create(content="dil dukhi hai", title="Rainy"),
        storage.create(content="Kaam ka pressure", title="Office"),
    ]
    return {"storage": storage, "paths": paths}


# -- Journal commands --


class TestJournalCommands:
    def test_add(self, runner, patch_components):
        result = runner.invoke(cli, ["journal", "add", "I am so happy today"])
        assert result.exit_code == 0
        assert "Created" in result.output
        assert "happy" in result.output
        assert len(patch_components["storage"].list_entries()) == 1

    def test_add_with_title_and_tags(self, runner, patch_components):
        result = runner.invoke(
            cli, ["journal", "add", "--title", "Work", "--tags", "office, team", "ghussa aaya"]
        )
        assert result.exit_code == 0
        entry = patch_components["storage"].list_entries()[0]
        assert entry["title"] == "Work"
        assert entry["tags"] == ["office", "team"]
        assert entry["mood"] == "angry"

    def test_add_editor_cancelled(self, runner, patch_components):
        with patch("click.edit", return_value=None):
            result = runner.invoke(cli, ["journal", "add"])
        assert result.exit_code == 0
        assert "cancelled" in result.output

    def test_add_blank_content_fails(self, runner, patch_components):
        result = runner.invoke(cli, ["journal", "add", "   "])
        assert result.exit_code == 1
        assert "Error" in result.output

    def test_list(self, runner, with_entries):
        result = runner.invoke(cli, ["journal", "list"])
        assert result.exit_code == 0
        assert "Sunny" in result.output
        assert "Rainy" in result.output

    def test_list_filter_mood(self, runner, with_entries):
        result = runner.invoke(cli, ["journal", "list", "--mood", "stressed"])
        assert result.exit_code == 0
        assert "Office" in result.output
        assert "Sunny" not in result.output

    def test_list_empty(self, runner, patch_components):
        result = runner.invoke(cli, ["journal", "list"])
        assert result.exit_code == 0
        assert "No entries found" in result.output

    def test_view(self, runner, with_entries):
        result = runner.invoke(cli, ["journal", "view", "rainy"])
        assert result.exit_code == 0
        assert "dil dukhi hai" in result.output
        assert "sad" in result.output

    def test_view_not_found(self, runner, with_entries):
        result = runner.invoke(cli, ["journal", "view", "nope"])
        assert result.exit_code == 0
        assert "Not found" in result.output

    def test_edit_reclassifies(self, runner, with_entries):
        with patch("click.edit", return_value="not happy"):
            result = runner.invoke(cli, ["journal", "edit", "sunny"])
        assert result.exit_code == 0
        assert "Updated" in result.output
        assert with_entries["storage"].read(with_entries["paths"][0])["mood"] == "sad"

    def test_edit_no_changes(self, runner, with_entries):
        with patch("click.edit", return_value=None):
            result = runner.invoke(cli, ["journal", "edit", "sunny"])
        assert "No changes" in result.output

    def test_delete(self, runner, with_entries):
        result = runner.invoke(cli, ["journal", "delete", "office", "-y"])
        assert result.exit_code == 0
        assert "Deleted" in result.output
        assert not with_entries["paths"][2].exists()

    def test_delete_declined(self, runner, with_entries):
        result = runner.invoke(cli, ["journal", "delete", "office"], input="n\n")
        assert result.exit_code == 0
        assert with_entries["paths"][2].exists()


# -- Mood commands --


class TestMoodCommands:
    def test_check(self, runner, patch_components):
        result = runner.invoke(cli, ["mood", "check", "dil dukhi hai"])
        assert result.exit_code == 0
        assert "sad" in result.output

    def test_check_json(self, runner, patch_components):
        result = runner.invoke(cli, ["mood", "check", "not happy", "--json"])
        assert result.exit_code == 0
        assert json.loads(result.output) == {"mood": "sad", "emoji": "😢"}

    def test_check_json_explain(self, runner, patch_components):
        result = runner.invoke(cli, ["mood", "check", "ghussa nahi", "--json", "--explain"])
        data = json.loads(result.output)
        assert data["mood"] == "neutral"
        assert data["keyword"] == "ghussa"
        assert data["negation"] == "nahi"

    def test_check_explain(self, runner, patch_components):
        result = runner.invoke(cli, ["mood", "check", "not happy", "--explain"])
        assert result.exit_code == 0
        assert "Matched 'happy'" in result.output
        assert "Negated by 'not'" in result.output

    def test_stats(self, runner, with_entries):
        result = runner.invoke(cli, ["mood", "stats"])
        assert result.exit_code == 0
        assert "Mood counts" in result.output
        assert "Most frequent" in result.output
        assert "Consistency" in result.output

    @pytest.mark.parametrize("days", ["0", "-3"])
    def test_stats_rejects_non_positive_days(self, runner, with_entries, days):
        result = runner.invoke(cli, ["mood", "stats", f"--days={days}"])
        assert result.exit_code == 2
        assert "Invalid value" in result.output

    def test_stats_empty(self, runner, patch_components):
        result = runner.invoke(cli, ["mood", "stats"])
        assert result.exit_code == 0
        assert "No entries found" in result.output

    def test_reclassify(self, runner, with_entries):
        result = runner.invoke(cli, ["mood", "reclassify"])
        assert result.exit_code == 0
        assert "0 entries changed" in result.output


# -- Path validation --


class TestPathValidation:
    def test_resolve_normal_path(self, tmp_path):
        (tmp_path / "entry.md").write_text("x")
        assert resolve_journal_path(tmp_path, "entry.md") == (tmp_path / "entry.md").resolve()

    def test_resolve_traversal_blocked(self, tmp_path):
        journal_dir = tmp_path / "journal"
        journal_dir.mkdir()
        (tmp_path / "secret.md").write_text("x")
        assert resolve_journal_path(journal_dir, "../secret.md") is None

    def test_resolve_partial_match(self, tmp_path):
        (tmp_path / "2026-10-19_rainy.md").write_text("x")
        assert resolve_journal_path(tmp_path, "rainy").name == "2026-10-19_rainy.md"

    def test_resolve_nonexistent(self, tmp_path):
        assert resolve_journal_path(tmp_path, "missing") is None

    @pytest.mark.parametrize("name", [".", ""])
    def test_resolve_journal_dir_itself(self, tmp_path, name):
        (tmp_path / "2026-10-19_rainy.md").write_text("x")
        assert resolve_journal_path(tmp_path, name) is None

    def test_resolve_skips_directories(self, tmp_path):
        (tmp_path / "rainy-drafts").mkdir()
        assert resolve_journal_path(tmp_path, "rainy-drafts") is None


# -- Init command --


class TestInitCommand:
    def test_init(self, runner, tmp_path, components):
        config_path = tmp_path / "cfg" / "config.yaml"
        with (
            patch.object(init_commands, "load_config", return_value=components["config"]),
            patch("cli.main.load_config_model", return_value=components["config_model"]),
        ):
            result = runner.invoke(
                cli, ["init", "--samples", "--config-path", str(config_path)]
            )

        assert result.exit_code == 0
        assert config_path.exists()
        assert yaml.safe_load(config_path.read_text())["analytics"]["window_days"] == 7
        assert len(components["storage"].list_entries()) == 2

    def test_cli_config_error(self, runner):
        with patch("cli.main.load_config_model", side_effect=ValueError("bad yaml")):
            result = runner.invoke(cli, ["mood", "check", "hi"])
        assert result.exit_code == 1
        assert "Config error" in result.output
