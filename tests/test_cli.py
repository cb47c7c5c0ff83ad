"""Tests for the et command line."""

import json

import pytest

from epictracker.cli import main


@pytest.fixture
def db_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    for key in ("TRACKER_DB_PATH", "TRACKER_CREATE_IF_MISSING", "TRACKER_LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)
    return tmp_path / "db.json"


def run(db_file, *argv):
    return main(["--db", str(db_file), *argv])


class TestEpicCommands:
    """Test et epic subcommands."""

    def test_add_creates_file(self, db_file, capsys):
        assert run(db_file, "epic", "add", "E1", "first epic") == 0
        assert "Created epic 1: E1" in capsys.readouterr().out
        data = json.loads(db_file.read_text())
        assert data["last_item_id"] == 1
        assert data["epics"]["1"]["status"] == "Open"

    def test_status_and_show(self, db_file, capsys):
        run(db_file, "epic", "add", "E1", "first epic")
        assert run(db_file, "epic", "status", "1", "in progress") == 0
        assert run(db_file, "epic", "show", "1") == 0
        out = capsys.readouterr().out
        assert "Epic 1 is now IN PROGRESS" in out
        assert "Status:      IN PROGRESS" in out
        assert "Stories:     none" in out

    def test_bad_status_value(self, db_file, capsys):
        run(db_file, "epic", "add", "E1", "d")
        assert run(db_file, "epic", "status", "1", "finished") == 1
        assert "Unknown status 'finished'" in capsys.readouterr().err

    def test_missing_epic_returns_1_and_does_not_write(self, db_file, capsys):
        run(db_file, "epic", "add", "E1", "d")
        before = db_file.read_text()
        assert run(db_file, "epic", "delete", "99") == 1
        assert "epic 99 not found" in capsys.readouterr().err
        assert db_file.read_text() == before

    def test_delete_cascades(self, db_file, capsys):
        run(db_file, "epic", "add", "E1", "d")
        run(db_file, "story", "add", "1", "S1", "d")
        assert run(db_file, "epic", "delete", "1") == 0
        data = json.loads(db_file.read_text())
        assert data == {"last_item_id": 2, "epics": {}, "stories": {}}


class TestStoryCommands:
    """Test et story subcommands."""

    def test_add_and_show(self, db_file, capsys):
        run(db_file, "epic", "add", "E1", "d")
        assert run(db_file, "story", "add", "1", "S1", "story one") == 0
        assert run(db_file, "story", "show", "2") == 0
        out = capsys.readouterr().out
        assert "Created story 2 in epic 1: S1" in out
        assert "Epic:        1 (E1)" in out

    def test_add_to_missing_epic(self, db_file, capsys):
        assert run(db_file, "story", "add", "5", "S1", "d") == 1
        assert "epic 5 not found" in capsys.readouterr().err
        assert not db_file.exists()

    def test_status_and_delete(self, db_file, capsys):
        run(db_file, "epic", "add", "E1", "d")
        run(db_file, "story", "add", "1", "S1", "d")
        assert run(db_file, "story", "status", "2", "Resolved") == 0
        assert json.loads(db_file.read_text())["stories"]["2"]["status"] == "Resolved"
        assert run(db_file, "story", "delete", "1", "2") == 0
        data = json.loads(db_file.read_text())
        assert data["stories"] == {}
        assert data["epics"]["1"]["stories"] == []


class TestListCommand:
    """Test et list."""

    def test_empty(self, db_file, capsys):
        assert run(db_file, "list") == 0
        assert "Epics: none" in capsys.readouterr().out

    def test_lists_epics_and_stories(self, db_file, capsys):
        run(db_file, "epic", "add", "E1", "d")
        run(db_file, "story", "add", "1", "S1", "d")
        run(db_file, "epic", "add", "E3", "d")
        capsys.readouterr()
        assert run(db_file, "list") == 0
        out = capsys.readouterr().out
        assert "E1" in out
        assert "S1" in out
        assert "E3" in out
        assert "2 epic(s), 1 story(s)" in out


class TestFatalErrors:
    """Test exit code 2 for unusable stores and config."""

    def test_malformed_database(self, db_file, capsys):
        db_file.write_text("not json")
        assert run(db_file, "list") == 2
        assert "Invalid JSON" in capsys.readouterr().err
        assert db_file.read_text() == "not json"

    def test_missing_database_without_create(self, db_file, monkeypatch, capsys):
        monkeypatch.setenv("TRACKER_CREATE_IF_MISSING", "false")
        assert run(db_file, "list") == 2
        assert "Cannot read database" in capsys.readouterr().err

    def test_bad_config_file(self, db_file, tmp_path, capsys):
        bad = tmp_path / "bad.env"
        bad.write_text("this is not an env file\n")
        assert main(["--config", str(bad), "list"]) == 2
        assert "Invalid configuration" in capsys.readouterr().err

    def test_db_path_from_config(self, db_file, tmp_path, capsys):
        (tmp_path / "tracker.env").write_text("TRACKER_DB_PATH=store/tracker.json\n")
        assert main(["epic", "add", "E1", "d"]) == 0
        assert (tmp_path / "store" / "tracker.json").exists()


class TestStatusArgument:
    """A bad status name is a usage error, not a store failure."""

    def test_bad_story_status(self, db_file, capsys):
        run(db_file, "epic", "add", "E1", "d")
        run(db_file, "story", "add", "1", "S1", "d")
        before = db_file.read_text()
        assert run(db_file, "story", "status", "2", "wontfix") == 1
        assert "Unknown status 'wontfix'" in capsys.readouterr().err
        assert db_file.read_text() == before


class TestUndecodableDatabase:
    """Test a database file that is not UTF-8."""

    def test_non_utf8_is_fatal(self, db_file, capsys):
        db_file.write_bytes(b'{"last_item_id": 0, "epics": {"\xff": 1}, "stories": {}}')
        assert run(db_file, "list") == 2
        assert "not valid UTF-8" in capsys.readouterr().err
