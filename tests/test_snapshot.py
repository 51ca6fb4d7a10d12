"""Tests for snapshot persistence."""

import json
from pathlib import Path
from unittest.mock import patch

import pytest

from todolist.errors import PersistenceError
from todolist.persistence import SnapshotPersistence
from todolist.tasks.models import Task
from tests.conftest import MockContext


class TestSnapshotSave:
    """Tests for SnapshotPersistence.save."""

    def test_save_creates_parent_directories(self, persistence: SnapshotPersistence):
        assert not persistence.path.parent.exists()

        path = persistence.save([Task("Buy milk")])

        assert path == persistence.path
        assert path.exists()

    def test_save_writes_ordered_records(self, persistence: SnapshotPersistence):
        persistence.save([Task("first"), Task("second", completed=True)])

        data = json.loads(persistence.path.read_text())
        assert data == {
            "tasks": [
                {"description": "first", "completed": False},
                {"description": "second", "completed": True},
            ]
        }

    def test_save_overwrites_previous_contents(self, persistence: SnapshotPersistence):
        persistence.save([Task("a"), Task("b"), Task("c")])
        persistence.save([Task("only")])

        assert persistence.load() == [Task("only")]

    def test_save_leaves_no_temp_file(self, persistence: SnapshotPersistence):
        persistence.save([Task("a")])

        leftovers = [p.name for p in persistence.path.parent.iterdir()]
        assert leftovers == ["tasks.json"]

    def test_save_failure_raises_persistence_error(self, tmp_path: Path):
        # The parent "directory" is a regular file, so the write must fail
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory")
        persistence = SnapshotPersistence(blocker / "tasks.json")

        with pytest.raises(PersistenceError) as exc_info:
            persistence.save([Task("a")])

        error = exc_info.value
        assert isinstance(error.cause, OSError)
        assert error.__cause__ is error.cause
        assert error.path == blocker / "tasks.json"
        assert "Error saving tasks" in str(error)

    def test_save_failure_keeps_previous_snapshot(self, persistence: SnapshotPersistence):
        persistence.save([Task("kept")])

        with patch("pathlib.Path.replace", side_effect=OSError("disk full")):
            with pytest.raises(PersistenceError):
                persistence.save([Task("lost")])

        assert persistence.load() == [Task("kept")]


class TestSnapshotLoad:
    """Tests for SnapshotPersistence.load."""

    def test_missing_file_is_empty_list(self, persistence: SnapshotPersistence):
        assert not persistence.exists()
        assert persistence.load() == []

    def test_roundtrip_mixed_completion(self, persistence: SnapshotPersistence):
        tasks = [
            Task("Buy milk", completed=True),
            Task("Walk dog"),
            Task("Buy milk"),
            Task("File taxes", completed=True),
        ]
        persistence.save(tasks)

        assert persistence.load() == tasks

    def test_roundtrip_empty_list(self, persistence: SnapshotPersistence):
        persistence.save([])

        assert persistence.exists()
        assert persistence.load() == []

    def test_roundtrip_unicode(self, persistence: SnapshotPersistence):
        tasks = [Task("Kaffee kaufen ☕"), Task("日本語のタスク", completed=True)]
        persistence.save(tasks)

        assert persistence.load() == tasks

    @pytest.mark.parametrize(
        "content",
        [
            "{not json",
            "",
            "[]",
            '"tasks"',
            "{}",
            '{"tasks": {"description": "a", "completed": false}}',
            '{"tasks": [{"description": "a"}]}',
            '{"tasks": [{"description": "a", "completed": "no"}]}',
            '{"tasks": [{"description": "", "completed": false}]}',
            '{"tasks": [["a", false]]}',
            '{"tasks": [{"description": "a", "completed": ' + "9" * 5000 + "}]}",
            "[" * 100000 + "]" * 100000,
        ],
        ids=lambda content: content[:40] or "empty",
    )
    def test_malformed_content_raises(self, snapshot_path: Path, content: str):
        snapshot_path.parent.mkdir(parents=True)
        snapshot_path.write_text(content)
        persistence = SnapshotPersistence(snapshot_path)

        with pytest.raises(PersistenceError) as exc_info:
            persistence.load()

        assert exc_info.value.cause is not None
        assert exc_info.value.path == snapshot_path

    def test_unreadable_file_raises(self, snapshot_path: Path):
        # A directory at the snapshot path cannot be opened as a file
        snapshot_path.mkdir(parents=True)
        persistence = SnapshotPersistence(snapshot_path)

        with pytest.raises(PersistenceError) as exc_info:
            persistence.load()

        assert isinstance(exc_info.value.cause, OSError)

    def test_invalid_utf8_raises(self, snapshot_path: Path):
        snapshot_path.parent.mkdir(parents=True)
        snapshot_path.write_bytes(b"\xff\xfe\x00garbage")

        with pytest.raises(PersistenceError):
            SnapshotPersistence(snapshot_path).load()


class TestSnapshotFromSettings:
    """Tests for building persistence from settings."""

    def test_uses_configured_tasks_path(self, mock_context: MockContext):
        persistence = SnapshotPersistence.from_settings(mock_context.settings)

        assert persistence.path == mock_context.workspace_dir / "tasks.json"

    def test_custom_data_file(self):
        with MockContext(data_file="lists/home.json") as ctx:
            persistence = SnapshotPersistence.from_settings(ctx.settings)

            assert persistence.path == ctx.workspace_dir / "lists" / "home.json"
