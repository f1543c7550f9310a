"""
Unit Tests for SnapshotStore and Locked JSON Helpers
"""

import json

import pytest

from mindloop.core.models import Document
from mindloop.storage import SnapshotStore, locked_read_json, locked_read_modify_write_json


@pytest.fixture
def store(tmp_path) -> SnapshotStore:
    return SnapshotStore(tmp_path / "mindloop" / "data.json")


@pytest.fixture
def result(engine, photosynthesis_text):
    data = photosynthesis_text.encode("utf-8")
    return engine.process(Document.from_name("photosynthesis.txt", len(data)), data)


class TestLockedJson:
    """Tests for locked JSON helpers."""

    def test_read_modify_write_when_missing_then_creates_with_default(self, tmp_path):
        """A missing file starts from default()."""
        path = tmp_path / "nested" / "state.json"

        written = locked_read_modify_write_json(
            path, lambda data: {**data, "count": data["count"] + 1}, default=lambda: {"count": 0}
        )

        assert written == {"count": 1}
        assert json.loads(path.read_text(encoding="utf-8")) == {"count": 1}

    def test_read_modify_write_when_shorter_content_then_no_stale_bytes(self, tmp_path):
        """Rewrites truncate the previous content."""
        path = tmp_path / "state.json"
        path.write_text(json.dumps({"long": "x" * 100}), encoding="utf-8")

        locked_read_modify_write_json(path, lambda data: {"short": 1})

        assert json.loads(path.read_text(encoding="utf-8")) == {"short": 1}

    def test_read_modify_write_when_modifier_result_not_json_then_file_unchanged(self, tmp_path):
        """Serialization errors happen before the file is truncated."""
        path = tmp_path / "state.json"
        path.write_text(json.dumps({"count": 3}), encoding="utf-8")

        with pytest.raises(TypeError):
            locked_read_modify_write_json(path, lambda data: {"items": {1, 2}})

        assert json.loads(path.read_text(encoding="utf-8")) == {"count": 3}

    def test_read_json_when_missing_then_default(self, tmp_path):
        """Reading a missing file returns default()."""
        assert locked_read_json(tmp_path / "none.json", default=lambda: {"a": 1}) == {"a": 1}

    def test_read_json_when_corrupt_then_raises(self, tmp_path):
        """Invalid JSON raises ValueError."""
        path = tmp_path / "bad.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(ValueError, match="Corrupt snapshot file"):
            locked_read_json(path)

    def test_read_json_when_not_object_then_raises(self, tmp_path):
        """A JSON array is not a snapshot."""
        path = tmp_path / "list.json"
        path.write_text("[1, 2]", encoding="utf-8")

        with pytest.raises(ValueError, match="must contain a JSON object"):
            locked_read_json(path)


class TestSnapshotStore:
    """Tests for SnapshotStore."""

    def test_load_when_first_use_then_initializes_defaults(self, store):
        """First load writes a default snapshot."""
        snapshot = store.load()

        assert store.path.exists()
        assert snapshot["user"]["name"] == "Student"
        assert snapshot["user"]["id"].startswith("user_")
        assert snapshot["stats"] == {
            "processed_docs": 0,
            "ai_questions": 0,
            "total_points": 0,
            "completed_levels": 0,
        }
        assert snapshot["documents"] == []
        assert snapshot["levels"] == []

    def test_load_when_called_twice_then_same_user(self, store):
        """Defaults are only generated once."""
        assert store.load()["user"]["id"] == store.load()["user"]["id"]

    def test_set_when_value_then_get_returns_copy(self, store):
        """set() persists and get() returns a detached copy."""
        store.set("preferences", {"theme": "dark"})

        value = store.get("preferences")
        value["theme"] = "light"

        assert store.get("preferences") == {"theme": "dark"}

    def test_set_when_value_not_serializable_then_raises_and_keeps_snapshot(self, store):
        """A failed write leaves earlier contents readable."""
        # Arrange
        store.set("notes", ["kept"])

        # Act
        with pytest.raises(TypeError):
            store.set("bad", {1, 2})

        # Assert
        assert store.get("notes") == ["kept"]
        assert store.get("bad") is None
        assert store.load()["stats"]["processed_docs"] == 0

    def test_get_when_missing_then_default(self, store):
        """Missing keys return the default."""
        assert store.get("achievements", []) == []

    def test_load_when_old_snapshot_missing_keys_then_filled(self, store):
        """Snapshots missing stats keys are completed on load."""
        store.path.parent.mkdir(parents=True)
        store.path.write_text(json.dumps({"stats": {"processed_docs": 2}}), encoding="utf-8")

        snapshot = store.load()

        assert snapshot["stats"]["processed_docs"] == 2
        assert snapshot["stats"]["ai_questions"] == 0
        assert snapshot["documents"] == []

    def test_record_result_when_success_then_updates_stats(self, store, result):
        """Recording folds counters, documents and levels into the snapshot."""
        # Act
        store.record_result(result)
        store.record_result(result)

        # Assert
        snapshot = store.load()
        assert snapshot["stats"]["processed_docs"] == 2
        assert snapshot["stats"]["ai_questions"] == 56
        assert len(snapshot["documents"]) == 2
        assert snapshot["documents"][0]["name"] == "photosynthesis.txt"
        assert snapshot["documents"][0]["questions_generated"] == 28
        assert len(snapshot["levels"]) == 6
        assert snapshot["levels"][0]["questions"][0]["points"] == 10
