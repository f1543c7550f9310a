"""
Module: storage.snapshot

Purpose:
    Persistent key-value snapshot of a learner's progress: profile,
    aggregate stats, processed documents and generated levels. The whole
    snapshot is a single JSON object on disk.

Key Classes:
    - SnapshotStore: Load, read, write and record pipeline results

Dependencies:
    - storage.file_locking: Locked JSON read-modify-write (portalocker)

Used By:
    - cli: ``mindloop process --store PATH``
"""

from __future__ import annotations

import copy
import logging
import uuid
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Optional

from mindloop.core.models.result import PipelineResult

from .file_locking import locked_read_json, locked_read_modify_write_json

logger = logging.getLogger(__name__)

DEFAULT_USER_NAME = "Student"
DEFAULT_USER_LEVEL = "Explorer"


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


def default_snapshot() -> Dict[str, Any]:
    """Fresh snapshot for a first-time user."""
    return {
        "user": {
            "id": f"user_{uuid.uuid4().hex[:12]}",
            "name": DEFAULT_USER_NAME,
            "level": DEFAULT_USER_LEVEL,
            "join_date": _now(),
        },
        "stats": {
            "processed_docs": 0,
            "ai_questions": 0,
            "total_points": 0,
            "completed_levels": 0,
        },
        "documents": [],
        "levels": [],
    }


def _with_defaults(data: Dict[str, Any]) -> Dict[str, Any]:
    """Fill in any top-level or stats keys missing from an older snapshot."""
    defaults = default_snapshot()
    for key, value in defaults.items():
        data.setdefault(key, value)
    for key, value in defaults["stats"].items():
        data["stats"].setdefault(key, value)
    return data


class SnapshotStore:
    """
    JSON snapshot store backed by a single file.

    Every write is a locked read-modify-write, so concurrent processes see
    each other's updates. Values returned by get() and load() are copies;
    mutating them does not change the store.

    Example:
        >>> store = SnapshotStore(Path("~/.mindloop/data.json").expanduser())
        >>> store.record_result(result)
        >>> store.get("stats")["processed_docs"]
        1
    """

    def __init__(self, path: Path):
        self.path = Path(path)

    def load(self) -> Dict[str, Any]:
        """
        Return the full snapshot, initializing it on first use.

        Raises:
            ValueError: If the file exists but is not a JSON object
        """
        if not self.path.exists():
            logger.info(f"Initializing snapshot at {self.path}")
            return locked_read_modify_write_json(
                self.path, _with_defaults, default=default_snapshot
            )
        return _with_defaults(locked_read_json(self.path, default=default_snapshot))

    def get(self, key: str, default: Optional[Any] = None) -> Any:
        """Value stored under a top-level key, or default."""
        return copy.deepcopy(self.load().get(key, default))

    def set(self, key: str, value: Any) -> None:
        """Store a JSON-serializable value under a top-level key."""
        def modifier(existing: Dict[str, Any]) -> Dict[str, Any]:
            existing = _with_defaults(existing)
            existing[key] = value
            return existing

        locked_read_modify_write_json(self.path, modifier, default=default_snapshot)

    def record_result(self, result: PipelineResult) -> Dict[str, Any]:
        """
        Fold a successful pipeline result into the snapshot.

        Increments the processed document and question counters, appends
        a document record and the serialized levels.

        Returns:
            The updated snapshot
        """
        if not result.success:
            raise ValueError("Only successful results can be recorded")

        document_record = {
            "name": result.document.name,
            "size": result.document.byte_size,
            "processed_at": _now(),
            "questions_generated": result.total_question_count,
        }
        levels = [level.to_dict() for level in result.levels]

        def modifier(existing: Dict[str, Any]) -> Dict[str, Any]:
            existing = _with_defaults(existing)
            existing["stats"]["processed_docs"] += 1
            existing["stats"]["ai_questions"] += result.total_question_count
            existing["documents"].append(document_record)
            existing["levels"].extend(levels)
            return existing

        updated = locked_read_modify_write_json(self.path, modifier, default=default_snapshot)
        logger.info(
            f"Recorded {result.document.name} ({result.total_question_count} questions)",
            extra={"store": str(self.path)},
        )
        return updated
