"""
Module: storage

Purpose:
    Locked JSON persistence for learner progress snapshots.
"""

from .file_locking import locked_read_json, locked_read_modify_write_json
from .snapshot import SnapshotStore, default_snapshot

__all__ = [
    "SnapshotStore",
    "default_snapshot",
    "locked_read_json",
    "locked_read_modify_write_json",
]
