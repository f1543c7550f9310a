"""
Module: storage.file_locking

Purpose:
    Cross-platform locked JSON access for the snapshot store, so several
    processes (CLI runs, a UI) can update the same snapshot without losing
    writes. Uses portalocker for Mac, Windows, and Linux compatibility.

Key Functions:
    - locked_read_json: Read a JSON document under a shared lock
    - locked_read_modify_write_json: Read-modify-write JSON under an
      exclusive lock

Dependencies:
    - portalocker: Cross-platform file locking

Used By:
    - storage.snapshot: SnapshotStore reads and writes
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Callable, Dict

import portalocker

logger = logging.getLogger(__name__)

JsonDict = Dict[str, Any]


def _decode(content: str, path: Path, default: Callable[[], JsonDict]) -> JsonDict:
    if not content.strip():
        return default()
    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise ValueError(f"Corrupt snapshot file {path}: {e}") from e
    if not isinstance(data, dict):
        raise ValueError(f"Snapshot file {path} must contain a JSON object")
    return data


def locked_read_json(
    path: Path,
    default: Callable[[], JsonDict] = dict,
) -> JsonDict:
    """
    Read a JSON object with a shared lock held.

    Args:
        path: Path to JSON file.
        default: Factory used when the file is missing or empty.

    Returns:
        Parsed data, or default() when there is nothing to read.

    Raises:
        ValueError: If the file holds invalid JSON or a non-object.
    """
    if not path.exists():
        return default()

    with open(path, 'r', encoding='utf-8') as f:
        portalocker.lock(f, portalocker.LOCK_SH)
        try:
            return _decode(f.read(), path, default)
        finally:
            portalocker.unlock(f)


def locked_read_modify_write_json(
    path: Path,
    modifier: Callable[[JsonDict], JsonDict],
    default: Callable[[], JsonDict] = dict,
) -> JsonDict:
    """
    Read JSON, apply modifier, write back - all with exclusive lock.

    Args:
        path: Path to JSON file.
        modifier: Function that takes existing data, returns modified data.
        default: Factory for default data if file doesn't exist.

    Returns:
        The modified data that was written.

    Raises:
        TypeError: If the modified data is not JSON-serializable; the
            file keeps its previous content.

    Example:
        >>> def bump(existing):
        ...     existing['stats']['processed_docs'] += 1
        ...     return existing
        >>> locked_read_modify_write_json(snapshot_path, bump)
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    # 'a+' creates the file without truncating; the lock is taken before reading
    with open(path, 'a+', encoding='utf-8') as f:
        portalocker.lock(f, portalocker.LOCK_EX)
        try:
            f.seek(0)
            existing = _decode(f.read(), path, default)

            modified = modifier(existing)
            # Serialize before truncating so a TypeError leaves the file intact
            payload = json.dumps(modified, indent=2, ensure_ascii=False)

            f.seek(0)
            f.truncate()
            f.write(payload)
            f.flush()
        finally:
            portalocker.unlock(f)

    logger.debug(f"Wrote snapshot {path.name}")
    return modified
