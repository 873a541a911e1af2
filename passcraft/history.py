"""
passcraft.history

Local password history: most-recent-first, capped at HISTORY_LIMIT records,
stored as a JSON list in <data dir>/history.json. The caller owns the list
and passes it in and out; nothing here keeps state between calls.
"""

import os
import logging
from datetime import datetime, timezone
from typing import List, NamedTuple, Optional

from .storage import (
    data_dir, atomic_write_bytes, atomic_read_bytes, remove_if_exists,
    dump_json_bytes, read_json_bytes,
)

logger = logging.getLogger(__name__)

HISTORY_LIMIT = 50


class HistoryRecord(NamedTuple):
    password: str
    timestamp: str  # ISO-8601, UTC


def history_path() -> str:
    return os.path.join(data_dir(), "history.json")


def add_record(history: List[HistoryRecord], password: str,
               now: Optional[datetime] = None) -> List[HistoryRecord]:
    """Return a new list with `password` prepended and the tail trimmed to HISTORY_LIMIT."""
    when = now or datetime.now(timezone.utc)
    record = HistoryRecord(password=password, timestamp=when.isoformat())
    return [record] + list(history[:HISTORY_LIMIT - 1])


def load_history(path: Optional[str] = None) -> List[HistoryRecord]:
    p = path or history_path()
    if not os.path.exists(p):
        return []
    try:
        data = read_json_bytes(atomic_read_bytes(p))
    except (OSError, ValueError) as e:
        logger.warning("Ignoring unreadable history file %s: %s", p, e)
        return []
    if not isinstance(data, list):
        logger.warning("Ignoring history file %s: expected a JSON list", p)
        return []

    records = []
    for item in data:
        try:
            records.append(HistoryRecord(password=str(item["password"]), timestamp=str(item["timestamp"])))
        except (KeyError, TypeError):
            logger.warning("Skipping malformed history entry in %s", p)
    return records[:HISTORY_LIMIT]


def save_history(history: List[HistoryRecord], enabled: bool = True,
                 path: Optional[str] = None) -> None:
    """
    Persist `history`. With history disabled the file is removed instead,
    so nothing generated while disabled, or before, stays on disk.
    """
    p = path or history_path()
    if not enabled:
        remove_if_exists(p)
        return
    payload = [r._asdict() for r in history[:HISTORY_LIMIT]]
    atomic_write_bytes(p, dump_json_bytes(payload, indent=2))


def clear_history(path: Optional[str] = None) -> List[HistoryRecord]:
    remove_if_exists(path or history_path())
    return []
