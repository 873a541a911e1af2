"""
passcraft.storage
Data directory lookup, atomic file writes and JSON byte helpers.
"""

import os
import json
from typing import Any, Optional


def data_dir() -> str:
    """
    $PASSCRAFT_HOME if set, else %APPDATA%/PassCraft (Windows), else ~/.passcraft.
    """
    override = os.getenv("PASSCRAFT_HOME")
    if override:
        return override
    appdata = os.getenv("APPDATA")
    if appdata:
        return os.path.join(appdata, "PassCraft")
    return os.path.join(os.path.expanduser("~"), ".passcraft")

def ensure_dir_exists(path: str) -> None:
    parent = os.path.dirname(path)
    if parent:
        os.makedirs(parent, exist_ok=True)

def atomic_write_bytes(path: str, data: bytes) -> None:
    """
    Write `data` next to `path` and rename it into place, so readers see
    either the old file or the new one. The temp file is removed on failure.
    """
    ensure_dir_exists(path)
    tmp = path + ".tmp"
    try:
        with open(tmp, "wb") as f:
            f.write(data)
            f.flush()
            os.fsync(f.fileno())
        os.replace(tmp, path)
    except OSError:
        remove_if_exists(tmp)
        raise

def atomic_read_bytes(path: str) -> bytes:
    with open(path, "rb") as f:
        return f.read()

def remove_if_exists(path: str) -> None:
    try:
        os.remove(path)
    except FileNotFoundError:
        pass

def read_json_bytes(raw: bytes) -> Any:
    return json.loads(raw.decode("utf-8"))

def dump_json_bytes(obj: Any, indent: Optional[int] = None) -> bytes:
    return json.dumps(obj, ensure_ascii=False, indent=indent).encode("utf-8")
