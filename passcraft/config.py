# passcraft/config.py
"""
Settings persistence for PassCraft.
Settings saved as JSON in <data dir>/config.json, see storage.data_dir().
"""

import os
import logging
from typing import Dict, Any, Optional

from .alphabet import CharacterClass, GenerationOptions, DEFAULT_LENGTH
from .storage import data_dir, atomic_write_bytes, atomic_read_bytes, dump_json_bytes, read_json_bytes

logger = logging.getLogger(__name__)

DEFAULTS: Dict[str, Any] = {
    "length": DEFAULT_LENGTH,
    "uppercase": True,
    "lowercase": True,
    "numbers": True,
    "symbols": True,
    "exclude_similar": False,
    "exclude_ambiguous": False,
    "history_enabled": True,
}

def config_path() -> str:
    return os.path.join(data_dir(), "config.json")

def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    p = path or config_path()
    if not os.path.exists(p):
        return DEFAULTS.copy()
    try:
        data = read_json_bytes(atomic_read_bytes(p))
    except (OSError, ValueError) as e:
        logger.warning("Ignoring unreadable settings file %s: %s", p, e)
        return DEFAULTS.copy()
    if not isinstance(data, dict):
        logger.warning("Ignoring settings file %s: expected a JSON object", p)
        return DEFAULTS.copy()
    # merge defaults; unknown keys and values of the wrong type are dropped
    out = DEFAULTS.copy()
    for key, value in data.items():
        if key not in DEFAULTS:
            continue
        if type(value) is not type(DEFAULTS[key]):
            logger.warning("Ignoring setting %r in %s: expected %s, got %r",
                           key, p, type(DEFAULTS[key]).__name__, value)
            continue
        out[key] = value
    return out

def save_config(cfg: Dict[str, Any], path: Optional[str] = None) -> None:
    atomic_write_bytes(path or config_path(), dump_json_bytes(cfg, indent=2))

def options_from_config(cfg: Dict[str, Any]) -> GenerationOptions:
    """Settings dict -> GenerationOptions. No validation here; the core validates."""
    return GenerationOptions(
        classes=frozenset(c for c in CharacterClass if cfg.get(c.value) is True),
        length=cfg.get("length", DEFAULT_LENGTH),
        exclude_similar=cfg.get("exclude_similar") is True,
        exclude_ambiguous=cfg.get("exclude_ambiguous") is True,
    )

def config_from_options(options: GenerationOptions, base: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    cfg = dict(base or DEFAULTS)
    cfg["length"] = options.length
    for c in CharacterClass:
        cfg[c.value] = c in options.classes
    cfg["exclude_similar"] = options.exclude_similar
    cfg["exclude_ambiguous"] = options.exclude_ambiguous
    return cfg
