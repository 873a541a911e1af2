"""
passcraft.batch
Generate several passwords for one set of options and export them as text.
"""

import os
import logging
from datetime import date
from typing import List, Optional

from .alphabet import GenerationOptions, build, validate_options
from .errors import InvalidBatchSizeError
from .generator import RandomSource, generate
from .storage import atomic_write_bytes

logger = logging.getLogger(__name__)

MIN_BATCH = 1
MAX_BATCH = 50


def generate_batch(options: GenerationOptions, count: int,
                   rng: Optional[RandomSource] = None) -> List[str]:
    """
    `count` independent passwords, drawn one after another from the same alphabet.
    """
    if isinstance(count, bool) or not isinstance(count, int) or not MIN_BATCH <= count <= MAX_BATCH:
        raise InvalidBatchSizeError(f"count must be between {MIN_BATCH} and {MAX_BATCH}, got {count!r}")
    validate_options(options)
    alphabet = build(options)
    passwords = [generate(alphabet, options.length, rng) for _ in range(count)]
    logger.debug("generated batch of %d passwords", count)
    return passwords


def format_batch(passwords: List[str]) -> str:
    """Numbered listing, one password per line: '1. xxxx'."""
    return "\n".join(f"{i}. {pw}" for i, pw in enumerate(passwords, start=1))


def default_export_name(today: Optional[date] = None) -> str:
    return f"passwords_{(today or date.today()).isoformat()}.txt"


def export_batch(passwords: List[str], path: Optional[str] = None) -> str:
    """
    Write the numbered listing to `path` (default: passwords_YYYY-MM-DD.txt
    in the current directory). Returns the path written.
    """
    if not passwords:
        raise ValueError("nothing to export")
    out = path or os.path.join(os.getcwd(), default_export_name())
    atomic_write_bytes(out, format_batch(passwords).encode("utf-8"))
    return out
