"""
passcraft.alphabet
Character classes, exclusion filters and alphabet construction.
"""

import logging
from enum import Enum
from typing import Dict, FrozenSet, NamedTuple

from .errors import EmptyAlphabetError, InvalidLengthError, UnknownPresetError

logger = logging.getLogger(__name__)


class CharacterClass(Enum):
    UPPERCASE = "uppercase"
    LOWERCASE = "lowercase"
    NUMBERS = "numbers"
    SYMBOLS = "symbols"


# canonical order; each set is duplicate-free and disjoint from the others
CHARACTER_SETS: Dict[CharacterClass, str] = {
    CharacterClass.UPPERCASE: "ABCDEFGHIJKLMNOPQRSTUVWXYZ",
    CharacterClass.LOWERCASE: "abcdefghijklmnopqrstuvwxyz",
    CharacterClass.NUMBERS: "0123456789",
    CharacterClass.SYMBOLS: "!@#$%^&*()_+-=[]{}|;:,.<>?",
}

SIMILAR_CHARS = "0OIl1"
AMBIGUOUS_CHARS = "{}[]()/\\'\"`~,;:.<>"

DEFAULT_LENGTH = 16

PRESETS: Dict[str, FrozenSet[CharacterClass]] = {
    "letters": frozenset({CharacterClass.UPPERCASE, CharacterClass.LOWERCASE}),
    "numbers": frozenset({CharacterClass.NUMBERS}),
    "alphanumeric": frozenset({
        CharacterClass.UPPERCASE, CharacterClass.LOWERCASE, CharacterClass.NUMBERS,
    }),
    "all": frozenset(CharacterClass),
}


class GenerationOptions(NamedTuple):
    """What to draw from and how many characters to draw."""
    classes: FrozenSet[CharacterClass] = frozenset(CharacterClass)
    length: int = DEFAULT_LENGTH
    exclude_similar: bool = False
    exclude_ambiguous: bool = False


def validate_options(options: GenerationOptions) -> None:
    """
    Reject configurations that cannot produce a password.
    An empty class selection is an error; it is never silently corrected.
    """
    if not options.classes:
        raise EmptyAlphabetError("At least one character class must be selected")
    if isinstance(options.length, bool) or not isinstance(options.length, int) or options.length < 1:
        raise InvalidLengthError(f"length must be a positive integer, got {options.length!r}")


def build(options: GenerationOptions) -> str:
    """
    Assemble the alphabet for `options`:
    - concatenate the selected classes in canonical order
    - drop similar-looking characters if requested
    - drop ambiguous punctuation if requested
    Raises EmptyAlphabetError if nothing is left.
    """
    chars = "".join(
        charset for cls, charset in CHARACTER_SETS.items() if cls in options.classes
    )
    if options.exclude_similar:
        chars = "".join(c for c in chars if c not in SIMILAR_CHARS)
    if options.exclude_ambiguous:
        chars = "".join(c for c in chars if c not in AMBIGUOUS_CHARS)

    if not chars:
        raise EmptyAlphabetError("No characters available for password generation")

    logger.debug("alphabet built: %d characters", len(chars))
    return chars


def options_for_preset(name: str, base: GenerationOptions = GenerationOptions()) -> GenerationOptions:
    """Return `base` with its class selection replaced by the named preset."""
    if not isinstance(name, str) or name not in PRESETS:
        raise UnknownPresetError(
            f"Unknown preset {name!r} (choose from: {', '.join(PRESETS)})"
        )
    return base._replace(classes=PRESETS[name])
