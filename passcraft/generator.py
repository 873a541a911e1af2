"""
passcraft.generator
Secure password generator using Python's secrets module.
"""

import logging
from secrets import SystemRandom
from typing import Callable, Optional

from .alphabet import GenerationOptions, build, validate_options
from .errors import EmptyAlphabetError, InvalidLengthError

logger = logging.getLogger(__name__)

RandomSource = Callable[[], int]

DRAW_BITS = 32
DRAW_RANGE = 1 << DRAW_BITS

_sysrand = SystemRandom()


def system_random_source() -> int:
    """One uniformly distributed unsigned 32-bit integer from the OS CSPRNG."""
    return _sysrand.getrandbits(DRAW_BITS)


def _pick_index(size: int, rng: RandomSource) -> int:
    """
    Map 32-bit draws onto range(size) without modulo bias.
    Draws at or above the largest multiple of `size` are thrown away.
    """
    limit = DRAW_RANGE - (DRAW_RANGE % size)
    while True:
        draw = rng()
        if not 0 <= draw < DRAW_RANGE:
            raise ValueError(f"random source returned {draw!r}, expected an unsigned 32-bit integer")
        if draw < limit:
            return draw % size


def generate(alphabet: str, length: int, rng: Optional[RandomSource] = None) -> str:
    """
    Draw `length` characters independently and uniformly from `alphabet`.
    `rng` defaults to the system CSPRNG; tests pass a deterministic source.
    """
    if isinstance(length, bool) or not isinstance(length, int) or length < 1:
        raise InvalidLengthError(f"length must be a positive integer, got {length!r}")
    if not alphabet:
        raise EmptyAlphabetError("alphabet is empty")

    rng = rng or system_random_source
    size = len(alphabet)
    password = "".join(alphabet[_pick_index(size, rng)] for _ in range(length))
    logger.debug("generated password of length %d from %d characters", length, size)
    return password


def generate_password(options: GenerationOptions, rng: Optional[RandomSource] = None) -> str:
    """Validate `options`, build the alphabet and draw one password."""
    validate_options(options)
    return generate(build(options), options.length, rng)
