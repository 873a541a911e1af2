"""
passcraft.errors
Exceptions raised by the generation core and its collaborators.
"""


class PassCraftError(ValueError):
    """Base exception for PassCraft."""

    pass


class EmptyAlphabetError(PassCraftError):
    """No usable characters: no class selected or every character filtered out."""

    pass


class InvalidLengthError(PassCraftError):
    """Password length is not a positive integer."""

    pass


class InvalidBatchSizeError(PassCraftError):
    """Batch count outside the allowed range."""

    pass


class UnknownPresetError(PassCraftError):
    """Preset name not recognised."""

    pass


class InvalidOptionError(PassCraftError):
    """Option value of the wrong type."""

    pass
