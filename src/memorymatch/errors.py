"""Error kinds shared by the game core.

Configuration problems abort the action that hit them, storage problems fall
back to an empty leaderboard, and invalid input is ignored. None of them may
leave in-memory game state half updated.
"""


class MemoryMatchError(Exception):
    """Base class for every error raised by the game core."""


class ConfigurationError(MemoryMatchError, ValueError):
    """Unknown difficulty or a preset that cannot produce a full deck."""


class StorageError(MemoryMatchError):
    """Reading, parsing or writing the persisted leaderboard failed."""


class InvalidInputError(MemoryMatchError, ValueError):
    """An event payload or argument had the wrong shape."""
