"""Error types raised by the grid, level and pathfinding layers.

All of them subclass the builtin the failure would otherwise surface as, so
callers that already match on ``ValueError`` / ``LookupError`` keep working.
None of them are retried or caught inside the library.
"""


class InvalidDirectionError(ValueError):
    """Movement token is not one of up / down / left / right."""


class OccupancyConflictError(ValueError):
    """An entity was added on a cell that already holds one."""


class InvalidSelectionError(ValueError):
    """Unrecognized pathfinding algorithm or editor label."""


class LevelDecodeError(ValueError):
    """Level layout contains an unknown character or ragged rows."""


class MissingResourceError(LookupError):
    """A rendering resource (e.g. a tile colour) is not available."""
