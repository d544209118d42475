# errors.py
"""Exceptions raised by the maze generation, solving and door placement code."""


class MazeError(Exception):
    """Base class for every error raised by the maze library."""
    status_code = 400


class InvalidDimensionError(MazeError, ValueError):
    """Rows or columns outside the allowed range."""


class MalformedGridError(MazeError, ValueError):
    """Grid input that is empty, ragged or has badly shaped cells."""


class InvalidDoorCountError(MazeError, ValueError):
    """Negative door count."""


class DisconnectedGridError(MazeError):
    """No path exists from the top-left cell to the bottom-right cell."""
    status_code = 422


class InternalInconsistencyError(MazeError, RuntimeError):
    """The carving stack emptied before every cell was visited."""
    status_code = 500


class InvalidParameterError(MazeError, ValueError):
    """Request parameter missing or of the wrong type."""
