# src/gridmaze/errors.py

class MazeError(Exception):
    """Base class for errors raised by the maze core."""


class InvalidDimensions(MazeError, ValueError):
    def __init__(self, width: int, height: int, minimum: int) -> None:
        super().__init__(
            f"maze must be at least {minimum}x{minimum} after normalization, got {width}x{height}"
        )
        self.width = width
        self.height = height
        self.minimum = minimum
