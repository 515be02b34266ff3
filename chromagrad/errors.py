"""Exceptions raised by gradient queries."""


class GradientError(Exception):
    """Base class for every error raised by chromagrad."""


class InvalidPosition(GradientError, ValueError):
    """A linear gradient was queried at a position that is not a number."""

    def __init__(self, position: float) -> None:
        super().__init__(f"X has an invalid value (NaN?): {position!r}")
        self.position = position


class DegenerateGeometry(GradientError, ZeroDivisionError):
    """The surface is too small to normalize a distance against."""
