"""Exceptions raised by the puzzle solvers."""

from typing import Optional


class PuzzleError(ValueError):
    """Base class for errors caused by bad puzzle input."""


class InvalidGridError(PuzzleError):
    """Raised when a schematic is empty or its rows differ in length."""


class PuzzleParseError(PuzzleError):
    """Raised when a line does not match the expected puzzle format."""

    def __init__(self, message: str, line: Optional[str] = None):
        if line is not None:
            message = f"{message}: {line!r}"
        super().__init__(message)
        self.line = line


class UnknownDayError(PuzzleError):
    """Raised when no solver is registered for a day."""

    def __init__(self, day: int):
        super().__init__(f"no solver registered for day {day}")
        self.day = day
