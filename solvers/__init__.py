"""Daily puzzle solvers, keyed by day number."""

from types import ModuleType
from typing import Dict

from . import calibration, games, schematic, scratchcards
from .errors import InvalidGridError, PuzzleError, PuzzleParseError, UnknownDayError
from .loader import read_lines, split_lines

SOLVERS: Dict[int, ModuleType] = {
    module.DAY: module
    for module in (calibration, games, schematic, scratchcards)
}


def get_solver(day: int) -> ModuleType:
    """
    Look up the solver module for a day.
    
    Raises:
        UnknownDayError: If no solver is registered for the day.
    """
    try:
        return SOLVERS[day]
    except KeyError:
        raise UnknownDayError(day) from None


__all__ = [
    "SOLVERS",
    "get_solver",
    "read_lines",
    "split_lines",
    "PuzzleError",
    "PuzzleParseError",
    "InvalidGridError",
    "UnknownDayError",
]
