"""Day 2: cube game records."""

import re
from typing import List, NamedTuple, Optional, Sequence

from answers.model import AnswerSheet
from .errors import PuzzleParseError


DAY = 2
TITLE = "Cube Conundrum"

GAME_RE = re.compile(r"^Game\s+([0-9]+):\s*(.+)$")
DRAW_RE = re.compile(r"^([0-9]+)\s+(red|green|blue)$")


class CubeSet(NamedTuple):
    """Counts of red, green and blue cubes."""

    red: int = 0
    green: int = 0
    blue: int = 0

    def is_superset(self, other: "CubeSet") -> bool:
        """Check if this set holds at least as many cubes of every colour."""
        return self.red >= other.red and self.green >= other.green and self.blue >= other.blue

    def power(self) -> int:
        return self.red * self.green * self.blue

    @classmethod
    def parse(cls, text: str) -> "CubeSet":
        """
        Parse a set such as "3 blue, 4 red".

        Colours may repeat; their counts add up.
        """
        counts = {"red": 0, "green": 0, "blue": 0}
        for draw in text.split(","):
            match = DRAW_RE.match(draw.strip())
            if match is None:
                raise PuzzleParseError("invalid cube count", draw.strip())
            counts[match.group(2)] += int(match.group(1))
        return cls(**counts)


# The bag used to decide which games were possible.
DEFAULT_BAG = CubeSet(red=12, green=13, blue=14)


class Game(NamedTuple):
    """A game id and the cube sets revealed during it."""

    id: int
    subsets: List[CubeSet]

    def is_possible_with(self, bag: CubeSet) -> bool:
        return all(bag.is_superset(subset) for subset in self.subsets)

    def minimum_set(self) -> CubeSet:
        """Return the fewest cubes of each colour that make the game possible."""
        return CubeSet(
            red=max((subset.red for subset in self.subsets), default=0),
            green=max((subset.green for subset in self.subsets), default=0),
            blue=max((subset.blue for subset in self.subsets), default=0),
        )

    @classmethod
    def parse(cls, line: str) -> "Game":
        """
        Parse a record such as "Game 1: 3 blue, 4 red; 1 red, 2 green".

        Raises:
            PuzzleParseError: If the line is not a game record.
        """
        match = GAME_RE.match(line.strip())
        if match is None:
            raise PuzzleParseError("invalid game record", line)
        try:
            subsets = [CubeSet.parse(text) for text in match.group(2).split(";")]
        except PuzzleParseError as e:
            raise PuzzleParseError(f"invalid game record ({e})", line) from e
        return cls(int(match.group(1)), subsets)


def parse_games(lines: Sequence[str]) -> List[Game]:
    return [Game.parse(line) for line in lines]


def possible_game_ids_sum(games: Sequence[Game], bag: CubeSet = DEFAULT_BAG) -> int:
    """Sum the ids of every game that could have been played with bag."""
    return sum(game.id for game in games if game.is_possible_with(bag))


def minimum_set_power_sum(games: Sequence[Game]) -> int:
    return sum(game.minimum_set().power() for game in games)


def solve(
    lines: Sequence[str],
    part: Optional[int] = None,
    bag: Optional[CubeSet] = None,
    **options,
) -> AnswerSheet:
    games = parse_games(lines)
    sheet = AnswerSheet(DAY, TITLE)
    if part in (None, 1):
        sheet.add(1, "Sum of possible game IDs", possible_game_ids_sum(games, bag or DEFAULT_BAG))
    if part in (None, 2):
        sheet.add(2, "Sum of the power of minimum sets", minimum_set_power_sum(games))
    return sheet
