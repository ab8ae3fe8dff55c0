"""Day 4: scratchcard scoring."""

import re
from typing import List, NamedTuple, Optional, Sequence

from answers.model import AnswerSheet
from .errors import PuzzleParseError


DAY = 4
TITLE = "Scratchcards"

_NUMBERS = r"[0-9]+(?:\s+[0-9]+)*"
CARD_RE = re.compile(rf"^Card\s+([0-9]+):\s+({_NUMBERS})\s+\|\s+({_NUMBERS})$")


class Card(NamedTuple):
    """A scratchcard: its number, the winning numbers and the numbers you have."""

    number: int
    winning_numbers: List[int]
    numbers_you_have: List[int]

    def matching_count(self) -> int:
        """Count how many of your numbers are winning numbers."""
        winning = set(self.winning_numbers)
        return sum(1 for number in self.numbers_you_have if number in winning)

    def points(self) -> int:
        matching = self.matching_count()
        if matching == 0:
            return 0
        return 2 ** (matching - 1)

    @classmethod
    def parse(cls, line: str) -> "Card":
        """
        Parse a card such as "Card 1: 41 48 83 | 83 86  6".

        Raises:
            PuzzleParseError: If the line is not a card.
        """
        match = CARD_RE.match(line.strip())
        if match is None:
            raise PuzzleParseError("invalid scratchcard", line)
        return cls(
            number=int(match.group(1)),
            winning_numbers=[int(n) for n in match.group(2).split()],
            numbers_you_have=[int(n) for n in match.group(3).split()],
        )


def parse_cards(lines: Sequence[str]) -> List[Card]:
    return [Card.parse(line) for line in lines]


def points_sum(cards: Sequence[Card]) -> int:
    return sum(card.points() for card in cards)


def card_count(cards: Sequence[Card]) -> int:
    """
    Count the cards held once every won copy has been processed.

    Each card starts with one copy. A card with m matches adds its copy
    count to each of the next m cards, never past the last card.
    """
    copies = [1] * len(cards)
    for index, card in enumerate(cards):
        won_until = min(index + 1 + card.matching_count(), len(cards))
        for won in range(index + 1, won_until):
            copies[won] += copies[index]
    return sum(copies)


def solve(lines: Sequence[str], part: Optional[int] = None, **options) -> AnswerSheet:
    cards = parse_cards(lines)
    sheet = AnswerSheet(DAY, TITLE)
    if part in (None, 1):
        sheet.add(1, "Sum of points", points_sum(cards))
    if part in (None, 2):
        sheet.add(2, "Total scratchcards", card_count(cards))
    return sheet
