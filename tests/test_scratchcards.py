"""Tests for scratchcard scoring."""

import pytest

from solvers.errors import PuzzleParseError
from solvers.scratchcards import Card, card_count, parse_cards, points_sum, solve


SAMPLE = [
    "Card 1: 41 48 83 86 17 | 83 86  6 31 17  9 48 53",
    "Card 2: 13 32 20 16 61 | 61 30 68 82 17 32 24 19",
    "Card 3:  1 21 53 59 44 | 69 82 63 72 16 21 14  1",
    "Card 4: 41 92 73 84 69 | 59 84 76 51 58  5 54 83",
    "Card 5: 87 83 26 28 32 | 88 30 70 12 93 22 82 36",
    "Card 6: 31 18 13 56 72 | 74 77 10 23 35 67 36 11",
]


class TestCard:
    """Tests for individual cards."""

    def test_parse(self):
        """Test card parsing with padded numbers."""
        assert Card.parse(SAMPLE[0]) == Card(
            number=1,
            winning_numbers=[41, 48, 83, 86, 17],
            numbers_you_have=[83, 86, 6, 31, 17, 9, 48, 53],
        )

    def test_parse_padded_card_number(self):
        """Test that the card number may be padded."""
        assert Card.parse("Card  12: 1 | 1").number == 12

    def test_parse_invalid(self):
        """Test that malformed cards are rejected."""
        with pytest.raises(PuzzleParseError, match="invalid scratchcard"):
            Card.parse("Card 1: 41 48")

    def test_non_ascii_digits_rejected(self):
        """Test that only ASCII digits are accepted."""
        with pytest.raises(PuzzleParseError):
            Card.parse("Card 1: \u0663 48 | 83 86")

    def test_points(self):
        """Test scoring of matching numbers."""
        cards = parse_cards(SAMPLE)
        assert [card.matching_count() for card in cards] == [4, 2, 2, 1, 0, 0]
        assert [card.points() for card in cards] == [8, 2, 2, 1, 0, 0]


class TestTotals:
    """Tests for the day 4 totals."""

    def test_points_sum(self):
        """Test the sample points total."""
        assert points_sum(parse_cards(SAMPLE)) == 13

    def test_card_count(self):
        """Test the sample card total after copies."""
        assert card_count(parse_cards(SAMPLE)) == 30

    def test_copies_stop_at_last_card(self):
        """Test that wins never add cards past the end of the table."""
        cards = parse_cards(["Card 1: 1 2 3 | 1 2 3", "Card 2: 4 | 5"])
        assert card_count(cards) == 3

    def test_solve(self):
        """Test the answer sheet."""
        sheet = solve(SAMPLE)
        assert sheet.get("Sum of points") == 13
        assert sheet.get("Total scratchcards") == 30
