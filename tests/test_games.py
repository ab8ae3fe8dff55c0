"""Tests for cube game records."""

import pytest

from solvers.errors import PuzzleParseError
from solvers.games import (
    DEFAULT_BAG,
    CubeSet,
    Game,
    minimum_set_power_sum,
    parse_games,
    possible_game_ids_sum,
    solve,
)


SAMPLE = [
    "Game 1: 3 blue, 4 red; 1 red, 2 green, 6 blue; 2 green",
    "Game 2: 1 blue, 2 green; 3 green, 4 blue, 1 red; 1 green, 1 blue",
    "Game 3: 8 green, 6 blue, 20 red; 5 blue, 4 red, 13 green; 5 green, 1 red",
    "Game 4: 1 green, 3 red, 6 blue; 3 green, 6 red; 3 green, 15 blue, 14 red",
    "Game 5: 6 red, 1 blue, 3 green; 2 blue, 1 red, 2 green",
]


class TestParsing:
    """Tests for game record parsing."""

    def test_game_parse(self):
        """Test parsing a full game record."""
        game = Game.parse(SAMPLE[0])

        assert game == Game(
            id=1,
            subsets=[
                CubeSet(red=4, green=0, blue=3),
                CubeSet(red=1, green=2, blue=6),
                CubeSet(red=0, green=2, blue=0),
            ],
        )

    def test_repeated_colour_adds_up(self):
        """Test that a colour listed twice in one set is summed."""
        assert CubeSet.parse("2 red, 3 red") == CubeSet(red=5)

    def test_unknown_colour(self):
        """Test that unknown colours are rejected."""
        with pytest.raises(PuzzleParseError, match="invalid game record"):
            Game.parse("Game 1: 3 purple")

    def test_not_a_game(self):
        """Test that other lines are rejected."""
        with pytest.raises(PuzzleParseError):
            Game.parse("Card 1: 1 2 | 3 4")

    def test_non_ascii_digits_rejected(self):
        """Test that only ASCII digits are accepted."""
        with pytest.raises(PuzzleParseError):
            Game.parse("Game \u0663: 1 red")
        with pytest.raises(PuzzleParseError):
            Game.parse("Game 1: \u0663 red")


class TestGame:
    """Tests for game rules."""

    def test_is_possible_with(self):
        """Test which sample games fit the default bag."""
        games = parse_games(SAMPLE)
        possible = [game.id for game in games if game.is_possible_with(DEFAULT_BAG)]
        assert possible == [1, 2, 5]

    def test_minimum_set(self):
        """Test the minimum set and its power."""
        minimum = Game.parse(SAMPLE[0]).minimum_set()
        assert minimum == CubeSet(red=4, green=2, blue=6)
        assert minimum.power() == 48

    def test_is_superset(self):
        """Test component-wise comparison."""
        assert CubeSet(1, 2, 3).is_superset(CubeSet(1, 2, 3))
        assert not CubeSet(1, 2, 3).is_superset(CubeSet(0, 3, 0))


class TestSolve:
    """Tests for the day 2 solver."""

    def test_sample(self):
        """Test both answers for the sample."""
        games = parse_games(SAMPLE)
        assert possible_game_ids_sum(games) == 8
        assert minimum_set_power_sum(games) == 2286

    def test_solve_with_custom_bag(self):
        """Test that the bag can be replaced."""
        sheet = solve(SAMPLE, part=1, bag=CubeSet(red=20, green=13, blue=15))
        assert sheet.get("Sum of possible game IDs") == 15

    def test_solve_defaults(self):
        """Test the answer sheet with the default bag."""
        sheet = solve(SAMPLE)
        assert sheet.get("Sum of possible game IDs") == 8
        assert sheet.get("Sum of the power of minimum sets") == 2286
