"""Day 3: engine schematic scanning for part numbers and gear ratios."""

from typing import Iterator, List, NamedTuple, Optional, Sequence, Tuple

from answers.model import AnswerSheet
from .errors import InvalidGridError


DAY = 3
TITLE = "Gear Ratios"

DIGITS = frozenset("0123456789")
FILLER = "."
GEAR = "*"


class NumberSpan(NamedTuple):
    """A maximal horizontal run of digits. Columns are inclusive."""

    row: int
    start: int
    end: int
    value: int


class Gear(NamedTuple):
    """A gear symbol and the two numbers adjacent to it."""

    first: int
    second: int

    @property
    def ratio(self) -> int:
        return self.first * self.second


class Part(NamedTuple):
    """A symbol cell and the number spans adjacent to it."""

    symbol: str
    row: int
    column: int
    spans: Tuple[NumberSpan, ...]

    @property
    def numbers(self) -> List[int]:
        return [span.value for span in self.spans]

    def as_gear(self) -> Optional[Gear]:
        """Return this part as a Gear, or None if it does not qualify."""
        if self.symbol != GEAR or len(self.spans) != 2:
            return None
        return Gear(self.spans[0].value, self.spans[1].value)


class ScanResult(NamedTuple):
    """Aggregates produced by scanning a schematic."""

    part_numbers: List[int]
    gears: List[Gear]

    @property
    def part_numbers_sum(self) -> int:
        return sum(self.part_numbers)

    @property
    def gear_ratios_sum(self) -> int:
        return sum(gear.ratio for gear in self.gears)


class Schematic:
    """
    A rectangular grid of schematic characters.

    Cells are addressed by (row, column), both 0-indexed from the top-left.
    Every cell is exactly one of: a digit, the filler character, or a symbol.
    """

    def __init__(self, rows: Sequence[str]):
        rows = list(rows)
        if not rows:
            raise InvalidGridError("schematic has no rows")
        width = len(rows[0])
        for index, row in enumerate(rows):
            if len(row) != width:
                raise InvalidGridError(
                    f"row {index} has length {len(row)}, expected {width}"
                )
        self._rows = rows
        self._width = width

    @property
    def height(self) -> int:
        return len(self._rows)

    @property
    def width(self) -> int:
        return self._width

    def _in_bounds(self, row: int, column: int) -> bool:
        return 0 <= row < self.height and 0 <= column < self._width

    def is_digit(self, row: int, column: int) -> bool:
        """Check if a cell holds a digit. Out-of-bounds cells never do."""
        return self._in_bounds(row, column) and self._rows[row][column] in DIGITS

    def is_symbol(self, row: int, column: int) -> bool:
        """Check if a cell holds a symbol (neither digit, filler nor whitespace)."""
        if not self._in_bounds(row, column):
            return False
        char = self._rows[row][column]
        return char != FILLER and char not in DIGITS and not char.isspace()

    def number_at(self, row: int, column: int) -> Optional[NumberSpan]:
        """
        Resolve the number span covering a cell.

        Args:
            row: Row of the seed cell.
            column: Column of the seed cell.

        Returns:
            The span containing the seed cell, or None if the cell is out of
            bounds or not a digit.
        """
        if not self.is_digit(row, column):
            return None

        line = self._rows[row]
        start = column
        while start > 0 and line[start - 1] in DIGITS:
            start -= 1
        end = column
        while end < self._width - 1 and line[end + 1] in DIGITS:
            end += 1

        return NumberSpan(row, start, end, int(line[start:end + 1]))

    def _vertical_neighbours(self, row: int, column: int) -> List[NumberSpan]:
        # A digit straight above/below already covers any diagonal overlap.
        straight = self.number_at(row, column)
        if straight is not None:
            return [straight]

        spans = []
        for diagonal in (column - 1, column + 1):
            span = self.number_at(row, diagonal)
            if span is not None:
                spans.append(span)
        return spans

    def adjacent_numbers(self, row: int, column: int) -> List[NumberSpan]:
        """
        Find the distinct number spans 8-connected to a cell.

        Neighbours are consulted above, left, right, then below. Above and
        below, the diagonals are only checked when the cell straight above
        (or below) is not a digit.
        """
        spans = self._vertical_neighbours(row - 1, column)

        for side in (column - 1, column + 1):
            span = self.number_at(row, side)
            if span is not None:
                spans.append(span)

        spans.extend(self._vertical_neighbours(row + 1, column))
        return spans

    def iter_parts(self) -> Iterator[Part]:
        """Iterate over every symbol cell, row by row, as Parts."""
        for row, line in enumerate(self._rows):
            for column in range(len(line)):
                if self.is_symbol(row, column):
                    spans = self.adjacent_numbers(row, column)
                    yield Part(line[column], row, column, tuple(spans))

    def __len__(self) -> int:
        """Return the number of rows."""
        return len(self._rows)

    def __repr__(self) -> str:
        return f"Schematic(height={self.height}, width={self._width})"


def scan(rows: Sequence[str]) -> ScanResult:
    """
    Scan a schematic for part numbers and gears.

    A number touching two symbols is counted once for each of them.

    Args:
        rows: Equal-length schematic rows.

    Returns:
        ScanResult with every part number and every Gear.

    Raises:
        InvalidGridError: If rows is empty or ragged.
    """
    part_numbers: List[int] = []
    gears: List[Gear] = []

    for part in Schematic(rows).iter_parts():
        part_numbers.extend(part.numbers)
        gear = part.as_gear()
        if gear is not None:
            gears.append(gear)

    return ScanResult(part_numbers, gears)


def part_numbers_sum(rows: Sequence[str]) -> int:
    """Sum every number adjacent to a symbol."""
    return scan(rows).part_numbers_sum


def gear_ratios_sum(rows: Sequence[str]) -> int:
    """Sum the ratios of every gear."""
    return scan(rows).gear_ratios_sum


def solve(lines: Sequence[str], part: Optional[int] = None, **options) -> AnswerSheet:
    result = scan(lines)
    sheet = AnswerSheet(DAY, TITLE)
    if part in (None, 1):
        sheet.add(1, "Sum of part numbers", result.part_numbers_sum)
    if part in (None, 2):
        sheet.add(2, "Sum of gear ratios", result.gear_ratios_sum)
    return sheet
