"""Day 1: recover calibration values from the trebuchet document."""

import re
from typing import Iterable, List, Optional, Sequence

from answers.model import AnswerSheet
from .errors import PuzzleParseError


DAY = 1
TITLE = "Trebuchet?!"

DIGITS = "0123456789"

SPELLED_DIGITS = {
    "one": 1, "two": 2, "three": 3,
    "four": 4, "five": 5, "six": 6,
    "seven": 7, "eight": 8, "nine": 9,
}

# Zero has no spelled form, so only 1-9 count once words are allowed.
_DIGIT_PATTERN = "|".join(list(SPELLED_DIGITS) + [r"[1-9]"])

FIRST_DIGIT_RE = re.compile(rf"({_DIGIT_PATTERN})")
LAST_DIGIT_RE = re.compile(rf".*({_DIGIT_PATTERN})")
# Zero-width lookahead so "eightwo" yields both "eight" and "two".
OVERLAPPING_DIGIT_RE = re.compile(rf"(?=({_DIGIT_PATTERN}))")


def _parse_digit(token: str) -> int:
    if token in SPELLED_DIGITS:
        return SPELLED_DIGITS[token]
    return int(token)


def _find_digit(chars: Iterable[str]) -> Optional[int]:
    for char in chars:
        if char in DIGITS:
            return int(char)
    return None


def calibration_value(line: str) -> int:
    """
    Combine the first and last digit of a line into a two-digit number.

    A line with a single digit uses it twice ("treb7uchet" -> 77).

    Raises:
        PuzzleParseError: If the line contains no digit.
    """
    tens = _find_digit(line)
    units = _find_digit(reversed(line))
    if tens is None or units is None:
        raise PuzzleParseError("calibration line has no digit", line)
    return tens * 10 + units


def calibration_value_spelled(line: str) -> int:
    """
    Calibration value counting spelled-out digits, using a leftmost search
    for the first digit and a greedy match for the last.
    """
    first = FIRST_DIGIT_RE.search(line)
    last = LAST_DIGIT_RE.match(line)
    if first is None or last is None:
        raise PuzzleParseError("calibration line has no digit", line)
    return _parse_digit(first.group(1)) * 10 + _parse_digit(last.group(1))


def calibration_value_overlapping(line: str) -> int:
    """
    Calibration value counting spelled-out digits, collecting every
    overlapping match and taking the first and last.
    """
    matches: List[int] = [
        _parse_digit(match.group(1)) for match in OVERLAPPING_DIGIT_RE.finditer(line)
    ]
    if not matches:
        raise PuzzleParseError("calibration line has no digit", line)
    return matches[0] * 10 + matches[-1]


def solve(lines: Sequence[str], part: Optional[int] = None, **options) -> AnswerSheet:
    sheet = AnswerSheet(DAY, TITLE)
    if part in (None, 1):
        sheet.add(1, "Sum of calibration values", sum(calibration_value(line) for line in lines))
    if part in (None, 2):
        sheet.add(
            2,
            "Sum of calibration values (regex)",
            sum(calibration_value_spelled(line) for line in lines),
        )
        sheet.add(
            2,
            "Sum of calibration values (overlapping)",
            sum(calibration_value_overlapping(line) for line in lines),
        )
    return sheet
