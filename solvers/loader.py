"""Input loading for puzzle files."""

import sys
from pathlib import Path
from typing import List, Union


def split_lines(text: str) -> List[str]:
    """
    Split puzzle text into rows.
    
    Trailing whitespace (including carriage returns) is stripped from every
    row. Blank lines at the end are dropped; blank lines inside the text are
    kept so that a solver sees the gap.
    """
    rows = [raw.rstrip() for raw in text.splitlines()]
    while rows and not rows[-1]:
        rows.pop()
    return rows


def read_lines(path: Union[str, Path]) -> List[str]:
    """
    Read a puzzle input file and split it into rows.
    
    Args:
        path: Path to the input file, or "-" to read standard input.
    
    Returns:
        Non-blank rows of the file, in order.
    
    Raises:
        OSError: If the file cannot be read.
        UnicodeDecodeError: If the file is not valid UTF-8.
    """
    if str(path) == "-":
        return split_lines(sys.stdin.read())
    return split_lines(Path(path).read_text(encoding="utf-8"))
