"""Tree-style text exporter for answer sheets (human-friendly format)."""

from typing import List

from answers.model import AnswerSheet


# Unicode tree characters
UNICODE_BRANCH = "├── "
UNICODE_LAST = "└── "

# ASCII fallback characters
ASCII_BRANCH = "|-- "
ASCII_LAST = "\\-- "


def to_text(sheet: AnswerSheet, style: str = "tree") -> str:
    """
    Convert an answer sheet to a tree of answers under a day header.
    
    Args:
        sheet: The answer sheet to export.
        style: Output style - "tree" (Unicode) or "ascii" (pure ASCII).
    
    Returns:
        Text representation, one answer per line.
    """
    if style == "ascii":
        branch, last = ASCII_BRANCH, ASCII_LAST
    else:
        branch, last = UNICODE_BRANCH, UNICODE_LAST
    
    lines: List[str] = [f"Day {sheet.day}: {sheet.title}"]
    
    answers = sheet.answers
    if not answers:
        lines.append(f"{last}(no answers)")
    
    for index, answer in enumerate(answers):
        prefix = last if index == len(answers) - 1 else branch
        lines.append(f"{prefix}[Part {answer.part}] {answer.label}: {answer.value}")
    
    return "\n".join(lines)
