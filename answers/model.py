"""Answer data model shared by all solvers and exporters."""

from typing import Iterator, List, NamedTuple, Optional


class Answer(NamedTuple):
    """A single computed answer."""

    part: int
    label: str
    value: int


class AnswerSheet:
    """
    The answers computed for one day's puzzle.

    Answers keep the order in which they were added. A part may carry more
    than one answer when the same value is computed by different strategies.
    """

    def __init__(self, day: int, title: str):
        self.day = day
        self.title = title
        self._answers: List[Answer] = []

    @property
    def answers(self) -> List[Answer]:
        """Return all answers in insertion order."""
        return list(self._answers)

    def add(self, part: int, label: str, value: int) -> Answer:
        """
        Record an answer.

        Args:
            part: Puzzle part (1 or 2).
            label: Human readable description of the value.
            value: The computed value.

        Returns:
            The recorded Answer.
        """
        answer = Answer(part, label, value)
        self._answers.append(answer)
        return answer

    def get(self, label: str) -> Optional[int]:
        """Get the value recorded under label, or None."""
        for answer in self._answers:
            if answer.label == label:
                return answer.value
        return None

    def __iter__(self) -> Iterator[Answer]:
        return iter(self._answers)

    def __len__(self) -> int:
        """Return the number of answers."""
        return len(self._answers)

    def __contains__(self, label: str) -> bool:
        """Check if an answer with this label exists."""
        return any(answer.label == label for answer in self._answers)

    def __repr__(self) -> str:
        return f"AnswerSheet(day={self.day}, title={self.title!r}, answers={len(self._answers)})"
