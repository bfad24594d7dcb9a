from __future__ import annotations

"""Log table drill: modes, query construction and grading."""

from dataclasses import dataclass
from enum import Enum

from ..theory.index_space import argument_text, logarithm_text
from ..theory.rounding import round_to_significant
from .validator import MIN_SIGNIFICANT, validate


class Mode(str, Enum):
    NORMAL = "normal"
    SHUFFLED = "shuffled"
    REVERSE = "reverse"

    @property
    def shuffles(self) -> bool:
        return self is not Mode.NORMAL


class Direction(str, Enum):
    ARGUMENT_TO_LOG = "argument_to_log"
    LOG_TO_ARGUMENT = "log_to_argument"


def direction_for(mode: Mode) -> Direction:
    return Direction.LOG_TO_ARGUMENT if mode is Mode.REVERSE else Direction.ARGUMENT_TO_LOG


@dataclass(frozen=True)
class Query:
    """One table row as presented to the user."""

    index: int
    direction: Direction
    prompt_text: str
    correct_answer: str


class LogTableDrill:
    """Builds queries for table rows in one direction and grades answers."""

    def __init__(self, mode: Mode) -> None:
        self.mode = mode
        self.direction = direction_for(mode)

    def make_query(self, index: int) -> Query:
        argument = argument_text(index)
        logarithm = logarithm_text(index)
        if self.direction is Direction.LOG_TO_ARGUMENT:
            # The argument always has exactly 3 significant digits, so this
            # is effectively an exact match.
            return Query(
                index=index,
                direction=self.direction,
                prompt_text=round_to_significant(logarithm, MIN_SIGNIFICANT),
                correct_answer=argument,
            )
        return Query(index=index, direction=self.direction, prompt_text=argument, correct_answer=logarithm)

    def grade(self, answer: str, query: Query) -> bool:
        return validate(answer, query.correct_answer)

    def reveal(self, query: Query) -> str:
        """Correct answer as shown after a mistake."""
        return round_to_significant(query.correct_answer, MIN_SIGNIFICANT)
