from __future__ import annotations

"""Session events and a tiny pub/sub bus.

The session controller never touches presentation objects; it emits these
records and the front end renders them.
"""

from dataclasses import dataclass
from typing import Any, Callable, ClassVar, Dict, List

from ..drills.log_drill import Direction, Mode
from ..stats.stats import Severity

# Subscribe under this name to receive every event.
ALL = "*"


@dataclass(frozen=True)
class SessionStarted:
    kind: ClassVar[str] = "session_started"
    range_min: int
    range_max: int
    mode: Mode
    total_count: int


@dataclass(frozen=True)
class QueryPresented:
    kind: ClassVar[str] = "query_presented"
    prompt_text: str
    expected_direction: Direction
    index: int
    remaining_count: int
    round: int


@dataclass(frozen=True)
class AnswerAccepted:
    kind: ClassVar[str] = "answer_accepted"
    verbatim_input: str
    prompt_text: str
    index: int


@dataclass(frozen=True)
class AnswerRejected:
    kind: ClassVar[str] = "answer_rejected"
    rounded_correct_answer: str
    prompt_text: str
    index: int


@dataclass(frozen=True)
class RetryAnnounced:
    kind: ClassVar[str] = "retry_announced"
    remaining_count: int


@dataclass(frozen=True)
class SessionFinished:
    kind: ClassVar[str] = "session_finished"
    mistake_count: int
    total_count: int
    severity: Severity


class EventBus:
    def __init__(self) -> None:
        self._subs: Dict[str, List[Callable[[Any], None]]] = {}

    def subscribe(self, event: str, handler: Callable[[Any], None]) -> None:
        self._subs.setdefault(event, []).append(handler)

    def emit(self, payload: Any) -> None:
        """Deliver ``payload`` to subscribers of its kind, then to ALL."""
        for h in self._subs.get(payload.kind, []) + self._subs.get(ALL, []):
            h(payload)
