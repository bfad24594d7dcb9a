from __future__ import annotations

"""Session controller: question order, mistakes, the retry loop and completion.

Front-end agnostic. The controller owns one ``Session`` record, mutates it
only through ``start``, ``submit_answer`` and ``resume``, and reports every
change as an event on its ``EventBus``. The pause before a retry round is
timed by the caller, which then calls ``resume()`` once.
"""

import random
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

from ..drills.log_drill import LogTableDrill, Mode, Query
from ..stats.stats import classify_severity
from ..theory.index_space import INDEX_MAX, INDEX_MIN
from ..util.randomness import shuffled
from .events import (
    AnswerAccepted,
    AnswerRejected,
    EventBus,
    QueryPresented,
    RetryAnnounced,
    SessionFinished,
    SessionStarted,
)
from .explain import trace as xtrace


class SessionState(str, Enum):
    IDLE = "idle"
    PRESENTING = "presenting"
    RETRY_PAUSE = "retry_pause"
    FINISHED = "finished"


@dataclass
class Session:
    range_min: int
    range_max: int
    mode: Mode
    ordered_indices: List[int]
    answered: Dict[int, bool] = field(default_factory=dict)
    remaining: int = 0
    mistakes: int = 0
    cursor: int = 0
    state: SessionState = SessionState.PRESENTING
    query: Optional[Query] = None
    round: int = 1

    @property
    def total(self) -> int:
        return len(self.ordered_indices)

    def outstanding(self) -> List[int]:
        """Indices not yet answered correctly, in presentation order."""
        return [i for i in self.ordered_indices if not self.answered[i]]


class SessionController:
    def __init__(self, bus: Optional[EventBus] = None, rng: Optional[random.Random] = None) -> None:
        self.bus = bus or EventBus()
        self.rng = rng
        self._session: Optional[Session] = None
        self._drill: Optional[LogTableDrill] = None

    @property
    def session(self) -> Optional[Session]:
        return self._session

    @property
    def state(self) -> SessionState:
        return self._session.state if self._session is not None else SessionState.IDLE

    @property
    def current_query(self) -> Optional[Query]:
        if self.state is not SessionState.PRESENTING:
            return None
        assert self._session is not None
        return self._session.query

    def start(self, range_min: int, range_max: int, mode: Mode | str) -> Session:
        """Begin a new session, discarding any previous one.

        The range must already be validated (see ``config.parse_range``);
        anything else is a programming error.
        """
        if not (INDEX_MIN <= range_min <= range_max <= INDEX_MAX):
            raise ValueError(f"invalid index range {range_min}..{range_max}")
        mode = Mode(mode)
        order = list(range(range_min, range_max + 1))
        if mode.shuffles:
            order = shuffled(order, self.rng)

        self._drill = LogTableDrill(mode)
        self._session = Session(
            range_min=range_min,
            range_max=range_max,
            mode=mode,
            ordered_indices=order,
            answered={i: False for i in order},
            remaining=len(order),
        )
        xtrace("session_started", {"range": [range_min, range_max], "mode": mode, "total": len(order)})
        events: List[Any] = [SessionStarted(range_min=range_min, range_max=range_max, mode=mode, total_count=len(order))]
        events += self._advance()
        self._publish(events)
        return self._session

    def submit_answer(self, text: str) -> Optional[bool]:
        """Grade ``text`` against the current query.

        Returns the verdict, or None when no query is being presented (the
        call is ignored and nothing changes).
        """
        s = self._session
        if s is None or s.state is not SessionState.PRESENTING or s.query is None:
            xtrace("input_ignored", {"state": self.state})
            return None
        assert self._drill is not None
        query = s.query
        correct = self._drill.grade(text.strip(), query)
        xtrace("graded", {"index": query.index, "answer": text, "truth": query.correct_answer, "correct": correct})

        event: Any
        if correct:
            s.answered[query.index] = True
            s.remaining -= 1
            event = AnswerAccepted(verbatim_input=text, prompt_text=query.prompt_text, index=query.index)
        else:
            s.mistakes += 1
            event = AnswerRejected(
                rounded_correct_answer=self._drill.reveal(query),
                prompt_text=query.prompt_text,
                index=query.index,
            )
        s.cursor += 1
        self._publish([event] + self._advance())
        return correct

    def resume(self) -> bool:
        """Start the next retry round after the caller's pause.

        Returns False (and changes nothing) unless a retry is pending.
        """
        s = self._session
        if s is None or s.state is not SessionState.RETRY_PAUSE:
            return False
        s.cursor = 0
        s.round += 1
        xtrace("retry_resumed", {"round": s.round, "remaining": s.remaining})
        self._publish(self._advance())
        return True

    def _advance(self) -> List[Any]:
        # Mutates the session fully before anything is published.
        assert self._session is not None and self._drill is not None
        s = self._session
        order = s.ordered_indices
        while s.cursor < len(order) and s.answered[order[s.cursor]]:
            s.cursor += 1

        if s.cursor >= len(order):
            s.query = None
            if s.remaining == 0:
                s.state = SessionState.FINISHED
                severity = classify_severity(s.mistakes, s.total)
                xtrace("session_finished", {"mistakes": s.mistakes, "total": s.total, "severity": severity})
                return [SessionFinished(mistake_count=s.mistakes, total_count=s.total, severity=severity)]
            s.state = SessionState.RETRY_PAUSE
            xtrace("retry_announced", {"remaining": s.remaining})
            return [RetryAnnounced(remaining_count=s.remaining)]

        s.state = SessionState.PRESENTING
        s.query = self._drill.make_query(order[s.cursor])
        xtrace("query_presented", {"index": s.query.index, "prompt": s.query.prompt_text})
        return [
            QueryPresented(
                prompt_text=s.query.prompt_text,
                expected_direction=s.query.direction,
                index=s.query.index,
                remaining_count=s.remaining,
                round=s.round,
            )
        ]

    def _publish(self, events: List[Any]) -> None:
        for event in events:
            self.bus.emit(event)
