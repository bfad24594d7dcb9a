from __future__ import annotations

"""Session tracing (Explain Mode).

Switched on by ``--explain`` or ``ui.explain: true``; every state change of
the quiz is printed as one line ``[EXPLAIN] <event> :: <json>``.
"""

import json
from enum import Enum
from typing import Any, Dict

_ENABLED = False


def enable(flag: bool = True) -> None:
    global _ENABLED
    _ENABLED = bool(flag)


def enabled() -> bool:
    return _ENABLED


def _plain(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    return str(value)


def format_trace(event: str, payload: Dict[str, Any] | None = None) -> str:
    data = json.dumps(payload or {}, separators=(",", ":"), default=_plain)
    return f"[EXPLAIN] {event} :: {data}"


def trace(event: str, payload: Dict[str, Any] | None = None) -> None:
    if not _ENABLED:
        return
    print(format_trace(event, payload))
