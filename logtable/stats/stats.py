from __future__ import annotations

"""Session outcome classification and summary text."""

from enum import Enum


class Severity(str, Enum):
    GOOD = "good"
    WARN = "warn"
    BAD = "bad"


def classify_severity(mistakes: int, total: int) -> Severity:
    """Classify a finished session: no mistakes, some, or at least one per row."""
    if mistakes == 0:
        return Severity.GOOD
    if mistakes < total:
        return Severity.WARN
    return Severity.BAD


def plural(count: int, word: str) -> str:
    return f"{count} {word}" + ("" if count == 1 else "s")


def format_summary(mistakes: int, total: int) -> str:
    """Return the human-readable finish line."""
    return f"Finished with {plural(mistakes, 'mistake')} in total ({plural(total, 'question')})."
