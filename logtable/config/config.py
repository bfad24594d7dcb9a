from __future__ import annotations

"""Configuration loading and validation for the log table trainer.

This module loads YAML configuration, applies defaults, validates the
question range and mode, and produces a typed ``QuizSettings`` record that
the session controller can trust.
"""

from pathlib import Path
from typing import Any, Dict, Optional, Tuple

import sys

import yaml
from pydantic import BaseModel, Field, model_validator

from ..drills.log_drill import Mode
from ..theory.index_space import INDEX_MAX, INDEX_MIN, argument_text, index_from_argument


ALLOWED_MODES = {m.value for m in Mode}
DEFAULT_RETRY_DELAY_MS = 1000
RANGE_ERROR = f"Range must be between {argument_text(INDEX_MIN)} and {argument_text(INDEX_MAX)}."


class QuizSettings(BaseModel):
    """Validated quiz settings.

    - range_min/range_max: inclusive row indices (1..100), min <= max
    - mode: question order and direction
    - retry_delay_ms: pause before a retry round (>= 0)
    """

    range_min: int = Field(INDEX_MIN, ge=INDEX_MIN, le=INDEX_MAX)
    range_max: int = Field(INDEX_MAX, ge=INDEX_MIN, le=INDEX_MAX)
    mode: Mode = Mode.NORMAL
    retry_delay_ms: int = Field(DEFAULT_RETRY_DELAY_MS, ge=0)

    @model_validator(mode="after")
    def _ordered_range(self) -> "QuizSettings":
        if self.range_min > self.range_max:
            raise ValueError("range_min must not exceed range_max")
        return self


def _load_yaml(path: Path) -> Dict[str, Any]:
    try:
        with path.open("r", encoding="utf-8") as f:
            return yaml.safe_load(f) or {}
    except FileNotFoundError:
        print(f"ERROR: Config file not found: {path}", file=sys.stderr)
        sys.exit(1)


def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    """Load configuration from YAML or defaults.

    Args:
        path: Optional path to a YAML config. If None, use package defaults.

    Returns:
        A dictionary with configuration values.
    """
    if path:
        cfg = _load_yaml(Path(path))
    else:
        default_path = Path(__file__).with_name("defaults.yml")
        cfg = _load_yaml(default_path)
    return cfg


def validate_config(cfg: Dict[str, Any]) -> Dict[str, Any]:
    """Apply defaults and validate configuration values.

    Unknown modes and bad delays fall back to defaults with a warning. The
    range is checked later by ``parse_range`` since it is user input.

    Args:
        cfg: The raw configuration dictionary.

    Returns:
        The validated and merged configuration dictionary.
    """
    # an empty YAML section ("quiz:" with no keys) loads as None
    cfg["quiz"] = cfg.get("quiz") or {}
    cfg["ui"] = cfg.get("ui") or {}

    quiz = cfg["quiz"]
    ui = cfg["ui"]

    quiz.setdefault("range_min", argument_text(INDEX_MIN))
    quiz.setdefault("range_max", argument_text(INDEX_MAX))
    quiz.setdefault("mode", Mode.NORMAL.value)
    quiz.setdefault("retry_delay_ms", DEFAULT_RETRY_DELAY_MS)

    ui.setdefault("explain", False)
    ui.setdefault("show_how_to_play", True)

    mode = str(quiz.get("mode")).lower()
    if mode not in ALLOWED_MODES:
        print(f"WARNING: Unsupported mode '{quiz.get('mode')}', using 'normal'.")
        mode = Mode.NORMAL.value
    quiz["mode"] = mode

    try:
        delay = int(quiz.get("retry_delay_ms"))
    except (TypeError, ValueError):
        delay = -1
    if delay < 0:
        print(f"WARNING: Invalid retry_delay_ms '{quiz.get('retry_delay_ms')}', using {DEFAULT_RETRY_DELAY_MS}.")
        delay = DEFAULT_RETRY_DELAY_MS
    quiz["retry_delay_ms"] = delay

    # YAML may hand back floats for unquoted ranges; keep them as text.
    quiz["range_min"] = str(quiz["range_min"])
    quiz["range_max"] = str(quiz["range_max"])

    return cfg


def parse_range(min_text: str, max_text: str) -> Tuple[int, int]:
    """Convert argument texts like "1.01" and "2.00" into row indices.

    A reversed range is swapped.

    Raises:
        ValueError: with RANGE_ERROR if either end is unparsable or outside
            the table.
    """
    try:
        lo = index_from_argument(min_text)
        hi = index_from_argument(max_text)
    except ValueError as e:
        raise ValueError(RANGE_ERROR) from e
    for i in (lo, hi):
        if i < INDEX_MIN or i > INDEX_MAX:
            raise ValueError(RANGE_ERROR)
    if lo > hi:
        lo, hi = hi, lo
    return lo, hi


def settings_from_config(cfg: Dict[str, Any]) -> QuizSettings:
    """Build QuizSettings from a validated config dictionary."""
    quiz = cfg["quiz"]
    lo, hi = parse_range(quiz["range_min"], quiz["range_max"])
    return QuizSettings(
        range_min=lo,
        range_max=hi,
        mode=Mode(quiz["mode"]),
        retry_delay_ms=int(quiz["retry_delay_ms"]),
    )


def describe_settings(settings: QuizSettings) -> str:
    """One-line description, e.g. "1.01 to 2.00, normal mode"."""
    return (
        f"{argument_text(settings.range_min)} to {argument_text(settings.range_max)}, "
        f"{settings.mode.value} mode"
    )
