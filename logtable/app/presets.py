from __future__ import annotations

"""Curated question ranges and modes.

Presets help users pick a practice set quickly without many flags. Values
use the same keys as the ``quiz`` section of the config.
"""

from typing import Any, Dict

QUIZ_PRESETS: Dict[str, Dict[str, Any]] = {
    "full": {
        "range_min": "1.01",
        "range_max": "2.00",
        "mode": "normal",
    },
    "low": {
        "range_min": "1.01",
        "range_max": "1.50",
        "mode": "normal",
    },
    "high": {
        "range_min": "1.51",
        "range_max": "2.00",
        "mode": "normal",
    },
    "shuffled": {
        "range_min": "1.01",
        "range_max": "2.00",
        "mode": "shuffled",
    },
    "reverse": {
        "range_min": "1.01",
        "range_max": "2.00",
        "mode": "reverse",
    },
}


def list_presets() -> Dict[str, Dict[str, Any]]:
    return dict(QUIZ_PRESETS)


def get_preset(name: str) -> Dict[str, Any]:
    p = QUIZ_PRESETS.get(name)
    if p is None:
        raise KeyError(f"Unknown preset: {name}")
    return dict(p)
