"""Log Table Trainer package initialization.

Drills reading log10 tables for arguments 1.01 .. 2.00 and checks answers to
at least three significant digits.
"""

from __future__ import annotations

__version__ = "0.1.0"

__all__ = ["__version__"]
