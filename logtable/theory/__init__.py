"""Numeric layer: table rows and digit-string rounding.

Everything here works on decimal text, never on float-to-string conversion.
"""

from .index_space import argument_text, logarithm_text, index_from_argument  # noqa: F401
from .rounding import DecimalDigits, round_digits, round_to_significant  # noqa: F401
