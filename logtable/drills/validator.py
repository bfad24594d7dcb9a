from __future__ import annotations

"""Answer checking against ground-truth decimal text.

An answer is accepted when it agrees with the correct value, rounded to the
same number of digits the user typed, with at least MIN_SIGNIFICANT
significant digits compared. Typing more digits raises the bar.
"""

from ..theory.rounding import DecimalDigits, is_digit, round_digits


# Minimum number of significant digits compared in every answer.
MIN_SIGNIFICANT = 3


def validate(answer: str, correct: str, min_significant: int = MIN_SIGNIFICANT) -> bool:
    """Return True if ``answer`` matches ``correct`` to the digits given.

    Never raises: characters other than digits and the first decimal point
    simply fail to match.

    Args:
        answer: Text typed by the user (already stripped).
        correct: Ground-truth decimal text.
        min_significant: Minimum significant digits that must be compared.
    """
    given = DecimalDigits.parse(answer)
    truth = DecimalDigits.parse(correct)

    # Same order of magnitude: "1.5" never matches "0.15".
    if given.point != truth.point:
        return False

    i = 0
    significant = 0
    while i < len(given.digits) or 0 < significant < min_significant:
        d = given.digit_at(i)
        i += 1
        if is_digit(d) and (d != "0" or significant > 0):
            significant += 1
    # All zeros is only right if the correct value is zero throughout.
    if significant == 0:
        i = max(i, len(truth.digits))

    rounded, carried_to = round_digits(truth, i)
    if carried_to < 0:
        return False
    for pos in range(i - 1, -1, -1):
        if given.digit_at(pos) != rounded[pos]:
            return False
    return True
