from __future__ import annotations

"""Significant-digit rounding on decimal text.

Digits are handled as characters with explicit carry propagation, so table
values never pass through binary floating point on their way to the screen.
"""

from dataclasses import dataclass
from typing import Tuple


def is_digit(ch: str) -> bool:
    # str.isdigit() also accepts superscripts and other Unicode digits.
    return "0" <= ch <= "9"


@dataclass(frozen=True)
class DecimalDigits:
    """Digit characters of a decimal text and the position of its point.

    ``point`` is the number of digits left of the decimal point. Text without
    a point is an integer, so ``point == len(digits)``.
    """

    digits: str
    point: int

    @classmethod
    def parse(cls, text: str) -> "DecimalDigits":
        # ".5" is read as "0.5"
        if text.startswith("."):
            text = "0" + text
        p = text.find(".")
        if p == -1:
            return cls(digits=text, point=len(text))
        return cls(digits=text[:p] + text[p + 1 :], point=p)

    def digit_at(self, i: int) -> str:
        """Digit at position ``i``, padded with '0' past the end."""
        return self.digits[i] if i < len(self.digits) else "0"

    def render(self) -> str:
        integer = self.digits[: self.point] or "0"
        fraction = self.digits[self.point :]
        return f"{integer}.{fraction}" if fraction else integer


def round_digits(number: DecimalDigits, length: int) -> Tuple[str, int]:
    """Round ``number`` half-up to its first ``length`` digit positions.

    Args:
        number: Parsed decimal text.
        length: Number of leading digit positions to keep (zero padded).

    Returns:
        A pair ``(kept, carried_to)``. ``kept`` holds exactly ``length`` digits
        after carry propagation. ``carried_to`` is the leftmost position the
        carry changed: ``length`` when nothing was carried, ``-1`` when the
        carry ran past the first digit and a new leading '1' is needed.
    """
    kept = [number.digit_at(i) for i in range(length)]
    nxt = number.digit_at(length)
    carry = is_digit(nxt) and nxt >= "5"
    carried_to = length
    i = length - 1
    while carry and i >= 0:
        carried_to = i
        if kept[i] == "9":
            kept[i] = "0"
            i -= 1
        else:
            kept[i] = chr(ord(kept[i]) + 1)
            carry = False
    if carry:
        carried_to = -1
    return "".join(kept), carried_to


def round_to_significant(value: str, n: int) -> str:
    """Round a decimal text to ``n`` significant digits, half up.

    Leading zeros are never significant. A value shorter than ``n``
    significant digits is extended with zeros ("0.3" -> "0.300"), and a cut
    inside the integer part keeps the magnitude ("123.4", 2 -> "120").
    Significant trailing zeros are kept ("1.999" -> "2.00").

    Raises:
        ValueError: if ``n`` is less than 1.
    """
    if n < 1:
        raise ValueError(f"significant digit count must be >= 1, got {n}")
    number = DecimalDigits.parse(value.strip())

    first = -1
    count = 0
    i = 0
    while count < n:
        if i >= len(number.digits) and count == 0:
            break
        d = number.digit_at(i)
        if is_digit(d) and (d != "0" or count > 0):
            if first < 0:
                first = i
            count += 1
        i += 1
    if count == 0:
        # all zeros: nothing to round
        return number.render()

    kept, carried_to = round_digits(number, i)
    point = number.point
    if carried_to < 0:
        kept = "1" + kept
        point += 1
        i += 1
        lead_moved = True
    else:
        lead_moved = carried_to < first
    # The carry added a leading significant digit; shed one fractional digit
    # so exactly n remain.
    if lead_moved and i > point:
        kept = kept[:-1]
    if len(kept) < point:
        kept += "0" * (point - len(kept))
    return DecimalDigits(digits=kept, point=point).render()
