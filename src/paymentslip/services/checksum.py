"""Recursive modulo-10 check digit used on Swiss reference slips.

Not the Luhn algorithm: each digit is added to a carry that is pushed
through a fixed permutation table, and the check digit is whatever brings
the final carry back to zero.
"""

from __future__ import annotations

import re

from paymentslip.core.exceptions import InvalidDigitsError

MODULO10_TABLE = (0, 9, 4, 6, 8, 2, 7, 1, 3, 5)

_ASCII_DIGITS = re.compile(r"[0-9]*")


def modulo10(digits: str) -> int:
    """Return the check digit (0-9) for a string of ASCII digits.

    Raises:
        InvalidDigitsError: If ``digits`` contains anything but 0-9.
    """
    if not _ASCII_DIGITS.fullmatch(digits):
        raise InvalidDigitsError(digits)

    carry = 0
    for char in digits:
        carry = MODULO10_TABLE[(carry + int(char)) % 10]
    return (10 - carry) % 10


def append_check_digit(digits: str) -> str:
    """Return ``digits`` followed by its check digit."""
    return f"{digits}{modulo10(digits)}"


def has_valid_check_digit(digits: str) -> bool:
    """True if the last digit of ``digits`` is the check digit of the rest."""
    # Feeding the check digit back in always lands the carry on zero.
    return bool(digits) and modulo10(digits) == 0
