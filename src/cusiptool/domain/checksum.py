"""Check-digit computation (modulus 10, double-add-double).

Positions are counted 1-indexed within the full 9-character identifier.
Values at even positions are doubled, every value is folded into the sum of
its decimal digits, and the check digit brings the total up to a multiple
of ten.
"""

from __future__ import annotations

from cusiptool.domain.alphabet import value_of
from cusiptool.domain.errors import InvalidCharacter
from cusiptool.domain.payload import PAYLOAD_LENGTH


def fold(value: int) -> int:
    """Sum the decimal digits of a (possibly doubled) character value."""
    return value // 10 + value % 10


def compute_check_digit(payload: str) -> int | InvalidCharacter:
    """Compute the expected check digit, ``0-9``, for an 8-character *payload*.

    Returns InvalidCharacter for the first character outside the alphabet.
    Raises ValueError if *payload* is not 8 characters long; the validator
    never hands over anything else.
    """
    if len(payload) != PAYLOAD_LENGTH:
        msg = f"Payload must be {PAYLOAD_LENGTH} characters, got {len(payload)}"
        raise ValueError(msg)

    total = 0
    for position, character in enumerate(payload, start=1):
        value = value_of(character, position)
        if isinstance(value, InvalidCharacter):
            return value
        if position % 2 == 0:
            value *= 2
        total += fold(value)

    return (10 - total % 10) % 10
