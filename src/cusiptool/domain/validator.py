"""Validator — the sole entry point for untrusted input.

Checks run in a fixed order and each failure is terminal:

1. length must be exactly 9 (InvalidLength);
2. every character must be in the alphabet, scanned left to right
   (InvalidCharacter at the first offender);
3. the check digit position must hold a decimal digit (InvalidCharacter
   at position 9);
4. the check digit must equal the computed one (IncorrectCheckDigit).

Structural errors are always reported before any arithmetic is attempted.
"""

from __future__ import annotations

from cusiptool.domain.alphabet import first_invalid
from cusiptool.domain.checksum import compute_check_digit
from cusiptool.domain.errors import (
    CusipError,
    IncorrectCheckDigit,
    InvalidCharacter,
    InvalidLength,
)
from cusiptool.domain.identifier import IDENTIFIER_LENGTH, Identifier
from cusiptool.domain.payload import PAYLOAD_LENGTH, Payload

_DECIMAL_DIGITS = frozenset("0123456789")


def parse(text: str) -> Identifier | InvalidLength | InvalidCharacter | IncorrectCheckDigit:
    """Parse *text* into an Identifier, or return the reason it is not one."""
    if len(text) != IDENTIFIER_LENGTH:
        return InvalidLength(actual=len(text))

    bad = first_invalid(text)
    if bad is not None:
        return bad

    payload = text[:PAYLOAD_LENGTH]
    expected = compute_check_digit(payload)
    assert isinstance(expected, int)

    check = text[PAYLOAD_LENGTH]
    if check not in _DECIMAL_DIGITS:
        return InvalidCharacter(position=IDENTIFIER_LENGTH, character=check)

    was = int(check)
    if was != expected:
        return IncorrectCheckDigit(was=was, expected=expected, payload=Payload._trusted(payload))

    return Identifier._trusted(text)


def is_valid(text: str) -> bool:
    """Return True if *text* is a valid CUSIP."""
    return isinstance(parse(text), Identifier)


def parse_strict(text: str) -> Identifier:
    """Parse *text*, raising CusipError instead of returning a failure."""
    result = parse(text)
    if not isinstance(result, Identifier):
        raise CusipError(result)
    return result


def parse_payload(text: str) -> Payload | InvalidLength | InvalidCharacter:
    """Check that *text* is 8 alphabet characters and wrap it as a Payload."""
    if len(text) != PAYLOAD_LENGTH:
        return InvalidLength(actual=len(text), expected=PAYLOAD_LENGTH)
    bad = first_invalid(text)
    if bad is not None:
        return bad
    return Payload._trusted(text)
