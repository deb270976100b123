"""Repairer — build a valid identifier from an alphabet-checked payload."""

from __future__ import annotations

from cusiptool.domain.checksum import compute_check_digit
from cusiptool.domain.errors import (
    CusipError,
    IncorrectCheckDigit,
    InvalidCharacter,
    InvalidLength,
)
from cusiptool.domain.identifier import Identifier
from cusiptool.domain.payload import ISSUE_LENGTH, ISSUER_LENGTH, Payload
from cusiptool.domain.validator import parse_payload


def repair(payload: Payload | str) -> Identifier:
    """Append the computed check digit to *payload*.

    A Payload value has already passed the alphabet scan, so this cannot
    fail.  A plain string is scanned first; one that fails the scan is a
    contract violation and raises CusipError.
    """
    if not isinstance(payload, Payload):
        checked = parse_payload(payload)
        if not isinstance(checked, Payload):
            raise CusipError(checked)
        payload = checked

    digit = compute_check_digit(payload.value)
    if isinstance(digit, InvalidCharacter):
        raise CusipError(digit)
    return Identifier._trusted(f"{payload.value}{digit}")


def fix(error: IncorrectCheckDigit) -> Identifier:
    """Repair the identifier behind an IncorrectCheckDigit outcome."""
    return repair(error.payload)


def build_from_parts(
    issuer: str, issue: str
) -> Identifier | InvalidLength | InvalidCharacter:
    """Build an identifier from a 6-character issuer and a 2-character issue.

    A field of the wrong width is reported as InvalidLength against that
    field. Bad characters are reported at their position in the payload.
    """
    if len(issuer) != ISSUER_LENGTH:
        return InvalidLength(actual=len(issuer), expected=ISSUER_LENGTH)
    if len(issue) != ISSUE_LENGTH:
        return InvalidLength(actual=len(issue), expected=ISSUE_LENGTH)
    checked = parse_payload(issuer + issue)
    if not isinstance(checked, Payload):
        return checked
    return repair(checked)
