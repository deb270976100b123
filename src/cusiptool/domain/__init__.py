"""Domain layer — the CUSIP grammar and check-digit algorithm.

This layer depends only on stdlib and pydantic.
It must never import from services, commands, output, or config.
Every function here is pure: no logging, no I/O, no process-wide state.
"""

from cusiptool.domain.alphabet import ALPHABET, is_allowed, value_of
from cusiptool.domain.checksum import compute_check_digit
from cusiptool.domain.errors import (
    CusipError,
    ErrorCode,
    IncorrectCheckDigit,
    InvalidCharacter,
    InvalidLength,
    ValidationError,
)
from cusiptool.domain.identifier import Identifier
from cusiptool.domain.payload import Payload
from cusiptool.domain.repair import build_from_parts, fix, repair
from cusiptool.domain.validator import is_valid, parse, parse_payload, parse_strict

__all__ = [
    "ALPHABET",
    "CusipError",
    "ErrorCode",
    "Identifier",
    "IncorrectCheckDigit",
    "InvalidCharacter",
    "InvalidLength",
    "Payload",
    "ValidationError",
    "build_from_parts",
    "compute_check_digit",
    "fix",
    "is_allowed",
    "is_valid",
    "parse",
    "parse_payload",
    "parse_strict",
    "repair",
    "value_of",
]
