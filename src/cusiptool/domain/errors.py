"""ValidationError taxonomy — why a candidate string is not a CUSIP.

The three kinds are mutually exclusive and returned (never raised) by the
validator.  Each carries a stable machine ``code`` so callers can match on
it, and a human ``message`` for diagnostics.

INVARIANT: Only IncorrectCheckDigit is repairable.  Length and character
defects have no unique correction.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import StrEnum
from typing import Annotated, Literal

from pydantic import BaseModel, Field

from cusiptool.domain.payload import Payload


class ErrorCode(StrEnum):
    """Stable identifiers for each validation failure kind."""

    INVALID_LENGTH = "INVALID_LENGTH"
    INVALID_CHARACTER = "INVALID_CHARACTER"
    INCORRECT_CHECK_DIGIT = "INCORRECT_CHECK_DIGIT"


class _BaseError(BaseModel, ABC):
    model_config = {"frozen": True}

    @property
    def repairable(self) -> bool:
        return False

    @property
    @abstractmethod
    def message(self) -> str: ...

    def __str__(self) -> str:
        return self.message


class InvalidLength(_BaseError):
    """Input is not the expected number of characters."""

    kind: Literal[ErrorCode.INVALID_LENGTH] = ErrorCode.INVALID_LENGTH
    actual: int
    expected: int = 9

    @property
    def message(self) -> str:
        return f"invalid length {self.actual} when expecting {self.expected}"


class InvalidCharacter(_BaseError):
    """A character outside ``0-9 A-Z * @ #``, or a non-digit check digit.

    Attributes:
        position: 1-indexed position of the offending character.
        character: The offending character itself.
    """

    kind: Literal[ErrorCode.INVALID_CHARACTER] = ErrorCode.INVALID_CHARACTER
    position: int = Field(ge=1)
    character: str = ""

    @property
    def message(self) -> str:
        return f"invalid character {self.character!r} at position {self.position}"


class IncorrectCheckDigit(_BaseError):
    """Structurally valid input whose 9th digit disagrees with the checksum.

    ``payload`` is the alphabet-validated first 8 characters, ready to be
    handed to :func:`cusiptool.domain.repair.repair`.
    """

    kind: Literal[ErrorCode.INCORRECT_CHECK_DIGIT] = ErrorCode.INCORRECT_CHECK_DIGIT
    was: int = Field(ge=0, le=9)
    expected: int = Field(ge=0, le=9)
    payload: Payload

    @property
    def repairable(self) -> bool:
        return True

    @property
    def message(self) -> str:
        return f"incorrect check digit {self.was} when expecting {self.expected}"


ValidationError = Annotated[
    InvalidLength | InvalidCharacter | IncorrectCheckDigit,
    Field(discriminator="kind"),
]
"""Union of every classified validation failure."""


class CusipError(ValueError):
    """Raised by the strict helpers when a ValidationError must not be ignored.

    Expected malformed input is returned as a ValidationError value by
    ``parse``; this exception exists for callers that want a hard failure
    (``parse_strict``, repairing an unvetted string).
    """

    def __init__(self, error: InvalidLength | InvalidCharacter | IncorrectCheckDigit) -> None:
        super().__init__(error.message)
        self.error = error

    @property
    def code(self) -> ErrorCode:
        return self.error.kind

