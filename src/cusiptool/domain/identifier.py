"""Identifier — a validated 9-character CUSIP.

INVARIANT: An Identifier is never constructed partially.  Direct
construction re-checks length, alphabet and check digit; the validator and
repairer, which have already established those facts, use ``_trusted``.
"""

from __future__ import annotations

from pydantic import BaseModel, model_validator

from cusiptool.domain.alphabet import first_invalid
from cusiptool.domain.checksum import compute_check_digit
from cusiptool.domain.payload import ISSUER_LENGTH, PAYLOAD_LENGTH, Payload

IDENTIFIER_LENGTH = PAYLOAD_LENGTH + 1


class Identifier(BaseModel):
    """A validated 9-character CUSIP.

    ``str(identifier)`` renders exactly the characters that were parsed;
    there is no normalization.
    """

    model_config = {"frozen": True}

    value: str

    @model_validator(mode="after")
    def _check_invariants(self) -> Identifier:
        if len(self.value) != IDENTIFIER_LENGTH:
            msg = f"identifier must be {IDENTIFIER_LENGTH} characters, got {len(self.value)}"
            raise ValueError(msg)
        bad = first_invalid(self.value)
        if bad is not None:
            raise ValueError(bad.message)
        check = self.value[PAYLOAD_LENGTH]
        expected = compute_check_digit(self.value[:PAYLOAD_LENGTH])
        if check not in "0123456789" or int(check) != expected:
            msg = f"check digit {check!r} does not match expected {expected}"
            raise ValueError(msg)
        return self

    @classmethod
    def _trusted(cls, value: str) -> Identifier:
        return cls.model_construct(value=value)

    @property
    def payload(self) -> Payload:
        return Payload._trusted(self.value[:PAYLOAD_LENGTH])

    @property
    def issuer(self) -> str:
        return self.value[:ISSUER_LENGTH]

    @property
    def issue(self) -> str:
        return self.value[ISSUER_LENGTH:PAYLOAD_LENGTH]

    @property
    def check_digit(self) -> int:
        return int(self.value[PAYLOAD_LENGTH])

    def __str__(self) -> str:
        return self.value
