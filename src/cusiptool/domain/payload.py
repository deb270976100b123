"""Payload: the first 8 characters of a CUSIP.

Imports nothing else from the domain at module level; the error models
depend on it.
"""

from __future__ import annotations

from pydantic import BaseModel, model_validator

PAYLOAD_LENGTH = 8
ISSUER_LENGTH = 6
ISSUE_LENGTH = 2


class Payload(BaseModel):
    """The first 8 characters of a CUSIP, already checked against the alphabet.

    Composed of a 6-character issuer field and a 2-character issue field.
    The meaning of either field is not interpreted here.  Direct
    construction re-runs the alphabet scan; the validator uses
    ``_trusted`` once it has done so itself.
    """

    model_config = {"frozen": True}

    value: str

    @model_validator(mode="after")
    def _check_alphabet(self) -> Payload:
        from cusiptool.domain.alphabet import first_invalid

        if len(self.value) != PAYLOAD_LENGTH:
            msg = f"payload must be {PAYLOAD_LENGTH} characters, got {len(self.value)}"
            raise ValueError(msg)
        bad = first_invalid(self.value)
        if bad is not None:
            raise ValueError(bad.message)
        return self

    @classmethod
    def _trusted(cls, value: str) -> Payload:
        return cls.model_construct(value=value)

    @property
    def issuer(self) -> str:
        return self.value[:ISSUER_LENGTH]

    @property
    def issue(self) -> str:
        return self.value[ISSUER_LENGTH:PAYLOAD_LENGTH]

    def __str__(self) -> str:
        return self.value
