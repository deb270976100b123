"""IdentifierService — single-value operations: parse, repair, check digit."""

from __future__ import annotations

import logging
from typing import Any

from cusiptool.domain import (
    Identifier,
    IncorrectCheckDigit,
    InvalidCharacter,
    InvalidLength,
    Payload,
    parse,
    parse_payload,
    repair,
)
from cusiptool.domain.identifier import IDENTIFIER_LENGTH
from cusiptool.services.result import ServiceError, ServiceResult

logger = logging.getLogger(__name__)

_Failure = InvalidLength | InvalidCharacter | IncorrectCheckDigit


def _error_dict(error: _Failure) -> dict[str, Any]:
    detail = error.model_dump(mode="json", exclude={"kind", "payload"})
    return {"code": str(error.kind), "message": error.message, **detail}


def _failure(op: str, value: str, error: _Failure) -> ServiceResult:
    return ServiceResult(
        ok=False,
        op=op,
        error=ServiceError(
            code=str(error.kind),
            message=f"{value}: {error.message}",
            detail={"input": value, **_error_dict(error)},
        ),
    )


class IdentifierService:
    """Validate, repair, and compute check digits for individual values."""

    def parse_many(self, values: list[str]) -> ServiceResult:
        """Parse each value and report every outcome.

        Fails if any value is not a valid CUSIP.
        """
        items: list[dict[str, Any]] = []
        invalid: list[dict[str, Any]] = []

        for value in values:
            outcome = parse(value)
            if isinstance(outcome, Identifier):
                items.append(
                    {
                        "input": value,
                        "valid": True,
                        "id": str(outcome),
                        "issuer": outcome.issuer,
                        "issue": outcome.issue,
                        "check_digit": outcome.check_digit,
                    }
                )
                continue
            entry = {"input": value, "valid": False, "error": _error_dict(outcome)}
            if outcome.repairable:
                entry["suggestion"] = str(repair(outcome.payload))
            items.append(entry)
            invalid.append(entry)

        data = {
            "items": items,
            "count": len(items),
            "valid_count": len(items) - len(invalid),
            "invalid_count": len(invalid),
        }
        logger.debug("Parsed %d values, %d invalid", len(items), len(invalid))

        if not invalid:
            return ServiceResult(ok=True, op="parse", data=data)

        if len(invalid) == 1:
            entry = invalid[0]
            message = f"{entry['input']}: {entry['error']['message']}"
            code = entry["error"]["code"]
        else:
            message = f"{len(invalid)} of {len(items)} values are not valid CUSIPs"
            code = "INVALID_INPUT"
        return ServiceResult(
            ok=False,
            op="parse",
            data=data,
            error=ServiceError(code=code, message=message, detail={"invalid": invalid}),
        )

    def repair(self, value: str) -> ServiceResult:
        """Return the valid identifier for *value*.

        *value* is either an 8-character payload, or a 9-character
        identifier whose check digit may be wrong.  Anything with a length
        or character defect cannot be repaired.
        """
        if len(value) == IDENTIFIER_LENGTH:
            return self._repair_identifier(value)

        payload = parse_payload(value)
        if not isinstance(payload, Payload):
            return _failure("repair", value, payload)

        identifier = repair(payload)
        return ServiceResult(
            ok=True,
            op="repair",
            data={"input": value, "id": str(identifier), "changed": True},
        )

    def _repair_identifier(self, value: str) -> ServiceResult:
        outcome = parse(value)
        if isinstance(outcome, Identifier):
            return ServiceResult(
                ok=True,
                op="repair",
                data={"input": value, "id": str(outcome), "changed": False},
            )
        if isinstance(outcome, IncorrectCheckDigit):
            identifier = repair(outcome.payload)
            return ServiceResult(
                ok=True,
                op="repair",
                data={
                    "input": value,
                    "id": str(identifier),
                    "changed": True,
                    "was": outcome.was,
                    "expected": outcome.expected,
                },
            )
        return _failure("repair", value, outcome)

    def check_digit(self, value: str) -> ServiceResult:
        """Compute the check digit for an 8-character payload."""
        payload = parse_payload(value)
        if not isinstance(payload, Payload):
            return _failure("check_digit", value, payload)

        identifier = repair(payload)
        return ServiceResult(
            ok=True,
            op="check_digit",
            data={"payload": value, "check_digit": identifier.check_digit, "id": str(identifier)},
        )
