"""Tests for repair(), fix() and build_from_parts()."""

import pytest

from cusiptool.domain import (
    CusipError,
    ErrorCode,
    Identifier,
    IncorrectCheckDigit,
    InvalidCharacter,
    InvalidLength,
    Payload,
    build_from_parts,
    fix,
    parse,
    repair,
)

PAYLOADS = ["03783310", "17275R10", "38259P50", "ABC12*@#", "########", "ZZZZZZZZ", "**@@##00"]


class TestRepair:
    def test_scenario(self) -> None:
        assert str(repair("03783310")) == "037833100"

    def test_accepts_payload_value(self) -> None:
        assert str(repair(Payload(value="59491810"))) == "594918104"

    @pytest.mark.parametrize("payload", PAYLOADS)
    def test_repaired_identifier_parses(self, payload: str) -> None:
        """A repaired identifier is always itself valid."""
        repaired = repair(payload)
        assert isinstance(parse(str(repaired)), Identifier)
        assert str(repaired).startswith(payload)

    def test_returns_new_value(self) -> None:
        first = repair("03783310")
        second = repair("03783310")
        assert first == second
        assert first is not second

    def test_unvetted_string_with_bad_character(self) -> None:
        with pytest.raises(CusipError) as excinfo:
            repair("0378331a")
        assert excinfo.value.code == ErrorCode.INVALID_CHARACTER
        assert isinstance(excinfo.value.error, InvalidCharacter)
        assert excinfo.value.error.position == 8

    def test_unvetted_string_with_bad_length(self) -> None:
        with pytest.raises(CusipError) as excinfo:
            repair("037833100")
        assert excinfo.value.code == ErrorCode.INVALID_LENGTH


class TestFix:
    def test_fixes_incorrect_check_digit(self) -> None:
        outcome = parse("037833108")
        assert isinstance(outcome, IncorrectCheckDigit)
        assert str(fix(outcome)) == "037833100"


class TestBuildFromParts:
    def test_builds(self) -> None:
        assert str(build_from_parts("037833", "10")) == "037833100"

    def test_issuer_width(self) -> None:
        assert build_from_parts("03783", "10") == InvalidLength(actual=5, expected=6)

    def test_issue_width(self) -> None:
        assert build_from_parts("037833", "100") == InvalidLength(actual=3, expected=2)

    def test_bad_character_position(self) -> None:
        result = build_from_parts("037833", "1o")
        assert isinstance(result, InvalidCharacter)
        assert result.position == 8
