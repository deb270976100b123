"""Tests for the CUSIP alphabet value mapping."""

import pytest

from cusiptool.domain.alphabet import ALPHABET, MAX_VALUE, first_invalid, is_allowed, value_of
from cusiptool.domain.errors import InvalidCharacter


class TestValueOf:
    @pytest.mark.parametrize(
        "char,expected",
        [
            ("0", 0),
            ("9", 9),
            ("A", 10),
            ("R", 27),
            ("Z", 35),
            ("*", 36),
            ("@", 37),
            ("#", 38),
        ],
    )
    def test_known_values(self, char: str, expected: int) -> None:
        assert value_of(char, 1) == expected

    def test_every_alphabet_character_maps_to_its_index(self) -> None:
        for index, char in enumerate(ALPHABET):
            assert value_of(char, 1) == index

    @pytest.mark.parametrize("char", ["a", "z", " ", "!", "-", "$", "é", "\t", ""])
    def test_rejects_characters_outside_alphabet(self, char: str) -> None:
        result = value_of(char, 4)
        assert isinstance(result, InvalidCharacter)
        assert result.position == 4
        assert result.character == char

    def test_multi_character_string_rejected(self) -> None:
        assert isinstance(value_of("AB", 1), InvalidCharacter)

    def test_case_sensitive(self) -> None:
        """Lowercase letters are rejected, not folded."""
        assert value_of("A", 1) == 10
        assert isinstance(value_of("a", 1), InvalidCharacter)


class TestAlphabet:
    def test_size(self) -> None:
        assert len(ALPHABET) == 39
        assert MAX_VALUE == 38

    def test_no_duplicates(self) -> None:
        assert len(set(ALPHABET)) == len(ALPHABET)

    def test_is_allowed(self) -> None:
        assert is_allowed("#")
        assert not is_allowed("b")
        assert not is_allowed("")


class TestFirstInvalid:
    def test_clean_text(self) -> None:
        assert first_invalid("037833100") is None

    def test_reports_first_offender(self) -> None:
        result = first_invalid("03x83y100")
        assert result is not None
        assert result.position == 3
        assert result.character == "x"