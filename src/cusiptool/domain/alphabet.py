"""Character-to-value mapping for the CUSIP alphabet.

The alphabet has 39 characters, listed here in value order:
digits ``0-9`` (0-9), uppercase ``A-Z`` (10-35), then ``*`` (36),
``@`` (37) and ``#`` (38).

INVARIANT: The mapping is case-sensitive.  Lowercase letters are rejected,
never folded to uppercase.
"""

from __future__ import annotations

import string

from cusiptool.domain.errors import InvalidCharacter

ALPHABET = string.digits + string.ascii_uppercase + "*@#"

MAX_VALUE = len(ALPHABET) - 1

_VALUES: dict[str, int] = {char: value for value, char in enumerate(ALPHABET)}


def is_allowed(character: str) -> bool:
    """Check whether *character* is a single character from the alphabet."""
    return character in _VALUES


def value_of(character: str, position: int) -> int | InvalidCharacter:
    """Return the numeric value of *character*, in ``[0, 38]``.

    *position* is the 1-indexed position of the character within the
    identifier; it is only used to classify a failure.
    """
    value = _VALUES.get(character)
    if value is None:
        return InvalidCharacter(position=position, character=character)
    return value


def first_invalid(text: str) -> InvalidCharacter | None:
    """Scan every character of *text* and return the first one not in the alphabet.

    Positions are reported 1-indexed.
    """
    for position, character in enumerate(text, start=1):
        if character not in _VALUES:
            return InvalidCharacter(position=position, character=character)
    return None
