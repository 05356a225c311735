"""
t9line.keypad
=============
Digit ↔ letter tables and the T9 encoder.

The tables are built once (``Keypad.from_groups``) and handed to every
component that needs them; nothing here is mutable after construction.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

# ─── Layouts ──────────────────────────────────────────────────────────────────

# Upside-down T9: the number pad starts with 7 8 9 at the top,
# unlike phone keypads which start with 1 2 3.
NUMPAD_LAYOUT: dict[str, str] = {
    "8": "abc",
    "9": "def",
    "4": "ghi",
    "5": "jkl",
    "6": "mno",
    "1": "pqrs",
    "2": "tuv",
    "3": "wxyz",
    "7": "",        # reserved, no letter group
}

PHONE_LAYOUT: dict[str, str] = {
    "1": "",
    "2": "abc",
    "3": "def",
    "4": "ghi",
    "5": "jkl",
    "6": "mno",
    "7": "pqrs",
    "8": "tuv",
    "9": "wxyz",
}

LAYOUTS: dict[str, dict[str, str]] = {
    "numpad": NUMPAD_LAYOUT,
    "phone": PHONE_LAYOUT,
}

DIGITS = "123456789"
ALPHABET = "abcdefghijklmnopqrstuvwxyz"


class ConfigurationError(ValueError):
    """Broken keypad/keymap tables or a corpus word that cannot be encoded."""


# ─── Keypad ───────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class Keypad:
    """
    Immutable digit/letter tables.

    ``digit_letters`` maps each of the nine digits to its letter group,
    ``letter_digit`` is the inverse and covers the whole alphabet.
    """

    digit_letters: Mapping[str, str]
    letter_digit: Mapping[str, str]

    @classmethod
    def from_groups(cls, groups: Mapping[str, str]) -> "Keypad":
        if sorted(groups) != list(DIGITS):
            raise ConfigurationError(
                f"keypad must define exactly the digits {DIGITS}, got {''.join(sorted(groups))}"
            )
        empty = [d for d, letters in groups.items() if not letters]
        if len(empty) != 1:
            raise ConfigurationError(
                f"keypad must reserve exactly one digit without letters, got {empty}"
            )

        letter_digit: dict[str, str] = {}
        for digit, letters in groups.items():
            for ch in letters:
                if ch in letter_digit:
                    raise ConfigurationError(
                        f"letter {ch!r} assigned to both {letter_digit[ch]} and {digit}"
                    )
                letter_digit[ch] = digit

        missing = set(ALPHABET) - set(letter_digit)
        extra = set(letter_digit) - set(ALPHABET)
        if missing or extra:
            raise ConfigurationError(
                f"keypad letters must be exactly a-z "
                f"(missing {''.join(sorted(missing)) or '-'}, "
                f"unexpected {''.join(sorted(extra)) or '-'})"
            )

        return cls(
            digit_letters=MappingProxyType(dict(groups)),
            letter_digit=MappingProxyType(letter_digit),
        )

    @classmethod
    def for_layout(cls, name: str) -> "Keypad":
        try:
            return cls.from_groups(LAYOUTS[name])
        except KeyError:
            raise ConfigurationError(
                f"unknown keypad layout {name!r} (choose from {', '.join(LAYOUTS)})"
            ) from None

    # ── Encoding ──────────────────────────────────────────────────────────────

    def encode(self, word: str) -> str:
        """Convert a word to its digit string. Keypad digits pass through."""
        result: list[str] = []
        for ch in word.lower():
            if ch in DIGITS:
                result.append(ch)
                continue
            digit = self.letter_digit.get(ch)
            if digit is None:
                raise ConfigurationError(f"cannot encode {word!r}: no key for {ch!r}")
            result.append(digit)
        return "".join(result)

    def is_word_char(self, ch: str) -> bool:
        return ch in DIGITS or ch.lower() in self.letter_digit

    @property
    def reserved_digit(self) -> str:
        return next(d for d, letters in self.digit_letters.items() if not letters)


DEFAULT_KEYPAD = Keypad.for_layout("numpad")


def encode(word: str, keypad: Keypad = DEFAULT_KEYPAD) -> str:
    return keypad.encode(word)
