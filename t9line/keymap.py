"""
t9line.keymap
=============
Key events and their mapping onto line-editor actions.

Events arrive as ``(char, name, modifiers)`` from whatever input adapter is
in use; which physical keys mean what is entirely configuration.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Mapping, NamedTuple

from .keypad import DIGITS, ConfigurationError

# Modifiers that turn a key into a shortcut. Shift only changes the character.
COMMAND_MODIFIERS = frozenset({"ctrl", "alt", "cmd"})

# Key name → modifier flag. AltGr is not a modifier here: it types characters.
MODIFIER_KEYS: dict[str, str] = {
    f"{mod}{side}": mod
    for mod in ("shift", "ctrl", "alt", "cmd")
    for side in ("", "_l", "_r")
}


def modifier_for(name: str | None) -> str | None:
    """The modifier flag a held key contributes, or ``None``."""
    if name is None:
        return None
    return MODIFIER_KEYS.get(name)


@dataclass(frozen=True)
class KeyEvent:
    char: str | None = None
    name: str | None = None
    modifiers: frozenset[str] = field(default_factory=frozenset)


class Action(NamedTuple):
    """``kind`` is one of digit, next, prev, confirm, backspace, exit."""

    kind: str
    value: str = ""


NEXT = Action("next")
PREV = Action("prev")
BACKSPACE = Action("backspace")
EXIT = Action("exit")


# ─── Key specs ────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class KeySpec:
    """
    One configured key: a single character (``"+"``), a key name
    (``"backspace"``) or a combination (``"ctrl+c"``).
    """

    key: str
    modifiers: frozenset[str] = frozenset()

    @classmethod
    def parse(cls, spec: str) -> "KeySpec":
        if len(spec) > 1 and "+" in spec[:-1]:
            *mods, key = spec.split("+")
            if not key:            # "ctrl++"
                key = "+"
                mods = mods[:-1]
            return cls(key.lower() if len(key) > 1 else key, frozenset(m.lower() for m in mods))
        return cls(spec if len(spec) == 1 else spec.lower())

    def matches(self, event: KeyEvent) -> bool:
        if COMMAND_MODIFIERS & event.modifiers != self.modifiers & COMMAND_MODIFIERS:
            return False
        if not self.modifiers <= event.modifiers:
            return False
        return self.key in (event.char, event.name)


def _parse_specs(specs: Iterable[str]) -> tuple[KeySpec, ...]:
    return tuple(KeySpec.parse(s) for s in specs)


# ─── Keymap ───────────────────────────────────────────────────────────────────

class Keymap:
    """
    Classifies key events.

    Checked in order: exit, backspace, next, prev, digit, passthrough.
    Anything else classifies as ``None`` and is ignored by the editor.
    """

    def __init__(
        self,
        digit_keys: Mapping[str, Iterable[str]],
        passthrough: Iterable[str],
        next_keys: Iterable[str] = ("down", "+"),
        prev_keys: Iterable[str] = ("up", "-"),
        backspace_keys: Iterable[str] = ("backspace", "*"),
        exit_keys: Iterable[str] = ("esc", "ctrl+c"),
    ) -> None:
        unknown = set(digit_keys) - set(DIGITS)
        if unknown:
            raise ConfigurationError(f"digit_keys has non-keypad digits: {sorted(unknown)}")

        self.exit_keys = _parse_specs(exit_keys)
        self.backspace_keys = _parse_specs(backspace_keys)
        self.next_keys = _parse_specs(next_keys)
        self.prev_keys = _parse_specs(prev_keys)
        self.digit_keys: dict[KeySpec, str] = {}
        for digit, aliases in digit_keys.items():
            for alias in aliases:
                spec = KeySpec.parse(alias)
                other = self.digit_keys.setdefault(spec, digit)
                if other != digit:
                    raise ConfigurationError(f"key {alias!r} types both {other} and {digit}")

        passthrough = tuple(passthrough)
        for ch in passthrough:
            if len(ch) != 1:
                raise ConfigurationError(f"passthrough entries must be single characters: {ch!r}")
        self.passthrough = frozenset(passthrough)

        self._check_overlaps()

    @classmethod
    def from_config(cls, config: Mapping) -> "Keymap":
        return cls(
            digit_keys=config["digit_keys"],
            passthrough=config["passthrough"],
            next_keys=config["next_keys"],
            prev_keys=config["prev_keys"],
            backspace_keys=config["backspace_keys"],
            exit_keys=config["exit_keys"],
        )

    def _check_overlaps(self) -> None:
        seen: dict[KeySpec, str] = {}
        groups = {
            "exit_keys": self.exit_keys,
            "backspace_keys": self.backspace_keys,
            "next_keys": self.next_keys,
            "prev_keys": self.prev_keys,
            "digit_keys": tuple(self.digit_keys),
            "passthrough": tuple(KeySpec(ch) for ch in self.passthrough),
        }
        for group, specs in groups.items():
            for spec in specs:
                other = seen.setdefault(spec, group)
                if other != group:
                    raise ConfigurationError(f"key {spec.key!r} is in both {other} and {group}")

    def classify(self, event: KeyEvent) -> Action | None:
        for specs, action in (
            (self.exit_keys, EXIT),
            (self.backspace_keys, BACKSPACE),
            (self.next_keys, NEXT),
            (self.prev_keys, PREV),
        ):
            if any(spec.matches(event) for spec in specs):
                return action

        for spec, digit in self.digit_keys.items():
            if spec.matches(event):
                return Action("digit", digit)

        if (
            event.char is not None
            and event.char in self.passthrough
            and not COMMAND_MODIFIERS & event.modifiers
        ):
            return Action("confirm", event.char)
        return None
