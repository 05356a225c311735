import pytest

from t9line.keymap import (
    BACKSPACE,
    EXIT,
    NEXT,
    PREV,
    Action,
    KeyEvent,
    Keymap,
    KeySpec,
    modifier_for,
)
from t9line.keypad import ConfigurationError


def press(char=None, name=None, *modifiers):
    return KeyEvent(char, name, frozenset(modifiers))


@pytest.mark.parametrize(
    "spec, expected",
    [
        ("+", KeySpec("+")),
        ("j", KeySpec("j")),
        ("Backspace", KeySpec("backspace")),
        ("ctrl+c", KeySpec("c", frozenset({"ctrl"}))),
        ("Ctrl+Alt+Delete", KeySpec("delete", frozenset({"ctrl", "alt"}))),
        ("ctrl++", KeySpec("+", frozenset({"ctrl"}))),
    ],
)
def test_keyspec_parse(spec, expected):
    assert KeySpec.parse(spec) == expected


def test_digits_and_fallback_aliases(keymap):
    assert keymap.classify(press("4")) == Action("digit", "4")
    assert keymap.classify(press("7")) == Action("digit", "7")
    assert keymap.classify(press("u")) == Action("digit", "4")
    assert keymap.classify(press("o")) == Action("digit", "6")
    assert keymap.classify(press("j")) == Action("digit", "1")
    assert keymap.classify(press("l")) == Action("digit", "3")


def test_navigation_keys(keymap):
    assert keymap.classify(press(None, "down")) == NEXT
    assert keymap.classify(press("+", None, "shift")) == NEXT
    assert keymap.classify(press(None, "up")) == PREV
    assert keymap.classify(press("-")) == PREV


def test_backspace_keys(keymap):
    assert keymap.classify(press(None, "backspace")) == BACKSPACE
    assert keymap.classify(press("*", None, "shift")) == BACKSPACE


def test_exit_keys(keymap):
    assert keymap.classify(press(None, "esc")) == EXIT
    assert keymap.classify(press("c", "c", "ctrl")) == EXIT


def test_passthrough(keymap):
    assert keymap.classify(press(" ", "space")) == Action("confirm", " ")
    assert keymap.classify(press(".")) == Action("confirm", ".")
    assert keymap.classify(press("?", None, "shift")) == Action("confirm", "?")


def test_unrecognized(keymap):
    assert keymap.classify(press("x")) is None
    assert keymap.classify(press("0")) is None
    assert keymap.classify(press(None, "f5")) is None
    assert keymap.classify(press()) is None


def test_shortcuts_do_not_trigger_plain_keys(keymap):
    assert keymap.classify(press("4", None, "ctrl")) is None
    assert keymap.classify(press(".", None, "alt")) is None
    assert keymap.classify(press("c", "c")) is None


def test_overlapping_keys_rejected(config):
    config["next_keys"] = ["down", "."]
    with pytest.raises(ConfigurationError, match="'.'"):
        Keymap.from_config(config)


def test_alias_shared_between_digits_rejected(config):
    config["digit_keys"]["2"] = ["2", "j"]
    with pytest.raises(ConfigurationError):
        Keymap.from_config(config)


def test_non_keypad_digit_rejected(config):
    config["digit_keys"]["0"] = ["0"]
    with pytest.raises(ConfigurationError, match="non-keypad"):
        Keymap.from_config(config)


def test_passthrough_must_be_single_characters(config):
    config["passthrough"] = [" ", "..."]
    with pytest.raises(ConfigurationError):
        Keymap.from_config(config)


@pytest.mark.parametrize(
    "name, expected",
    [
        ("shift", "shift"),
        ("shift_r", "shift"),
        ("ctrl_l", "ctrl"),
        ("alt", "alt"),
        ("alt_r", "alt"),
        ("cmd_l", "cmd"),
        ("alt_gr", None),
        ("space", None),
        (None, None),
    ],
)
def test_modifier_for(name, expected):
    assert modifier_for(name) == expected


def test_altgr_characters_still_confirm(keymap):
    held = frozenset(filter(None, [modifier_for("alt_gr")]))
    assert keymap.classify(KeyEvent("@", None, held)) == Action("confirm", "@")
    assert keymap.classify(KeyEvent("#", None, held)) == Action("confirm", "#")
