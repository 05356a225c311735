"""
t9line.editor
=============
The line-editing state machine.

:func:`step` is a pure transition: it takes an :class:`EditorState` and an
action and returns the next state, plus a redraw request when anything
changed.  :class:`EditorSession` is the driver that owns the current state
and feeds it key events one at a time.

Usage::

    session = EditorSession(keymap, selector, renderer)
    session.feed(KeyEvent(char="4"))
    session.feed(KeyEvent(char="6"))
    session.text          # 'in'
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import NamedTuple, Protocol

from .dictionary import Candidate
from .keymap import Action, KeyEvent, Keymap
from .selector import CandidateSelector


@dataclass(frozen=True)
class EditorState:
    committed: str = ""
    digits: str = ""
    candidates: tuple[Candidate, ...] | None = None
    selected: int = 0

    @property
    def current_word(self) -> str:
        if self.candidates is None:
            return ""
        return self.candidates[self.selected].word

    @property
    def has_input(self) -> bool:
        return bool(self.digits)


class Redraw(NamedTuple):
    committed: str
    highlighted: str
    trailing: str = ""


class Transition(NamedTuple):
    state: EditorState
    redraw: Redraw | None = None
    stop: bool = False


class Renderer(Protocol):
    def draw(self, committed: str, highlighted: str, trailing: str) -> None: ...


# ─── Transitions ──────────────────────────────────────────────────────────────

def _compose(state: EditorState, selector: CandidateSelector, digits: str,
             preferred: str | None = None, committed: str | None = None) -> EditorState:
    if committed is None:
        committed = state.committed
    if not digits:
        return EditorState(committed)
    ranking = selector.rank(digits, preferred)
    return EditorState(committed, digits, ranking.candidates, ranking.selected)


def _cycle(state: EditorState, offset: int) -> EditorState:
    if state.candidates is None:
        return state
    return replace(state, selected=(state.selected + offset) % len(state.candidates))


def _confirm(state: EditorState, char: str) -> EditorState:
    return EditorState(state.committed + state.current_word + char)


def _trailing_run(text: str, selector: CandidateSelector) -> str:
    keypad = selector.keypad
    start = len(text)
    while start > 0 and keypad.is_word_char(text[start - 1]):
        start -= 1
    return text[start:]


def _backspace(state: EditorState, selector: CandidateSelector) -> EditorState:
    if state.digits:
        return _compose(state, selector, state.digits[:-1])
    if not state.committed:
        return state

    # Removing the separator after a confirmed word reopens that word.
    committed = state.committed[:-1]
    run = _trailing_run(committed, selector)
    if not run:
        return EditorState(committed)
    return _compose(
        state,
        selector,
        selector.keypad.encode(run),
        preferred=run,
        committed=committed[: -len(run)],
    )


def step(state: EditorState, action: Action | None, selector: CandidateSelector) -> Transition:
    """Apply one action. Unrecognized keys (``None``) change nothing."""
    if action is None:
        return Transition(state)

    kind = action.kind
    if kind == "exit":
        return Transition(state, stop=True)
    if kind == "digit":
        new = _compose(state, selector, state.digits + action.value)
    elif kind == "next":
        new = _cycle(state, 1)
    elif kind == "prev":
        new = _cycle(state, -1)
    elif kind == "confirm":
        new = _confirm(state, action.value)
    elif kind == "backspace":
        new = _backspace(state, selector)
    else:
        raise ValueError(f"unknown action {kind!r}")

    if new == state:
        return Transition(state)
    return Transition(new, Redraw(new.committed, new.current_word, ""))


# ─── Driver ───────────────────────────────────────────────────────────────────

class EditorSession:
    """
    Holds the one mutable :class:`EditorState` of an editing session and
    applies events strictly one after another.
    """

    def __init__(
        self,
        keymap: Keymap,
        selector: CandidateSelector,
        renderer: Renderer | None = None,
        state: EditorState | None = None,
    ) -> None:
        self.keymap = keymap
        self.selector = selector
        self.renderer = renderer
        self.state = state or EditorState()
        self.closed = False

    def feed(self, event: KeyEvent) -> Redraw | None:
        """Process one event. Returns the redraw it produced, if any."""
        if self.closed:
            return None
        result = step(self.state, self.keymap.classify(event), self.selector)
        self.state = result.state
        if result.stop:
            self.closed = True
            return None
        if result.redraw is not None and self.renderer is not None:
            self.renderer.draw(*result.redraw)
        return result.redraw

    @property
    def text(self) -> str:
        return self.state.committed + self.state.current_word
