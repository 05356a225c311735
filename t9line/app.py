"""
t9line.app
==========
Main application class: wires together the keyboard listener,
editor session, and terminal renderer.
"""

from __future__ import annotations

import queue
import sys

try:
    from pynput import keyboard
    from pynput.keyboard import Key, KeyCode
except ImportError as exc:
    raise ImportError(
        "pynput is required.\n"
        "Install it with:  pip install pynput\n"
        "Or, from the repo:  pip install -e ."
    ) from exc

from .dictionary import DictionaryIndex
from .editor import EditorSession
from .keymap import KeyEvent, Keymap, modifier_for
from .keypad import Keypad
from .render import TerminalRenderer
from .selector import CandidateSelector

# Named keys that also carry a character
_NAMED_CHARS: dict[str, str] = {
    "space": " ",
}


def _modifier_of(key: Key | KeyCode) -> str | None:
    if isinstance(key, Key):
        return modifier_for(key.name)
    return None


class T9LineApp:
    """
    Full application.  Instantiate then call :meth:`run`.

    The pynput listener thread only translates and enqueues key events;
    the calling thread drains the queue and is the only one that touches
    the editor state.

    Example::

        from t9line import load_config
        from t9line.app import T9LineApp
        app = T9LineApp(load_config())
        app.run()
    """

    def __init__(self, config: dict, index: DictionaryIndex | None = None) -> None:
        self.config = config
        keypad = Keypad.for_layout(config["layout"])
        if index is None:
            index = DictionaryIndex.from_file(config["corpus"], keypad)
        self.renderer = TerminalRenderer(highlight=config["highlight"])
        self.session = EditorSession(
            Keymap.from_config(config),
            CandidateSelector(index),
            self.renderer,
        )
        self._events: queue.Queue[KeyEvent] = queue.Queue()
        self._modifiers: set[str] = set()

        # ── Global keyboard listener ──────────────────────────────────────────
        self._listener = keyboard.Listener(
            on_press=self._on_press,
            on_release=self._on_release,
            suppress=False,
        )

    # ── Key translation (listener thread) ─────────────────────────────────────

    def _on_press(self, key: Key | KeyCode | None) -> None:
        if key is None:
            return
        modifier = _modifier_of(key)
        if modifier:
            self._modifiers.add(modifier)
            return
        self._events.put(self._to_event(key, frozenset(self._modifiers)))

    def _on_release(self, key: Key | KeyCode | None) -> None:
        modifier = _modifier_of(key) if key is not None else None
        if modifier:
            self._modifiers.discard(modifier)

    @staticmethod
    def _to_event(key: Key | KeyCode, modifiers: frozenset[str]) -> KeyEvent:
        if isinstance(key, Key):
            return KeyEvent(_NAMED_CHARS.get(key.name), key.name, modifiers)
        ch = key.char
        # Some platforms report ctrl+<letter> as the control character.
        if ch is not None and len(ch) == 1 and ord(ch) < 32 and "ctrl" in modifiers:
            ch = chr(ord(ch) + 96)
        name = ch.lower() if ch is not None and ch.isalpha() else None
        return KeyEvent(ch, name, modifiers)

    # ── Terminal echo ─────────────────────────────────────────────────────────

    @staticmethod
    def _disable_echo():
        """Stop the terminal from echoing the keys the listener also sees."""
        if not sys.stdin.isatty():
            return None
        try:
            import termios
        except ImportError:         # Windows console
            return None
        fd = sys.stdin.fileno()
        old = termios.tcgetattr(fd)
        new = termios.tcgetattr(fd)
        new[3] &= ~(termios.ECHO | termios.ICANON)
        termios.tcsetattr(fd, termios.TCSADRAIN, new)
        return fd, old

    @staticmethod
    def _restore_echo(saved) -> None:
        if saved is None:
            return
        import termios
        fd, old = saved
        termios.tcflush(fd, termios.TCIFLUSH)
        termios.tcsetattr(fd, termios.TCSADRAIN, old)

    # ── Run ───────────────────────────────────────────────────────────────────

    def run(self) -> str:
        """Process keys until the exit key. Returns the final line."""
        saved = self._disable_echo()
        self._listener.start()
        try:
            self.renderer.draw("", "", "")
            while not self.session.closed:
                try:
                    event = self._events.get(timeout=0.2)
                except queue.Empty:
                    if not self._listener.running:
                        break
                    continue
                self.session.feed(event)
        except KeyboardInterrupt:
            pass
        finally:
            self._listener.stop()
            self._restore_echo(saved)
            self.renderer.close()
        print("[T9] Stopped.")
        return self.session.text
