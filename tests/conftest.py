from __future__ import annotations

import copy

import pytest

from t9line.config import DEFAULTS
from t9line.dictionary import DictionaryIndex
from t9line.editor import EditorSession
from t9line.keymap import Keymap
from t9line.selector import CandidateSelector

CORPUS = [
    ("go", 50),
    ("in", 80),
    ("act", 98450),
    ("cat", 86012),
    ("bat", 40214),
    ("he", 100),
    ("if", 40),
    ("home", 900),
    ("good", 900),
    ("gone", 400),
]


class RecordingRenderer:
    def __init__(self) -> None:
        self.frames: list[tuple[str, str, str]] = []

    def draw(self, committed: str, highlighted: str, trailing: str = "") -> None:
        self.frames.append((committed, highlighted, trailing))


@pytest.fixture
def index() -> DictionaryIndex:
    return DictionaryIndex.build(CORPUS)


@pytest.fixture
def selector(index) -> CandidateSelector:
    return CandidateSelector(index)


@pytest.fixture
def config() -> dict:
    return copy.deepcopy(DEFAULTS)


@pytest.fixture
def keymap(config) -> Keymap:
    return Keymap.from_config(config)


@pytest.fixture
def renderer() -> RecordingRenderer:
    return RecordingRenderer()


@pytest.fixture
def session(keymap, selector, renderer) -> EditorSession:
    return EditorSession(keymap, selector, renderer)
