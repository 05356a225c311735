"""
t9line
======
T9 predictive text on a single terminal line.

Public API
----------
    from t9line import DictionaryIndex, EditorSession, rank, load_config

    index = DictionaryIndex.build([("go", 50), ("in", 80)])
    ranking = rank(index, "46")
    print([c.word for c in ranking.candidates])   # ['in', 'go', '46']
"""

from .config import load_config
from .dictionary import Candidate, DictionaryIndex
from .editor import EditorSession, EditorState, step
from .keypad import ConfigurationError, Keypad, encode
from .selector import CandidateSelector, rank

__all__ = [
    "Candidate",
    "CandidateSelector",
    "ConfigurationError",
    "DictionaryIndex",
    "EditorSession",
    "EditorState",
    "Keypad",
    "encode",
    "load_config",
    "rank",
    "step",
]
__version__ = "1.0.0"
