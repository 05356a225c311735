"""
t9line.dictionary
=================
Word/frequency corpus → digit-sequence index.

The index is built once and never changes afterwards.  It keeps every
group in corpus order; sorting and the literal fallback belong to
:mod:`t9line.selector`.
"""

from __future__ import annotations

import math
from pathlib import Path
from types import MappingProxyType
from typing import Iterable, Iterator, NamedTuple

from .keypad import DEFAULT_KEYPAD, Keypad

# Fixed frequency multipliers for very short, very common collisions.
# "he" and "if" share a sequence on both layouts; this lets "if" win.
FREQUENCY_ADJUSTMENTS: dict[str, float] = {
    "if": 3,
    "he": 0.5,
}


class Candidate(NamedTuple):
    word: str
    frequency: float


# ─── Corpus records ───────────────────────────────────────────────────────────

def parse_record(line: str) -> tuple[str, float] | None:
    """
    Parse one ``word<TAB>frequency`` line.

    Returns ``None`` for anything that is not a usable record: blank lines,
    ``#`` comments, lines without a tab, empty words, and frequencies that
    are not non-negative numbers.
    """
    line = line.rstrip("\r\n")
    if not line.strip() or line.startswith("#"):
        return None
    word, sep, rest = line.partition("\t")
    word = word.strip()
    if not sep or not word:
        return None
    field = rest.split("\t", 1)[0].strip()
    try:
        frequency = float(field)
    except ValueError:
        return None
    if not math.isfinite(frequency) or frequency < 0:
        return None
    return word, frequency


def iter_records(lines: Iterable[str]) -> Iterator[tuple[str, float]]:
    for line in lines:
        record = parse_record(line)
        if record is not None:
            yield record


def adjusted_frequency(word: str, frequency: float) -> float:
    return frequency * FREQUENCY_ADJUSTMENTS.get(word, 1)


def load_corpus(path: str | Path) -> list[tuple[str, float]]:
    """Read a UTF-8 ``word<TAB>frequency`` file, skipping malformed lines."""
    path = Path(path)
    with open(path, "r", encoding="utf-8") as f:
        records = list(iter_records(f))
    print(f"[T9] Loaded {len(records):,} words  [{path.name}]")
    return records


# ─── Index ────────────────────────────────────────────────────────────────────

class DictionaryIndex:
    """
    Read-only digit sequence → candidates store.

    Usage::

        index = DictionaryIndex.build([("go", 50), ("in", 80)])
        index.lookup("46")     # [Candidate('go', 50), Candidate('in', 80)]
    """

    def __init__(self, groups: dict[str, tuple[Candidate, ...]], keypad: Keypad) -> None:
        self._groups = MappingProxyType(groups)
        self.keypad = keypad

    @classmethod
    def build(
        cls,
        records: Iterable[tuple[str, float]],
        keypad: Keypad = DEFAULT_KEYPAD,
    ) -> "DictionaryIndex":
        """
        Index ``(word, frequency)`` records.

        Raises :class:`~t9line.keypad.ConfigurationError` as soon as a word
        contains a character the keypad cannot encode.
        """
        groups: dict[str, list[Candidate]] = {}
        for word, frequency in records:
            key = keypad.encode(word)
            groups.setdefault(key, []).append(
                Candidate(word, adjusted_frequency(word, frequency))
            )
        return cls({key: tuple(bucket) for key, bucket in groups.items()}, keypad)

    @classmethod
    def from_file(cls, path: str | Path, keypad: Keypad = DEFAULT_KEYPAD) -> "DictionaryIndex":
        return cls.build(load_corpus(path), keypad)

    def lookup(self, sequence: str) -> list[Candidate]:
        return list(self._groups.get(sequence, ()))

    def sequences(self) -> Iterator[str]:
        return iter(self._groups)

    @property
    def word_count(self) -> int:
        return sum(len(bucket) for bucket in self._groups.values())

    def __contains__(self, sequence: object) -> bool:
        return sequence in self._groups

    def __len__(self) -> int:
        return len(self._groups)
