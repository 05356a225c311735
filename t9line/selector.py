"""
t9line.selector
===============
Ranks the index group for a digit sequence and picks the selected entry.
"""

from __future__ import annotations

from typing import NamedTuple

from .dictionary import Candidate, DictionaryIndex


class Ranking(NamedTuple):
    candidates: tuple[Candidate, ...]
    selected: int

    @property
    def word(self) -> str:
        return self.candidates[self.selected].word


def rank(
    index: DictionaryIndex,
    sequence: str,
    preferred: str | None = None,
) -> Ranking:
    """
    Sort by descending frequency (stable, so ties keep corpus order), then
    append the literal ``(sequence, 0)`` so the digits themselves can always
    be chosen.  ``preferred`` selects the first candidate with that word;
    otherwise, or when it is absent, the top candidate is selected.
    """
    ranked = sorted(index.lookup(sequence), key=lambda c: -c.frequency)
    ranked.append(Candidate(sequence, 0))

    selected = 0
    if preferred is not None:
        for i, candidate in enumerate(ranked):
            if candidate.word == preferred:
                selected = i
                break
    return Ranking(tuple(ranked), selected)


class CandidateSelector:
    """Binds :func:`rank` to one index for the line editor."""

    def __init__(self, index: DictionaryIndex) -> None:
        self.index = index

    @property
    def keypad(self):
        return self.index.keypad

    def rank(self, sequence: str, preferred: str | None = None) -> Ranking:
        return rank(self.index, sequence, preferred)
