# edits.py
from __future__ import annotations
from typing import Optional, Set

# Norvig style edit candidate generation, one operation per function
ALPHABET = 'abcdefghijklmnopqrstuvwxyz'


def _splits(word: str):
    return [(word[:i], word[i:]) for i in range(len(word) + 1)]


def deletes(word: str, into: Optional[Set[str]] = None) -> Set[str]:
    """Drop one character at every position."""
    cands = set() if into is None else into
    cands.update(L + R[1:] for L, R in _splits(word) if R)
    return cands


def transposes(word: str, into: Optional[Set[str]] = None) -> Set[str]:
    """
    Swap every pair of adjacent characters.
    Two-letter words are left alone: only words longer than 2 transpose.
    """
    cands = set() if into is None else into
    if len(word) > 2:
        cands.update(L + R[1] + R[0] + R[2:] for L, R in _splits(word) if len(R) > 1)
    return cands


def inserts(word: str, into: Optional[Set[str]] = None) -> Set[str]:
    """Insert every lowercase letter at every position of a non-empty word."""
    cands = set() if into is None else into
    if word:
        cands.update(L + c + R for L, R in _splits(word) for c in ALPHABET)
    return cands


def replaces(word: str, into: Optional[Set[str]] = None) -> Set[str]:
    """Replace every character with every lowercase letter (itself included)."""
    cands = set() if into is None else into
    cands.update(L + c + R[1:] for L, R in _splits(word) if R for c in ALPHABET)
    return cands


def edits1(word: str, into: Optional[Set[str]] = None) -> Set[str]:
    """All strings one delete, transpose, insert or replace away from `word`."""
    cands = set() if into is None else into
    for op in (deletes, transposes, inserts, replaces):
        op(word, cands)
    return cands


def edits2(word: str, first: Optional[Set[str]] = None) -> Set[str]:
    """
    Edits of edits.
    first : the already computed edits1(word), saves a second pass
    """
    if first is None:
        first = edits1(word)
    cands: Set[str] = set()
    for e1 in first:
        edits1(e1, cands)
    return cands
