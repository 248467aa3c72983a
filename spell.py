# spell.py
from __future__ import annotations
import argparse
import logging
import sys
from collections import Counter
from typing import IO, Iterable, Iterator, List, Mapping, NamedTuple, Optional, Set

import Levenshtein   # pip install Levenshtein

from edits import edits1, edits2

log = logging.getLogger(__name__)

TERMINATOR = '999'
UNCORRECTABLE = '-'


class Correction(NamedTuple):
    """
    word       : the word as it was read
    correction : the dictionary word chosen, `word` itself when already
                 known, None when nothing is reachable
    distance   : 0, 1 or 2 edits, None when uncorrectable
    """
    word: str
    correction: Optional[str]
    distance: Optional[int]

    @property
    def known(self) -> bool:
        return self.distance == 0


def read_corpus(path: str) -> List[str]:
    """Read the whole corpus file and split it on single spaces."""
    with open(path, encoding='utf-8') as f:
        return f.read().split(' ')


def build_dictionary(words: Iterable[str], lowercase: bool = False) -> Counter:
    """Count every corpus word; casing is kept unless `lowercase` is set."""
    if lowercase:
        words = (w.lower() for w in words)
    return Counter(words)


def load_dictionary(path: str, lowercase: bool = False) -> Counter:
    words = read_corpus(path)
    dictionary = build_dictionary(words, lowercase=lowercase)
    log.info("trained on %s: %d tokens, %d distinct words", path, len(words), len(dictionary))
    return dictionary


class SpellCorrector:
    def __init__(self, dictionary: Mapping[str, int], ordered: bool = False) -> None:
        """
        dictionary : word -> count table, only membership is consulted
        ordered    : visit candidates in lexicographic order instead of
                     set order, so the same word is chosen on every run
        """
        if not isinstance(dictionary, Mapping):
            raise TypeError("dictionary must be a mapping of word -> count")
        self.dictionary = dictionary
        self.ordered = ordered

    def _first_known(self, cands: Set[str]) -> Optional[str]:
        pool = sorted(cands) if self.ordered else cands
        return next((w for w in pool if w in self.dictionary), None)

    def correct(self, word: str) -> Correction:
        """
        Layered search:
          0. the word itself
          1. the first known word one edit away
          2. the first known word two edits away
        Candidates at the same distance are not ranked.
        """
        if word in self.dictionary:
            return Correction(word, word, 0)

        first = edits1(word)
        found = self._first_known(first)
        if found is not None:
            log.debug("%r -> %r (1 edit, %d candidates)", word, found, len(first))
            return Correction(word, found, 1)

        second = edits2(word, first)
        found = self._first_known(second)
        if found is not None:
            log.debug("%r -> %r (2 edits, %d candidates)", word, found, len(second))
            return Correction(word, found, 2)

        log.debug("%r is uncorrectable (%d candidates)", word, len(second))
        return Correction(word, None, None)


def explain(result: Correction) -> List[tuple]:
    """Levenshtein edit operations turning the word into its correction."""
    if result.correction is None or result.known:
        return []
    return Levenshtein.editops(result.word, result.correction)


def format_correction(result: Correction) -> str:
    if result.known:
        return f"{result.word}  "
    if result.correction is None:
        return f"{result.word}  {UNCORRECTABLE}"
    return f"{result.word}  {result.correction}"


def read_words(stream: Iterable, encoding: str = 'utf-8') -> Iterator[str]:
    """
    One word per line, line break removed.
    Stops at the terminator line, at end of stream, or at the first line
    that cannot be decoded.
    """
    try:
        for line in stream:
            if isinstance(line, bytes):
                line = line.decode(encoding)
            if line.endswith('\n'):
                line = line[:-1]
                if line.endswith('\r'):
                    line = line[:-1]
            if line == TERMINATOR:
                return
            yield line
    except UnicodeDecodeError as e:
        log.debug("stopping at undecodable input: %s", e)


def correct_stream(corrector: SpellCorrector, instream: Iterable, outstream: IO[str],
                   explain_edits: bool = False) -> int:
    """Correct every word of `instream`, one record per line on `outstream`."""
    n = 0
    for word in read_words(instream):
        result = corrector.correct(word)
        if explain_edits and result.distance:
            log.info("%s -> %s: %s", result.word, result.correction,
                     ", ".join(f"{op} @{spos}" for op, spos, _ in explain(result)))
        outstream.write(format_correction(result) + "\n")
        n += 1
    return n


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='correct',
        description="Correct one word per stdin line against a corpus (ends at '999' or EOF).")
    parser.add_argument('corpus', help="space separated training corpus")
    parser.add_argument('--ordered', action='store_true',
                        help="pick the lexicographically first candidate at each distance")
    parser.add_argument('--lowercase', action='store_true',
                        help="lowercase the corpus before training")
    parser.add_argument('--explain', action='store_true',
                        help="log the edit operations behind each correction")
    parser.add_argument('-v', '--verbose', action='store_true', help="debug logging")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    level = logging.DEBUG if args.verbose else logging.INFO if args.explain else logging.WARNING
    logging.basicConfig(level=level, stream=sys.stderr, format="%(name)s: %(message)s")

    try:
        dictionary = load_dictionary(args.corpus, lowercase=args.lowercase)
    except (OSError, UnicodeDecodeError) as e:
        reason = getattr(e, "strerror", None) or e
        parser.exit(1, f"correct: cannot read corpus {args.corpus}: {reason}\n")

    corrector = SpellCorrector(dictionary, ordered=args.ordered)
    correct_stream(corrector, sys.stdin.buffer, sys.stdout, explain_edits=args.explain)
    sys.stdout.flush()
    return 0


if __name__ == '__main__':
    sys.exit(main())
