# wordfreq.py
from __future__ import annotations
import argparse
import logging
import sys
from collections import Counter
from typing import Iterable, List, Optional, Tuple

from spell import read_words

log = logging.getLogger(__name__)


def tokenize(text: str) -> List[str]:
    """Maximal runs of alphabetic characters; anything else separates."""
    tokens: List[str] = []
    buf: List[str] = []
    for ch in text:
        if ch.isalpha():
            buf.append(ch)
        elif buf:
            tokens.append("".join(buf))
            buf.clear()
    if buf:
        tokens.append("".join(buf))
    return tokens


def read_text(stream: Iterable) -> List[str]:
    """Tokens of every line up to the terminator line or end of input."""
    return [tok for line in read_words(stream) for tok in tokenize(line)]


def count_words(tokens: Iterable[str]) -> Counter:
    return Counter(tokens)


def rank(counts: Counter) -> List[Tuple[str, int]]:
    """Most frequent first; equal counts keep first-seen order."""
    return counts.most_common()


def format_entry(word: str, count: int) -> str:
    return f"{word}  {count}"


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog='wordfreq',
        description="Count the words of stdin (ends at '999' or EOF), most frequent first.")
    parser.add_argument('-v', '--verbose', action='store_true', help="debug logging")
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        stream=sys.stderr, format="%(name)s: %(message)s")

    counts = count_words(read_text(sys.stdin.buffer))
    log.debug("%d tokens, %d distinct", sum(counts.values()), len(counts))
    for word, count in rank(counts):
        sys.stdout.write(format_entry(word, count) + "\n")
    sys.stdout.flush()
    return 0


if __name__ == '__main__':
    sys.exit(main())
