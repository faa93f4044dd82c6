"""Find dictionary words that fit a partially known pattern."""

from __future__ import annotations

import string
import sys
from collections import Counter
from typing import AbstractSet, Iterable

from shiftword.dictionary import read_dict_words

BLANK = "-"
DICTIONARY_FILE = "dict-eng.txt"
_GUESS_LETTERS = frozenset(string.ascii_lowercase)


def _fits(word: str, pattern: str, required: Counter) -> bool:
    if len(word) != len(pattern):
        return False
    blank_letters = []
    for known, ch in zip(pattern, word):
        if known == BLANK:
            if ch not in _GUESS_LETTERS:
                return False
            blank_letters.append(ch)
        elif known != ch:
            return False
    return not (required - Counter(blank_letters))


def wordle(pattern: str, floating: str, dictionary: Iterable[str]) -> set[str]:
    """Return every word in *dictionary* matching *pattern*.

    Letters in *pattern* are fixed; each ``-`` is an unknown lower-case
    letter. Every character of *floating* (counted with multiplicity) must
    appear among the letters filling the unknown positions.
    """
    required = Counter(floating)
    return {word for word in dictionary if _fits(word, pattern, required)}


def main(argv=None) -> int:
    """Print all words matching the pattern and floating letters given."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        print(
            'Please provide an initial string (e.g. "s---ng") '
            "and optional string of floating characters."
        )
        return 1
    dictionary: AbstractSet[str] = read_dict_words(DICTIONARY_FILE)
    pattern = args[0]
    floating = args[1] if len(args) > 1 else ""
    for word in sorted(wordle(pattern, floating, dictionary)):
        print(word)
    return 0


if __name__ == "__main__":
    sys.exit(main())