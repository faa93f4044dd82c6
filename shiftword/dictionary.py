"""Loading the English word list used by the word finder."""

from __future__ import annotations

import string
import sys

_ASCII_LETTERS = frozenset(string.ascii_letters)
_ASCII_UPPER = frozenset(string.ascii_uppercase)


def _is_accepted(word: str) -> bool:
    """Keep words that start lower-case and consist only of ASCII letters."""
    if word[0] in _ASCII_UPPER:
        return False
    return all(ch in _ASCII_LETTERS for ch in word)


def read_dict_words(filename) -> frozenset[str]:
    """Read whitespace-separated words from *filename* into a set.

    Words starting with a capital letter, and words holding anything other
    than letters, are skipped. The number of accepted words is reported on
    standard error.
    """
    try:
        with open(filename, encoding="latin-1") as handle:
            text = handle.read()
    except OSError as exc:
        raise OSError("Cannot open dictionary file.") from exc

    accepted = [word for word in text.split() if _is_accepted(word)]
    print(f"Read {len(accepted)} words into dictionary.", file=sys.stderr)
    return frozenset(accepted)