"""
Word dictionary and reverse index

Maps dictionary positions to words and words (or abbreviations) back to
positions. Built once from the word table and never mutated, so a single
instance is shared by every encode and decode call.

Prefix matching:
- Every base word is at least MIN_PREFIX_LENGTH letters and no word is a
  prefix of another, so an exact match always wins.
- A token of MIN_PREFIX_LENGTH+ letters that starts exactly one word resolves
  to that word ("digi" -> "digital").
- 123 four-letter prefixes are shared ("acti" -> "active", "action"); those
  tokens raise AmbiguousWord and need one more letter.
"""

import logging
from collections import defaultdict
from typing import Dict, List, Sequence, Tuple

from mnemonicode.context.dictionary.wordlist import WORDS, REMAINDER_WORDS
from mnemonicode.errors import AmbiguousWord, UnknownWord

logger = logging.getLogger(__name__)

MIN_PREFIX_LENGTH = 4


def normalize(token: str) -> str:
    """Canonical form used for lookups: trimmed, lower case."""
    return token.strip().lower()


class WordDictionary:
    """
    Ordered word table with exact and prefix reverse lookup.

    Example:
        >>> d = WordDictionary(WORDS, REMAINDER_WORDS)
        >>> d.word_at(217)
        'digital'
        >>> d.lookup('digital'), d.lookup('DIGI')
        (217, 217)
    """

    def __init__(self, words: Sequence[str], remainder_words: Sequence[str] = ()):
        self.base = len(words)
        self.words: Tuple[str, ...] = tuple(words) + tuple(remainder_words)
        self.word_to_index: Dict[str, int] = {}
        self.prefix_to_index: Dict[str, int] = {}
        self.ambiguous_prefixes: Dict[str, Tuple[int, ...]] = {}

        for index, word in enumerate(self.words):
            if word != normalize(word) or not word.isalpha():
                raise ValueError(f"Dictionary word {word!r} is not a lower-case alphabetic word")
            if word in self.word_to_index:
                raise ValueError(f"Duplicate dictionary word {word!r}")
            self.word_to_index[word] = index

        self._build_prefixes()
        logger.debug(
            "Built word dictionary: %d words (%d base), %d unique prefixes, %d ambiguous prefixes",
            len(self.words), self.base, len(self.prefix_to_index), len(self.ambiguous_prefixes),
        )

    def _build_prefixes(self):
        """Index every proper prefix of every word by the words it starts."""
        starts: Dict[str, List[int]] = defaultdict(list)
        for index, word in enumerate(self.words):
            for length in range(1, len(word)):
                starts[word[:length]].append(index)

        for prefix, indices in starts.items():
            if prefix in self.word_to_index:
                raise ValueError(f"Dictionary word {prefix!r} is a prefix of {self.words[indices[0]]!r}")
            if len(indices) > 1:
                self.ambiguous_prefixes[prefix] = tuple(indices)
            elif len(prefix) >= MIN_PREFIX_LENGTH:
                self.prefix_to_index[prefix] = indices[0]

    def __len__(self) -> int:
        return len(self.words)

    def __contains__(self, token: str) -> bool:
        return normalize(token) in self.word_to_index

    def word_at(self, index: int) -> str:
        if not 0 <= index < len(self.words):
            raise IndexError(f"Word index out of range: {index}")
        return self.words[index]

    def is_remainder(self, index: int) -> bool:
        """True for the extra words that mark a trailing 3-byte chunk."""
        return index >= self.base

    def lookup(self, token: str) -> int:
        """
        Resolve a word or abbreviation to its dictionary index.

        Args:
            token: Word as typed or transcribed (case and surrounding
                whitespace are ignored)

        Returns:
            Dictionary index

        Raises:
            UnknownWord: token matches no word, or only by a prefix shorter
                than MIN_PREFIX_LENGTH
            AmbiguousWord: token is a prefix of several words
        """
        key = normalize(token)
        index = self.word_to_index.get(key)
        if index is not None:
            return index

        index = self.prefix_to_index.get(key)
        if index is not None:
            return index

        candidates = self.ambiguous_prefixes.get(key)
        if candidates:
            raise AmbiguousWord(candidates=[self.words[i] for i in candidates], token=token)

        if key and len(key) < MIN_PREFIX_LENGTH and any(w.startswith(key) for w in self.words):
            raise UnknownWord(
                f"abbreviations need at least {MIN_PREFIX_LENGTH} letters", token=token
            )
        raise UnknownWord(token=token)

    def shortest_prefix(self, index: int) -> str:
        """Shortest abbreviation that lookup() resolves back to index."""
        word = self.word_at(index)
        for length in range(MIN_PREFIX_LENGTH, len(word)):
            if self.prefix_to_index.get(word[:length]) == index:
                return word[:length]
        return word
