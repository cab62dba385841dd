"""
Dictionary context: the word table and its reverse index.
"""

from mnemonicode.context.dictionary.wordlist import BASE, REMAINDER, WORDS, REMAINDER_WORDS
from mnemonicode.context.dictionary.index import MIN_PREFIX_LENGTH, WordDictionary, normalize

# Built eagerly at import; read-only afterwards
DEFAULT_DICTIONARY = WordDictionary(WORDS, REMAINDER_WORDS)

__all__ = [
    'BASE',
    'REMAINDER',
    'WORDS',
    'REMAINDER_WORDS',
    'MIN_PREFIX_LENGTH',
    'WordDictionary',
    'DEFAULT_DICTIONARY',
    'normalize',
]
