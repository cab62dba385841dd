"""
Context layer - domain-specific implementations.
"""

from mnemonicode.context.dictionary import DEFAULT_DICTIONARY, WordDictionary
from mnemonicode.context.encoding import decode, encode, encode_with_format

__all__ = [
    'DEFAULT_DICTIONARY',
    'WordDictionary',
    'encode',
    'encode_with_format',
    'decode',
]
