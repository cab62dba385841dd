"""
Encoding context: bytes <-> dictionary words.
"""

from mnemonicode.context.encoding.chunking import iter_chunks, words_required
from mnemonicode.context.encoding.encoder import (
    DEFAULT_FORMAT, GROUP_SEPARATOR, WORD_SEPARATOR,
    WORD_PATTERN, abbreviate, encode, encode_groups, encode_with_format, encode_words, render,
)
from mnemonicode.context.encoding.decoder import decode, decode_groups, split_groups, split_words

__all__ = [
    'DEFAULT_FORMAT',
    'GROUP_SEPARATOR',
    'WORD_SEPARATOR',
    'WORD_PATTERN',
    'abbreviate',
    'iter_chunks',
    'words_required',
    'encode',
    'encode_groups',
    'encode_with_format',
    'encode_words',
    'render',
    'decode',
    'decode_groups',
    'split_groups',
    'split_words',
]
