"""
Mnemonic decoder: words -> bytes

Two parsers feed the same chunk reconstruction:

- strict (default): the wire format produced by encode(). Groups are split
  on "--", words on "-", and every group but the last must hold 3 words.
- lenient: any run of non-letters separates words and grouping is implied
  by word count, as with text produced from a custom format template or
  typed with spaces.

Either way a group's words are resolved through the reverse index (exact
word or unique prefix), recomposed into an integer and range-checked, so
each byte string has exactly one accepted spelling (modulo abbreviation,
case and separators in lenient mode).
"""

import logging
from typing import List, Optional, Tuple

from mnemonicode.context.dictionary import BASE, DEFAULT_DICTIONARY, WordDictionary
from mnemonicode.context.encoding.chunking import (
    CHUNK_LENGTH_FOR_WORDS, WORDS_PER_CHUNK, digits_to_value, max_value,
)
from mnemonicode.context.encoding.encoder import GROUP_SEPARATOR, WORD_PATTERN, WORD_SEPARATOR
from mnemonicode.errors import DecodeError, MalformedGrouping, ValueOutOfRange

logger = logging.getLogger(__name__)

FULL_GROUP = WORDS_PER_CHUNK[4]


def split_groups(text: str) -> List[List[str]]:
    """
    Split wire-format text into groups of word tokens

    Raises:
        MalformedGrouping: empty token (dangling or repeated separator) or a
            group with the wrong number of words
    """
    text = text.strip()
    if not text:
        return []

    groups = [group.split(WORD_SEPARATOR) for group in text.split(GROUP_SEPARATOR)]
    last = len(groups) - 1
    for g, tokens in enumerate(groups):
        for p, token in enumerate(tokens):
            if not token.strip():
                raise MalformedGrouping("empty word (dangling separator?)", group=g, position=p)
        if g < last and len(tokens) != FULL_GROUP:
            raise MalformedGrouping(
                f"expected {FULL_GROUP} words, found {len(tokens)}", group=g)
        if g == last and len(tokens) > FULL_GROUP:
            raise MalformedGrouping(
                f"expected at most {FULL_GROUP} words, found {len(tokens)}", group=g)
    return groups


def split_words(text: str) -> List[List[str]]:
    """Tokenize free-form text and group the words in threes."""
    words = WORD_PATTERN.findall(text)
    return [words[i:i + FULL_GROUP] for i in range(0, len(words), FULL_GROUP)]


def decode_group(indices: List[int], is_last: bool, group: int,
                 dictionary: WordDictionary) -> bytes:
    """
    Rebuild the bytes of one chunk from its dictionary indices

    Args:
        indices: Resolved dictionary indices, least significant first
        is_last: Whether this is the final group of the text
        group: Group number, for error context
        dictionary: Word table the indices refer to

    Returns:
        1-4 bytes
    """
    digits = list(indices)
    length = None
    for p, index in enumerate(digits):
        if not dictionary.is_remainder(index):
            continue
        if p != FULL_GROUP - 1:
            raise MalformedGrouping(
                "24-bit remainder word must be the third word of a group",
                token=dictionary.word_at(index), group=group, position=p)
        if not is_last:
            raise MalformedGrouping(
                "unexpected data after 24-bit remainder word",
                token=dictionary.word_at(index), group=group, position=p)
        digits[p] -= BASE
        length = 3

    if length is None:
        length = CHUNK_LENGTH_FOR_WORDS[len(digits)]

    value = digits_to_value(digits)
    if value > max_value(length):
        raise ValueOutOfRange(
            f"value {value} does not fit in {length} byte(s)", group=group)
    return value.to_bytes(length, 'little')


def _resolve(groups: List[List[str]], dictionary: WordDictionary) -> bytes:
    out = bytearray()
    last = len(groups) - 1
    for g, tokens in enumerate(groups):
        indices = []
        for p, token in enumerate(tokens):
            try:
                indices.append(dictionary.lookup(token))
            except DecodeError as e:
                e.locate(g, p)
                raise
        out.extend(decode_group(indices, g == last, g, dictionary))
    return bytes(out)


def decode_groups(text: str, strict: bool = True,
                  dictionary: Optional[WordDictionary] = None) -> Tuple[List[List[str]], bytes]:
    """Parse text and return (token groups, decoded bytes)."""
    dictionary = dictionary or DEFAULT_DICTIONARY
    groups = split_groups(text) if strict else split_words(text)
    data = _resolve(groups, dictionary)
    logger.debug("Decoded %d groups into %d bytes (strict=%s)", len(groups), len(data), strict)
    return groups, data


def decode(text: str, strict: bool = True, dictionary: Optional[WordDictionary] = None) -> bytes:
    """
    Decode mnemonic text back into bytes

    Args:
        text: Encoded text
        strict: Require the "x-x-x--" wire format (False accepts any
            non-letter separators)
        dictionary: Word table (default: the built-in mnemonicode list)

    Returns:
        Original bytes

    Raises:
        DecodeError: UnknownWord, AmbiguousWord, MalformedGrouping or
            ValueOutOfRange

    Examples:
        >>> list(decode('digital-apollo-aroma--rival-artist-rebel'))
        [101, 2, 240, 6, 108, 11, 20, 97]
        >>> decode('consul quiet fax', strict=False)
        b'\\x01\\xe2@'
    """
    return decode_groups(text, strict, dictionary)[1]
