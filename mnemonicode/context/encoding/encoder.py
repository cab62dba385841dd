"""
Mnemonic encoder: bytes -> words

Every byte string has an encoding, including the empty one (""). Words are
rendered through a format template: letters mark a word slot, anything else
is copied literally, and the template repeats until the words run out.

    "x-x-x--"   digital-apollo-aroma--rival-artist-rebel   (default)
    "x x x\\n"   digital apollo aroma
                 rival artist rebel
"""

import logging
import re
from typing import List, Optional

from mnemonicode.context.dictionary import DEFAULT_DICTIONARY, WordDictionary
from mnemonicode.context.encoding.chunking import iter_chunks, value_to_digits
from mnemonicode.models import WordGroup

logger = logging.getLogger(__name__)

WORD_SEPARATOR = "-"
GROUP_SEPARATOR = "--"
DEFAULT_FORMAT = "x-x-x--"

WORD_PATTERN = re.compile(r"[A-Za-z]+")


def encode_groups(data: bytes, dictionary: Optional[WordDictionary] = None) -> List[WordGroup]:
    """
    Encode data into one WordGroup per chunk

    Args:
        data: Bytes to encode
        dictionary: Word table (default: the built-in mnemonicode list)

    Returns:
        Word groups in input order
    """
    dictionary = dictionary or DEFAULT_DICTIONARY
    groups = []
    for chunk in iter_chunks(data):
        indices = tuple(value_to_digits(chunk.value, chunk.length))
        groups.append(WordGroup(
            chunk=chunk,
            indices=indices,
            words=tuple(dictionary.word_at(i) for i in indices),
        ))
    return groups


def encode_words(data: bytes, dictionary: Optional[WordDictionary] = None) -> List[str]:
    """Flat list of words encoding data."""
    return [word for group in encode_groups(data, dictionary) for word in group.words]


def encode(data: bytes, dictionary: Optional[WordDictionary] = None) -> str:
    """
    Encode bytes as separator-joined words

    Examples:
        >>> encode(bytes([101, 2, 240, 6, 108, 11, 20, 97]))
        'digital-apollo-aroma--rival-artist-rebel'
        >>> encode(b'')
        ''
    """
    groups = encode_groups(data, dictionary)
    return GROUP_SEPARATOR.join(WORD_SEPARATOR.join(group.words) for group in groups)


def render(words: List[str], template: str = DEFAULT_FORMAT) -> str:
    """
    Lay words out according to a format template

    Args:
        words: Words to place, in order
        template: Format string; each run of ASCII letters is one word slot

    Returns:
        Rendered text, ending right after the last word
    """
    if words and not any(_is_slot(c) for c in template):
        raise ValueError(f"Format template has no word slots: {template!r}")

    out = []
    i = 0  # position within template
    n = 0
    while n < len(words):
        while i < len(template) and not _is_slot(template[i]):
            out.append(template[i])
            i += 1
        if i == len(template):
            i = 0
            continue
        while i < len(template) and _is_slot(template[i]):
            i += 1
        out.append(words[n])
        n += 1
    return "".join(out)


def encode_with_format(data: bytes, template: str = DEFAULT_FORMAT,
                       dictionary: Optional[WordDictionary] = None) -> str:
    """
    Encode bytes using a custom format template

    Example:
        >>> encode_with_format(bytes([101, 2, 240, 6]), "x x x\\n")
        'digital apollo aroma'
    """
    words = encode_words(data, dictionary)
    logger.debug("Encoding %d bytes as %d words with template %r", len(data), len(words), template)
    return render(words, template)


def _is_slot(c: str) -> bool:
    return ('a' <= c <= 'z') or ('A' <= c <= 'Z')


def abbreviate(text: str, dictionary: Optional[WordDictionary] = None) -> str:
    """
    Replace every word in encoded text with its shortest unique prefix

    Separators are left untouched, so the result decodes with the same
    settings as the input.

    Example:
        >>> abbreviate('digital-apollo-aroma--rival-artist-rebel')
        'digi-apol-arom--riva-arti-rebe'
    """
    dictionary = dictionary or DEFAULT_DICTIONARY
    return WORD_PATTERN.sub(lambda m: dictionary.shortest_prefix(dictionary.lookup(m.group())), text)
