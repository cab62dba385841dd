"""
Chunking rules shared by the encoder and decoder

Input is consumed in 4-byte chunks; the last chunk may hold 1-3 bytes.
Each chunk is read as a little-endian integer and written in base 1626:

    bytes   words   max value
    1       1       2^8  - 1  < 1626
    2       2       2^16 - 1  < 1626^2
    3       3       2^24 - 1  (third word from the 7 remainder words)
    4       3       2^32 - 1  < 1626^3

A 3-byte chunk's top digit is at most 6 (2^24 / 1626^2 ~ 6.3), so it is
drawn from a separate 7-word table. That keeps a trailing 3-byte group
distinguishable from a trailing 4-byte group by its last word alone.
"""

from typing import Iterator, List

from mnemonicode.context.dictionary import BASE
from mnemonicode.models import ByteChunk

CHUNK_SIZE = 4

# words per chunk, keyed by chunk length
WORDS_PER_CHUNK = {1: 1, 2: 2, 3: 3, 4: 3}

# chunk length, keyed by word count of a *final* group with no remainder word
CHUNK_LENGTH_FOR_WORDS = {1: 1, 2: 2, 3: 4}


def words_required(byte_count: int) -> int:
    """
    Total number of words needed to encode byte_count bytes

    Examples:
        >>> [words_required(n) for n in range(9)]
        [0, 1, 2, 3, 3, 4, 5, 6, 6]
    """
    return (byte_count + 1) * 3 // 4


def iter_chunks(data: bytes) -> Iterator[ByteChunk]:
    """Split data into consecutive chunks of at most CHUNK_SIZE bytes."""
    for offset in range(0, len(data), CHUNK_SIZE):
        yield ByteChunk(offset=offset, data=bytes(data[offset:offset + CHUNK_SIZE]))


def value_to_digits(value: int, length: int) -> List[int]:
    """
    Base-1626 digits of a chunk value, least significant first

    Args:
        value: Little-endian integer value of the chunk
        length: Chunk length in bytes (1-4)

    Returns:
        WORDS_PER_CHUNK[length] dictionary indices; for 3-byte chunks the
        last index is offset into the remainder words

    Examples:
        >>> value_to_digits(0x40E201, 3)
        [171, 989, 1627]
    """
    digits = []
    for _ in range(WORDS_PER_CHUNK[length]):
        digits.append(value % BASE)
        value //= BASE
    if length == 3:
        digits[2] += BASE
    return digits


def digits_to_value(digits: List[int]) -> int:
    """Inverse of value_to_digits; remainder-word offsets must already be removed."""
    value = 0
    for digit in reversed(digits):
        value = value * BASE + digit
    return value


def max_value(length: int) -> int:
    """Largest integer a chunk of length bytes can hold."""
    return (1 << (8 * length)) - 1
