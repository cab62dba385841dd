"""
Data models for mnemonicode.

This module contains pure data structures with no business logic.
"""

from dataclasses import dataclass, field as dataclass_field
from typing import List, Tuple

__all__ = [
    'ByteChunk',
    'WordGroup',
    'EncodingStats',
]


@dataclass(frozen=True)
class ByteChunk:
    """A run of 1-4 input bytes encoded as one word group."""
    offset: int
    data: bytes

    @property
    def length(self) -> int:
        return len(self.data)

    @property
    def value(self) -> int:
        """Chunk bytes as a little-endian unsigned integer."""
        return int.from_bytes(self.data, 'little')


@dataclass(frozen=True)
class WordGroup:
    """Dictionary indices (and their words) for one ByteChunk."""
    chunk: ByteChunk
    indices: Tuple[int, ...]
    words: Tuple[str, ...]


@dataclass
class EncodingStats:
    """Size accounting for one encode or decode call."""
    byte_count: int
    word_count: int
    group_count: int
    text_length: int
    groups: List[WordGroup] = dataclass_field(default_factory=list)

    @property
    def expansion_ratio(self) -> float:
        """Characters of text per input byte."""
        return self.text_length / self.byte_count if self.byte_count > 0 else 0.0
