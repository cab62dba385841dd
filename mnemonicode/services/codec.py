"""
MnemonicCodec: encode/decode orchestration

Ties the dictionary, encoder and decoder to a CodecSettings instance so
callers (the CLI, tests, other programs) configure presentation once:

    codec = MnemonicCodec(CodecSettings(format_template="x x x\\n", strict=False))
    text = codec.encode(payload)
    assert codec.decode(text) == payload

The codec holds no mutable state; one instance can serve any number of
threads.
"""

import logging
import time
from typing import List, Optional, Tuple

from mnemonicode.config import CodecSettings
from mnemonicode.context.dictionary import DEFAULT_DICTIONARY, WordDictionary
from mnemonicode.context.encoding import (
    abbreviate, decode_groups, encode_groups, render,
)
from mnemonicode.models import EncodingStats, WordGroup
from mnemonicode.protocols import EncoderProtocol

logger = logging.getLogger(__name__)


class MnemonicCodec(EncoderProtocol):
    """Bytes <-> words codec bound to a dictionary and settings."""

    def __init__(self, settings: Optional[CodecSettings] = None,
                 dictionary: Optional[WordDictionary] = None):
        self.settings = settings or CodecSettings()
        self.dictionary = dictionary or DEFAULT_DICTIONARY

    @property
    def name(self) -> str:
        return "mnemonicode"

    def encode(self, data: bytes) -> str:
        return self.encode_with_stats(data)[0]

    def encode_with_stats(self, data: bytes, verbose: bool = False) -> Tuple[str, EncodingStats]:
        """
        Encode bytes and report size statistics

        Args:
            data: Bytes to encode
            verbose: Log a summary at INFO level

        Returns:
            (text, EncodingStats)
        """
        start = time.perf_counter()
        groups = encode_groups(data, self.dictionary)
        words = [word for group in groups for word in group.words]
        text = render(words, self.settings.format_template)
        if self.settings.abbreviate:
            text = abbreviate(text, self.dictionary)

        stats = EncodingStats(
            byte_count=len(data),
            word_count=len(words),
            group_count=len(groups),
            text_length=len(text),
            groups=groups,
        )
        elapsed = time.perf_counter() - start
        logger.log(
            logging.INFO if verbose else logging.DEBUG,
            "%s: encoded %d bytes as %d words in %d groups (%.4fs)",
            self.name, stats.byte_count, stats.word_count, stats.group_count, elapsed,
        )
        return text, stats

    def decode(self, text: str) -> bytes:
        return self.decode_with_stats(text)[0]

    def decode_with_stats(self, text: str, verbose: bool = False) -> Tuple[bytes, EncodingStats]:
        """
        Decode text and report size statistics

        Raises:
            DecodeError: text is not a valid encoding
        """
        start = time.perf_counter()
        groups, data = decode_groups(text, self.settings.strict, self.dictionary)
        stats = EncodingStats(
            byte_count=len(data),
            word_count=sum(len(g) for g in groups),
            group_count=len(groups),
            text_length=len(text),
        )
        elapsed = time.perf_counter() - start
        logger.log(
            logging.INFO if verbose else logging.DEBUG,
            "%s: decoded %d words into %d bytes (%.4fs)",
            self.name, stats.word_count, stats.byte_count, elapsed,
        )
        return data, stats

    def explain(self, data: bytes) -> List[WordGroup]:
        """Word groups for data, one per chunk (for display)."""
        return encode_groups(data, self.dictionary)
