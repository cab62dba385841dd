"""
mnemonicode - binary data as speakable words

Encodes arbitrary bytes as a sequence of dictionary words that survive lossy
human channels (read aloud, typed by hand, spelled over a phone) and decodes
them back, tolerating case changes and abbreviated words.

    >>> import mnemonicode
    >>> mnemonicode.encode(bytes([101, 2, 240, 6, 108, 11, 20, 97]))
    'digital-apollo-aroma--rival-artist-rebel'
    >>> list(mnemonicode.decode('digi-apol-arom--riva-arti-rebe'))
    [101, 2, 240, 6, 108, 11, 20, 97]

Architecture:
- Models: Pure data structures (ByteChunk, WordGroup, EncodingStats)
- Protocols: Interface contracts (EncoderProtocol)
- Context: Domain implementations (Dictionary, Encoding)
- Services: Application orchestration (MnemonicCodec)
- CLI: User interface (encode, decode, explain commands)

Word list and algorithm by Oren Tirosh (mnemonicode).
"""

__version__ = "1.0.0"
__license__ = "MIT"

# Core layers
from mnemonicode import models, protocols
from mnemonicode.errors import (
    AmbiguousWord, DecodeError, MalformedGrouping, UnknownWord, ValueOutOfRange,
)
from mnemonicode.context.dictionary import DEFAULT_DICTIONARY, WordDictionary
from mnemonicode.context.encoding import abbreviate, decode, encode, encode_with_format
from mnemonicode.config import CodecSettings
from mnemonicode.services import MnemonicCodec, Codec

__all__ = [
    'models',
    'protocols',
    'DecodeError',
    'UnknownWord',
    'AmbiguousWord',
    'MalformedGrouping',
    'ValueOutOfRange',
    'DEFAULT_DICTIONARY',
    'WordDictionary',
    'encode',
    'encode_with_format',
    'decode',
    'abbreviate',
    'CodecSettings',
    'MnemonicCodec',
    'Codec',
]
