"""
Services layer - application orchestration.
"""

from mnemonicode.services.codec import MnemonicCodec

# Provide consistent naming
Codec = MnemonicCodec

__all__ = [
    'MnemonicCodec',
    # Aliases
    'Codec',
]
