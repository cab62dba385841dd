"""
Protocols (interfaces) for mnemonicode components.

This module defines abstract contracts that implementations must follow.
"""

from abc import ABC, abstractmethod

__all__ = [
    'EncoderProtocol',
]


class EncoderProtocol(ABC):
    """Protocol for byte <-> text encoders."""

    @abstractmethod
    def encode(self, data: bytes) -> str:
        """
        Encode bytes as text.

        Args:
            data: Raw bytes

        Returns:
            Encoded text
        """
        pass

    @abstractmethod
    def decode(self, text: str) -> bytes:
        """
        Decode text back to the original bytes.

        Args:
            text: Encoded text

        Returns:
            Original bytes
        """
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """Return encoder name for logging."""
        pass
