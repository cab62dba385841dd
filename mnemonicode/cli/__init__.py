"""
Command line interface for mnemonicode.
"""

from mnemonicode.cli.commands import decode, encode, explain

__all__ = ['encode', 'decode', 'explain']
