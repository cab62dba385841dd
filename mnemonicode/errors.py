"""
Decode errors.

Encoding is total, so every error here comes from turning text back into
bytes. All of them derive from DecodeError (a ValueError) and carry the
group/position of the offending token when the decoder knows it.
"""

from typing import Optional, Sequence

__all__ = [
    'DecodeError',
    'UnknownWord',
    'AmbiguousWord',
    'MalformedGrouping',
    'ValueOutOfRange',
]


class DecodeError(ValueError):
    """Base class for text that does not correspond to valid encoded data."""

    reason = "Invalid encoding"

    def __init__(self, detail: Optional[str] = None, *, token: Optional[str] = None,
                 group: Optional[int] = None, position: Optional[int] = None):
        self.detail = detail
        self.token = token
        self.group = group
        self.position = position
        super().__init__(self._format())

    def _format(self) -> str:
        parts = [self.reason]
        if self.token is not None:
            parts.append(f"{self.token!r}")
        if self.group is not None:
            where = f"group {self.group}"
            if self.position is not None:
                where += f", word {self.position}"
            parts.append(f"at {where}")
        message = " ".join(parts)
        if self.detail:
            message += f": {self.detail}"
        return message

    def locate(self, group: int, position: Optional[int] = None) -> 'DecodeError':
        """Attach group/word position to an error raised without context."""
        self.group = group
        self.position = position
        self.args = (self._format(),)
        return self


class UnknownWord(DecodeError):
    """Token matches no dictionary word, exactly or by unique prefix."""

    reason = "Unrecognized word"


class AmbiguousWord(DecodeError):
    """Token is a prefix of more than one dictionary word."""

    reason = "Ambiguous word"

    def __init__(self, detail: Optional[str] = None, *, candidates: Sequence[str] = (),
                 **kwargs):
        self.candidates = tuple(candidates)
        if detail is None and self.candidates:
            shown = ", ".join(self.candidates[:5])
            if len(self.candidates) > 5:
                shown += f" (+{len(self.candidates) - 5} more)"
            detail = "could be " + shown
        super().__init__(detail, **kwargs)


class MalformedGrouping(DecodeError):
    """Text cannot be split into well-formed word groups."""

    reason = "Malformed grouping"


class ValueOutOfRange(DecodeError):
    """A group's words recompose to a value too large for its chunk."""

    reason = "Value out of range"
