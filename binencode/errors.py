"""Exception types raised by binencode."""

import re
from typing import Any, Optional


class EncodeError(Exception):
    """Base class for all binencode errors."""


class FormatError(EncodeError, ValueError):
    """Encoded text is not structurally valid for its encoding.

    The message is the reason, followed by "at position N" when a position is
    given and the reason does not already name it.

    Attributes:
        reason: Human-readable description of the problem.
        position: Zero-based index of the offending character, or None when
                  the problem is not tied to a single character (e.g. length).
    """

    def __init__(self, reason: str, position: Optional[int] = None):
        self.reason = reason
        self.position = position

        message = reason
        if position is not None and not re.search(rf"\bposition {position}\b", reason):
            message = f"{reason} at position {position}"
        super().__init__(message)


class UnsupportedEncodeTypeError(EncodeError, TypeError):
    """The requested encode type has no registered codec."""

    def __init__(self, encode_type: Any):
        self.encode_type = encode_type
        super().__init__(f"invalid encode type {encode_type!r}")
