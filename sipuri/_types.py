"""
Type definitions for SIP URI scanning.

This module centralizes the URI scheme enumeration and the parse error
hierarchy raised by the scanner.
"""

from __future__ import annotations

from enum import Enum


# =============================================================================
# URI Schemes
# =============================================================================


class Scheme(Enum):
    """
    SIP URI schemes (RFC 3261 Section 19.1).

    The member value is the literal scheme name as it appears on the wire.
    """

    SIP = "sip"
    SIPS = "sips"

    @property
    def prefix(self) -> str:
        """Return the scheme literal including the trailing colon."""
        return f"{self.value}:"

    @property
    def is_secure(self) -> bool:
        """Check if the scheme requires TLS on every hop."""
        return self is Scheme.SIPS


# =============================================================================
# Parse Exceptions
# =============================================================================


class ParseError(ValueError):
    """
    Base exception for URI parse failures.

    Attributes:
        reason: Human-readable description of the violation
        position: Offset of the first offending character (``len(data)``
            when the input ended early)
        data: The input that was rejected
    """

    def __init__(self, reason: str, position: int, data: str = "") -> None:
        self.reason = reason
        self.position = position
        self.data = data
        super().__init__(f"Invalid uri '{data}': {reason} at position {position}")

    def __reduce__(self):
        return (type(self), (self.reason, self.position, self.data))


class InvalidScheme(ParseError):
    """Raised when the input does not start with ``sip:`` or ``sips:``."""

    pass


class InvalidUserinfo(ParseError):
    """Raised when the text before ``@`` is not a valid user[:password]."""

    pass


class InvalidHost(ParseError):
    """Raised when the host is empty or not a hostname or IPv4 literal."""

    pass


class InvalidIPv6(ParseError):
    """Raised when a bracketed IPv6 reference is malformed."""

    pass


class InvalidPort(ParseError):
    """Raised when the port is missing, non-numeric or above 65535."""

    pass


class InvalidParams(ParseError):
    """Raised when the params section holds a disallowed character."""

    pass


class InvalidHeader(ParseError):
    """Raised when the headers section holds a disallowed character."""

    pass


class InvalidEscape(ParseError):
    """Raised when ``%`` is not followed by two hex digits."""

    pass


class Truncated(ParseError):
    """Raised when the input ends where a field was still expected."""

    pass


# =============================================================================
# Re-exports for convenience
# =============================================================================

__all__ = [
    # Schemes
    "Scheme",
    # Exceptions
    "ParseError",
    "InvalidScheme",
    "InvalidUserinfo",
    "InvalidHost",
    "InvalidIPv6",
    "InvalidPort",
    "InvalidParams",
    "InvalidHeader",
    "InvalidEscape",
    "Truncated",
]
