"""
Decimal and dotted-decimal literal recognizers.

Shared by the host recognizer (IPv4 literals, including the IPv4 tail of an
IPv6 reference) and the port recognizer.
"""

from __future__ import annotations

from typing import Optional

from ._chars import is_digit
from ._utils import IPV4_OCTET_DIGITS, IPV4_OCTETS, MAX_OCTET


def scan_decimal(
    data: str, start: int = 0, max_digits: Optional[int] = None
) -> tuple[int, int]:
    """
    Scan a run of decimal digits.

    Args:
        data: Text to scan
        start: Offset of the first candidate digit
        max_digits: Stop after this many digits (unbounded if None)

    Returns:
        Tuple of (value, end). When no digit is present at ``start`` the
        result is ``(0, start)``.

    Example:
        >>> scan_decimal("5060;transport=tcp")
        (5060, 4)
    """
    limit = len(data)
    if max_digits is not None:
        limit = min(limit, start + max_digits)

    value = 0
    pos = start
    while pos < limit and is_digit(data[pos]):
        value = value * 10 + (ord(data[pos]) - 48)
        pos += 1
    return value, pos


def scan_ipv4(data: str, start: int = 0) -> Optional[int]:
    """
    Match an IPv4 literal at ``start``.

    IPv4address = 1*3DIGIT "." 1*3DIGIT "." 1*3DIGIT "." 1*3DIGIT, with each
    octet no greater than 255. Whatever follows the fourth octet is left to
    the caller.

    Returns:
        Number of characters consumed, or None when there is no match.

    Example:
        >>> scan_ipv4("10.0.0.121?header=foo")
        10
        >>> scan_ipv4("8.8.8.256") is None
        True
    """
    pos = start
    for octet in range(IPV4_OCTETS):
        if octet > 0:
            if pos >= len(data) or data[pos] != ".":
                return None
            pos += 1
        value, end = scan_decimal(data, pos, IPV4_OCTET_DIGITS)
        if end == pos or value > MAX_OCTET:
            return None
        pos = end
    # A fourth digit means the octet was longer than 1*3DIGIT
    if pos < len(data) and is_digit(data[pos]):
        return None
    return pos - start


__all__ = ["scan_decimal", "scan_ipv4"]
