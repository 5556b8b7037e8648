"""
Character classes from the RFC 3261 Section 25.1 grammar.

Every predicate takes a single character and answers whether it belongs to
the named class. Characters outside US-ASCII never match.

    alphanum         =  ALPHA / DIGIT
    unreserved       =  alphanum / mark
    mark             =  "-" / "_" / "." / "!" / "~" / "*" / "'" / "(" / ")"
    user-unreserved  =  "&" / "=" / "+" / "$" / "," / ";" / "?" / "/"
    password         =  *( unreserved / escaped / "&" / "=" / "+" / "$" / "," )
    paramchar        =  param-unreserved / unreserved / escaped
    param-unreserved =  "[" / "]" / "/" / ":" / "&" / "+" / "$"
    hnv-unreserved   =  "[" / "]" / "/" / "?" / ":" / "+" / "$"
"""

from __future__ import annotations

MARK = frozenset("-_.!~*'()")
USER_UNRESERVED = frozenset("&=+$,;?/")
PASSWORD_EXTRA = frozenset("&=+$,")
PARAM_UNRESERVED = frozenset("[]/:&+$")
HNV_UNRESERVED = frozenset("[]/?:+$")


def is_alpha(c: str) -> bool:
    return ("a" <= c <= "z") or ("A" <= c <= "Z")


def is_digit(c: str) -> bool:
    return "0" <= c <= "9"


def is_alphanum(c: str) -> bool:
    return is_alpha(c) or is_digit(c)


def is_hex(c: str) -> bool:
    return is_digit(c) or ("a" <= c <= "f") or ("A" <= c <= "F")


def is_unreserved(c: str) -> bool:
    return is_alphanum(c) or c in MARK


def is_user_unreserved(c: str) -> bool:
    """Check for a character allowed unescaped in the user part."""
    return is_unreserved(c) or c in USER_UNRESERVED


def is_password_char(c: str) -> bool:
    """Check for a character allowed unescaped in the password part."""
    return is_unreserved(c) or c in PASSWORD_EXTRA


def is_paramchar(c: str) -> bool:
    """
    Check for a character allowed unescaped in the params section.

    Besides ``paramchar`` this admits ``=`` and ``;``, which separate names,
    values and successive parameters inside the opaque params span.
    """
    return is_unreserved(c) or c in PARAM_UNRESERVED or c == "=" or c == ";"


def is_hdrchar(c: str) -> bool:
    """
    Check for a character allowed unescaped in the headers section.

    Besides ``hnv-unreserved`` this admits ``=`` and ``&``, which separate
    names, values and successive headers inside the opaque headers span.
    """
    return is_unreserved(c) or c in HNV_UNRESERVED or c == "=" or c == "&"


__all__ = [
    "is_alpha",
    "is_digit",
    "is_alphanum",
    "is_hex",
    "is_unreserved",
    "is_user_unreserved",
    "is_password_char",
    "is_paramchar",
    "is_hdrchar",
]
