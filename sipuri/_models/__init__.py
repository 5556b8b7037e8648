"""
SIP URI Models Package.

This package contains the result model produced by the URI scanner.
"""

from ._uri import URI

__all__ = [
    "URI",
]
