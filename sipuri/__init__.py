"""sipuri - Strict single-pass SIP/SIPS URI parser for Python."""

from __future__ import annotations

# Scanner and parser
from ._scanner import URIParser, URIScanner, parse

# Result model
from ._models import URI

# Literal recognizers
from ._numeric import scan_decimal, scan_ipv4

# Types
from ._types import (
    InvalidEscape,
    InvalidHeader,
    InvalidHost,
    InvalidIPv6,
    InvalidParams,
    InvalidPort,
    InvalidScheme,
    InvalidUserinfo,
    ParseError,
    Scheme,
    Truncated,
)

# Utilities
from ._utils import MAX_PORT, console, logger

__version__ = "0.1.0"

__all__ = [
    # Parser - Main API
    "parse",
    "URIParser",
    "URIScanner",
    # Model
    "URI",
    "Scheme",
    # Recognizers
    "scan_decimal",
    "scan_ipv4",
    # Errors - Base class
    "ParseError",
    # Errors - Per field
    "InvalidScheme",
    "InvalidUserinfo",
    "InvalidHost",
    "InvalidIPv6",
    "InvalidPort",
    "InvalidParams",
    "InvalidHeader",
    "InvalidEscape",
    "Truncated",
    # Utilities - Console & Logging
    "console",
    "logger",
    # Constants
    "MAX_PORT",
    # Metadata
    "__version__",
]
