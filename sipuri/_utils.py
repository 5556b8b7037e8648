"""Utilities and constants for SIP URI scanning."""

import logging
from rich.console import Console
from rich.logging import RichHandler

# Rich Console for pretty printing
console = Console()

# Configure logging with RichHandler
logging.basicConfig(
    level=logging.INFO,
    format="%(message)s",
    datefmt="[%X]",
    handlers=[RichHandler(console=console, rich_tracebacks=True, show_path=False)],
)

# Get logger for the package
logger = logging.getLogger("sipuri")

# Field delimiters (RFC 3261 Section 19.1.1)
USERINFO_END = "@"
PORT_START = ":"
PARAMS_START = ";"
HEADERS_START = "?"
ESCAPE = "%"
IPV6_OPEN = "["
IPV6_CLOSE = "]"

# Characters that end the host part of hostport
HOST_TERMINATORS = frozenset(PORT_START + PARAMS_START + HEADERS_START)

# Numeric limits
MAX_PORT = 0xFFFF
MAX_OCTET = 0xFF
IPV4_OCTETS = 4
IPV4_OCTET_DIGITS = 3
HEX4_DIGITS = 4
