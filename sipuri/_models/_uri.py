"""
SIP URI result model.

The URI keeps every component as the raw slice of the input it was scanned
from: nothing is decoded, normalized or re-cased.
"""

from __future__ import annotations

from dataclasses import dataclass

from .._types import Scheme
from .._utils import HEADERS_START, PARAMS_START, USERINFO_END


@dataclass(frozen=True, slots=True)
class URI:
    """
    A SIP or SIPS URI split into its five raw components.

    Absent components are empty strings.

    Examples:
        >>> uri = URI.parse("sip:alice@atlanta.com;transport=tcp")
        >>> uri.userinfo, uri.hostport, uri.params
        ('alice', 'atlanta.com', 'transport=tcp')
        >>> str(uri)
        'sip:alice@atlanta.com;transport=tcp'
    """

    scheme: Scheme
    hostport: str
    userinfo: str = ""
    params: str = ""
    headers: str = ""

    @classmethod
    def parse(cls, data: str | bytes, encoding: str = "utf-8") -> URI:
        """
        Build a URI from a SIP URI string.

        Raises:
            ParseError: If the input does not conform to the grammar
        """
        from .._scanner import URIParser

        return URIParser.parse(data, encoding=encoding)

    def __str__(self) -> str:
        """Reassemble the URI from its raw components."""
        parts = [self.scheme.prefix]
        if self.userinfo:
            parts.append(self.userinfo + USERINFO_END)
        parts.append(self.hostport)
        if self.params:
            parts.append(PARAMS_START + self.params)
        if self.headers:
            parts.append(HEADERS_START + self.headers)
        return "".join(parts)


__all__ = ["URI"]
