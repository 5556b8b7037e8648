"""
Single-pass SIP URI scanner.

Implements RFC 3261 Section 25.1 SIP-URI / SIPS-URI recognition as an
explicit state machine over a cursor index:

    SCHEME → USERINFO → HOST → PORT → PARAMS → HEADERS → ACCEPT

Each state method validates its field, records the span it covered and
returns the next state. Any violation raises a ParseError subclass, which
ends the scan; no partial URI ever escapes.

    SIP-URI          =  "sip:" [ userinfo ] hostport uri-parameters [ headers ]
    SIPS-URI         =  "sips:" [ userinfo ] hostport uri-parameters [ headers ]
    userinfo         =  ( user / telephone-subscriber ) [ ":" password ] "@"
    hostport         =  host [ ":" port ]
    host             =  hostname / IPv4address / IPv6reference
"""

from __future__ import annotations

import typing
from enum import Enum, auto

from ._chars import (
    is_alpha,
    is_alphanum,
    is_hdrchar,
    is_hex,
    is_paramchar,
    is_password_char,
    is_user_unreserved,
)
from ._models import URI
from ._numeric import scan_decimal, scan_ipv4
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
from ._utils import (
    ESCAPE,
    HEADERS_START,
    HEX4_DIGITS,
    HOST_TERMINATORS,
    IPV6_CLOSE,
    IPV6_OPEN,
    MAX_PORT,
    PARAMS_START,
    PORT_START,
    USERINFO_END,
    logger,
)


class _State(Enum):
    """Scanner states, one per URI field plus the accepting state."""

    SCHEME = auto()
    USERINFO = auto()
    HOST = auto()
    PORT = auto()
    PARAMS = auto()
    HEADERS = auto()
    ACCEPT = auto()


# ============================================================================
# Scanner
# ============================================================================


class URIScanner:
    """
    Cursor-driven recognizer for one SIP URI.

    A scanner is bound to a single input and used once; create a new one
    per parse. Field boundaries are kept as (start, end) offsets into the
    input and only sliced when the URI is built.
    """

    __slots__ = ("data", "limit", "cursor", "scheme", "_host_start", "_spans")

    def __init__(self, data: str) -> None:
        self.data = data
        self.limit = len(data)
        self.cursor = 0
        self.scheme: Scheme | None = None
        self._host_start = 0
        self._spans: dict[str, tuple[int, int]] = {}

    def run(self) -> URI:
        """
        Drive the state machine to completion.

        Returns:
            The fully populated URI

        Raises:
            ParseError: On the first grammar violation
        """
        state = _State.SCHEME
        while state is not _State.ACCEPT:
            state = self._TRANSITIONS[state](self)
        return self._build()

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _fail(
        self, error: type[ParseError], reason: str, position: int
    ) -> typing.NoReturn:
        raise error(reason, position, self.data)

    def _check_escape(self, pos: int) -> int:
        """Validate the escape starting at ``pos`` and return the offset past it."""
        end = pos + 3
        if (
            end > self.limit
            or not is_hex(self.data[pos + 1])
            or not is_hex(self.data[pos + 2])
        ):
            self._fail(InvalidEscape, "'%' must be followed by two hex digits", pos)
        return end

    def _slice(self, name: str) -> str:
        span = self._spans.get(name)
        if span is None:
            return ""
        return self.data[span[0] : span[1]]

    def _build(self) -> URI:
        return URI(
            scheme=typing.cast(Scheme, self.scheme),
            hostport=self._slice("hostport"),
            userinfo=self._slice("userinfo"),
            params=self._slice("params"),
            headers=self._slice("headers"),
        )

    # ------------------------------------------------------------------
    # States
    # ------------------------------------------------------------------

    def _scan_scheme(self) -> _State:
        for scheme in Scheme:
            if self.data.startswith(scheme.prefix):
                self.scheme = scheme
                self.cursor = len(scheme.prefix)
                return _State.USERINFO
        self._fail(InvalidScheme, "invalid scheme, expected 'sip:' or 'sips:'", 0)

    def _scan_userinfo(self) -> _State:
        """
        Capture ``user [":" password] "@"`` when the input holds an ``@``.

        The first ``@`` after the scheme decides: ``@`` is not allowed
        unescaped anywhere past the host, so everything before it must be
        userinfo. This makes ``alice;day=tuesday@atlanta.com`` a user
        containing ``;`` rather than a host followed by params. An ``@``
        inside a leading IPv6 reference is left to the host recognizer.
        """
        search_from = self.cursor
        if self.data.startswith(IPV6_OPEN, search_from):
            close = self.data.find(IPV6_CLOSE, search_from)
            if close == -1:
                return _State.HOST
            search_from = close + 1

        at = self.data.find(USERINFO_END, search_from)
        if at == -1:
            return _State.HOST

        data = self.data
        start = pos = self.cursor
        in_password = False
        while pos < at:
            c = data[pos]
            if c == ESCAPE:
                pos = self._check_escape(pos)
                continue
            if c == PORT_START and not in_password:
                if pos == start:
                    self._fail(InvalidUserinfo, "empty user before ':'", pos)
                in_password = True
            elif in_password:
                if not is_password_char(c):
                    self._fail(
                        InvalidUserinfo, f"invalid character {c!r} in password", pos
                    )
            elif not is_user_unreserved(c):
                self._fail(InvalidUserinfo, f"invalid character {c!r} in user", pos)
            pos += 1

        if at == start:
            self._fail(InvalidUserinfo, "empty user before '@'", at)

        self._spans["userinfo"] = (start, at)
        self.cursor = at + 1
        return _State.HOST

    def _scan_host(self) -> _State:
        start = self._host_start = self.cursor
        if start >= self.limit:
            self._fail(Truncated, "missing host", start)

        if self.data[start] == IPV6_OPEN:
            end = self._scan_ipv6(start)
        else:
            length = scan_ipv4(self.data, start)
            end = start + length if length is not None else -1
            # A dotted quad followed by more host text is a hostname
            if end == -1 or (
                end < self.limit and self.data[end] not in HOST_TERMINATORS
            ):
                end = self._scan_hostname(start)

        if end < self.limit and self.data[end] not in HOST_TERMINATORS:
            self._fail(
                InvalidHost, f"invalid character {self.data[end]!r} in host", end
            )
        self.cursor = end
        return _State.PORT

    def _scan_hostname(self, start: int) -> int:
        """
        Scan ``*( domainlabel "." ) toplabel [ "." ]`` and return its end.

        domainlabel = alphanum / alphanum *( alphanum / "-" ) alphanum
        toplabel    = ALPHA / ALPHA *( alphanum / "-" ) alphanum
        """
        data = self.data
        pos = label_start = top_start = start
        while pos < self.limit:
            c = data[pos]
            if is_alphanum(c):
                pos += 1
            elif c == "-":
                if pos == label_start:
                    self._fail(InvalidHost, "host label starts with '-'", pos)
                pos += 1
            elif c == ".":
                if pos == label_start:
                    self._fail(InvalidHost, "empty host label", pos)
                if data[pos - 1] == "-":
                    self._fail(InvalidHost, "host label ends with '-'", pos - 1)
                top_start = label_start
                pos += 1
                label_start = pos
            else:
                break

        if pos == start:
            c = data[pos]
            if c in HOST_TERMINATORS:
                self._fail(InvalidHost, "empty host", pos)
            self._fail(InvalidHost, f"invalid character {c!r} in host", pos)

        # The last label has no trailing dot
        if label_start < pos:
            if data[pos - 1] == "-":
                self._fail(InvalidHost, "host label ends with '-'", pos - 1)
            top_start = label_start

        if not is_alpha(data[top_start]):
            self._fail(
                InvalidHost, "top-level label must start with a letter", top_start
            )
        return pos

    def _scan_ipv6(self, start: int) -> int:
        """
        Scan ``"[" IPv6address "]"`` and return the offset past the bracket.

        IPv6address = hexpart [ ":" IPv4address ]
        hexpart     = hexseq / hexseq "::" [ hexseq ] / "::" [ hexseq ]
        hexseq      = hex4 *( ":" hex4 )
        hex4        = 1*4HEXDIG
        """
        data = self.data
        limit = self.limit
        first = pos = start + 1

        compressed = data.startswith("::", pos)
        after_compression = compressed
        if compressed:
            pos += 2

        while True:
            if pos >= limit:
                self._fail(Truncated, "unterminated IPv6 reference", limit)
            c = data[pos]
            if c == IPV6_CLOSE:
                if pos == first:
                    self._fail(InvalidIPv6, "empty IPv6 reference", pos)
                if not after_compression:
                    self._fail(InvalidIPv6, "IPv6 reference ends with ':'", pos)
                return pos + 1

            run = pos
            while run < limit and is_hex(data[run]):
                run += 1

            if run < limit and data[run] == ".":
                if pos == first:
                    self._fail(
                        InvalidIPv6, "IPv4 part must follow a hex part", pos
                    )
                length = scan_ipv4(data, pos)
                if length is None:
                    self._fail(InvalidIPv6, "invalid IPv4 part in IPv6 reference", pos)
                pos += length
                if pos >= limit:
                    self._fail(Truncated, "unterminated IPv6 reference", limit)
                if data[pos] != IPV6_CLOSE:
                    self._fail(
                        InvalidIPv6,
                        f"invalid character {data[pos]!r} after IPv4 part",
                        pos,
                    )
                return pos + 1

            if run == pos:
                self._fail(
                    InvalidIPv6, f"invalid character {c!r} in IPv6 reference", pos
                )
            if run - pos > HEX4_DIGITS:
                self._fail(InvalidIPv6, "hex group longer than four digits", pos)

            pos = run
            if pos >= limit:
                self._fail(Truncated, "unterminated IPv6 reference", limit)
            c = data[pos]
            if c == IPV6_CLOSE:
                return pos + 1
            if c != ":":
                self._fail(
                    InvalidIPv6, f"invalid character {c!r} in IPv6 reference", pos
                )
            if data.startswith("::", pos):
                if compressed:
                    self._fail(InvalidIPv6, "'::' may appear only once", pos)
                compressed = after_compression = True
                pos += 2
            else:
                after_compression = False
                pos += 1

    def _scan_port(self) -> _State:
        pos = self.cursor
        if pos >= self.limit or self.data[pos] != PORT_START:
            self._spans["hostport"] = (self._host_start, pos)
            return _State.ACCEPT if pos >= self.limit else _State.PARAMS

        first = pos + 1
        value, end = scan_decimal(self.data, first)
        if end == first:
            if first >= self.limit:
                self._fail(InvalidPort, "missing port after ':'", first)
            self._fail(
                InvalidPort, f"invalid character {self.data[first]!r} in port", first
            )
        if value > MAX_PORT:
            self._fail(InvalidPort, f"port {self.data[first:end]} out of range", first)
        if end < self.limit and self.data[end] not in (PARAMS_START, HEADERS_START):
            self._fail(
                InvalidPort, f"invalid character {self.data[end]!r} in port", end
            )

        self._spans["hostport"] = (self._host_start, end)
        self.cursor = end
        return _State.PARAMS if end < self.limit else _State.ACCEPT

    def _scan_params(self) -> _State:
        pos = self.cursor
        if pos >= self.limit:
            return _State.ACCEPT
        if self.data[pos] == HEADERS_START:
            return _State.HEADERS

        data = self.data
        start = pos = pos + 1
        while pos < self.limit:
            c = data[pos]
            if c == HEADERS_START:
                break
            if c == ESCAPE:
                pos = self._check_escape(pos)
                continue
            if not is_paramchar(c):
                self._fail(InvalidParams, f"invalid character {c!r} in params", pos)
            pos += 1

        if pos == start:
            if pos >= self.limit:
                self._fail(Truncated, "missing params after ';'", pos)
            self._fail(InvalidParams, "empty params", pos)

        self._spans["params"] = (start, pos)
        self.cursor = pos
        return _State.HEADERS if pos < self.limit else _State.ACCEPT

    def _scan_headers(self) -> _State:
        data = self.data
        start = pos = self.cursor + 1
        while pos < self.limit:
            c = data[pos]
            if c == ESCAPE:
                pos = self._check_escape(pos)
                continue
            if not is_hdrchar(c):
                self._fail(InvalidHeader, f"invalid character {c!r} in headers", pos)
            pos += 1

        if pos == start:
            self._fail(Truncated, "missing headers after '?'", pos)

        self._spans["headers"] = (start, pos)
        self.cursor = pos
        return _State.ACCEPT

    _TRANSITIONS: typing.ClassVar[
        dict[_State, typing.Callable[[URIScanner], _State]]
    ] = {
        _State.SCHEME: _scan_scheme,
        _State.USERINFO: _scan_userinfo,
        _State.HOST: _scan_host,
        _State.PORT: _scan_port,
        _State.PARAMS: _scan_params,
        _State.HEADERS: _scan_headers,
    }


# ============================================================================
# Parser
# ============================================================================


class URIParser:
    """
    Parser for SIP and SIPS URIs.

    Handles:
    - ``sip:`` and ``sips:`` schemes
    - Optional userinfo with password
    - Hostname, IPv4 and bracketed IPv6 hosts with optional port
    - Opaque params and headers sections
    """

    @staticmethod
    def parse(data: str | bytes, encoding: str = "utf-8") -> URI:
        """
        Parse a SIP URI into its raw components.

        Args:
            data: URI text without surrounding whitespace or framing
            encoding: Character encoding used when ``data`` is bytes

        Returns:
            URI instance

        Raises:
            ParseError: If the input does not conform to the grammar

        Example:
            >>> uri = URIParser.parse("sip:alice@192.0.2.4:8899")
            >>> uri.hostport
            '192.0.2.4:8899'
        """
        if not isinstance(data, (str, bytes)):
            raise TypeError("data must be str or bytes")

        try:
            if isinstance(data, bytes):
                try:
                    data = data.decode(encoding)
                except UnicodeDecodeError as e:
                    text = data.decode(encoding, errors="replace")
                    raise ParseError(
                        f"undecodable byte 0x{data[e.start]:02x}", e.start, text
                    ) from e
            return URIScanner(data).run()
        except ParseError as e:
            logger.debug(f"Rejected SIP URI: {e}")
            raise


def parse(data: str | bytes, encoding: str = "utf-8") -> URI:
    """Parse a SIP URI. Shortcut for ``URIParser.parse``."""
    return URIParser.parse(data, encoding=encoding)


__all__ = [
    "URIScanner",
    "URIParser",
    "parse",
]
