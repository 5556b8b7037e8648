"""Tests for the URI model, schemes and parse errors."""

import dataclasses
import pickle

import pytest

from sipuri import (
    URI,
    InvalidHost,
    InvalidPort,
    ParseError,
    Scheme,
    Truncated,
    parse,
)


class TestScheme:
    """Tests for the Scheme enum."""

    def test_prefix(self):
        assert Scheme.SIP.prefix == "sip:"
        assert Scheme.SIPS.prefix == "sips:"

    def test_is_secure(self):
        assert Scheme.SIPS.is_secure
        assert not Scheme.SIP.is_secure


class TestURI:
    """Tests for the URI result model."""

    def test_absent_components_are_empty(self):
        """Test components without a delimiter default to empty strings."""
        uri = parse("sips:gateway.com")

        assert uri == URI(scheme=Scheme.SIPS, hostport="gateway.com")
        assert uri.userinfo == ""
        assert uri.params == ""
        assert uri.headers == ""

    def test_str_reassembles_components(self):
        """Test str() places each component behind its delimiter."""
        uri = URI(
            scheme=Scheme.SIP,
            userinfo="alice",
            hostport="atlanta.com:5060",
            params="transport=tcp",
            headers="subject=hi",
        )

        assert str(uri) == "sip:alice@atlanta.com:5060;transport=tcp?subject=hi"

    def test_is_immutable(self):
        """Test a parsed URI cannot be modified."""
        uri = parse("sip:alice@atlanta.com")

        with pytest.raises(dataclasses.FrozenInstanceError):
            uri.hostport = "biloxi.com"

    def test_equal_inputs_give_equal_results(self):
        """Test parsing is a pure function of the input."""
        data = "sip:alice@atlanta.com;transport=tcp"

        assert parse(data) == parse(data)
        assert hash(parse(data)) == hash(parse(data))


class TestParseError:
    """Tests for the parse error hierarchy."""

    @pytest.mark.parametrize("error", [InvalidHost, InvalidPort, Truncated])
    def test_subclasses_share_base(self, error):
        assert issubclass(error, ParseError)
        assert issubclass(error, ValueError)

    def test_attributes(self):
        error = InvalidHost("empty host", 4, "sip:?foo")

        assert error.reason == "empty host"
        assert error.position == 4
        assert error.data == "sip:?foo"
        assert str(error) == "Invalid uri 'sip:?foo': empty host at position 4"

    def test_pickle_round_trip(self):
        """Test errors survive pickling with their details."""
        error = pickle.loads(pickle.dumps(InvalidPort("missing port", 16, "x")))

        assert isinstance(error, InvalidPort)
        assert error.reason == "missing port"
        assert error.position == 16
        assert error.data == "x"
