import pytest

from flupcas import (
    NO_REPLY_REASON,
    Failure,
    StartElement,
    Success,
    XmlParseError,
    interpret,
    iter_events,
)
from tests.utils import FAILURE_BODY, SUCCESS_BODY


def run(body):
    return interpret(iter_events([body]))


def test_success_reply():
    assert run(SUCCESS_BODY) == Success("alice")


def test_failure_reply_uses_code_not_text():
    assert run(FAILURE_BODY) == Failure("INVALID_TICKET")


def test_indented_success_reply():
    body = b"""<?xml version="1.0"?>
<cas:serviceResponse xmlns:cas="http://www.yale.edu/tp/cas">
    <cas:authenticationSuccess>
        <cas:user>bob</cas:user>
        <cas:proxyGrantingTicket>PGTIOU-84678-8a9d</cas:proxyGrantingTicket>
    </cas:authenticationSuccess>
</cas:serviceResponse>
"""
    assert run(body) == Success("bob")


def test_failure_code_found_among_other_attributes():
    body = (
        b'<cas:serviceResponse><cas:authenticationFailure lang="en" code="INVALID_SERVICE">'
        b"bad service</cas:authenticationFailure></cas:serviceResponse>"
    )
    assert run(body) == Failure("INVALID_SERVICE")


def test_failure_without_code_uses_first_attribute():
    body = b'<r><authenticationFailure reason="EXPIRED" x="y"/></r>'
    assert run(body) == Failure("EXPIRED")


def test_failure_without_attributes():
    body = b"<r><cas:authenticationFailure>nope</cas:authenticationFailure></r>"
    assert run(body) == Failure("")


def test_text_before_success_is_ignored():
    body = b"<r>noise<cas:authenticationSuccess><cas:user>carol</cas:user></cas:authenticationSuccess></r>"
    assert run(body) == Success("carol")


def test_neither_element_is_soft_failure():
    body = b"<cas:serviceResponse><cas:proxySuccess>x</cas:proxySuccess></cas:serviceResponse>"

    result = run(body)

    assert result == Failure(NO_REPLY_REASON)
    assert not result.authenticated


def test_empty_success_is_soft_failure():
    assert run(b"<r><authenticationSuccess/></r>") == Failure(NO_REPLY_REASON)


def test_malformed_reply_raises():
    with pytest.raises(XmlParseError):
        run(b"<cas:serviceResponse><cas:authenticationSuccess></cas:serviceResponse>")


def test_stops_at_first_identity():
    events = iter_events([SUCCESS_BODY])

    assert interpret(events) == Success("alice")
    # The closing tags were never consumed.
    assert next(events).local_name == "user"


def test_stops_at_failure_without_reading_further():
    def events():
        yield StartElement("cas:authenticationFailure", "authenticationFailure", [("code", "X")])
        raise AssertionError("read past the failure element")

    assert interpret(events()) == Failure("X")


def test_results_compare_by_kind_and_value():
    assert Success("x") == Success("x")
    assert Success("x") != Failure("x")
    assert Success("x").authenticated
    assert Success("x").identity == "x"
    assert Failure("r").reason == "r"
    with pytest.raises(AttributeError):
        Success("x").identity = "y"


def test_identity_split_across_chunks():
    chunks = [
        b"<cas:serviceResponse><cas:authenticationSuccess><cas:user>al",
        b"ice</cas:user></cas:authenticationSuccess></cas:serviceResponse>",
    ]

    assert interpret(iter_events(chunks)) == Success("alice")


def test_indentation_split_from_identity():
    chunks = [b"<r><authenticationSuccess>\n  ", b"  <user>  ", b"dave</user></authenticationSuccess></r>"]

    assert interpret(iter_events(chunks)) == Success("  dave")
