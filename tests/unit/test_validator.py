"""
tests/unit/test_validator.py

Unit tests for services/validator.py.
"""

from __future__ import annotations

import pytest

from cloudflare_ddns_helper.exceptions import InvalidArgumentsError
from cloudflare_ddns_helper.services.validator import UpdateRequest, validate_arguments


def _args(**overrides):
    values = {
        "domain": "example.com",
        "host": "@",
        "token": "token123456",
        "local_ip": "203.0.113.5",
        "force_update": "0",
        "verbose": "0",
        "ipv6": "0",
    }
    values.update(overrides)
    return list(values.values())


def test_validate_returns_fields_unchanged():
    """Valid arguments produce an UpdateRequest with the same strings."""
    request = validate_arguments(_args(host="home"))

    assert request == UpdateRequest(
        domain="example.com",
        host="home",
        token="token123456",
        local_ip="203.0.113.5",
        force_update=False,
        verbose=False,
        ipv6=False,
    )
    assert request.record_type == "A"


def test_validate_ipv6_selects_aaaa():
    request = validate_arguments(_args(local_ip="2001:db8::2", ipv6="1"))
    assert request.ipv6 is True
    assert request.record_type == "AAAA"


def test_validate_flags_follow_integer_semantics():
    """force and ipv6 are on for any non-zero value; verbose only for 1."""
    request = validate_arguments(_args(force_update="2", verbose="2", ipv6="0"))
    assert request.force_update is True
    assert request.verbose is False

    request = validate_arguments(_args(force_update="1", verbose="1"))
    assert request.force_update is True
    assert request.verbose is True


@pytest.mark.parametrize("count", [0, 6, 8])
def test_validate_rejects_wrong_argument_count(count):
    args = (_args() + ["extra"])[:count]
    with pytest.raises(InvalidArgumentsError, match="Incorrect number of arguments"):
        validate_arguments(args)


@pytest.mark.parametrize(
    "field, message",
    [
        ("domain", "Domain is empty"),
        ("host", "Host is empty"),
        ("token", "API token is empty"),
        ("local_ip", "Local IP is empty"),
    ],
)
def test_validate_rejects_empty_required_value(field, message):
    with pytest.raises(InvalidArgumentsError, match=message):
        validate_arguments(_args(**{field: ""}))


@pytest.mark.parametrize("field", ["force_update", "verbose", "ipv6"])
def test_validate_rejects_non_integer_flag(field):
    with pytest.raises(InvalidArgumentsError, match=field):
        validate_arguments(_args(**{field: "yes"}))


def test_validate_warns_on_family_mismatch(caplog):
    """A candidate that does not look like the requested family is only a warning."""
    caplog.set_level("WARNING", logger="cloudflare_ddns_helper.services.validator")

    request = validate_arguments(_args(local_ip="2001:db8::2", ipv6="0"))

    assert request.local_ip == "2001:db8::2"
    assert "does not look like an IPv4 address" in caplog.text


def test_validate_rejects_non_ascii_token():
    """Tokens travel in an HTTP header, so they must be ASCII."""
    with pytest.raises(InvalidArgumentsError, match="non-ASCII"):
        validate_arguments(_args(token="tökén"))
