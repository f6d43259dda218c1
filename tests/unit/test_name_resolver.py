"""
tests/unit/test_name_resolver.py

Unit tests for services/name_resolver.py.
"""

from __future__ import annotations

import pytest

from cloudflare_ddns_helper.services.name_resolver import build_fqdn


@pytest.mark.parametrize("domain", ["example.com", "sub.example.co.uk", "localdomain"])
def test_apex_sentinel_yields_domain(domain):
    assert build_fqdn(domain, "@") == domain


@pytest.mark.parametrize(
    "domain, host, expected",
    [
        ("example.com", "home", "home.example.com"),
        ("example.com", "a.b", "a.b.example.com"),
        ("example.com", "example", "example.example.com"),
    ],
)
def test_label_is_prefixed_to_domain(domain, host, expected):
    assert build_fqdn(domain, host) == expected


def test_label_equal_to_domain_yields_domain():
    """A host equal to the domain is treated as the apex, not doubled."""
    assert build_fqdn("example.com", "example.com") == "example.com"
