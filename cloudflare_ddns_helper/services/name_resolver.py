"""
services/name_resolver.py

Responsibility: Builds the fully-qualified record name from the base domain
and the host label.
Does NOT: validate input or look anything up.
"""

from __future__ import annotations

APEX_SENTINEL = "@"


def build_fqdn(domain: str, host: str) -> str:
    """
    Returns the FQDN for a host label within a domain.

    "@" selects the zone apex. A host equal to the domain is also treated as
    the apex so "example.com" never becomes "example.com.example.com";
    callers should still prefer "@".

    Args:
        domain: Base zone name, e.g. "example.com".
        host: Record label, e.g. "home", or "@".

    Returns:
        e.g. "home.example.com", or "example.com" for the apex.
    """
    if host == APEX_SENTINEL or host == domain:
        return domain
    return f"{host}.{domain}"
