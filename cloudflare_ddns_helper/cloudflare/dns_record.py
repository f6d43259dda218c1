"""
cloudflare/dns_record.py

Responsibility: Defines the DnsRecord value object and the record types the
helper manages.
Does NOT: make HTTP calls or implement any provider logic.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

# ---------------------------------------------------------------------------
# Record types — A for IPv4, AAAA for IPv6
# ---------------------------------------------------------------------------

RECORD_TYPE_A = "A"
RECORD_TYPE_AAAA = "AAAA"


def record_type_for(ipv6: bool) -> str:
    """
    Returns the record type matching the requested address family.

    Args:
        ipv6: True for IPv6 (AAAA), False for IPv4 (A).

    Returns:
        "AAAA" or "A".
    """
    return RECORD_TYPE_AAAA if ipv6 else RECORD_TYPE_A


# ---------------------------------------------------------------------------
# Value object — stable shape for a located record
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class DnsRecord:
    """
    Represents a single DNS A/AAAA record as returned by Cloudflare.

    Only the fields the reconciliation needs are kept; everything else in
    the API payload (ttl, proxied, meta...) is ignored.
    """

    # Cloudflare-assigned unique identifier for the record
    id: str

    # Fully-qualified DNS name, e.g. "home.example.com"
    name: str

    # Record type, "A" or "AAAA"
    type: str

    # Raw content published for the record; may be empty
    content: str

    @classmethod
    def from_api(cls, raw: dict[str, Any]) -> DnsRecord:
        """
        Converts a raw Cloudflare API record dict into a typed DnsRecord.

        Args:
            raw: A single record object from a Cloudflare "result" list.

        Returns:
            A DnsRecord populated from the raw dict.
        """
        content = raw.get("content")
        return cls(
            id=str(raw["id"]),
            name=str(raw.get("name", "")),
            type=str(raw.get("type", "")),
            content=content if isinstance(content, str) else "",
        )
