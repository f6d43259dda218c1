"""
services/state_comparator.py

Responsibility: Reads the address currently published in a record and
decides whether it differs from the candidate.
Does NOT: perform any I/O.
"""

from __future__ import annotations

from cloudflare_ddns_helper.cloudflare.dns_record import RECORD_TYPE_AAAA, DnsRecord
from cloudflare_ddns_helper.services.validator import IPV4_PATTERN, IPV6_PATTERN


def extract_remote_ip(record: DnsRecord, record_type: str) -> str | None:
    """
    Returns the first address of the expected family found in the record.

    Anything around the address (whitespace, stray punctuation) is dropped.
    An unreadable value yields None rather than an error so the caller
    falls through to an update.

    Args:
        record: The located record.
        record_type: "A" or "AAAA".

    Returns:
        The address string, or None if no match was found.
    """
    pattern = IPV6_PATTERN if record_type == RECORD_TYPE_AAAA else IPV4_PATTERN
    match = pattern.search(record.content)
    return match.group(0) if match else None


def needs_update(remote_ip: str | None, local_ip: str, force_update: bool) -> bool:
    """
    Returns False only when the remote value is known, equal to the local
    one, and no forced update was requested.
    """
    if remote_ip is None or force_update:
        return True
    return remote_ip != local_ip
