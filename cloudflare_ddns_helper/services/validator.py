"""
services/validator.py

Responsibility: Turns the seven positional invocation arguments into a
validated UpdateRequest before any network call is made.
Does NOT: touch the network or filesystem, build the FQDN, or print usage
(the CLI does that when validation fails).
"""

from __future__ import annotations

import logging
import re
from collections.abc import Sequence
from dataclasses import dataclass

from cloudflare_ddns_helper.cloudflare.dns_record import record_type_for
from cloudflare_ddns_helper.exceptions import InvalidArgumentsError

logger = logging.getLogger(__name__)

ARGUMENT_COUNT = 7

# Loose family checks for the candidate address; same shapes the comparator
# uses to read the remote value.
IPV4_PATTERN = re.compile(r"[0-9]{1,3}\.[0-9]{1,3}\.[0-9]{1,3}\.[0-9]{1,3}")
IPV6_PATTERN = re.compile(
    r"(?:[0-9A-Fa-f]{1,4}:)+(?:[0-9A-Fa-f]{1,4})?(?::[0-9A-Fa-f]{1,4})+"
)


@dataclass(frozen=True)
class UpdateRequest:
    """A validated invocation of the helper."""

    # Base zone name, e.g. "example.com"
    domain: str

    # Record label, or "@" for the zone apex
    host: str

    # Cloudflare API token with "Edit zone DNS" permission
    token: str

    # Candidate address to publish
    local_ip: str

    force_update: bool
    verbose: bool
    ipv6: bool

    @property
    def record_type(self) -> str:
        return record_type_for(self.ipv6)


def _parse_flag(name: str, value: str) -> int:
    try:
        return int(value.strip())
    except ValueError as exc:
        raise InvalidArgumentsError(
            f"{name} must be an integer (0 or 1), got {value!r}"
        ) from exc


def validate_arguments(args: Sequence[str]) -> UpdateRequest:
    """
    Validates the positional arguments of one invocation.

    Args:
        args: Exactly seven strings: domain, host, token, local_ip,
              force_update, verbose, ipv6.

    Returns:
        The UpdateRequest with the string fields unchanged.

    Raises:
        InvalidArgumentsError: If the count is wrong, a required value is
            empty, or a flag is not an integer.
    """
    if len(args) != ARGUMENT_COUNT:
        raise InvalidArgumentsError(
            "Incorrect number of arguments supplied "
            f"(expected {ARGUMENT_COUNT}, got {len(args)})"
        )

    domain, host, token, local_ip, force_update, verbose, ipv6 = args

    if not domain:
        raise InvalidArgumentsError("Domain is empty (expected a domain name)")
    if not host:
        raise InvalidArgumentsError("Host is empty (expected '@' or a record name)")
    if not token:
        raise InvalidArgumentsError("API token is empty (expected a bearer auth token)")
    # HTTP header values must be ASCII; Cloudflare tokens always are
    if not token.isascii():
        raise InvalidArgumentsError("API token contains non-ASCII characters")
    if not local_ip:
        raise InvalidArgumentsError("Local IP is empty")

    # verbose is only on for exactly 1; the other two flags are on for any non-zero value
    request = UpdateRequest(
        domain=domain,
        host=host,
        token=token,
        local_ip=local_ip,
        force_update=_parse_flag("force_update", force_update) != 0,
        verbose=_parse_flag("verbose", verbose) == 1,
        ipv6=_parse_flag("ipv6", ipv6) != 0,
    )

    pattern = IPV6_PATTERN if request.ipv6 else IPV4_PATTERN
    if not pattern.fullmatch(local_ip):
        logger.warning(
            "Local IP %s does not look like an %s address",
            local_ip,
            "IPv6" if request.ipv6 else "IPv4",
        )

    return request
