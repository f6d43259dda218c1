"""
cli.py

Responsibility: Command-line entry point. Validates the positional
arguments, configures logging, runs one reconciliation and returns the
ddns_updater exit status.
Does NOT: contain reconciliation logic — that is delegated entirely to
Reconciler and its collaborators.

Usage:
    cloudflare-ddns-helper DOMAIN HOST TOKEN LOCAL_IP FORCE_UPDATE VERBOSE IPV6
"""

from __future__ import annotations

import asyncio
import logging
import sys
from collections.abc import Sequence

from cloudflare_ddns_helper.cloudflare.cloudflare_client import CloudflareClient, build_http_client
from cloudflare_ddns_helper.config import Settings, load_settings
from cloudflare_ddns_helper.exceptions import InvalidArgumentsError
from cloudflare_ddns_helper.logger import SOURCE_TAG, configure_logging
from cloudflare_ddns_helper.services.reconciler import Outcome, Reconciler
from cloudflare_ddns_helper.services.validator import UpdateRequest, validate_arguments

logger = logging.getLogger(__name__)

USAGE = (
    f"{SOURCE_TAG} usage:\n"
    '\tdomain\t\tdomain name (e.g., "example.com")\n'
    '\thost\t\tDNS A/AAAA record name (e.g., "@" or "subdomain")\n'
    '\ttoken\t\tCloudflare API Token with "Edit zone DNS" permissions (not the Global API Key)\n'
    "\tlocal_ip\tIP address to be sent to Cloudflare\n"
    "\tforce_update\t1 to force update of IP, 0 to exit if already matched\n"
    "\tverbose\t\t0 for low output or 1 for verbose logging\n"
    "\tipv6\t\t0 for IPv4 output or 1 for IPv6\n"
)


async def run(request: UpdateRequest, settings: Settings) -> Outcome:
    """
    Opens the HTTP client for this invocation and runs one reconciliation.

    The client is closed on every exit path, including failures.

    Args:
        request: The validated invocation.
        settings: Environment-driven settings.

    Returns:
        The invocation Outcome.
    """
    async with build_http_client(request.ipv6, timeout=settings.timeout) as http_client:
        client = CloudflareClient(http_client, request.token, base_url=settings.api_base)
        return await Reconciler(client).reconcile(request)


def main(argv: Sequence[str] | None = None) -> int:
    """
    Runs the helper once.

    Args:
        argv: Positional arguments, without the program name; defaults to
              sys.argv[1:].

    Returns:
        Outcome.FAILED (3), Outcome.NOT_NEEDED (4) or Outcome.SUCCESSFUL (5).
    """
    args = list(sys.argv[1:] if argv is None else argv)
    settings = load_settings()
    configure_logging(verbose=False, log_file=settings.log_file, syslog=settings.syslog)

    try:
        request = validate_arguments(args)
    except InvalidArgumentsError as exc:
        logger.error("%s. Exiting", exc)
        sys.stdout.write(USAGE)
        return int(Outcome.FAILED)

    if request.verbose:
        configure_logging(verbose=True, log_file=settings.log_file, syslog=settings.syslog)

    outcome = asyncio.run(run(request, settings))
    return int(outcome)


if __name__ == "__main__":
    sys.exit(main())
