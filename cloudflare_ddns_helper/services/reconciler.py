"""
services/reconciler.py

Responsibility: Runs one reconciliation of a Cloudflare A/AAAA record
against a candidate address — locate, compare, and replace when needed.
Does NOT: parse invocation arguments, configure logging, or own the HTTP
client lifecycle.
"""

from __future__ import annotations

import enum
import logging
from typing import Any

from cloudflare_ddns_helper.cloudflare.cloudflare_client import CloudflareClient
from cloudflare_ddns_helper.exceptions import DdnsError, DnsProviderError, UpdateVerificationError
from cloudflare_ddns_helper.logger import mask_token
from cloudflare_ddns_helper.services.name_resolver import build_fqdn
from cloudflare_ddns_helper.services.record_locator import RecordLocator
from cloudflare_ddns_helper.services.state_comparator import extract_remote_ip, needs_update
from cloudflare_ddns_helper.services.validator import UpdateRequest

logger = logging.getLogger(__name__)


class Outcome(enum.IntEnum):
    """
    Terminal result of one invocation.

    Values are the exit statuses expected by the gargoyle ddns_updater.
    """

    FAILED = 3
    NOT_NEEDED = 4
    SUCCESSFUL = 5


class Reconciler:
    """
    Makes the published record match the candidate address.

    Every step runs sequentially and any DdnsError aborts the invocation
    with Outcome.FAILED. There is no retry; the external scheduler simply
    runs the helper again later.

    Collaborators:
        - CloudflareClient: authenticated transport for all three calls
        - RecordLocator: zone and record lookups
    """

    def __init__(self, client: CloudflareClient) -> None:
        self._client = client
        self._locator = RecordLocator(client)

    async def reconcile(self, request: UpdateRequest) -> Outcome:
        """
        Runs the full check-and-update cycle for one record.

        Args:
            request: The validated invocation.

        Returns:
            Outcome.NOT_NEEDED, Outcome.SUCCESSFUL or Outcome.FAILED.
        """
        try:
            return await self._reconcile(request)
        except DdnsError as exc:
            logger.error("%s", exc)
            return Outcome.FAILED

    async def _reconcile(self, request: UpdateRequest) -> Outcome:
        logger.debug("API Token: starts with %s", mask_token(request.token))
        logger.debug(
            "Zone: %s, Record: %s, Local IP: %s",
            request.domain,
            request.host,
            request.local_ip,
        )

        fqdn = build_fqdn(request.domain, request.host)
        logger.debug("FQDN: %s", fqdn)

        zone_id = await self._locator.find_zone_id(request.domain)
        record = await self._locator.find_record(zone_id, fqdn, request.record_type)

        remote_ip = extract_remote_ip(record, request.record_type)
        logger.debug("Remote IP for %s: %s", fqdn, remote_ip or "")

        if not needs_update(remote_ip, request.local_ip, request.force_update):
            logger.debug("Remote IP = Local IP, no update needed")
            return Outcome.NOT_NEEDED
        if remote_ip == request.local_ip:
            logger.debug("Remote IP = Local IP, force update requested")

        await self._replace_record(zone_id, record.id, request.record_type, fqdn, request.local_ip)
        logger.info("Remote IP for %s updated to %s", fqdn, request.local_ip)
        return Outcome.SUCCESSFUL

    async def _replace_record(
        self,
        zone_id: str,
        record_id: str,
        record_type: str,
        fqdn: str,
        local_ip: str,
    ) -> None:
        """
        Replaces the whole record with the candidate address.

        Raises:
            UpdateVerificationError: If Cloudflare does not confirm the write.
            TransportError: If the request itself fails.
        """
        payload: dict[str, Any] = {
            "id": zone_id,
            "type": record_type,
            "name": fqdn,
            "content": local_ip,
        }
        try:
            await self._client.request(
                "PUT", f"/zones/{zone_id}/dns_records/{record_id}", json=payload
            )
        except DnsProviderError as exc:
            raise UpdateVerificationError(
                f"Could not verify update of {fqdn} to {local_ip}: {exc}"
            ) from exc
