"""
services/record_locator.py

Responsibility: Resolves the Cloudflare zone id for a domain and the record
for an FQDN/type pair within that zone.
Does NOT: compare addresses or write records.
"""

from __future__ import annotations

import logging
from typing import Any

from cloudflare_ddns_helper.cloudflare.cloudflare_client import CloudflareClient
from cloudflare_ddns_helper.cloudflare.dns_record import DnsRecord
from cloudflare_ddns_helper.exceptions import RecordNotFoundError, ZoneNotFoundError

logger = logging.getLogger(__name__)


def _first_result(body: dict[str, Any]) -> dict[str, Any] | None:
    """
    Returns the first entry of a Cloudflare "result" list that carries an id.

    Order is the one Cloudflare returned; nothing is re-sorted.
    """
    result = body.get("result")
    if not isinstance(result, list):
        return None
    for item in result:
        if isinstance(item, dict) and item.get("id"):
            return item
    return None


class RecordLocator:
    """
    Looks up the provider-internal identifiers needed for an update.

    The two lookups must run in order: the record query is scoped to the
    zone id returned by the first one.

    Collaborators:
        - CloudflareClient: authenticated transport
    """

    def __init__(self, client: CloudflareClient) -> None:
        self._client = client

    async def find_zone_id(self, domain: str) -> str:
        """
        Returns the id of the zone named ``domain``.

        Raises:
            ZoneNotFoundError: If Cloudflare returns no matching zone.
            TransportError, DnsProviderError: On request failure.
        """
        body = await self._client.request("GET", "/zones", params={"name": domain})

        zone = _first_result(body)
        if zone is None:
            raise ZoneNotFoundError(f"Could not detect zone ID for domain: {domain}")

        zone_id = str(zone["id"])
        logger.debug("Zone ID for %s: %s", domain, zone_id)
        return zone_id

    async def find_record(self, zone_id: str, fqdn: str, record_type: str) -> DnsRecord:
        """
        Returns the first ``record_type`` record named ``fqdn`` in the zone.

        Raises:
            RecordNotFoundError: If Cloudflare returns no matching record.
            TransportError, DnsProviderError: On request failure.
        """
        body = await self._client.request(
            "GET",
            f"/zones/{zone_id}/dns_records",
            params={"name": fqdn, "type": record_type},
        )

        raw = _first_result(body)
        if raw is None:
            raise RecordNotFoundError(f"Could not detect record ID for host: {fqdn}")

        record = DnsRecord.from_api(raw)
        logger.debug("Record ID for %s: %s", fqdn, record.id)
        if record.name.lower() != fqdn.lower() or record.type != record_type:
            logger.warning(
                "Cloudflare returned %s record %s for a %s lookup of %s; using it anyway",
                record.type,
                record.name,
                record_type,
                fqdn,
            )
        return record
