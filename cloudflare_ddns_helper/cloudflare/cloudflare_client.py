"""
cloudflare/cloudflare_client.py

Responsibility: Sends authenticated requests to the Cloudflare v4 REST API
and unwraps its {"success": bool, "result": ...} envelope.
All Cloudflare HTTP calls are concentrated here — no other file may call the
Cloudflare API directly.
Does NOT: know about zones, records or the update decision; that lives in
services/record_locator.py and services/reconciler.py.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from cloudflare_ddns_helper.exceptions import DnsProviderError, TransportError

logger = logging.getLogger(__name__)

CLOUDFLARE_BASE = "https://api.cloudflare.com/client/v4"

DEFAULT_TIMEOUT = 30.0

# Longest slice of an unexpected response body quoted in an error message
_EXCERPT_LENGTH = 300

# NOTE: Binding the local socket to the wildcard address of one family is how
# httpx forces IPv4-only or IPv6-only connections (curl's -4 / -6).
_IPV4_LOCAL_ADDRESS = "0.0.0.0"
_IPV6_LOCAL_ADDRESS = "::"


def build_http_client(ipv6: bool, timeout: float = DEFAULT_TIMEOUT) -> httpx.AsyncClient:
    """
    Creates the httpx.AsyncClient used for one invocation.

    The transport is pinned to the same IP version as the record being
    managed: A records are reconciled over IPv4, AAAA records over IPv6.

    Args:
        ipv6: True to force IPv6 transport, False to force IPv4.
        timeout: Per-request timeout in seconds.

    Returns:
        A new httpx.AsyncClient; the caller must close it (use ``async with``).
    """
    local_address = _IPV6_LOCAL_ADDRESS if ipv6 else _IPV4_LOCAL_ADDRESS
    transport = httpx.AsyncHTTPTransport(local_address=local_address)
    return httpx.AsyncClient(transport=transport, timeout=timeout)


class CloudflareClient:
    """
    Thin authenticated transport for the Cloudflare DNS REST API (v4).

    All outbound requests go through the injected httpx.AsyncClient, making
    this class fully testable without real network calls (use respx.mock).
    Exactly one attempt is made per request; there is no retry logic.

    Collaborators:
        - httpx.AsyncClient: injected HTTP client; owned by the caller
    """

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        api_token: str,
        base_url: str = CLOUDFLARE_BASE,
    ) -> None:
        """
        Initialises the client with an HTTP client and a Cloudflare API token.

        Args:
            http_client: An open httpx.AsyncClient instance.
            api_token: A Cloudflare API token with "Edit zone DNS" permission.
            base_url: The versioned API root, without a trailing slash.
        """
        self._client = http_client
        self._base_url = base_url.rstrip("/")
        self._headers = {
            "Authorization": f"Bearer {api_token}",
            "Content-Type": "application/json",
        }

    async def request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, str] | None = None,
        json: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """
        Sends one authenticated request and returns the decoded JSON body.

        Args:
            method: HTTP verb ("GET", "PUT").
            path: Endpoint path relative to the API root, e.g. "/zones".
            params: Optional query-string parameters.
            json: Optional JSON request body.

        Returns:
            The parsed JSON response body as a dict, with success=true.

        Raises:
            TransportError: If the request could not be built or completed,
                            or the server answered with a non-2xx status
                            and no Cloudflare error envelope.
            DnsProviderError: If Cloudflare reports success=false (whatever
                              the HTTP status) or a 2xx body is not the
                              expected JSON envelope.
        """
        url = f"{self._base_url}{path}"
        try:
            request = self._client.build_request(
                method, url, headers=self._headers, params=params, json=json
            )
        except (httpx.InvalidURL, UnicodeEncodeError) as exc:
            raise TransportError(
                f"Could not build Cloudflare API request ({method} {url}): {exc}"
            ) from exc

        # Only the method and URL are logged; headers carry the bearer token.
        logger.debug("cmd: %s %s", method, request.url)
        if json is not None:
            logger.debug("data: %s", json)

        try:
            response = await self._client.send(request)
        except httpx.RequestError as exc:
            raise TransportError(
                f"Network error calling Cloudflare API ({method} {url}): {exc!r}"
            ) from exc

        try:
            body = response.json()
        except ValueError:
            body = None

        # NOTE: Cloudflare wraps all responses, including 4xx ones, in
        # {"success": bool, "errors": [...], "result": ...}
        if isinstance(body, dict) and body.get("success") is True and response.is_success:
            return body

        logger.debug("Response body: %s", response.text)
        if isinstance(body, dict) and "success" in body:
            raise DnsProviderError(
                f"Cloudflare responded with an error ({response.status_code}) "
                f"for {method} {url}. Errors: {body.get('errors', [])}"
            )
        if response.is_error:
            raise TransportError(
                f"Cloudflare API error {response.status_code} for {method} {url}: "
                f"{_excerpt(response.text)}"
            )
        raise DnsProviderError(
            f"Cloudflare returned an unexpected response for {method} {url}: "
            f"{_excerpt(response.text)}"
        )


def _excerpt(text: str) -> str:
    text = " ".join(text.split())
    if len(text) > _EXCERPT_LENGTH:
        return text[:_EXCERPT_LENGTH] + "..."
    return text
