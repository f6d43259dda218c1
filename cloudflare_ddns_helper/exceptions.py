"""
exceptions.py

Responsibility: Defines all custom exception classes used across the helper.
Does NOT: contain business logic, logging, or HTTP handling.

Every exception here is terminal for the invocation. The CLI maps all of
them to the single UPDATE_FAILED exit status; the specific kind is only
visible in the log message.
"""

from __future__ import annotations


class DdnsError(Exception):
    """Base class for every failure the helper knows how to report."""


class InvalidArgumentsError(DdnsError):
    """
    Raised by the input validator when the invocation is malformed.

    Covers a wrong number of positional arguments, an empty required
    argument, or a flag that is not an integer.
    """


class TransportError(DdnsError):
    """
    Raised by CloudflareClient when a request never produced a usable
    HTTP response: DNS resolution, TLS, connection or timeout failures,
    and non-2xx status codes.
    """


class DnsProviderError(DdnsError):
    """
    Raised by CloudflareClient when Cloudflare answered but reported a
    failure, i.e. the JSON body's top-level "success" flag is not true or
    the body is not JSON at all.
    """


class ZoneNotFoundError(DdnsError):
    """Raised when no zone id could be found for the configured domain."""


class RecordNotFoundError(DdnsError):
    """Raised when no A/AAAA record id could be found for the FQDN."""


class UpdateVerificationError(DnsProviderError):
    """
    Raised when the record replace call returned but Cloudflare did not
    confirm it with success=true.
    """
