"""One-shot dynamic DNS helper that keeps a Cloudflare A/AAAA record in sync."""

__version__ = "1.0.0"
