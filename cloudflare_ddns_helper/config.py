"""
config.py

Responsibility: Reads the helper's runtime settings from the environment.
Does NOT: parse the positional invocation arguments (see services/validator.py).
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass

from cloudflare_ddns_helper.cloudflare.cloudflare_client import CLOUDFLARE_BASE, DEFAULT_TIMEOUT

logger = logging.getLogger(__name__)

ENV_API_BASE = "CLOUDFLARE_API_BASE"
ENV_TIMEOUT = "CLOUDFLARE_DDNS_TIMEOUT"
ENV_LOG_FILE = "CLOUDFLARE_DDNS_LOG_FILE"
ENV_SYSLOG = "CLOUDFLARE_DDNS_SYSLOG"


@dataclass(frozen=True)
class Settings:
    """Environment-driven settings for one invocation."""

    api_base: str = CLOUDFLARE_BASE
    timeout: float = DEFAULT_TIMEOUT
    log_file: str | None = None
    syslog: bool = False


def _parse_timeout(raw: str | None) -> float:
    if not raw:
        return DEFAULT_TIMEOUT
    try:
        timeout = float(raw)
    except ValueError:
        logger.warning("Ignoring invalid %s=%r, using %ss", ENV_TIMEOUT, raw, DEFAULT_TIMEOUT)
        return DEFAULT_TIMEOUT
    if timeout <= 0:
        logger.warning("Ignoring non-positive %s=%r, using %ss", ENV_TIMEOUT, raw, DEFAULT_TIMEOUT)
        return DEFAULT_TIMEOUT
    return timeout


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """
    Builds Settings from environment variables, falling back to defaults.

    Args:
        environ: Mapping to read from; defaults to os.environ.

    Returns:
        A frozen Settings instance.
    """
    env = os.environ if environ is None else environ
    return Settings(
        api_base=env.get(ENV_API_BASE) or CLOUDFLARE_BASE,
        timeout=_parse_timeout(env.get(ENV_TIMEOUT)),
        log_file=env.get(ENV_LOG_FILE) or None,
        syslog=env.get(ENV_SYSLOG, "0").strip() == "1",
    )
