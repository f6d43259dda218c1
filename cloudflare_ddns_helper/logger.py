"""
logger.py

Responsibility: Configures stdlib logging for one helper invocation and
provides the token-masking helper used in diagnostics.
Does NOT: decide what gets logged; modules log through
logging.getLogger(__name__) as usual.
"""

from __future__ import annotations

import logging
import logging.handlers
import os
import sys

# Fixed source identifier every log line is tagged with (logger -t ...)
SOURCE_TAG = "cloudflare-ddns-helper"

SYSLOG_ADDRESS = "/dev/log"

TOKEN_PREFIX_LENGTH = 7

_STREAM_FORMAT = f"{SOURCE_TAG}: %(levelname)s %(message)s"
_FILE_FORMAT = "[%(asctime)s] [%(levelname)s] %(message)s"
_FILE_DATEFMT = "%Y-%m-%d %H:%M:%S"

# NOTE: httpx/httpcore log request internals at DEBUG; keep them quiet even in
# verbose mode so nothing beyond our own request line reaches the log.
_NOISY_LOGGERS = ("httpx", "httpcore")

# Handlers added by configure_logging(), so a second call replaces them
# without touching handlers installed by anyone else.
_installed_handlers: list[logging.Handler] = []


def mask_token(token: str) -> str:
    """
    Returns only the first few characters of an API token.

    Args:
        token: The full bearer token.

    Returns:
        The token prefix, safe to write to logs.
    """
    return token[:TOKEN_PREFIX_LENGTH]


def configure_logging(
    verbose: bool,
    log_file: str | None = None,
    syslog: bool = False,
) -> None:
    """
    Installs the helper's handlers on the root logger.

    Verbose mode logs every step at DEBUG; otherwise only warnings and
    failures are emitted, matching a quiet cron job.

    Args:
        verbose: True to log every step.
        log_file: Optional path of a file to append log lines to.
        syslog: True to also send log lines to the local syslog socket.

    Returns:
        None
    """
    reset_logging()

    root = logging.getLogger()
    root.setLevel(logging.DEBUG if verbose else logging.WARNING)

    stream_handler = logging.StreamHandler(sys.stderr)
    stream_handler.setFormatter(logging.Formatter(_STREAM_FORMAT))
    _install(root, stream_handler)

    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(_FILE_FORMAT, datefmt=_FILE_DATEFMT))
        _install(root, file_handler)

    if syslog and os.path.exists(SYSLOG_ADDRESS):
        syslog_handler = logging.handlers.SysLogHandler(address=SYSLOG_ADDRESS)
        syslog_handler.ident = f"{SOURCE_TAG}: "
        syslog_handler.setFormatter(logging.Formatter("%(message)s"))
        _install(root, syslog_handler)

    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def reset_logging() -> None:
    """
    Removes and closes every handler previously installed by
    configure_logging().

    Returns:
        None
    """
    root = logging.getLogger()
    while _installed_handlers:
        handler = _installed_handlers.pop()
        root.removeHandler(handler)
        handler.close()


def _install(root: logging.Logger, handler: logging.Handler) -> None:
    root.addHandler(handler)
    _installed_handlers.append(handler)
