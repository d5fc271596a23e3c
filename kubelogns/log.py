"""
Logging setup for Kubelogns.

Diagnostics go through the 'kubelogns' logger to stderr; the collected pod
logs and upload URLs are the tool's output and are printed to stdout by
the console module instead.
"""

import logging
import os
from typing import Optional

from .constants import DEFAULT_LOG_LEVEL, ENV_LOG_LEVEL, LOG_FORMAT

log = logging.getLogger('kubelogns')


def configure_logging(level: Optional[str] = None) -> None:
    """Configure root logging (level via argument, KUBELOGNS_LOG_LEVEL env or default INFO)."""
    name = (level or os.getenv(ENV_LOG_LEVEL, DEFAULT_LOG_LEVEL)).upper()
    logging.basicConfig(
        level=getattr(logging, name, logging.INFO),
        format=LOG_FORMAT
    )


# Helper for safe exception logging
def log_exception(msg: str, exc: Exception, level: int = logging.WARNING) -> None:
    """Log an exception with proper formatting."""
    log.log(level, f"{msg}: {exc.__class__.__name__}: {exc}")
