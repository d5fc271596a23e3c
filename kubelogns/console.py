"""
Console output for Kubelogns.

Everything the tool produces for the user (pod log lines, upload URLs and the
INFO/WARN/ERR status lines) is printed to stdout through these helpers. Colors are
used only when stdout is a terminal and NO_COLOR is not set.
"""

import os
import sys
from typing import Optional, TextIO

from .constants import (
    COLOR_BLUE, COLOR_GREEN, COLOR_PURPLE, COLOR_RED, COLOR_RESET, COLOR_YELLOW,
    CONSOLE_SEPARATOR, ENV_NO_COLOR
)


def _out(stream: Optional[TextIO]) -> TextIO:
    return stream if stream is not None else sys.stdout


def use_color(stream: Optional[TextIO] = None) -> bool:
    stream = _out(stream)
    if os.getenv(ENV_NO_COLOR):
        return False
    isatty = getattr(stream, 'isatty', None)
    return bool(isatty and isatty())


def paint(text: str, color: str, stream: Optional[TextIO] = None) -> str:
    if not use_color(stream):
        return text
    return f"{color}{text}{COLOR_RESET}"


def info(message: str, stream: Optional[TextIO] = None) -> None:
    print(f"{paint('INFO', COLOR_GREEN, stream)}: {message}", file=_out(stream))


def warn(message: str, stream: Optional[TextIO] = None) -> None:
    print(f"{paint('WARN', COLOR_YELLOW, stream)}: {message}", file=_out(stream))


def error(message: str, stream: Optional[TextIO] = None) -> None:
    print(f"{paint('ERR', COLOR_RED, stream)}: {message}", file=_out(stream))


def log_line(pod_name: str, line: str, stream: Optional[TextIO] = None) -> None:
    """Print one pod log line tagged with the pod name."""
    print(f"{paint(f'[{pod_name}]', COLOR_PURPLE, stream)}: {line}", file=_out(stream))


def separator(stream: Optional[TextIO] = None) -> None:
    print(CONSOLE_SEPARATOR, file=_out(stream))


def upload_url(endpoint: str, pod_name: str, url: str, stream: Optional[TextIO] = None) -> None:
    """Print the URL a pod's logs were uploaded to."""
    print(
        f"{paint(endpoint, COLOR_BLUE, stream)} - {paint(f'( {pod_name} )', COLOR_PURPLE, stream)}: {url}",
        file=_out(stream)
    )
