"""
Constants and configuration for Kubelogns.

This module contains the configuration constants used throughout the Kubelogns
application, including upload defaults, pacing, output layout and console
styling.

Constants are organized by category:
- Version: Version and author strings printed by --version
- Upload: Default endpoint, expiry hint and pacing between uploads
- Output: Placeholder base name and directory permissions
- Log capture: Sentinel text used when a pod's logs cannot be fetched
- Logging: Default log level and environment variable names
- Console: ANSI color codes
"""

from . import __version__, __author__

# Version
VERSION = __version__
AUTHOR = __author__

# Upload
DEFAULT_UPLOAD_ENDPOINT = "https://0x0.st"
DEFAULT_UPLOAD_EXPIRES = 1  # hours, as understood by 0x0.st
UPLOAD_PACING_SECONDS = 1.0
UPLOAD_FILE_FIELD = "file"
UPLOAD_EXPIRES_FIELD = "expires"
USER_AGENT = f"kubelogns/{VERSION}"

# Output
PLACEHOLDER_BASE_NAME = "tmp"
OUTPUT_DIR_MODE = 0o755
CONSOLE_SEPARATOR = "---"

# Log capture
LOG_FETCH_FAILED_TEXT = "Unable to get pod logs"

# Kubernetes
DEFAULT_NAMESPACE = "default"

# Logging
DEFAULT_LOG_LEVEL = "INFO"
LOG_FORMAT = "[%(asctime)s] %(levelname)s %(message)s"

# Environment variables
ENV_LOG_LEVEL = "KUBELOGNS_LOG_LEVEL"
ENV_UPLOAD_URL = "KUBELOGNS_UPLOAD_URL"
ENV_NO_COLOR = "NO_COLOR"

# Console colors
COLOR_RESET = "\033[0m"
COLOR_RED = "\033[31m"
COLOR_GREEN = "\033[32m"
COLOR_YELLOW = "\033[33m"
COLOR_BLUE = "\033[34m"
COLOR_PURPLE = "\033[35m"

# Input limits
MAX_NAMESPACE_LENGTH = 63
