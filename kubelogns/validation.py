"""
Input validation and sanitization for Kubelogns.

This module provides validation functions for the command-line inputs that make
up a RunConfig. Values are trimmed and checked before the run starts so that a
bad flag fails fast, before any pod is touched.

Key Functions:
- validate_namespace: Validates a namespace name (RFC 1123 label)
- validate_output_name: Validates the output base file name
- validate_upload_endpoint: Validates the upload endpoint URL
- validate_expires: Validates the upload expiry hint
- validate_fuzzy_pattern: Validates the approximate pod name pattern

All validation functions raise appropriate exceptions (InvalidPatternError,
ConfigurationError) with descriptive error messages when validation fails.

Example:
    ```python
    try:
        namespace = validate_namespace("prod")
        endpoint = validate_upload_endpoint("https://paste.example.com")
    except (InvalidPatternError, ConfigurationError) as e:
        print(f"Validation failed: {e}")
    ```
"""

import re
from typing import Optional
from urllib.parse import urlparse

from .constants import MAX_NAMESPACE_LENGTH
from .exceptions import InvalidPatternError, ConfigurationError

_NAMESPACE_RE = re.compile(r"^[a-z0-9]([-a-z0-9]*[a-z0-9])?$")


def validate_namespace(namespace: str) -> str:
    """
    Validate a Kubernetes namespace name.

    Namespaces are RFC 1123 labels: lowercase alphanumerics and '-', starting
    and ending with an alphanumeric, at most 63 characters.

    Args:
        namespace: Namespace name to validate

    Returns:
        str: The validated and trimmed namespace

    Raises:
        ConfigurationError: If the namespace is empty or not a valid label

    Example:
        ```python
        validate_namespace(" prod ")  # Returns "prod"
        validate_namespace("Prod")    # Raises ConfigurationError
        ```
    """
    if not namespace or not namespace.strip():
        raise ConfigurationError("Namespace cannot be empty")

    namespace = namespace.strip()
    if len(namespace) > MAX_NAMESPACE_LENGTH or not _NAMESPACE_RE.match(namespace):
        raise ConfigurationError(f"Invalid namespace name: {namespace!r}")
    return namespace


def validate_output_name(name: Optional[str]) -> Optional[str]:
    """
    Validate the output base file name.

    The base name becomes part of a relative path, so it may not contain path
    separators and may not start with a dot (the directory name is everything
    before the first dot and would be empty).

    Args:
        name: Output base file name, or None/empty for no file output

    Returns:
        Optional[str]: The trimmed name, or None when no name was given

    Raises:
        ConfigurationError: If the name contains a path separator or starts with a dot
    """
    if name is None or not name.strip():
        return None

    name = name.strip()
    if "/" in name or "\\" in name:
        raise ConfigurationError(f"Output name must be a plain file name, got: {name!r}")
    if name.startswith("."):
        raise ConfigurationError(f"Output name cannot start with '.', got: {name!r}")
    return name


def validate_upload_endpoint(url: Optional[str]) -> Optional[str]:
    """
    Validate the upload endpoint URL.

    Args:
        url: Endpoint URL, or None/empty to use the public default

    Returns:
        Optional[str]: The trimmed URL, or None when no endpoint was given

    Raises:
        ConfigurationError: If the URL is not an absolute http(s) URL

    Example:
        ```python
        validate_upload_endpoint("https://0x0.st")  # Returns "https://0x0.st"
        validate_upload_endpoint("0x0.st")          # Raises ConfigurationError
        ```
    """
    if url is None or not url.strip():
        return None

    url = url.strip()
    parsed = urlparse(url)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise ConfigurationError(f"Upload endpoint must be an http(s) URL, got: {url!r}")
    return url


def validate_expires(expires: int) -> int:
    """Validate the expiry hint sent with uploads (positive integer)."""
    if not isinstance(expires, int) or isinstance(expires, bool) or expires < 1:
        raise ConfigurationError(f"Expiry must be a positive integer, got: {expires}")
    return expires


def validate_fuzzy_pattern(pattern: Optional[str]) -> str:
    """
    Validate the approximate pod name pattern.

    Unlike a regex there is no syntax to check: any string is a valid
    subsequence pattern and is passed through untouched, surrounding spaces
    included. A pattern that cannot match any pod (" ", or one longer than
    every pod name) simply selects nothing.

    Args:
        pattern: Pattern text, or None/empty to select every pod

    Returns:
        str: The pattern unchanged ("" disables filtering)

    Raises:
        InvalidPatternError: If the pattern contains control characters
    """
    if not pattern:
        return ""

    if any(not ch.isprintable() for ch in pattern):
        raise InvalidPatternError(f"Pattern contains non-printable characters: {pattern!r}")
    return pattern
