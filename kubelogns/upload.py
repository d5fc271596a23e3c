"""
Uploads to a paste/upload endpoint.

Files are sent as a multipart/form-data POST with a "file" part holding the
raw bytes and an "expires" text field, the protocol of 0x0.st and its
self-hosted clones. The endpoint answers with the shareable URL as plain
text.

Key Components:
- UploadSink: Uploads files to one endpoint and returns their URLs

When no endpoint is configured the public 0x0.st instance is used and a
warning is printed and logged once per run, since anything sent there is public.

Example:
    ```python
    sink = UploadSink("https://paste.example.com", WarningState())
    url = sink.upload("logs/default_logs.txt", expires=1)
    ```
"""

import os
from typing import Optional, TextIO

import requests

from . import console
from .constants import (
    DEFAULT_UPLOAD_ENDPOINT, UPLOAD_EXPIRES_FIELD, UPLOAD_FILE_FIELD, USER_AGENT
)
from .exceptions import UploadError
from .log import log
from .models import WarningState


class UploadSink:
    """
    Uploads files to a paste/upload endpoint.

    Usable as a context manager; a session created by the sink is closed on exit.

    Attributes:
        configured_endpoint: Endpoint given by the user, None for the default
        warnings: Run-wide flag recording whether the default endpoint warning was shown
        session: requests session used for the POSTs
        stream: Console stream for the default endpoint warning (stdout when None)
    """

    def __init__(self, endpoint: Optional[str], warnings: WarningState,
                 session: Optional[requests.Session] = None, stream: Optional[TextIO] = None):
        self.configured_endpoint = endpoint
        self.warnings = warnings
        self._owns_session = session is None
        self.session = session or requests.Session()
        self.stream = stream

    def __enter__(self) -> "UploadSink":
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    def close(self) -> None:
        """Close the session if this sink created it."""
        if self._owns_session:
            self.session.close()

    @property
    def endpoint(self) -> str:
        return self.configured_endpoint or DEFAULT_UPLOAD_ENDPOINT

    def _warn_default(self) -> None:
        if self.configured_endpoint or self.warnings.default_endpoint_warned:
            return
        console.warn(
            f"No upload server provided, using default {DEFAULT_UPLOAD_ENDPOINT} (This UPLOADS Everything!!!)",
            self.stream
        )
        log.warning(
            f"[upload] No upload server provided, using default {DEFAULT_UPLOAD_ENDPOINT} "
            "(a public service: everything uploaded is public)"
        )
        self.warnings.default_endpoint_warned = True

    def upload(self, path: str, expires: int) -> str:
        """
        Upload a file and return the URL the endpoint answered with.

        Args:
            path: Local file to upload
            expires: Expiry hint sent in the "expires" field

        Returns:
            str: The response body, trimmed

        Raises:
            UploadError: On I/O, network or HTTP errors
        """
        self._warn_default()
        url = self.endpoint
        try:
            with open(path, 'rb') as fh:
                resp = self.session.post(
                    url,
                    files={UPLOAD_FILE_FIELD: (os.path.basename(path), fh)},
                    data={UPLOAD_EXPIRES_FIELD: str(expires)},
                    headers={'User-Agent': USER_AGENT},
                )
            resp.raise_for_status()
        except requests.RequestException as e:
            raise UploadError(f"Upload of {path} to {url} failed: {e}") from e
        except OSError as e:
            raise UploadError(f"Cannot read {path} for upload: {e}") from e

        log.debug(f"[upload] {path} -> {url} status={resp.status_code}")
        return resp.text.strip()
