"""
Routing of captured pod logs to the run's output destination.

Every selected pod goes through the same destination, derived once from the
RunConfig:

- Console: the lines were echoed during capture; only a separator is printed.
- File: the logs are written to {dir}/{namespace}_{base_name}, where dir is
  the base name up to its first dot.
- FileAndUpload: as File, then the file is uploaded and its URL printed. A
  file written under the placeholder name is removed once its upload
  succeeded. Every upload attempt is followed by a pacing pause.

A directory or write failure is reported and ends the processing of that pod
only; there is nothing to upload for it.

Example:
    ```python
    router = OutputRouter(File("logs.txt"))
    outcome = router.route(record)
    # outcome.path == "logs/default_logs.txt"
    ```
"""

import os
from dataclasses import dataclass
from typing import Optional, TextIO, Tuple

from . import console
from .constants import OUTPUT_DIR_MODE
from .exceptions import DirectoryCreateError, FileWriteError, OutputError, UploadError
from .log import log, log_exception
from .models import Console, FileAndUpload, LogRecord, OutputDestination, UploadResult
from .pacing import RateLimiter
from .upload import UploadSink


@dataclass
class RouteOutcome:
    """
    What routing did for one pod.

    Attributes:
        path: Log file path, None in console mode
        written: The log file was written
        error: Directory or write failure, None otherwise
        upload: Upload outcome, None when no upload was attempted
        removed: The file was removed after a successful upload
    """
    path: Optional[str] = None
    written: bool = False
    error: Optional[OutputError] = None
    upload: Optional[UploadResult] = None
    removed: bool = False


def output_paths(base_name: str, namespace: str) -> Tuple[str, str]:
    """
    Derive the output directory and file path of a pod's logs.

    Example:
        ```python
        output_paths("logs.txt", "default")  # ("logs", "logs/default_logs.txt")
        output_paths("report", "default")    # ("report", "report/default_report")
        ```
    """
    dir_name = base_name.split(".", 1)[0]
    return dir_name, os.path.join(dir_name, f"{namespace}_{base_name}")


def write_log(dir_name: str, path: str, text: bytes) -> None:
    """
    Write log bytes verbatim to path, creating dir_name if needed.

    Raises:
        DirectoryCreateError: If dir_name cannot be created
        FileWriteError: If path cannot be written
    """
    try:
        os.makedirs(dir_name, mode=OUTPUT_DIR_MODE, exist_ok=True)
    except OSError as e:
        raise DirectoryCreateError(dir_name, e.strerror or str(e)) from e
    try:
        with open(path, 'wb') as fh:
            fh.write(text)
    except OSError as e:
        raise FileWriteError(path, e.strerror or str(e)) from e


class OutputRouter:
    """
    Applies one output destination to captured pod logs.

    Attributes:
        destination: Destination applied to every pod
        sink: Upload sink, required for FileAndUpload
        limiter: Pacing applied after each upload attempt
        stream: Console stream (stdout when None)
    """

    def __init__(self, destination: OutputDestination, sink: Optional[UploadSink] = None,
                 limiter: Optional[RateLimiter] = None, stream: Optional[TextIO] = None):
        if isinstance(destination, FileAndUpload) and sink is None:
            raise ValueError("An upload sink is required to upload logs")
        self.destination = destination
        self.sink = sink
        self.limiter = limiter or RateLimiter()
        self.stream = stream

    def route(self, record: LogRecord) -> RouteOutcome:
        """Send one pod's captured logs to the destination."""
        dest = self.destination
        if isinstance(dest, Console):
            console.separator(self.stream)
            return RouteOutcome()

        dir_name, path = output_paths(dest.base_name, record.pod.namespace)
        outcome = RouteOutcome(path=path)
        try:
            write_log(dir_name, path, record.text)
        except OutputError as e:
            console.error(f"Error writing logs to {path}. {e.reason}", self.stream)
            log_exception(f"[route] {record.pod.namespace}/{record.pod.name}", e)
            outcome.error = e
            return outcome
        outcome.written = True
        log.debug(f"[route] wrote {len(record.text)} bytes to {path}")

        if isinstance(dest, FileAndUpload):
            try:
                outcome.upload = self._upload(record, path, dest.expires)
            finally:
                self.limiter.pause()
            if outcome.upload.ok and dest.ephemeral:
                outcome.removed = self._remove(path)
        return outcome

    def _upload(self, record: LogRecord, path: str, expires: int) -> UploadResult:
        endpoint = self.sink.endpoint
        try:
            url = self.sink.upload(path, expires)
        except UploadError as e:
            console.error(f"{endpoint} - ( {record.pod.name} ): {e}", self.stream)
            log_exception(f"[upload] {record.pod.namespace}/{record.pod.name}", e)
            return UploadResult(endpoint=endpoint, error=e)
        console.upload_url(endpoint, record.pod.name, url, self.stream)
        return UploadResult(endpoint=endpoint, url=url)

    def _remove(self, path: str) -> bool:
        try:
            os.remove(path)
        except OSError as e:
            log_exception(f"[route] Failed to remove uploaded file {path}", e)
            return False
        return True
