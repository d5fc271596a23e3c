"""
Data models for Kubelogns.

This module defines the data structures passed between the stages of the log
collection pipeline. Models are dataclasses; the ones that describe a run's
inputs are frozen so they cannot change once the run has started.

Key Models:
- Pod: Namespace and name of a pod whose logs are collected
- LogRecord: The captured log text of one pod, or the reason capture failed
- Console / File / FileAndUpload: The output destination of a run
- UploadResult: The outcome of one upload attempt
- RunConfig: Immutable configuration of a run
- WarningState: One-time "default endpoint in use" warning flag
- RunSummary: Counters describing what a run did

Example:
    ```python
    cfg = RunConfig(namespace="prod", output_base_name="logs.txt")
    destination = cfg.destination()
    # File(base_name='logs.txt')
    ```
"""

from dataclasses import dataclass
from typing import Any, Optional, Union

from .constants import (
    DEFAULT_UPLOAD_EXPIRES, LOG_FETCH_FAILED_TEXT, PLACEHOLDER_BASE_NAME
)
from .exceptions import LogFetchError, UploadError


@dataclass(frozen=True)
class Pod:
    """
    Identity of a pod whose logs are collected.

    Attributes:
        namespace: Namespace the pod lives in
        name: Pod name

    Example:
        ```python
        pod = Pod(namespace="default", name="web-1")
        ```
    """
    namespace: str
    name: str

    @classmethod
    def from_k8s(cls, obj: Any) -> "Pod":
        """Build a Pod from a kubernetes V1Pod object."""
        return cls(namespace=obj.metadata.namespace, name=obj.metadata.name)


@dataclass(frozen=True)
class LogRecord:
    """
    Captured logs of one pod.

    A failed capture still carries text: the legacy "Unable to get pod logs"
    message, so that it can be written or uploaded like any other log.

    Attributes:
        pod: The pod the logs belong to
        text: Raw log bytes as returned by the cluster
        error: The fetch failure, None when the logs were captured
    """
    pod: Pod
    text: bytes
    error: Optional[LogFetchError] = None

    @classmethod
    def failure(cls, pod: Pod, error: LogFetchError) -> "LogRecord":
        return cls(pod=pod, text=LOG_FETCH_FAILED_TEXT.encode("utf-8"), error=error)

    @property
    def failed(self) -> bool:
        return self.error is not None

    @property
    def display_text(self) -> str:
        return self.text.decode("utf-8", "replace")


@dataclass(frozen=True)
class Console:
    """Print each pod's log lines to the console."""
    pass


@dataclass(frozen=True)
class File:
    """
    Write each pod's logs to a file derived from base_name.

    Attributes:
        base_name: Output base file name (e.g. "logs.txt")
    """
    base_name: str


@dataclass(frozen=True)
class FileAndUpload:
    """
    Write each pod's logs to a file, then upload the file.

    Attributes:
        base_name: Output base file name
        expires: Expiry hint sent with every upload
        ephemeral: Delete the file after a successful upload (no explicit name given)
    """
    base_name: str
    expires: int = DEFAULT_UPLOAD_EXPIRES
    ephemeral: bool = False


OutputDestination = Union[Console, File, FileAndUpload]


@dataclass(frozen=True)
class UploadResult:
    """
    Outcome of one upload attempt.

    Attributes:
        endpoint: Endpoint the file was sent to
        url: Shareable URL returned by the endpoint, None on failure
        error: The upload failure, None on success
    """
    endpoint: str
    url: Optional[str] = None
    error: Optional[UploadError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(frozen=True)
class RunConfig:
    """
    Immutable configuration of a log collection run.

    Built once by the command line before any pod is processed and passed to
    every stage of the pipeline.

    Attributes:
        namespace: Namespace whose pods are collected
        output_base_name: Output base file name, None for console output
        upload_requested: Upload every written file
        upload_endpoint: Upload endpoint, None for the public default
        fuzzy_pattern: Approximate pod name pattern, empty to select every pod
        expires: Expiry hint sent with every upload

    Example:
        ```python
        cfg = RunConfig(namespace="prod", upload_requested=True)
        cfg.destination()
        # FileAndUpload(base_name='tmp', expires=1, ephemeral=True)
        ```
    """
    namespace: str
    output_base_name: Optional[str] = None
    upload_requested: bool = False
    upload_endpoint: Optional[str] = None
    fuzzy_pattern: str = ""
    expires: int = DEFAULT_UPLOAD_EXPIRES

    @property
    def echo(self) -> bool:
        """True when logs go to the console only."""
        return not self.output_base_name and not self.upload_requested

    def destination(self) -> OutputDestination:
        """Derive the output destination applied to every pod of the run."""
        if self.echo:
            return Console()
        if not self.upload_requested:
            return File(base_name=self.output_base_name)
        if self.output_base_name:
            return FileAndUpload(base_name=self.output_base_name, expires=self.expires)
        return FileAndUpload(base_name=PLACEHOLDER_BASE_NAME, expires=self.expires, ephemeral=True)


@dataclass
class WarningState:
    """Whether the public default endpoint warning was already shown this run."""
    default_endpoint_warned: bool = False


@dataclass
class RunSummary:
    """
    Counters describing what a run did.

    Attributes:
        listed: Pods returned by the namespace listing
        selected: Pods that passed the name filter
        capture_failures: Pods whose logs could not be fetched
        files_written: Log files written
        write_failures: Pods whose log file could not be written
        uploads: Successful uploads
        upload_failures: Failed uploads
    """
    listed: int = 0
    selected: int = 0
    capture_failures: int = 0
    files_written: int = 0
    write_failures: int = 0
    uploads: int = 0
    upload_failures: int = 0
