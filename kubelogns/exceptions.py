"""
Custom exceptions for Kubelogns.

This module defines the exception classes used throughout the Kubelogns
application. Each class maps to one failure category of the log collection
pipeline, and the category decides whether the run aborts or only the
current pod is skipped.

Exception Hierarchy:
- KubelognsError: Base exception for all Kubelogns-specific errors
  - ConfigurationError: Cluster access or CLI configuration cannot be built (fatal)
  - InvalidPatternError: The pod name match pattern is unusable (fatal)
  - ClusterQueryError: Pods of the namespace cannot be listed (fatal)
  - LogFetchError: A pod's logs cannot be fetched (recovered per pod)
  - OutputError: Base for local persistence failures (pod-local fatal)
    - DirectoryCreateError: The output directory cannot be created
    - FileWriteError: The pod's log file cannot be written
  - UploadError: The upload endpoint rejected or failed the upload (reported)

Example:
    ```python
    try:
        pods = cluster.list_pods("prod")
    except ClusterQueryError as e:
        print(f"Cannot list pods: {e}")
    ```
"""


class KubelognsError(Exception):
    """Base exception for Kubelogns errors."""
    pass


class ConfigurationError(KubelognsError):
    """Raised when there's a configuration issue."""
    pass


class InvalidPatternError(KubelognsError):
    """Raised when an invalid pod name pattern is provided."""
    pass


class ClusterQueryError(KubelognsError):
    """Raised when the pods of a namespace cannot be listed."""
    pass


class LogFetchError(KubelognsError):
    """Raised when the logs of a single pod cannot be retrieved."""
    pass


class OutputError(KubelognsError):
    """Raised when a pod's logs cannot be persisted locally."""

    def __init__(self, path: str, reason: str):
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason


class DirectoryCreateError(OutputError):
    """Raised when the output directory cannot be created."""
    pass


class FileWriteError(OutputError):
    """Raised when a pod's log file cannot be written."""
    pass


class UploadError(KubelognsError):
    """Raised when a file cannot be uploaded to the upload endpoint."""
    pass
