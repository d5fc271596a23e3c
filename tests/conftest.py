"""
Shared pytest fixtures for Kubelogns tests.

This module provides common fixtures including:
- FakeCluster: In-memory cluster collaborator with canned pods and logs
- RecordingSleep: Sleep replacement that records requested pauses
- FakeSink: Upload sink returning canned URLs or errors
"""

import os
import sys
from dataclasses import dataclass, field
from typing import Dict, List, Optional

import pytest

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from kubelogns.exceptions import ClusterQueryError, LogFetchError, UploadError
from kubelogns.models import Pod, WarningState
from kubelogns.pacing import RateLimiter


# =============================================================================
# Cluster Fakes
# =============================================================================

class FakeCluster:
    """
    In-memory stand-in for the cluster client.

    Usage:
        def test_capture(fake_cluster):
            fake_cluster.add("ns1", "web-1", b"hello\\n")
            fake_cluster.fail("ns1", "web-2")
    """

    def __init__(self):
        self.pods: List[Pod] = []
        self.logs: Dict[Pod, bytes] = {}
        self.failing: set = set()
        self.list_error: Optional[Exception] = None
        self.fetched: List[Pod] = []

    def add(self, namespace: str, name: str, logs: bytes = b"") -> Pod:
        pod = Pod(namespace=namespace, name=name)
        self.pods.append(pod)
        self.logs[pod] = logs
        return pod

    def fail(self, namespace: str, name: str) -> Pod:
        pod = self.add(namespace, name)
        self.failing.add(pod)
        return pod

    def list_pods(self, namespace: str) -> List[Pod]:
        if self.list_error is not None:
            raise self.list_error
        return [p for p in self.pods if p.namespace == namespace]

    def fetch_logs(self, pod: Pod) -> bytes:
        self.fetched.append(pod)
        if pod in self.failing:
            raise LogFetchError(f"pods \"{pod.name}\" not found")
        return self.logs[pod]


@pytest.fixture
def fake_cluster():
    return FakeCluster()


@pytest.fixture
def broken_cluster():
    cluster = FakeCluster()
    cluster.list_error = ClusterQueryError("Cannot list pods in namespace 'ns1': 403 Forbidden")
    return cluster


# =============================================================================
# Pacing and Upload Fakes
# =============================================================================

@dataclass
class RecordingSleep:
    """Records requested sleeps instead of sleeping."""
    calls: List[float] = field(default_factory=list)

    def __call__(self, seconds: float) -> None:
        self.calls.append(seconds)

    @property
    def total(self) -> float:
        return sum(self.calls)


@pytest.fixture
def sleeper():
    return RecordingSleep()


@pytest.fixture
def limiter(sleeper):
    return RateLimiter(interval=1.0, sleep=sleeper)


class FakeSink:
    """Upload sink returning https://paste.test/<n> or raising for selected files."""

    def __init__(self, endpoint: str = "https://paste.test", fail_paths=()):
        self.endpoint = endpoint
        self.warnings = WarningState()
        self.fail_paths = set(fail_paths)
        self.uploaded: List[tuple] = []

    def upload(self, path: str, expires: int) -> str:
        with open(path, 'rb') as fh:
            content = fh.read()
        self.uploaded.append((path, expires, content))
        if path in self.fail_paths:
            raise UploadError(f"Upload of {path} to {self.endpoint} failed: 503 Server Error")
        return f"{self.endpoint}/{len(self.uploaded)}"


@pytest.fixture
def fake_sink():
    return FakeSink()


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    """Run the test from an empty temporary directory."""
    monkeypatch.chdir(tmp_path)
    return tmp_path
