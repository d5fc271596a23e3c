"""
Kubernetes client and API interactions for Kubelogns.

This module provides the interface between Kubelogns and the Kubernetes API.
It handles configuration loading, namespace resolution, pod listing and log
retrieval, translating client failures into Kubelogns exceptions.

Key Components:
- ClusterClient: Lists pods and fetches their logs
- load_kube: Initialize the Kubernetes client with config loading
- resolve_namespace: Pick the namespace to collect when none was given

The module supports both in-cluster and external Kubernetes configurations,
with automatic fallback between the two when no kubeconfig is named.

Example:
    ```python
    cluster = load_kube(kubeconfig="/path/to/config", context="my-context")
    for pod in cluster.list_pods("default"):
        print(pod.name, len(cluster.fetch_logs(pod)))
    ```
"""

from __future__ import annotations
from pathlib import Path
from typing import List, Optional

import urllib3
from kubernetes import client, config
from kubernetes.client import ApiException

from .constants import DEFAULT_NAMESPACE
from .exceptions import ClusterQueryError, ConfigurationError, LogFetchError
from .log import log
from .models import Pod

SERVICE_ACCOUNT_NAMESPACE = Path("/var/run/secrets/kubernetes.io/serviceaccount/namespace")


class ClusterClient:
    """
    Pod listing and log retrieval against one cluster.

    Attributes:
        core: CoreV1Api client for pod operations

    Example:
        ```python
        cluster = ClusterClient(client.CoreV1Api())
        pods = cluster.list_pods("prod")
        ```
    """

    def __init__(self, core: client.CoreV1Api):
        self.core = core

    def list_pods(self, namespace: str) -> List[Pod]:
        """
        List the pods of a namespace in the order the API returns them.

        Raises:
            ClusterQueryError: If the API call fails
        """
        try:
            resp = self.core.list_namespaced_pod(namespace=namespace)
        except ApiException as e:
            raise ClusterQueryError(f"Cannot list pods in namespace {namespace!r}: {e.status} {e.reason}") from e
        except urllib3.exceptions.HTTPError as e:
            raise ClusterQueryError(f"Cannot reach cluster to list pods in namespace {namespace!r}: {e}") from e
        pods = [Pod.from_k8s(item) for item in resp.items or []]
        log.debug(f"[kube] namespace={namespace} pods={len(pods)}")
        return pods

    def fetch_logs(self, pod: Pod) -> bytes:
        """
        Fetch a snapshot of a pod's complete current logs as raw bytes.

        Raises:
            LogFetchError: If the logs cannot be retrieved
        """
        try:
            resp = self.core.read_namespaced_pod_log(
                name=pod.name, namespace=pod.namespace, _preload_content=False
            )
        except ApiException as e:
            raise LogFetchError(f"Cannot get logs of {pod.namespace}/{pod.name}: {e.status} {e.reason}") from e
        except urllib3.exceptions.HTTPError as e:
            raise LogFetchError(f"Cannot reach cluster for logs of {pod.namespace}/{pod.name}: {e}") from e
        try:
            return resp.data
        except urllib3.exceptions.HTTPError as e:
            raise LogFetchError(f"Connection lost reading logs of {pod.namespace}/{pod.name}: {e}") from e
        finally:
            resp.release_conn()


def load_kube(kubeconfig: Optional[str] = None, context: Optional[str] = None) -> ClusterClient:
    """
    Load Kubernetes configuration and create the cluster client.

    Without a kubeconfig or context the default kubeconfig location is tried
    first (KUBECONFIG or ~/.kube/config), then in-cluster configuration.

    Args:
        kubeconfig: Path to kubeconfig file (optional)
        context: Kubernetes context name (optional, uses current context if None)

    Returns:
        ClusterClient: Client ready to list pods and fetch logs

    Raises:
        ConfigurationError: If no usable configuration can be loaded
    """
    try:
        if kubeconfig or context:
            config.load_kube_config(config_file=kubeconfig, context=context)
        else:
            try:
                config.load_kube_config()
            except (config.ConfigException, OSError):
                log.debug("[kube] no kubeconfig found, trying in-cluster config")
                config.load_incluster_config()
    except (config.ConfigException, OSError) as e:
        raise ConfigurationError(f"Cannot load Kubernetes configuration: {e}") from e
    return ClusterClient(client.CoreV1Api())


def resolve_namespace(namespace: Optional[str], kubeconfig: Optional[str] = None,
                      context: Optional[str] = None) -> str:
    """
    Resolve the namespace to collect logs from.

    An explicit namespace wins. Otherwise the namespace of the selected (or
    current) kubeconfig context is used, then the in-cluster service account
    namespace, then "default".
    """
    if namespace:
        return namespace

    try:
        contexts, active = config.list_kube_config_contexts(config_file=kubeconfig)
    except (config.ConfigException, OSError):
        contexts, active = [], None

    if context:
        active = next((c for c in contexts or [] if c.get('name') == context), None)
    if active:
        ns = (active.get('context') or {}).get('namespace')
        if ns:
            return ns
        return DEFAULT_NAMESPACE

    try:
        return SERVICE_ACCOUNT_NAMESPACE.read_text(encoding='utf-8').strip() or DEFAULT_NAMESPACE
    except OSError:
        return DEFAULT_NAMESPACE
