"""
Log collection run.

Lists the pods of the configured namespace, keeps those selected by the name
pattern and, one pod at a time in listing order, captures its logs and routes
them to the run's destination. A failure listing pods aborts the run; any
other failure only affects the pod it happened on.

Example:
    ```python
    cfg = RunConfig(namespace="prod", fuzzy_pattern="api", output_base_name="api.log")
    summary = run(cfg, load_kube())
    print(summary.files_written)
    ```
"""

from typing import Optional, TextIO

from . import console
from .capture import capture
from .log import log
from .matching import filter_pods
from .models import Console, FileAndUpload, RunConfig, RunSummary, WarningState
from .pacing import RateLimiter
from .router import OutputRouter
from .upload import UploadSink


def build_router(cfg: RunConfig, warnings: WarningState, limiter: Optional[RateLimiter] = None,
                 sink: Optional[UploadSink] = None, stream: Optional[TextIO] = None) -> OutputRouter:
    """Build the router for the run's destination."""
    destination = cfg.destination()
    if isinstance(destination, FileAndUpload) and sink is None:
        sink = UploadSink(cfg.upload_endpoint, warnings, stream=stream)
    return OutputRouter(destination, sink=sink, limiter=limiter, stream=stream)


def run(cfg: RunConfig, cluster, limiter: Optional[RateLimiter] = None,
        sink: Optional[UploadSink] = None, stream: Optional[TextIO] = None) -> RunSummary:
    """
    Collect the logs of the selected pods of cfg.namespace.

    Args:
        cfg: Run configuration
        cluster: Object with list_pods(namespace) and fetch_logs(pod) methods
        limiter: Upload pacing (1 second pause by default)
        sink: Upload sink (built from cfg when None)
        stream: Console stream (stdout when None)

    Returns:
        RunSummary: Counters describing the run

    Raises:
        ClusterQueryError: If the pods of the namespace cannot be listed
    """
    warnings = WarningState()
    router = build_router(cfg, warnings, limiter=limiter, sink=sink, stream=stream)
    owned_sink = router.sink if sink is None else None
    try:
        return _collect(cfg, cluster, router, stream)
    finally:
        if owned_sink is not None:
            owned_sink.close()


def _collect(cfg: RunConfig, cluster, router: OutputRouter, stream: Optional[TextIO]) -> RunSummary:
    summary = RunSummary()

    pods = cluster.list_pods(cfg.namespace)
    summary.listed = len(pods)
    selected = filter_pods(cfg.fuzzy_pattern, pods)
    summary.selected = len(selected)
    log.info(f"[run] namespace={cfg.namespace} pods={summary.listed} selected={summary.selected}")

    if isinstance(router.destination, Console):
        console.info(f"Fetching Pod logs for {cfg.namespace} namespace :", stream)
    else:
        console.info(f"Writing Pod logs for {cfg.namespace} namespace to {router.destination.base_name}:", stream)

    for pod in selected:
        record = capture(cluster, pod, echo=cfg.echo, stream=stream)
        if record.failed:
            summary.capture_failures += 1
        outcome = router.route(record)
        if outcome.written:
            summary.files_written += 1
        if outcome.error is not None:
            summary.write_failures += 1
        if outcome.upload is not None:
            if outcome.upload.ok:
                summary.uploads += 1
            else:
                summary.upload_failures += 1

    log.info(
        f"[run] done selected={summary.selected} capture_failures={summary.capture_failures} "
        f"files={summary.files_written} write_failures={summary.write_failures} "
        f"uploads={summary.uploads} upload_failures={summary.upload_failures}"
    )
    return summary
