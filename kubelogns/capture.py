"""
Pod log capture.

Fetches a single snapshot of a pod's logs through the cluster client. A fetch
failure never reaches the caller: it becomes a failed LogRecord carrying the
"Unable to get pod logs" text, so one bad pod cannot stop the batch.

In console mode the captured lines are echoed as part of the capture, each
non-empty line tagged with the pod name.

Example:
    ```python
    record = capture(cluster, Pod("default", "web-1"), echo=True)
    if record.failed:
        print(record.display_text)  # "Unable to get pod logs"
    ```
"""

from typing import Optional, TextIO

from . import console
from .exceptions import LogFetchError
from .log import log_exception
from .models import LogRecord, Pod


def echo_lines(record: LogRecord, stream: Optional[TextIO] = None) -> None:
    """Print every non-empty line of a record tagged with its pod name."""
    for line in record.display_text.split("\n"):
        if not line:
            continue
        console.log_line(record.pod.name, line, stream)


def capture(cluster, pod: Pod, echo: bool = False, stream: Optional[TextIO] = None) -> LogRecord:
    """
    Capture the current logs of one pod.

    Args:
        cluster: Object with a fetch_logs(pod) -> bytes method
        pod: The pod to capture
        echo: Print the captured lines to the console
        stream: Console stream (stdout when None)

    Returns:
        LogRecord: The captured logs, or a failed record with the fetch error
    """
    try:
        text = cluster.fetch_logs(pod)
    except LogFetchError as e:
        log_exception(f"[capture] {pod.namespace}/{pod.name}", e)
        return LogRecord.failure(pod, e)

    record = LogRecord(pod=pod, text=text)
    if echo:
        echo_lines(record, stream)
    return record
