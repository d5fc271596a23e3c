"""
Kubelogns - Batch Kubernetes Pod Log Collector.

Kubelogns fetches the current logs of every pod in a namespace and sends each
pod's log text to one destination chosen for the whole run: the console, a
local file per pod, or a local file that is then uploaded to a paste/upload
endpoint (0x0.st compatible).

Key Features:
- One-shot, sequential collection of pod logs for a namespace
- Approximate (subsequence) pod name matching
- Per-namespace output files derived from a single base name
- Multipart uploads with a shareable URL printed per pod
- Paced uploads to stay under the endpoint's rate limit

Example:
    Print every pod's logs:
    ```bash
    kubelogns -n prod
    ```

    Write logs for pods matching "api" to api/prod_api.log:
    ```bash
    kubelogns -n prod -f api -o api.log
    ```

    Upload logs and print the URLs:
    ```bash
    kubelogns -n prod -u
    ```
"""

__all__ = ["__version__", "__author__"]
__version__ = "1.0.3"
__author__ = "https://github.com/itspacchu"
