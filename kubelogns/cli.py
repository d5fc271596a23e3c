"""
Command-line interface for Kubelogns.

This module provides the command-line interface for the Kubelogns application,
handling argument parsing, input validation, cluster setup and the log
collection run. It supports console, file and upload output with optional
approximate pod name matching.

Key Functions:
- build_parser: Create and configure the argument parser
- build_config: Turn parsed arguments into a validated RunConfig
- main: Main entry point for the CLI application

Example:
    ```bash
    # Print the logs of every pod in the current namespace
    kubelogns

    # Write logs of pods matching "api" in prod to api/prod_api.log
    kubelogns -n prod -f api -o api.log

    # Upload each pod's logs to a self-hosted 0x0 instance
    kubelogns -n prod -u -s https://paste.example.com
    ```
"""

import argparse
import os
import sys
from typing import Optional, Sequence

from .constants import AUTHOR, DEFAULT_UPLOAD_ENDPOINT, DEFAULT_UPLOAD_EXPIRES, ENV_UPLOAD_URL, VERSION
from .exceptions import ClusterQueryError, ConfigurationError, InvalidPatternError
from .kube import load_kube, resolve_namespace
from .log import configure_logging, log_exception
from .models import RunConfig
from .runner import run
from .validation import (
    validate_expires, validate_fuzzy_pattern, validate_namespace,
    validate_output_name, validate_upload_endpoint
)


def build_parser() -> argparse.ArgumentParser:
    """
    Build and configure the command-line argument parser.

    Returns:
        argparse.ArgumentParser: Configured argument parser with all options

    Environment Variables:
        KUBELOGNS_UPLOAD_URL: Default upload endpoint (default: https://0x0.st)
        KUBELOGNS_LOG_LEVEL: Diagnostic log level (default: INFO)
    """
    env_upload_url = os.getenv(ENV_UPLOAD_URL)

    p = argparse.ArgumentParser("kubelogns", description="Fetch the logs of every pod in a namespace")
    p.add_argument("--kubeconfig", default=None, help="Path to kubeconfig (defaults to ~/.kube/config)")
    p.add_argument("--context", default=None, help="Kubecontext override")
    p.add_argument("-n", "--namespace", default=None, help="Namespace to fetch pod logs from (default: from kubeconfig)")
    p.add_argument("-o", "--output", default=None, help="File to output logs to, written as <name-before-dot>/<namespace>_<name>")
    p.add_argument("-u", "--upload", action="store_true", help="Upload each log file to the upload server")
    p.add_argument("-s", "--server", default=env_upload_url,
                   help=f"Upload server to use (env: {ENV_UPLOAD_URL}, default: {DEFAULT_UPLOAD_ENDPOINT})")
    p.add_argument("-e", "--expires", type=int, default=DEFAULT_UPLOAD_EXPIRES, help="Expiry hint sent with uploads")
    p.add_argument("-f", "--fuzzy", default="", help="Fuzzy search pod names in namespace")
    p.add_argument("-v", "--version", action="store_true", help="Version info printing")
    return p


def build_config(args: argparse.Namespace) -> RunConfig:
    """
    Validate parsed arguments and build the run configuration.

    Raises:
        ConfigurationError: If a flag value is invalid
        InvalidPatternError: If the fuzzy pattern is unusable
    """
    namespace = resolve_namespace(args.namespace, args.kubeconfig, args.context)
    return RunConfig(
        namespace=validate_namespace(namespace),
        output_base_name=validate_output_name(args.output),
        upload_requested=args.upload,
        upload_endpoint=validate_upload_endpoint(args.server),
        fuzzy_pattern=validate_fuzzy_pattern(args.fuzzy),
        expires=validate_expires(args.expires),
    )


def main(argv: Optional[Sequence[str]] = None) -> None:
    """
    Main entry point for the Kubelogns CLI application.

    The function performs the following steps:
    1. Parse command-line arguments (--version prints and returns)
    2. Validate inputs and build the RunConfig
    3. Load the Kubernetes configuration
    4. Run the log collection

    Raises:
        SystemExit: On configuration errors (exit code 2), cluster errors
            (exit code 1) or interruption (exit code 130)
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.version:
        print(f"Version {VERSION}\nAuthor: {AUTHOR}")
        return

    configure_logging()

    try:
        cfg = build_config(args)
        cluster = load_kube(args.kubeconfig, args.context)
    except (InvalidPatternError, ConfigurationError) as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        sys.exit(2)

    try:
        run(cfg, cluster)
    except KeyboardInterrupt:
        print("\nInterrupted", file=sys.stderr)
        sys.exit(130)
    except ClusterQueryError as e:
        log_exception("[run] Aborting", e)
        print(f"Cluster error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":  # pragma: no cover
    main()
