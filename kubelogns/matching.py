"""
Approximate pod name matching.

A pattern selects a pod when its characters appear in the pod name in the same
order, not necessarily next to each other ("w1" selects "web-1" but not
"web-2"). Matching is case-sensitive and purely boolean; there is no scoring.
"""

from typing import Iterable, List

from .models import Pod


def selects(pattern: str, pod_name: str) -> bool:
    """Return True if pattern is empty or is a subsequence of pod_name."""
    if not pattern:
        return True
    if len(pattern) > len(pod_name):
        return False

    remaining = iter(pod_name)
    return all(ch in remaining for ch in pattern)


def filter_pods(pattern: str, pods: Iterable[Pod]) -> List[Pod]:
    """Keep the pods selected by pattern, in their original order."""
    return [p for p in pods if selects(pattern, p.name)]
