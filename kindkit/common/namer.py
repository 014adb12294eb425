"""Naming of cluster nodes by role."""

from __future__ import annotations

from collections import Counter
from collections.abc import Callable


def make_node_namer(cluster_name: str) -> Callable[[str], str]:
    """Return a function that names nodes from their role.

    The first node of a role is ``<cluster>-<role>``; later ones get a
    numeric suffix starting at 2, e.g. ``<cluster>-<role>2``.
    """
    seen: Counter[str] = Counter()

    def name_node(role: str) -> str:
        seen[role] += 1
        count = seen[role]
        suffix = str(count) if count > 1 else ""
        return f"{cluster_name}-{role}{suffix}"

    return name_node