"""Waiting for a node to reach a state where its cgroups are ready."""

from __future__ import annotations

import functools
import re
from collections.abc import Iterable


@functools.lru_cache(maxsize=None)
def node_reached_cgroups_ready_regexp() -> re.Pattern[str]:
    """Return the pattern of a log line showing the node's cgroups are ready.

    It matches either cgroup v1 detection by the node entrypoint or systemd
    reaching the multi-user target under cgroup v2.
    """
    return re.compile("Reached target .*Multi-User System.*|detected cgroup v1")


def wait_until_log_regexp_matches(lines: Iterable[str], pattern: str | re.Pattern[str]) -> str:
    """Consume log ``lines`` until one matches ``pattern`` and return that line.

    Reading stops at the first match. Raises RuntimeError if reading the
    logs fails, and LookupError if the logs end with no matching line.
    """
    regexp = re.compile(pattern)
    try:
        for raw in lines:
            line = raw.rstrip("\n").rstrip("\r")
            if regexp.search(line):
                return line
    except OSError as exc:
        raise RuntimeError(f"failed to read logs: {exc}") from exc
    raise LookupError(f'could not find a log line that matches "{regexp.pattern}"')