"""Images needed to run cluster nodes."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any


def required_node_images(nodes: Iterable[Any]) -> set[str]:
    """Return the distinct images of ``nodes``, objects with an ``image`` attribute.

    The load balancer image is not included.
    """
    return {node.image for node in nodes}