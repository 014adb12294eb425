"""Removing kind cluster entries from kubeconfig files."""

from __future__ import annotations

import os

from .helpers import KubeconfigError, kind_cluster_key
from .lock import locked
from .paths import paths
from .read import read_config
from .types import Config
from .write import write_config


def remove(cfg: Config, kind_cluster_name: str) -> bool:
    """Drop the entries for ``kind_cluster_name`` from ``cfg``; return True if any changed."""
    key = kind_cluster_key(kind_cluster_name)
    before = (len(cfg.clusters), len(cfg.users), len(cfg.contexts))

    cfg.clusters = [c for c in cfg.clusters if c.name != key]
    cfg.users = [u for u in cfg.users if u.name != key]
    cfg.contexts = [c for c in cfg.contexts if c.name != key]
    mutated = before != (len(cfg.clusters), len(cfg.users), len(cfg.contexts))

    if cfg.current_context == key:
        cfg.current_context = ""
        mutated = True
    return mutated


def remove_kind(kind_cluster_name: str, explicit_path: str | os.PathLike[str]) -> None:
    """Remove the kind cluster from every kubeconfig file kubectl would consult."""
    for config_path in paths(explicit_path, lambda key: os.environ.get(key, "")):
        with locked(config_path):
            try:
                existing = read_config(config_path)
            except (KubeconfigError, OSError) as exc:
                raise KubeconfigError(
                    f"failed to read kubeconfig to remove KIND entry: {exc}"
                ) from exc
            if remove(existing, kind_cluster_name):
                write_config(existing, config_path)