"""Reading kubeconfig documents."""

from __future__ import annotations

import os
from pathlib import Path

import yaml

from .helpers import KubeconfigError, check_kubeadm_expectations, kind_cluster_key
from .types import Config


def _parse(raw: str) -> Config:
    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as exc:
        raise KubeconfigError(f"failed to parse kubeconfig: {exc}") from exc
    return Config.from_dict(data)


def kind_from_raw_kubeadm(
    raw_kubeadm_kubeconfig: str, cluster_name: str, server: str = ""
) -> Config:
    """Turn a kubeadm admin kubeconfig into one keyed by the kind cluster name.

    ``server`` replaces the cluster endpoint when it is not empty.
    """
    cfg = _parse(raw_kubeadm_kubeconfig)
    check_kubeadm_expectations(cfg)

    key = kind_cluster_key(cluster_name)
    cfg.clusters[0].name = key
    cfg.users[0].name = key
    cfg.contexts[0].name = key
    cfg.contexts[0].context.user = key
    cfg.contexts[0].context.cluster = key
    cfg.current_context = key

    if server:
        cfg.clusters[0].cluster.server = server
    return cfg


def read_config(config_path: str | os.PathLike[str]) -> Config:
    """Load the kubeconfig at ``config_path``; a missing file gives an empty config."""
    try:
        raw = Path(config_path).read_text(encoding="utf-8")
    except FileNotFoundError:
        return Config()
    return _parse(raw)