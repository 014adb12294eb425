"""Merging a kind kubeconfig into an existing kubeconfig file."""

from __future__ import annotations

import os
from typing import TypeVar

from .helpers import KubeconfigError, check_kubeadm_expectations
from .lock import locked
from .paths import path_for_merge
from .read import read_config
from .types import Config, NamedCluster, NamedContext, NamedUser
from .write import write_config

_Entry = TypeVar("_Entry", NamedCluster, NamedUser, NamedContext)


def _upsert(entries: list[_Entry], new: _Entry) -> None:
    replaced = False
    for i, entry in enumerate(entries):
        if entry.name == new.name:
            entries[i] = new
            replaced = True
    if not replaced:
        entries.append(new)


def merge(existing: Config, kind: Config) -> None:
    """Merge the single-entry ``kind`` config into ``existing`` in place.

    Entries with the same name are replaced, others appended; the current
    context is taken from ``kind``.
    """
    check_kubeadm_expectations(kind)

    _upsert(existing.clusters, kind.clusters[0])
    _upsert(existing.users, kind.users[0])
    _upsert(existing.contexts, kind.contexts[0])

    existing.current_context = kind.current_context

    # some clients rely on apiVersion and kind being present
    if not existing.other_fields:
        existing.other_fields = kind.other_fields


def write_merged(kind_config: Config, explicit_config_path: str | os.PathLike[str]) -> None:
    """Merge ``kind_config`` into the kubeconfig kubectl would write to and save it."""
    config_path = path_for_merge(explicit_config_path, lambda key: os.environ.get(key, ""))

    with locked(config_path):
        try:
            existing = read_config(config_path)
        except (KubeconfigError, OSError) as exc:
            raise KubeconfigError(f"failed to get kubeconfig to merge: {exc}") from exc
        merge(existing, kind_config)
        write_config(existing, config_path)