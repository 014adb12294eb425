"""Serialising kubeconfig documents to normalised YAML."""

from __future__ import annotations

import json

import yaml

from .helpers import KubeconfigError
from .types import Config

_STR_TAG = "tag:yaml.org,2002:str"


class _Dumper(yaml.SafeDumper):
    """Dumper that double-quotes strings which would not read back as strings."""


def _represent_str(dumper: yaml.SafeDumper, value: str) -> yaml.ScalarNode:
    if value == "" or dumper.resolve(yaml.ScalarNode, value, (True, False)) != _STR_TAG:
        return dumper.represent_scalar(_STR_TAG, value, style='"')
    return dumper.represent_str(value)


_Dumper.add_representer(str, _represent_str)


def encode(cfg: Config) -> str:
    """Encode ``cfg`` as YAML with sorted keys; an empty config encodes to ''."""
    try:
        normalized = json.loads(json.dumps(cfg.to_dict(), default=str))
    except (TypeError, ValueError) as exc:
        raise KubeconfigError(f"failed to encode KUBECONFIG: {exc}") from exc
    if normalized == {}:
        return ""
    return yaml.dump(
        normalized,
        Dumper=_Dumper,
        default_flow_style=False,
        sort_keys=True,
        allow_unicode=True,
    )