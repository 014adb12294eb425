"""Data model for the parts of a kubeconfig file that cluster tooling touches.

Fields that are not inspected are kept verbatim in ``other_fields`` so they
can be written back unchanged.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from .helpers import KubeconfigError


def _mapping(value: Any, what: str) -> dict[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise KubeconfigError(f"{what} must be a mapping, got {type(value).__name__}")
    return dict(value)


def _sequence(value: Any, what: str) -> list[Any]:
    if value is None:
        return []
    if not isinstance(value, list):
        raise KubeconfigError(f"{what} must be a list, got {type(value).__name__}")
    return value


def _string(data: Mapping[str, Any], key: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise KubeconfigError(f"field {key!r} must be a string, got {type(value).__name__}")
    return value


@dataclass
class Cluster:
    """How to reach a Kubernetes cluster."""

    server: str = ""
    other_fields: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Any) -> Cluster:
        data = _mapping(data, "cluster")
        return cls(
            server=_string(data, "server"),
            other_fields={k: v for k, v in data.items() if k != "server"},
        )

    def to_dict(self) -> dict[str, Any]:
        out = dict(self.other_fields)
        if self.server:
            out["server"] = self.server
        return out


@dataclass
class NamedCluster:
    """A cluster entry together with its nickname."""

    name: str = ""
    cluster: Cluster = field(default_factory=Cluster)

    @classmethod
    def from_dict(cls, data: Any) -> NamedCluster:
        data = _mapping(data, "cluster entry")
        return cls(name=_string(data, "name"), cluster=Cluster.from_dict(data.get("cluster")))

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "cluster": self.cluster.to_dict()}


@dataclass
class NamedUser:
    """A user entry; the user data itself is kept untouched."""

    name: str = ""
    user: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Any) -> NamedUser:
        data = _mapping(data, "user entry")
        return cls(name=_string(data, "name"), user=_mapping(data.get("user"), "user"))

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "user": dict(self.user)}


@dataclass
class Context:
    """References to a cluster and a user."""

    cluster: str = ""
    user: str = ""
    other_fields: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Any) -> Context:
        data = _mapping(data, "context")
        return cls(
            cluster=_string(data, "cluster"),
            user=_string(data, "user"),
            other_fields={k: v for k, v in data.items() if k not in ("cluster", "user")},
        )

    def to_dict(self) -> dict[str, Any]:
        out = dict(self.other_fields)
        out["cluster"] = self.cluster
        out["user"] = self.user
        return out


@dataclass
class NamedContext:
    """A context entry together with its nickname."""

    name: str = ""
    context: Context = field(default_factory=Context)

    @classmethod
    def from_dict(cls, data: Any) -> NamedContext:
        data = _mapping(data, "context entry")
        return cls(name=_string(data, "name"), context=Context.from_dict(data.get("context")))

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "context": self.context.to_dict()}


_CONFIG_KEYS = ("clusters", "users", "contexts", "current-context")


@dataclass
class Config:
    """A kubeconfig document."""

    clusters: list[NamedCluster] = field(default_factory=list)
    users: list[NamedUser] = field(default_factory=list)
    contexts: list[NamedContext] = field(default_factory=list)
    current_context: str = ""
    other_fields: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Any) -> Config:
        data = _mapping(data, "kubeconfig")
        return cls(
            clusters=[NamedCluster.from_dict(c) for c in _sequence(data.get("clusters"), "clusters")],
            users=[NamedUser.from_dict(u) for u in _sequence(data.get("users"), "users")],
            contexts=[NamedContext.from_dict(c) for c in _sequence(data.get("contexts"), "contexts")],
            current_context=_string(data, "current-context"),
            other_fields={k: v for k, v in data.items() if k not in _CONFIG_KEYS},
        )

    def to_dict(self) -> dict[str, Any]:
        out = dict(self.other_fields)
        if self.clusters:
            out["clusters"] = [c.to_dict() for c in self.clusters]
        if self.users:
            out["users"] = [u.to_dict() for u in self.users]
        if self.contexts:
            out["contexts"] = [c.to_dict() for c in self.contexts]
        if self.current_context:
            out["current-context"] = self.current_context
        return out