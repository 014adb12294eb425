import pytest

from kindkit.kubeconfig.helpers import KubeconfigError
from kindkit.kubeconfig.read import kind_from_raw_kubeadm, read_config
from kindkit.kubeconfig.types import (
    Cluster,
    Config,
    Context,
    NamedCluster,
    NamedContext,
    NamedUser,
)

RAW_CONFIG = """apiVersion: v1
clusters:
- cluster:
    certificate-authority-data: definitelyacert
    server: https://192.168.9.4:6443
  name: kind
contexts:
- context:
    cluster: kind
    user: kubernetes-admin
  name: kubernetes-admin@kind
current-context: kubernetes-admin@kind
kind: Config
preferences: {}
users:
- name: kubernetes-admin
  user:
    client-certificate-data: seemslegit
    client-key-data: yep
"""

SERVER = "https://127.0.0.1:6443"

EXPECTED = Config(
    clusters=[
        NamedCluster(
            name="kind-kind",
            cluster=Cluster(
                server=SERVER,
                other_fields={"certificate-authority-data": "definitelyacert"},
            ),
        )
    ],
    contexts=[
        NamedContext(name="kind-kind", context=Context(user="kind-kind", cluster="kind-kind"))
    ],
    users=[
        NamedUser(
            name="kind-kind",
            user={"client-certificate-data": "seemslegit", "client-key-data": "yep"},
        )
    ],
    current_context="kind-kind",
    other_fields={"apiVersion": "v1", "kind": "Config", "preferences": {}},
)


def test_bad_config():
    with pytest.raises(KubeconfigError):
        kind_from_raw_kubeadm("\t", "kind", "")


def test_valid_config():
    assert kind_from_raw_kubeadm(RAW_CONFIG, "kind", SERVER) == EXPECTED


def test_server_unset_keeps_original():
    cfg = kind_from_raw_kubeadm(RAW_CONFIG, "kind", "")
    assert cfg.clusters[0].cluster.server == "https://192.168.9.4:6443"


def test_read_missing_file_gives_empty_config(tmp_path):
    assert read_config(tmp_path / "absent") == Config()


def test_read_existing_file(tmp_path):
    path = tmp_path / "config"
    path.write_text(RAW_CONFIG, encoding="utf-8")
    cfg = read_config(path)
    assert cfg.current_context == "kubernetes-admin@kind"
    assert [u.name for u in cfg.users] == ["kubernetes-admin"]


def test_read_empty_file(tmp_path):
    path = tmp_path / "config"
    path.write_text("", encoding="utf-8")
    assert read_config(path) == Config()


def test_read_invalid_yaml(tmp_path):
    path = tmp_path / "config"
    path.write_text("clusters: [unclosed", encoding="utf-8")
    with pytest.raises(KubeconfigError):
        read_config(path)