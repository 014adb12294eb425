# kindkit

A library of helpers for managing local Kubernetes-in-container clusters.

## What it contains

### Kubeconfig handling — `kindkit.kubeconfig`

- `types`: dataclasses `Config`, `NamedCluster`, `Cluster`, `NamedUser`,
  `NamedContext` and `Context`, each with `from_dict` / `to_dict`. Keys that
  are not inspected are kept in `other_fields` and written back unchanged.
- `helpers`: `kind_cluster_key(name)` returns `"kind-<name>"`;
  `check_kubeadm_expectations(cfg)` raises `KubeconfigError` unless the config
  holds exactly one cluster, one user and one context.
- `read`: `kind_from_raw_kubeadm(raw, cluster_name, server="")` parses a
  kubeadm admin kubeconfig and renames its cluster, user and context to
  `kind-<cluster_name>`, replacing the server endpoint when `server` is not
  empty. `read_config(path)` loads a file; a missing file gives an empty
  `Config`.
- `encode`: `encode(cfg)` returns YAML with sorted keys; an empty config
  encodes to `""`.
- `write`: `write_config(cfg, path)` writes the encoded config with mode
  `0600`, creating parent directories.
- `paths`: `paths(explicit_path, get_env)` and `path_for_merge(...)` choose
  files the way kubectl does — an explicit path, else the entries of
  `$KUBECONFIG` (empty and repeated entries dropped), else
  `$HOME/.kube/config`. For merging, the first existing file in a list is
  used, or the last one if none exists. `home_dir(goos, get_env)` follows
  kubectl's Windows home-directory rules.
- `lock`: `lock_file`, `unlock_file` and the `locked(path)` context manager
  guard a file with a `<file>.lock` sibling created exclusively.
- `merge`: `merge(existing, kind)` replaces entries of the same name or
  appends them, and sets the current context; `write_merged(cfg, path)` does
  this on disk under the lock.
- `remove`: `remove(cfg, name)` drops a cluster's entries and returns whether
  anything changed; `remove_kind(name, path)` does this for every file
  `paths` yields, rewriting only files that changed.

Failures are reported as `kindkit.kubeconfig.helpers.KubeconfigError`.

### Node helpers — `kindkit.common`

- `namer.make_node_namer(cluster)` returns a function naming nodes by role:
  `kind-worker`, `kind-worker2`, `kind-worker3`, …
- `getport.port_or_get_free_port(port, addr)` returns `port` unchanged, `0`
  for `-1`, and a free TCP port on `addr` for `0`;
  `getport.get_free_port(addr)` raises `OSError` if `addr` cannot be bound.
  `API_SERVER_INTERNAL_PORT` is `6443`.
- `proxy.get_proxy_envs(service_subnet, pod_subnet, get_env=None)` returns
  `HTTP_PROXY`, `HTTPS_PROXY` and `NO_PROXY` in both cases, appending the
  subnets to `NO_PROXY` whenever any proxy setting is present.
- `images.required_node_images(nodes)` returns the set of `node.image`
  values.
- `cgroups.node_reached_cgroups_ready_regexp()` returns the pattern of a log
  line showing cgroups are ready; `cgroups.wait_until_log_regexp_matches(lines,
  pattern)` returns the first matching line, raising `LookupError` if none
  matches and `RuntimeError` if reading fails.

### Load balancer — `kindkit.loadbalancer`

`render_config(ConfigData(...))` renders the haproxy configuration for the
control-plane load balancer, listing backend servers sorted by name.
`IMAGE` and `CONFIG_PATH` name the image and the config file's path in it.

### Logs — `kindkit.logs`

`untar(stream, directory, logger=None)` unpacks a tar stream of regular
files and directories, warning about other entry types.
`file_on_host(path)` creates a file, making its parent directories.

## What it does not do

kindkit does not create, start or delete clusters, and it runs no container
engine or other programs. It has no command-line tool. The caller supplies
the admin kubeconfig text, the API server endpoint, the log lines and the
tar streams; kindkit only processes them.

## Installation

```
pip install .
```

## Examples

Merge a cluster into the kubeconfig:

```python
from kindkit.kubeconfig.read import kind_from_raw_kubeadm
from kindkit.kubeconfig.merge import write_merged

cfg = kind_from_raw_kubeadm(raw_admin_conf, "kind", "https://127.0.0.1:6443")
write_merged(cfg, "")  # "" means: follow $KUBECONFIG / $HOME/.kube/config
```

Remove it again:

```python
from kindkit.kubeconfig.remove import remove_kind

remove_kind("kind", "")
```

Name nodes by role:

```python
from kindkit.common.namer import make_node_namer

namer = make_node_namer("kind")
namer("control-plane")  # "kind-control-plane"
namer("worker")         # "kind-worker"
namer("worker")         # "kind-worker2"
```

Render the load balancer configuration:

```python
from kindkit.loadbalancer import ConfigData, render_config

text = render_config(ConfigData(
    control_plane_port=6443,
    backend_servers={"kind-control-plane": "kind-control-plane:6443"},
    ipv6=False,
))
```

## Running the tests

```
pip install .[test]
pytest
```