"""Proxy environment variables passed on to cluster nodes."""

from __future__ import annotations

import os
from collections.abc import Callable

HTTP_PROXY = "HTTP_PROXY"
HTTPS_PROXY = "HTTPS_PROXY"
NO_PROXY = "NO_PROXY"


def _os_getenv(name: str) -> str:
    return os.environ.get(name, "")


def get_proxy_envs(
    service_subnet: str,
    pod_subnet: str,
    get_env: Callable[[str], str] | None = None,
) -> dict[str, str]:
    """Return the proxy variables to set, in upper and lower case.

    Each variable is read in upper case, falling back to lower case. When any
    proxy setting is present, NO_PROXY is extended with the cluster subnets.
    """
    lookup = get_env or _os_getenv
    envs: dict[str, str] = {}
    for name in (HTTP_PROXY, HTTPS_PROXY, NO_PROXY):
        value = lookup(name) or lookup(name.lower()) or ""
        if value:
            envs[name] = value
            envs[name.lower()] = value

    if envs:
        no_proxy = envs.get(NO_PROXY, "")
        if no_proxy:
            no_proxy += ","
        no_proxy += f"{service_subnet},{pod_subnet}"
        envs[NO_PROXY] = no_proxy
        envs[NO_PROXY.lower()] = no_proxy
    return envs