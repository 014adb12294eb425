"""Host port selection for cluster nodes."""

from __future__ import annotations

import socket

API_SERVER_INTERNAL_PORT = 6443
"""Port the control plane listens on inside the node network."""


def port_or_get_free_port(port: int, listen_addr: str) -> int:
    """Return ``port`` if set, a free port on ``listen_addr`` if 0, and 0 if -1.

    -1 means the backend should pick the port itself; 0 means unset, so a
    free port is chosen here.
    """
    if port == -1:
        return 0
    if port == 0:
        return get_free_port(listen_addr)
    return port


def get_free_port(listen_addr: str) -> int:
    """Return a TCP port that is currently free on ``listen_addr``.

    Raises OSError if the address cannot be resolved or bound.
    """
    infos = socket.getaddrinfo(listen_addr, 0, type=socket.SOCK_STREAM, proto=socket.IPPROTO_TCP)
    last_error: OSError | None = None
    for family, sock_type, proto, _, address in infos:
        try:
            with socket.socket(family, sock_type, proto) as sock:
                sock.bind(address)
                sock.listen(1)
                return sock.getsockname()[1]
        except OSError as exc:
            last_error = exc
    if last_error is not None:
        raise last_error
    raise OSError(f"no usable address for {listen_addr!r}")