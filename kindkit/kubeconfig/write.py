"""Writing kubeconfig documents to disk."""

from __future__ import annotations

import os

from .encode import encode
from .helpers import KubeconfigError
from .types import Config


def write_config(cfg: Config, config_path: str | os.PathLike[str]) -> None:
    """Encode ``cfg`` and write it to ``config_path``, creating directories as needed."""
    encoded = encode(cfg).encode("utf-8")
    path = os.fspath(config_path)
    directory = os.path.dirname(path) or "."
    if not os.path.exists(directory):
        try:
            os.makedirs(directory, mode=0o755, exist_ok=True)
        except OSError as exc:
            raise KubeconfigError(f"failed to create directory for KUBECONFIG: {exc}") from exc
    try:
        fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
        with os.fdopen(fd, "wb") as f:
            f.write(encoded)
    except OSError as exc:
        raise KubeconfigError(f"failed to write KUBECONFIG: {exc}") from exc