"""Lock files guarding kubeconfig updates, compatible with kubectl's scheme."""

from __future__ import annotations

import os
from collections.abc import Iterator
from contextlib import contextmanager, suppress

from .helpers import KubeconfigError


def lock_name(filename: str | os.PathLike[str]) -> str:
    """Return the path of the lock file for ``filename``."""
    return os.fspath(filename) + ".lock"


def lock_file(filename: str | os.PathLike[str]) -> None:
    """Take the lock for ``filename``, creating its directory if needed.

    Raises KubeconfigError if the lock is held or cannot be created.
    """
    directory = os.path.dirname(os.fspath(filename)) or "."
    try:
        if not os.path.exists(directory):
            os.makedirs(directory, mode=0o755, exist_ok=True)
        fd = os.open(lock_name(filename), os.O_CREAT | os.O_EXCL | os.O_RDONLY, 0)
    except OSError as exc:
        raise KubeconfigError(f"failed to lock config file: {exc}") from exc
    os.close(fd)


def unlock_file(filename: str | os.PathLike[str]) -> None:
    """Release the lock for ``filename``."""
    os.remove(lock_name(filename))


@contextmanager
def locked(filename: str | os.PathLike[str]) -> Iterator[None]:
    """Hold the lock for ``filename`` for the duration of the block."""
    lock_file(filename)
    try:
        yield
    finally:
        with suppress(OSError):
            unlock_file(filename)