"""Collecting node logs onto the host."""

from __future__ import annotations

import logging
import os
import shutil
import tarfile
from typing import IO, BinaryIO

_log = logging.getLogger(__name__)


def _drain(stream: BinaryIO) -> None:
    # trailing padding must be consumed so the writer is not left hanging
    while stream.read(64 * 1024):
        pass


def untar(stream: BinaryIO, directory: str | os.PathLike[str], logger: logging.Logger | None = None) -> None:
    """Extract the tar archive read from ``stream`` into ``directory``.

    Regular files and directories are written; other entry types are skipped
    with a warning. Raises tarfile.TarError on a malformed archive and
    OSError when a file cannot be written in full.
    """
    logger = logger or _log
    root = os.fspath(directory)
    try:
        archive = tarfile.open(fileobj=stream, mode="r|")
    except tarfile.ReadError as exc:
        if str(exc) == "empty file":
            _drain(stream)
            return
        raise tarfile.ReadError(f"tar reading error: {exc}") from exc

    with archive:
        try:
            for member in archive:
                target = os.path.normpath(os.path.join(root, *member.name.split("/")))
                if member.isfile():
                    _write_member(archive, member, target)
                elif member.isdir():
                    if not os.path.exists(target):
                        os.makedirs(target, mode=0o755, exist_ok=True)
                else:
                    logger.warning(
                        "tar file entry %s contained unsupported file type %r",
                        member.name,
                        member.type,
                    )
        except tarfile.TarError as exc:
            raise tarfile.ReadError(f"tar reading error: {exc}") from exc
    _drain(stream)


def _write_member(archive: tarfile.TarFile, member: tarfile.TarInfo, target: str) -> None:
    source = archive.extractfile(member)
    fd = os.open(target, os.O_CREAT | os.O_RDWR, member.mode & 0o7777)
    try:
        with os.fdopen(fd, "r+b") as out:
            if source is not None:
                shutil.copyfileobj(source, out)
            written = out.tell()
    except OSError as exc:
        raise OSError(f"error writing to {target}: {exc}") from exc
    if written != member.size:
        raise OSError(f"only wrote {written} bytes to {target}; expected {member.size}")


def file_on_host(path: str | os.PathLike[str]) -> IO[bytes]:
    """Create (or truncate) the file at ``path``, creating parent directories."""
    parent = os.path.dirname(os.fspath(path))
    if parent:
        os.makedirs(parent, mode=0o777, exist_ok=True)
    return open(path, "w+b")