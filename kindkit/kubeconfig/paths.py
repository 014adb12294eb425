"""Working out which kubeconfig files to read and write, following kubectl."""

from __future__ import annotations

import os
import posixpath
import stat
from collections.abc import Callable, Iterable

KUBECONFIG_ENV = "KUBECONFIG"

GetEnv = Callable[[str], str]


def paths(explicit_path: str | os.PathLike[str], get_env: GetEnv) -> list[str]:
    """Return the kubeconfig files to consider.

    An explicit path wins outright. Otherwise ``$KUBECONFIG`` is split on the
    platform path separator, dropping empty and repeated entries. Failing
    that, ``$HOME/.kube/config`` is used.
    """
    if explicit_path:
        return [os.fspath(explicit_path)]

    found = discard_empty_and_duplicates((get_env(KUBECONFIG_ENV) or "").split(os.pathsep))
    if found:
        return found

    home = home_dir(_goos(), get_env)
    return [posixpath.normpath(posixpath.join(home, ".kube", "config"))]


def path_for_merge(explicit_path: str | os.PathLike[str], get_env: GetEnv) -> str:
    """Return the file kubectl would merge new entries into."""
    candidates = paths(explicit_path, get_env)
    if len(candidates) == 1:
        return candidates[0]
    for filename in candidates:
        if file_exists(filename):
            return filename
    return candidates[-1]


def file_exists(filename: str | os.PathLike[str]) -> bool:
    """Return True if ``filename`` exists and is not a directory."""
    try:
        info = os.stat(filename)
    except OSError:
        return False
    return not stat.S_ISDIR(info.st_mode)


def discard_empty_and_duplicates(paths: Iterable[str]) -> list[str]:
    """Return the non-empty entries of ``paths`` in order, first occurrence only."""
    return list(dict.fromkeys(p for p in paths if p))


def _goos() -> str:
    return "windows" if os.name == "nt" else "linux"


def _is_writable_dir(path: str) -> tuple[bool, bool]:
    """Return (exists, is a directory writable by its owner)."""
    try:
        info = os.stat(path)
    except OSError:
        return False, False
    return True, stat.S_ISDIR(info.st_mode) and bool(stat.S_IMODE(info.st_mode) & 0o200)


def home_dir(goos: str, get_env: GetEnv) -> str:
    """Return the current user's home directory.

    On Windows the first of HOME, HOMEDRIVE+HOMEPATH and USERPROFILE holding
    a ``.kube/config`` file wins; then the first of HOME, USERPROFILE and
    HOMEDRIVE+HOMEPATH that is a writable directory, then the first that
    exists, then the first that is set. Elsewhere HOME is returned.
    """
    if goos != "windows":
        return get_env("HOME") or ""

    home = get_env("HOME") or ""
    home_drive, home_path = get_env("HOMEDRIVE") or "", get_env("HOMEPATH") or ""
    home_drive_home_path = home_drive + home_path if home_drive and home_path else ""
    user_profile = get_env("USERPROFILE") or ""

    for candidate in (home, home_drive_home_path, user_profile):
        if candidate and os.path.exists(os.path.join(candidate, ".kube", "config")):
            return candidate

    first_set = ""
    first_existing = ""
    for candidate in (home, user_profile, home_drive_home_path):
        if not candidate:
            continue
        first_set = first_set or candidate
        exists, writable = _is_writable_dir(candidate)
        if not exists:
            continue
        first_existing = first_existing or candidate
        if writable:
            return candidate

    return first_existing or first_set