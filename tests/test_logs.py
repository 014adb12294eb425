import io
import logging
import tarfile

import pytest

from kindkit.logs import file_on_host, untar


def _add_dir(tar, name):
    info = tarfile.TarInfo(name)
    info.type = tarfile.DIRTYPE
    info.mode = 0o755
    tar.addfile(info)


def _add_file(tar, name, data, mode=0o644):
    info = tarfile.TarInfo(name)
    info.size = len(data)
    info.mode = mode
    tar.addfile(info, io.BytesIO(data))


def _add_symlink(tar, name, target):
    info = tarfile.TarInfo(name)
    info.type = tarfile.SYMTYPE
    info.linkname = target
    tar.addfile(info)


def _archive(build, trailing=b""):
    buf = io.BytesIO()
    with tarfile.open(fileobj=buf, mode="w") as tar:
        build(tar)
    buf.write(trailing)
    buf.seek(0)
    return buf


def test_extracts_files_and_directories(tmp_path):
    def build(tar):
        _add_dir(tar, ".")
        _add_file(tar, "./top.txt", b"hello")
        _add_dir(tar, "./sub")
        _add_file(tar, "./sub/inner.log", b"line1\nline2\n")

    untar(_archive(build), tmp_path)
    assert (tmp_path / "top.txt").read_bytes() == b"hello"
    assert (tmp_path / "sub").is_dir()
    assert (tmp_path / "sub" / "inner.log").read_bytes() == b"line1\nline2\n"


def test_unsupported_entries_are_warned_and_skipped(tmp_path, caplog):
    def build(tar):
        _add_file(tar, "real.txt", b"data")
        _add_symlink(tar, "link", "real.txt")

    logger = logging.getLogger("kindkit-test-untar")
    with caplog.at_level(logging.WARNING, logger="kindkit-test-untar"):
        untar(_archive(build), tmp_path, logger)
    assert not (tmp_path / "link").exists()
    assert (tmp_path / "real.txt").read_bytes() == b"data"
    assert any("link" in r.getMessage() for r in caplog.records)


def test_trailing_bytes_are_drained(tmp_path):
    stream = _archive(lambda tar: _add_file(tar, "a", b"x"), trailing=b"\0" * 4096)
    untar(stream, tmp_path)
    assert stream.read() == b""
    assert (tmp_path / "a").read_bytes() == b"x"


def test_empty_stream_extracts_nothing(tmp_path):
    untar(io.BytesIO(b""), tmp_path)
    assert list(tmp_path.iterdir()) == []


def test_corrupt_archive_raises(tmp_path):
    with pytest.raises(tarfile.TarError):
        untar(io.BytesIO(b"x" * 1024), tmp_path)


def test_file_on_host_creates_parents(tmp_path):
    target = tmp_path / "a" / "b" / "out.log"
    with file_on_host(target) as f:
        f.write(b"content")
    assert target.read_bytes() == b"content"


def test_file_on_host_truncates_existing(tmp_path):
    target = tmp_path / "out.log"
    target.write_bytes(b"old contents here")
    with file_on_host(target) as f:
        f.write(b"new")
    assert target.read_bytes() == b"new"