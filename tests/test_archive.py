import io
import os
import tarfile
import zipfile

import pytest

from binwrapper.archive import (
    ArchiveError,
    UnsafePathError,
    extract_archive,
    strip_dirs,
    untar,
    unzip,
)

FILES = {
    "pkg/bin/tool": b"#!/bin/sh\necho tool\n",
    "pkg/README": b"readme text\n",
}


def _make_zip(path, files, mode=0o755):
    with zipfile.ZipFile(path, "w") as archive:
        for name, data in files.items():
            info = zipfile.ZipInfo(name)
            info.external_attr = mode << 16
            archive.writestr(info, data)


def _make_tar(path, files, mode=0o755, compression="gz"):
    with tarfile.open(path, f"w:{compression}") as archive:
        for name, data in files.items():
            info = tarfile.TarInfo(name)
            info.size = len(data)
            info.mode = mode
            archive.addfile(info, io.BytesIO(data))


def _read_tree(root):
    result = {}
    for directory, _, names in os.walk(root):
        for name in names:
            full = os.path.join(directory, name)
            rel = os.path.relpath(full, root).replace(os.sep, "/")
            with open(full, "rb") as fh:
                result[rel] = fh.read()
    return result


def test_unzip_round_trip(tmp_path):
    archive = tmp_path / "a.zip"
    _make_zip(archive, FILES)
    dest = tmp_path / "out"
    unzip(str(archive), str(dest))
    assert _read_tree(dest) == FILES
    assert os.stat(dest / "pkg" / "bin" / "tool").st_mode & 0o777 == 0o755


def test_untar_round_trip(tmp_path):
    archive = tmp_path / "a.tar.gz"
    _make_tar(archive, FILES, mode=0o700)
    dest = tmp_path / "out"
    untar(str(archive), str(dest))
    assert _read_tree(dest) == FILES
    assert os.stat(dest / "pkg" / "README").st_mode & 0o777 == 0o700


def test_unzip_rejects_escaping_path(tmp_path):
    archive = tmp_path / "evil.zip"
    _make_zip(archive, {"../evil.txt": b"x"})
    with pytest.raises(UnsafePathError):
        unzip(str(archive), str(tmp_path / "out"))
    assert not (tmp_path / "evil.txt").exists()


def test_untar_rejects_escaping_path(tmp_path):
    archive = tmp_path / "evil.tar.gz"
    _make_tar(archive, {"../evil.txt": b"x"})
    with pytest.raises(UnsafePathError):
        untar(str(archive), str(tmp_path / "out"))
    assert not (tmp_path / "evil.txt").exists()


def test_invalid_zip_raises(tmp_path):
    bogus = tmp_path / "bogus.zip"
    bogus.write_bytes(b"not a zip")
    with pytest.raises(ArchiveError):
        unzip(str(bogus), str(tmp_path / "out"))


def test_invalid_tar_raises(tmp_path):
    bogus = tmp_path / "bogus.tar.gz"
    bogus.write_bytes(b"not a tarball at all")
    with pytest.raises(ArchiveError):
        untar(str(bogus), str(tmp_path / "out"))


@pytest.mark.parametrize("name", ["a.zip", "a.tar.gz", "a.tgz"])
def test_extract_archive_dispatches_and_removes(tmp_path, name):
    archive = tmp_path / name
    if name.endswith(".zip"):
        _make_zip(archive, FILES)
    else:
        _make_tar(archive, FILES)
    dest = tmp_path / "out"
    extract_archive(str(archive), str(dest))
    assert _read_tree(dest) == FILES
    assert not archive.exists()


def test_extract_archive_unsupported_format(tmp_path):
    archive = tmp_path / "a.rar"
    archive.write_bytes(b"data")
    with pytest.raises(ArchiveError, match="unsupported archive format"):
        extract_archive(str(archive), str(tmp_path))
    assert not archive.exists()


def test_strip_two_levels(tmp_path):
    archive = tmp_path / "a.tar.gz"
    _make_tar(archive, FILES)
    dest = tmp_path / "out"
    extract_archive(str(archive), str(dest))
    strip_dirs(str(dest), 2)
    assert _read_tree(dest) == {"tool": FILES["pkg/bin/tool"]}
    assert sorted(os.listdir(dest)) == ["tool"]


def test_strip_one_level_keeps_emptied_dir(tmp_path):
    dest = tmp_path / "out"
    (dest / "pkg").mkdir(parents=True)
    (dest / "pkg" / "tool").write_bytes(b"x")
    strip_dirs(str(dest), 1)
    assert (dest / "tool").read_bytes() == b"x"
    assert list((dest / "pkg").iterdir()) == []