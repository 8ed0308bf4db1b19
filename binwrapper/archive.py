"""Extracting downloaded archives into a destination directory."""

from __future__ import annotations

import os
import shutil
import tarfile
import zipfile


class ArchiveError(Exception):
    """An archive could not be read or extracted."""


class UnsafePathError(ArchiveError):
    """An archive entry points outside the destination directory."""


def _target(dest: str, name: str) -> str:
    root = os.path.abspath(dest)
    path = os.path.abspath(os.path.join(dest, name))
    if path != root and not path.startswith(root + os.sep):
        raise UnsafePathError(f"illegal file path: {path}")
    return path


def _is_root(dest: str, path: str) -> bool:
    return path == os.path.abspath(dest)


def unzip(src: str, dest: str) -> None:
    """Extract a zip archive into ``dest``."""
    try:
        archive = zipfile.ZipFile(src)
    except zipfile.BadZipFile as exc:
        raise ArchiveError(f"{src} is not a valid zip archive") from exc
    with archive:
        for info in archive.infolist():
            path = _target(dest, info.filename)
            if _is_root(dest, path):
                continue
            if info.is_dir():
                os.makedirs(path, exist_ok=True)
                continue
            os.makedirs(os.path.dirname(path), exist_ok=True)
            with archive.open(info) as source, open(path, "wb") as target:
                shutil.copyfileobj(source, target)
            mode = (info.external_attr >> 16) & 0o777
            if mode:
                os.chmod(path, mode)


def untar(src: str, dest: str) -> None:
    """Extract a tar archive, compressed or not, into ``dest``."""
    try:
        archive = tarfile.open(src, "r:*")
    except (tarfile.TarError, OSError) as exc:
        raise ArchiveError(f"{src} is not a valid tar.gz archive") from exc
    with archive:
        try:
            for member in archive:
                path = _target(dest, member.name)
                if _is_root(dest, path):
                    continue
                if member.isdir():
                    os.makedirs(path, exist_ok=True)
                elif member.isreg():
                    os.makedirs(os.path.dirname(path), exist_ok=True)
                    source = archive.extractfile(member)
                    with source, open(path, "wb") as target:
                        shutil.copyfileobj(source, target)
                    os.chmod(path, member.mode & 0o777)
        except tarfile.TarError as exc:
            raise ArchiveError(f"{src} is not a valid tar.gz archive") from exc


def extract_archive(file: str, dest: str) -> None:
    """Extract ``file`` by its extension into ``dest`` and remove the archive."""
    try:
        if file.endswith(".zip"):
            unzip(file, dest)
        elif file.endswith((".tar.gz", ".tgz")):
            untar(file, dest)
        else:
            raise ArchiveError(f"unsupported archive format: {file}")
    finally:
        try:
            os.remove(file)
        except FileNotFoundError:
            pass


def strip_dirs(dest: str, count: int) -> None:
    """Lift the contents found ``count`` directories deep up into ``dest``."""
    current = dest
    to_remove: list[str] = []
    for _ in range(count):
        entries = sorted(os.scandir(current), key=lambda entry: entry.name)
        first_dir = next((entry for entry in entries if entry.is_dir()), None)
        if first_dir is not None:
            if current != dest:
                to_remove.append(current)
            current = os.path.join(current, first_dir.name)

    for entry in sorted(os.scandir(current), key=lambda entry: entry.name):
        os.replace(os.path.join(current, entry.name), os.path.join(dest, entry.name))

    for directory in to_remove:
        shutil.rmtree(directory, ignore_errors=True)