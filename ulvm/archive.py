"""Unpacking of downloaded release archives."""

import tarfile
import zipfile
import zlib
from pathlib import Path, PurePosixPath

from ulvm.system import detect_arch, detect_platform
from ulvm.ui import verbose


class ArchiveError(Exception):
    """Raised when an archive cannot be unpacked."""


def _check_entry_name(name: str) -> None:
    entry = PurePosixPath(name.replace("\\", "/"))
    if entry.is_absolute() or ".." in entry.parts:
        raise ArchiveError("Invalid archive entry path")


def _extract_tar(source: Path, destination: Path) -> None:
    with tarfile.open(source, "r:gz") as tar:
        for member in tar.getmembers():
            _check_entry_name(member.name)
        if hasattr(tarfile, "data_filter"):
            tar.extractall(destination, filter="data")
        else:
            tar.extractall(destination)


def _extract_zip(source: Path, destination: Path) -> None:
    with zipfile.ZipFile(source) as archive:
        for name in archive.namelist():
            _check_entry_name(name)
        archive.extractall(destination)


def extract_archive(source_path, destination_path) -> None:
    """Unpack a ``.tar.gz`` or ``.zip`` archive into ``destination_path``."""
    source = Path(source_path)
    destination = Path(destination_path)
    verbose(f"Decompress archive file {source} to {destination}")
    name = source.name.lower()
    try:
        if name.endswith((".tar.gz", ".tgz")):
            _extract_tar(source, destination)
        elif name.endswith(".zip"):
            _extract_zip(source, destination)
        else:
            raise ArchiveError(f"Unsupported archive format: {source.name}")
    except (tarfile.TarError, zipfile.BadZipFile, zlib.error, EOFError) as exc:
        raise ArchiveError(f"Decompression error: {exc}") from exc
    except OSError as exc:
        raise ArchiveError(f"I/O error: {exc}") from exc


def build_archive_name(version: str) -> str:
    """Return the Node.js release archive file name for this host."""
    platform_name = detect_platform()
    ext = "7z" if platform_name == "win" else "tar.gz"
    return f"node-{version}-{platform_name}-{detect_arch()}.{ext}"