"""Layout of the ulvm home directory and filesystem helpers."""

import shutil
from pathlib import Path

from ulvm.archive import build_archive_name
from ulvm.system import detect_platform
from ulvm.ui import verbose


class FsError(Exception):
    """Raised when a filesystem operation fails."""


def _io_error(exc: OSError) -> FsError:
    return FsError(f"I/O error: {exc}")


def ensure_dir(path) -> Path:
    """Create ``path`` (with parents) if missing and return it."""
    path = Path(path)
    if not path.exists():
        verbose(f"🔧 Create folder : {path}")
        try:
            path.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise _io_error(exc) from exc
    return path


def ensure_ulvm_home_dir() -> Path:
    try:
        home = Path.home()
    except (RuntimeError, KeyError) as exc:
        raise FsError("Home directory not found") from exc
    return ensure_dir(home / ".ulvm")


def ensure_ulvm_bin_dir() -> Path:
    return ensure_dir(ensure_ulvm_home_dir() / "bin")


def ensure_node_dir() -> Path:
    return ensure_dir(ensure_ulvm_home_dir() / "node")


def ensure_node_versions_dir() -> Path:
    return ensure_dir(ensure_node_dir() / "versions")


def ensure_node_downloads_dir() -> Path:
    return ensure_dir(ensure_node_dir() / "downloads")


def ensure_ulvm_node_bin_dir() -> Path:
    return ensure_dir(ensure_node_dir() / "bin")


def bin_node_version_exec_dir(version: str) -> Path:
    """Return the directory holding the executables of an installed version."""
    version_path = ensure_node_versions_dir() / version
    if detect_platform() == "win":
        return version_path
    return version_path / "bin"


def exec_node_file_path(version: str, name: str) -> Path:
    return bin_node_version_exec_dir(version) / name


def _remove_entry(path: Path) -> None:
    if path.is_symlink() or not path.is_dir():
        path.unlink()
    else:
        shutil.rmtree(path)


def create_symlink_dir(link, target) -> None:
    """Point ``link`` at the directory ``target``, replacing whatever is there."""
    link, target = Path(link), Path(target)
    try:
        if link.exists() or link.is_symlink():
            _remove_entry(link)
        link.symlink_to(target, target_is_directory=True)
    except OSError as exc:
        raise _io_error(exc) from exc


def remove_symlink(link) -> None:
    link = Path(link)
    if link.exists() or link.is_symlink():
        verbose(f"Removing symlink: {link}")
        try:
            _remove_entry(link)
        except OSError as exc:
            raise _io_error(exc) from exc


def remove_version_dir(version_path) -> None:
    version_path = Path(version_path)
    verbose(f"Removing version dir: {version_path}")
    try:
        shutil.rmtree(version_path)
    except OSError as exc:
        raise _io_error(exc) from exc


def remove_archive(version: str) -> None:
    """Delete the downloaded archive of ``version`` if present."""
    archive_path = ensure_node_downloads_dir() / build_archive_name(version)
    if archive_path.exists():
        verbose(f"Removing archive: {archive_path}")
        try:
            archive_path.unlink()
        except OSError as exc:
            raise _io_error(exc) from exc