"""Removal of an installed Node.js version."""

from ulvm.config import UlvmConfig, UlvmConfigError
from ulvm.paths import (
    FsError,
    ensure_node_versions_dir,
    ensure_ulvm_node_bin_dir,
    remove_archive,
    remove_symlink,
    remove_version_dir,
)
from ulvm.ui import info, success, verbose


class UninstallError(Exception):
    """Raised when a Node.js version cannot be uninstalled."""


def _uninstall(version: str, hard: bool) -> None:
    version_path = ensure_node_versions_dir() / version
    if not version_path.exists():
        info(f"Node.js {version} is not installed")
        return

    config = UlvmConfig.load_base()
    if config.node is not None and config.node.version == version:
        verbose(f"Node.js {version} is your current version")
        config.node = None
        config.save()
        remove_symlink(ensure_ulvm_node_bin_dir())

    if hard:
        remove_archive(version)

    remove_version_dir(version_path)
    success(f"Node.js {version} is uninstalled")


def execute(version: str, hard: bool) -> None:
    """Remove ``version``; with ``hard`` also delete its downloaded archive."""
    try:
        _uninstall(version, hard)
    except FsError as exc:
        raise UninstallError(f"Error filesystem handling: {exc}") from exc
    except UlvmConfigError as exc:
        raise UninstallError(f"Error config: {exc}") from exc
    except OSError as exc:
        raise UninstallError(f"Error with io: {exc}") from exc