"""Selection of the active Node.js version."""

from ulvm.config import NodeConfig, UlvmConfig, UlvmConfigError
from ulvm.node import install
from ulvm.node.install import InstallError
from ulvm.paths import FsError, create_symlink_dir, ensure_node_dir, ensure_node_versions_dir
from ulvm.ui import info, success, verbose


class UseError(Exception):
    """Raised when a Node.js version cannot be made current."""


def _use(version: str) -> None:
    version_path = ensure_node_versions_dir() / version
    if not version_path.exists():
        verbose(f"Node.js version {version} not found locally. Installing...")
        install.execute(version)

    config = UlvmConfig.load_base_or_create()
    if config.node is not None and config.node.version == version:
        info(f"Node.js version {version} is already set as current.")
        return

    config.node = NodeConfig(version=version)
    config.save()

    verbose("Creating symlink")
    create_symlink_dir(ensure_node_dir() / "bin", version_path / "bin")
    success(f"Now using Node.js version: {version}")


def execute(version: str) -> None:
    """Make ``version`` current, installing it first if needed."""
    try:
        _use(version)
    except InstallError as exc:
        raise UseError(f"Error while installation: {exc}") from exc
    except FsError as exc:
        raise UseError(f"Error filesystem handling: {exc}") from exc
    except UlvmConfigError as exc:
        raise UseError(f"Error with the config: {exc}") from exc
    except OSError as exc:
        raise UseError(f"Creating symlink failed: {exc}") from exc