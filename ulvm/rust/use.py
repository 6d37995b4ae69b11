"""Selection of the default Rust toolchain through rustup."""

from ulvm.rust.rustup import (
    RustupError,
    RustupNotInstalledError,
    is_rust_installed,
    rustup_cli,
)
from ulvm.ui import info, success


class UseRustError(Exception):
    """Raised when the default toolchain cannot be set."""


def execute(version: str) -> None:
    """Make ``version`` the default Rust toolchain."""
    info(f"Setting up rust {version} as current")
    try:
        is_rust_installed()
        rustup_cli(["default", version])
    except (RustupError, RustupNotInstalledError) as exc:
        raise UseRustError(f"Error: {exc}") from exc
    success(f"Rust {version} is now the default version")