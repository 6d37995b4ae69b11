"""Removal of a Rust toolchain through rustup."""

from ulvm.rust.rustup import rustup_cli
from ulvm.ui import success


def execute(version: str) -> None:
    """Uninstall the toolchain ``version``."""
    rustup_cli(["toolchain", "uninstall", version])
    success(f"Rustup toolchain {version} is uninstalled")