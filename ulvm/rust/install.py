"""Installation of rustup or of a Rust toolchain."""

import os
import subprocess
from pathlib import Path

from ulvm.paths import FsError
from ulvm.rust.rustup import RustupNotInstalledError, exit_code, is_rust_installed
from ulvm.rust.toolchains import install_rust_common_dirs
from ulvm.ui import info, success

RUSTUP_INSTALL_SCRIPT = (
    "curl --proto '=https' --tlsv1.2 -sSf https://sh.rustup.rs"
    " | sh -s -- -y --no-modify-path"
)


class InstallRustError(Exception):
    """Raised when rustup or a toolchain cannot be installed."""

    def __init__(self, message: str, returncode: int | None = None):
        super().__init__(message)
        self.returncode = returncode


def _run(command: list[str], **kwargs) -> None:
    try:
        result = subprocess.run(command, **kwargs)
    except OSError as exc:
        raise InstallRustError(f"Process execution error: {exc}") from exc
    if result.returncode != 0:
        code = exit_code(result.returncode)
        raise InstallRustError(
            f"The rustup command failed with exit code: {code}", returncode=code
        )


def write_rust_env_file(rustup_home, cargo_home) -> Path:
    """Write ``rust.env`` next to the rustup home and return its path."""
    rustup_home, cargo_home = Path(rustup_home), Path(cargo_home)
    parent = rustup_home.parent
    if parent == rustup_home:
        parent = Path(".")
    env_file = parent / "rust.env"
    env_file.write_text(
        f". {cargo_home}/env\n"
        f"export RUSTUP_HOME={rustup_home}\n"
        f"export CARGO_HOME={cargo_home}"
    )
    return env_file


def _install_rust_version(version: str) -> None:
    try:
        installed = is_rust_installed()
    except RustupNotInstalledError:
        installed = False
    if not installed:
        raise InstallRustError("Rust is not installed, run `ulvm rust install` first")

    info(f"Installing Rust toolchain version: {version}")
    _run(["rustup", "install", version])
    success(f"Rust toolchain version {version} installed successfully")


def _install_rust_toolchain() -> None:
    try:
        rustup_home, cargo_home = install_rust_common_dirs()
    except FsError as exc:
        raise InstallRustError(f"FS error: {exc}") from exc

    info("Installing rustup...")
    env = {**os.environ, "RUSTUP_HOME": str(rustup_home), "CARGO_HOME": str(cargo_home)}
    _run(["sh", "-c", RUSTUP_INSTALL_SCRIPT], env=env)

    try:
        write_rust_env_file(rustup_home, cargo_home)
    except OSError as exc:
        raise InstallRustError("Fail to write env file for rust") from exc

    success("Env file for rust successfully created")
    success(f"Rustup installed successfully in {rustup_home}")


def execute(version: str | None) -> None:
    """Install the toolchain ``version``, or rustup itself when it is None."""
    if version is None:
        _install_rust_toolchain()
    else:
        _install_rust_version(version)