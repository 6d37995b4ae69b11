"""Invocation of the rustup command-line tool."""

import subprocess
from collections.abc import Iterable


class RustupNotInstalledError(Exception):
    """Raised when rustup cannot be started at all."""

    def __init__(self, message: str = "Rustup cli is not installed"):
        super().__init__(message)


class RustupError(Exception):
    """Raised when a rustup invocation fails; ``returncode`` is set on a bad exit."""

    def __init__(self, message: str, returncode: int | None = None):
        super().__init__(message)
        self.returncode = returncode


def exit_code(returncode: int) -> int:
    """Map a process return code to an exit code, -1 when killed by a signal."""
    return returncode if returncode >= 0 else -1


def is_rust_installed() -> bool:
    """Return whether ``rustup --version`` runs successfully."""
    try:
        result = subprocess.run(["sh", "-c", "rustup --version"])
    except OSError as exc:
        raise RustupNotInstalledError() from exc
    return result.returncode == 0


def rustup_cli(args: Iterable[str]) -> None:
    """Run ``rustup`` with ``args``, raising RustupError on failure."""
    try:
        result = subprocess.run(["rustup", *args])
    except OSError as exc:
        raise RustupError(f"Rustup cli execution error {exc}") from exc
    if result.returncode != 0:
        code = exit_code(result.returncode)
        raise RustupError(
            f"The rustup command failed with exit code: {code}", returncode=code
        )