"""Layout of the Rust installation managed by ulvm and its toolchains."""

from pathlib import Path

from ulvm.paths import FsError, ensure_dir, ensure_ulvm_home_dir


def _ensure_rust_home_dir() -> Path:
    return ensure_dir(ensure_ulvm_home_dir() / "rust")


def _ensure_rustup_home_dir() -> Path:
    return ensure_dir(_ensure_rust_home_dir() / "rustup")


def _ensure_cargo_home_dir() -> Path:
    return ensure_dir(_ensure_rust_home_dir() / "cargo")


def install_rust_common_dirs() -> tuple[Path, Path]:
    """Create and return the rustup and cargo home directories."""
    return _ensure_rustup_home_dir(), _ensure_cargo_home_dir()


def is_version_prefix(name: str) -> bool:
    """Return whether ``name`` holds only digits and dots."""
    return all(c.isnumeric() or c == "." for c in name)


def extract_version(name: str) -> str | None:
    """Return the numeric version before the first '-' of a toolchain name."""
    prefix, dash, _ = name.partition("-")
    if dash and is_version_prefix(prefix):
        return prefix
    return None


def find_rust_installed_versions() -> list[str]:
    """Return the numeric versions of the installed toolchains."""
    toolchain_dir = _ensure_rustup_home_dir() / "toolchains"
    try:
        entries = sorted(toolchain_dir.iterdir())
    except OSError as exc:
        raise FsError(f"I/O error: {exc}") from exc
    return [
        version
        for path in entries
        if path.is_dir() and (version := extract_version(path.name)) is not None
    ]