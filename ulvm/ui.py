"""Console output helpers: status messages and version tables."""

import sys
from collections.abc import Iterable
from typing import Any

from termcolor import colored

ICON_SUCCESS = "✅️"
ICON_ERROR = "❌"
ICON_WARN = "⚠️"
ICON_INFO = "ℹ️"
ICON_ACTIVE = "➡️"

_state = {"verbose": False}


def set_verbose(value: bool) -> None:
    """Turn verbose output on or off."""
    _state["verbose"] = bool(value)


def is_verbose() -> bool:
    """Return whether verbose output is enabled."""
    return _state["verbose"]


def success(msg: str) -> None:
    print(f"{ICON_SUCCESS:<3} {colored(msg, 'green')} \n")


def error(msg: str) -> None:
    print(f"{ICON_ERROR:<3} {colored(msg, 'red')} \n", file=sys.stderr)


def warn(msg: str) -> None:
    print(f"{ICON_WARN:<3}  {colored(msg, 'yellow')} \n")


def info(msg: str) -> None:
    print(f"{ICON_INFO:<3}  {colored(msg, 'cyan')} \n")


def verbose(msg: str) -> None:
    """Print ``msg`` only when verbose output is enabled."""
    if is_verbose():
        print(f"{colored(msg, attrs=['dark']):<3}")


def _header(text: str, width: int = 0) -> str:
    return colored(f"{text:<{width}}", "cyan", attrs=["bold"])


def display_node_versions(versions: Iterable[Any]) -> None:
    """Print a table of Node.js releases, highlighting installed ones."""
    print(
        f"\n{_header('Version', 12)} {_header('Date', 12)} "
        f"{_header('Status', 10)} {_header('Codename')}"
    )
    print()
    for version in versions:
        cells = [
            f"{version.version:<12}",
            f"{version.date:<12}",
            f"{version.status:<10}",
            version.lts or "",
        ]
        if version.is_installed:
            cells = [colored(cell, "cyan") for cell in cells]
        print(" ".join(cells))


def display_rust_versions(versions: Iterable[Any]) -> None:
    """Print a list of Rust toolchain versions, highlighting installed ones."""
    print(f"\n{_header('Version', 12)}")
    print()
    for version in versions:
        name = f"{version.name:<12}"
        print(colored(name, "cyan") if version.is_installed() else name)