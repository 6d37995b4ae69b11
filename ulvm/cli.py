"""Command-line entry point: ``ulvm node ...`` and ``ulvm rust ...``."""

import argparse
from collections.abc import Callable

from ulvm import ui
from ulvm.node import install as node_install
from ulvm.node import listing as node_listing
from ulvm.node import uninstall as node_uninstall
from ulvm.node import use as node_use
from ulvm.node.install import InstallError
from ulvm.node.uninstall import UninstallError
from ulvm.node.use import UseError
from ulvm.rust import install as rust_install
from ulvm.rust import listing as rust_listing
from ulvm.rust import uninstall as rust_uninstall
from ulvm.rust import use as rust_use
from ulvm.rust.install import InstallRustError
from ulvm.rust.rustup import RustupError
from ulvm.rust.use import UseRustError

VERSION = "0.1.0"

_VERBOSE_HELP = "Enable verbose output to display additional details during execution"

_FAILURES = (
    InstallError,
    UseError,
    UninstallError,
    InstallRustError,
    UseRustError,
    RustupError,
)


def _verbose_parent() -> argparse.ArgumentParser:
    parent = argparse.ArgumentParser(add_help=False)
    parent.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=argparse.SUPPRESS,
        help=_VERBOSE_HELP,
    )
    return parent


def _add_node_commands(languages, common) -> None:
    node = languages.add_parser("node", parents=[common], help="Manage Node.js versions")
    actions = node.add_subparsers(dest="action", required=True, metavar="COMMAND")

    install = actions.add_parser("install", parents=[common], help="Install a version")
    install.add_argument("version")

    use = actions.add_parser("use", parents=[common], help="Make a version current")
    use.add_argument("version")

    listing = actions.add_parser("list", parents=[common], help="List remote versions")
    listing.add_argument("-a", "--all", action="store_true", help="Show every release")

    uninstall = actions.add_parser("uninstall", parents=[common], help="Remove a version")
    uninstall.add_argument("version")
    uninstall.add_argument(
        "--hard", action="store_true", help="Also delete the downloaded archive"
    )


def _add_rust_commands(languages, common) -> None:
    rust = languages.add_parser(
        "rust", parents=[common], help="Wrapper of rustup cli for managing versions"
    )
    actions = rust.add_subparsers(dest="action", required=True, metavar="COMMAND")

    install = actions.add_parser("install", parents=[common], help="Install rustup or a toolchain")
    install.add_argument(
        "version",
        nargs="?",
        default=None,
        help="Toolchain name, such as 'stable', 'nightly', or '1.8.0'.",
    )

    actions.add_parser("list", parents=[common], help="List Rust versions")

    use = actions.add_parser("use", parents=[common], help="Set the default toolchain")
    use.add_argument(
        "version",
        help="Toolchain name, such as 'stable', 'nightly', '1.8.0', or a custom toolchain name",
    )

    uninstall = actions.add_parser("uninstall", parents=[common], help="Remove a toolchain")
    uninstall.add_argument("version")


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the ``ulvm`` command."""
    parser = argparse.ArgumentParser(prog="ulvm", description="Version manager")
    parser.add_argument("-V", "--version", action="version", version=f"ULVM {VERSION}")
    parser.add_argument("-v", "--verbose", action="store_true", help=_VERBOSE_HELP)
    common = _verbose_parent()
    languages = parser.add_subparsers(dest="language", required=True, metavar="COMMAND")
    _add_node_commands(languages, common)
    _add_rust_commands(languages, common)
    return parser


def _node_list(args: argparse.Namespace) -> None:
    if args.all:
        node_listing.all_remote_execute()
    else:
        node_listing.remote_execute()


_HANDLERS: dict[tuple[str, str], Callable[[argparse.Namespace], object]] = {
    ("node", "install"): lambda args: node_install.execute(args.version),
    ("node", "use"): lambda args: node_use.execute(args.version),
    ("node", "list"): _node_list,
    ("node", "uninstall"): lambda args: node_uninstall.execute(args.version, args.hard),
    ("rust", "install"): lambda args: rust_install.execute(args.version),
    ("rust", "list"): lambda args: rust_listing.execute(),
    ("rust", "use"): lambda args: rust_use.execute(args.version),
    ("rust", "uninstall"): lambda args: rust_uninstall.execute(args.version),
}


def main(argv=None) -> int:
    """Run the command line; exit with status 1 when a command fails."""
    args = build_parser().parse_args(argv)
    ui.set_verbose(args.verbose)
    handler = _HANDLERS[(args.language, args.action)]
    try:
        handler(args)
    except _FAILURES as exc:
        ui.error(str(exc))
        raise SystemExit(1) from exc
    return 0