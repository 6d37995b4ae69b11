"""Listing of Rust releases from the published repository tags."""

from dataclasses import dataclass

import requests

from ulvm.rust.toolchains import find_rust_installed_versions
from ulvm.ui import display_rust_versions

TAGS_URL = "https://api.github.com/repos/rust-lang/rust/tags"


@dataclass
class RustVersion:
    """A Rust release tag."""

    name: str

    def is_installed(self) -> bool:
        return self.name in find_rust_installed_versions()


def is_valid_rust_version(tag_name: str) -> bool:
    """Return whether a tag names a Rust version rather than an old release tag."""
    return not tag_name.startswith("release")


def execute() -> list[RustVersion]:
    """Fetch the release tags, print them and return the versions shown."""
    response = requests.get(TAGS_URL, headers={"User-Agent": "ulvm"})
    tags = response.json()
    if not isinstance(tags, list):
        raise ValueError("Failed to parse json to rust version")
    versions = [RustVersion(name=tag["name"]) for tag in tags]
    valid = [v for v in versions if is_valid_rust_version(v.name)]
    display_rust_versions(valid)
    return valid