"""Parsing and ordering of MAJOR.MINOR.PATCH version strings."""

import re
from dataclasses import dataclass

_U64_MAX = 2**64 - 1
_NUMBER = re.compile(r"\+?[0-9]+")


@dataclass(frozen=True, order=True)
class Semver:
    """A three-part numeric version, ordered component by component."""

    major: int
    minor: int
    patch: int


def _parse_component(text: str) -> int | None:
    if not _NUMBER.fullmatch(text):
        return None
    value = int(text)
    return value if value <= _U64_MAX else None


def parse_semver(version: str) -> Semver | None:
    """Parse ``[v]MAJOR.MINOR.PATCH``; return None if the text is not of that form."""
    parts = version.lstrip("v").split(".")
    if len(parts) != 3:
        return None
    numbers = [_parse_component(part) for part in parts]
    if any(number is None for number in numbers):
        return None
    major, minor, patch = numbers
    return Semver(major, minor, patch)