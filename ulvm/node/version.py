"""Node.js release entries from the official release index."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from ulvm.paths import ensure_node_versions_dir
from ulvm.versioning import Semver, parse_semver

_LOWEST = Semver(0, 0, 0)


@dataclass
class NodeVersion:
    """One release listed in the Node.js release index."""

    version: str
    date: str
    lts: str | None
    security: bool
    status: str = ""
    parsed_version: Semver | None = None
    is_installed: bool = False

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> "NodeVersion":
        """Build an entry from a decoded index.json object."""
        if not isinstance(data, Mapping):
            raise ValueError("Node.js release entry must be an object")
        try:
            version = data["version"]
            date = data["date"]
            lts = data["lts"]
            security = data["security"]
        except KeyError as exc:
            raise ValueError(f"missing field {exc.args[0]!r} in Node.js release entry") from exc
        if not isinstance(version, str) or not isinstance(date, str):
            raise ValueError("Node.js release 'version' and 'date' must be strings")
        if not isinstance(security, bool):
            raise ValueError("Node.js release 'security' must be a boolean")
        return cls(
            version=version,
            date=date,
            lts=lts if isinstance(lts, str) else None,
            security=security,
        )

    def parse_version(self) -> None:
        parsed = parse_semver(self.version)
        if parsed is None:
            raise ValueError(f"invalid Node.js version: {self.version}")
        self.parsed_version = parsed

    def process(self) -> None:
        """Record whether this version is installed locally."""
        self.is_installed = self.installation_dir().exists()

    def set_status(self, current_version: str) -> None:
        if self.lts is not None:
            self.status = "LTS"
        elif self.version == current_version:
            self.status = "Current"
        elif not self.security:
            self.status = "EOF"
        else:
            self.status = "Inactive"

    def installation_dir(self) -> Path:
        return ensure_node_versions_dir() / self.version


def _order_key(version: NodeVersion) -> tuple[bool, Semver]:
    return (version.parsed_version is not None, version.parsed_version or _LOWEST)


@dataclass
class NodeVersions:
    """A collection of Node.js releases."""

    versions: list[NodeVersion] = field(default_factory=list)

    def assign_status(self) -> None:
        current = self.latest_current()
        if current is None:
            raise LookupError("no non-LTS Node.js release found")
        for version in self.versions:
            version.set_status(current.version)

    def process_versions(self) -> None:
        for version in self.versions:
            version.process()

    def parse_versions(self) -> None:
        for version in self.versions:
            version.parse_version()

    def latest_current(self) -> NodeVersion | None:
        """Return the highest non-LTS release (the last one on ties)."""
        candidates = [v for v in self.versions if v.lts is None]
        return max(reversed(candidates), key=_order_key, default=None)

    def latest_lts(self) -> dict[str, NodeVersion]:
        """Return the highest release of each LTS line, keyed by codename."""
        latest: dict[str, NodeVersion] = {}
        for version in self.versions:
            if version.lts is None:
                continue
            existing = latest.get(version.lts)
            if existing is None or _order_key(version) > _order_key(existing):
                latest[version.lts] = version
        return latest