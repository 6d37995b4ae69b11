"""The ``ulvm.toml`` configuration file, global or per directory."""

import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import tomli_w

from ulvm.paths import FsError, ensure_ulvm_home_dir

CONFIG_FILE_NAME = "ulvm.toml"


class UlvmConfigError(Exception):
    """Raised when the configuration cannot be read or written."""


@dataclass
class NodeConfig:
    version: str


@dataclass
class UlvmConfig:
    node: NodeConfig | None = None

    def to_dict(self) -> dict[str, Any]:
        if self.node is None:
            return {}
        return {"node": {"version": self.node.version}}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "UlvmConfig":
        node = data.get("node")
        if node is None:
            return cls()
        if not isinstance(node, dict) or not isinstance(node.get("version"), str):
            raise UlvmConfigError("I/O Error: Failed to parse config file")
        return cls(node=NodeConfig(version=node["version"]))

    def save(self) -> None:
        """Write this configuration to the global config file."""
        path = _base_config_file_path()
        try:
            path.write_text(tomli_w.dumps(self.to_dict()), encoding="utf-8")
        except OSError as exc:
            raise UlvmConfigError(f"I/O Error: {exc}") from exc

    @classmethod
    def load_base_or_create(cls) -> "UlvmConfig":
        """Load the global config, creating an empty one if none exists."""
        path = _base_config_file_path()
        if not path.exists():
            config = cls()
            config.save()
            return config
        return _parse_config_file(path)

    @classmethod
    def load(cls) -> "UlvmConfig":
        """Load the config of the current directory, else the global one."""
        try:
            return cls.load_current_path()
        except UlvmConfigError:
            return cls.load_base()

    @classmethod
    def load_base(cls) -> "UlvmConfig":
        return _parse_config_file(_base_config_file_path())

    @classmethod
    def load_current_path(cls) -> "UlvmConfig":
        try:
            current_dir = Path.cwd()
        except OSError as exc:
            raise UlvmConfigError(f"I/O Error: {exc}") from exc
        return _parse_config_file(current_dir / CONFIG_FILE_NAME)


def _parse_config_file(path: Path) -> UlvmConfig:
    try:
        content = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise UlvmConfigError(f"I/O Error: {exc}") from exc
    try:
        data = tomllib.loads(content)
    except tomllib.TOMLDecodeError as exc:
        raise UlvmConfigError("I/O Error: Failed to parse config file") from exc
    return UlvmConfig.from_dict(data)


def _base_config_file_path() -> Path:
    try:
        return ensure_ulvm_home_dir() / CONFIG_FILE_NAME
    except FsError as exc:
        raise UlvmConfigError(f"Error filesystem handling: {exc}") from exc