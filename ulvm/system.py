"""Detection of the host operating system and processor architecture."""

import platform

_ARCH_NAMES = {
    "x86_64": "x64",
    "amd64": "x64",
    "aarch64": "arm64",
    "arm64": "arm64",
}

_PLATFORM_NAMES = {
    "linux": "linux",
    "windows": "win",
    "darwin": "darwin",
}


def detect_arch() -> str:
    """Return the architecture name used in Node.js release file names."""
    machine = platform.machine()
    return _ARCH_NAMES.get(machine.lower(), machine)


def detect_platform() -> str:
    """Return the platform name used in Node.js release file names."""
    system = platform.system().lower()
    return _PLATFORM_NAMES.get(system, system)