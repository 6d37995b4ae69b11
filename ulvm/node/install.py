"""Download and unpack a Node.js release into the versions directory."""

from pathlib import Path

from ulvm.archive import ArchiveError, build_archive_name, extract_archive
from ulvm.downloads import DownloadError, download_file
from ulvm.paths import FsError, ensure_node_downloads_dir, ensure_node_versions_dir
from ulvm.system import detect_arch, detect_platform
from ulvm.ui import info, success, verbose

BASE_URL = "https://nodejs.org/download/release"


class InstallError(Exception):
    """Raised when a Node.js version cannot be installed."""


def build_download_node_url(version: str, platform: str, arch: str) -> str:
    """Return the URL of the release archive for a version, platform and arch."""
    ext = "7z" if platform == "win" else "tar.gz"
    return f"{BASE_URL}/{version}/node-{version}-{platform}-{arch}.{ext}"


def _install(version: str) -> None:
    destination = ensure_node_versions_dir()
    installation_folder = destination / version
    if installation_folder.exists():
        verbose(f"Node.js {version} is already installed at: {destination}")
        info(f"Node.js {version} is already installed")
        return

    info(f"Installating Node.js {version} ...")
    platform_name = detect_platform()
    arch = detect_arch()
    url = build_download_node_url(version, platform_name, arch)
    archive_path: Path = ensure_node_downloads_dir() / build_archive_name(version)

    if archive_path.exists():
        info("Archive already exist skip downloading")
    else:
        verbose(f"Downloading Node.js from {url}")
        download_file(url, archive_path)
        success(f"Downloaded Node.js {version}")

    extract_archive(archive_path, destination)

    extraction_folder = destination / f"node-{version}-{platform_name}-{arch}"
    verbose(f"Extraction folder {extraction_folder}")
    extraction_folder.rename(installation_folder)

    verbose(f"Node.js {version} is installed at: {destination}")
    success(f"Installed Node.js {version}")


def execute(version: str) -> None:
    """Install ``version`` unless it is already present."""
    try:
        _install(version)
    except FsError as exc:
        raise InstallError(f"Error filesystem handling: {exc}") from exc
    except DownloadError as exc:
        raise InstallError(f"Error occured while downloading: {exc}") from exc
    except ArchiveError as exc:
        raise InstallError(f"Archive error: {exc}") from exc
    except OSError as exc:
        raise InstallError(f"System error: {exc}") from exc