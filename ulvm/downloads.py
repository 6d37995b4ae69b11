"""Fetching of remote files to disk."""

from pathlib import Path

import requests


class DownloadError(Exception):
    """Raised when a download fails; ``status_code`` is set for HTTP failures."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


def download_file(url: str, destination) -> None:
    """Download ``url`` and write its body to ``destination``."""
    try:
        response = requests.get(url)
    except requests.RequestException as exc:
        raise DownloadError(f"Network error: {exc}") from exc

    if not response.ok:
        raise DownloadError(
            f"Download failed, Http status : {response.status_code} {response.reason}",
            status_code=response.status_code,
        )

    try:
        Path(destination).write_bytes(response.content)
    except OSError as exc:
        raise DownloadError(f"Filesystem error: {exc}") from exc