import pytest
import requests
import responses

from ulvm.downloads import DownloadError, download_file

URL = "https://downloads.example.com/node.tar.gz"


def test_download_writes_body(tmp_path):
    dest = tmp_path / "node.tar.gz"
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, URL, body=b"payload", status=200)
        download_file(URL, dest)
    assert dest.read_bytes() == b"payload"


def test_download_http_error(tmp_path):
    dest = tmp_path / "node.tar.gz"
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, URL, status=404)
        with pytest.raises(DownloadError) as info:
            download_file(URL, dest)
    assert info.value.status_code == 404
    assert "Http status" in str(info.value)
    assert not dest.exists()


def test_download_network_error(tmp_path):
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, URL, body=requests.ConnectionError("unreachable"))
        with pytest.raises(DownloadError, match="Network error") as info:
            download_file(URL, tmp_path / "out")
    assert info.value.status_code is None


def test_download_filesystem_error(tmp_path):
    dest = tmp_path / "missing" / "node.tar.gz"
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, URL, body=b"payload", status=200)
        with pytest.raises(DownloadError, match="Filesystem error"):
            download_file(URL, dest)