import pytest
import responses

from ulvm.rust.listing import TAGS_URL, RustVersion, execute, is_valid_rust_version

TAGS = [{"name": "1.85.0"}, {"name": "release-0.1"}, {"name": "1.84.0"}]


@pytest.fixture
def home(tmp_path, monkeypatch):
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setenv("USERPROFILE", str(tmp_path))
    toolchains = tmp_path / ".ulvm" / "rust" / "rustup" / "toolchains"
    (toolchains / "1.85.0-x86_64-unknown-linux-gnu").mkdir(parents=True)
    return tmp_path


def test_is_valid_rust_version():
    assert is_valid_rust_version("1.85.0")
    assert not is_valid_rust_version("release-0.1")


def test_is_installed(home):
    assert RustVersion("1.85.0").is_installed()
    assert not RustVersion("1.84.0").is_installed()


def test_execute_filters_release_tags(home, capsys):
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, TAGS_URL, json=TAGS)
        shown = execute()
        assert rsps.calls[0].request.headers["User-Agent"] == "ulvm"
    assert shown == [RustVersion("1.85.0"), RustVersion("1.84.0")]
    out = capsys.readouterr().out
    assert "release-0.1" not in out
    assert "1.84.0" in out