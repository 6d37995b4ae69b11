import subprocess
from unittest import mock

import pytest

from ulvm.rust.install import InstallRustError, execute, write_rust_env_file
from ulvm.rust.toolchains import install_rust_common_dirs


@pytest.fixture
def home(tmp_path, monkeypatch):
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setenv("USERPROFILE", str(tmp_path))
    return tmp_path


def _done(code):
    return subprocess.CompletedProcess(args=[], returncode=code)


def test_write_env_file(tmp_path):
    rustup_home = tmp_path / "rust" / "rustup"
    cargo_home = tmp_path / "rust" / "cargo"
    rustup_home.mkdir(parents=True)
    path = write_rust_env_file(rustup_home, cargo_home)
    assert path == tmp_path / "rust" / "rust.env"
    assert path.read_text() == (
        f". {cargo_home}/env\n"
        f"export RUSTUP_HOME={rustup_home}\n"
        f"export CARGO_HOME={cargo_home}"
    )


def test_install_rustup_sets_homes_and_env_file(home):
    with mock.patch("subprocess.run", return_value=_done(0)) as run:
        execute(None)
    rustup_home, cargo_home = install_rust_common_dirs()
    rust_dir = home / ".ulvm" / "rust"
    assert rustup_home == rust_dir / "rustup"
    assert cargo_home == rust_dir / "cargo"
    env = run.call_args.kwargs["env"]
    assert env["RUSTUP_HOME"] == str(rustup_home)
    assert env["CARGO_HOME"] == str(cargo_home)
    assert run.call_args.args[0][:2] == ["sh", "-c"]
    assert (rustup_home.parent / "rust.env").exists()


def test_install_rustup_failure(home):
    with mock.patch("subprocess.run", return_value=_done(7)):
        with pytest.raises(InstallRustError) as caught:
            execute(None)
    assert caught.value.returncode == 7
    assert not (home / ".ulvm" / "rust" / "rust.env").exists()


def test_install_version():
    with mock.patch("subprocess.run", side_effect=[_done(0), _done(0)]) as run:
        result = execute("1.80.0")
    assert result is None
    assert run.call_count == 2
    assert run.call_args_list[1].args[0] == ["rustup", "install", "1.80.0"]


def test_install_version_without_rustup():
    with mock.patch("subprocess.run", return_value=_done(1)) as run:
        with pytest.raises(InstallRustError, match="not installed"):
            execute("1.80.0")
    assert run.call_count == 1


def test_install_version_failure():
    with mock.patch("subprocess.run", side_effect=[_done(0), _done(1)]):
        with pytest.raises(InstallRustError) as caught:
            execute("nightly")
    assert caught.value.returncode == 1