import pytest

from ulvm.node.version import NodeVersion, NodeVersions
from ulvm.versioning import Semver


def entry(version, lts=False, security=True, date="2024-01-01"):
    return {"version": version, "date": date, "lts": lts, "security": security, "files": []}


def make(version, lts=False, security=True):
    node = NodeVersion.from_json(entry(version, lts, security))
    node.parse_version()
    return node


@pytest.fixture
def home(tmp_path, monkeypatch):
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setenv("USERPROFILE", str(tmp_path))
    return tmp_path


def test_from_json_without_lts():
    node = NodeVersion.from_json(entry("v22.0.0", date="2024-04-24"))
    assert node.version == "v22.0.0"
    assert node.date == "2024-04-24"
    assert node.lts is None
    assert node.security is True
    assert node.is_installed is False


def test_from_json_with_lts_name():
    assert NodeVersion.from_json(entry("v20.12.2", lts="Iron")).lts == "Iron"


def test_from_json_non_string_lts():
    assert NodeVersion.from_json(entry("v20.12.2", lts=3)).lts is None


def test_from_json_missing_field():
    data = entry("v20.0.0")
    del data["date"]
    with pytest.raises(ValueError, match="date"):
        NodeVersion.from_json(data)


def test_parse_version():
    assert make("v20.11.1").parsed_version == Semver(20, 11, 1)


def test_parse_invalid_version():
    node = NodeVersion.from_json(entry("latest"))
    with pytest.raises(ValueError):
        node.parse_version()


@pytest.mark.parametrize(
    ("version", "lts", "security", "expected"),
    [
        ("v20.0.0", "Iron", False, "LTS"),
        ("v22.0.0", False, True, "Current"),
        ("v21.0.0", False, False, "EOF"),
        ("v21.0.0", False, True, "Inactive"),
    ],
)
def test_set_status(version, lts, security, expected):
    node = make(version, lts, security)
    node.set_status("v22.0.0")
    assert node.status == expected


def test_latest_current():
    versions = NodeVersions(
        [make("v21.0.0"), make("v22.1.0"), make("v23.0.0", lts="Future"), make("v9.0.0")]
    )
    assert versions.latest_current().version == "v22.1.0"


def test_latest_current_empty():
    assert NodeVersions().latest_current() is None


def test_latest_lts():
    versions = NodeVersions(
        [
            make("v20.10.0", lts="Iron"),
            make("v20.11.0", lts="Iron"),
            make("v18.19.0", lts="Hydrogen"),
            make("v18.2.0", lts="Hydrogen"),
            make("v22.0.0"),
        ]
    )
    latest = {name: v.version for name, v in versions.latest_lts().items()}
    assert latest == {"Iron": "v20.11.0", "Hydrogen": "v18.19.0"}


def test_parse_and_assign_status():
    versions = NodeVersions(
        [
            NodeVersion.from_json(entry("v22.0.0")),
            NodeVersion.from_json(entry("v21.7.0", security=False)),
            NodeVersion.from_json(entry("v20.12.0", lts="Iron")),
        ]
    )
    versions.parse_versions()
    versions.assign_status()
    assert [v.status for v in versions.versions] == ["Current", "EOF", "LTS"]


def test_assign_status_without_current():
    versions = NodeVersions([make("v20.0.0", lts="Iron")])
    with pytest.raises(LookupError):
        versions.assign_status()


def test_process_versions_marks_installed(home):
    installed = make("v20.0.0")
    missing = make("v18.0.0")
    (home / ".ulvm" / "node" / "versions" / "v20.0.0").mkdir(parents=True)
    NodeVersions([installed, missing]).process_versions()
    assert installed.is_installed is True
    assert missing.is_installed is False
    assert installed.installation_dir() == home / ".ulvm" / "node" / "versions" / "v20.0.0"