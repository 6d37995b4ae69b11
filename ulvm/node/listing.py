"""Listing of Node.js releases from the official index."""

import requests

from ulvm.node.version import NodeVersion, NodeVersions
from ulvm.ui import display_node_versions

INDEX_URL = "https://nodejs.org/download/release/index.json"


def fetch_versions() -> list[NodeVersion]:
    """Download and decode the Node.js release index."""
    response = requests.get(INDEX_URL)
    entries = response.json()
    if not isinstance(entries, list):
        raise ValueError("Node.js release index must be a list")
    return [NodeVersion.from_json(entry) for entry in entries]


def _prepared_versions() -> NodeVersions:
    versions = NodeVersions(fetch_versions())
    versions.parse_versions()
    versions.assign_status()
    versions.process_versions()
    return versions


def remote_execute() -> list[NodeVersion]:
    """Show the latest current release and the latest of each LTS line."""
    versions = _prepared_versions()
    shown = sorted(
        versions.latest_lts().values(), key=lambda v: v.parsed_version, reverse=True
    )
    shown.insert(0, versions.latest_current())
    display_node_versions(shown)
    return shown


def all_remote_execute() -> list[NodeVersion]:
    """Show every release in the index."""
    versions = _prepared_versions()
    display_node_versions(versions.versions)
    return versions.versions