"""tests/conftest.py

Common fixtures for the entire test suite.
"""

import json
import logging
from pathlib import Path

import pytest
from typer.testing import CliRunner


@pytest.fixture(scope="session")
def runner() -> CliRunner:
    """Provides a Typer CliRunner instance."""
    return CliRunner()


@pytest.fixture(autouse=True)
def restore_package_logger():
    """
    The CLI may attach a handler to the package logger and stop propagation.
    Restore it after every test so caplog keeps seeing records.
    """
    logger = logging.getLogger("pkg_identity")
    handlers = list(logger.handlers)
    level = logger.level
    propagate = logger.propagate
    yield logger
    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.propagate = propagate


SAMPLE_PACKAGES: list[dict] = [
    {
        "name": "openssl",
        "version": "3.0.11-1~deb12u2",
        "ecosystem": "Debian:12",
        "locations": ["var/lib/dpkg/status"],
        "plugins": ["os/dpkg"],
        "metadata": {"type": "dpkg", "package_name": "libssl3", "source_name": "openssl"},
    },
    {
        "name": "Foo_Bar",
        "version": "1.0",
        "ecosystem": "PyPI",
        "locations": ["sbom.spdx.json"],
        "plugins": ["sbom/spdx"],
        "metadata": {"type": "sbom", "purl": "pkg:pypi/Foo_Bar@1.0"},
    },
    {
        "name": "pytest",
        "version": "8.0.0",
        "ecosystem": "PyPI",
        "locations": ["poetry.lock"],
        "plugins": ["python/poetrylock"],
        "metadata": {"type": "depgroups", "dep_groups": ["dev"]},
    },
    {
        "name": "go",
        "version": "1.20",
        "ecosystem": "Go",
        "locations": ["go.mod"],
        "plugins": ["go/gomod"],
    },
    {
        "name": "myrepo",
        "ecosystem": "",
        "locations": ["/src/myrepo"],
        "source_code": {"repo": "https://github.com/o/myrepo", "commit": "0123456789abcdef"},
        "plugins": ["vcs/gitrepo"],
    },
]


@pytest.fixture
def write_inventory(tmp_path: Path):
    """Factory fixture writing an inventory JSON file and returning its path."""

    def _write(payload=None, *, name: str = "inventory.json") -> Path:
        if payload is None:
            payload = {"packages": SAMPLE_PACKAGES}
        path = tmp_path / name
        path.write_text(json.dumps(payload), encoding="utf-8")
        return path

    return _write
