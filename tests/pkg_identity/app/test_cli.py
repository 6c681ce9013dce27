from __future__ import annotations

import json
import logging

from pkg_identity.app.cli import app, configure_logging


def test_cli_help_shows_commands(runner):
    result = runner.invoke(app, ["--help"])
    assert result.exit_code == 0
    assert "resolve" in result.output
    assert "sources" in result.output


def test_resolve_prints_normalized_table(runner, write_inventory):
    result = runner.invoke(app, ["resolve", str(write_inventory())])
    assert result.exit_code == 0, result.output
    assert "openssl" in result.output
    assert "foo-bar" in result.output
    assert "stdlib" in result.output
    assert "1.20.99" in result.output
    assert "Debian:12" in result.output


def test_resolve_json(runner, write_inventory):
    result = runner.invoke(app, ["resolve", str(write_inventory()), "--json"])
    assert result.exit_code == 0, result.output
    rows = json.loads(result.stdout)
    by_name = {row["name"]: row for row in rows}
    assert set(by_name) == {"openssl", "foo-bar", "pytest", "stdlib", "myrepo"}
    assert by_name["openssl"]["os_package_name"] == "libssl3"
    assert by_name["openssl"]["source_type"] == "os"
    assert by_name["foo-bar"]["source_type"] == "sbom"
    assert by_name["pytest"]["dep_groups"] == ["dev"]
    assert by_name["stdlib"]["version"] == "1.20.99"
    assert by_name["myrepo"]["commit"] == "0123456789abcdef"
    assert by_name["myrepo"]["source_type"] == "git"


def test_resolve_with_filter(runner, write_inventory):
    result = runner.invoke(app, ["resolve", str(write_inventory()), "--json", "--filter", '"dev" in dep_groups'])
    assert result.exit_code == 0, result.output
    assert [row["name"] for row in json.loads(result.stdout)] == ["pytest"]


def test_resolve_with_invalid_filter(runner, write_inventory):
    result = runner.invoke(app, ["resolve", str(write_inventory()), "--filter", "invalid syntax !"])
    assert result.exit_code == 1
    assert "Error" in result.output


def test_resolve_missing_inventory(runner, tmp_path):
    result = runner.invoke(app, ["resolve", str(tmp_path / "missing.json")])
    assert result.exit_code == 1
    assert "file not found" in result.output


def test_sources_counts(runner, write_inventory):
    result = runner.invoke(app, ["sources", str(write_inventory())])
    assert result.exit_code == 0, result.output
    counts = dict(line.split() for line in result.stdout.strip().splitlines())
    assert counts == {"unknown": "0", "os": "1", "sbom": "1", "git": "1", "artifact": "0", "project": "2"}


def test_configure_logging_attaches_handler(restore_package_logger):
    configure_logging("DEBUG")
    assert restore_package_logger.level == logging.DEBUG
    assert restore_package_logger.propagate is False
    assert any(isinstance(h, logging.StreamHandler) for h in restore_package_logger.handlers)


def test_configure_logging_off_leaves_logger_alone(restore_package_logger):
    before = list(restore_package_logger.handlers)
    configure_logging("OFF")
    configure_logging(None)
    assert restore_package_logger.handlers == before
