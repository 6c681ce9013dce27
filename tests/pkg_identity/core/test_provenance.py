from __future__ import annotations

import pytest

from pkg_identity.core.domain.enums import SourceType
from pkg_identity.core.provenance import (
    ARTIFACT_EXTRACTORS,
    GIT_EXTRACTORS,
    OS_EXTRACTORS,
    SBOM_EXTRACTORS,
    classify,
)


@pytest.mark.parametrize(
    "plugins, expected",
    [
        (("os/dpkg",), SourceType.OS_PACKAGE),
        (("os/apk",), SourceType.OS_PACKAGE),
        (("os/rpm",), SourceType.OS_PACKAGE),
        (("sbom/spdx",), SourceType.SBOM),
        (("sbom/cdx",), SourceType.SBOM),
        (("vcs/gitrepo",), SourceType.GIT),
        (("go/binary",), SourceType.ARTIFACT),
        (("python/wheelegg",), SourceType.ARTIFACT),
        (("javascript/packagelockjson",), SourceType.PROJECT_PACKAGE),
    ],
)
def test_single_plugin_classification(plugins, expected):
    assert classify(plugins) == expected


def test_empty_plugin_set_is_unknown_not_project():
    assert classify(()) == SourceType.UNKNOWN
    assert classify([]) == SourceType.UNKNOWN
    assert classify(iter(())) == SourceType.UNKNOWN


def test_os_match_wins_over_generic_plugin():
    assert classify(("custom/extractor", "os/dpkg")) == SourceType.OS_PACKAGE
    assert classify(("os/dpkg", "custom/extractor")) == SourceType.OS_PACKAGE


def test_first_matching_plugin_decides():
    assert classify(("sbom/spdx", "os/dpkg")) == SourceType.SBOM
    assert classify(("java/archive", "vcs/gitrepo")) == SourceType.ARTIFACT


def test_membership_is_case_sensitive():
    assert classify(("OS/DPKG",)) == SourceType.PROJECT_PACKAGE


def test_tables_are_disjoint():
    tables = [OS_EXTRACTORS, SBOM_EXTRACTORS, GIT_EXTRACTORS, ARTIFACT_EXTRACTORS]
    for i, a in enumerate(tables):
        for b in tables[i + 1:]:
            assert a.isdisjoint(b)


def test_source_type_from_str():
    assert SourceType.from_str("os") == SourceType.OS_PACKAGE
    assert SourceType.from_str("PROJECT_PACKAGE") == SourceType.PROJECT_PACKAGE
    assert SourceType.from_str(" sbom ") == SourceType.SBOM
    assert SourceType.from_str("") is None
    assert SourceType.from_str("nope") is None
