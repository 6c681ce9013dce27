from __future__ import annotations

from typing import Iterable

from .domain.enums import SourceType


OS_EXTRACTORS: frozenset[str] = frozenset({"os/dpkg", "os/apk", "os/rpm"})
SBOM_EXTRACTORS: frozenset[str] = frozenset({"sbom/spdx", "sbom/cdx"})
GIT_EXTRACTORS: frozenset[str] = frozenset({"vcs/gitrepo"})
ARTIFACT_EXTRACTORS: frozenset[str] = frozenset({
    "javascript/nodemodules",
    "go/binary",
    "java/archive",
    "python/wheelegg",
})

# Checked in this order for every plugin name.
_TABLES: tuple[tuple[frozenset[str], SourceType], ...] = (
    (OS_EXTRACTORS, SourceType.OS_PACKAGE),
    (SBOM_EXTRACTORS, SourceType.SBOM),
    (GIT_EXTRACTORS, SourceType.GIT),
    (ARTIFACT_EXTRACTORS, SourceType.ARTIFACT),
)


def classify(plugins: Iterable[str]) -> SourceType:
    """Classify a record by the extractors that produced it.

    The first plugin that belongs to any table decides the result. A record
    with no plugins at all is UNKNOWN; plugins that match no table mean the
    package was declared directly in a project manifest.
    """
    seen_any = False
    for plugin in plugins:
        seen_any = True
        for table, source_type in _TABLES:
            if plugin in table:
                return source_type
    if not seen_any:
        return SourceType.UNKNOWN
    return SourceType.PROJECT_PACKAGE
