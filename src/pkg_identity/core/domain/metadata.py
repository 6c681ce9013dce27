"""Extractor metadata shapes.

Each extractor attaches its own metadata object to a package record. Rather
than asking "which concrete shape is this?", consumers query the facets a shape
declares. Every accessor returns ``None`` when the shape does not carry that
facet, so adding a new extractor shape only means subclassing and overriding
what it supports.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


class PackageMetadata:
    def maven_coordinates(self) -> Optional[tuple[str, str]]:
        """Return ``(group_id, artifact_id)`` for Maven-style artifacts."""
        return None

    def os_source_name(self) -> Optional[str]:
        """Return the distro source package name (Debian style)."""
        return None

    def os_origin_name(self) -> Optional[str]:
        """Return the distro origin package name (Alpine style)."""
        return None

    def os_package_name(self) -> Optional[str]:
        """Return the binary package name installed by an OS package manager."""
        return None

    def dep_groups(self) -> Optional[list[str]]:
        """Return dependency group tags such as ``dev`` or ``test``."""
        return None

    def purl(self) -> Optional[str]:
        """Return a package-url recorded alongside the package, if any."""
        return None


@dataclass(frozen=True)
class DpkgMetadata(PackageMetadata):
    package_name: str = ""
    source_name: str = ""
    source_version: str = ""
    maintainer: str = ""
    architecture: str = ""
    os_id: str = ""
    os_version_codename: str = ""

    def os_source_name(self) -> Optional[str]:
        return self.source_name

    def os_package_name(self) -> Optional[str]:
        return self.package_name


@dataclass(frozen=True)
class ApkMetadata(PackageMetadata):
    package_name: str = ""
    origin_name: str = ""
    architecture: str = ""
    license: str = ""
    os_id: str = ""
    os_version_id: str = ""

    def os_origin_name(self) -> Optional[str]:
        return self.origin_name

    def os_package_name(self) -> Optional[str]:
        return self.package_name


@dataclass(frozen=True)
class RpmMetadata(PackageMetadata):
    package_name: str = ""
    source_rpm: str = ""
    epoch: int = 0
    architecture: str = ""
    os_id: str = ""
    os_version_id: str = ""

    def os_package_name(self) -> Optional[str]:
        return self.package_name


@dataclass(frozen=True)
class JavaArchiveMetadata(PackageMetadata):
    group_id: str = ""
    artifact_id: str = ""
    sha1: str = ""

    def maven_coordinates(self) -> Optional[tuple[str, str]]:
        return self.group_id, self.artifact_id


@dataclass(frozen=True)
class DepGroupMetadata(PackageMetadata):
    """Lockfile extractors that know which dependency groups pulled a package in."""

    groups: tuple[str, ...] = field(default_factory=tuple)

    def dep_groups(self) -> Optional[list[str]]:
        return list(self.groups)


@dataclass(frozen=True)
class SbomMetadata(PackageMetadata):
    """Identity recorded by an SPDX or CycloneDX document."""

    purl_string: str = ""
    cpes: tuple[str, ...] = field(default_factory=tuple)

    def purl(self) -> Optional[str]:
        return self.purl_string or None
