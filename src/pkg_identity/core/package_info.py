from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Union

from . import ecosystem as eco
from .domain.enums import SourceType
from .domain.models import PackageIdentity, RawPackage
from .ecosystem import EcosystemParseError, ParsedEcosystem, UNKNOWN_ECOSYSTEM
from .provenance import classify
from ..shared import purl
from ..shared.semverlike import parse_semver_like

logger = logging.getLogger(__name__)


GO_STDLIB_NAME = "stdlib"
GO_TOOLCHAIN_NAME = "go"

_PYPI_SEPARATORS = re.compile(r"[-_.]+")


def normalize_pypi_name(name: str) -> str:
    # https://peps.python.org/pep-0503/#normalized-names
    return _PYPI_SEPARATORS.sub("-", name).lower()


@dataclass(frozen=True)
class Unresolved:
    """No identity was precomputed; getters apply the per-field rules."""


@dataclass(frozen=True)
class Resolved:
    """Identity taken from the package-url an SBOM recorded for the package."""

    identity: PackageIdentity


UNRESOLVED = Unresolved()

IdentityState = Union[Resolved, Unresolved]


@dataclass(frozen=True)
class PackageInfo:
    """Normalized view over a raw package record.

    Getters apply ecosystem-specific patches on every call. The one exception is
    the SBOM case, where ``from_inventory`` resolves the identity from the purl
    once and every identity getter then returns it verbatim.
    """

    package: RawPackage
    state: IdentityState = UNRESOLVED

    @property
    def is_resolved(self) -> bool:
        return isinstance(self.state, Resolved)

    def name(self) -> str:
        if isinstance(self.state, Resolved):
            return self.state.identity.name

        raw_name = self.package.name
        ecosystem = self.ecosystem().ecosystem

        # Go toolchain releases are tracked as the synthetic "stdlib" package
        if ecosystem == eco.GO and raw_name == GO_TOOLCHAIN_NAME:
            return GO_STDLIB_NAME

        if ecosystem == eco.PYPI:
            return normalize_pypi_name(raw_name)

        metadata = self.package.metadata
        if metadata is None:
            return raw_name

        coords = metadata.maven_coordinates()
        if coords is not None:
            group_id, artifact_id = coords
            if group_id and artifact_id:
                return f"{group_id}:{artifact_id}"

        # Distro advisories are keyed on the source package, not the binary
        source_name = metadata.os_source_name()
        if source_name:
            return source_name

        origin_name = metadata.os_origin_name()
        if origin_name:
            return origin_name

        return raw_name

    def ecosystem(self) -> ParsedEcosystem:
        text = self.package.ecosystem
        if isinstance(self.state, Resolved):
            text = self.state.identity.ecosystem

        try:
            return eco.parse(text)
        except EcosystemParseError as e:
            logger.warning(f"Warning: {e}")
            return UNKNOWN_ECOSYSTEM

    def version(self) -> str:
        if isinstance(self.state, Resolved):
            return self.state.identity.version

        raw_version = self.package.version
        # go1.20 and earlier omit the patch version. Assuming .0 would flag
        # every patched release, so assume the latest patch of that minor line.
        if self.ecosystem().ecosystem == eco.GO and self.name() == GO_STDLIB_NAME:
            v = parse_semver_like(raw_version, 3)
            if len(v.components) == 2:
                return f"{v.fetch(0)}.{v.fetch(1)}.99"

        return raw_version

    def identity(self) -> PackageIdentity:
        return PackageIdentity(name=self.name(), version=self.version(), ecosystem=str(self.ecosystem()))

    def location(self) -> str:
        if self.package.locations:
            return self.package.locations[0]
        return ""

    def commit(self) -> str:
        if self.package.source_code is not None:
            return self.package.source_code.commit
        return ""

    def source_type(self) -> SourceType:
        return classify(self.package.plugins)

    def dep_groups(self) -> list[str]:
        metadata = self.package.metadata
        if metadata is not None:
            groups = metadata.dep_groups()
            if groups is not None:
                return list(groups)
        return []

    def os_package_name(self) -> str:
        metadata = self.package.metadata
        if metadata is None:
            return ""
        return metadata.os_package_name() or ""


def _resolve_from_purl(raw: RawPackage) -> IdentityState:
    built = purl.from_package(raw)
    if built is None:
        logger.debug(f"No purl derivable for SBOM package {raw.name!r}; using field rules")
        return UNRESOLVED
    try:
        identity = purl.to_identity(built.to_string())
    except purl.PurlError as e:
        logger.debug(f"Could not map purl for SBOM package {raw.name!r}: {e}")
        return UNRESOLVED
    return Resolved(identity)


def from_inventory(raw: RawPackage) -> PackageInfo:
    """Wrap a raw record, resolving SBOM identities from their purl up front."""
    if classify(raw.plugins) == SourceType.SBOM:
        return PackageInfo(package=raw, state=_resolve_from_purl(raw))
    return PackageInfo(package=raw)
