"""Package-url (purl) helpers.

Builds purls from raw package records and maps purl strings back to
``(name, version, ecosystem)`` identities following the OSV ecosystem names.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional
from urllib.parse import quote, unquote

from ..core import ecosystem as eco
from ..core.domain.models import PackageIdentity

if TYPE_CHECKING:
    from ..core.domain.models import RawPackage

logger = logging.getLogger(__name__)


ECOSYSTEM_TO_TYPE: dict[str, str] = {
    eco.PYPI: "pypi",
    eco.NPM: "npm",
    eco.MAVEN: "maven",
    eco.GO: "golang",
    eco.DEBIAN: "deb",
    eco.ALPINE: "apk",
    eco.CRATES_IO: "cargo",
    eco.RUBYGEMS: "gem",
    eco.NUGET: "nuget",
    eco.PACKAGIST: "composer",
    eco.HEX: "hex",
    eco.PUB: "pub",
    eco.CONAN_CENTER: "conan",
    eco.CRAN: "cran",
}

TYPE_TO_ECOSYSTEM: dict[str, str] = {v: k for k, v in ECOSYSTEM_TO_TYPE.items()}

# purl types whose namespace is the distro rather than part of the package name
_DISTRO_NAMESPACE_TYPES = frozenset({"deb", "apk"})
_DISTRO_NAMESPACES = {"deb": "debian", "apk": "alpine"}


class PurlError(ValueError):
    pass


@dataclass(frozen=True)
class PackageURL:
    type: str
    name: str
    namespace: Optional[str] = None
    version: Optional[str] = None
    qualifiers: tuple[tuple[str, str], ...] = field(default_factory=tuple)
    subpath: Optional[str] = None

    def qualifier(self, key: str) -> Optional[str]:
        for k, v in self.qualifiers:
            if k == key:
                return v
        return None

    def to_string(self) -> str:
        parts = [f"pkg:{self.type}/"]
        if self.namespace:
            parts.append("/".join(quote(seg, safe="") for seg in self.namespace.split("/")))
            parts.append("/")
        parts.append(quote(self.name, safe=""))
        if self.version:
            parts.append("@" + quote(self.version, safe=""))
        if self.qualifiers:
            parts.append("?" + "&".join(f"{k}={quote(v, safe='')}" for k, v in sorted(self.qualifiers)))
        if self.subpath:
            parts.append("#" + self.subpath)
        return "".join(parts)

    def __str__(self) -> str:
        return self.to_string()


def normalize_name(pkg_type: str, name: str) -> str:
    """Apply the purl type-specific name rules."""
    if pkg_type == "pypi":
        return name.lower().replace("_", "-")
    if pkg_type in _DISTRO_NAMESPACE_TYPES:
        return name.lower()
    return name


def parse(text: str) -> PackageURL:
    """Parse a purl string such as ``pkg:deb/debian/curl@7.88.1?distro=12``."""
    if not text or not text.startswith("pkg:"):
        raise PurlError(f"not a package url: {text!r}")

    rest = text[4:].lstrip("/")

    subpath: Optional[str] = None
    if "#" in rest:
        rest, subpath = rest.split("#", 1)
        subpath = subpath.strip("/") or None

    qualifiers: list[tuple[str, str]] = []
    if "?" in rest:
        rest, query = rest.split("?", 1)
        for pair in query.split("&"):
            if not pair:
                continue
            key, sep, value = pair.partition("=")
            if not sep or not key:
                raise PurlError(f"malformed qualifier {pair!r} in {text!r}")
            if value:
                qualifiers.append((key.lower(), unquote(value)))

    type_end = rest.find("/")
    if type_end <= 0:
        raise PurlError(f"missing type or name in {text!r}")
    pkg_type = rest[:type_end].lower()
    rest = rest[type_end + 1:]

    version: Optional[str] = None
    head, at, tail = rest.rpartition("@")
    if at and "/" not in tail and head:
        rest, version = head, unquote(tail) or None

    segments = [unquote(seg) for seg in rest.strip("/").split("/") if seg]
    if not segments:
        raise PurlError(f"missing name in {text!r}")
    namespace = "/".join(segments[:-1]) or None
    if namespace is None and segments[-1].startswith("@"):
        raise PurlError(f"missing name in {text!r}")
    name = normalize_name(pkg_type, segments[-1])

    return PackageURL(
        type=pkg_type,
        name=name,
        namespace=namespace,
        version=version,
        qualifiers=tuple(sorted(qualifiers)),
        subpath=subpath,
    )


def _split_name(ecosystem: str, name: str) -> tuple[Optional[str], str]:
    if ecosystem == eco.MAVEN and ":" in name:
        group, _, artifact = name.partition(":")
        return group, artifact
    if "/" in name:
        namespace, _, short = name.rpartition("/")
        return namespace, short
    return None, name


def from_package(raw: "RawPackage") -> Optional[PackageURL]:
    """Build a purl for a raw record, or return None when none can be derived.

    A purl recorded in the metadata (SBOM documents carry one per component)
    takes precedence over one synthesized from the ecosystem and name.
    """
    if raw.metadata is not None:
        recorded = raw.metadata.purl()
        if recorded:
            try:
                return parse(recorded)
            except PurlError as e:
                logger.debug(f"Ignoring unparseable recorded purl for {raw.name}: {e}")
                return None

    base, _, suffix = raw.ecosystem.partition(":")
    pkg_type = ECOSYSTEM_TO_TYPE.get(base)
    if pkg_type is None or not raw.name:
        return None

    if pkg_type in _DISTRO_NAMESPACE_TYPES:
        namespace: Optional[str] = _DISTRO_NAMESPACES[pkg_type]
        short = raw.name
    else:
        namespace, short = _split_name(base, raw.name)
        if base == eco.MAVEN and namespace is None and raw.metadata is not None:
            coords = raw.metadata.maven_coordinates()
            if coords and all(coords):
                namespace, short = coords

    qualifiers: tuple[tuple[str, str], ...] = ()
    if suffix and pkg_type in _DISTRO_NAMESPACE_TYPES:
        qualifiers = (("distro", suffix),)

    return PackageURL(
        type=pkg_type,
        name=normalize_name(pkg_type, short),
        namespace=namespace,
        version=raw.version or None,
        qualifiers=qualifiers,
    )


def to_identity(text: str) -> PackageIdentity:
    """Map a purl string to the identity used for vulnerability lookups.

    Raises PurlError when the string is not a valid purl.
    """
    p = parse(text)
    ecosystem = TYPE_TO_ECOSYSTEM.get(p.type, p.type)

    # distro qualifier values are free-form; the ecosystem carries no release suffix
    if p.type in _DISTRO_NAMESPACE_TYPES:
        name = p.name
    elif p.namespace and p.type == "maven":
        name = f"{p.namespace}:{p.name}"
    elif p.namespace:
        name = f"{p.namespace}/{p.name}"
    else:
        name = p.name

    return PackageIdentity(name=name, version=p.version or "", ecosystem=ecosystem)
