from __future__ import annotations

from dataclasses import dataclass


ALMALINUX = "AlmaLinux"
ALPINE = "Alpine"
ANDROID = "Android"
AZURE_LINUX = "Azure Linux"
BIOCONDUCTOR = "Bioconductor"
BITNAMI = "Bitnami"
CHAINGUARD = "Chainguard"
CONAN_CENTER = "ConanCenter"
CRAN = "CRAN"
CRATES_IO = "crates.io"
DEBIAN = "Debian"
GHC = "GHC"
GITHUB_ACTIONS = "GitHub Actions"
GO = "Go"
HACKAGE = "Hackage"
HEX = "Hex"
LINUX = "Linux"
MAGEIA = "Mageia"
MAVEN = "Maven"
MINIMOS = "MinimOS"
NPM = "npm"
NUGET = "NuGet"
OPENEULER = "openEuler"
OPENSUSE = "openSUSE"
OSS_FUZZ = "OSS-Fuzz"
PACKAGIST = "Packagist"
PHOTON_OS = "Photon OS"
PUB = "Pub"
PYPI = "PyPI"
RED_HAT = "Red Hat"
ROCKY_LINUX = "Rocky Linux"
RUBYGEMS = "RubyGems"
SUSE = "SUSE"
SWIFT_URL = "SwiftURL"
UBUNTU = "Ubuntu"
WOLFI = "Wolfi"

KNOWN_ECOSYSTEMS: frozenset[str] = frozenset({
    ALMALINUX, ALPINE, ANDROID, AZURE_LINUX, BIOCONDUCTOR, BITNAMI, CHAINGUARD,
    CONAN_CENTER, CRAN, CRATES_IO, DEBIAN, GHC, GITHUB_ACTIONS, GO, HACKAGE, HEX,
    LINUX, MAGEIA, MAVEN, MINIMOS, NPM, NUGET, OPENEULER, OPENSUSE, OSS_FUZZ,
    PACKAGIST, PHOTON_OS, PUB, PYPI, RED_HAT, ROCKY_LINUX, RUBYGEMS, SUSE,
    SWIFT_URL, UBUNTU, WOLFI,
})


class EcosystemParseError(ValueError):
    def __init__(self, text: str, ecosystem: str) -> None:
        super().__init__(f"unknown ecosystem: {ecosystem!r} (from {text!r})")
        self.text = text
        self.ecosystem = ecosystem


@dataclass(frozen=True)
class ParsedEcosystem:
    """An ecosystem string split into its base ecosystem and release suffix.

    ``"Debian:12"`` parses to ``ParsedEcosystem("Debian", "12")``.
    """

    ecosystem: str = ""
    suffix: str = ""

    def is_empty(self) -> bool:
        return self.ecosystem == ""

    def __str__(self) -> str:
        if self.suffix:
            return f"{self.ecosystem}:{self.suffix}"
        return self.ecosystem


UNKNOWN_ECOSYSTEM = ParsedEcosystem()


def parse(text: str) -> ParsedEcosystem:
    """Parse an ecosystem string.

    An empty string is valid and yields the empty ecosystem. Raises
    EcosystemParseError when the base ecosystem is not a known OSV ecosystem.
    """
    if text == "":
        return UNKNOWN_ECOSYSTEM
    base, _, suffix = text.partition(":")
    if base not in KNOWN_ECOSYSTEMS:
        raise EcosystemParseError(text, base)
    return ParsedEcosystem(ecosystem=base, suffix=suffix)
