from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Optional

from .metadata import PackageMetadata


@dataclass(frozen=True)
class SourceCode:
    repo: Optional[str] = None
    commit: str = ""


@dataclass(frozen=True)
class RawPackage:
    """A package as reported by an extractor, before identity normalization."""

    name: str
    version: str = ""
    ecosystem: str = ""
    locations: tuple[str, ...] = field(default_factory=tuple)
    source_code: Optional[SourceCode] = None
    metadata: Optional[PackageMetadata] = None
    plugins: tuple[str, ...] = field(default_factory=tuple)

    def with_updates(self, **kwargs) -> "RawPackage":
        return replace(self, **kwargs)


@dataclass(frozen=True)
class PackageIdentity:
    name: str
    version: str
    ecosystem: str

    def __str__(self) -> str:
        eco = f"{self.ecosystem}/" if self.ecosystem else ""
        ver = f"@{self.version}" if self.version else ""
        return f"{eco}{self.name}{ver}"


@dataclass(frozen=True)
class License:
    expression: str

    @property
    def is_unknown(self) -> bool:
        return self.expression.upper() in ("", "UNKNOWN", "NOASSERTION")


@dataclass(frozen=True)
class LayerDetails:
    """Container image layer a package was found in."""

    index: int
    diff_id: str = ""
    chain_id: str = ""
    command: str = ""
    in_base_image: bool = False


@dataclass(frozen=True)
class GenericFinding:
    """A finding that is not tied to a specific package (e.g. a misconfiguration)."""

    id: str
    title: str = ""
    description: str = ""
    target: Optional[str] = None
    extra: dict[str, object] = field(default_factory=dict, compare=False)
