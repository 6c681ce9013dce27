from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Optional

from .domain.models import GenericFinding, LayerDetails, License
from .package_info import PackageInfo

if TYPE_CHECKING:
    from ..infra.schemas import OsvVulnerability


@dataclass(frozen=True)
class PackageScanResult:
    """A package together with what matching found for it."""

    package_info: PackageInfo
    vulnerabilities: tuple["OsvVulnerability", ...] = field(default_factory=tuple, compare=False)
    licenses: tuple[License, ...] = field(default_factory=tuple)
    layer_details: Optional[LayerDetails] = None

    @property
    def is_vulnerable(self) -> bool:
        return len(self.vulnerabilities) > 0

    def vulnerability_ids(self) -> list[str]:
        return [v.id for v in self.vulnerabilities]


@dataclass(frozen=True)
class ScanResult:
    """All package results of one scan plus findings not tied to a package.

    Each package result must wrap a distinct raw record; merging records from
    different extractors happens downstream.
    """

    package_results: tuple[PackageScanResult, ...] = field(default_factory=tuple)
    generic_findings: tuple[GenericFinding, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        seen: set[int] = set()
        for result in self.package_results:
            key = id(result.package_info.package)
            if key in seen:
                raise ValueError(
                    f"ScanResult invariant violated: raw record for {result.package_info.package.name!r} appears more than once"
                )
            seen.add(key)

    def packages(self) -> list[PackageInfo]:
        return [r.package_info for r in self.package_results]

    def vulnerable_packages(self) -> list[PackageScanResult]:
        return [r for r in self.package_results if r.is_vulnerable]

    def with_package_result(self, result: PackageScanResult) -> "ScanResult":
        return replace(self, package_results=self.package_results + (result,))

    def with_generic_finding(self, finding: GenericFinding) -> "ScanResult":
        return replace(self, generic_findings=self.generic_findings + (finding,))
