from __future__ import annotations

from typing import Sequence, TYPE_CHECKING

from asteval import Interpreter

if TYPE_CHECKING:
    from ..core.package_info import PackageInfo


def filter_packages(packages: Sequence[PackageInfo], filter_expr: str) -> list[PackageInfo]:
    """Filter resolved packages using asteval expression.

    Available variables in filter expression:
    - name: str - Normalized package name
    - raw_name: str - Name as reported by the extractor
    - version: str - Normalized version
    - ecosystem: str - Ecosystem string (e.g. "Debian:12", "" when unknown)
    - source_type: str - One of unknown, os, sbom, git, artifact, project
    - location: str - First location the package was found at
    - commit: str - Source-control commit, "" when not from a checkout
    - dep_groups: list[str] - Dependency groups (e.g. ["dev"])
    - os_package_name: str - Binary package name for OS packages
    - plugins: list[str] - Extractors that reported the package
    """
    aeval = Interpreter()
    filtered = []

    for p in packages:
        ctx = {
            "name": p.name(),
            "raw_name": p.package.name,
            "version": p.version(),
            "ecosystem": str(p.ecosystem()),
            "source_type": p.source_type().value,
            "location": p.location(),
            "commit": p.commit(),
            "dep_groups": p.dep_groups(),
            "os_package_name": p.os_package_name(),
            "plugins": list(p.package.plugins),
        }

        for key, value in ctx.items():
            aeval.symtable[key] = value

        result = aeval(filter_expr)
        if aeval.error:
            error_msg = aeval.error[0].get_error()
            raise ValueError(f"Filter evaluation error: {error_msg}")
        if result:
            filtered.append(p)

    return filtered
