from __future__ import annotations

import logging

from ..package_info import PackageInfo, from_inventory
from ..ports.inventory_port import InventoryPort
from ...shared.filter_utils import filter_packages

logger = logging.getLogger(__name__)


class ResolvePackagesUseCase:
    def __init__(self, inventory: InventoryPort) -> None:
        self._inventory = inventory

    def execute(self, *, filter_expr: str | None = None) -> list[PackageInfo]:
        logger.info(f"Resolving packages: filter={filter_expr}")

        records = self._inventory.load()
        logger.debug(f"Loaded {len(records)} raw records")

        packages = [from_inventory(raw) for raw in records]
        resolved_count = sum(1 for p in packages if p.is_resolved)
        if resolved_count:
            logger.debug(f"{resolved_count} SBOM packages resolved from purls")

        if filter_expr:
            packages = filter_packages(packages, filter_expr)
            logger.debug(f"{len(packages)} packages matched filter '{filter_expr}'")

        logger.info(f"Resolved {len(packages)} packages")
        return packages
