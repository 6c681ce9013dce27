from __future__ import annotations

import logging
from collections import Counter

from ..domain.enums import SourceType
from ..provenance import classify
from ..ports.inventory_port import InventoryPort

logger = logging.getLogger(__name__)


class SummarizeSourcesUseCase:
    def __init__(self, inventory: InventoryPort) -> None:
        self._inventory = inventory

    def execute(self) -> dict[SourceType, int]:
        """Count records per source type, listing every type (zero counts included)."""
        counts = Counter(classify(raw.plugins) for raw in self._inventory.load())
        summary = {st: counts.get(st, 0) for st in SourceType}
        non_empty = {st.value: n for st, n in summary.items() if n}
        logger.info(f"Source summary: {non_empty}")
        return summary
