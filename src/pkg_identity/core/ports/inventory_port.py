from __future__ import annotations

from typing import Protocol, Sequence

from ..domain.models import RawPackage


class InventoryPort(Protocol):
    def load(self) -> Sequence[RawPackage]:
        """Return the raw package records produced by the extractors.

        Records are returned in extraction order and are never merged.
        """
        ...
