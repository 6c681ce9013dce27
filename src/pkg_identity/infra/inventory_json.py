from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Sequence

from pydantic import ValidationError

from ..core.domain.models import RawPackage
from ..core.ports.inventory_port import InventoryPort
from .schemas import InventoryDocument

logger = logging.getLogger(__name__)


class InventoryError(ValueError):
    def __init__(self, path: Path | str, reason: str) -> None:
        super().__init__(f"Invalid inventory {path}: {reason}")
        self.path = path


class JsonInventoryAdapter(InventoryPort):
    """Reads extractor output from a JSON file.

    The file holds either a list of package objects or ``{"packages": [...]}``.
    """

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)

    def load(self) -> Sequence[RawPackage]:
        logger.debug(f"Reading inventory from {self._path}")
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except FileNotFoundError as e:
            raise InventoryError(self._path, "file not found") from e
        except json.JSONDecodeError as e:
            raise InventoryError(self._path, f"malformed JSON ({e})") from e

        if isinstance(data, list):
            data = {"packages": data}

        try:
            doc = InventoryDocument.model_validate(data)
        except ValidationError as e:
            raise InventoryError(self._path, str(e)) from e

        records = [p.to_domain() for p in doc.packages]
        logger.info(f"Loaded {len(records)} package records from {self._path}")
        return records
