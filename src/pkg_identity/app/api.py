from __future__ import annotations

from pathlib import Path

from .container import Container
from ..config.settings import AppConfig
from ..core.domain.enums import SourceType
from ..core.package_info import PackageInfo


class PkgIdentityClient:
    """Client for resolving package identities from an extractor inventory.

    Example:
        # Using default configuration (from environment variables)
        client = PkgIdentityClient()
        packages = client.resolve()
        client.close()

        # Using context manager (recommended)
        with PkgIdentityClient(inventory_path="inventory.json") as client:
            for p in client.resolve(filter_expr='source_type == "os"'):
                print(p.name(), p.version())
    """

    def __init__(self, *, inventory_path: str | Path | None = None):
        """Initialize the client.

        Args:
            inventory_path: Optional JSON inventory path.
                            If None, uses PKG_IDENTITY_INVENTORY_PATH environment variable.
        """
        self._container = Container()

        if inventory_path is not None:
            config = AppConfig(inventory_path=Path(inventory_path))
            self._container.config.from_pydantic(config)

        self._container.init_resources()

    def resolve(self, *, filter_expr: str | None = None) -> list[PackageInfo]:
        """Return one normalized PackageInfo per raw record in the inventory.

        Args:
            filter_expr: Filter expression using Python syntax.
                        Examples: 'source_type == "os"', 'ecosystem.startswith("Debian")',
                        '"dev" in dep_groups'.

        Raises:
            ValueError: If the inventory is invalid or filter_expr cannot be evaluated.
        """
        uc = self._container.resolve_uc()
        return uc.execute(filter_expr=filter_expr)

    def summarize(self) -> dict[SourceType, int]:
        """Return the number of records per source type."""
        uc = self._container.summarize_uc()
        return uc.execute()

    def close(self) -> None:
        """Release container resources."""
        self._container.shutdown_resources()

    def __enter__(self) -> PkgIdentityClient:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()


__all__ = [
    "PkgIdentityClient",
    "AppConfig",
]
