from __future__ import annotations

import logging

from dependency_injector import containers, providers

from ..core.usecases.resolve_packages import ResolvePackagesUseCase
from ..core.usecases.summarize_sources import SummarizeSourcesUseCase
from ..infra.inventory_json import InventoryError, JsonInventoryAdapter
from ..config.settings import AppConfig

logger = logging.getLogger(__name__)


def inventory_factory(inventory_path):
	if not inventory_path:
		raise InventoryError("<unset>", "no inventory path configured (set PKG_IDENTITY_INVENTORY_PATH)")
	logger.debug(f"Using inventory at: {inventory_path}")
	return JsonInventoryAdapter(inventory_path)


class Container(containers.DeclarativeContainer):
	config = providers.Configuration(pydantic_settings=[AppConfig()])

	inventory = providers.Factory(
		inventory_factory,
		inventory_path=config.inventory_path,
	)

	resolve_uc = providers.Factory(ResolvePackagesUseCase, inventory=inventory)
	summarize_uc = providers.Factory(SummarizeSourcesUseCase, inventory=inventory)
