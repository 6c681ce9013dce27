"""pkg_identity package: app/core/infra/shared.

Normalizes extractor package records into the identity used for
vulnerability matching. Exposes the library-friendly client at package level.
"""

from .app.api import AppConfig, PkgIdentityClient
from .core.package_info import PackageInfo, from_inventory
from .core.results import PackageScanResult, ScanResult

import logging

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())

__all__ = [
    "PkgIdentityClient",
    "AppConfig",
    "PackageInfo",
    "from_inventory",
    "PackageScanResult",
    "ScanResult",
]
