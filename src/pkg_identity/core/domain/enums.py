from __future__ import annotations

from enum import Enum
from typing import Optional


class SourceType(Enum):
    """Where a package record was discovered."""

    UNKNOWN = "unknown"
    OS_PACKAGE = "os"
    SBOM = "sbom"
    GIT = "git"
    ARTIFACT = "artifact"
    PROJECT_PACKAGE = "project"

    @classmethod
    def from_str(cls, value: str) -> Optional["SourceType"]:
        """Parse a source type from its value or member name (case-insensitive)."""
        s = value.strip().lower()
        if not s:
            return None
        for member in cls:
            if s in (member.value, member.name.lower()):
                return member
        return None
