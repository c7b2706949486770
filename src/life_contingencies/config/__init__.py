"""Frozen configuration and centralized tolerances."""

from life_contingencies.config.settings import (
    SETTINGS,
    ReductionConfig,
    Settings,
    ValidationConfig,
    ValuationConfig,
)
from life_contingencies.config.tolerances import TOLERANCE_REGISTRY, get_tolerance

__all__ = [
    "SETTINGS",
    "Settings",
    "ReductionConfig",
    "ValuationConfig",
    "ValidationConfig",
    "TOLERANCE_REGISTRY",
    "get_tolerance",
]
