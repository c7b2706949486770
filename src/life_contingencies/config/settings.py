"""
Frozen configuration settings for life contingency calculations.

All configuration is immutable (frozen dataclasses) to ensure reproducibility.
Override the worker count with the LIFE_CONTINGENCIES_WORKERS environment
variable.
"""

import os
from dataclasses import dataclass, field
from typing import Literal


def _resolve_n_workers() -> int | None:
    """
    Resolve the reduction worker count with environment variable override.

    Priority:
    1. LIFE_CONTINGENCIES_WORKERS environment variable (if set)
    2. Default: None (executor chooses, usually the CPU count)

    Returns
    -------
    int or None
        Worker count for parallel reductions

    Raises
    ------
    ValueError
        If the environment variable is not a positive integer
    """
    env_workers = os.environ.get("LIFE_CONTINGENCIES_WORKERS")
    if not env_workers:
        return None
    n_workers = int(env_workers)
    if n_workers < 1:
        raise ValueError(
            f"CRITICAL: LIFE_CONTINGENCIES_WORKERS must be >= 1, got {n_workers}"
        )
    return n_workers


# =============================================================================
# Reduction Configuration
# =============================================================================

@dataclass(frozen=True)
class ReductionConfig:
    """
    Immutable configuration for commutation-sum reductions.

    Attributes
    ----------
    parallel : bool
        Whether long spans may be reduced in parallel
    parallel_threshold : int
        Minimum span length before a parallel reduction is used
    n_workers : int, optional
        Executor worker count. Override with LIFE_CONTINGENCIES_WORKERS.
    executor : str
        "process" (ProcessPoolExecutor) or "thread" (ThreadPoolExecutor)
    chunk_size : int
        Number of time indices summed per submitted task
    """

    parallel: bool = True
    parallel_threshold: int = 10_000  # tens of thousands of periods
    n_workers: int | None = field(default_factory=_resolve_n_workers)
    executor: Literal["process", "thread"] = "process"
    chunk_size: int = 2_048

    def __post_init__(self) -> None:
        """Validate reduction settings."""
        if self.parallel_threshold < 1:
            raise ValueError(
                f"CRITICAL: parallel_threshold must be >= 1, got {self.parallel_threshold}"
            )
        if self.chunk_size < 1:
            raise ValueError(f"CRITICAL: chunk_size must be >= 1, got {self.chunk_size}")
        if self.executor not in ("process", "thread"):
            raise ValueError(
                f"CRITICAL: executor must be 'process' or 'thread', got {self.executor!r}"
            )


# =============================================================================
# Valuation Configuration
# =============================================================================

@dataclass(frozen=True)
class ValuationConfig:
    """
    Immutable valuation configuration.

    Attributes
    ----------
    commutation_basis : float
        Default radix for the l commutation function (1.0 = probabilities)
    """

    commutation_basis: float = 1.0


# =============================================================================
# Validation Configuration
# =============================================================================

@dataclass(frozen=True)
class ValidationConfig:
    """
    Immutable validation configuration.

    Attributes
    ----------
    halt_on_degenerate : bool
        Whether non-finite valuation results HALT (otherwise WARN)
    halt_on_negative_value : bool
        Whether negative insurance/annuity values HALT
    """

    halt_on_degenerate: bool = True
    halt_on_negative_value: bool = True


# =============================================================================
# Master Configuration
# =============================================================================

@dataclass(frozen=True)
class Settings:
    """
    Master frozen configuration combining all sub-configs.

    Usage
    -----
    >>> from life_contingencies.config.settings import SETTINGS
    >>> SETTINGS.reduction.parallel_threshold
    10000
    """

    reduction: ReductionConfig = field(default_factory=ReductionConfig)
    valuation: ValuationConfig = ValuationConfig()
    validation: ValidationConfig = ValidationConfig()


# Singleton instance - import this
SETTINGS = Settings()
