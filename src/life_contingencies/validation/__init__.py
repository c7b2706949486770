"""
Validation framework for contract valuations.

Provides HALT/WARN/PASS gates:
- FiniteValueGate: Detect non-finite (degenerate) results
- NonNegativeValueGate: Insurance and annuity values >= 0
- EquivalencePrincipleGate: P × ä = A
- AnnuityIdentityGate: a = ä - 1 for whole life
"""

from life_contingencies.validation.gates import (
    AnnuityIdentityGate,
    EquivalencePrincipleGate,
    FiniteValueGate,
    GateResult,
    # Enums and Results
    GateStatus,
    NonNegativeValueGate,
    # Engine
    ValidationEngine,
    # Base Gate
    ValidationGate,
    ValidationReport,
    ensure_valid,
    # Convenience Functions
    validate_valuation,
)

__all__ = [
    # Enums and Results
    "GateStatus",
    "GateResult",
    "ValidationReport",
    # Base Gate
    "ValidationGate",
    # Specific Gates
    "FiniteValueGate",
    "NonNegativeValueGate",
    "EquivalencePrincipleGate",
    "AnnuityIdentityGate",
    # Engine
    "ValidationEngine",
    # Convenience Functions
    "validate_valuation",
    "ensure_valid",
]
