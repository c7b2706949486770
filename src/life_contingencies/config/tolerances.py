"""
Centralized tolerance framework for life contingency calculations.

All tolerances are derived from precision requirements, not ad hoc tuning.

Tolerance Tiers:
    Tier 1 (Analytical): Identities that hold to machine precision
    Tier 2 (Reference): Agreement with independent direct summation
    Tier 3 (Reduction): Parallel vs sequential summation order

References:
    [T1] Higham (2002) "Accuracy and Stability of Numerical Algorithms"
    [T1] Dickson, Hardy & Waters, "Actuarial Mathematics for Life
         Contingent Risks" (AMLCR), 2nd ed.
"""

from typing import Final

# =============================================================================
# Tier 1: Analytical Tolerances
# =============================================================================

#: decrement(0, t) + survival(0, t) == 1
SURVIVAL_IDENTITY_TOLERANCE: Final[float] = 1e-9

#: Survival probabilities must lie in [0, 1]; allow float64 accumulation
PROBABILITY_BOUND_TOLERANCE: Final[float] = 1e-12

#: premium_net(lc) × annuity_due(lc) == insurance(lc)
EQUIVALENCE_PRINCIPLE_TOLERANCE: Final[float] = 1e-10

#: annuity_immediate(lc) == annuity_due(lc) - 1 (whole life, no certain period)
ANNUITY_IDENTITY_TOLERANCE: Final[float] = 1e-12


# =============================================================================
# Tier 2: Reference Tolerances
# =============================================================================

#: Closed-form / direct summation reference values
REFERENCE_VALUE_TOLERANCE: Final[float] = 1e-9


# =============================================================================
# Tier 3: Reduction Tolerances
# =============================================================================

#: Parallel chunked sums differ from sequential sums only in the last bits
REDUCTION_ORDER_TOLERANCE: Final[float] = 1e-10


# =============================================================================
# Tolerance Registry (For Dynamic Access)
# =============================================================================

TOLERANCE_REGISTRY: dict[str, float] = {
    # Tier 1: Analytical
    "survival_identity": SURVIVAL_IDENTITY_TOLERANCE,
    "probability_bound": PROBABILITY_BOUND_TOLERANCE,
    "equivalence_principle": EQUIVALENCE_PRINCIPLE_TOLERANCE,
    "annuity_identity": ANNUITY_IDENTITY_TOLERANCE,
    # Tier 2: Reference
    "reference_value": REFERENCE_VALUE_TOLERANCE,
    # Tier 3: Reduction
    "reduction_order": REDUCTION_ORDER_TOLERANCE,
}


def get_tolerance(name: str) -> float:
    """
    Get tolerance by name from registry.

    Parameters
    ----------
    name : str
        Tolerance name (see TOLERANCE_REGISTRY keys)

    Returns
    -------
    float
        Tolerance value

    Raises
    ------
    KeyError
        If tolerance name not found
    """
    if name not in TOLERANCE_REGISTRY:
        available = ", ".join(sorted(TOLERANCE_REGISTRY.keys()))
        raise KeyError(f"Unknown tolerance '{name}'. Available: {available}")
    return TOLERANCE_REGISTRY[name]
