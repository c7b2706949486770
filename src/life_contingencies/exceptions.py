"""
Exceptions raised by the life contingency calculus.

Errors are explicit and never recovered internally:
- DomainError: an age or time falls outside a provider's supported range
- HorizonError: no finite projection horizon could be resolved
- UnsupportedCombinationError: no rule registered for a joint-life policy pair

Non-finite arithmetic outcomes (e.g. a reserve normalised by a zero APV) are
NOT exceptions; they are returned as ``inf``/``nan`` floats. See
``is_degenerate``.
"""

import math


class LifeContingencyError(Exception):
    """Base class for life contingency errors."""

    pass


class DomainError(LifeContingencyError, ValueError):
    """Raised when an age or time is outside a provider's supported domain."""

    pass


class HorizonError(DomainError):
    """Raised when a loop bound would be infinite."""

    pass


class UnsupportedCombinationError(LifeContingencyError, NotImplementedError):
    """Raised when no rule exists for a (contingency, assumption) pair."""

    def __init__(self, operation: str, contingency: object, assumption: object):
        self.operation = operation
        self.contingency = contingency
        self.assumption = assumption
        super().__init__(
            f"CRITICAL: unimplemented combination for {operation}: "
            f"contingency={type(contingency).__name__}, "
            f"joint_assumption={type(assumption).__name__}"
        )


def is_degenerate(value: float) -> bool:
    """
    Check whether a valuation result is non-finite.

    Parameters
    ----------
    value : float
        Result of a valuation function

    Returns
    -------
    bool
        True if value is ``inf``, ``-inf`` or ``nan``

    Examples
    --------
    >>> is_degenerate(float("inf"))
    True
    >>> is_degenerate(0.25)
    False
    """
    return not math.isfinite(value)
