"""
Valuation functions for life contingencies.

[T1] Provides commutation functions, insurance and annuity present values,
net premiums and net premium reserves for single and joint lives.
"""

from .annuity import JOINT_ANNUITY, annuity_due, annuity_immediate
from .commutation import C, D, E, M, N, commutation_table, l
from .insurance import JOINT_INSURANCE, insurance
from .premium import (
    ContractValuation,
    apv,
    premium_net,
    reserve_premium_net,
    reserve_schedule,
    value_contract,
)
from .reduction import fold_sum, ratio

__all__ = [
    # Commutation functions
    "D",
    "l",
    "C",
    "N",
    "M",
    "E",
    "commutation_table",
    # Insurance and annuities
    "insurance",
    "annuity_due",
    "annuity_immediate",
    # Premiums and reserves
    "apv",
    "premium_net",
    "reserve_premium_net",
    "reserve_schedule",
    # Complete valuation
    "ContractValuation",
    "value_contract",
    # Dispatch tables
    "JOINT_INSURANCE",
    "JOINT_ANNUITY",
    # Reductions
    "fold_sum",
    "ratio",
]
