"""
life-contingencies: Actuarial present values for single and joint lives.

Insurance, annuity, premium and reserve values from a mortality provider and
a discount provider.

Quick Start
-----------
>>> from life_contingencies import (
...     ConstantRate, LifeContingency, MortalityLoader, SingleLife, insurance,
... )
>>> table = MortalityLoader().soa_2012_iam("male")
>>> lc = LifeContingency(SingleLife(mortality=table, issue_age=65), ConstantRate(0.04))
>>> whole_life = insurance(lc)

Version: 0.1.0
"""

__version__ = "0.1.0"

# =============================================================================
# Life Model
# =============================================================================
from life_contingencies.life import (
    ContingencyPolicy,
    FirstToDie,
    Frasier,
    JointAssumption,
    JointLife,
    LastSurvivor,
    Life,
    LifeContingency,
    SingleLife,
)

# =============================================================================
# Survival Engine
# =============================================================================
from life_contingencies.life.survival import decrement, discount, omega, survival

# =============================================================================
# Valuation
# =============================================================================
from life_contingencies.valuation import (
    C,
    ContractValuation,
    D,
    E,
    M,
    N,
    annuity_due,
    annuity_immediate,
    apv,
    commutation_table,
    insurance,
    l,
    premium_net,
    reserve_premium_net,
    reserve_schedule,
    value_contract,
)

# =============================================================================
# Providers
# =============================================================================
from life_contingencies.providers import (
    ConstantRate,
    DiscountVector,
    FractionalAssumption,
    MortalityLoader,
    MortalityTable,
    YieldCurve,
    YieldCurveLoader,
)

# =============================================================================
# Errors and Configuration
# =============================================================================
from life_contingencies.exceptions import (
    DomainError,
    HorizonError,
    LifeContingencyError,
    UnsupportedCombinationError,
    is_degenerate,
)
from life_contingencies.config.settings import SETTINGS

__all__ = [
    # Version
    "__version__",
    # Life model
    "Life",
    "SingleLife",
    "JointLife",
    "LifeContingency",
    "ContingencyPolicy",
    "LastSurvivor",
    "FirstToDie",
    "JointAssumption",
    "Frasier",
    # Survival engine
    "omega",
    "survival",
    "decrement",
    "discount",
    # Commutation functions
    "D",
    "l",
    "C",
    "N",
    "M",
    "E",
    "commutation_table",
    # Valuation
    "insurance",
    "annuity_due",
    "annuity_immediate",
    "apv",
    "premium_net",
    "reserve_premium_net",
    "reserve_schedule",
    "ContractValuation",
    "value_contract",
    # Providers
    "MortalityTable",
    "MortalityLoader",
    "FractionalAssumption",
    "ConstantRate",
    "DiscountVector",
    "YieldCurve",
    "YieldCurveLoader",
    # Errors
    "LifeContingencyError",
    "DomainError",
    "HorizonError",
    "UnsupportedCombinationError",
    "is_degenerate",
    # Config
    "SETTINGS",
]
