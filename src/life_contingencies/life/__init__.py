"""
Life model and survival engine.

Value objects (SingleLife, JointLife, LifeContingency), joint-life policies,
and the survival / horizon functions that dispatch on them.
"""

from .models import (
    ContingencyPolicy,
    FirstToDie,
    Frasier,
    JointAssumption,
    JointLife,
    Life,
    LastSurvivor,
    LifeContingency,
    SingleLife,
)
from .strategies import JointRuleTable
from .survival import decrement, discount, omega, survival

__all__ = [
    # Lives
    "Life",
    "SingleLife",
    "JointLife",
    "LifeContingency",
    # Policies
    "ContingencyPolicy",
    "LastSurvivor",
    "FirstToDie",
    "JointAssumption",
    "Frasier",
    # Dispatch
    "JointRuleTable",
    # Survival engine
    "omega",
    "survival",
    "decrement",
    "discount",
]
