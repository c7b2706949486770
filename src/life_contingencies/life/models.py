"""
Life model: immutable value objects for contingent calculations.

A ``Life`` describes who is covered (a single life or a pair of lives) and,
for joint lives, which contingency triggers the benefit and how the lives'
mortality relates. A ``LifeContingency`` pairs a life with a discount
provider and is the argument to every valuation function.

Examples
--------
>>> from life_contingencies.providers import ConstantRate, MortalityLoader
>>> table = MortalityLoader().soa_2012_iam("male")
>>> life = SingleLife(mortality=table, issue_age=65)
>>> lc = LifeContingency(life, ConstantRate(0.04))
"""

import numbers
from abc import ABC
from dataclasses import dataclass, field

from life_contingencies.exceptions import DomainError
from life_contingencies.providers.base import DiscountProvider, MortalityProvider
from life_contingencies.providers.mortality import FractionalAssumption


# =============================================================================
# Joint-life policies
# =============================================================================

class ContingencyPolicy(ABC):
    """Trigger for a contingent benefit on a joint life."""


@dataclass(frozen=True)
class LastSurvivor(ContingencyPolicy):
    """Benefits are payable upon both lives passing."""


@dataclass(frozen=True)
class FirstToDie(ContingencyPolicy):
    """
    Benefits are payable upon the first life passing.

    No computation rules are registered for this contingency yet; valuing a
    FirstToDie life raises UnsupportedCombinationError.
    """


class JointAssumption(ABC):
    """Assumed relationship between the mortality of the lives."""


@dataclass(frozen=True)
class Frasier(JointAssumption):
    """The lives are independent."""


# =============================================================================
# Lives
# =============================================================================

class Life(ABC):
    """Base class for single and joint lives."""


@dataclass(frozen=True)
class SingleLife(Life):
    """
    A single insured life.

    Attributes
    ----------
    mortality : MortalityProvider
        Decrement rates indexed by attained age
    issue_age : int
        Age at issue; basis of all projected times
    alive : bool
        Status flag, reserved for joint lives with differing statuses
    fractional_assumption : FractionalAssumption
        Distribution of deaths used for non-integer ages and times
    """

    mortality: MortalityProvider
    issue_age: int
    alive: bool = True
    fractional_assumption: FractionalAssumption = FractionalAssumption.UNIFORM

    def __post_init__(self) -> None:
        """Validate issue age against the provider's domain."""
        if isinstance(self.issue_age, bool) or not isinstance(self.issue_age, numbers.Integral):
            raise TypeError(f"issue_age must be an int, got {type(self.issue_age).__name__}")
        # numpy integers are stored as int
        object.__setattr__(self, "issue_age", int(self.issue_age))
        if self.issue_age < 0:
            raise DomainError(f"CRITICAL: issue_age must be >= 0, got {self.issue_age}")

        first_age = getattr(self.mortality, "first_supported_age", None)
        if first_age is not None and self.issue_age < first_age():
            raise DomainError(
                f"CRITICAL: issue_age {self.issue_age} below first supported age {first_age()}"
            )
        last_age = self.mortality.last_supported_age()
        if self.issue_age > last_age:
            raise DomainError(
                f"CRITICAL: issue_age {self.issue_age} above last supported age {last_age}"
            )


@dataclass(frozen=True)
class JointLife(Life):
    """
    Two lives insured together.

    Attributes
    ----------
    lives : tuple[SingleLife, SingleLife]
        Exactly two single lives
    contingency : ContingencyPolicy
        Benefit trigger (default LastSurvivor)
    joint_assumption : JointAssumption
        Mortality relationship (default Frasier independence)
    """

    lives: tuple[SingleLife, SingleLife]
    contingency: ContingencyPolicy = field(default_factory=LastSurvivor)
    joint_assumption: JointAssumption = field(default_factory=Frasier)

    def __post_init__(self) -> None:
        """Validate the pair of lives and policies."""
        lives = tuple(self.lives)
        if len(lives) != 2:
            raise ValueError(f"JointLife requires exactly two lives, got {len(lives)}")
        if not all(isinstance(life, SingleLife) for life in lives):
            raise TypeError("JointLife members must be SingleLife instances")
        if not isinstance(self.contingency, ContingencyPolicy):
            raise TypeError(f"contingency must be a ContingencyPolicy, got {self.contingency!r}")
        if not isinstance(self.joint_assumption, JointAssumption):
            raise TypeError(
                f"joint_assumption must be a JointAssumption, got {self.joint_assumption!r}"
            )
        object.__setattr__(self, "lives", lives)


# =============================================================================
# Life contingency
# =============================================================================

@dataclass(frozen=True)
class LifeContingency:
    """
    A life paired with a discount provider.

    Attributes
    ----------
    life : Life
        SingleLife or JointLife
    discount : DiscountProvider
        Converts elapsed time to discount factors
    """

    life: Life
    discount: DiscountProvider

    def __post_init__(self) -> None:
        """Validate the life variant."""
        if not isinstance(self.life, Life):
            raise TypeError(f"life must be a SingleLife or JointLife, got {type(self.life).__name__}")
