"""
Life insurance present values.

Unit benefit payable at the end of the year of death.

Theory
------
[T1] Single life: A = Σ_{k=0}^{n-1} v^{k+1} × kpx × q_{x+k}
[T1] Last survivor, independent lives:
     A = Σ_{t=0}^{n-1} v^{t+1} × S(t) × (S(t) - S(t+1))
     with S the joint survival function. The product S(t) × (S(t) - S(t+1))
     is kept as written; it is not the sum of each life's decrements.
"""

from life_contingencies.life.models import (
    Frasier,
    JointLife,
    LastSurvivor,
    LifeContingency,
    SingleLife,
)
from life_contingencies.life.strategies import JointRuleTable
from life_contingencies.life.survival import discount, omega, survival
from life_contingencies.valuation.reduction import fold_sum

JOINT_INSURANCE: JointRuleTable = JointRuleTable("insurance")


def _single_life_term(lc: LifeContingency, t: int) -> float:
    life = lc.life
    qx = life.mortality.decrement_rate(life.issue_age + t)
    return discount(lc, t + 1) * survival(life, 0, t) * qx


def _last_survivor_term(lc: LifeContingency, t: int) -> float:
    tpx = survival(lc, t)
    return discount(lc, t + 1) * tpx * (tpx - survival(lc, t + 1))


def _single_life_insurance(lc: LifeContingency, to_time: int | None) -> float:
    if to_time == 0:
        return 0.0
    if to_time is None:
        to_time = omega(lc)
    return fold_sum(_single_life_term, lc, range(to_time))


@JOINT_INSURANCE.register(LastSurvivor, Frasier)
def _last_survivor_insurance(lc: LifeContingency, to_time: int | None) -> float:
    if to_time == 0:
        return 0.0
    if to_time is None:
        to_time = omega(lc)
    return fold_sum(_last_survivor_term, lc, range(to_time))


def insurance(lc: LifeContingency, to_time: int | None = None) -> float:
    """
    Present value of a unit benefit paid at the end of the year of death.

    Parameters
    ----------
    lc : LifeContingency
        Life and discount provider
    to_time : int, optional
        Term in years; omitted means whole life to ``omega(lc)``

    Returns
    -------
    float
        Actuarial present value of the benefit (0.0 when ``to_time`` is 0)

    Raises
    ------
    UnsupportedCombinationError
        For a joint life with no registered insurance rule
    DomainError
        If the term runs past the mortality or discount domain

    Examples
    --------
    >>> whole_life = insurance(lc)
    >>> ten_year_term = insurance(lc, 10)
    """
    life = lc.life
    if isinstance(life, SingleLife):
        return _single_life_insurance(lc, to_time)
    if isinstance(life, JointLife):
        rule = JOINT_INSURANCE.resolve(life)
        return rule(lc, to_time)
    raise TypeError(f"Cannot value insurance for {type(life).__name__}")
