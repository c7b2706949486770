"""
Survival engine: horizons, survival and decrement probabilities.

Dispatches on the life variant and, for joint lives, on the
(contingency, assumption) pair through the JOINT_SURVIVAL rule table.

Theory
------
[T1] tpx = survival of a life aged x for t years
[T1] Last survivor, independent lives: tp_xy = tpx + tpy - tpx × tpy
[T1] tqx = 1 - tpx

All times are measured from issue. ``from_time <= to_time`` is the caller's
responsibility; reversed intervals are not reordered.
"""

import math
from collections.abc import Callable

from life_contingencies.exceptions import HorizonError
from life_contingencies.life.models import (
    Frasier,
    JointLife,
    LastSurvivor,
    Life,
    LifeContingency,
    SingleLife,
)
from life_contingencies.life.strategies import JointRuleTable

JointSurvivalRule = Callable[[JointLife, float, float], float]

JOINT_SURVIVAL: JointRuleTable[JointSurvivalRule] = JointRuleTable("survival")


def _single_survival(life: SingleLife, from_time: float, to_time: float) -> float:
    return life.mortality.survival(
        life.issue_age + from_time,
        life.issue_age + to_time,
        life.fractional_assumption,
    )


@JOINT_SURVIVAL.register(LastSurvivor, Frasier)
def _last_survivor_independent(life: JointLife, from_time: float, to_time: float) -> float:
    """Probability that at least one of two independent lives survives."""
    first, second = life.lives
    tpx = _single_survival(first, from_time, to_time)
    tpy = _single_survival(second, from_time, to_time)
    return tpx + tpy - tpx * tpy


def omega(entity: Life | LifeContingency) -> int:
    """
    Last valid projected time index.

    Note this is a projection length, not an attained age: a life issued at
    60 on a table whose last age is 100 has omega 41.

    Parameters
    ----------
    entity : SingleLife, JointLife or LifeContingency
        For a LifeContingency the life's horizon is further bounded by the
        discount provider's ``horizon()``, when it has one.

    Returns
    -------
    int
        Horizon usable as a loop bound

    Raises
    ------
    HorizonError
        If no finite bound exists
    """
    if isinstance(entity, LifeContingency):
        bound = float(omega(entity.life))
        horizon = getattr(entity.discount, "horizon", None)
        if horizon is not None:
            bound = min(bound, float(horizon()))
        if math.isinf(bound):
            raise HorizonError("CRITICAL: no finite projection horizon for life contingency")
        return int(math.floor(bound))
    if isinstance(entity, SingleLife):
        return entity.mortality.last_supported_age() - entity.issue_age + 1
    if isinstance(entity, JointLife):
        return min(omega(life) for life in entity.lives)
    raise TypeError(f"Cannot resolve horizon for {type(entity).__name__}")


def survival(
    entity: Life | LifeContingency,
    from_time: float,
    to_time: float | None = None,
) -> float:
    """
    Probability of survival between two projected times.

    With one time argument the interval is ``0 .. from_time``, as with
    ``range(stop)``.

    Parameters
    ----------
    entity : SingleLife, JointLife or LifeContingency
        Life (or the life of a contingency) to project
    from_time : float
        Start of the interval (or its end, if ``to_time`` is omitted)
    to_time : float, optional
        End of the interval

    Returns
    -------
    float
        Survival probability in [0, 1]

    Raises
    ------
    UnsupportedCombinationError
        For a joint life with no registered survival rule
    DomainError
        If the provider does not cover the implied ages

    Examples
    --------
    >>> from life_contingencies.providers import MortalityLoader
    >>> table = MortalityLoader().flat(0.01, min_age=30, max_age=99)
    >>> survival(SingleLife(mortality=table, issue_age=30), 1)
    0.99
    """
    if to_time is None:
        from_time, to_time = 0, from_time
    life = entity.life if isinstance(entity, LifeContingency) else entity

    if isinstance(life, SingleLife):
        if to_time == from_time:
            return 1.0
        return _single_survival(life, from_time, to_time)
    if isinstance(life, JointLife):
        rule = JOINT_SURVIVAL.resolve(life)
        if to_time == from_time:
            return 1.0
        return rule(life, from_time, to_time)
    raise TypeError(f"Cannot compute survival for {type(life).__name__}")


def decrement(
    entity: Life | LifeContingency,
    from_time: float,
    to_time: float | None = None,
) -> float:
    """
    Probability of decrement (death) between two projected times.

    [T1] tqx = 1 - tpx
    """
    return 1.0 - survival(entity, from_time, to_time)


def discount(lc: LifeContingency, t1: float, t2: float | None = None) -> float:
    """
    Discount factor of the contingency's provider.

    With one time, the value at 0 of 1 unit paid at ``t1``; with two, the
    value at ``t1`` of 1 unit paid at ``t2``.
    """
    if t2 is None:
        return lc.discount.discount(t1)
    return lc.discount.discount(t1, t2)
