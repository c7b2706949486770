"""
Life annuity present values.

Theory
------
[T1] Annuity-due: ä = Σ_t v^t × tpx, payments at the start of each year
[T1] Whole life immediate: a = ä - 1                  (AMLCR eq. 5.11)
[T1] Term immediate: a = ä - 1 + v^n × npx            (AMLCR eq. 5.13)

During a certain period (t <= certain) payments are made regardless of
survival.
"""

from functools import partial

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

JOINT_ANNUITY: JointRuleTable = JointRuleTable("annuity")


def _payment_term(lc: LifeContingency, t: int, certain: float | None = None) -> float:
    if certain is not None and t <= certain:
        payment = 1.0
    else:
        payment = survival(lc, t)
    return discount(lc, t) * payment


def _level_annuity_due(
    lc: LifeContingency,
    npayments: int | None,
    start_time: int,
    certain: float | None,
) -> float:
    if npayments is None:
        # whole life runs through omega inclusive
        end_time = omega(lc)
    else:
        if npayments - start_time == 0:
            return 0.0
        end_time = npayments - 1
    term = partial(_payment_term, certain=certain)
    return fold_sum(term, lc, range(start_time, end_time + 1))


@JOINT_ANNUITY.register(LastSurvivor, Frasier)
def _last_survivor_annuity_due(
    lc: LifeContingency,
    npayments: int | None,
    start_time: int,
    certain: float | None,
) -> float:
    return _level_annuity_due(lc, npayments, start_time, certain)


def annuity_due(
    lc: LifeContingency,
    npayments: int | None = None,
    start_time: int = 0,
    certain: float | None = None,
) -> float:
    """
    Level annuity-due of 1 per year.

    Parameters
    ----------
    lc : LifeContingency
        Life and discount provider
    npayments : int, optional
        End of the payment period; payments are made at
        ``start_time .. npayments - 1``. Omitted means whole life, with
        payments at ``start_time .. omega(lc)``.
    start_time : int
        First payment time
    certain : float, optional
        Payments at times ``t <= certain`` are made regardless of survival

    Returns
    -------
    float
        Present value (0.0 when ``npayments == start_time``)

    Raises
    ------
    UnsupportedCombinationError
        For a joint life with no registered annuity rule

    Examples
    --------
    >>> whole_life = annuity_due(lc)
    >>> deferred = annuity_due(lc, 20, start_time=5)
    """
    life = lc.life
    if isinstance(life, SingleLife):
        return _level_annuity_due(lc, npayments, start_time, certain)
    if isinstance(life, JointLife):
        rule = JOINT_ANNUITY.resolve(life)
        return rule(lc, npayments, start_time, certain)
    raise TypeError(f"Cannot value annuity for {type(life).__name__}")


def annuity_immediate(
    lc: LifeContingency,
    npayments: int | None = None,
    start_time: int = 0,
    certain: float | None = None,
) -> float:
    """
    Level annuity-immediate of 1 per year.

    Whole life removes the time-0 payment of the due form; a term annuity
    also restores the final payment shifted to the end of the period.

    Parameters
    ----------
    lc : LifeContingency
        Life and discount provider
    npayments : int, optional
        Number of payments; omitted means whole life
    start_time : int
        First payment time of the corresponding annuity-due
    certain : float, optional
        Certain period, as for ``annuity_due``

    Returns
    -------
    float
        Present value
    """
    due = annuity_due(lc, npayments, start_time=start_time, certain=certain)
    if npayments is None:
        return due - 1
    final = discount(lc, start_time, start_time + npayments) * survival(lc, npayments)
    return due - 1 + final
