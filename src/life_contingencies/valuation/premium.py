"""
Net premiums and net premium reserves.

Theory
------
[T1] Equivalence principle: P = A / ä
[T1] APV(t) = tpx × v(t)
[T1] Prospective reserve at t:
     V(t) = [(A - A_{t}) - P × (ä - ä_{t})] / APV(t)
     where A_{t}, ä_{t} are the t-year term values, so the bracket is the
     present value at issue of benefits and premiums after t.

Zero denominators (a zero annuity, or every life extinct by t) return
non-finite floats rather than raising; see ``is_degenerate``.
"""

import logging
from dataclasses import dataclass

import numpy as np
import pandas as pd

from life_contingencies.life.models import LifeContingency
from life_contingencies.life.survival import discount, omega, survival
from life_contingencies.valuation.annuity import annuity_due, annuity_immediate
from life_contingencies.valuation.insurance import insurance
from life_contingencies.valuation.reduction import ratio

logger = logging.getLogger(__name__)


def apv(lc: LifeContingency, to_time: float) -> float:
    """
    Actuarial present value of 1 payable at ``to_time`` if the life survives.

    [T1] APV = tpx × v(t)
    """
    return survival(lc, to_time) * discount(lc, to_time)


def premium_net(lc: LifeContingency, to_time: int | None = None) -> float:
    """
    Annual net premium for a unit insurance.

    Parameters
    ----------
    lc : LifeContingency
        Life and discount provider
    to_time : int, optional
        Term in years; omitted means whole life

    Returns
    -------
    float
        Level premium payable annually in advance; non-finite when the
        annuity value is zero

    Examples
    --------
    >>> p = premium_net(lc)
    >>> abs(p * annuity_due(lc) - insurance(lc)) < 1e-10
    True
    """
    return ratio(insurance(lc, to_time), annuity_due(lc, to_time), "net premium")


def reserve_premium_net(lc: LifeContingency, time: int) -> float:
    """
    Net premium reserve of a whole life insurance at the end of year ``time``.

    Parameters
    ----------
    lc : LifeContingency
        Life and discount provider
    time : int
        Valuation time from issue

    Returns
    -------
    float
        Reserve per survivor at ``time``; non-finite when APV(time) is zero
    """
    pv_future_benefits = insurance(lc) - insurance(lc, time)
    pv_future_premiums = premium_net(lc) * (annuity_due(lc) - annuity_due(lc, time))
    return ratio(
        pv_future_benefits - pv_future_premiums,
        apv(lc, time),
        f"net premium reserve at time {time}",
    )


def reserve_schedule(lc: LifeContingency, times: range | None = None) -> pd.Series:
    """
    Net premium reserves over a range of times.

    Parameters
    ----------
    lc : LifeContingency
        Life and discount provider
    times : range, optional
        Valuation times; defaults to 0 .. omega(lc)

    Returns
    -------
    Series
        Reserve indexed by time. Non-finite entries are kept.
    """
    if times is None:
        times = range(omega(lc) + 1)
    reserves = [reserve_premium_net(lc, t) for t in times]
    series = pd.Series(reserves, index=pd.Index(list(times), name="time"), name="reserve")
    n_degenerate = int((~np.isfinite(series.to_numpy())).sum())
    if n_degenerate:
        logger.info(f"Reserve schedule has {n_degenerate} non-finite value(s)")
    return series


@dataclass(frozen=True)
class ContractValuation:
    """
    Valuation of a unit insurance with level net premiums.

    Attributes
    ----------
    insurance : float
        PV of the unit death benefit
    annuity_due : float
        PV of 1 per year in advance over the premium term
    annuity_immediate : float
        PV of 1 per year in arrears over the same term
    net_premium : float
        insurance / annuity_due
    omega : int
        Resolved projection horizon
    to_time : int, optional
        Term, or None for whole life
    """

    insurance: float
    annuity_due: float
    annuity_immediate: float
    net_premium: float
    omega: int
    to_time: int | None = None

    @property
    def is_whole_life(self) -> bool:
        """Whether the valuation covers the whole projection."""
        return self.to_time is None

    def to_dict(self) -> dict:
        """Convert to dictionary for logging."""
        return {
            "insurance": self.insurance,
            "annuity_due": self.annuity_due,
            "annuity_immediate": self.annuity_immediate,
            "net_premium": self.net_premium,
            "omega": self.omega,
            "to_time": self.to_time,
        }


def value_contract(lc: LifeContingency, to_time: int | None = None) -> ContractValuation:
    """
    Value insurance, annuities and net premium in one call.

    Parameters
    ----------
    lc : LifeContingency
        Life and discount provider
    to_time : int, optional
        Term in years; omitted means whole life

    Returns
    -------
    ContractValuation
        Frozen valuation result
    """
    benefit = insurance(lc, to_time)
    due = annuity_due(lc, to_time)
    return ContractValuation(
        insurance=benefit,
        annuity_due=due,
        annuity_immediate=annuity_immediate(lc, to_time),
        net_premium=ratio(benefit, due, "net premium"),
        omega=omega(lc),
        to_time=to_time,
    )
