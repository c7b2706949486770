"""
Actuarial commutation functions.

Theory
------
[T1] D_t = v(t) × tp_x                      (retrospective)
[T1] l_t = tp_x × radix
[T1] C_t = v(t+1) × (l_t - l_{t+1})
[T1] N_t = Σ_{s=t}^{ω-1} D_s                (prospective)
[T1] M_t = Σ_{s=t}^{ω-1} C_s
[T1] E(t, x) = D_{x+t} / D_x                (pure endowment)

Times are projected from issue, so ``D(lc, 0)`` is 1 for any contingency.
"""

import numpy as np
import pandas as pd

from life_contingencies.config.settings import SETTINGS
from life_contingencies.life.models import JointLife, LifeContingency, SingleLife
from life_contingencies.life.survival import discount, omega, survival
from life_contingencies.valuation.reduction import fold_sum, ratio


def D(lc: LifeContingency, to_time: float) -> float:
    """Discount factor times survival to ``to_time``."""
    return discount(lc, to_time) * survival(lc, to_time)


def l(lc: LifeContingency, to_time: float, basis: float = 1.0) -> float:  # noqa: E741
    """
    Survivors at ``to_time`` out of ``basis`` lives at issue.

    The default basis of 1.0 gives probabilities; 1000 or 100 000 are
    common in the literature.
    """
    return survival(lc.life, to_time) * basis


def C(lc: LifeContingency, to_time: int) -> float:
    """Discounted deaths between ``to_time`` and ``to_time + 1``."""
    return discount(lc, to_time + 1) * (l(lc, to_time) - l(lc, to_time + 1))


def N(lc: LifeContingency, from_time: int) -> float:
    """Sum of D from ``from_time`` to the end of the projection."""
    return fold_sum(D, lc, range(from_time, omega(lc)))


def M(lc: LifeContingency, from_time: int) -> float:
    """Sum of C from ``from_time`` to the end of the projection."""
    return fold_sum(C, lc, range(from_time, omega(lc)))


def E(lc: LifeContingency, t: float, x: float) -> float:
    """
    Pure endowment ratio D(x + t) / D(x).

    Returns a non-finite value if D(x) is zero.
    """
    return ratio(D(lc, x + t), D(lc, x), "pure endowment E")


def commutation_table(lc: LifeContingency, basis: float | None = None) -> pd.DataFrame:
    """
    Tabulate the commutation functions over the projection.

    Parameters
    ----------
    lc : LifeContingency
        Life and discount provider
    basis : float, optional
        Radix for ``l``; defaults to ``SETTINGS.valuation.commutation_basis``

    Returns
    -------
    DataFrame
        Indexed by time 0 .. omega - 1, with columns ``l, D, C, N, M``
        (N and M as reverse cumulative sums) preceded by the attained age
        of each life.

    Examples
    --------
    >>> table = commutation_table(lc)
    >>> table.loc[0, "D"]
    1.0
    """
    if basis is None:
        basis = SETTINGS.valuation.commutation_basis
    n = omega(lc)
    times = np.arange(n)

    # survival and discount at 0 .. n; C needs the value one step past the end
    tpx = np.array([survival(lc, t) for t in range(n + 1)])
    v = np.array([discount(lc, t) for t in range(n + 1)])

    lx = tpx * basis
    dx = v[:-1] * tpx[:-1]
    cx = v[1:] * (tpx[:-1] - tpx[1:])

    columns: dict[str, np.ndarray] = {}
    if isinstance(lc.life, SingleLife):
        columns["age"] = lc.life.issue_age + times
    elif isinstance(lc.life, JointLife):
        for i, member in enumerate(lc.life.lives, start=1):
            columns[f"age_{i}"] = member.issue_age + times
    columns["l"] = lx[:-1]
    columns["D"] = dx
    columns["C"] = cx
    columns["N"] = np.cumsum(dx[::-1])[::-1]
    columns["M"] = np.cumsum(cx[::-1])[::-1]

    return pd.DataFrame(columns, index=pd.RangeIndex(n, name="time"))
