"""
Discount providers for the life contingency core.

Converts elapsed time to discount factors:
- Constant annual-effective or continuously compounded rates
- A vector of one-period forward rates (finite horizon)
- A zero-coupon yield curve with linear / log-linear / cubic interpolation

Theory
------
[T1] Annual effective: v(t) = (1 + i)^(-t)
[T1] Continuous: v(t) = e^(-δt)
[T1] Zero curve: P(t) = e^(-r(t) × t)
[T1] Forward discount: v(t1, t2) = v(t2) / v(t1)

Validators: Yields.jl, QuantLib
"""

import logging
import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum

import numpy as np
from scipy.interpolate import CubicSpline

from life_contingencies.exceptions import DomainError

logger = logging.getLogger(__name__)


class InterpolationMethod(Enum):
    """Interpolation method for yield curve."""

    LINEAR = "linear"
    LOG_LINEAR = "log_linear"
    CUBIC = "cubic"


class DiscountModel(ABC):
    """
    Base class for discount providers.

    Subclasses implement ``discount_factor(t)``; the two-argument forward form
    is derived from it.
    """

    @abstractmethod
    def discount_factor(self, t: float) -> float:
        """Value at time 0 of 1 unit paid at time ``t``."""
        ...

    def horizon(self) -> float:
        """Last time with a defined discount factor (``math.inf`` if unbounded)."""
        return math.inf

    def discount(self, t1: float, t2: float | None = None) -> float:
        """
        Discount factor from time 0 (one argument) or from ``t1`` to ``t2``.

        [T1] v(t1, t2) = v(t2) / v(t1)

        Examples
        --------
        >>> rate = ConstantRate(0.05)
        >>> round(rate.discount(1), 6)
        0.952381
        >>> round(rate.discount(1, 2), 6)
        0.952381
        """
        if t2 is None:
            return self.discount_factor(t1)
        return self.discount_factor(t2) / self.discount_factor(t1)


@dataclass(frozen=True)
class ConstantRate(DiscountModel):
    """
    Flat interest rate with unbounded horizon.

    Attributes
    ----------
    rate : float
        Interest rate (decimal)
    continuous : bool
        If True, ``rate`` is a force of interest δ; otherwise annual effective i
    """

    rate: float
    continuous: bool = False

    def __post_init__(self) -> None:
        """Validate rate."""
        if not self.continuous and self.rate <= -1:
            raise ValueError(f"CRITICAL: annual effective rate must be > -1, got {self.rate}")

    def discount_factor(self, t: float) -> float:
        if self.continuous:
            return math.exp(-self.rate * t)
        return (1.0 + self.rate) ** (-t)


@dataclass(frozen=True, eq=False)
class DiscountVector(DiscountModel):
    """
    Sequence of one-period annual effective rates.

    Rate ``rates[k]`` applies between time k and k+1, so the horizon is
    ``len(rates)``. Fractional times within a period compound at that
    period's rate.

    Attributes
    ----------
    rates : ndarray
        One-period rates (read-only copy)
    """

    rates: np.ndarray

    def __post_init__(self) -> None:
        """Validate rates and precompute cumulative discount factors."""
        rates = np.array(self.rates, dtype=float)
        if rates.ndim != 1 or len(rates) == 0:
            raise ValueError("DiscountVector requires a non-empty 1-d sequence of rates")
        if np.any(rates <= -1):
            raise ValueError("CRITICAL: all period rates must be > -1")
        rates.setflags(write=False)
        object.__setattr__(self, "rates", rates)
        cumulative = np.concatenate(([1.0], np.cumprod(1.0 / (1.0 + rates))))
        cumulative.setflags(write=False)
        object.__setattr__(self, "_cumulative", cumulative)

    def horizon(self) -> float:
        return float(len(self.rates))

    def discount_factor(self, t: float) -> float:
        """
        Discount factor at time ``t``.

        Raises
        ------
        DomainError
            If t is negative or beyond the last defined period
        """
        if t < 0 or t > len(self.rates):
            raise DomainError(f"Time {t} outside discount vector domain [0, {len(self.rates)}]")
        whole = math.floor(t)
        factor = float(self._cumulative[whole])
        s = t - whole
        if s > 0:
            factor *= (1.0 + self.rates[whole]) ** (-s)
        return factor


@dataclass(frozen=True, eq=False)
class YieldCurve(DiscountModel):
    """
    Zero-coupon yield curve representation.

    [T1] Zero-coupon yield curve with interpolation; flat extrapolation at
    the short end, and at the long end unless ``extrapolate`` is False.

    Attributes
    ----------
    maturities : ndarray
        Maturities in years
    rates : ndarray
        Zero rates at each maturity (continuous compounding)
    interpolation : InterpolationMethod
        Interpolation method for intermediate maturities
    extrapolate : bool
        If False, the horizon is the last maturity
    """

    maturities: np.ndarray
    rates: np.ndarray
    interpolation: InterpolationMethod = InterpolationMethod.LINEAR
    extrapolate: bool = True

    def __post_init__(self) -> None:
        """Validate curve data."""
        maturities = np.array(self.maturities, dtype=float)
        rates = np.array(self.rates, dtype=float)
        if len(maturities) != len(rates):
            raise ValueError(
                f"Maturities ({len(maturities)}) and rates ({len(rates)}) "
                "must have same length"
            )
        if len(maturities) == 0:
            raise ValueError("Curve must have at least one point")
        if not np.all(np.diff(maturities) > 0):
            raise ValueError("Maturities must be strictly increasing")
        if maturities[0] <= 0:
            raise ValueError(f"Maturities must be positive, got {maturities[0]}")
        maturities.setflags(write=False)
        rates.setflags(write=False)
        object.__setattr__(self, "maturities", maturities)
        object.__setattr__(self, "rates", rates)

        spline = None
        if self.interpolation == InterpolationMethod.CUBIC:
            if len(maturities) < 2:
                logger.warning("Cubic interpolation needs 2+ points; using flat curve")
            else:
                spline = CubicSpline(maturities, rates, bc_type="natural")
        object.__setattr__(self, "_spline", spline)

    def horizon(self) -> float:
        if self.extrapolate:
            return math.inf
        return float(self.maturities[-1])

    def get_rate(self, t: float) -> float:
        """
        Get interpolated zero rate at maturity t.

        Examples
        --------
        >>> curve = YieldCurve(
        ...     maturities=np.array([1, 2, 5, 10]),
        ...     rates=np.array([0.03, 0.035, 0.04, 0.045]),
        ... )
        >>> round(curve.get_rate(3.0), 6)
        0.036667
        """
        if t <= 0:
            raise ValueError(f"Maturity must be positive, got {t}")
        if not self.extrapolate and t > self.maturities[-1]:
            raise DomainError(
                f"Maturity {t} beyond curve horizon {self.maturities[-1]}"
            )

        # Extrapolation: flat at ends
        if t <= self.maturities[0]:
            return float(self.rates[0])
        if t >= self.maturities[-1]:
            return float(self.rates[-1])

        if self.interpolation == InterpolationMethod.LOG_LINEAR:
            # Log-linear on discount factors
            log_df = -self.maturities * self.rates
            log_df_t = np.interp(t, self.maturities, log_df)
            return float(-log_df_t / t)
        if self._spline is not None:
            return float(self._spline(t))
        return float(np.interp(t, self.maturities, self.rates))

    def discount_factor(self, t: float) -> float:
        """
        Calculate discount factor at maturity t.

        [T1] P(t) = e^(-r(t) × t)
        """
        if t < 0:
            raise DomainError(f"Time must be non-negative, got {t}")
        if t == 0:
            return 1.0
        return math.exp(-self.get_rate(t) * t)


class YieldCurveLoader:
    """
    Constructs yield curves from explicit points.

    Examples
    --------
    >>> loader = YieldCurveLoader()
    >>> curve = loader.flat_curve(0.04)
    >>> curve.get_rate(10.0)
    0.04
    """

    def from_points(
        self,
        maturities: np.ndarray,
        rates: np.ndarray,
        interpolation: InterpolationMethod = InterpolationMethod.LINEAR,
        extrapolate: bool = True,
    ) -> YieldCurve:
        """
        Create curve from explicit points.

        Parameters
        ----------
        maturities : ndarray
            Maturities in years
        rates : ndarray
            Zero rates (continuous compounding)
        interpolation : InterpolationMethod
            Interpolation method
        extrapolate : bool
            Flat extrapolation beyond the last maturity

        Returns
        -------
        YieldCurve
            Custom curve
        """
        return YieldCurve(
            maturities=maturities,
            rates=rates,
            interpolation=interpolation,
            extrapolate=extrapolate,
        )

    def flat_curve(self, rate: float) -> YieldCurve:
        """Create flat yield curve."""
        maturities = np.array([0.25, 1, 5, 10, 30])
        rates = np.full_like(maturities, rate)

        return YieldCurve(
            maturities=maturities,
            rates=rates,
        )
