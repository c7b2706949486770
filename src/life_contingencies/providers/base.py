"""
Provider interfaces consumed by the life contingency core.

The core never looks inside a mortality table or a discount curve; it only
calls the narrow methods below. Any object with these methods can be used,
so external table or curve libraries can be wrapped without subclassing.

Theory
------
[T1] tpx = probability that a life aged x survives t years
[T1] qx = probability that a life aged x dies within one year
[T1] v(t) = value at time 0 of 1 unit payable at time t
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class MortalityProvider(Protocol):
    """Per-age decrement rates with survival between (fractional) ages."""

    def survival(self, age_from: float, age_to: float, fractional_assumption: object) -> float:
        """Probability of surviving from ``age_from`` to ``age_to``."""
        ...

    def decrement_rate(self, age: int) -> float:
        """One-year decrement probability qx at attained ``age``."""
        ...

    def last_supported_age(self) -> int:
        """Last attained age with a defined decrement rate."""
        ...


@runtime_checkable
class DiscountProvider(Protocol):
    """
    Time value of money.

    ``horizon()`` is optional: providers without it are treated as unbounded.
    """

    def discount(self, t1: float, t2: float | None = None) -> float:
        """
        Discount factor.

        With one argument, the value at time 0 of 1 unit paid at ``t1``.
        With two, the value at ``t1`` of 1 unit paid at ``t2``.
        """
        ...
