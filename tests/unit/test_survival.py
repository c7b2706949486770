"""
Tests for the survival engine: omega, survival, decrement, discount.

[T1] Last survivor, independent lives: tp_xy = tpx + tpy - tpx × tpy
"""

import math

import numpy as np
import pytest

from life_contingencies.exceptions import (
    DomainError,
    HorizonError,
    UnsupportedCombinationError,
)
from life_contingencies.life.models import (
    FirstToDie,
    JointLife,
    LifeContingency,
    SingleLife,
)
from life_contingencies.life.survival import (
    JOINT_SURVIVAL,
    decrement,
    discount,
    omega,
    survival,
)
from life_contingencies.providers.discount import ConstantRate, DiscountVector, YieldCurve
from life_contingencies.providers.mortality import FractionalAssumption, MortalityTable


class _UnboundedMortality:
    """Provider with no last age, for horizon resolution tests."""

    def survival(self, age_from, age_to, fractional_assumption):
        return 1.0

    def decrement_rate(self, age):
        return 0.0

    def last_supported_age(self):
        return math.inf


class TestOmega:
    """Horizon resolution."""

    def test_single_life(self, single_lc: LifeContingency) -> None:
        """Last age 99, issue age 30: 70 projected years."""
        assert omega(single_lc.life) == 70
        assert omega(single_lc) == 70

    def test_joint_life_is_minimum(self, flat_table_30: MortalityTable, flat_table_40) -> None:
        older = SingleLife(mortality=flat_table_40, issue_age=60)
        younger = SingleLife(mortality=flat_table_30, issue_age=30)
        joint = JointLife(lives=(older, younger))
        assert omega(joint) == min(omega(older), omega(younger)) == 40

    def test_bounded_by_discount_vector(self, single_lc: LifeContingency) -> None:
        lc = LifeContingency(single_lc.life, DiscountVector(rates=np.full(10, 0.05)))
        assert omega(lc) == 10

    def test_bounded_by_curve_horizon(self, single_lc: LifeContingency) -> None:
        curve = YieldCurve(np.array([1.0, 5.0, 25.5]), np.array([0.03, 0.04, 0.045]), extrapolate=False)
        assert omega(LifeContingency(single_lc.life, curve)) == 25

    def test_returns_int(self, single_lc: LifeContingency) -> None:
        assert isinstance(omega(single_lc), int)

    def test_no_finite_bound(self) -> None:
        life = SingleLife(mortality=_UnboundedMortality(), issue_age=0)
        with pytest.raises(HorizonError):
            omega(LifeContingency(life, ConstantRate(0.05)))

    def test_horizon_error_is_domain_error(self) -> None:
        assert issubclass(HorizonError, DomainError)


class TestSingleLifeSurvival:
    """Survival for a single life (flat qx = 0.01 from age 30)."""

    def test_one_year(self, single_lc: LifeContingency) -> None:
        assert survival(single_lc, 1) == pytest.approx(0.99)

    def test_two_years_multiply(self, single_lc: LifeContingency) -> None:
        assert survival(single_lc, 2) == pytest.approx(0.99 * 0.99)

    def test_interval(self, single_lc: LifeContingency) -> None:
        assert survival(single_lc, 5, 8) == pytest.approx(0.99 ** 3)

    def test_identity_interval(self, single_lc: LifeContingency) -> None:
        assert survival(single_lc, 0) == 1.0
        assert survival(single_lc, 7, 7) == 1.0

    def test_life_and_contingency_agree(self, single_lc: LifeContingency) -> None:
        assert survival(single_lc, 10) == survival(single_lc.life, 0, 10)

    def test_fractional_time(self, flat_table_30: MortalityTable) -> None:
        life = SingleLife(
            mortality=flat_table_30,
            issue_age=30,
            fractional_assumption=FractionalAssumption.CONSTANT_FORCE,
        )
        assert survival(life, 1.5) == pytest.approx(0.99 ** 1.5)

    def test_past_table_raises(self, single_lc: LifeContingency) -> None:
        with pytest.raises(DomainError):
            survival(single_lc, 71)

    def test_rejects_unknown_entity(self) -> None:
        with pytest.raises(TypeError):
            survival("life", 1)  # type: ignore[arg-type]


class TestJointLifeSurvival:
    """Last survivor under independence (flat qx = 0.02 from age 40)."""

    def test_one_year(self, joint_lc: LifeContingency) -> None:
        assert survival(joint_lc, 1) == pytest.approx(0.98 + 0.98 - 0.98 * 0.98)
        assert survival(joint_lc, 1) == pytest.approx(0.9996)

    def test_identity_interval(self, joint_lc: LifeContingency) -> None:
        assert survival(joint_lc, 0) == 1.0
        assert survival(joint_lc, 4, 4) == 1.0

    def test_interval(self, joint_lc: LifeContingency) -> None:
        tpx = 0.98 ** 3
        assert survival(joint_lc, 2, 5) == pytest.approx(2 * tpx - tpx * tpx)

    def test_different_lives(self, soa_joint_lc: LifeContingency) -> None:
        husband, wife = soa_joint_lc.life.lives
        tpx = survival(husband, 10)
        tpy = survival(wife, 10)
        assert survival(soa_joint_lc, 10) == pytest.approx(tpx + tpy - tpx * tpy)

    def test_registered_combinations(self) -> None:
        assert JOINT_SURVIVAL.supported() == [("LastSurvivor", "Frasier")]


class TestUnsupportedCombination:
    """FirstToDie has no rules and must never fall back to LastSurvivor."""

    @pytest.fixture
    def first_to_die_lc(self, flat_table_40: MortalityTable) -> LifeContingency:
        life = SingleLife(mortality=flat_table_40, issue_age=40)
        joint = JointLife(lives=(life, life), contingency=FirstToDie())
        return LifeContingency(joint, ConstantRate(0.05))

    def test_survival_raises(self, first_to_die_lc: LifeContingency) -> None:
        with pytest.raises(UnsupportedCombinationError, match="unimplemented combination"):
            survival(first_to_die_lc, 1)

    def test_identity_interval_still_raises(self, first_to_die_lc: LifeContingency) -> None:
        with pytest.raises(UnsupportedCombinationError):
            survival(first_to_die_lc, 0)

    def test_decrement_raises(self, first_to_die_lc: LifeContingency) -> None:
        with pytest.raises(UnsupportedCombinationError):
            decrement(first_to_die_lc, 0, 1)

    def test_omega_still_defined(self, first_to_die_lc: LifeContingency) -> None:
        assert omega(first_to_die_lc) == 60


class TestDecrement:
    """[T1] tqx = 1 - tpx."""

    def test_single_life(self, single_lc: LifeContingency) -> None:
        assert decrement(single_lc, 0, 1) == pytest.approx(0.01)

    def test_one_argument_form(self, single_lc: LifeContingency) -> None:
        assert decrement(single_lc, 3) == decrement(single_lc, 0, 3)

    def test_joint_life(self, joint_lc: LifeContingency) -> None:
        assert decrement(joint_lc, 1) == pytest.approx(0.02 * 0.02)

    @pytest.mark.parametrize("t", [0, 1, 10, 35, 70])
    def test_complements_survival(self, single_lc: LifeContingency, t: int) -> None:
        assert decrement(single_lc, 0, t) + survival(single_lc, 0, t) == pytest.approx(1.0, abs=1e-9)


class TestDiscount:
    """Delegation to the discount provider."""

    def test_one_argument(self, single_lc: LifeContingency) -> None:
        assert discount(single_lc, 3) == pytest.approx(1.05 ** -3)

    def test_two_arguments(self, single_lc: LifeContingency) -> None:
        assert discount(single_lc, 2, 5) == pytest.approx(1.05 ** -3)
