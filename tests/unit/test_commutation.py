"""
Tests for commutation functions and the commutation table.

Flat qx = 0.01 from issue age 30 at 5%: D(t) = r^t with r = 0.99 / 1.05.
"""

import math

import pandas as pd
import pytest

from life_contingencies.life.models import LifeContingency
from life_contingencies.life.survival import omega, survival
from life_contingencies.valuation.annuity import annuity_due
from life_contingencies.valuation.commutation import C, D, E, M, N, commutation_table, l
from life_contingencies.valuation.insurance import insurance

R = 0.99 / 1.05


class TestD:
    """[T1] D_t = v(t) × tp_x."""

    def test_at_issue(self, single_lc: LifeContingency, joint_lc: LifeContingency) -> None:
        assert D(single_lc, 0) == 1.0
        assert D(joint_lc, 0) == 1.0

    @pytest.mark.parametrize("t", [1, 5, 20])
    def test_closed_form(self, single_lc: LifeContingency, t: int) -> None:
        assert D(single_lc, t) == pytest.approx(R ** t)

    def test_extinct(self, extinct_lc: LifeContingency) -> None:
        assert D(extinct_lc, 3) == 0.0


class TestL:
    """[T1] l_t = tp_x × radix."""

    def test_default_basis_is_probability(self, single_lc: LifeContingency) -> None:
        assert l(single_lc, 3) == pytest.approx(0.99 ** 3)

    def test_radix(self, single_lc: LifeContingency) -> None:
        assert l(single_lc, 2, basis=100_000) == pytest.approx(98_010.0)

    def test_joint(self, joint_lc: LifeContingency) -> None:
        assert l(joint_lc, 1, 1000) == pytest.approx(999.6)


class TestC:
    """[T1] C_t = v(t+1) × (l_t - l_{t+1})."""

    def test_closed_form(self, single_lc: LifeContingency) -> None:
        expected = 1.05 ** -4 * 0.99 ** 3 * 0.01
        assert C(single_lc, 3) == pytest.approx(expected)

    def test_non_negative(self, soa_lc: LifeContingency) -> None:
        assert all(C(soa_lc, t) >= 0 for t in range(0, omega(soa_lc), 7))


class TestNM:
    """Prospective sums N and M."""

    def test_n_matches_term_annuity(self, single_lc: LifeContingency) -> None:
        n = omega(single_lc)
        assert N(single_lc, 0) == pytest.approx(annuity_due(single_lc, n), rel=1e-12)

    def test_n_closed_form(self, single_lc: LifeContingency) -> None:
        expected = (1 - R ** 70) / (1 - R)
        assert N(single_lc, 0) == pytest.approx(expected, rel=1e-12)

    def test_m_matches_whole_life_insurance(self, single_lc: LifeContingency) -> None:
        assert M(single_lc, 0) == pytest.approx(insurance(single_lc), rel=1e-12)

    def test_past_horizon_is_empty(self, single_lc: LifeContingency) -> None:
        n = omega(single_lc)
        assert N(single_lc, n) == 0.0
        assert M(single_lc, n) == 0.0

    def test_decreasing(self, soa_lc: LifeContingency) -> None:
        assert N(soa_lc, 10) < N(soa_lc, 5) < N(soa_lc, 0)


class TestE:
    """[T1] E(t, x) = D_{x+t} / D_x."""

    def test_from_issue(self, single_lc: LifeContingency) -> None:
        assert E(single_lc, 10, 0) == pytest.approx(R ** 10)

    def test_deferred(self, single_lc: LifeContingency) -> None:
        assert E(single_lc, 5, 10) == pytest.approx(R ** 5)

    def test_equals_discounted_survival(self, soa_lc: LifeContingency) -> None:
        expected = survival(soa_lc, 5, 15) * 1.04 ** -10
        assert E(soa_lc, 10, 5) == pytest.approx(expected)

    def test_zero_denominator_is_not_finite(self, extinct_lc: LifeContingency) -> None:
        assert not math.isfinite(E(extinct_lc, 0, 3))


class TestCommutationTable:
    """Tabulated commutation functions."""

    @pytest.fixture(scope="class")
    def table(self, single_lc: LifeContingency) -> pd.DataFrame:
        return commutation_table(single_lc)

    def test_shape(self, table: pd.DataFrame) -> None:
        assert len(table) == 70
        assert list(table.columns) == ["age", "l", "D", "C", "N", "M"]
        assert table.index.name == "time"

    def test_ages(self, table: pd.DataFrame) -> None:
        assert table["age"].iloc[0] == 30
        assert table["age"].iloc[-1] == 99

    def test_matches_functions(self, single_lc: LifeContingency, table: pd.DataFrame) -> None:
        for t in (0, 13, 42):
            assert table.loc[t, "D"] == pytest.approx(D(single_lc, t))
            assert table.loc[t, "C"] == pytest.approx(C(single_lc, t))
            assert table.loc[t, "N"] == pytest.approx(N(single_lc, t), rel=1e-12)
            assert table.loc[t, "M"] == pytest.approx(M(single_lc, t), rel=1e-12)

    def test_basis(self, single_lc: LifeContingency) -> None:
        table = commutation_table(single_lc, basis=1000)
        assert table.loc[0, "l"] == pytest.approx(1000.0)
        assert table.loc[1, "l"] == pytest.approx(990.0)

    def test_joint_columns(self, joint_lc: LifeContingency) -> None:
        table = commutation_table(joint_lc)
        assert list(table.columns) == ["age_1", "age_2", "l", "D", "C", "N", "M"]
        assert len(table) == omega(joint_lc)
