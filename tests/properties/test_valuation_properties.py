"""
Property-based tests for insurance, annuity and premium values.

Properties tested:
1. Annuity identity: a = ä - 1 (whole life)
2. Equivalence principle: P × ä = A
3. Zero-length boundaries: A(0) = ä(0) = 0
4. Bounds: 0 <= A <= 1 for non-negative interest
5. Reserve at issue is zero

References:
    [T1] Dickson, Hardy & Waters (2019) Ch. 4-7
"""

from hypothesis import given, settings
from hypothesis import strategies as st

from life_contingencies.config.tolerances import (
    ANNUITY_IDENTITY_TOLERANCE,
    EQUIVALENCE_PRINCIPLE_TOLERANCE,
    PROBABILITY_BOUND_TOLERANCE,
)
from life_contingencies.life.models import LifeContingency, SingleLife
from life_contingencies.providers.discount import ConstantRate
from life_contingencies.providers.mortality import MortalityLoader
from life_contingencies.valuation.annuity import annuity_due, annuity_immediate
from life_contingencies.valuation.commutation import D
from life_contingencies.valuation.insurance import insurance
from life_contingencies.valuation.premium import premium_net, reserve_premium_net

# =============================================================================
# Strategy Definitions
# =============================================================================

LOADER = MortalityLoader()

qx_strategy = st.floats(min_value=0.001, max_value=0.5, allow_nan=False, allow_infinity=False)
rate_strategy = st.floats(min_value=0.0, max_value=0.15, allow_nan=False, allow_infinity=False)
issue_age_strategy = st.integers(min_value=30, max_value=95)


@st.composite
def flat_contingency(draw):
    """Single life on a flat table (ages 30-99) at a constant rate."""
    table = LOADER.flat(draw(qx_strategy), min_age=30, max_age=99)
    life = SingleLife(mortality=table, issue_age=draw(issue_age_strategy))
    return LifeContingency(life, ConstantRate(draw(rate_strategy)))


# =============================================================================
# Properties
# =============================================================================

class TestAnnuityIdentity:
    """[T1] Whole life a = ä - 1."""

    @given(lc=flat_contingency())
    @settings(max_examples=100)
    def test_whole_life(self, lc: LifeContingency) -> None:
        gap = annuity_immediate(lc) - (annuity_due(lc) - 1)
        assert abs(gap) <= ANNUITY_IDENTITY_TOLERANCE


class TestEquivalencePrinciple:
    """[T1] P × ä = A."""

    @given(lc=flat_contingency())
    @settings(max_examples=100)
    def test_whole_life(self, lc: LifeContingency) -> None:
        gap = premium_net(lc) * annuity_due(lc) - insurance(lc)
        assert abs(gap) <= EQUIVALENCE_PRINCIPLE_TOLERANCE

    @given(lc=flat_contingency())
    @settings(max_examples=50)
    def test_reserve_zero_at_issue(self, lc: LifeContingency) -> None:
        assert abs(reserve_premium_net(lc, 0)) <= EQUIVALENCE_PRINCIPLE_TOLERANCE


class TestBoundaries:
    """Zero-length terms and issue-time values."""

    @given(lc=flat_contingency())
    @settings(max_examples=50)
    def test_zero_length(self, lc: LifeContingency) -> None:
        assert insurance(lc, 0) == 0.0
        assert annuity_due(lc, 0) == 0.0

    @given(lc=flat_contingency())
    @settings(max_examples=50)
    def test_d_at_issue(self, lc: LifeContingency) -> None:
        assert D(lc, 0) == 1.0


class TestBounds:
    """[T1] A is an expected discount factor, so lies in [0, 1] for i >= 0."""

    @given(lc=flat_contingency())
    @settings(max_examples=100)
    def test_insurance_in_unit_interval(self, lc: LifeContingency) -> None:
        value = insurance(lc)
        assert -PROBABILITY_BOUND_TOLERANCE <= value <= 1 + PROBABILITY_BOUND_TOLERANCE

    @given(lc=flat_contingency(), n=st.integers(min_value=1, max_value=5))
    @settings(max_examples=100)
    def test_term_below_whole_life(self, lc: LifeContingency, n: int) -> None:
        assert insurance(lc, n) <= insurance(lc) + PROBABILITY_BOUND_TOLERANCE
        assert annuity_due(lc, n) <= annuity_due(lc) + PROBABILITY_BOUND_TOLERANCE
