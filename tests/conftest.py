"""
Centralized pytest fixtures for the life-contingencies test suite.

Fixture Categories:
1. Mortality tables - flat, SOA 2012 IAM, and a table that ends in certain death
2. Discount providers - constant 5% and 4% rates
3. Life contingencies - the single- and joint-life reference scenarios
"""

import pytest

from life_contingencies import (
    ConstantRate,
    JointLife,
    LifeContingency,
    MortalityLoader,
    MortalityTable,
    SingleLife,
)


# =============================================================================
# Mortality Tables
# =============================================================================

@pytest.fixture(scope="session")
def loader() -> MortalityLoader:
    """Mortality loader instance."""
    return MortalityLoader()


@pytest.fixture(scope="session")
def flat_table_30(loader: MortalityLoader) -> MortalityTable:
    """Flat qx = 0.01 for ages 30-99."""
    return loader.flat(0.01, min_age=30, max_age=99)


@pytest.fixture(scope="session")
def flat_table_40(loader: MortalityLoader) -> MortalityTable:
    """Flat qx = 0.02 for ages 40-99."""
    return loader.flat(0.02, min_age=40, max_age=99)


@pytest.fixture(scope="session")
def soa_male(loader: MortalityLoader) -> MortalityTable:
    """SOA 2012 IAM Male table."""
    return loader.soa_2012_iam("male")


@pytest.fixture(scope="session")
def soa_female(loader: MortalityLoader) -> MortalityTable:
    """SOA 2012 IAM Female table."""
    return loader.soa_2012_iam("female")


@pytest.fixture(scope="session")
def extinct_table(loader: MortalityLoader) -> MortalityTable:
    """Three ages ending in certain death: every life is dead by age 63."""
    return loader.from_dict({60: 0.1, 61: 0.2, 62: 1.0}, table_name="Extinct")


# =============================================================================
# Discount Providers
# =============================================================================

@pytest.fixture(scope="session")
def rate_5pct() -> ConstantRate:
    """discount(t) = 1.05^-t."""
    return ConstantRate(0.05)


@pytest.fixture(scope="session")
def rate_4pct() -> ConstantRate:
    """discount(t) = 1.04^-t."""
    return ConstantRate(0.04)


# =============================================================================
# Life Contingencies
# =============================================================================

@pytest.fixture(scope="session")
def single_lc(flat_table_30: MortalityTable, rate_5pct: ConstantRate) -> LifeContingency:
    """Issue age 30, flat qx = 0.01, 5% interest."""
    return LifeContingency(SingleLife(mortality=flat_table_30, issue_age=30), rate_5pct)


@pytest.fixture(scope="session")
def joint_lc(flat_table_40: MortalityTable, rate_5pct: ConstantRate) -> LifeContingency:
    """Two identical lives at issue age 40, flat qx = 0.02, last survivor."""
    life = SingleLife(mortality=flat_table_40, issue_age=40)
    return LifeContingency(JointLife(lives=(life, life)), rate_5pct)


@pytest.fixture(scope="session")
def soa_lc(soa_male: MortalityTable, rate_4pct: ConstantRate) -> LifeContingency:
    """SOA 2012 IAM male, issue age 40, 4% interest."""
    return LifeContingency(SingleLife(mortality=soa_male, issue_age=40), rate_4pct)


@pytest.fixture(scope="session")
def soa_joint_lc(
    soa_male: MortalityTable, soa_female: MortalityTable, rate_4pct: ConstantRate
) -> LifeContingency:
    """SOA 2012 IAM male 65 and female 62, last survivor, 4% interest."""
    husband = SingleLife(mortality=soa_male, issue_age=65)
    wife = SingleLife(mortality=soa_female, issue_age=62)
    return LifeContingency(JointLife(lives=(husband, wife)), rate_4pct)


@pytest.fixture(scope="session")
def extinct_lc(extinct_table: MortalityTable, rate_5pct: ConstantRate) -> LifeContingency:
    """Issue age 60 on the extinct table: omega 3, survival(3) = 0."""
    return LifeContingency(SingleLife(mortality=extinct_table, issue_age=60), rate_5pct)
