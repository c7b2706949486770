"""
Mortality tables for the life contingency core.

Provides an in-memory decrement table implementing the MortalityProvider
interface, plus a loader of built-in and parametric tables:
- SOA 2012 IAM basic tables (Individual Annuity Mortality)
- Flat (constant qx) and Gompertz tables
- Custom tables from an age -> qx mapping

Theory
------
[T1] qx = probability of death between age x and x+1
[T1] px = 1 - qx = probability of survival
[T1] npx = p_x × p_{x+1} × ... × p_{x+n-1} = n-year survival
[T1] Fractional ages, 0 <= s <= 1 within age x:
     Uniform (UDD):   s_p_x = 1 - s × qx
     Constant force:  s_p_x = (1 - qx)^s
     Balducci:        s_p_x = (1 - qx) / (1 - (1 - s) × qx)

Validators: MortalityTables.jl
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Literal

import numpy as np

from life_contingencies.exceptions import DomainError

# SOA 2012 IAM Basic Table - Male
# Source: Society of Actuaries, 2012 Individual Annuity Reserving Table
# These are representative values; actual table has more decimal precision
SOA_2012_IAM_MALE_QX: dict[int, float] = {
    0: 0.00066, 1: 0.00044, 2: 0.00029, 3: 0.00023, 4: 0.00018,
    5: 0.00016, 6: 0.00015, 7: 0.00014, 8: 0.00013, 9: 0.00012,
    10: 0.00012, 11: 0.00013, 12: 0.00016, 13: 0.00022, 14: 0.00031,
    15: 0.00041, 16: 0.00052, 17: 0.00063, 18: 0.00073, 19: 0.00080,
    20: 0.00084, 21: 0.00087, 22: 0.00088, 23: 0.00089, 24: 0.00089,
    25: 0.00088, 26: 0.00088, 27: 0.00088, 28: 0.00089, 29: 0.00091,
    30: 0.00093, 31: 0.00096, 32: 0.00100, 33: 0.00104, 34: 0.00109,
    35: 0.00115, 36: 0.00121, 37: 0.00129, 38: 0.00137, 39: 0.00147,
    40: 0.00158, 41: 0.00170, 42: 0.00184, 43: 0.00199, 44: 0.00216,
    45: 0.00235, 46: 0.00256, 47: 0.00280, 48: 0.00306, 49: 0.00336,
    50: 0.00369, 51: 0.00405, 52: 0.00446, 53: 0.00491, 54: 0.00542,
    55: 0.00598, 56: 0.00661, 57: 0.00731, 58: 0.00809, 59: 0.00897,
    60: 0.00994, 61: 0.01103, 62: 0.01224, 63: 0.01360, 64: 0.01511,
    65: 0.01680, 66: 0.01868, 67: 0.02079, 68: 0.02315, 69: 0.02580,
    70: 0.02876, 71: 0.03208, 72: 0.03580, 73: 0.03997, 74: 0.04464,
    75: 0.04988, 76: 0.05574, 77: 0.06231, 78: 0.06966, 79: 0.07790,
    80: 0.08712, 81: 0.09745, 82: 0.10901, 83: 0.12194, 84: 0.13638,
    85: 0.15249, 86: 0.17043, 87: 0.19037, 88: 0.21248, 89: 0.23691,
    90: 0.26379, 91: 0.29323, 92: 0.32532, 93: 0.36011, 94: 0.39759,
    95: 0.43769, 96: 0.48025, 97: 0.52503, 98: 0.57171, 99: 0.61989,
    100: 0.66912, 101: 0.71888, 102: 0.76861, 103: 0.81769, 104: 0.86551,
    105: 0.91142, 106: 0.95479, 107: 0.99500, 108: 1.00000, 109: 1.00000,
    110: 1.00000, 111: 1.00000, 112: 1.00000, 113: 1.00000, 114: 1.00000,
    115: 1.00000, 116: 1.00000, 117: 1.00000, 118: 1.00000, 119: 1.00000,
    120: 1.00000,
}

# SOA 2012 IAM Basic Table - Female
# Generally lower mortality than male
SOA_2012_IAM_FEMALE_QX: dict[int, float] = {
    0: 0.00055, 1: 0.00037, 2: 0.00024, 3: 0.00019, 4: 0.00015,
    5: 0.00013, 6: 0.00012, 7: 0.00011, 8: 0.00011, 9: 0.00010,
    10: 0.00010, 11: 0.00011, 12: 0.00013, 13: 0.00017, 14: 0.00022,
    15: 0.00027, 16: 0.00032, 17: 0.00036, 18: 0.00039, 19: 0.00041,
    20: 0.00042, 21: 0.00043, 22: 0.00044, 23: 0.00045, 24: 0.00046,
    25: 0.00047, 26: 0.00048, 27: 0.00050, 28: 0.00052, 29: 0.00055,
    30: 0.00058, 31: 0.00062, 32: 0.00066, 33: 0.00071, 34: 0.00077,
    35: 0.00083, 36: 0.00090, 37: 0.00098, 38: 0.00107, 39: 0.00117,
    40: 0.00128, 41: 0.00140, 42: 0.00154, 43: 0.00169, 44: 0.00185,
    45: 0.00203, 46: 0.00223, 47: 0.00245, 48: 0.00269, 49: 0.00296,
    50: 0.00325, 51: 0.00357, 52: 0.00393, 53: 0.00432, 54: 0.00475,
    55: 0.00523, 56: 0.00576, 57: 0.00635, 58: 0.00700, 59: 0.00773,
    60: 0.00854, 61: 0.00944, 62: 0.01044, 63: 0.01156, 64: 0.01281,
    65: 0.01420, 66: 0.01576, 67: 0.01750, 68: 0.01946, 69: 0.02165,
    70: 0.02411, 71: 0.02688, 72: 0.02999, 73: 0.03349, 74: 0.03743,
    75: 0.04186, 76: 0.04683, 77: 0.05242, 78: 0.05869, 79: 0.06573,
    80: 0.07361, 81: 0.08245, 82: 0.09234, 83: 0.10341, 84: 0.11578,
    85: 0.12960, 86: 0.14502, 87: 0.16220, 88: 0.18130, 89: 0.20246,
    90: 0.22582, 91: 0.25150, 92: 0.27960, 93: 0.31019, 94: 0.34330,
    95: 0.37893, 96: 0.41701, 97: 0.45741, 98: 0.49994, 99: 0.54433,
    100: 0.59025, 101: 0.63732, 102: 0.68510, 103: 0.73315, 104: 0.78099,
    105: 0.82815, 106: 0.87414, 107: 0.91849, 108: 0.96073, 109: 1.00000,
    110: 1.00000, 111: 1.00000, 112: 1.00000, 113: 1.00000, 114: 1.00000,
    115: 1.00000, 116: 1.00000, 117: 1.00000, 118: 1.00000, 119: 1.00000,
    120: 1.00000,
}


class FractionalAssumption(Enum):
    """Distribution of deaths between integer ages."""

    UNIFORM = "uniform"
    CONSTANT_FORCE = "constant_force"
    BALDUCCI = "balducci"

    def fractional_survival(self, qx: float, s: float) -> float:
        """
        Probability of surviving a fraction ``s`` of the year of age.

        Parameters
        ----------
        qx : float
            One-year decrement rate at the integer age
        s : float
            Fraction of the year, 0 <= s <= 1

        Returns
        -------
        float
            s_p_x under this assumption

        Examples
        --------
        >>> FractionalAssumption.UNIFORM.fractional_survival(0.1, 0.5)
        0.95
        """
        if s == 0:
            return 1.0
        if self is FractionalAssumption.UNIFORM:
            return 1.0 - s * qx
        if self is FractionalAssumption.CONSTANT_FORCE:
            return (1.0 - qx) ** s
        # Balducci: 1 - (1 - s) × qx is zero only when qx = 1 and s = 0
        return (1.0 - qx) / (1.0 - (1.0 - s) * qx)


@dataclass(frozen=True, eq=False)
class MortalityTable:
    """
    Immutable mortality table indexed by attained age.

    [T1] qx = probability of death between age x and x+1

    Attributes
    ----------
    table_name : str
        Table identifier (e.g., "SOA 2012 IAM")
    min_age : int
        Minimum age in table
    max_age : int
        Last age with a defined qx
    qx : ndarray
        Mortality rates by age (read-only copy)
    gender : str
        "male", "female", or "unisex"
    """

    table_name: str
    min_age: int
    max_age: int
    qx: np.ndarray
    gender: str = "unisex"

    def __post_init__(self) -> None:
        """Validate table data and freeze the rate array."""
        qx = np.array(self.qx, dtype=float)
        expected_len = self.max_age - self.min_age + 1
        if len(qx) != expected_len:
            raise ValueError(
                f"qx array length ({len(qx)}) must equal "
                f"max_age - min_age + 1 ({expected_len})"
            )
        if not np.all((qx >= 0) & (qx <= 1)):
            raise ValueError("All qx values must be in [0, 1]")
        qx.setflags(write=False)
        object.__setattr__(self, "qx", qx)

    def last_supported_age(self) -> int:
        """Last attained age with a defined decrement rate."""
        return self.max_age

    def first_supported_age(self) -> int:
        """First attained age with a defined decrement rate."""
        return self.min_age

    def decrement_rate(self, age: int) -> float:
        """
        Get mortality rate at age.

        Parameters
        ----------
        age : int
            Attained age

        Returns
        -------
        float
            Mortality rate qx

        Raises
        ------
        DomainError
            If age is outside [min_age, max_age]
        """
        if age < self.min_age or age > self.max_age:
            raise DomainError(
                f"Age {age} outside table '{self.table_name}' "
                f"domain [{self.min_age}, {self.max_age}]"
            )
        return float(self.qx[int(age) - self.min_age])

    def decrement_rates(self, age_from: int, age_to: int) -> np.ndarray:
        """qx for attained ages ``age_from`` .. ``age_to - 1``."""
        if age_to <= age_from:
            return np.empty(0)
        self.decrement_rate(age_from)
        self.decrement_rate(age_to - 1)
        return self.qx[age_from - self.min_age:age_to - self.min_age]

    def npx(self, age: int, n: int) -> float:
        """
        Get n-year survival probability from an integer age.

        [T1] npx = p_x × p_{x+1} × ... × p_{x+n-1}

        Parameters
        ----------
        age : int
            Starting age
        n : int
            Number of years

        Returns
        -------
        float
            n-year survival probability
        """
        if n <= 0:
            return 1.0
        return float(np.prod(1.0 - self.decrement_rates(age, age + n)))

    def _survival_from(
        self, base_age: int, age: float, assumption: FractionalAssumption
    ) -> float:
        """Survival from integer ``base_age`` to (possibly fractional) ``age``."""
        whole = math.floor(age)
        survival = self.npx(base_age, whole - base_age)
        s = age - whole
        if s > 0:
            survival *= assumption.fractional_survival(self.decrement_rate(whole), s)
        return survival

    def survival(
        self,
        age_from: float,
        age_to: float,
        fractional_assumption: FractionalAssumption = FractionalAssumption.UNIFORM,
    ) -> float:
        """
        Probability of surviving from ``age_from`` to ``age_to``.

        Integer ages reduce to a product of one-year survival rates; fractional
        ages use ``fractional_assumption`` within the year of age. Callers must
        ensure ``age_from <= age_to``.

        Parameters
        ----------
        age_from : float
            Starting attained age
        age_to : float
            Ending attained age, at most max_age + 1
        fractional_assumption : FractionalAssumption
            Distribution of deaths between integer ages

        Returns
        -------
        float
            Survival probability in [0, 1]

        Raises
        ------
        DomainError
            If either age is outside [min_age, max_age + 1]

        Examples
        --------
        >>> table = MortalityLoader().flat(0.01, min_age=30, max_age=99)
        >>> round(table.survival(30, 32), 4)
        0.9801
        """
        for age in (age_from, age_to):
            if age < self.min_age or age > self.max_age + 1:
                raise DomainError(
                    f"Age {age} outside table '{self.table_name}' survival "
                    f"domain [{self.min_age}, {self.max_age + 1}]"
                )
        if age_to == age_from:
            return 1.0

        base_age = math.floor(age_from)
        to_survival = self._survival_from(base_age, age_to, fractional_assumption)
        if age_from == base_age:
            return to_survival
        from_survival = self._survival_from(base_age, age_from, fractional_assumption)
        if from_survival == 0:
            return 0.0
        return to_survival / from_survival

    def life_expectancy(self, age: int) -> float:
        """
        Calculate curtate life expectancy at age.

        [T1] e_x = Σ kpx for k = 1 to omega - x

        Parameters
        ----------
        age : int
            Starting age

        Returns
        -------
        float
            Curtate life expectancy (complete years)
        """
        survival = np.cumprod(1.0 - self.decrement_rates(age, self.max_age + 1))
        return float(survival.sum())


class MortalityLoader:
    """
    Builds mortality tables from built-in and parametric sources.

    Examples
    --------
    >>> loader = MortalityLoader()
    >>> table = loader.soa_2012_iam(gender="male")
    >>> table.decrement_rate(65)
    0.0168
    """

    def soa_2012_iam(
        self,
        gender: Literal["male", "female"] = "male",
    ) -> MortalityTable:
        """
        Load SOA 2012 IAM basic table.

        Parameters
        ----------
        gender : str
            "male" or "female"

        Returns
        -------
        MortalityTable
            SOA 2012 IAM table
        """
        if gender == "male":
            qx_dict = SOA_2012_IAM_MALE_QX
        elif gender == "female":
            qx_dict = SOA_2012_IAM_FEMALE_QX
        else:
            raise ValueError(f"Gender must be 'male' or 'female', got {gender}")

        return self.from_dict(
            qx_dict,
            table_name=f"SOA 2012 IAM Basic - {gender.title()}",
            gender=gender,
        )

    def from_dict(
        self,
        qx_dict: dict[int, float],
        table_name: str = "Custom",
        gender: str = "unisex",
    ) -> MortalityTable:
        """
        Create table from an age -> qx mapping.

        Gaps between ages are filled by linear interpolation.

        Examples
        --------
        >>> loader = MortalityLoader()
        >>> table = loader.from_dict({65: 0.02, 67: 0.024}, "Custom")
        >>> round(table.decrement_rate(66), 4)
        0.022
        """
        if not qx_dict:
            raise ValueError("qx_dict must contain at least one age")
        ages = np.array(sorted(qx_dict), dtype=float)
        rates = np.array([qx_dict[int(a)] for a in ages])
        min_age, max_age = int(ages[0]), int(ages[-1])
        qx = np.interp(np.arange(min_age, max_age + 1), ages, rates)

        return MortalityTable(
            table_name=table_name,
            min_age=min_age,
            max_age=max_age,
            qx=qx,
            gender=gender,
        )

    def flat(
        self,
        qx: float,
        min_age: int = 0,
        max_age: int = 120,
        table_name: str = "Flat",
        gender: str = "unisex",
    ) -> MortalityTable:
        """
        Create a table with the same qx at every age.

        Examples
        --------
        >>> table = MortalityLoader().flat(0.01, min_age=30, max_age=99)
        >>> table.last_supported_age()
        99
        """
        return MortalityTable(
            table_name=table_name,
            min_age=min_age,
            max_age=max_age,
            qx=np.full(max_age - min_age + 1, qx),
            gender=gender,
        )

    def gompertz(
        self,
        a: float = 0.0001,
        b: float = 0.08,
        min_age: int = 0,
        max_age: int = 120,
        table_name: str = "Gompertz",
        gender: str = "unisex",
    ) -> MortalityTable:
        """
        Create Gompertz mortality table.

        [T1] qx = a × e^(b × age), capped at 1
        """
        ages = np.arange(min_age, max_age + 1)
        qx = np.minimum(a * np.exp(b * ages), 1.0)

        return MortalityTable(
            table_name=table_name,
            min_age=min_age,
            max_age=max_age,
            qx=qx,
            gender=gender,
        )
