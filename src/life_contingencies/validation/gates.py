"""
Validation Gates - HALT/WARN/PASS checks on contract valuations.

Runs sanity checks over a ContractValuation before it is used. Gates can
HALT (reject with diagnostics), WARN, or PASS. Non-finite results are the
expected signal of degenerate inputs and are caught here rather than raised
by the valuation functions.
"""

import logging
import math
from dataclasses import dataclass
from enum import Enum
from typing import Any

from life_contingencies.config.settings import SETTINGS
from life_contingencies.config.tolerances import (
    ANNUITY_IDENTITY_TOLERANCE,
    EQUIVALENCE_PRINCIPLE_TOLERANCE,
)
from life_contingencies.exceptions import is_degenerate
from life_contingencies.valuation.premium import ContractValuation

logger = logging.getLogger(__name__)


class GateStatus(Enum):
    """Status of a validation gate."""
    PASS = "pass"
    HALT = "halt"
    WARN = "warn"


@dataclass(frozen=True)
class GateResult:
    """
    Result of a validation gate check.

    Attributes
    ----------
    status : GateStatus
        PASS, HALT, or WARN
    gate_name : str
        Name of the gate that was checked
    message : str
        Explanation of the result
    value : Any, optional
        The value that was checked
    threshold : Any, optional
        The threshold that was applied
    """

    status: GateStatus
    gate_name: str
    message: str
    value: Any | None = None
    threshold: Any | None = None

    @property
    def passed(self) -> bool:
        """Check if gate passed (PASS or WARN)."""
        return self.status != GateStatus.HALT


@dataclass(frozen=True)
class ValidationReport:
    """
    Complete validation report from all gates.

    Attributes
    ----------
    results : tuple[GateResult, ...]
        Results from all gates
    """

    results: tuple[GateResult, ...]

    @property
    def overall_status(self) -> GateStatus:
        """Get worst status across all gates."""
        if any(r.status == GateStatus.HALT for r in self.results):
            return GateStatus.HALT
        elif any(r.status == GateStatus.WARN for r in self.results):
            return GateStatus.WARN
        return GateStatus.PASS

    @property
    def passed(self) -> bool:
        """Check if all gates passed (no HALTs)."""
        return self.overall_status != GateStatus.HALT

    @property
    def halted_gates(self) -> list[GateResult]:
        """Get all gates that halted."""
        return [r for r in self.results if r.status == GateStatus.HALT]

    @property
    def warned_gates(self) -> list[GateResult]:
        """Get all gates that warned."""
        return [r for r in self.results if r.status == GateStatus.WARN]

    def to_dict(self) -> dict:
        """Convert to dictionary for logging."""
        return {
            "overall_status": self.overall_status.value,
            "passed": self.passed,
            "n_halted": len(self.halted_gates),
            "n_warned": len(self.warned_gates),
            "results": [
                {
                    "gate": r.gate_name,
                    "status": r.status.value,
                    "message": r.message,
                    "value": r.value,
                    "threshold": r.threshold,
                }
                for r in self.results
            ],
        }


# =============================================================================
# Gate Implementations
# =============================================================================

class ValidationGate:
    """
    Base class for validation gates.

    Subclasses implement check() to validate a contract valuation.
    """

    name: str = "base_gate"

    def check(self, valuation: ContractValuation, **context: Any) -> GateResult:
        """
        Check the valuation.

        Parameters
        ----------
        valuation : ContractValuation
            Valuation to validate
        **context : Any
            Additional context

        Returns
        -------
        GateResult
            Validation result
        """
        raise NotImplementedError


class FiniteValueGate(ValidationGate):
    """
    Check that every valuation amount is finite.

    Non-finite amounts come from zero denominators (e.g. a zero annuity
    value when every life is extinct before the first payment).
    """

    name = "finite_value"

    def __init__(self, halt: bool | None = None):
        """
        Parameters
        ----------
        halt : bool, optional
            HALT (True) or WARN (False); defaults to
            SETTINGS.validation.halt_on_degenerate
        """
        self.halt = SETTINGS.validation.halt_on_degenerate if halt is None else halt

    def check(self, valuation: ContractValuation, **context: Any) -> GateResult:
        amounts = {
            "insurance": valuation.insurance,
            "annuity_due": valuation.annuity_due,
            "annuity_immediate": valuation.annuity_immediate,
            "net_premium": valuation.net_premium,
        }
        degenerate = [name for name, value in amounts.items() if is_degenerate(value)]
        if degenerate:
            return GateResult(
                status=GateStatus.HALT if self.halt else GateStatus.WARN,
                gate_name=self.name,
                message=f"Non-finite values: {', '.join(degenerate)}",
                value=tuple(degenerate),
            )
        return GateResult(
            status=GateStatus.PASS,
            gate_name=self.name,
            message="All values finite",
        )


class NonNegativeValueGate(ValidationGate):
    """
    Check that insurance and annuity-due values are not negative.

    [T1] Both are expectations of non-negative discounted payments.
    """

    name = "non_negative_value"

    def __init__(self, halt: bool | None = None):
        self.halt = SETTINGS.validation.halt_on_negative_value if halt is None else halt

    def check(self, valuation: ContractValuation, **context: Any) -> GateResult:
        for label, value in (
            ("insurance", valuation.insurance),
            ("annuity_due", valuation.annuity_due),
        ):
            if value < 0:
                return GateResult(
                    status=GateStatus.HALT if self.halt else GateStatus.WARN,
                    gate_name=self.name,
                    message=f"{label} {value:.6f} is negative",
                    value=value,
                    threshold=0.0,
                )
        return GateResult(
            status=GateStatus.PASS,
            gate_name=self.name,
            message="Insurance and annuity values non-negative",
        )


class EquivalencePrincipleGate(ValidationGate):
    """
    Check premium × annuity-due reproduces the insurance value.

    [T1] P × ä = A under the equivalence principle
    """

    name = "equivalence_principle"

    def __init__(self, tolerance: float = EQUIVALENCE_PRINCIPLE_TOLERANCE):
        self.tolerance = tolerance

    def check(self, valuation: ContractValuation, **context: Any) -> GateResult:
        if is_degenerate(valuation.net_premium):
            return GateResult(
                status=GateStatus.WARN,
                gate_name=self.name,
                message="Net premium non-finite, skipping",
            )
        gap = abs(valuation.net_premium * valuation.annuity_due - valuation.insurance)
        if gap > self.tolerance:
            return GateResult(
                status=GateStatus.HALT,
                gate_name=self.name,
                message=f"P × ä differs from A by {gap:.3e}",
                value=gap,
                threshold=self.tolerance,
            )
        return GateResult(
            status=GateStatus.PASS,
            gate_name=self.name,
            message=f"P × ä matches A (gap {gap:.3e})",
            value=gap,
        )


class AnnuityIdentityGate(ValidationGate):
    """
    Check the whole life identity a = ä - 1.

    [T1] AMLCR eq. 5.11. Skipped for term valuations.
    """

    name = "annuity_identity"

    def __init__(self, tolerance: float = ANNUITY_IDENTITY_TOLERANCE):
        self.tolerance = tolerance

    def check(self, valuation: ContractValuation, **context: Any) -> GateResult:
        if not valuation.is_whole_life:
            return GateResult(
                status=GateStatus.PASS,
                gate_name=self.name,
                message="Term valuation, skipping",
            )
        gap = abs(valuation.annuity_immediate - (valuation.annuity_due - 1))
        if not math.isfinite(gap) or gap > self.tolerance:
            return GateResult(
                status=GateStatus.HALT,
                gate_name=self.name,
                message=f"a differs from ä - 1 by {gap:.3e}",
                value=gap,
                threshold=self.tolerance,
            )
        return GateResult(
            status=GateStatus.PASS,
            gate_name=self.name,
            message="a = ä - 1 holds",
            value=gap,
        )


# =============================================================================
# Validation Engine
# =============================================================================

class ValidationEngine:
    """
    Engine for running validation gates on contract valuations.

    Parameters
    ----------
    gates : list[ValidationGate], optional
        Custom gates to use. If None, uses default gates.

    Examples
    --------
    >>> engine = ValidationEngine()
    >>> report = engine.validate(value_contract(lc))
    >>> if not report.passed:
    ...     for gate in report.halted_gates:
    ...         print(f"HALT: {gate.message}")
    """

    def __init__(
        self,
        gates: list[ValidationGate] | None = None,
    ):
        if gates is None:
            gates = self._default_gates()
        self.gates = gates

    def _default_gates(self) -> list[ValidationGate]:
        """Create default set of validation gates."""
        return [
            FiniteValueGate(),
            NonNegativeValueGate(),
            EquivalencePrincipleGate(),
            AnnuityIdentityGate(),
        ]

    def validate(
        self,
        valuation: ContractValuation,
        **context: Any,
    ) -> ValidationReport:
        """Run all validation gates on a valuation."""
        report = ValidationReport(
            results=tuple(gate.check(valuation, **context) for gate in self.gates)
        )
        if not report.passed:
            logger.warning(
                f"Validation HALT: {[g.gate_name for g in report.halted_gates]}"
            )
        return report

    def validate_and_raise(
        self,
        valuation: ContractValuation,
        **context: Any,
    ) -> ContractValuation:
        """
        Validate and raise exception on HALT.

        Raises
        ------
        ValueError
            If any gate HALTs
        """
        report = self.validate(valuation, **context)

        if not report.passed:
            halt_messages = [g.message for g in report.halted_gates]
            raise ValueError(
                "CRITICAL: Validation failed. HALTs:\n" +
                "\n".join(f"  - {m}" for m in halt_messages)
            )

        return valuation


# =============================================================================
# Convenience Functions
# =============================================================================

def validate_valuation(
    valuation: ContractValuation,
    **context: Any,
) -> ValidationReport:
    """Quick validation of a contract valuation with the default gates."""
    return ValidationEngine().validate(valuation, **context)


def ensure_valid(
    valuation: ContractValuation,
    **context: Any,
) -> ContractValuation:
    """
    Validate and raise if invalid.

    Raises
    ------
    ValueError
        If validation fails
    """
    return ValidationEngine().validate_and_raise(valuation, **context)
