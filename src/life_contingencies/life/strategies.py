"""
Strategy tables for joint-life dispatch.

Each valuation concern (survival, insurance, ...) owns a ``JointRuleTable``
mapping a ``(contingency type, assumption type)`` pair to the function that
computes it. New contingencies or assumptions are added by registering a
rule; lookups match the exact pair and never fall back to another policy.
"""

from collections.abc import Callable
from typing import Generic, TypeVar

from life_contingencies.exceptions import UnsupportedCombinationError
from life_contingencies.life.models import ContingencyPolicy, JointAssumption, JointLife

Rule = TypeVar("Rule", bound=Callable)


class JointRuleTable(Generic[Rule]):
    """
    Lookup from (contingency, assumption) to a computation rule.

    Parameters
    ----------
    operation : str
        Name of the computation, used in error messages

    Examples
    --------
    >>> from life_contingencies.life.models import Frasier, LastSurvivor
    >>> table = JointRuleTable("survival")
    >>> @table.register(LastSurvivor, Frasier)
    ... def rule(life, from_time, to_time):
    ...     ...
    >>> table.supported()
    [('LastSurvivor', 'Frasier')]
    """

    def __init__(self, operation: str):
        self.operation = operation
        self._rules: dict[tuple[type, type], Rule] = {}

    def register(
        self,
        contingency: type[ContingencyPolicy],
        assumption: type[JointAssumption],
    ) -> Callable[[Rule], Rule]:
        """Decorator registering a rule for an exact policy pair."""
        key = (contingency, assumption)

        def decorator(rule: Rule) -> Rule:
            if key in self._rules:
                raise ValueError(
                    f"{self.operation} rule already registered for "
                    f"({contingency.__name__}, {assumption.__name__})"
                )
            self._rules[key] = rule
            return rule

        return decorator

    def resolve(self, life: JointLife) -> Rule:
        """
        Find the rule for a joint life's policy pair.

        Raises
        ------
        UnsupportedCombinationError
            If no rule is registered for the pair
        """
        key = (type(life.contingency), type(life.joint_assumption))
        try:
            return self._rules[key]
        except KeyError:
            raise UnsupportedCombinationError(
                self.operation, life.contingency, life.joint_assumption
            ) from None

    def supported(self) -> list[tuple[str, str]]:
        """Registered (contingency, assumption) pairs by class name."""
        return [(c.__name__, a.__name__) for c, a in self._rules]

    def __contains__(self, key: tuple[type, type]) -> bool:
        return key in self._rules
