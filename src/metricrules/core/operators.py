"""Comparison operators used by rule expressions."""

from enum import Enum


class ComparisonOperator(Enum):
    """Closed set of comparisons a rule expression can apply.

    The value of each member is its canonical text symbol.
    """

    LESS_THAN = "<"
    LESS_EQUAL = "<="
    GREATER_THAN = ">"
    GREATER_EQUAL = ">="

    @property
    def symbol(self) -> str:
        return self.value


def evaluate(op: ComparisonOperator, value: float, threshold: float) -> bool:
    """Check whether ``value <op> threshold`` holds.

    Comparisons follow IEEE-754 semantics, so any comparison involving NaN
    is false.

    Args:
        op: The comparison to apply.
        value: Observed metric value (left-hand side).
        threshold: Expression threshold (right-hand side).

    Returns:
        True when the relation holds.

    Raises:
        ValueError: If ``op`` is not a ComparisonOperator member.
    """
    if op is ComparisonOperator.LESS_THAN:
        return value < threshold
    if op is ComparisonOperator.LESS_EQUAL:
        return value <= threshold
    if op is ComparisonOperator.GREATER_THAN:
        return value > threshold
    if op is ComparisonOperator.GREATER_EQUAL:
        return value >= threshold
    raise ValueError(f"unknown comparison operator: {op!r}")
