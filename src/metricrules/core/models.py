"""Core domain models for rule matching."""

from dataclasses import dataclass, field

from metricrules.core.encoding.rule_text import (
    VALUE_MAX_FIXED_EXPONENT,
    format_number,
    format_rule,
)
from metricrules.core.operators import ComparisonOperator, evaluate


@dataclass(frozen=True)
class Metric:
    """A single observed metric reading.

    Attributes:
        path: Dot-separated metric path (e.g., custom.metric1.value).
        value: The observed value.
    """

    path: str
    value: float


@dataclass(frozen=True)
class Expr:
    """A comparison applied to a metric value.

    Attributes:
        op: The comparison operator.
        value: Threshold on the right-hand side of the comparison.
    """

    op: ComparisonOperator
    value: float

    def holds(self, value: float) -> bool:
        """Return True when ``value`` satisfies this expression."""
        return evaluate(self.op, value, self.value)


@dataclass(frozen=True)
class Rule:
    """A constraint on every metric found at ``path``.

    Attributes:
        path: Exact metric path the rule applies to.
        exprs: Expressions that must all hold, in rendering order.
        required: Whether the absence of any metric at ``path`` is itself
            a violation.
    """

    path: str
    exprs: tuple[Expr, ...] = ()
    required: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.exprs, tuple):
            object.__setattr__(self, "exprs", tuple(self.exprs))

    def accepts(self, value: float) -> bool:
        """Return True when ``value`` satisfies every expression."""
        return all(expr.holds(value) for expr in self.exprs)

    def __str__(self) -> str:
        return format_rule(self)


@dataclass(frozen=True)
class RuleViolation:
    """A required rule for which no metric was found at its path."""

    rule: Rule

    def __str__(self) -> str:
        return f"rule={{{self.rule}}}"


@dataclass(frozen=True)
class MetricViolation:
    """A metric that matched a rule's path but failed one of its expressions.

    Attributes:
        metric: The failing metric.
        rule: The rule it failed. Kept for reporting only and excluded from
            equality, so two violations of the same metric compare equal.
    """

    metric: Metric
    rule: Rule = field(compare=False)

    def __str__(self) -> str:
        value = format_number(self.metric.value, VALUE_MAX_FIXED_EXPONENT)
        return f"value={{{self.metric.path}={value}}}"


InvalidData = RuleViolation | MetricViolation
