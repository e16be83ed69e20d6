"""BDD step definitions for rule matching features."""

from dataclasses import dataclass, field

import pytest
from pytest_bdd import given, parsers, then, when

from metricrules.core.matcher import match
from metricrules.core.models import (
    Expr,
    InvalidData,
    Metric,
    MetricViolation,
    Rule,
    RuleViolation,
)
from metricrules.core.operators import ComparisonOperator


@dataclass
class MatchingScenarioContext:
    """Shared state between steps in a matching scenario."""

    rules: list[Rule] = field(default_factory=list)
    metrics: list[Metric] = field(default_factory=list)
    result: list[InvalidData] | None = None


@pytest.fixture
def ctx() -> MatchingScenarioContext:
    """Fresh scenario context for each test."""
    return MatchingScenarioContext()


def _exprs_from_table(datatable: list[list[str]]) -> tuple[Expr, ...]:
    """Build expressions from an ``| op | value |`` table, skipping the header."""
    return tuple(
        Expr(ComparisonOperator(op.strip()), float(value))
        for op, value in datatable[1:]
    )


# === Given Steps ===
@given(parsers.parse('a required rule on "{path}" with expressions:'))
def step_required_rule(
    ctx: MatchingScenarioContext, path: str, datatable: list[list[str]]
) -> None:
    ctx.rules.append(Rule(path, _exprs_from_table(datatable), required=True))


@given(parsers.parse('an optional rule on "{path}" with expressions:'))
def step_optional_rule(
    ctx: MatchingScenarioContext, path: str, datatable: list[list[str]]
) -> None:
    ctx.rules.append(Rule(path, _exprs_from_table(datatable)))


@given(parsers.parse('a metric "{path}" with value {value:g}'))
def step_metric(ctx: MatchingScenarioContext, path: str, value: float) -> None:
    ctx.metrics.append(Metric(path, value))


@given("no metrics")
def step_no_metrics(ctx: MatchingScenarioContext) -> None:
    ctx.metrics.clear()


# === When Steps ===
@when("the rules are matched")
def step_match(ctx: MatchingScenarioContext) -> None:
    ctx.result = match(ctx.rules, ctx.metrics)


# === Then Steps ===
@then("no violations are reported")
def step_no_violations(ctx: MatchingScenarioContext) -> None:
    assert ctx.result == []


@then(parsers.parse("exactly {count:d} violations are reported"))
def step_violation_count(ctx: MatchingScenarioContext, count: int) -> None:
    assert ctx.result is not None
    assert len(ctx.result) == count


@then(parsers.parse('a rule violation is reported for "{rule_text}"'))
def step_rule_violation(ctx: MatchingScenarioContext, rule_text: str) -> None:
    assert ctx.result is not None
    assert any(
        isinstance(v, RuleViolation) and str(v.rule) == rule_text
        for v in ctx.result
    )


@then(
    parsers.parse('a metric violation is reported for "{path}" with value {value:g}')
)
def step_metric_violation(
    ctx: MatchingScenarioContext, path: str, value: float
) -> None:
    assert ctx.result is not None
    assert any(
        isinstance(v, MetricViolation) and v.metric == Metric(path, value)
        for v in ctx.result
    )


@then(parsers.parse('the rule renders as "{text}"'))
def step_rule_renders(ctx: MatchingScenarioContext, text: str) -> None:
    assert str(ctx.rules[-1]) == text
