"""Shared test fixtures for all test modules."""

import pytest

from metricrules.adapters.storage.in_memory import InMemoryMetricsStorage
from metricrules.core.models import Expr, Metric, Rule
from metricrules.core.operators import ComparisonOperator


@pytest.fixture
def required_rule() -> Rule:
    """Required rule on custom.metric1.value accepting values <= 3."""
    return Rule(
        path="custom.metric1.value",
        exprs=(Expr(ComparisonOperator.LESS_EQUAL, 3.0),),
        required=True,
    )


@pytest.fixture
def optional_rule() -> Rule:
    """Optional counterpart of required_rule."""
    return Rule(
        path="custom.metric1.value",
        exprs=(Expr(ComparisonOperator.LESS_EQUAL, 3.0),),
    )


@pytest.fixture
def operators_rule() -> Rule:
    """Required rule using every comparison operator once."""
    return Rule(
        path="a.b.c",
        exprs=(
            Expr(ComparisonOperator.LESS_THAN, 3.0),
            Expr(ComparisonOperator.LESS_EQUAL, 2.15),
            Expr(ComparisonOperator.GREATER_THAN, 0.0),
            Expr(ComparisonOperator.GREATER_EQUAL, -3.0),
        ),
        required=True,
    )


@pytest.fixture
def metrics_storage() -> InMemoryMetricsStorage:
    """Fixture providing an empty in-memory metric source."""
    return InMemoryMetricsStorage()


@pytest.fixture
def metric_factory():
    """Factory fixture for creating Metric objects with a default path."""

    def _metric(value: float, path: str = "custom.metric1.value") -> Metric:
        return Metric(path=path, value=value)

    return _metric
