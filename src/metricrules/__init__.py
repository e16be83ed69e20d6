"""metricrules - check metric readings against declarative rules."""

from metricrules.adapters.logging import log_violations
from metricrules.adapters.storage.in_memory import InMemoryMetricsStorage
from metricrules.core.encoding.ndjson import encode_violations
from metricrules.core.encoding.rule_text import format_expr, format_number, format_rule
from metricrules.core.matcher import match
from metricrules.core.models import (
    Expr,
    InvalidData,
    Metric,
    MetricViolation,
    Rule,
    RuleViolation,
)
from metricrules.core.operators import ComparisonOperator, evaluate
from metricrules.core.ports import MetricsSourcePort
from metricrules.runtime.checker import CheckerConfig, RuleChecker, ViolationsFound

__all__ = [
    "CheckerConfig",
    "ComparisonOperator",
    "Expr",
    "InMemoryMetricsStorage",
    "InvalidData",
    "Metric",
    "MetricViolation",
    "MetricsSourcePort",
    "Rule",
    "RuleChecker",
    "RuleViolation",
    "ViolationsFound",
    "encode_violations",
    "evaluate",
    "format_expr",
    "format_number",
    "format_rule",
    "log_violations",
    "match",
]
