"""Batch matching of metrics against rules."""

import logging
from collections import defaultdict
from collections.abc import Iterable

from metricrules.core.models import (
    InvalidData,
    Metric,
    MetricViolation,
    Rule,
    RuleViolation,
)

logger = logging.getLogger(__name__)


def _index_by_path(metrics: Iterable[Metric]) -> dict[str, list[Metric]]:
    """Group metrics by exact path, preserving input order within a path."""
    index: dict[str, list[Metric]] = defaultdict(list)
    for metric in metrics:
        index[metric.path].append(metric)
    return index


def match(rules: Iterable[Rule], metrics: Iterable[Metric]) -> list[InvalidData]:
    """Find unmet required rules and metrics that fail their rule.

    For each rule, the metrics sharing its exact path are checked against
    every expression of the rule. A metric failing any expression yields a
    MetricViolation. A required rule with no metric at its path yields a
    RuleViolation; an optional one yields nothing. Metrics whose path no
    rule names are ignored.

    Args:
        rules: Rules to evaluate. Each rule is judged independently.
        metrics: Observed metrics. Paths need not be unique.

    Returns:
        The violations found. Order carries no meaning; an empty list means
        every rule was satisfied.
    """
    index = _index_by_path(metrics)
    result: list[InvalidData] = []

    for rule in rules:
        matched = index.get(rule.path, [])
        if not matched:
            if rule.required:
                logger.debug("No metric found for required rule %s", rule)
                result.append(RuleViolation(rule=rule))
            continue

        for metric in matched:
            if not rule.accepts(metric.value):
                logger.debug(
                    "Metric %s=%g failed rule %s", metric.path, metric.value, rule
                )
                result.append(MetricViolation(metric=metric, rule=rule))

    return result
