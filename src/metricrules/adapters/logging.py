"""Python logging adapter for reporting violations.

Bridges violations to the standard library logging module so that any
configured handler can receive them as structured records.
"""

import logging
from collections.abc import Iterable

from metricrules.core.models import InvalidData, RuleViolation


def _violation_extra(violation: InvalidData) -> dict[str, str]:
    """Build the structured ``extra`` fields attached to a violation record."""
    if isinstance(violation, RuleViolation):
        return {
            "violation_kind": "rule",
            "metric_path": violation.rule.path,
            "rule": str(violation.rule),
        }
    return {
        "violation_kind": "metric",
        "metric_path": violation.metric.path,
        "rule": str(violation.rule),
    }


def log_violations(
    violations: Iterable[InvalidData],
    logger: logging.Logger,
    level: int = logging.WARNING,
) -> int:
    """Emit one log record per violation.

    Example:
        ```python
        violations = match(rules, metrics)
        log_violations(violations, logging.getLogger("checks"))
        ```

    Args:
        violations: Violations returned by ``match``.
        logger: Logger that receives the records.
        level: Log level for every record (default WARNING).

    Returns:
        Number of records emitted.
    """
    count = 0
    for violation in violations:
        logger.log(level, "%s", violation, extra=_violation_extra(violation))
        count += 1
    return count
