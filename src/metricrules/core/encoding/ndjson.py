"""NDJSON encoder for violations."""

import json
import math
from collections.abc import Iterable
from typing import Any

from metricrules.core.encoding.rule_text import format_number
from metricrules.core.models import InvalidData, RuleViolation


def _encode_value(value: float) -> float | str:
    """Keep finite floats as JSON numbers; NaN and infinities become text."""
    if math.isfinite(value):
        return value
    return format_number(value)


def _to_dict(violation: InvalidData) -> dict[str, Any]:
    if isinstance(violation, RuleViolation):
        return {
            "kind": "rule",
            "rule": str(violation.rule),
            "path": violation.rule.path,
            "required": violation.rule.required,
        }
    return {
        "kind": "metric",
        "path": violation.metric.path,
        "value": _encode_value(violation.metric.value),
        "rule": str(violation.rule),
    }


def encode_violations(violations: Iterable[InvalidData]) -> str:
    """Encode violations to newline-delimited JSON.

    Args:
        violations: An iterable of RuleViolation and MetricViolation objects.

    Returns:
        NDJSON string with one JSON object per line.
        Empty string if no violations.
    """
    lines = [json.dumps(_to_dict(violation)) for violation in violations]

    if not lines:
        return ""

    return "\n".join(lines) + "\n"
