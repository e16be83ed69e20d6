"""Canonical text rendering of rules and expressions.

The rendered form is ``<path>:<expr>,<expr>,...`` where each expression is an
operator symbol immediately followed by its threshold, for example
``a.b.c:<3,<=2.15,>0,>=-3``. Optional rules carry a leading ``~``.
"""

from __future__ import annotations

import math
from decimal import Decimal
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from metricrules.core.models import Expr, Rule

OPTIONAL_PREFIX = "~"

# Decimal exponents below -4 or at or above the max switch to exponent notation
_MIN_FIXED_EXPONENT = -4
RULE_MAX_FIXED_EXPONENT = 21
VALUE_MAX_FIXED_EXPONENT = 6


def format_number(
    value: float, max_fixed_exponent: int = RULE_MAX_FIXED_EXPONENT
) -> str:
    """Render a float in its shortest round-trippable decimal form.

    Integral values drop the fractional part (``3.0`` -> ``3``) and only
    negative numbers carry a sign. Very large or very small magnitudes use
    exponent notation with at least two exponent digits (``1e+21``,
    ``1e-05``).

    Args:
        value: The number to render.
        max_fixed_exponent: Smallest decimal exponent rendered in exponent
            notation. Rule thresholds use 21; violation values use 6, so
            ``1234567.0`` renders as ``1.234567e+06``.

    Returns:
        The canonical text for ``value``.
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"

    # repr() yields the shortest digit string that round-trips
    number = Decimal(repr(float(value))).normalize()
    exponent = number.adjusted()
    if _MIN_FIXED_EXPONENT <= exponent < max_fixed_exponent:
        return format(number, "f")

    sign, digits, _ = number.as_tuple()
    mantissa = str(digits[0])
    if len(digits) > 1:
        mantissa += "." + "".join(str(d) for d in digits[1:])
    exp_sign = "+" if exponent >= 0 else "-"
    return f"{'-' if sign else ''}{mantissa}e{exp_sign}{abs(exponent):02d}"


def format_expr(expr: Expr) -> str:
    """Render a single expression as ``<symbol><threshold>``."""
    return f"{expr.op.symbol}{format_number(expr.value)}"


def format_rule(rule: Rule) -> str:
    """Render a rule in canonical form.

    Args:
        rule: The rule to render.

    Returns:
        ``<path>:<exprs>`` with expressions comma-separated in their
        declared order, prefixed with ``~`` when the rule is optional.
    """
    exprs = ",".join(format_expr(expr) for expr in rule.exprs)
    prefix = "" if rule.required else OPTIONAL_PREFIX
    return f"{prefix}{rule.path}:{exprs}"
