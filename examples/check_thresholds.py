"""Check a batch of readings against threshold rules.

Run with:
    python examples/check_thresholds.py
"""

import asyncio
import logging
import sys

from metricrules import (
    CheckerConfig,
    ComparisonOperator,
    Expr,
    InMemoryMetricsStorage,
    Metric,
    Rule,
    RuleChecker,
    encode_violations,
)

RULES = [
    Rule(
        path="servers.web1.cpu.percent",
        exprs=(Expr(ComparisonOperator.LESS_THAN, 90.0),),
        required=True,
    ),
    Rule(
        path="servers.web1.disk.free_ratio",
        exprs=(
            Expr(ComparisonOperator.GREATER_EQUAL, 0.1),
            Expr(ComparisonOperator.LESS_EQUAL, 1.0),
        ),
        required=True,
    ),
    # Only judged when the queue reports at all
    Rule(
        path="servers.web1.queue.depth",
        exprs=(Expr(ComparisonOperator.LESS_EQUAL, 500.0),),
    ),
]


async def main() -> int:
    storage = InMemoryMetricsStorage()
    await storage.write(Metric("servers.web1.cpu.percent", 97.5))
    await storage.write(Metric("servers.web1.cpu.percent", 42.0))
    await storage.write(Metric("servers.web1.queue.depth", 12.0))

    for rule in RULES:
        print(f"rule: {rule}")

    checker = RuleChecker(RULES, storage, CheckerConfig(logger_name="example"))
    violations = await checker.check()
    sys.stdout.write(encode_violations(violations))
    return 1 if violations else 0


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")
    sys.exit(asyncio.run(main()))
