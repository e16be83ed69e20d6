"""Checker service that runs rules against a metric source."""

import asyncio
import logging
from collections.abc import Iterable
from dataclasses import dataclass

from metricrules.adapters.logging import log_violations
from metricrules.core.matcher import match
from metricrules.core.models import InvalidData, Metric, Rule
from metricrules.core.ports import MetricsSourcePort


class ViolationsFound(Exception):
    """Raised by a fail-fast check when any violation is found."""

    def __init__(self, violations: list[InvalidData]) -> None:
        super().__init__(f"{len(violations)} rule violation(s) found")
        self.violations = violations


@dataclass(frozen=True)
class CheckerConfig:
    """Configuration options for RuleChecker.

    Attributes:
        logger_name: Name of the logger used for reporting.
        log_violations: Log each violation after a check.
        violation_level: Log level of violation records.
        fail_fast: Raise ViolationsFound instead of returning violations.
    """

    logger_name: str = "metricrules"
    log_violations: bool = True
    violation_level: int = logging.WARNING
    fail_fast: bool = False


class RuleChecker:
    """Runs a fixed set of rules against the metrics of a source.

    Example:
        ```python
        storage = InMemoryMetricsStorage()
        await storage.write(Metric("custom.metric1.value", 3.0))
        checker = RuleChecker(rules, storage)
        violations = await checker.check()
        ```
    """

    def __init__(
        self,
        rules: Iterable[Rule],
        source: MetricsSourcePort,
        config: CheckerConfig | None = None,
    ) -> None:
        """Initialize the checker.

        Args:
            rules: Rules to evaluate on every check.
            source: Adapter implementing MetricsSourcePort.
            config: Checker options (default: CheckerConfig()).

        Raises:
            TypeError: If an entry of ``rules`` is not a Rule.
        """
        self.rules = list(rules)
        for rule in self.rules:
            if not isinstance(rule, Rule):
                raise TypeError(f"expected Rule, got {type(rule).__name__}")
        self.source = source
        self.config = config or CheckerConfig()
        self._logger = logging.getLogger(self.config.logger_name)

    async def _collect(self) -> list[Metric]:
        metrics: list[Metric] = []
        async for metric in self.source.scrape():
            if not isinstance(metric, Metric):
                raise TypeError(f"expected Metric, got {type(metric).__name__}")
            metrics.append(metric)
        return metrics

    async def check(self) -> list[InvalidData]:
        """Scrape the source once and match the rules against it.

        Returns:
            The violations found.

        Raises:
            ViolationsFound: If ``fail_fast`` is configured and any
                violation is found.
            TypeError: If the source yields something other than a Metric.
        """
        metrics = await self._collect()
        violations = match(self.rules, metrics)
        self._logger.info(
            "Checked %d rules against %d metrics: %d violations",
            len(self.rules),
            len(metrics),
            len(violations),
        )
        if self.config.log_violations:
            log_violations(violations, self._logger, self.config.violation_level)
        if violations and self.config.fail_fast:
            raise ViolationsFound(violations)
        return violations

    def check_sync(self) -> list[InvalidData]:
        """Run check() from synchronous code."""
        return asyncio.run(self.check())
