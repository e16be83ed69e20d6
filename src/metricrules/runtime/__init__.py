"""Runtime services built on the core matcher."""

from metricrules.runtime.checker import CheckerConfig, RuleChecker, ViolationsFound

__all__ = ["CheckerConfig", "RuleChecker", "ViolationsFound"]
