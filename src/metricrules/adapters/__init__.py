"""Adapters connecting the rule matcher to storage and logging."""
