"""Core domain: models, operators and the rule matcher."""
