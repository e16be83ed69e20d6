"""Text encodings for rules and violations."""
