"""Command-line interface for Hospital Records."""
