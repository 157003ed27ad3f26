"""Command-line interface for portbin."""
