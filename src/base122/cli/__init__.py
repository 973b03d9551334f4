"""Command-line interface for base122."""
