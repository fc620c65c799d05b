"""Command-line interface for tabla."""
