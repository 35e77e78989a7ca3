"""Command-line interface for controlshaper."""
