"""Command-line interface for tablefit."""
