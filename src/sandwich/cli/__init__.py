"""Command-line interface for sandwich."""
