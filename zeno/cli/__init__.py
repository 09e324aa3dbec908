"""Command-line interface for zeno."""
