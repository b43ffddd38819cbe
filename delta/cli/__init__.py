"""Command-line interface for Delta."""
