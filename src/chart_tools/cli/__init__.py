"""Command-line interface for chart-tools."""
