"""CLI commands for MD Writer."""
