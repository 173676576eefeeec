"""Command line interface for MD Writer."""
