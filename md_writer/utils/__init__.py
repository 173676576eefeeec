"""Utility modules for MD Writer."""
