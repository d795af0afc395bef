"""Command line interface for env-utils."""
