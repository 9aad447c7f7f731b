"""Command-line interface for hostenv."""

from hostenv.cli.app import entrypoint, main

__all__ = ["entrypoint", "main"]
