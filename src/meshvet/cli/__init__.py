"""Command line interface."""

from meshvet.cli.main import cli

__all__ = ["cli"]
