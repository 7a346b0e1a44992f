"""Command-line interface for droidgen."""

from droidgen.cli.app import app

__all__ = ["app"]
