"""Command-line interface for ansi-spans."""

from ansi_spans.cli.app import create_app
from ansi_spans.cli.main import main

__all__ = ["create_app", "main"]
