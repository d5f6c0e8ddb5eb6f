"""Command-line interface for loopcorner.

This module provides the CLI using Typer with rich output for
user-friendly tables of classified corners.
"""

from loopcorner.cli.app import cli, main

__all__ = ["cli", "main"]
