"""
Command-line interface for deltag.
"""

from deltag.cli.main import cli

__all__ = ["cli"]
