"""
CLI output helpers.
"""

import click


# Color definitions for consistent styling
COLORS = {
    "error": "red",
    "highlight": "cyan",
}


def echo_error(message: str) -> None:
    """Print error message with red X."""
    click.echo(click.style("✗ ", fg=COLORS["error"]) + message, err=True)


def format_delta_g(value: float, precision: int = 4) -> str:
    """Format a deltaG value in kcal/mol."""
    return f"{value:.{precision}f}"


def echo_table_row(key: str, value: float, precision: int = 4) -> None:
    """Print one token/value row of a deltaG table."""
    click.echo(f"{click.style(key, fg=COLORS['highlight'])}\t{format_delta_g(value, precision)}")
