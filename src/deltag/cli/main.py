"""
Main CLI entry point for deltag.

A thin Click wrapper around DeltaG: one sequence per invocation, conditions
taken from command-line options.
"""

import logging

import click

from deltag import __version__
from deltag.calculator import DeltaG
from deltag.core.errors import DeltaGError
from deltag.thermo.params import DINUCLEOTIDES, SPECIAL_KEYS
from deltag.cli.utils import echo_error, echo_table_row, format_delta_g


CONTEXT_SETTINGS = dict(
    help_option_names=["-h", "--help"],
    max_content_width=120,
)

temperature_option = click.option(
    "-t", "--temperature",
    type=float,
    default=37.0,
    show_default=True,
    help="Temperature in °C.",
)

salt_option = click.option(
    "-s", "--salt-conc",
    type=float,
    default=1.0,
    show_default=True,
    help="Monovalent cation [Na+] concentration in mol/L (calibrated for 0.05-1.1 M).",
)

precision_option = click.option(
    "-p", "--precision",
    type=click.IntRange(0, 12),
    default=4,
    show_default=True,
    help="Decimal places in printed values.",
)


def _build_calculator(temperature: float, salt_conc: float) -> DeltaG:
    try:
        return DeltaG(temperature=temperature, salt_conc=salt_conc)
    except DeltaGError as e:
        echo_error(str(e))
        raise SystemExit(1)


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, "-V", "--version", prog_name="deltag")
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Enable verbose output with detailed logging.",
)
@click.option(
    "--quiet", "-q",
    is_flag=True,
    help="Suppress all output except errors.",
)
@click.pass_context
def cli(ctx: click.Context, verbose: bool, quiet: bool) -> None:
    """
    deltag: nearest-neighbor deltaG of DNA sequences.

    \b
    Examples:
      deltag calc TAACAAGCAATGAGATAGAGAAAGAAATATATCCA
      deltag calc -t 30 -s 0.1 GCGCAATTGCGC
      deltag table -t 25
    """
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet

    if verbose and not quiet:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        )
    elif quiet:
        logging.basicConfig(level=logging.ERROR)


@cli.command()
@click.argument("sequence")
@temperature_option
@salt_option
@precision_option
def calc(sequence: str, temperature: float, salt_conc: float, precision: int) -> None:
    """
    Calculate deltaG (kcal/mol) of SEQUENCE binding its complement.

    SEQUENCE is read 5'->3' and may only contain A, C, G and T (any case).
    """
    calculator = _build_calculator(temperature, salt_conc)

    result = calculator.polymer_delta_g(sequence)
    if result.is_err():
        echo_error(f"Calculation failed: {result.unwrap_err()}")
        raise SystemExit(1)

    click.echo(format_delta_g(result.unwrap(), precision))


@cli.command()
@temperature_option
@salt_option
@precision_option
def table(temperature: float, salt_conc: float, precision: int) -> None:
    """
    Print the nearest-neighbor deltaG table (kcal/mol) for the given conditions.
    """
    calculator = _build_calculator(temperature, salt_conc)
    delta_g = calculator.delta_g_table

    for key in DINUCLEOTIDES + SPECIAL_KEYS:
        echo_table_row(key, delta_g[key], precision)


if __name__ == "__main__":
    cli()
