"""
Command-line interface for the goniometry library.
Provides tools for converting, summing and comparing angles.
"""

import click
import logging
from typing import Optional

from angle import Angle
from angle_builders import AngleOverflowError
from angle_config import Config, ConfigurationError, get_config
from angle_logging import setup_logging
from angle_parser import AngleParseError
from angle_sum import absolute_sum, relative_sum

logger = logging.getLogger(__name__)

LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR']

# Errors reported to the user instead of a traceback
ANGLE_ERRORS = (AngleOverflowError, AngleParseError, ValueError)


def parse_angle(value: str, radian: bool = False) -> Angle:
    """
    Build an angle from a command-line value.

    Numbers are read as decimal degrees (or radians), anything else as
    an angle string.

    Args:
        value: Command-line value, e.g. '12.5' or '12° 30\\''
        radian: Read numbers as radians

    Returns:
        Angle instance
    """
    try:
        number = float(value)
    except ValueError:
        return Angle.from_string(value)

    if radian:
        return Angle.from_radian(number)
    return Angle.from_decimal(number)


def _fail(ctx: click.Context, error: Exception) -> None:
    """Report an error and exit with status 1."""
    logger.debug(f"Command failed: {error!r}")
    click.echo(f"Error: {error}", err=True)
    ctx.exit(1)


@click.group()
@click.option('--log-level', default=None, type=click.Choice(LOG_LEVELS),
              help='Logging level (overrides the config file)')
@click.option('--json-logs', is_flag=True,
              help='Use JSON format for logs')
@click.option('--config', 'config_path', default='goniometry.yaml',
              help='YAML config file')
@click.pass_context
def cli(ctx: click.Context, log_level: Optional[str], json_logs: bool, config_path: str):
    """Goniometry: convert, sum and compare angles."""
    Config.reset()
    try:
        config = get_config(config_path)
    except ConfigurationError as e:
        _fail(ctx, e)

    if ctx.invoked_subcommand != 'validate-config':
        try:
            config.validate()
        except ConfigurationError as e:
            _fail(ctx, e)

    level = log_level or config.get('logging.level', 'WARNING')
    if level not in LOG_LEVELS + ['CRITICAL']:
        level = 'WARNING'

    context_logger = setup_logging(
        log_level=level,
        json_format=json_logs or config.get('logging.json', False) is True
    )
    context_logger.set_context(command=ctx.invoked_subcommand)
    context_logger.debug("Starting command")

    ctx.obj = {'config': config}


@cli.command()
@click.argument('value')
@click.option('--radian', is_flag=True, help='Read a number as radians')
@click.option('--precision', type=int, default=None,
              help='Decimal digits of the decimal and radian output')
@click.pass_context
def convert(ctx: click.Context, value: str, radian: bool, precision: Optional[int]):
    """Show an angle in sexagesimal, decimal and radian form."""
    config = ctx.obj['config']

    try:
        angle = parse_angle(value, radian=radian)
    except ANGLE_ERRORS as e:
        _fail(ctx, e)

    decimal_precision = precision if precision is not None else config.get('output.decimal_precision')
    radian_precision = precision if precision is not None else config.get('output.radian_precision')

    click.echo(f"Sexagesimal: {angle}")
    click.echo(f"Decimal: {angle.to_decimal(decimal_precision)}")
    click.echo(f"Radian: {angle.to_radian(radian_precision)}")
    click.echo(f"Direction: {'clockwise' if angle.is_clockwise() else 'counterclockwise'}")


@cli.command(name='sum')
@click.argument('first')
@click.argument('second')
@click.option('--absolute', is_flag=True,
              help='Add magnitudes regardless of direction')
@click.pass_context
def sum_command(ctx: click.Context, first: str, second: str, absolute: bool):
    """Add two angles."""
    try:
        first_angle = parse_angle(first)
        second_angle = parse_angle(second)
    except ANGLE_ERRORS as e:
        _fail(ctx, e)

    if absolute:
        result = absolute_sum(first_angle, second_angle)
    else:
        result = relative_sum(first_angle, second_angle)

    decimal_precision = ctx.obj['config'].get('output.decimal_precision')
    click.echo(f"{result} ({result.to_decimal(decimal_precision)})")


@cli.command()
@click.argument('first')
@click.argument('second')
@click.option('--precision', type=int, default=None,
              help='Decimal digits used for the comparison')
@click.pass_context
def compare(ctx: click.Context, first: str, second: str, precision: Optional[int]):
    """Compare the magnitudes of two angles."""
    try:
        first_angle = parse_angle(first)
        second_angle = parse_angle(second)
    except ANGLE_ERRORS as e:
        _fail(ctx, e)

    if first_angle.is_equal(second_angle, precision):
        relation = "equal to"
    elif first_angle.is_greater_than(second_angle, precision):
        relation = "greater than"
    else:
        relation = "less than"

    click.echo(f"{first_angle} is {relation} {second_angle}")


@cli.command()
@click.pass_context
def validate_config(ctx: click.Context):
    """Validate configuration file."""
    config = ctx.obj['config']

    try:
        config.validate()
    except ConfigurationError as e:
        click.echo(f"✗ Configuration invalid: {e}", err=True)
        ctx.exit(1)

    click.echo("✓ Configuration valid")

    click.echo("\nOutput:")
    click.echo(f"  Decimal precision: {config.get('output.decimal_precision', 'suggested')}")
    click.echo(f"  Radian precision: {config.get('output.radian_precision', 'unrounded')}")

    click.echo("\nLogging:")
    click.echo(f"  Level: {config.get('logging.level')}")
    click.echo(f"  JSON: {config.get('logging.json')}")


def main():
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
