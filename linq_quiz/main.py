"""Main entry point for the LINQ quiz functions"""
import logging
import sys

import click

from linq_quiz.models.config import Config
from linq_quiz.processing.errors import LinqQuizError
from linq_quiz.processing.generators import get_even_numbers, get_squares
from linq_quiz.processing.letters import get_letter_statistic
from linq_quiz.utils.output import render_letter_occurrences, render_numbers

logger = logging.getLogger(__name__)


def configure_logging(debug: bool = False):
    """Configure logging level based on debug flag"""
    level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        force=True  # Override any existing configuration
    )


def create_application_config(output_format: str) -> Config:
    """
    Create and validate application configuration from command-line arguments.

    Args:
        output_format: 'json' or 'csv'

    Returns:
        Validated Config object
    """
    return Config(output_format=output_format)


@click.group()
@click.option('--format', 'output_format', type=click.Choice(['json', 'csv'], case_sensitive=False),
              default='json', show_default=True, help='Output format')
@click.option('-d', '--debug', is_flag=True,
              help='Enable debug logging for detailed output')
@click.pass_context
def main(ctx: click.Context, output_format: str, debug: bool):
    """
    LINQ quiz - small sequence and statistics transforms.
    """
    configure_logging(debug=debug)
    ctx.obj = create_application_config(output_format)


def _run(compute):
    """Run a computation, turning library errors into exit status 1"""
    try:
        return compute()
    except LinqQuizError as e:
        logger.error(f"Error during processing: {e}")
        sys.exit(1)


@main.command()
@click.argument('limit', type=int)
@click.pass_obj
def evens(config: Config, limit: int):
    """Print all even numbers below LIMIT."""
    values = _run(lambda: get_even_numbers(limit))
    click.echo(render_numbers(values, config.output_format))


@main.command()
@click.argument('limit', type=int)
@click.pass_obj
def squares(config: Config, limit: int):
    """Print squares of multiples of 7 below LIMIT, descending."""
    values = _run(lambda: get_squares(limit))
    click.echo(render_numbers(values, config.output_format))


@main.command()
@click.argument('text')
@click.option('--sort', 'sort_letters', is_flag=True,
              help='Sort letters alphabetically instead of by first occurrence')
@click.pass_obj
def letters(config: Config, text: str, sort_letters: bool):
    """Print the number of occurrences of each letter in TEXT."""
    occurrences = _run(lambda: get_letter_statistic(text))
    if sort_letters:
        occurrences = sorted(occurrences, key=lambda o: o.letter)
    click.echo(render_letter_occurrences(occurrences, config.output_format))


if __name__ == '__main__':
    main()
