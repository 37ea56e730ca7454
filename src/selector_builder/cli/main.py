"""Selector builder CLI entry point: Click group with subcommands."""

import click

from selector_builder import __version__
from selector_builder.config import BuilderConfig


@click.group()
@click.version_option(version=__version__, prog_name="selector-builder")
@click.option(
    "--log-level",
    default="WARNING",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Logging level",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str) -> None:
    """Selector builder - compose and check CSS selectors."""
    config = BuilderConfig(log_level=log_level)
    config.configure_logging()
    ctx.obj = config


# Import and register subcommands
from selector_builder.cli.build import build  # noqa: E402
from selector_builder.cli.check import check  # noqa: E402

cli.add_command(build)
cli.add_command(check)
