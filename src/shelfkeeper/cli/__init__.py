# ABOUTME: CLI package for Shelfkeeper, built on Click.
# ABOUTME: Defines the root command group, logging setup, and registers subcommands.

import logging

import click

from shelfkeeper.cli.commands import book_cmd, loan_cmd, publishers_cmd


@click.group()
@click.version_option(package_name="shelfkeeper")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Show debug logging.")
def cli(verbose: bool) -> None:
    """Shelfkeeper - track your books and who has borrowed them."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


cli.add_command(book_cmd.book)
cli.add_command(loan_cmd.loan)
cli.add_command(publishers_cmd.publishers)
