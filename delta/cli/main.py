"""Main CLI entry point for Delta."""

import logging

import click
from colorama import init

from delta import __version__
from delta.cli.output import BANNER
from delta.cli.commands import (init_cmd, add_cmd, commit_cmd, branch_cmd,
                                checkout_cmd, diff_cmd, tracked_cmd)

# Initialize colorama for cross-platform colored output
init(autoreset=True)


class DeltaGroup(click.Group):
    """Custom Group class to display banner before help."""

    def format_help(self, ctx, formatter):
        """Override to add banner before help text."""
        click.echo(BANNER)
        super().format_help(ctx, formatter)


@click.group(cls=DeltaGroup)
@click.version_option(version=__version__)
@click.option('-v', '--verbose', is_flag=True, help='Log storage operations')
def cli(verbose):
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format='%(levelname)s %(name)s: %(message)s')


cli.add_command(init_cmd)
cli.add_command(add_cmd)
cli.add_command(commit_cmd)
cli.add_command(branch_cmd)
cli.add_command(checkout_cmd)
cli.add_command(diff_cmd)
cli.add_command(tracked_cmd)


def main():
    """Main entry point."""
    cli()


if __name__ == '__main__':
    main()
