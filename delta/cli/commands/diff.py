"""Diff command - compare a working-copy file with its staged version."""

import click
from pathlib import Path
from delta.core.errors import DeltaError, NotTrackedError
from delta.core.repository import Repository
from delta.operations.diff import DiffEngine, format_diff, has_changes
from delta.cli.output import error, info


@click.command('diff')
@click.argument('path')
@click.option('--no-color', is_flag=True, help='Disable colored output')
def diff_cmd(path, no_color):
    """
    Show changes between a staged file and the working copy.

    Unchanged lines are prefixed with two spaces, added lines with
    '+ ' and removed lines with '- '.

    Examples:
        delta diff README.md
        delta diff src/main.py --no-color
    """
    repo = Repository.find_repository()
    if not repo:
        click.echo(error("Not a delta repository"))
        raise click.Abort()

    try:
        lines = DiffEngine(repo).diff_path(str(Path(path).absolute()))
    except NotTrackedError as e:
        click.echo(error(str(e)))
        raise click.Abort()
    except (DeltaError, OSError, ValueError) as e:
        click.echo(error(f"Diff failed: {e}"))
        raise click.Abort()

    if not has_changes(lines):
        click.echo(info("No changes to display"))
        return

    click.echo(format_diff(lines, color=not no_color))
