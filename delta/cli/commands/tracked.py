"""Tracked command - list files in the staging index."""

import click
from delta.core.errors import DeltaError
from delta.core.repository import Repository
from delta.cli.output import error, info


@click.command('tracked')
@click.option('--ids', is_flag=True, help='Show staged blob ids and modes')
def tracked_cmd(ids):
    """
    List the files currently tracked by the staging index.

    Examples:
        delta tracked
        delta tracked --ids
    """
    repo = Repository.find_repository()
    if not repo:
        click.echo(error("Not a delta repository"))
        raise click.Abort()

    try:
        tracked = repo.index.fetch_index_data()
    except (DeltaError, OSError) as e:
        click.echo(error(f"Cannot read index: {e}"))
        raise click.Abort()

    if not tracked:
        click.echo(info("No tracked files"))
        return

    for path in sorted(tracked):
        blob_id, mode = tracked[path]
        if ids:
            click.echo(f"{mode} {blob_id} {path}")
        else:
            click.echo(path)
