"""Add command - stage files for commit."""

import click
from delta.core.errors import DeltaError
from delta.core.repository import Repository
from delta.operations.add import stage_paths
from delta.cli.output import success, error, info, warning


@click.command('add')
@click.argument('paths', nargs=-1, required=True)
def add_cmd(paths):
    """
    Add file contents to the staging area.

    Each file is stored as a blob and recorded in the index. Directories
    are added recursively. Modified files must be added again to stage
    the new changes.

    Examples:
        delta add file.txt
        delta add src
        delta add .
    """
    repo = Repository.find_repository()
    if not repo:
        click.echo(error("Not a delta repository"))
        raise click.Abort()

    skipped = []
    try:
        staged = stage_paths(repo, paths, skipped=skipped)
    except FileNotFoundError as e:
        click.echo(error(str(e)))
        raise click.Abort()
    except ValueError as e:
        click.echo(error(f"Cannot stage: {e}"))
        raise click.Abort()
    except (DeltaError, OSError) as e:
        click.echo(error(f"Failed to add files: {e}"))
        raise click.Abort()

    for path in skipped:
        click.echo(warning(f"Skipped {path!r}: only ASCII paths can be staged"))

    if not staged:
        click.echo(error("No files matched"))
        return

    click.echo(success(f"Added {len(staged)} file(s) to staging area"))
    for path, blob_id in sorted(staged.items()):
        click.echo(info(f"  {path}: {blob_id}"))
