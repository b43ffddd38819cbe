"""Initialize a new Delta repository."""

import click
from pathlib import Path
from delta.core.errors import RepositoryError
from delta.core.repository import Repository
from delta.cli.output import success, error, info


@click.command('init')
@click.argument('path', default='.')
def init_cmd(path):
    """
    Initialize a new Delta repository.

    Creates a .delta directory with the object store, branch refs,
    HEAD and config.

    Examples:
        delta init                  # Initialize in current directory
        delta init my-project       # Initialize in my-project directory
    """
    repo_path = Path(path).resolve()

    try:
        if not repo_path.exists():
            repo_path.mkdir(parents=True)
            click.echo(info(f"Created directory {repo_path}"))

        repo = Repository(str(repo_path))
        repo.init()
    except RepositoryError as e:
        click.echo(error(str(e)))
        click.echo(info("Use an empty directory or different path"))
        raise click.Abort()
    except PermissionError:
        click.echo(error(f"Permission denied: Cannot create repository at {path}"))
        raise click.Abort()
    except OSError as e:
        click.echo(error(f"Failed to initialize repository: {e}"))
        raise click.Abort()

    click.echo(success(f"Delta repo initialized in: {repo.delta_dir}"))
