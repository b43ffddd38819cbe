"""Branch and checkout commands."""

import click
from delta.core.errors import RefNotFoundError
from delta.core.repository import Repository
from delta.cli.output import success, error, info


@click.command('branch')
@click.argument('name', required=False)
def branch_cmd(name):
    """
    List branches, or create one at the current commit.

    Examples:
        delta branch                # List branches
        delta branch feature        # Create branch 'feature'
    """
    repo = Repository.find_repository()
    if not repo:
        click.echo(error("Not a delta repository"))
        raise click.Abort()

    if name is None:
        current = repo.refs.current_branch()
        for branch in repo.refs.list_branches():
            marker = '*' if branch == current else ' '
            click.echo(f"{marker} {branch}")
        return

    if name in repo.refs.list_branches():
        click.echo(error(f"Branch '{name}' already exists"))
        raise click.Abort()

    try:
        repo.refs.create_branch(name)
    except OSError as e:
        click.echo(error(f"Unable to create new branch: {e}"))
        raise click.Abort()

    click.echo(success(f"Created branch '{name}'"))


@click.command('checkout')
@click.argument('name')
def checkout_cmd(name):
    """
    Point HEAD at another branch.

    Only HEAD moves; the working copy and index are left as they are.

    Examples:
        delta checkout feature
    """
    repo = Repository.find_repository()
    if not repo:
        click.echo(error("Not a delta repository"))
        raise click.Abort()

    try:
        repo.refs.update_head(f'refs/heads/{name}')
    except RefNotFoundError:
        click.echo(error("Branch with specified name does not exist!"))
        raise click.Abort()

    click.echo(success(f"Switched to branch '{name}'"))
    commit = repo.refs.current_commit()
    if commit:
        click.echo(info(f"HEAD is now at {commit[:7]}"))
