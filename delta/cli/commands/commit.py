"""Commit command - create a commit from staged changes."""

import click
from delta.core.errors import DeltaError, NothingToCommitError
from delta.core.repository import Repository
from delta.operations.commit import create_commit
from delta.cli.output import success, error, info


@click.command('commit')
@click.argument('words', nargs=-1)
@click.option('-m', '--message', help='Commit message')
@click.option('--author', help='Author name and email (format: "Name <email>")')
def commit_cmd(words, message, author):
    """
    Record the staged snapshot in the repository.

    The message can be passed with -m or as the remaining words.
    The author comes from DELTA_AUTHOR_NAME / DELTA_AUTHOR_EMAIL, then the
    [user] section of the repository or global config.

    Examples:
        delta commit Initial commit
        delta commit -m "Add feature" --author "Jane <jane@example.com>"
    """
    repo = Repository.find_repository()
    if not repo:
        click.echo(error("Not a delta repository"))
        raise click.Abort()

    if message is None:
        message = ' '.join(words)
    if not message:
        click.echo(error("Commit message required"))
        raise click.Abort()

    try:
        commit_hash = create_commit(repo, message, author=author)
    except NothingToCommitError as e:
        click.echo(error(str(e)))
        click.echo(info("Use 'delta add <file>' to stage changes"))
        raise click.Abort()
    except (DeltaError, OSError) as e:
        click.echo(error(f"Failed to create commit: {e}"))
        raise click.Abort()

    commit = repo.store.read_object(commit_hash)

    click.echo(success(f"Created commit {commit_hash[:7]}"))
    click.echo(info(f"Author: {commit.author}"))
    if commit.is_root:
        click.echo(info("(root commit)"))
    else:
        click.echo(info(f"Parent: {commit.parent[:7]}"))
    click.echo(info(f"Tree: {commit.tree[:7]}"))
