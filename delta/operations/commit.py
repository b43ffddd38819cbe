"""Create commits from the staging index."""

import logging
from datetime import datetime
from typing import Optional

from delta.core.errors import NothingToCommitError
from delta.core.objects import Commit
from delta.core.tree import TreeBuilder

logger = logging.getLogger(__name__)


def build_tree_from_index(repo) -> str:
    """
    Store the tree hierarchy described by the staging index.

    Returns:
        str: Root tree id

    Raises:
        NothingToCommitError: If nothing is staged
    """
    index_data = repo.index.fetch_index_data()
    if not index_data:
        raise NothingToCommitError("Nothing to commit (staging area is empty)")

    builder = TreeBuilder.from_index_data(index_data)
    return builder.generate(repo.store)


def create_commit(
    repo,
    message: str,
    author: Optional[str] = None,
    when: Optional[datetime] = None
) -> str:
    """
    Record the staged snapshot as a new commit on the current branch.

    The parent is whatever the current ref points to; without one the
    commit is a root commit.

    Args:
        repo: Repository instance
        message: Commit message
        author: "Name <email>", defaults to the configured identity
        when: Commit time, defaults to now

    Returns:
        str: Commit id
    """
    tree_hash = build_tree_from_index(repo)
    parent = repo.refs.current_commit()

    if author is None:
        author = repo.config.author_line()

    commit = Commit.create(
        tree_hash=tree_hash,
        parent_hash=parent,
        author=author,
        message=message,
        when=when
    )
    commit_hash = repo.store.store(commit)
    repo.refs.update_ref(commit_hash)

    logger.debug("Created commit %s (tree %s, parent %s)", commit_hash[:8], tree_hash[:8], parent)
    return commit_hash
