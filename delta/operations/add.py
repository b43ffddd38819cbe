"""Stage working-copy files into the index."""

import logging
from typing import Dict, Iterable, List, Optional

from delta.core.index import is_storable_path
from delta.core.objects import Blob
from delta.utils.files import iter_files

logger = logging.getLogger(__name__)


def stage_paths(repo, paths: Iterable[str], skipped: Optional[List[str]] = None) -> Dict[str, str]:
    """
    Store files as blobs and merge them into the staging index.

    Directories are expanded recursively; the repository's ``.delta``
    directory is never staged. Files whose path cannot be recorded in the
    index (non-ASCII) are left out and nothing is stored for them.

    Args:
        repo: Repository instance
        paths: Files or directories (absolute or relative to cwd)
        skipped: If given, receives the relative paths that were left out

    Returns:
        Dict of staged path (relative to the work tree) to blob id

    Raises:
        FileNotFoundError: If a path does not exist
        ObjectStoreError: If a blob cannot be written
    """
    staged = {}

    for path in paths:
        for rel_path in iter_files(repo.work_tree, path):
            name = rel_path.as_posix()
            if not is_storable_path(name):
                logger.debug("Skipping %r: index paths must be ASCII", name)
                if skipped is not None:
                    skipped.append(name)
                continue
            blob = Blob.from_file(str(repo.work_tree / rel_path))
            staged[name] = repo.store.store(blob)

    repo.index.add(staged)
    logger.debug("Staged %d file(s)", len(staged))
    return staged
