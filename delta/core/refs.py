"""Reference management for Delta."""

import logging
from pathlib import Path
from typing import Optional, List

from .errors import RefNotFoundError

logger = logging.getLogger(__name__)

DEFAULT_BRANCH = 'main'


class Refs:
    """
    Manages HEAD and branch pointer files.

    HEAD holds a plain ref path such as ``refs/heads/main``; each branch file
    under ``refs/heads`` holds the id of its latest commit (empty before the
    first commit).
    """

    def __init__(self, delta_dir):
        """
        Initialize reference manager.

        Args:
            delta_dir: Repository metadata directory (``.delta``)
        """
        self.delta_dir = Path(delta_dir)
        self.heads_dir = self.delta_dir / 'refs' / 'heads'
        self.head_file = self.delta_dir / 'HEAD'

    def retrieve_head(self) -> str:
        """
        Return the ref path HEAD points to.

        Raises:
            FileNotFoundError: If HEAD does not exist
        """
        return self.head_file.read_text().strip()

    def current_branch(self) -> Optional[str]:
        """Branch name HEAD points to, or None if HEAD is not a branch ref."""
        head = self.retrieve_head()
        if head.startswith('refs/heads/'):
            return head[len('refs/heads/'):]
        return None

    def current_commit(self) -> Optional[str]:
        """
        Commit id the current ref points to.

        Returns:
            Commit id, or None before the first commit on this branch
        """
        ref_path = self.delta_dir / self.retrieve_head()
        if not ref_path.is_file():
            return None
        return ref_path.read_text().strip() or None

    def update_ref(self, object_id: str) -> None:
        """Point the ref named by HEAD at ``object_id``."""
        ref_path = self.delta_dir / self.retrieve_head()
        ref_path.parent.mkdir(parents=True, exist_ok=True)
        ref_path.write_text(object_id)
        logger.debug("Updated %s to %s", ref_path.name, object_id[:8])

    def update_head(self, ref_path: str) -> None:
        """
        Point HEAD at an existing ref.

        Args:
            ref_path: Ref path relative to the metadata directory
                (e.g. 'refs/heads/feature')

        Raises:
            RefNotFoundError: If the ref file does not exist
        """
        if not (self.delta_dir / ref_path).is_file():
            raise RefNotFoundError(f"Branch with specified name does not exist: {ref_path}")
        self.head_file.write_text(ref_path)

    def create_branch(self, name: str) -> None:
        """
        Create a branch at the current commit.

        Before the first commit the branch file is created empty.
        """
        branch_path = self.heads_dir / name
        branch_path.parent.mkdir(parents=True, exist_ok=True)
        branch_path.write_text(self.current_commit() or '')
        logger.debug("Created branch %s", name)

    def list_branches(self) -> List[str]:
        """Names of all branches, sorted."""
        if not self.heads_dir.exists():
            return []
        return sorted(
            str(path.relative_to(self.heads_dir))
            for path in self.heads_dir.rglob('*')
            if path.is_file()
        )

    def __repr__(self) -> str:
        return f"Refs(head_file={self.head_file})"
