"""Repository management for Delta."""

from pathlib import Path
from typing import Optional

from .config import Config
from .errors import RepositoryError
from .index import StagingIndex
from .refs import Refs, DEFAULT_BRANCH
from .store import ObjectStore


class Repository:
    """
    Represents a Delta repository.

    Holds the paths of one ``.delta`` directory and hands out the object
    store, staging index and refs bound to it. Nothing is global, so several
    repositories can be used from the same process.
    """

    def __init__(self, path: str = '.'):
        """
        Initialize repository.

        Args:
            path: Path to repository root (defaults to current directory)
        """
        self.work_tree = Path(path).resolve()
        self.delta_dir = self.work_tree / '.delta'
        self.objects_dir = self.delta_dir / 'objects'
        self.refs_dir = self.delta_dir / 'refs'
        self.heads_dir = self.refs_dir / 'heads'
        self.head_file = self.delta_dir / 'HEAD'
        self.index_file = self.delta_dir / 'index'
        self.config_file = self.delta_dir / 'config'

        self.store = ObjectStore(self.objects_dir)
        self.refs = Refs(self.delta_dir)

    @property
    def index(self) -> StagingIndex:
        """A fresh, unloaded StagingIndex for this repository."""
        return StagingIndex(self.index_file, self.work_tree)

    @property
    def config(self) -> Config:
        """Config bound to this repository's config file."""
        return Config(self.config_file)

    def init(self) -> 'Repository':
        """
        Initialize a new repository.

        Creates the .delta directory structure:
        .delta/
        ├── objects/       # Object database
        ├── refs/heads/    # Branch references
        ├── HEAD           # Current branch ref path
        └── config         # Repository configuration

        Returns:
            Repository: self for method chaining

        Raises:
            RepositoryError: If repository already exists
        """
        if self.delta_dir.exists():
            raise RepositoryError(f"Repository already exists at {self.delta_dir}")

        self.objects_dir.mkdir(parents=True)
        self.heads_dir.mkdir(parents=True)

        self.head_file.write_text(f'refs/heads/{DEFAULT_BRANCH}')
        self.config_file.write_text('[core]\n\trepositoryformatversion = 0\n')

        return self

    @classmethod
    def find_repository(cls, path: str = '.') -> Optional['Repository']:
        """
        Find repository by searching up the directory tree.

        Args:
            path: Starting path for search

        Returns:
            Repository if found, None otherwise
        """
        current = Path(path).resolve()

        while True:
            if (current / '.delta').is_dir():
                return cls(str(current))

            if current == current.parent:
                return None

            current = current.parent

    def relative_path(self, path) -> str:
        """Path relative to the work tree, with forward slashes."""
        path = Path(path)
        if path.is_absolute():
            path = path.resolve().relative_to(self.work_tree)
        return path.as_posix()

    def __repr__(self) -> str:
        return f"Repository(path={self.work_tree})"
