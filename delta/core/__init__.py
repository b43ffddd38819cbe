"""Core functionality for Delta.

This module contains the storage engine:
- Delta objects (Blob, Tree, Commit)
- Content-addressed object store
- Tree construction
- Index/staging area
- Reference and configuration management

For add, commit and diff, see delta.operations
"""

from delta.core.errors import (
    DeltaError, RepositoryError, CorruptIndexError, CorruptObjectError,
    ObjectNotFoundError, ObjectStoreError, NotTrackedError, RefNotFoundError,
    NothingToCommitError,
)
from delta.core.objects import DeltaObject, Blob, Tree, TreeEntry, Commit
from delta.core.store import ObjectStore
from delta.core.tree import TreeBuilder, BlobRef
from delta.core.index import StagingIndex, IndexEntry
from delta.core.refs import Refs
from delta.core.config import Config, get_config
from delta.core.repository import Repository
from delta.core.hash import hash_object, hash_file

__all__ = [
    'DeltaError',
    'RepositoryError',
    'CorruptIndexError',
    'CorruptObjectError',
    'ObjectNotFoundError',
    'ObjectStoreError',
    'NotTrackedError',
    'RefNotFoundError',
    'NothingToCommitError',
    'DeltaObject',
    'Blob',
    'Tree',
    'TreeEntry',
    'Commit',
    'ObjectStore',
    'TreeBuilder',
    'BlobRef',
    'StagingIndex',
    'IndexEntry',
    'Refs',
    'Config',
    'get_config',
    'Repository',
    'hash_object',
    'hash_file',
]
