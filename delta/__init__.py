"""Delta - a minimal content-addressed version control engine."""

__version__ = '0.1.0'

from delta.core.repository import Repository
from delta.core.objects import DeltaObject, Blob, Tree, Commit

__all__ = [
    'Repository',
    'DeltaObject',
    'Blob',
    'Tree',
    'Commit',
]
