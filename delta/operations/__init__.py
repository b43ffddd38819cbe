"""High-level Delta operations.

- Staging files (add)
- Creating commits from the staging index
- Line diffs between the working copy and the index
"""

from delta.operations.add import stage_paths
from delta.operations.commit import create_commit
from delta.operations.diff import DiffEngine, DiffLine, diff_lines, render_diff, format_diff

__all__ = [
    'stage_paths',
    'create_commit',
    'DiffEngine', 'DiffLine', 'diff_lines', 'render_diff', 'format_diff',
]
