"""Line diff between the staged and working-copy versions of a file."""

from collections import deque
from typing import List, NamedTuple, Sequence

from colorama import Fore, Style

from delta.core.errors import NotTrackedError

UNCHANGED = ' '
ADDED = '+'
REMOVED = '-'


class DiffLine(NamedTuple):
    """One line of an edit script: a tag (' ', '+', '-') and the line text."""
    tag: str
    text: str

    def render(self) -> str:
        return f"{self.tag} {self.text}"


def _lcs_table(current: Sequence[str], staged: Sequence[str]) -> List[List[int]]:
    """
    Longest-common-subsequence lengths of every pair of suffixes.

    ``table[i][j]`` is the LCS length of ``current[i:]`` and ``staged[j:]``.
    """
    n, m = len(current), len(staged)
    table = [[0] * (m + 1) for _ in range(n + 1)]

    for j in range(m - 1, -1, -1):
        for i in range(n - 1, -1, -1):
            if current[i] == staged[j]:
                table[i][j] = 1 + table[i + 1][j + 1]
            else:
                table[i][j] = max(table[i + 1][j], table[i][j + 1])

    return table


def diff_lines(current: Sequence[str], staged: Sequence[str]) -> List[DiffLine]:
    """
    Compute an edit script turning ``staged`` into ``current``.

    The script is rebuilt from the last line of both sides backwards. When
    the lines differ, the current line is reported as added if the cell above
    scores at least as high as the cell to the left, otherwise the staged
    line is reported as removed. At the first current line a mismatch is a
    removal; at the first staged line it is an addition.

    Args:
        current: Lines of the working copy
        staged: Lines of the staged blob

    Returns:
        List of DiffLine in top-to-bottom order. Taking the unchanged and
        added lines gives ``current``; unchanged and removed gives ``staged``.
    """
    table = _lcs_table(current, staged)
    script = deque()
    i = len(current) - 1
    j = len(staged) - 1

    while not (i < 0 and j < 0):
        if i < 0:
            script.appendleft(DiffLine(REMOVED, staged[j]))
            j -= 1
        elif j < 0:
            script.appendleft(DiffLine(ADDED, current[i]))
            i -= 1
        elif current[i] == staged[j]:
            script.appendleft(DiffLine(UNCHANGED, current[i]))
            i -= 1
            j -= 1
        elif i == 0:
            script.appendleft(DiffLine(REMOVED, staged[j]))
            j -= 1
        elif j == 0:
            script.appendleft(DiffLine(ADDED, current[i]))
            i -= 1
        elif table[i - 1][j] >= table[i][j - 1]:
            script.appendleft(DiffLine(ADDED, current[i]))
            i -= 1
        else:
            script.appendleft(DiffLine(REMOVED, staged[j]))
            j -= 1

    return list(script)


def split_lines(data: bytes) -> List[str]:
    """
    Split file content into lines.

    Trailing empty lines are dropped, so ``b"a\\nb\\n"`` gives ``['a', 'b']``.
    """
    lines = data.decode('utf-8', errors='replace').split('\n')
    while lines and lines[-1] == '':
        lines.pop()
    return lines


def render_diff(lines: Sequence[DiffLine]) -> str:
    """Plain-text rendering, one prefixed line per entry."""
    return '\n'.join(line.render() for line in lines)


def format_diff(lines: Sequence[DiffLine], color: bool = True) -> str:
    """
    Render a diff for the terminal.

    Args:
        lines: Edit script from ``diff_lines``
        color: Whether to color added/removed lines

    Returns:
        Formatted diff string
    """
    if not color:
        return render_diff(lines)

    output = []
    for line in lines:
        if line.tag == ADDED:
            output.append(f"{Fore.GREEN}{line.render()}{Style.RESET_ALL}")
        elif line.tag == REMOVED:
            output.append(f"{Fore.RED}{line.render()}{Style.RESET_ALL}")
        else:
            output.append(line.render())
    return '\n'.join(output)


def has_changes(lines: Sequence[DiffLine]) -> bool:
    """True if any line was added or removed."""
    return any(line.tag != UNCHANGED for line in lines)


class DiffEngine:
    """
    Compares working-copy files with their staged versions.
    """

    def __init__(self, repo):
        """
        Initialize diff engine.

        Args:
            repo: Repository instance
        """
        self.repo = repo

    def staged_content(self, path: str) -> bytes:
        """
        Content of the blob staged for ``path``.

        Raises:
            NotTrackedError: If the path is not in the staging index
        """
        rel_path = self.repo.relative_path(path)
        tracked = self.repo.index.fetch_index_data()

        if rel_path not in tracked:
            raise NotTrackedError(f"Path is not tracked: {rel_path}")

        blob_id, _ = tracked[rel_path]
        _, data = self.repo.store.read(blob_id)
        return data

    def diff_path(self, path: str) -> List[DiffLine]:
        """
        Diff the working copy of ``path`` against its staged version.

        Args:
            path: File path (absolute, or relative to the work tree)

        Returns:
            Edit script from the staged lines to the working-copy lines
        """
        staged = split_lines(self.staged_content(path))
        working_path = self.repo.work_tree / self.repo.relative_path(path)
        current = split_lines(working_path.read_bytes())
        return diff_lines(current, staged)
