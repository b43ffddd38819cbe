"""Working-copy filesystem helpers."""

import os
import tempfile
from pathlib import Path
from typing import Iterator, Union


def atomic_write(path: Union[str, Path], data: bytes) -> None:
    """
    Replace the contents of a file in one step.

    Data goes to a temporary file in the same directory, which is then
    renamed over ``path``. Readers see either the old or the new file.

    Args:
        path: Destination file
        data: Complete new contents
    """
    path = Path(path)
    fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f'.{path.name}.')
    try:
        with os.fdopen(fd, 'wb') as f:
            f.write(data)
        os.replace(tmp_name, path)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise


def is_executable(path: Union[str, Path]) -> bool:
    """True if the file exists and the current user may execute it."""
    return os.access(path, os.X_OK)


def iter_files(root: Union[str, Path], start: Union[str, Path], skip_dir: str = '.delta') -> Iterator[Path]:
    """
    Yield regular files under ``start``, relative to ``root``.

    ``start`` may be a single file or a directory. Anything inside a
    directory named ``skip_dir`` is left out.

    Args:
        root: Repository work tree
        start: File or directory to expand (absolute or relative to cwd)
        skip_dir: Name of the repository metadata directory

    Returns:
        Iterator of paths relative to ``root``, in sorted order

    Raises:
        FileNotFoundError: If ``start`` does not exist
        ValueError: If ``start`` is outside ``root``
    """
    root = Path(root).resolve()
    start = Path(start).absolute()

    if not start.exists():
        raise FileNotFoundError(f"File not found: {start}")

    start = start.resolve()
    rel_start = start.relative_to(root)
    if skip_dir in rel_start.parts:
        return

    if start.is_file():
        yield rel_start
        return

    found = []
    for dirpath, dirnames, filenames in os.walk(start):
        dirnames[:] = [d for d in dirnames if d != skip_dir]
        for name in filenames:
            file_path = Path(dirpath) / name
            if file_path.is_file():
                found.append(file_path.relative_to(root))

    # os.walk lists a directory's files before its subdirectories
    yield from sorted(found, key=lambda p: p.as_posix())
