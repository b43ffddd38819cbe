"""Filesystem helpers shared by the core and the CLI."""

from delta.utils.files import atomic_write, is_executable, iter_files

__all__ = ['atomic_write', 'is_executable', 'iter_files']
