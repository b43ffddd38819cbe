"""Tests for working-copy file helpers."""

import os
from pathlib import Path

import pytest

from delta.utils.files import atomic_write, is_executable, iter_files


def test_atomic_write_creates_file(tmp_path):
    """Test writing a new file."""
    target = tmp_path / 'out.bin'
    atomic_write(target, b'data')
    assert target.read_bytes() == b'data'


def test_atomic_write_replaces_contents(tmp_path):
    """Test the old contents are fully replaced."""
    target = tmp_path / 'out.bin'
    target.write_bytes(b'a much longer original')
    atomic_write(target, b'short')

    assert target.read_bytes() == b'short'
    assert os.listdir(tmp_path) == ['out.bin']


def test_atomic_write_failure_keeps_original(tmp_path, monkeypatch):
    """Test a failed rename leaves the old file and no temp file."""
    target = tmp_path / 'out.bin'
    target.write_bytes(b'original')

    def fail_replace(src, dst):
        raise OSError('disk full')

    monkeypatch.setattr(os, 'replace', fail_replace)
    with pytest.raises(OSError):
        atomic_write(target, b'new')

    assert target.read_bytes() == b'original'
    assert os.listdir(tmp_path) == ['out.bin']


def test_is_executable(tmp_path):
    """Test the executable bit is detected."""
    script = tmp_path / 'run.sh'
    script.write_text('#!/bin/sh\n')
    script.chmod(0o755)
    plain = tmp_path / 'plain.txt'
    plain.write_text('x')
    plain.chmod(0o644)

    assert is_executable(script)
    assert not is_executable(plain)
    assert not is_executable(tmp_path / 'missing')


def test_iter_files_directory(repo, working_files):
    """Test a directory expands to sorted relative file paths."""
    files = list(iter_files(repo.work_tree, repo.work_tree))
    assert files == [Path('subdir/test3.txt'), Path('test1.txt'), Path('test2.txt')]


def test_iter_files_single_file(repo, working_files):
    """Test a file yields itself."""
    files = list(iter_files(repo.work_tree, working_files['file3']))
    assert files == [Path('subdir/test3.txt')]


def test_iter_files_skips_metadata_dir(repo, working_files):
    """Test the .delta directory is never listed."""
    files = list(iter_files(repo.work_tree, repo.work_tree))
    assert all('.delta' not in path.parts for path in files)
    assert list(iter_files(repo.work_tree, repo.head_file)) == []


def test_iter_files_missing(repo):
    """Test a missing path raises FileNotFoundError."""
    with pytest.raises(FileNotFoundError):
        list(iter_files(repo.work_tree, repo.work_tree / 'nope.txt'))


def test_iter_files_outside_root(repo, tmp_path):
    """Test paths outside the work tree are rejected."""
    outside = tmp_path / 'outside.txt'
    outside.write_text('x')

    with pytest.raises(ValueError):
        list(iter_files(repo.work_tree, outside))


def test_iter_files_orders_by_full_path(repo, make_file):
    """Test nested files are interleaved with siblings by full path."""
    for name in ['b0.txt', 'b/c.txt', 'a.txt', 'b/a/d.txt']:
        make_file(name, name)

    files = [p.as_posix() for p in iter_files(repo.work_tree, repo.work_tree)]
    assert files == ['a.txt', 'b/a/d.txt', 'b/c.txt', 'b0.txt']
