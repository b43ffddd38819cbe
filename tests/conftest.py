"""Shared pytest fixtures for Delta tests."""

import pytest
import tempfile
import shutil
from pathlib import Path
from delta.core.config import Config
from delta.core.repository import Repository


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch, tmp_path_factory):
    """Keep tests away from the user's global config and author variables."""
    home = tmp_path_factory.mktemp('home')
    monkeypatch.setattr(Config, 'GLOBAL_CONFIG_PATH', home / '.deltaconfig')
    monkeypatch.delenv('DELTA_AUTHOR_NAME', raising=False)
    monkeypatch.delenv('DELTA_AUTHOR_EMAIL', raising=False)
    monkeypatch.delenv('DELTA_USER_NAME', raising=False)
    monkeypatch.delenv('DELTA_USER_EMAIL', raising=False)
    return home


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    tmpdir = tempfile.mkdtemp()
    yield Path(tmpdir).resolve()
    shutil.rmtree(tmpdir, ignore_errors=True)


@pytest.fixture
def repo(temp_dir):
    """Create an initialized repository."""
    repo = Repository(str(temp_dir))
    repo.init()
    return repo


@pytest.fixture
def author_env(monkeypatch):
    """Author identity supplied through the environment."""
    monkeypatch.setenv('DELTA_AUTHOR_NAME', 'Test User')
    monkeypatch.setenv('DELTA_AUTHOR_EMAIL', 'test@example.com')
    return 'Test User <test@example.com>'


@pytest.fixture
def working_files(repo):
    """Create sample file structure in repository."""
    file1 = repo.work_tree / "test1.txt"
    file2 = repo.work_tree / "test2.txt"

    (repo.work_tree / "subdir").mkdir()
    file3 = repo.work_tree / "subdir" / "test3.txt"

    file1.write_text("Content 1\n")
    file2.write_text("Content 2\n")
    file3.write_text("Content 3\n")

    return {
        'file1': file1,
        'file2': file2,
        'file3': file3
    }


def write_file(repo, rel_path: str, content: str, executable: bool = False) -> Path:
    """Create a file in the work tree, making parent directories."""
    path = repo.work_tree / rel_path
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content)
    path.chmod(0o755 if executable else 0o644)
    return path


@pytest.fixture
def make_file(repo):
    """Factory fixture wrapping ``write_file`` for the ``repo`` fixture."""
    def _make(rel_path: str, content: str, executable: bool = False) -> Path:
        return write_file(repo, rel_path, content, executable)
    return _make


@pytest.fixture
def write_config():
    """Factory that appends an INI section to a config file."""
    def _write(path: Path, section: str, **values) -> None:
        lines = [f"[{section}]"] + [f"{key} = {value}" for key, value in values.items()]
        with open(path, 'a') as f:
            f.write('\n'.join(lines) + '\n')
    return _write
